#--------------------------------------------------------------------------
#     This file is part of sbgnpaint - an SBGN-ML diagram renderer
#     Copyright (C) 2026 the sbgnpaint authors
#
#     This program is free software; you can redistribute it and/or modify
#     it under the terms of the GNU General Public License as published by
#     the Free Software Foundation; either version 2 of the License, or
#     (at your option) any later version.
#
#     This program is distributed in the hope that it will be useful,
#     but WITHOUT ANY WARRANTY; without even the implied warranty of
#     MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
#     GNU General Public License for more details.
#
#     Complete text of GNU GPL can be found in the file LICENSE in the
#     main directory of the program
#
#--------------------------------------------------------------------------

"""Unit-of-information and state-variable overlays on entity pools.

Overlay geometry is tabulated in the reference units of the parent class
and scaled onto the parent's actual pixel rectangle. The tables are pure
data; overlay_ops() is the only function that emits drawing ops.
"""

# Standard Library
import dataclasses

# local repo modules
from . import render_ops
from . import shape_paths
from . import text_layout
from .glyph_classes import GlyphClass
from .transform import PixelRect


# presence conditions for separator lines
WHEN_UNIT = "unit"
WHEN_ANY = "any"


#============================================
@dataclasses.dataclass(frozen=True)
class SeparatorLine:
	"""Full-width horizontal line at reference offset y."""
	y: float
	when: str
	width: float = 1.0
	color_key: str = "aux_line_color"


#============================================
@dataclasses.dataclass(frozen=True)
class OverlayAnchor:
	"""Top-left corner of an overlay box.

	With fraction set, x is a fraction of the parent pixel width rather
	than a reference offset.
	"""
	x: float
	y: float = 0.0
	fraction: bool = False

	def resolve(self, rect, scale_x, scale_y):
		if self.fraction:
			x = rect.x0 + rect.width * self.x
		else:
			x = rect.x0 + self.x * scale_x
		return (x, rect.y0 + self.y * scale_y)


#============================================
@dataclasses.dataclass(frozen=True)
class OverlayLayout:
	lines: tuple[SeparatorLine, ...]
	unit_anchor: OverlayAnchor | None
	state_anchor: OverlayAnchor | None
	item_height: float = 20.0


_POOL_LAYOUT = OverlayLayout(
	lines=(SeparatorLine(8.0, WHEN_ANY), SeparatorLine(52.0, WHEN_UNIT)),
	unit_anchor=OverlayAnchor(20.0, 44.0),
	state_anchor=OverlayAnchor(40.0),
)

OVERLAY_LAYOUTS = {
	GlyphClass.SIMPLE_CHEMICAL: OverlayLayout(
		lines=(SeparatorLine(8.0, WHEN_UNIT), SeparatorLine(52.0, WHEN_UNIT)),
		unit_anchor=OverlayAnchor(12.0),
		state_anchor=None,
	),
	GlyphClass.UNSPECIFIED_ENTITY: _POOL_LAYOUT,
	GlyphClass.MACROMOLECULE: _POOL_LAYOUT,
	GlyphClass.NUCLEIC_ACID_FEATURE: _POOL_LAYOUT,
	GlyphClass.PERTURBING_AGENT: OverlayLayout(
		lines=(SeparatorLine(8.0, WHEN_UNIT), SeparatorLine(56.0, WHEN_UNIT)),
		unit_anchor=OverlayAnchor(20.0),
		state_anchor=None,
	),
	GlyphClass.COMPLEX: OverlayLayout(
		lines=(SeparatorLine(11.0, WHEN_ANY, width=6.0, color_key="border_color"),),
		unit_anchor=OverlayAnchor(0.25, fraction=True),
		state_anchor=OverlayAnchor(0.88, fraction=True),
		item_height=24.0,
	),
}

UNIT_PADDING = 5.0
UNIT_MIN_WIDTH = 10.0
UNIT_RADIUS_RATIO = 0.04
STATE_PADDING = 10.0
STATE_MIN_WIDTH = 30.0
ITEM_SHRINK = 3.0
BOX_BORDER = 2.0
OVERLAY_FONT = 10.0


#============================================
@dataclasses.dataclass(frozen=True)
class OverlayLabels:
	"""Labels of the first overlay children; None means absent."""
	unit: str | None = None
	state: str | None = None


#============================================
def reference_scale(glyph_style, rect):
	"""Return (scale_x, scale_y) of rect against the class reference size.

	Classes without a reference size scale by 1.
	"""
	if glyph_style.reference_size is None:
		return (1.0, 1.0)
	ref_w, ref_h = glyph_style.reference_size
	return (rect.width / ref_w, rect.height / ref_h)


#============================================
def _present(label):
	if label is None or not label.strip():
		return None
	return label


#============================================
def effective_labels(glyph_class, labels):
	"""Drop labels the class cannot show, and blank ones."""
	layout = OVERLAY_LAYOUTS.get(glyph_class)
	if layout is None:
		return OverlayLabels()
	unit = _present(labels.unit) if layout.unit_anchor else None
	state = _present(labels.state) if layout.state_anchor else None
	return OverlayLabels(unit=unit, state=state)


#============================================
def separator_lines_drawn(glyph_class, labels):
	"""Return the SeparatorLine entries drawn for glyph_class and labels."""
	layout = OVERLAY_LAYOUTS.get(glyph_class)
	if layout is None:
		return ()
	labels = effective_labels(glyph_class, labels)
	drawn = []
	for line in layout.lines:
		if line.when == WHEN_UNIT and labels.unit is not None:
			drawn.append(line)
		elif line.when == WHEN_ANY and (labels.unit is not None or labels.state is not None):
			drawn.append(line)
	return tuple(drawn)


#============================================
def _overlay_box_ops(commands_for, anchor, height, label, padding, min_width, scale, measurer, style):
	font_size = OVERLAY_FONT * scale
	text_width = text_layout.measure_width(measurer, label, font_size, style["font_name"])
	width = max(text_width + padding, min_width)
	box = PixelRect(anchor[0], anchor[1], width, height)
	ops = [render_ops.PathOp(
		commands=commands_for(box),
		fill=style["overlay_fill_color"],
		stroke=style["border_color"],
		stroke_width=max(BOX_BORDER * scale, 1.0),
		cap=style["line_cap"],
	)]
	ops.extend(text_layout.centered_text_ops(measurer, label, box.center, font_size, style))
	return ops


#============================================
def overlay_ops(glyph_class, rect, labels, measurer, style):
	"""Ops for the separator lines and overlay boxes of one parent glyph.

	Args:
		glyph_class: GlyphClass of the parent (multimer suffix already stripped).
		rect: Parent PixelRect.
		labels: OverlayLabels gathered from the parent's children.
		measurer: Text measurer used to size the boxes.
		style: Resolved style dictionary.

	Returns:
		list: Render ops in drawing order (lines, unit box, state box).
	"""
	layout = OVERLAY_LAYOUTS.get(glyph_class)
	if layout is None:
		return []
	labels = effective_labels(glyph_class, labels)
	scale_x, scale_y = reference_scale(glyph_class.style, rect)
	scale = (scale_x + scale_y) / 2.0
	ops = []
	for line in separator_lines_drawn(glyph_class, labels):
		y = rect.y0 + line.y * scale_y
		ops.append(render_ops.LineOp(
			(rect.x0, y), (rect.x1, y),
			width=max(line.width * scale, 1.0),
			cap=style["line_cap"],
			color=style[line.color_key],
		))
	height = layout.item_height * scale_y - ITEM_SHRINK * scale_y
	if labels.unit is not None:
		anchor = layout.unit_anchor.resolve(rect, scale_x, scale_y)
		ops.extend(_overlay_box_ops(
			lambda box: shape_paths.round_rect_commands(box, box.width * UNIT_RADIUS_RATIO),
			anchor, height, labels.unit, UNIT_PADDING * scale, UNIT_MIN_WIDTH,
			scale, measurer, style,
		))
	if labels.state is not None:
		anchor = layout.state_anchor.resolve(rect, scale_x, scale_y)
		ops.extend(_overlay_box_ops(
			shape_paths.stadium_commands,
			anchor, height, labels.state, STATE_PADDING * scale, STATE_MIN_WIDTH * scale,
			scale, measurer, style,
		))
	return ops
