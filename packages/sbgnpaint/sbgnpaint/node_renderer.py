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

"""Glyph rendering: shapes, ghosts, clone markers, labels and ticks.

Drawing order inside one glyph is ghost, shape (with clone marker),
centered label, overlays, orientation ticks, bottom label, then the
structural children in document order.
"""

# Standard Library
import dataclasses

# local repo modules
from . import glyph_classes
from . import overlay
from . import render_ops
from . import shape_paths
from . import text_layout
from .glyph_classes import ShapeFamily
from .transform import PixelRect
from .transform import bbox_pixel_rect


MIN_BORDER_WIDTH = 0.5
INNER_CIRCLE_RATIO = 0.6


#============================================
@dataclasses.dataclass(frozen=True)
class RenderContext:
	"""Read-only state shared by every draw of one render pass."""
	diagram: object
	transform: object
	style: dict
	measurer: object

	@property
	def clone_markers(self):
		return bool(self.style["clone_markers"])


#============================================
def glyph_label(glyph, glyph_style):
	if glyph_style.label_override is not None:
		return glyph_style.label_override
	return glyph.display_label()


#============================================
def overlay_labels_for(diagram, index):
	"""Collect the overlay labels a glyph shows from its children.

	Only the first child of each overlay class counts, and none counts
	when any child of that class carries its own bounding box.
	"""
	children = [diagram.glyphs[child] for child in diagram.children_of(index)]
	return overlay.OverlayLabels(
		unit=_first_overlay_label(children, "unit of information"),
		state=_first_overlay_label(children, "state variable"),
	)


#============================================
def _first_overlay_label(children, class_name):
	matching = [child for child in children if child.class_name == class_name]
	if not matching:
		return None
	if any(child.bbox is not None for child in matching):
		return None
	label = matching[0].display_label()
	if not label.strip():
		return None
	return label


#============================================
def clone_marker_ops(commands, rect, border_width, style):
	"""Shaded band over the bottom of the shape, then the outline again."""
	marker_height = max(rect.height * style["clone_marker_height_ratio"], 1.0)
	band = shape_paths.rect_commands(
		PixelRect(rect.x0, rect.y1 - marker_height, rect.width, marker_height)
	)
	band_op = render_ops.PathOp(
		commands=band,
		fill=style["clone_marker_fill_color"],
		stroke=style["aux_line_color"],
		stroke_width=max(style["clone_marker_stroke_width"], 1.0),
		cap=style["line_cap"],
	)
	return [
		render_ops.ClipOp(clip_commands=commands, ops=(band_op,)),
		render_ops.PathOp(
			commands=commands,
			fill=None,
			stroke=style["border_color"],
			stroke_width=border_width,
			cap=style["line_cap"],
		),
	]


#============================================
def shape_ops(commands, rect, fill, border_width, clone, style):
	border_width = max(border_width, MIN_BORDER_WIDTH)
	ops = [render_ops.PathOp(
		commands=commands,
		fill=fill,
		stroke=style["border_color"],
		stroke_width=border_width,
		cap=style["line_cap"],
	)]
	if clone:
		ops.extend(clone_marker_ops(commands, rect, border_width, style))
	return ops


#============================================
def orientation_ops(rect, orientation, length, style):
	"""Tick marks leaving the shape along its orientation axis."""
	cx, cy = rect.center
	left = ((rect.x0 - length, cy), (rect.x0, cy))
	right = ((rect.x1, cy), (rect.x1 + length, cy))
	up = ((cx, rect.y0 - length), (cx, rect.y0))
	down = ((cx, rect.y1), (cx, rect.y1 + length))
	segments = {
		"horizontal": (left, right),
		"vertical": (up, down),
		"left": (left,),
		"right": (right,),
		"up": (up,),
		"down": (down,),
	}.get(orientation, ())
	return [
		render_ops.LineOp(
			p1, p2,
			width=style["line_width"],
			cap=style["line_cap"],
			color=style["border_color"],
		)
		for p1, p2 in segments
	]


#============================================
def _centered_label(context, text, center, font_size):
	return text_layout.centered_text_ops(context.measurer, text, center, font_size, context.style)


#============================================
def _entity_shape_ops(context, resolved, rect, label, font_size, clone):
	"""Generic family: optional ghost, shape with clone marker, label."""
	glyph_style = resolved.style
	style = context.style
	fill = style[glyph_style.fill_key]
	border_width = glyph_classes.border_width_for(glyph_style, style)
	ops = []
	if resolved.is_multimer and glyph_style.ghost_offset is not None:
		scale_x, scale_y = overlay.reference_scale(glyph_style, rect)
		ghost_rect = rect.offset(
			glyph_style.ghost_offset[0] * scale_x,
			glyph_style.ghost_offset[1] * scale_y,
		)
		ghost = shape_paths.outline_for(glyph_style.shape, ghost_rect)
		ops.extend(shape_ops(ghost, ghost_rect, fill, border_width, False, style))
	commands = shape_paths.outline_for(glyph_style.shape, rect)
	ops.extend(shape_ops(commands, rect, fill, border_width, clone, style))
	ops.extend(_centered_label(context, label, rect.center, font_size))
	return ops


#============================================
def _glyph_shape_ops(context, glyph, resolved, rect, label, font_size, clone):
	glyph_style = resolved.style
	style = context.style
	shape = glyph_style.shape
	if shape == ShapeFamily.SOURCE_SINK:
		commands = shape_paths.outline_for(shape, rect)
		ops = shape_ops(commands, rect, style["fill_color"], style["line_width"], clone, style)
		ops.append(render_ops.LineOp(
			(rect.x0, rect.y1), (rect.x1, rect.y0),
			width=style["line_width"],
			cap=style["line_cap"],
			color=style["border_color"],
		))
		return ops
	if shape == ShapeFamily.FILLED_ELLIPSE:
		commands = shape_paths.outline_for(shape, rect)
		ops = shape_ops(commands, rect, style[glyph_style.fill_key], style["line_width"], False, style)
		ops.extend(_centered_label(context, label, rect.center, font_size))
		return ops
	if shape == ShapeFamily.DOUBLE_CIRCLE:
		radius = max(min(rect.width, rect.height) / 2.0, 1.0)
		inner = shape_paths.circle_commands(rect.center, max(radius * INNER_CIRCLE_RATIO, 1.0))
		ops = shape_ops(
			shape_paths.outline_for(shape, rect), rect, style["fill_color"], style["line_width"], False, style,
		)
		ops.extend(shape_ops(inner, rect, None, style["line_width"], False, style))
		ops.extend(_centered_label(context, label, rect.center, font_size))
		return ops
	if shape == ShapeFamily.SQUARE:
		square = shape_paths.square_in_box(context.transform, glyph.bbox)
		ops = shape_ops(
			shape_paths.rect_commands(square), square, style["fill_color"], style["line_width"], False, style,
		)
		ops.extend(_centered_label(context, label, square.center, font_size))
		return ops
	if shape == ShapeFamily.CIRCLE:
		bbox = glyph.bbox
		center = context.transform.map_point(*bbox.center())
		radius = context.transform.scale_scalar(min(bbox.w, bbox.h) / 2.0)
		ops = shape_ops(
			shape_paths.circle_commands(center, radius), rect, style["fill_color"], style["line_width"], False, style,
		)
		ops.extend(_centered_label(context, label, center, font_size))
		return ops
	return _entity_shape_ops(context, resolved, rect, label, font_size, clone)


#============================================
def glyph_ops(context, index):
	"""Ops for the glyph at index and its structural subtree.

	Glyphs without a bounding box draw nothing, and neither do their
	children.
	"""
	diagram = context.diagram
	glyph = diagram.glyphs[index]
	if glyph.bbox is None:
		return []
	style = context.style
	resolved = glyph_classes.resolve_glyph_class(glyph.class_name)
	glyph_style = resolved.style
	rect = bbox_pixel_rect(context.transform, glyph.bbox)
	label = glyph_label(glyph, glyph_style)
	font_size = glyph_classes.font_size_for(glyph_style, style)
	clone = context.clone_markers and glyph.has_clone and glyph_style.clone_marker
	shape_label = "" if glyph_style.label_bottom else label

	ops = _glyph_shape_ops(context, glyph, resolved, rect, shape_label, font_size, clone)
	if resolved.glyph_class in overlay.OVERLAY_LAYOUTS:
		ops.extend(overlay.overlay_ops(
			resolved.glyph_class, rect, overlay_labels_for(diagram, index), context.measurer, style,
		))
	orientation = glyph.orientation or glyph_style.default_orientation
	if orientation:
		length = context.transform.scale_scalar(glyph_classes.connector_length_for(glyph_style, style))
		ops.extend(orientation_ops(rect, orientation, length, style))
	if glyph_style.label_bottom:
		ops.extend(text_layout.bottom_centered_text_ops(context.measurer, label, rect, font_size, style))
	for child in diagram.children_of(index):
		if diagram.glyphs[child].is_overlay_class:
			continue
		ops.extend(glyph_ops(context, child))
	return ops


#============================================
def boxed_overlay_ops(context, index):
	"""Ops for an overlay glyph drawn at its own absolute bounding box."""
	glyph = context.diagram.glyphs[index]
	glyph_class = glyph_classes.GLYPH_CLASSES_BY_NAME[glyph.class_name]
	glyph_style = glyph_class.style
	style = context.style
	rect = bbox_pixel_rect(context.transform, glyph.bbox)
	clone = context.clone_markers and glyph.has_clone
	commands = shape_paths.outline_for(glyph_style.shape, rect)
	ops = shape_ops(commands, rect, style["fill_color"], style["line_width"], clone, style)
	font_size = glyph_classes.font_size_for(glyph_style, style)
	ops.extend(_centered_label(context, glyph.display_label(), rect.center, font_size))
	return ops


#============================================
def diagram_glyph_ops(context):
	"""Root glyph trees first, then the absolute pass for boxed overlays."""
	ops = []
	for index in context.diagram.roots:
		ops.extend(glyph_ops(context, index))
	for index in context.diagram.boxed_overlay_indices():
		ops.extend(boxed_overlay_ops(context, index))
	return ops

