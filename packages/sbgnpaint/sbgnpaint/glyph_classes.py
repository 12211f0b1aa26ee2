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

"""Declarative style table for every glyph class of the notation.

Each GlyphClass member carries its drawing policy as static data, so the
node renderer never re-derives styling from class-name strings.
"""

# Standard Library
import dataclasses
import enum

# local repo modules
from . import render_config


#============================================
class ShapeFamily(enum.Enum):
	RECT = "rect"
	ROUND_RECT = "round_rect"
	ROUND_BOTTOM_RECT = "round_bottom_rect"
	CUT_RECT = "cut_rect"
	STADIUM = "stadium"
	ELLIPSE = "ellipse"
	HEXAGON = "hexagon"
	CONCAVE_HEXAGON = "concave_hexagon"
	BARREL = "barrel"
	TAG = "tag"
	SOURCE_SINK = "source_sink"
	FILLED_ELLIPSE = "filled_ellipse"
	DOUBLE_CIRCLE = "double_circle"
	SQUARE = "square"
	CIRCLE = "circle"


#============================================
@dataclasses.dataclass(frozen=True)
class GlyphStyle:
	"""Static drawing policy of one glyph class.

	border_width of None means the style's default line width.
	fill_key names the style dictionary entry used as fill colour.
	"""
	name: str
	shape: ShapeFamily
	entity_pool: bool = False
	reference_size: tuple[float, float] | None = None
	border_width: float | None = None
	ghost_offset: tuple[float, float] | None = None
	fill_key: str = "fill_color"
	label_override: str | None = None
	label_bottom: bool = False
	small_font: bool = False
	default_orientation: str | None = None
	logical_connector: bool = False
	clone_marker: bool = False
	accepts_state_variable: bool = False


#============================================
class GlyphClass(enum.Enum):
	UNSPECIFIED_ENTITY = GlyphStyle(
		"unspecified entity", ShapeFamily.ELLIPSE, entity_pool=True,
		reference_size=(32.0, 32.0), border_width=2.0, clone_marker=True,
		accepts_state_variable=True,
	)
	SIMPLE_CHEMICAL = GlyphStyle(
		"simple chemical", ShapeFamily.ELLIPSE, entity_pool=True,
		reference_size=(48.0, 48.0), border_width=2.0, ghost_offset=(5.0, 5.0),
		clone_marker=True,
	)
	MACROMOLECULE = GlyphStyle(
		"macromolecule", ShapeFamily.ROUND_RECT, entity_pool=True,
		reference_size=(96.0, 48.0), border_width=2.0, ghost_offset=(12.0, 12.0),
		clone_marker=True, accepts_state_variable=True,
	)
	NUCLEIC_ACID_FEATURE = GlyphStyle(
		"nucleic acid feature", ShapeFamily.ROUND_BOTTOM_RECT, entity_pool=True,
		reference_size=(88.0, 56.0), border_width=2.0, ghost_offset=(12.0, 12.0),
		clone_marker=True, accepts_state_variable=True,
	)
	COMPLEX = GlyphStyle(
		"complex", ShapeFamily.CUT_RECT, entity_pool=True,
		reference_size=(10.0, 10.0), border_width=4.0, ghost_offset=(16.0, 16.0),
		label_bottom=True, clone_marker=True, accepts_state_variable=True,
	)
	PERTURBING_AGENT = GlyphStyle(
		"perturbing agent", ShapeFamily.CONCAVE_HEXAGON, entity_pool=True,
		reference_size=(140.0, 60.0), border_width=2.0, clone_marker=True,
	)
	SOURCE_AND_SINK = GlyphStyle(
		"source and sink", ShapeFamily.SOURCE_SINK,
		reference_size=(60.0, 60.0), clone_marker=True,
	)
	PHENOTYPE = GlyphStyle(
		"phenotype", ShapeFamily.HEXAGON, reference_size=(140.0, 60.0),
	)
	OUTCOME = GlyphStyle("outcome", ShapeFamily.HEXAGON)
	COMPARTMENT = GlyphStyle(
		"compartment", ShapeFamily.BARREL, reference_size=(50.0, 50.0),
		border_width=4.0, label_bottom=True, clone_marker=True,
	)
	TAG = GlyphStyle(
		"tag", ShapeFamily.TAG, reference_size=(100.0, 65.0),
		small_font=True, clone_marker=True,
	)
	PROCESS = GlyphStyle(
		"process", ShapeFamily.SQUARE, reference_size=(25.0, 25.0),
		default_orientation="horizontal",
	)
	OMITTED_PROCESS = GlyphStyle(
		"omitted process", ShapeFamily.SQUARE, reference_size=(25.0, 25.0),
		label_override="\\\\", default_orientation="horizontal",
	)
	UNCERTAIN_PROCESS = GlyphStyle(
		"uncertain process", ShapeFamily.SQUARE, reference_size=(25.0, 25.0),
		label_override="?", default_orientation="horizontal",
	)
	ASSOCIATION = GlyphStyle(
		"association", ShapeFamily.FILLED_ELLIPSE, reference_size=(25.0, 25.0),
		fill_key="association_fill_color", default_orientation="horizontal",
	)
	DISSOCIATION = GlyphStyle(
		"dissociation", ShapeFamily.DOUBLE_CIRCLE, reference_size=(25.0, 25.0),
		default_orientation="horizontal",
	)
	UNIT_OF_INFORMATION = GlyphStyle(
		"unit of information", ShapeFamily.ROUND_RECT, small_font=True,
	)
	STATE_VARIABLE = GlyphStyle(
		"state variable", ShapeFamily.STADIUM, small_font=True,
	)
	AND = GlyphStyle(
		"and", ShapeFamily.CIRCLE, reference_size=(40.0, 40.0),
		label_override="AND", logical_connector=True,
	)
	OR = GlyphStyle(
		"or", ShapeFamily.CIRCLE, reference_size=(40.0, 40.0),
		label_override="OR", logical_connector=True,
	)
	NOT = GlyphStyle(
		"not", ShapeFamily.CIRCLE, reference_size=(40.0, 40.0),
		label_override="NOT", logical_connector=True,
	)
	CARDINALITY = GlyphStyle("cardinality", ShapeFamily.RECT, small_font=True)
	VARIABLE_VALUE = GlyphStyle("variable value", ShapeFamily.RECT, small_font=True)
	TERMINAL = GlyphStyle("terminal", ShapeFamily.RECT, small_font=True)

	@property
	def style(self):
		return self.value


GLYPH_CLASSES_BY_NAME = {member.value.name: member for member in GlyphClass}

# unrecognized classes draw as a plain filled rectangle
FALLBACK_STYLE = GlyphStyle("", ShapeFamily.RECT)


#============================================
@dataclasses.dataclass(frozen=True)
class ResolvedClass:
	"""Outcome of looking up one raw class name."""
	class_name: str
	glyph_class: GlyphClass | None
	is_multimer: bool

	@property
	def style(self):
		if self.glyph_class is None:
			return FALLBACK_STYLE
		return self.glyph_class.style


#============================================
def resolve_glyph_class(class_name):
	"""Strip a multimer suffix and look up the base class."""
	base_name = class_name
	is_multimer = False
	if class_name.endswith(render_config.MULTIMER_SUFFIX):
		base_name = class_name[:-len(render_config.MULTIMER_SUFFIX)]
		is_multimer = True
	return ResolvedClass(
		class_name=class_name,
		glyph_class=GLYPH_CLASSES_BY_NAME.get(base_name),
		is_multimer=is_multimer,
	)


#============================================
def font_size_for(glyph_style, style):
	if glyph_style.small_font:
		return style["small_font_size"]
	return style["font_size"]


#============================================
def border_width_for(glyph_style, style):
	if glyph_style.border_width is None:
		return style["line_width"]
	return glyph_style.border_width


#============================================
def connector_length_for(glyph_style, style):
	"""Unscaled length of orientation tick marks."""
	if glyph_style.logical_connector:
		return style["logical_port_connector_length"]
	return style["port_connector_length"]
