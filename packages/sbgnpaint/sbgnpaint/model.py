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

"""Immutable diagram model: glyphs, arcs and the glyph arena."""

# Standard Library
import dataclasses

# local repo modules
from . import render_config


#============================================
class SbgnInputError(ValueError):
	"""Structural input error that aborts a whole render pass."""


#============================================
@dataclasses.dataclass(frozen=True)
class BBox:
	"""Axis-aligned box in absolute data-space units."""
	x: float
	y: float
	w: float
	h: float

	def center(self):
		return (self.x + self.w / 2.0, self.y + self.h / 2.0)


#============================================
@dataclasses.dataclass(frozen=True)
class Glyph:
	glyph_id: str
	class_name: str
	parent_id: str | None = None
	bbox: BBox | None = None
	label: str = ""
	ports: tuple[tuple[float, float], ...] = ()
	has_clone: bool = False
	state_value: str | None = None
	state_variable: str | None = None
	orientation: str | None = None

	@property
	def is_overlay_class(self):
		return self.class_name in render_config.OVERLAY_CLASS_NAMES

	def display_label(self):
		"""Return the label, synthesized from the state for state variables."""
		if self.class_name == "state variable" and not self.label.strip():
			return state_variable_label(self.state_value, self.state_variable)
		return self.label


#============================================
@dataclasses.dataclass(frozen=True)
class Arc:
	"""Connector polyline; direction runs from the first to the last point."""
	class_name: str
	points: tuple[tuple[float, float], ...]

	def __post_init__(self):
		if len(self.points) < 2:
			raise SbgnInputError(
				"Arc of class %r needs a start and an end point" % self.class_name
			)


#============================================
@dataclasses.dataclass(frozen=True)
class Bounds:
	min_x: float
	min_y: float
	max_x: float
	max_y: float

	def padded(self, padding):
		return Bounds(
			self.min_x - padding,
			self.min_y - padding,
			self.max_x + padding,
			self.max_y + padding,
		)

	@property
	def width(self):
		return abs(self.max_x - self.min_x)

	@property
	def height(self):
		return abs(self.max_y - self.min_y)


#============================================
@dataclasses.dataclass(frozen=True)
class Diagram:
	"""Glyph arena addressed by index plus the flat arc list.

	children maps a parent index to its child indices in document order;
	roots lists the indices of glyphs without a parent.
	"""
	glyphs: tuple[Glyph, ...]
	arcs: tuple[Arc, ...]
	children: dict
	roots: tuple[int, ...]
	bounds: Bounds

	@classmethod
	def build(cls, glyphs, arcs=()):
		"""Resolve parent ids into the index tables and compute bounds."""
		glyphs = tuple(glyphs)
		index_by_id = {}
		for index, glyph in enumerate(glyphs):
			index_by_id.setdefault(glyph.glyph_id, index)
		children = {}
		roots = []
		for index, glyph in enumerate(glyphs):
			if glyph.parent_id is None:
				roots.append(index)
				continue
			parent_index = index_by_id.get(glyph.parent_id)
			if parent_index is None:
				raise SbgnInputError(
					"Glyph %r references unknown parent %r" % (glyph.glyph_id, glyph.parent_id)
				)
			children.setdefault(parent_index, []).append(index)
		children = {key: tuple(value) for key, value in children.items()}
		return cls(
			glyphs=glyphs,
			arcs=tuple(arcs),
			children=children,
			roots=tuple(roots),
			bounds=compute_bounds(glyphs),
		)

	def children_of(self, index):
		return self.children.get(index, ())

	def boxed_overlay_indices(self):
		"""Indices of overlay glyphs that own a parent and an explicit bbox."""
		return tuple(
			index for index, glyph in enumerate(self.glyphs)
			if glyph.parent_id is not None and glyph.is_overlay_class and glyph.bbox is not None
		)


#============================================
def state_variable_label(value, variable):
	"""Format a state as value@variable, or whichever part is present."""
	if value and variable:
		return "%s@%s" % (value, variable)
	if value:
		return value
	if variable:
		return variable
	return ""


#============================================
def compute_bounds(glyphs):
	"""Union of glyph boxes and port points.

	Raises:
		SbgnInputError: If no glyph carries any coordinate.
	"""
	x_values = []
	y_values = []
	for glyph in glyphs:
		if glyph.bbox is not None:
			x_values.extend((glyph.bbox.x, glyph.bbox.x + glyph.bbox.w))
			y_values.extend((glyph.bbox.y, glyph.bbox.y + glyph.bbox.h))
		for x, y in glyph.ports:
			x_values.append(x)
			y_values.append(y)
	if not x_values:
		raise SbgnInputError("No coordinates found in diagram")
	return Bounds(min(x_values), min(y_values), max(x_values), max(y_values))
