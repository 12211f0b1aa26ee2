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

"""Arc polylines and their terminal decorations."""

# Standard Library
import dataclasses
import enum
import math

# local repo modules
from . import render_ops
from . import shape_paths


#============================================
class Decoration(enum.Enum):
	NONE = "none"
	OPEN_TRIANGLE = "open_triangle"
	OPAQUE_TRIANGLE = "opaque_triangle"
	FILLED_TRIANGLE = "filled_triangle"
	BAR = "bar"
	DOUBLE_BAR = "double_bar"
	BAR_AND_OPAQUE_TRIANGLE = "bar_and_opaque_triangle"
	CATALYSIS_CIRCLE = "catalysis_circle"
	OPEN_CIRCLE = "open_circle"


ARC_DECORATIONS = {
	"assignment": Decoration.OPEN_TRIANGLE,
	"unknown influence": Decoration.OPEN_TRIANGLE,
	"positive influence": Decoration.OPAQUE_TRIANGLE,
	"stimulation": Decoration.OPAQUE_TRIANGLE,
	"production": Decoration.FILLED_TRIANGLE,
	"negative influence": Decoration.BAR,
	"inhibition": Decoration.BAR,
	"absolute inhibition": Decoration.DOUBLE_BAR,
	"necessary stimulation": Decoration.BAR_AND_OPAQUE_TRIANGLE,
	"catalysis": Decoration.CATALYSIS_CIRCLE,
	"equivalence arc": Decoration.OPEN_CIRCLE,
}


#============================================
def decoration_for(class_name):
	return ARC_DECORATIONS.get(class_name, Decoration.NONE)


#============================================
@dataclasses.dataclass(frozen=True)
class ArcMetrics:
	"""Pixel sizes of arc decorations for one render pass."""
	arrow_size: float
	bar_length: float
	bar_offset: float
	circle_radius: float
	overlap_ratio: float
	line_width: float

	@classmethod
	def from_transform(cls, transform, style):
		arrow_size = transform.scale_scalar(style["arrow_size"] * style["arrow_scale"])
		return cls(
			arrow_size=arrow_size,
			bar_length=transform.scale_scalar(style["bar_length"] * style["arrow_scale"]),
			bar_offset=transform.scale_scalar(style["bar_offset"] * style["arrow_scale"]),
			circle_radius=max(arrow_size * style["catalysis_radius_ratio"], 1.0),
			overlap_ratio=style["catalysis_overlap_ratio"],
			line_width=style["line_width"],
		)


#============================================
def unit_direction(prev, end):
	"""Unit vector from prev to end, or None when the points coincide."""
	dx = end[0] - prev[0]
	dy = end[1] - prev[1]
	length = math.hypot(dx, dy)
	if length == 0:
		return None
	return (dx / length, dy / length)


#============================================
def triangle_points(end, direction, size):
	"""Return (base_left, base_right, tip) of an arrowhead with tip at end."""
	ux, uy = direction
	base_x = end[0] - ux * size
	base_y = end[1] - uy * size
	half_width = size * 0.6
	p1 = (base_x - uy * half_width, base_y + ux * half_width)
	p2 = (base_x + uy * half_width, base_y - ux * half_width)
	return (p1, p2, end)


#============================================
def bar_points(end, direction, length, offset):
	"""Endpoints of a bar perpendicular to direction, offset back from end."""
	ux, uy = direction
	center_x = end[0] - ux * offset
	center_y = end[1] - uy * offset
	half_len = length / 2.0
	return (
		(center_x + uy * half_len, center_y - ux * half_len),
		(center_x - uy * half_len, center_y + ux * half_len),
	)


#============================================
def catalysis_center(end, direction, radius, overlap_ratio):
	offset = max(radius - max(radius * overlap_ratio, 0.0), 0.0)
	return (end[0] - direction[0] * offset, end[1] - direction[1] * offset)


#============================================
def _triangle_op(points, fill, stroke, metrics):
	return render_ops.PolygonOp(
		points=points,
		fill=fill,
		stroke=stroke,
		stroke_width=metrics.line_width,
	)


#============================================
def _bar_op(end, direction, offset, metrics, style):
	p1, p2 = bar_points(end, direction, metrics.bar_length, offset)
	return render_ops.LineOp(
		p1, p2, width=metrics.line_width, cap=style["line_cap"], color=style["border_color"],
	)


#============================================
def _circle_op(center, fill, metrics, style):
	return render_ops.PathOp(
		commands=shape_paths.circle_commands(center, metrics.circle_radius),
		fill=fill,
		stroke=style["border_color"],
		stroke_width=metrics.line_width,
	)


#============================================
def decoration_ops(decoration, end, direction, metrics, style):
	"""Ops for one terminal decoration anchored at end."""
	border = style["border_color"]
	opaque = style["background_color"]
	if decoration == Decoration.OPEN_TRIANGLE:
		points = triangle_points(end, direction, metrics.arrow_size)
		return [_triangle_op(points, None, border, metrics)]
	if decoration == Decoration.OPAQUE_TRIANGLE:
		points = triangle_points(end, direction, metrics.arrow_size)
		return [_triangle_op(points, opaque, border, metrics)]
	if decoration == Decoration.FILLED_TRIANGLE:
		points = triangle_points(end, direction, metrics.arrow_size)
		return [_triangle_op(points, border, None, metrics)]
	if decoration == Decoration.BAR:
		return [_bar_op(end, direction, 0.0, metrics, style)]
	if decoration == Decoration.DOUBLE_BAR:
		return [
			_bar_op(end, direction, 0.0, metrics, style),
			_bar_op(end, direction, metrics.bar_offset, metrics, style),
		]
	if decoration == Decoration.BAR_AND_OPAQUE_TRIANGLE:
		points = triangle_points(end, direction, metrics.arrow_size)
		return [
			_bar_op(end, direction, metrics.bar_offset, metrics, style),
			_triangle_op(points, opaque, border, metrics),
		]
	if decoration == Decoration.CATALYSIS_CIRCLE:
		center = catalysis_center(end, direction, metrics.circle_radius, metrics.overlap_ratio)
		return [_circle_op(center, opaque, metrics, style)]
	if decoration == Decoration.OPEN_CIRCLE:
		return [_circle_op(end, None, metrics, style)]
	return []


#============================================
def build_arc_ops(points, class_name, metrics, style):
	"""Ops for an arc given in pixel space.

	One LineOp per segment, then the class decoration at the last point.
	A zero-length final segment leaves the arc undecorated.
	"""
	ops = []
	for start, end in zip(points, points[1:]):
		ops.append(render_ops.LineOp(
			start, end,
			width=metrics.line_width,
			cap=style["line_cap"],
			color=style["border_color"],
		))
	if len(points) < 2:
		return ops
	direction = unit_direction(points[-2], points[-1])
	if direction is None:
		return ops
	ops.extend(decoration_ops(decoration_for(class_name), points[-1], direction, metrics, style))
	return ops


#============================================
def arc_ops(arc, transform, metrics, style):
	points = [transform.map_point(x, y) for x, y in arc.points]
	return build_arc_ops(points, arc.class_name, metrics, style)
