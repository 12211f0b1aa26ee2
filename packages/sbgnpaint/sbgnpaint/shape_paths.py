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

"""Pure outline builders for glyph shapes.

Every builder takes a PixelRect and returns PathOp commands; nothing here
touches a drawing surface.
"""

# Standard Library
import math

# local repo modules
from . import transform as transform_module
from .glyph_classes import ShapeFamily


HALF_PI = math.pi / 2.0
FULL_TURN = 2.0 * math.pi


#============================================
def _polygon_commands(points):
	commands = [("M", points[0])]
	for point in points[1:]:
		commands.append(("L", point))
	commands.append(("Z", None))
	return tuple(commands)


#============================================
def quad_to_cubic(start, control, end):
	"""Return the cubic control points (c1, c2) of a quadratic segment."""
	c1 = (
		start[0] + 2.0 / 3.0 * (control[0] - start[0]),
		start[1] + 2.0 / 3.0 * (control[1] - start[1]),
	)
	c2 = (
		end[0] + 2.0 / 3.0 * (control[0] - end[0]),
		end[1] + 2.0 / 3.0 * (control[1] - end[1]),
	)
	return c1, c2


#============================================
def rect_commands(rect):
	return _polygon_commands((
		(rect.x0, rect.y0),
		(rect.x1, rect.y0),
		(rect.x1, rect.y1),
		(rect.x0, rect.y1),
	))


#============================================
def ellipse_commands(rect):
	cx, cy = rect.center
	radius_x = max(rect.width / 2.0, 1.0)
	radius_y = max(rect.height / 2.0, 1.0)
	return (("ELLIPSE", (cx, cy, radius_x, radius_y)),)


#============================================
def circle_commands(center, radius):
	return (
		("ARC", (center[0], center[1], radius, 0.0, FULL_TURN)),
		("Z", None),
	)


#============================================
def round_rect_commands(rect, radius):
	"""Rectangle with all four corners rounded.

	The radius is clamped to half of the smaller side.
	"""
	radius = min(radius, rect.width / 2.0, rect.height / 2.0)
	x = rect.x0
	y = rect.y0
	right = rect.x1
	bottom = rect.y1
	return (
		("M", (x + radius, y)),
		("L", (right - radius, y)),
		("ARC", (right - radius, y + radius, radius, -HALF_PI, 0.0)),
		("L", (right, bottom - radius)),
		("ARC", (right - radius, bottom - radius, radius, 0.0, HALF_PI)),
		("L", (x + radius, bottom)),
		("ARC", (x + radius, bottom - radius, radius, HALF_PI, math.pi)),
		("L", (x, y + radius)),
		("ARC", (x + radius, y + radius, radius, math.pi, 3.0 * HALF_PI)),
		("Z", None),
	)


#============================================
def round_bottom_rect_commands(rect, radius):
	radius = min(radius, rect.width / 2.0, rect.height / 2.0)
	x = rect.x0
	y = rect.y0
	right = rect.x1
	bottom = rect.y1
	return (
		("M", (x, y)),
		("L", (right, y)),
		("L", (right, bottom - radius)),
		("ARC", (right - radius, bottom - radius, radius, 0.0, HALF_PI)),
		("L", (x + radius, bottom)),
		("ARC", (x + radius, bottom - radius, radius, HALF_PI, math.pi)),
		("Z", None),
	)


#============================================
def stadium_commands(rect):
	radius = 0.24 * max(rect.width, rect.height)
	return round_rect_commands(rect, radius)


#============================================
def cut_rect_commands(rect, corner):
	x0, y0, x1, y1 = rect.x0, rect.y0, rect.x1, rect.y1
	return _polygon_commands((
		(x0, y0 + corner),
		(x0 + corner, y0),
		(x1 - corner, y0),
		(x1, y0 + corner),
		(x1, y1 - corner),
		(x1 - corner, y1),
		(x0 + corner, y1),
		(x0, y1 - corner),
	))


#============================================
def hexagon_commands(rect):
	x0, y0, w, h = rect.x0, rect.y0, rect.width, rect.height
	return _polygon_commands((
		(x0, y0 + 0.5 * h),
		(x0 + 0.25 * w, y0),
		(x0 + 0.75 * w, y0),
		(x0 + w, y0 + 0.5 * h),
		(x0 + 0.75 * w, y0 + h),
		(x0 + 0.25 * w, y0 + h),
	))


#============================================
def concave_hexagon_commands(rect):
	x0, y0, w, h = rect.x0, rect.y0, rect.width, rect.height
	return _polygon_commands((
		(x0, y0),
		(x0 + w, y0),
		(x0 + 0.85 * w, y0 + 0.5 * h),
		(x0 + w, y0 + h),
		(x0, y0 + h),
		(x0 + 0.15 * w, y0 + 0.5 * h),
	))


#============================================
def barrel_commands(rect):
	"""Compartment outline: straight sides joined by quadratic corners."""
	x, y, w, h = rect.x0, rect.y0, rect.width, rect.height
	top_y = y + 0.03 * h
	bottom_y = y + 0.97 * h
	commands = [("M", (x, top_y)), ("L", (x, bottom_y))]
	current = (x, bottom_y)
	# (control, end, following straight edge end)
	corners = (
		((x + 0.06 * w, y + h), (x + 0.25 * w, y + h), (x + 0.75 * w, y + h)),
		((x + 0.95 * w, y + h), (x + w, y + 0.95 * h), (x + w, y + 0.05 * h)),
		((x + w, y), (x + 0.75 * w, y), (x + 0.25 * w, y)),
		((x + 0.06 * w, y), (x, top_y), None),
	)
	for control, end, edge_end in corners:
		c1, c2 = quad_to_cubic(current, control, end)
		commands.append(("C", (c1[0], c1[1], c2[0], c2[1], end[0], end[1])))
		current = end
		if edge_end is not None:
			commands.append(("L", edge_end))
			current = edge_end
	commands.append(("Z", None))
	return tuple(commands)


#============================================
def tag_commands(rect, notch):
	mid_y = (rect.y0 + rect.y1) / 2.0
	return _polygon_commands((
		(rect.x0 + notch, rect.y0),
		(rect.x1, rect.y0),
		(rect.x1, rect.y1),
		(rect.x0 + notch, rect.y1),
		(rect.x0, mid_y),
	))


#============================================
def square_in_box(transform, bbox):
	"""Square of side min(w, h) centered on the box, mapped to pixels."""
	center = transform.map_point(bbox.x + bbox.w / 2.0, bbox.y + bbox.h / 2.0)
	side = min(abs(bbox.w), abs(bbox.h))
	half = abs(transform.map_size(side, side)[0]) / 2.0
	return transform_module.PixelRect.from_corners(
		center[0] - half, center[1] - half, center[0] + half, center[1] + half,
	)


#============================================
def outline_for(shape, rect):
	"""Return the closed outline of shape family for rect.

	Shape parameters (corner radii, notch depth) derive from rect itself,
	so a multimer ghost and its primary share one geometry.
	"""
	smaller = min(rect.width, rect.height)
	if shape in (ShapeFamily.RECT, ShapeFamily.SQUARE):
		return rect_commands(rect)
	if shape == ShapeFamily.ROUND_RECT:
		return round_rect_commands(rect, max(1.0, 0.1 * smaller))
	if shape == ShapeFamily.ROUND_BOTTOM_RECT:
		return round_bottom_rect_commands(rect, max(1.0, 0.3 * rect.height))
	if shape == ShapeFamily.CUT_RECT:
		return cut_rect_commands(rect, max(1.0, 0.2 * smaller))
	if shape == ShapeFamily.STADIUM:
		return stadium_commands(rect)
	if shape in (ShapeFamily.ELLIPSE, ShapeFamily.FILLED_ELLIPSE, ShapeFamily.SOURCE_SINK):
		return ellipse_commands(rect)
	if shape == ShapeFamily.HEXAGON:
		return hexagon_commands(rect)
	if shape == ShapeFamily.CONCAVE_HEXAGON:
		return concave_hexagon_commands(rect)
	if shape == ShapeFamily.BARREL:
		return barrel_commands(rect)
	if shape == ShapeFamily.TAG:
		return tag_commands(rect, max(2.0, 0.3 * rect.height))
	if shape == ShapeFamily.DOUBLE_CIRCLE:
		return circle_commands(rect.center, max(1.0, smaller / 2.0))
	if shape == ShapeFamily.CIRCLE:
		return circle_commands(rect.center, smaller / 2.0)
	raise ValueError("No outline for shape family %r" % (shape,))
