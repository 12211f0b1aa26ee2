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

"""Render ops for shared Cairo/SVG drawing."""

# Standard Library
import dataclasses
import json
import math

# local repo modules
from . import dom_extensions


FULL_TURN = 2 * math.pi
_CAIRO_CAPS = {"butt": 0, "round": 1, "square": 2}
_CAIRO_JOINS = {"miter": 0, "round": 1, "bevel": 2}


#============================================
@dataclasses.dataclass(frozen=True)
class LineOp:
	p1: tuple[float, float]
	p2: tuple[float, float]
	width: float
	cap: str = "butt"
	join: str = ""
	color: object | None = None
	z: int = 0
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class PolygonOp:
	points: tuple[tuple[float, float], ...]
	fill: object | None
	stroke: object | None = None
	stroke_width: float = 0.0
	z: int = 0
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class PathOp:
	"""Path built from M, L, C, ARC, ELLIPSE and Z commands.

	ARC payload is (cx, cy, r, angle1, angle2) and ELLIPSE payload is
	(cx, cy, rx, ry); ELLIPSE always forms its own closed subpath.
	"""
	commands: tuple[tuple[str, tuple[float, ...] | None], ...]
	fill: object | None
	stroke: object | None = None
	stroke_width: float = 0.0
	cap: str = ""
	join: str = ""
	z: int = 0
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class TextOp:
	"""One line of text; (x, y) is the left end of the baseline."""
	x: float
	y: float
	text: str
	font_size: float
	font_name: str = "sans-serif"
	color: object | None = "#000"
	outline_color: object | None = None
	outline_width: float = 0.0
	z: int = 0
	op_id: str | None = None


#============================================
@dataclasses.dataclass(frozen=True)
class ClipOp:
	"""Replay ops clipped to the closed path given by clip_commands."""
	clip_commands: tuple[tuple[str, tuple[float, ...] | None], ...]
	ops: tuple
	z: int = 0
	op_id: str | None = None


#============================================
def _normalize_hex_color(text):
	if text.lower() == "none":
		return "none"
	if not text.startswith("#"):
		return text
	value = text[1:]
	if len(value) == 3:
		value = "".join(ch * 2 for ch in value)
	if len(value) != 6:
		return text
	return "#" + value.lower()


#============================================
def _color_tuple_to_hex(color):
	if len(color) not in (3, 4):
		return None
	values = list(color[:3])
	scale = 255.0
	if max(values) > 1.0:
		scale = 1.0
	channels = []
	for value in values:
		channel = int(round(value * scale))
		channel = max(0, min(channel, 255))
		channels.append(channel)
	return "#%02x%02x%02x" % (channels[0], channels[1], channels[2])


#============================================
def color_to_hex(color):
	if color is None:
		return None
	if isinstance(color, str):
		text = color.strip()
		if not text:
			return None
		return _normalize_hex_color(text)
	if isinstance(color, (tuple, list)):
		return _color_tuple_to_hex(color)
	return None


#============================================
def color_to_rgb(color):
	"""Return (r, g, b) in 0..1 for a paintable colour, else None."""
	text = color_to_hex(color)
	if not text or not text.startswith("#") or len(text) != 7:
		return None
	r = int(text[1:3], 16) / 255.0
	g = int(text[3:5], 16) / 255.0
	b = int(text[5:7], 16) / 255.0
	return (r, g, b)


#============================================
def _has_paint(color):
	hex_color = color_to_hex(color)
	return bool(hex_color) and hex_color != "none"


#============================================
def sort_ops(ops):
	ordered = []
	for index, op in sorted(enumerate(ops), key=lambda item: (getattr(item[1], "z", 0), item[0])):
		ordered.append(op)
	return ordered


#============================================
def _serialize_number(value, digits):
	if isinstance(value, int):
		return value
	if isinstance(value, float):
		return round(value, digits)
	return value


#============================================
def _serialize_list(value, digits):
	return [ _serialize_number(item, digits) for item in value ]


#============================================
def _serialize_commands(commands, digits):
	serialized = []
	for cmd, payload in commands:
		if payload is None:
			serialized.append([cmd, None])
			continue
		serialized.append([cmd, _serialize_list(payload, digits)])
	return serialized


#============================================
def _op_to_json(op, round_digits):
	if isinstance(op, LineOp):
		return {
			"kind": "line",
			"p1": _serialize_list(op.p1, round_digits),
			"p2": _serialize_list(op.p2, round_digits),
			"width": _serialize_number(op.width, round_digits),
			"cap": op.cap,
			"join": op.join,
			"color": color_to_hex(op.color),
			"z": op.z,
		}
	if isinstance(op, PolygonOp):
		return {
			"kind": "polygon",
			"points": [ _serialize_list(point, round_digits) for point in op.points ],
			"fill": color_to_hex(op.fill),
			"stroke": color_to_hex(op.stroke),
			"stroke_width": _serialize_number(op.stroke_width, round_digits),
			"z": op.z,
		}
	if isinstance(op, PathOp):
		return {
			"kind": "path",
			"commands": _serialize_commands(op.commands, round_digits),
			"fill": color_to_hex(op.fill),
			"stroke": color_to_hex(op.stroke),
			"stroke_width": _serialize_number(op.stroke_width, round_digits),
			"cap": op.cap,
			"join": op.join,
			"z": op.z,
		}
	if isinstance(op, TextOp):
		return {
			"kind": "text",
			"x": _serialize_number(op.x, round_digits),
			"y": _serialize_number(op.y, round_digits),
			"text": op.text,
			"font_size": _serialize_number(op.font_size, round_digits),
			"font_name": op.font_name,
			"color": color_to_hex(op.color),
			"outline_color": color_to_hex(op.outline_color),
			"outline_width": _serialize_number(op.outline_width, round_digits),
			"z": op.z,
		}
	if isinstance(op, ClipOp):
		return {
			"kind": "clip",
			"clip_commands": _serialize_commands(op.clip_commands, round_digits),
			"ops": ops_to_json_dict(op.ops, round_digits=round_digits),
			"z": op.z,
		}
	return None


#============================================
def ops_to_json_dict(ops, round_digits=3):
	serialized = []
	for op in sort_ops(ops):
		entry = _op_to_json(op, round_digits)
		if entry is None:
			continue
		if op.op_id:
			entry["id"] = op.op_id
		serialized.append(entry)
	return serialized


#============================================
def ops_to_json_text(ops, round_digits=3):
	return json.dumps(ops_to_json_dict(ops, round_digits=round_digits), indent=2, sort_keys=True)


#============================================
def _is_full_turn(angle1, angle2):
	return abs(angle2 - angle1) >= FULL_TURN - 1e-9


#============================================
def _svg_arc_parts(payload, current_point):
	cx, cy, r, angle1, angle2 = payload
	start = (cx + r * math.cos(angle1), cy + r * math.sin(angle1))
	parts = []
	# cairo draws a line from the current point to the arc start
	if current_point is None:
		parts.append("M %s %s" % start)
	else:
		parts.append("L %s %s" % start)
	sweep = 1 if angle2 >= angle1 else 0
	if _is_full_turn(angle1, angle2):
		# a single SVG arc cannot close on itself
		half = angle1 + (angle2 - angle1) / 2.0
		mid = (cx + r * math.cos(half), cy + r * math.sin(half))
		parts.append("A %s %s 0 0 %s %s %s" % (r, r, sweep, mid[0], mid[1]))
		parts.append("A %s %s 0 0 %s %s %s" % (r, r, sweep, start[0], start[1]))
		return parts, start
	end = (cx + r * math.cos(angle2), cy + r * math.sin(angle2))
	large_arc = 1 if abs(angle2 - angle1) > math.pi else 0
	parts.append("A %s %s 0 %s %s %s %s" % (r, r, large_arc, sweep, end[0], end[1]))
	return parts, end


#============================================
def commands_to_svg_d(commands):
	d_parts = []
	current = None
	subpath_start = None
	for cmd, payload in commands:
		if cmd == "Z":
			d_parts.append("Z")
			current = subpath_start
			continue
		if cmd == "M":
			d_parts.append("M %s %s" % (payload[0], payload[1]))
			current = (payload[0], payload[1])
			subpath_start = current
			continue
		if cmd == "L":
			d_parts.append("L %s %s" % (payload[0], payload[1]))
			current = (payload[0], payload[1])
			continue
		if cmd == "C":
			d_parts.append("C %s %s %s %s %s %s" % tuple(payload))
			current = (payload[4], payload[5])
			continue
		if cmd == "ARC":
			parts, current = _svg_arc_parts(payload, current)
			if subpath_start is None:
				subpath_start = current
			d_parts.extend(parts)
			continue
		if cmd == "ELLIPSE":
			cx, cy, rx, ry = payload
			d_parts.append("M %s %s" % (cx + rx, cy))
			d_parts.append("A %s %s 0 0 1 %s %s" % (rx, ry, cx - rx, cy))
			d_parts.append("A %s %s 0 0 1 %s %s" % (rx, ry, cx + rx, cy))
			d_parts.append("Z")
			current = (cx + rx, cy)
			subpath_start = current
	return " ".join(d_parts)


#============================================
def _svg_paint_attrs(fill, stroke, stroke_width):
	attrs = (( 'fill', color_to_hex(fill) or "none"),)
	stroke = color_to_hex(stroke)
	if stroke and stroke != "none":
		attrs += (( 'stroke', stroke),
				( 'stroke-width', str(stroke_width)))
	else:
		attrs += (( 'stroke', "none"),)
	return attrs


#============================================
def _next_clip_id(parent):
	document = parent.ownerDocument or parent
	return "clip-%d" % (len(document.getElementsByTagName("clipPath")) + 1)


#============================================
def ops_to_svg(parent, ops):
	for op in sort_ops(ops):
		if isinstance(op, LineOp):
			color = color_to_hex(op.color) or "#000"
			attrs = (( 'x1', str(op.p1[0])),
					( 'y1', str(op.p1[1])),
					( 'x2', str(op.p2[0])),
					( 'y2', str(op.p2[1])),
					( 'stroke-width', str(op.width)),
					( 'stroke', color))
			if op.cap:
				attrs += (( 'stroke-linecap', op.cap),)
			if op.join:
				attrs += (( 'stroke-linejoin', op.join),)
			dom_extensions.elementUnder(parent, 'line', attrs)
			continue
		if isinstance(op, PolygonOp):
			points_text = " ".join("%s,%s" % (x, y) for x, y in op.points)
			attrs = (( 'points', points_text),)
			attrs += _svg_paint_attrs(op.fill, op.stroke, op.stroke_width)
			dom_extensions.elementUnder(parent, 'polygon', attrs)
			continue
		if isinstance(op, PathOp):
			attrs = (( 'd', commands_to_svg_d(op.commands)),)
			attrs += _svg_paint_attrs(op.fill, op.stroke, op.stroke_width)
			if op.cap:
				attrs += (( 'stroke-linecap', op.cap),)
			if op.join:
				attrs += (( 'stroke-linejoin', op.join),)
			dom_extensions.elementUnder(parent, 'path', attrs)
			continue
		if isinstance(op, TextOp):
			attrs = (( 'x', str(op.x)),
					( 'y', str(op.y)),
					( 'font-family', op.font_name),
					( 'font-size', str(op.font_size)),
					( 'fill', color_to_hex(op.color) or "#000"))
			if op.outline_width > 0 and _has_paint(op.outline_color):
				attrs += (( 'stroke', color_to_hex(op.outline_color)),
						( 'stroke-width', str(op.outline_width)),
						( 'paint-order', "stroke"))
			dom_extensions.textOnlyElementUnder(parent, 'text', op.text, attrs)
			continue
		if isinstance(op, ClipOp):
			clip_id = _next_clip_id(parent)
			clip = dom_extensions.elementUnder(parent, 'clipPath', (( 'id', clip_id),))
			dom_extensions.elementUnder(clip, 'path', (( 'd', commands_to_svg_d(op.clip_commands)),))
			group = dom_extensions.elementUnder(parent, 'g', (( 'clip-path', "url(#%s)" % clip_id),))
			ops_to_svg(group, op.ops)


#============================================
def _set_cairo_color(context, color):
	rgb = color_to_rgb(color)
	if rgb is None:
		return False
	context.set_source_rgb(*rgb)
	return True


#============================================
def _set_cairo_stroke_style(context, cap, join):
	context.set_line_cap(_CAIRO_CAPS.get(cap, 0))
	context.set_line_join(_CAIRO_JOINS.get(join, 0))


#============================================
def _cairo_fill_and_stroke(context, fill, stroke, stroke_width):
	has_stroke = _has_paint(stroke)
	if _has_paint(fill):
		if not _set_cairo_color(context, fill):
			context.set_source_rgb(0, 0, 0)
		if has_stroke:
			context.fill_preserve()
		else:
			context.fill()
	if has_stroke:
		if not _set_cairo_color(context, stroke):
			context.set_source_rgb(0, 0, 0)
		context.set_line_width(stroke_width)
		context.stroke()
	context.new_path()


#============================================
def _cairo_path(context, commands):
	context.new_path()
	for cmd, payload in commands:
		if cmd == "Z":
			context.close_path()
			continue
		if cmd == "M":
			context.move_to(payload[0], payload[1])
			continue
		if cmd == "L":
			context.line_to(payload[0], payload[1])
			continue
		if cmd == "C":
			context.curve_to(*payload)
			continue
		if cmd == "ARC":
			cx, cy, r, angle1, angle2 = payload
			if angle2 >= angle1:
				context.arc(cx, cy, r, angle1, angle2)
			else:
				context.arc_negative(cx, cy, r, angle1, angle2)
			continue
		if cmd == "ELLIPSE":
			cx, cy, rx, ry = payload
			# the path survives restore(); only the matrix is scoped
			context.save()
			context.new_sub_path()
			context.translate(cx, cy)
			context.scale(rx, ry)
			context.arc(0.0, 0.0, 1.0, 0.0, FULL_TURN)
			context.restore()
			context.close_path()


#============================================
def ops_to_cairo(context, ops):
	for op in sort_ops(ops):
		if isinstance(op, LineOp):
			context.set_line_width(op.width)
			_set_cairo_stroke_style(context, op.cap, op.join)
			if not _set_cairo_color(context, op.color):
				context.set_source_rgb(0, 0, 0)
			context.new_path()
			context.move_to(op.p1[0], op.p1[1])
			context.line_to(op.p2[0], op.p2[1])
			context.stroke()
			continue
		if isinstance(op, PolygonOp):
			points = list(op.points)
			if not points:
				continue
			context.new_path()
			context.move_to(points[0][0], points[0][1])
			for x, y in points[1:]:
				context.line_to(x, y)
			context.close_path()
			_set_cairo_stroke_style(context, "", "")
			_cairo_fill_and_stroke(context, op.fill, op.stroke, op.stroke_width)
			continue
		if isinstance(op, PathOp):
			_cairo_path(context, op.commands)
			_set_cairo_stroke_style(context, op.cap, op.join)
			_cairo_fill_and_stroke(context, op.fill, op.stroke, op.stroke_width)
			continue
		if isinstance(op, TextOp):
			context.select_font_face(op.font_name)
			context.set_font_size(op.font_size)
			context.new_path()
			context.move_to(op.x, op.y)
			context.text_path(op.text)
			if op.outline_width > 0 and _set_cairo_color(context, op.outline_color):
				context.set_line_width(op.outline_width)
				_set_cairo_stroke_style(context, "", "")
				context.stroke_preserve()
			if not _set_cairo_color(context, op.color):
				context.set_source_rgb(0, 0, 0)
			context.fill()
			continue
		if isinstance(op, ClipOp):
			context.save()
			_cairo_path(context, op.clip_commands)
			context.clip()
			ops_to_cairo(context, op.ops)
			context.restore()
