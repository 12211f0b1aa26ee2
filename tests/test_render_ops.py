"""Tests for render op serialization and the SVG and cairo backends."""

# Standard Library
import math
import xml.dom.minidom as dom

# Third Party
import cairo
import pytest

# Local repo modules
import conftest


conftest.add_sbgnpaint_to_sys_path()

# local repo modules
from sbgnpaint import render_ops


#============================================
def _svg_root(ops):
	doc = dom.Document()
	root = doc.createElement("svg")
	doc.appendChild(root)
	render_ops.ops_to_svg(root, ops)
	return root


#============================================
@pytest.mark.parametrize("color, expected", [
	("#ABC", "#aabbcc"),
	("#55AA55", "#55aa55"),
	((1.0, 0.0, 0.0), "#ff0000"),
	((0, 128, 255), "#0080ff"),
	("none", "none"),
	("", None),
	(None, None),
])
def test_color_to_hex(color, expected):
	assert render_ops.color_to_hex(color) == expected


#============================================
def test_color_to_rgb():
	assert render_ops.color_to_rgb("#ff0000") == (1.0, 0.0, 0.0)
	assert render_ops.color_to_rgb("none") is None


#============================================
def test_sort_ops_is_stable_by_z():
	a = render_ops.LineOp((0, 0), (1, 1), 1.0, z=1)
	b = render_ops.LineOp((0, 0), (2, 2), 1.0, z=0)
	c = render_ops.LineOp((0, 0), (3, 3), 1.0, z=1)
	d = render_ops.LineOp((0, 0), (4, 4), 1.0, z=0)
	assert render_ops.sort_ops([a, b, c, d]) == [b, d, a, c]


#============================================
def test_json_nests_clip_ops():
	inner = render_ops.LineOp((0.0, 0.0), (1.0, 1.0), 1.0, color="#000")
	clip = render_ops.ClipOp(clip_commands=(("M", (0.0, 0.0)), ("Z", None)), ops=(inner,))
	data = render_ops.ops_to_json_dict([clip])
	assert data[0]["kind"] == "clip"
	assert data[0]["clip_commands"] == [["M", [0.0, 0.0]], ["Z", None]]
	assert data[0]["ops"][0]["kind"] == "line"
	assert data[0]["ops"][0]["color"] == "#000000"


#============================================
def test_json_polygon_with_id():
	op = render_ops.PolygonOp(((1.0, 2.0), (3.33333, 4.0), (5.0, 6.0)), fill="#FFF", op_id="tri")
	data = render_ops.ops_to_json_dict([op])
	assert data == [{
		"kind": "polygon",
		"points": [[1.0, 2.0], [3.333, 4.0], [5.0, 6.0]],
		"fill": "#ffffff",
		"stroke": None,
		"stroke_width": 0.0,
		"z": 0,
		"id": "tri",
	}]


#============================================
def test_svg_polygon():
	op = render_ops.PolygonOp(((0.0, 0.0), (4.0, 0.0), (2.0, 3.0)), fill=None, stroke="#555555", stroke_width=1.5)
	polygon = _svg_root([op]).getElementsByTagName("polygon")[0]
	assert polygon.getAttribute("points") == "0.0,0.0 4.0,0.0 2.0,3.0"
	assert polygon.getAttribute("fill") == "none"
	assert polygon.getAttribute("stroke-width") == "1.5"


#============================================
def test_cairo_source_is_opaque_rgb():
	surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 4, 4)
	context = cairo.Context(surface)
	assert render_ops._set_cairo_color(context, "#00ff00")
	assert context.get_source().get_rgba() == (0.0, 1.0, 0.0, 1.0)
	assert not render_ops._set_cairo_color(context, "none")


#============================================
def test_svg_line():
	op = render_ops.LineOp((1.0, 2.0), (3.0, 4.0), 1.5, cap="square", color="#555555")
	line = _svg_root([op]).getElementsByTagName("line")[0]
	assert line.getAttribute("x1") == "1.0"
	assert line.getAttribute("y2") == "4.0"
	assert line.getAttribute("stroke") == "#555555"
	assert line.getAttribute("stroke-linecap") == "square"


#============================================
def test_svg_ellipse_is_two_arcs():
	op = render_ops.PathOp(commands=(("ELLIPSE", (10.0, 5.0, 4.0, 2.0)),), fill="#f6f6f6")
	path = _svg_root([op]).getElementsByTagName("path")[0]
	d = path.getAttribute("d")
	assert d == "M 14.0 5.0 A 4.0 2.0 0 0 1 6.0 5.0 A 4.0 2.0 0 0 1 14.0 5.0 Z"
	assert path.getAttribute("stroke") == "none"


#============================================
def test_svg_full_circle_is_split():
	d = render_ops.commands_to_svg_d((("ARC", (0.0, 0.0, 2.0, 0.0, 2.0 * math.pi)), ("Z", None)))
	assert d.startswith("M 2.0 0.0")
	assert d.count("A ") == 2
	assert d.endswith("Z")


#============================================
def test_svg_arc_after_line_connects():
	d = render_ops.commands_to_svg_d((
		("M", (0.0, 0.0)),
		("ARC", (10.0, 0.0, 5.0, math.pi, 1.5 * math.pi)),
	))
	parts = d.split(" A ")
	assert parts[0].startswith("M 0.0 0.0 L 5.0")


#============================================
def test_svg_clip_path():
	band = render_ops.PathOp(commands=(("M", (0.0, 0.0)), ("L", (1.0, 0.0)), ("Z", None)), fill="#d1d1d1")
	clip_commands = (("M", (0.0, 0.0)), ("L", (5.0, 0.0)), ("L", (5.0, 5.0)), ("Z", None))
	root = _svg_root([
		render_ops.ClipOp(clip_commands=clip_commands, ops=(band,)),
		render_ops.ClipOp(clip_commands=clip_commands, ops=(band,)),
	])
	clips = root.getElementsByTagName("clipPath")
	assert [clip.getAttribute("id") for clip in clips] == ["clip-1", "clip-2"]
	groups = root.getElementsByTagName("g")
	assert groups[0].getAttribute("clip-path") == "url(#clip-1)"
	assert groups[0].getElementsByTagName("path")[0].getAttribute("fill") == "#d1d1d1"


#============================================
def test_svg_text_with_outline():
	op = render_ops.TextOp(
		x=1.0, y=2.0, text="Glc", font_size=20.0, font_name="Liberation Sans",
		color="#555555", outline_color="#ffffff", outline_width=0.75,
	)
	text = _svg_root([op]).getElementsByTagName("text")[0]
	assert text.firstChild.data == "Glc"
	assert text.getAttribute("fill") == "#555555"
	assert text.getAttribute("stroke") == "#ffffff"
	assert text.getAttribute("paint-order") == "stroke"


#============================================
def _pixel(surface, x, y):
	surface.flush()
	data = surface.get_data()
	offset = y * surface.get_stride() + x * 4
	# ARGB32 is stored native-endian; read as B, G, R, A on little endian
	blue, green, red = data[offset], data[offset + 1], data[offset + 2]
	return (red, green, blue)


#============================================
def test_cairo_replay_fills_path():
	surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 20, 20)
	context = cairo.Context(surface)
	op = render_ops.PathOp(
		commands=(("M", (0.0, 0.0)), ("L", (10.0, 0.0)), ("L", (10.0, 10.0)), ("L", (0.0, 10.0)), ("Z", None)),
		fill="#ff0000",
	)
	render_ops.ops_to_cairo(context, [op])
	assert _pixel(surface, 5, 5) == (255, 0, 0)
	assert _pixel(surface, 15, 15) == (0, 0, 0)


#============================================
def test_cairo_clip_limits_drawing():
	surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 20, 20)
	context = cairo.Context(surface)
	fill_all = render_ops.PathOp(
		commands=(("M", (0.0, 0.0)), ("L", (20.0, 0.0)), ("L", (20.0, 20.0)), ("L", (0.0, 20.0)), ("Z", None)),
		fill="#0000ff",
	)
	clip = render_ops.ClipOp(
		clip_commands=(("ELLIPSE", (10.0, 10.0, 4.0, 4.0)),),
		ops=(fill_all,),
	)
	render_ops.ops_to_cairo(context, [clip])
	assert _pixel(surface, 10, 10) == (0, 0, 255)
	assert _pixel(surface, 1, 1) == (0, 0, 0)
