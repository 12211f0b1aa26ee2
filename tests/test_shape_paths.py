"""Unit tests for glyph outline builders."""

# Standard Library
import math

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_sbgnpaint_to_sys_path()

# local repo modules
from sbgnpaint import shape_paths
from sbgnpaint.glyph_classes import ShapeFamily
from sbgnpaint.model import BBox
from sbgnpaint.transform import PixelRect
from sbgnpaint.transform import Transform


#============================================
def _points(commands):
	return [payload for cmd, payload in commands if cmd in ("M", "L")]


#============================================
def test_rect_commands():
	commands = shape_paths.rect_commands(PixelRect(1.0, 2.0, 10.0, 20.0))
	assert _points(commands) == [(1.0, 2.0), (11.0, 2.0), (11.0, 22.0), (1.0, 22.0)]
	assert commands[-1] == ("Z", None)


#============================================
def test_round_rect_radius_from_smaller_side():
	commands = shape_paths.outline_for(ShapeFamily.ROUND_RECT, PixelRect(10.0, 10.0, 96.0, 48.0))
	assert commands[0] == ("M", pytest.approx((14.8, 10.0)))
	arcs = [payload for cmd, payload in commands if cmd == "ARC"]
	assert len(arcs) == 4
	for payload in arcs:
		assert payload[2] == pytest.approx(4.8)
	assert arcs[0][3] == pytest.approx(-math.pi / 2.0)
	assert arcs[-1][4] == pytest.approx(3.0 * math.pi / 2.0)


#============================================
def test_round_rect_radius_clamped_to_half_side():
	commands = shape_paths.round_rect_commands(PixelRect(0.0, 0.0, 10.0, 4.0), 50.0)
	arcs = [payload for cmd, payload in commands if cmd == "ARC"]
	assert arcs[0][2] == pytest.approx(2.0)


#============================================
def test_stadium_radius_clamps_to_short_side():
	commands = shape_paths.stadium_commands(PixelRect(0.0, 0.0, 100.0, 20.0))
	arcs = [payload for cmd, payload in commands if cmd == "ARC"]
	assert arcs[0][2] == pytest.approx(10.0)


#============================================
def test_round_bottom_rect_has_square_top():
	commands = shape_paths.outline_for(ShapeFamily.ROUND_BOTTOM_RECT, PixelRect(0.0, 0.0, 88.0, 56.0))
	assert commands[0] == ("M", (0.0, 0.0))
	assert commands[1] == ("L", (88.0, 0.0))
	arcs = [payload for cmd, payload in commands if cmd == "ARC"]
	assert len(arcs) == 2
	assert arcs[0][2] == pytest.approx(0.3 * 56.0)


#============================================
def test_ellipse_radii_have_floor():
	commands = shape_paths.outline_for(ShapeFamily.ELLIPSE, PixelRect(0.0, 0.0, 1.0, 0.5))
	assert commands == (("ELLIPSE", (0.5, 0.25, 1.0, 1.0)),)


#============================================
def test_ellipse_centered_on_rect():
	commands = shape_paths.ellipse_commands(PixelRect(10.0, 10.0, 48.0, 24.0))
	assert commands == (("ELLIPSE", (34.0, 22.0, 24.0, 12.0)),)


#============================================
def test_cut_rect_corner():
	commands = shape_paths.outline_for(ShapeFamily.CUT_RECT, PixelRect(0.0, 0.0, 10.0, 10.0))
	points = _points(commands)
	assert len(points) == 8
	assert points[0] == (0.0, 2.0)
	assert points[1] == (2.0, 0.0)


#============================================
def test_hexagon_vertices():
	points = _points(shape_paths.hexagon_commands(PixelRect(0.0, 0.0, 100.0, 40.0)))
	assert points == [
		(0.0, 20.0), (25.0, 0.0), (75.0, 0.0),
		(100.0, 20.0), (75.0, 40.0), (25.0, 40.0),
	]


#============================================
def test_concave_hexagon_vertices():
	points = _points(shape_paths.concave_hexagon_commands(PixelRect(0.0, 0.0, 100.0, 40.0)))
	assert points[2] == pytest.approx((85.0, 20.0))
	assert points[5] == pytest.approx((15.0, 20.0))


#============================================
def test_tag_notch_minimum():
	commands = shape_paths.outline_for(ShapeFamily.TAG, PixelRect(0.0, 0.0, 50.0, 4.0))
	points = _points(commands)
	assert points[0] == (2.0, 0.0)
	assert points[-1] == (0.0, 2.0)


#============================================
def test_barrel_outline_is_closed_curve():
	rect = PixelRect(0.0, 0.0, 100.0, 200.0)
	commands = shape_paths.barrel_commands(rect)
	assert commands[0] == ("M", pytest.approx((0.0, 6.0)))
	curves = [payload for cmd, payload in commands if cmd == "C"]
	assert len(curves) == 4
	# last corner ends back at the starting point
	assert curves[-1][4:] == pytest.approx((0.0, 6.0))
	assert commands[-1] == ("Z", None)


#============================================
def test_quad_to_cubic():
	c1, c2 = shape_paths.quad_to_cubic((0.0, 0.0), (3.0, 3.0), (6.0, 0.0))
	assert c1 == pytest.approx((2.0, 2.0))
	assert c2 == pytest.approx((4.0, 2.0))


#============================================
def test_square_in_box_centers_square():
	square = shape_paths.square_in_box(Transform(0.0, 0.0, 1.0, 1.0), BBox(0.0, 0.0, 40.0, 20.0))
	assert square == PixelRect(10.0, 0.0, 20.0, 20.0)


#============================================
@pytest.mark.parametrize("bbox", [
	BBox(0.0, 0.0, 20.0, -10.0),
	BBox(20.0, 0.0, -20.0, -10.0),
])
def test_square_in_box_negative_size_is_normalized(bbox):
	square = shape_paths.square_in_box(Transform(0.0, 0.0, 1.0, 1.0), bbox)
	assert square == PixelRect(5.0, -10.0, 10.0, 10.0)
	assert square.width > 0 and square.height > 0


#============================================
def test_circle_commands_full_turn():
	commands = shape_paths.circle_commands((5.0, 5.0), 3.0)
	cmd, payload = commands[0]
	assert cmd == "ARC"
	assert payload[:3] == (5.0, 5.0, 3.0)
	assert payload[4] - payload[3] == pytest.approx(2.0 * math.pi)
	assert commands[-1] == ("Z", None)


#============================================
def test_outline_for_rejects_unknown_family():
	with pytest.raises(ValueError):
		shape_paths.outline_for("hexagram", PixelRect(0.0, 0.0, 1.0, 1.0))
