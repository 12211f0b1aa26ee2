"""Unit tests for the data-space to pixel-space transform."""

# Third Party
import pytest

# Local repo modules
import conftest


conftest.add_sbgnpaint_to_sys_path()

# local repo modules
from sbgnpaint import transform
from sbgnpaint.model import BBox
from sbgnpaint.model import Bounds


#============================================
def test_fit_is_per_axis():
	tr = transform.Transform.fit(0.0, 0.0, 100.0, 50.0, 200.0, 200.0)
	assert tr.scale_x == pytest.approx(2.0)
	assert tr.scale_y == pytest.approx(4.0)
	assert tr.scale == pytest.approx(2.0)


#============================================
def test_fit_clamps_degenerate_span():
	tr = transform.Transform.fit(5.0, 5.0, 5.0, 5.0, 10.0, 10.0)
	assert tr.scale_x == pytest.approx(10.0)
	assert tr.scale_y == pytest.approx(10.0)


#============================================
def test_map_and_inverse_round_trip():
	tr = transform.Transform.fit(-20.0, 10.0, 80.0, 60.0, 300.0, 120.0)
	for point in ((-20.0, 10.0), (80.0, 60.0), (13.5, 42.25)):
		px, py = tr.map_point(*point)
		back = tr.inverse_point(px, py)
		assert back[0] == pytest.approx(point[0])
		assert back[1] == pytest.approx(point[1])


#============================================
def test_map_point_min_corner_is_origin():
	tr = transform.Transform.fit(-20.0, 10.0, 80.0, 60.0, 300.0, 120.0)
	assert tr.map_point(-20.0, 10.0) == pytest.approx((0.0, 0.0))
	assert tr.map_point(80.0, 60.0) == pytest.approx((300.0, 120.0))


#============================================
def test_scale_scalar_uses_smaller_axis():
	tr = transform.Transform(0.0, 0.0, 3.0, 0.5)
	assert tr.scale_scalar(10.0) == pytest.approx(5.0)


#============================================
def test_transform_with_padding_single_macromolecule():
	bounds = Bounds(0.0, 0.0, 96.0, 48.0)
	tr, width, height = transform.transform_with_padding(bounds, 10.0)
	assert width == pytest.approx(116.0)
	assert height == pytest.approx(68.0)
	assert tr.scale_x == pytest.approx(1.0)
	assert tr.scale_y == pytest.approx(1.0)
	assert tr.map_point(0.0, 0.0) == pytest.approx((10.0, 10.0))
	assert tr.map_point(96.0, 48.0) == pytest.approx((106.0, 58.0))


#============================================
def test_transform_with_padding_point_content():
	bounds = Bounds(3.0, 3.0, 3.0, 3.0)
	tr, width, height = transform.transform_with_padding(bounds, 0.0)
	assert width == pytest.approx(transform.MIN_SPAN)
	assert height == pytest.approx(transform.MIN_SPAN)
	assert tr.map_point(3.0, 3.0) == pytest.approx((0.0, 0.0))


#============================================
def test_pixel_rect_normalizes_corners():
	rect = transform.PixelRect.from_corners(50.0, 40.0, 10.0, 0.0)
	assert rect == transform.PixelRect(10.0, 0.0, 40.0, 40.0)
	assert rect.x1 == pytest.approx(50.0)
	assert rect.y1 == pytest.approx(40.0)
	assert rect.center == pytest.approx((30.0, 20.0))


#============================================
def test_bbox_pixel_rect():
	tr = transform.Transform(-10.0, -10.0, 2.0, 2.0)
	rect = transform.bbox_pixel_rect(tr, BBox(0.0, 0.0, 96.0, 48.0))
	assert rect == transform.PixelRect(20.0, 20.0, 192.0, 96.0)
