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

"""Data-space to pixel-space mapping."""

# Standard Library
import dataclasses


MIN_SPAN = 1.0


#============================================
@dataclasses.dataclass(frozen=True)
class Transform:
	min_x: float
	min_y: float
	scale_x: float
	scale_y: float

	@classmethod
	def fit(cls, min_x, min_y, max_x, max_y, width, height):
		"""Fit the data box onto a width x height canvas, per axis."""
		span_x = max(abs(max_x - min_x), MIN_SPAN)
		span_y = max(abs(max_y - min_y), MIN_SPAN)
		return cls(min_x, min_y, width / span_x, height / span_y)

	@property
	def scale(self):
		return min(self.scale_x, self.scale_y)

	def map_point(self, x, y):
		return ((x - self.min_x) * self.scale_x, (y - self.min_y) * self.scale_y)

	def inverse_point(self, px, py):
		return (px / self.scale_x + self.min_x, py / self.scale_y + self.min_y)

	def map_size(self, w, h):
		return (w * self.scale_x, h * self.scale_y)

	def scale_scalar(self, value):
		# stroke widths and decoration sizes must not stretch
		return value * self.scale


#============================================
@dataclasses.dataclass(frozen=True)
class PixelRect:
	x0: float
	y0: float
	width: float
	height: float

	@classmethod
	def from_corners(cls, xa, ya, xb, yb):
		left = min(xa, xb)
		top = min(ya, yb)
		return cls(left, top, max(xa, xb) - left, max(ya, yb) - top)

	@property
	def x1(self):
		return self.x0 + self.width

	@property
	def y1(self):
		return self.y0 + self.height

	@property
	def center(self):
		return (self.x0 + self.width / 2.0, self.y0 + self.height / 2.0)

	def offset(self, dx, dy):
		return PixelRect(self.x0 + dx, self.y0 + dy, self.width, self.height)


#============================================
def bbox_pixel_rect(transform, bbox):
	"""Map a data bbox to a normalized pixel rectangle."""
	xa, ya = transform.map_point(bbox.x, bbox.y)
	xb, yb = transform.map_point(bbox.x + bbox.w, bbox.y + bbox.h)
	return PixelRect.from_corners(xa, ya, xb, yb)


#============================================
def transform_with_padding(bounds, padding):
	"""Return (transform, width, height) for the padded content bounds.

	The canvas is as large as the padded data span, so the mapping is a
	pure translation unless the span had to be clamped.
	"""
	padded = bounds.padded(padding)
	width = max(padded.width, MIN_SPAN)
	height = max(padded.height, MIN_SPAN)
	transform = Transform.fit(
		padded.min_x, padded.min_y, padded.max_x, padded.max_y, width, height,
	)
	return transform, width, height
