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

"""Label measurement and placement.

Measurement goes through a measurer object with a single method,
measure(text, font_size, font_name) -> TextMetrics. The cairo measurer is
the production one; anything with the same method can stand in for it.
Placement functions return TextOp records, one per label line.
"""

# Standard Library
import dataclasses

# Third Party
import cairo

# local repo modules
from . import render_ops


#============================================
@dataclasses.dataclass(frozen=True)
class TextMetrics:
	width: float
	ascent: float
	descent: float

	@property
	def line_height(self):
		return self.ascent + self.descent


#============================================
class CairoTextMeasurer:
	"""Measure text with the cairo toy font API on a scratch surface."""

	def __init__(self):
		self._surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, 1, 1)
		self._context = cairo.Context(self._surface)

	def measure(self, text, font_size, font_name):
		self._context.select_font_face(font_name, cairo.FONT_SLANT_NORMAL, cairo.FONT_WEIGHT_NORMAL)
		self._context.set_font_size(font_size)
		ascent, descent = self._context.font_extents()[:2]
		width = 0.0
		if text:
			width = self._context.text_extents(text).x_advance
		return TextMetrics(width=width, ascent=ascent, descent=descent)


#============================================
def split_lines(text):
	return text.split("\n")


#============================================
def is_blank(text):
	return not text or not text.strip()


#============================================
def measure_width(measurer, text, font_size, font_name):
	"""Width of the widest line of text."""
	if not text:
		return 0.0
	return max(measurer.measure(line, font_size, font_name).width for line in split_lines(text))


#============================================
def _block_lines(measurer, text, font_size, font_name):
	lines = []
	for line in split_lines(text):
		lines.append((line, measurer.measure(line, font_size, font_name)))
	height = sum(metrics.line_height for _line, metrics in lines)
	return lines, height


#============================================
def _block_ops(lines, center_x, top, font_size, style):
	ops = []
	y = top
	for line, metrics in lines:
		if line:
			ops.append(render_ops.TextOp(
				x=center_x - metrics.width / 2.0,
				y=y + metrics.ascent,
				text=line,
				font_size=font_size,
				font_name=style["font_name"],
				color=style["border_color"],
				outline_color=style["background_color"],
				outline_width=style["text_outline_width"],
			))
		y += metrics.line_height
	return ops


#============================================
def centered_text_ops(measurer, text, center, font_size, style):
	"""Ops for text whose line block is centered on center.

	Blank text yields no ops.
	"""
	if is_blank(text):
		return []
	lines, height = _block_lines(measurer, text, font_size, style["font_name"])
	return _block_ops(lines, center[0], center[1] - height / 2.0, font_size, style)


#============================================
def bottom_centered_text_ops(measurer, text, rect, font_size, style):
	"""Ops for text centered horizontally and resting above rect's bottom edge."""
	if is_blank(text):
		return []
	lines, height = _block_lines(measurer, text, font_size, style["font_name"])
	top = rect.y1 - height - style["bottom_label_margin"]
	return _block_ops(lines, rect.center[0], top, font_size, style)
