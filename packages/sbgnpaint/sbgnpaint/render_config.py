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

"""Renderer constants and the overridable style dictionary."""

# Standard Library
import json


DEFAULT_PADDING = 10.0
OVERLAY_CLASS_NAMES = ("unit of information", "state variable")
MULTIMER_SUFFIX = " multimer"

DEFAULT_STYLE = {
	"line_width": 1.5,
	"line_cap": "square",
	"font_name": "Liberation Sans",
	"font_size": 20.0,
	"small_font_size": 12.0,
	"text_outline_width": 0.75,
	"background_color": "#ffffff",
	"border_color": "#555555",
	"fill_color": "#f6f6f6",
	"overlay_fill_color": "#ffffff",
	"aux_line_color": "#6a6a6a",
	"association_fill_color": "#6b6b6b",
	"clone_markers": True,
	"clone_marker_height_ratio": 0.30,
	"clone_marker_fill_color": "#d1d1d1",
	"clone_marker_stroke_width": 1.5,
	"arrow_size": 8.0,
	"arrow_scale": 1.75,
	"bar_length": 12.0,
	"bar_offset": 14.0,
	"catalysis_radius_ratio": 0.4,
	"catalysis_overlap_ratio": 0.5,
	"port_connector_length": 11.0,
	"logical_port_connector_length": 20.0,
	"bottom_label_margin": 2.0,
}


#============================================
def resolve_style(style=None):
	"""Return DEFAULT_STYLE with caller overrides applied.

	Args:
		style: Optional mapping of style keys to override.

	Returns:
		dict: A fresh style dictionary; DEFAULT_STYLE is never mutated.

	Raises:
		ValueError: If an override names an unknown style key.
	"""
	resolved = dict(DEFAULT_STYLE)
	if style:
		unknown = sorted(key for key in style if key not in DEFAULT_STYLE)
		if unknown:
			raise ValueError("Unknown style option(s): %s" % ", ".join(unknown))
		resolved.update(style)
	return resolved


#============================================
def load_style_file(path):
	"""Read a JSON object of style overrides from path."""
	with open(path, "r", encoding="utf-8") as handle:
		data = json.load(handle)
	if not isinstance(data, dict):
		raise ValueError("Style file %s must contain a JSON object" % path)
	# validate early so the caller sees the file name in the error
	resolve_style(data)
	return data
