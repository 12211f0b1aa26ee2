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

# Standard Library
import math
import os
import xml.dom.minidom as dom

# Third Party
import cairo

# local repo modules
from . import dom_extensions
from . import render_config
from . import render_ops
from . import renderer
from .transform import transform_with_padding


#============================================
def _resolve_format(filename, format_override):
	extension = os.path.splitext(filename)[1].lower().lstrip(".")
	if format_override:
		extension = format_override.lower()
	if extension in ("svg", "png", "pdf"):
		return extension
	raise ValueError(
		"Output format could not be determined; use format=svg|png|pdf or a matching filename."
	)


#============================================
def _style_overrides(style, clone_markers):
	overrides = dict(style or {})
	if not clone_markers:
		overrides["clone_markers"] = False
	return overrides


#============================================
def diagram_to_ops(diagram, padding=render_config.DEFAULT_PADDING, clone_markers=True, style=None, measurer=None):
	"""Run one render pass; return (ops, canvas_width, canvas_height)."""
	transform, width, height = transform_with_padding(diagram.bounds, padding)
	ops = renderer.render_diagram(
		diagram, transform, style=_style_overrides(style, clone_markers), measurer=measurer,
	)
	return ops, width, height


#============================================
def _number(value):
	return ("%.3f" % value).rstrip("0").rstrip(".")


#============================================
def ops_to_svg_text(ops, width, height, background="#ffffff"):
	doc = dom.Document()
	top = dom_extensions.elementUnder(doc, "svg", attributes=(
		("xmlns", "http://www.w3.org/2000/svg"),
		("version", "1.1"),
		("width", _number(width)),
		("height", _number(height)),
		("viewBox", "0 0 %s %s" % (_number(width), _number(height))),
	))
	dom_extensions.elementUnder(top, "rect", attributes=(
		("x", "0"),
		("y", "0"),
		("width", _number(width)),
		("height", _number(height)),
		("fill", render_ops.color_to_hex(background)),
	))
	render_ops.ops_to_svg(top, ops)
	xml_str = doc.toprettyxml(indent="  ", encoding="utf-8").decode("utf-8")
	# toprettyxml leaves blank lines behind
	lines = [line for line in xml_str.split("\n") if line.strip()]
	return "\n".join(lines) + "\n"


#============================================
def _paint_background(context, background):
	rgb = render_ops.color_to_rgb(background)
	if rgb is None:
		return
	context.set_source_rgb(*rgb)
	context.paint()


#============================================
def _ops_to_cairo_file(ops, filename, output_format, width, height, background):
	if output_format == "png":
		surface = cairo.ImageSurface(cairo.FORMAT_ARGB32, int(math.ceil(width)), int(math.ceil(height)))
	elif output_format == "pdf":
		surface = cairo.PDFSurface(filename, width, height)
	else:
		raise ValueError(f"Unknown cairo format: {output_format}")
	context = cairo.Context(surface)
	_paint_background(context, background)
	render_ops.ops_to_cairo(context, ops)
	if output_format == "png":
		surface.write_to_png(filename)
	surface.finish()


#============================================
def ops_to_output(ops, filename, width, height, format=None, background="#ffffff"):
	"""Replay an op list into filename; the format follows its extension."""
	output_format = _resolve_format(filename, format)
	if output_format == "svg":
		svg_text = ops_to_svg_text(ops, width, height, background=background)
		with open(filename, "w", encoding="utf-8") as handle:
			handle.write(svg_text)
		return filename
	_ops_to_cairo_file(ops, filename, output_format, width, height, background)
	return filename


#============================================
def diagram_to_output(diagram, filename, format=None, padding=render_config.DEFAULT_PADDING,
		clone_markers=True, style=None, measurer=None):
	"""Render a diagram to SVG, PNG or PDF using a single entry point."""
	return diagram_to_outputs(
		diagram, [filename], formats=[format], padding=padding,
		clone_markers=clone_markers, style=style, measurer=measurer,
	)[0]


#============================================
def diagram_to_outputs(diagram, filenames, formats=None, padding=render_config.DEFAULT_PADDING,
		clone_markers=True, style=None, measurer=None):
	"""Render once and replay the same ops into every file of filenames."""
	filenames = list(filenames)
	if formats is None:
		formats = [None] * len(filenames)
	# resolve every format before writing anything
	resolved_formats = [_resolve_format(name, fmt) for name, fmt in zip(filenames, formats)]
	ops, width, height = diagram_to_ops(
		diagram, padding=padding, clone_markers=clone_markers, style=style, measurer=measurer,
	)
	background = render_config.resolve_style(style)["background_color"]
	written = []
	for filename, output_format in zip(filenames, resolved_formats):
		written.append(ops_to_output(ops, filename, width, height, format=output_format, background=background))
	return written
