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

"""Command-line entry point: sbgnpaint draw_sbgnml ..."""

# Standard Library
import argparse
import os
import sys

# local repo modules
from . import render_config
from . import render_ops
from . import render_out
from . import sbgnml


#============================================
def default_svg_path(output):
	return os.path.splitext(output)[0] + ".svg"


#============================================
def build_parser():
	parser = argparse.ArgumentParser(
		prog="sbgnpaint",
		description="Render SBGN-ML diagrams to PNG, SVG or PDF",
	)
	subparsers = parser.add_subparsers(dest="command", required=True)
	draw = subparsers.add_parser("draw_sbgnml", help="Render one SBGN-ML file")
	draw.add_argument(
		"--input",
		required=True,
		help="SBGN-ML file to read",
	)
	draw.add_argument(
		"--output",
		default="sbgnml.png",
		help="Output file; format follows the extension (default: sbgnml.png)",
	)
	draw.add_argument(
		"--svg",
		default=None,
		help="SVG written alongside the output (default: output path with .svg; '' to skip)",
	)
	draw.add_argument(
		"--padding",
		type=float,
		default=render_config.DEFAULT_PADDING,
		help="Margin around the content in data units (default: %(default)s)",
	)
	draw.add_argument(
		"--no-clone-markers",
		dest="clone_markers",
		action="store_false",
		help="Do not shade cloned glyphs",
	)
	draw.add_argument(
		"--style",
		default=None,
		help="JSON file of style overrides",
	)
	draw.add_argument(
		"--dump-ops",
		dest="dump_ops",
		default=None,
		help="Also write the render ops as JSON to this path",
	)
	return parser


#============================================
def _output_paths(args):
	paths = [args.output]
	svg_path = args.svg
	if svg_path is None:
		svg_path = default_svg_path(args.output)
	if svg_path and os.path.abspath(svg_path) != os.path.abspath(args.output):
		paths.append(svg_path)
	return paths


#============================================
def draw_sbgnml(args):
	style = None
	if args.style:
		style = render_config.load_style_file(args.style)
	diagram = sbgnml.path_to_diagram(args.input)
	ops, width, height = render_out.diagram_to_ops(
		diagram, padding=args.padding, clone_markers=args.clone_markers, style=style,
	)
	background = render_config.resolve_style(style)["background_color"]
	paths = []
	for path in _output_paths(args):
		paths.append(render_out.ops_to_output(ops, path, width, height, background=background))
	if args.dump_ops:
		with open(args.dump_ops, "w", encoding="utf-8") as handle:
			handle.write(render_ops.ops_to_json_text(ops))
		paths.append(args.dump_ops)
	for path in paths:
		print(f"Wrote {os.path.getsize(path)} bytes to {path}")


#============================================
def main(argv=None):
	"""CLI entry point; returns the process exit status."""
	parser = build_parser()
	args = parser.parse_args(argv)
	try:
		draw_sbgnml(args)
	except (OSError, ValueError) as exc:
		print(f"ERROR: {exc}", file=sys.stderr)
		return 1
	return 0


#============================================
if __name__ == "__main__":
	sys.exit(main())
