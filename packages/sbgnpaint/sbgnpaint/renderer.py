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

"""Whole-diagram render pass producing one render-op list."""

# local repo modules
from . import arcs
from . import node_renderer
from . import render_config
from . import text_layout


#============================================
def render_diagram(diagram, transform, style=None, measurer=None):
	"""Return every render op of diagram, in drawing order.

	Glyph trees come first, then boxed overlay glyphs, then arcs on top.

	Args:
		diagram: Diagram to draw.
		transform: Transform from data space to pixels.
		style: Optional style overrides, see render_config.DEFAULT_STYLE.
		measurer: Text measurer; a cairo-backed one when omitted.

	Returns:
		list: Render ops ready for ops_to_cairo or ops_to_svg.
	"""
	resolved = render_config.resolve_style(style)
	if measurer is None:
		measurer = text_layout.CairoTextMeasurer()
	context = node_renderer.RenderContext(
		diagram=diagram,
		transform=transform,
		style=resolved,
		measurer=measurer,
	)
	ops = node_renderer.diagram_glyph_ops(context)
	metrics = arcs.ArcMetrics.from_transform(transform, resolved)
	for arc in diagram.arcs:
		ops.extend(arcs.arc_ops(arc, transform, metrics, resolved))
	return ops
