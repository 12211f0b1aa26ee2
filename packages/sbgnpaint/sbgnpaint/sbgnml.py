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

"""SBGN-ML reader producing a Diagram.

Elements are matched by local name, so documents of any SBGN-ML schema
version (or with no namespace at all) read the same way.
"""

# Standard Library
import math
import xml.parsers.expat

# Third Party
import defusedxml

# local repo modules
from . import dom_extensions as dom_ext
from . import safe_xml
from .model import Arc
from .model import BBox
from .model import Diagram
from .model import Glyph
from .model import SbgnInputError


#============================================
def _parse_float(value):
	"""Parse a finite decimal coordinate, or return None."""
	if value is None or value == "" or "_" in value:
		return None
	try:
		number = float(value)
	except ValueError:
		return None
	if not math.isfinite(number):
		return None
	return number


#============================================
def _optional_attribute(element, name):
	if not element.hasAttribute(name):
		return None
	return element.getAttribute(name)


#============================================
def _point(element):
	x = _parse_float(_optional_attribute(element, "x"))
	y = _parse_float(_optional_attribute(element, "y"))
	if x is None or y is None:
		return None
	return (x, y)


#============================================
def _parse_bbox(element, glyph_id):
	if element is None:
		return None
	values = [_parse_float(_optional_attribute(element, name)) for name in ("x", "y", "w", "h")]
	if None in values:
		raise SbgnInputError("Bad bbox coordinates on glyph %r" % glyph_id)
	return BBox(*values)


#============================================
def _read_glyph(element, parent_id, glyphs):
	"""Append the glyph for element, then its nested glyphs, to glyphs."""
	glyph_id = element.getAttribute("id")
	label = ""
	label_el = dom_ext.firstChildElement(element, "label")
	if label_el is not None:
		label = label_el.getAttribute("text").replace("\r", "")
	ports = []
	for port_el in dom_ext.childElementsByLocalName(element, "port"):
		point = _point(port_el)
		if point is not None:
			ports.append(point)
	state_value = None
	state_variable = None
	state_el = dom_ext.firstChildElement(element, "state")
	if state_el is not None:
		state_value = _optional_attribute(state_el, "value")
		state_variable = _optional_attribute(state_el, "variable")
	glyphs.append(Glyph(
		glyph_id=glyph_id,
		class_name=element.getAttribute("class"),
		parent_id=parent_id,
		bbox=_parse_bbox(dom_ext.firstChildElement(element, "bbox"), glyph_id),
		label=label,
		ports=tuple(ports),
		has_clone=dom_ext.firstChildElement(element, "clone") is not None,
		state_value=state_value,
		state_variable=state_variable,
		orientation=_optional_attribute(element, "orientation"),
	))
	for child_el in dom_ext.childElementsByLocalName(element, "glyph"):
		_read_glyph(child_el, glyph_id, glyphs)


#============================================
def _required_point(arc_el, name):
	element = dom_ext.firstChildElement(arc_el, name)
	if element is None:
		raise SbgnInputError("Arc missing %s" % name)
	point = _point(element)
	if point is None:
		raise SbgnInputError("Bad arc %s coordinates" % name)
	return point


#============================================
def _read_arc(arc_el):
	points = [_required_point(arc_el, "start")]
	for next_el in dom_ext.childElementsByLocalName(arc_el, "next"):
		point = _point(next_el)
		if point is not None:
			points.append(point)
	points.append(_required_point(arc_el, "end"))
	return Arc(class_name=arc_el.getAttribute("class"), points=tuple(points))


#============================================
def document_to_diagram(doc):
	"""Build a Diagram from a parsed SBGN-ML DOM document.

	Raises:
		SbgnInputError: On a missing map, a malformed bbox, a bad arc
			endpoint or a diagram without any coordinates.
	"""
	maps = dom_ext.elementsByLocalName(doc, "map")
	if not maps:
		raise SbgnInputError("SBGN file missing map element")
	glyphs = []
	for glyph_el in dom_ext.childElementsByLocalName(maps[0], "glyph"):
		_read_glyph(glyph_el, None, glyphs)
	arcs = [_read_arc(arc_el) for arc_el in dom_ext.elementsByLocalName(doc, "arc")]
	return Diagram.build(glyphs, arcs)


#============================================
def _parse(parser, source):
	try:
		return parser(source)
	except (xml.parsers.expat.ExpatError, defusedxml.DefusedXmlException) as exc:
		raise SbgnInputError("Failed to parse SBGN XML: %s" % exc) from exc


#============================================
def read_sbgnml(text):
	"""Read SBGN-ML from a str or bytes document."""
	return document_to_diagram(_parse(safe_xml.parse_dom_from_string, text))


##################################################
# MODULE INTERFACE

reads_text = 1
reads_files = 1

#============================================
def text_to_diagram(text):
	return read_sbgnml(text)


#============================================
def file_to_diagram(f):
	return read_sbgnml(f.read())


#============================================
def path_to_diagram(path):
	return document_to_diagram(_parse(safe_xml.parse_dom_from_file, path))

#
##################################################
