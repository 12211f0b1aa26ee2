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

"""Small helpers over xml.dom.minidom trees."""


#============================================
def elementUnder(parent, name, attributes=()):
	"""Create element name, append it to parent and return it.

	attributes is a sequence of (name, value) pairs applied in order.
	"""
	document = parent.ownerDocument or parent
	element = document.createElement(name)
	parent.appendChild(element)
	for key, value in attributes:
		element.setAttribute(key, value)
	return element


#============================================
def textOnlyElementUnder(parent, name, text, attributes=()):
	element = elementUnder(parent, name, attributes)
	document = parent.ownerDocument or parent
	element.appendChild(document.createTextNode(text))
	return element


#============================================
def elementsByLocalName(node, name):
	"""All descendants called name, whatever namespace they live in."""
	return node.getElementsByTagNameNS("*", name)


#============================================
def childElementsByLocalName(node, name):
	"""Direct element children called name, in document order."""
	found = []
	for child in node.childNodes:
		if child.nodeType != child.ELEMENT_NODE:
			continue
		if (child.localName or child.nodeName) == name:
			found.append(child)
	return found


#============================================
def firstChildElement(node, name):
	children = childElementsByLocalName(node, name)
	if children:
		return children[0]
	return None
