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

"""sbgnpaint - render SBGN-ML diagrams to PNG, SVG and PDF."""

__version__ = "0.1.0"

# local repo modules
from . import arcs
from . import dom_extensions
from . import glyph_classes
from . import model
from . import node_renderer
from . import overlay
from . import render_config
from . import render_ops
from . import render_out
from . import renderer
from . import safe_xml
from . import sbgnml
from . import shape_paths
from . import text_layout
from . import transform

from .model import Arc
from .model import BBox
from .model import Diagram
from .model import Glyph
from .model import SbgnInputError
from .render_out import diagram_to_output
from .render_out import diagram_to_outputs
from .renderer import render_diagram
from .sbgnml import read_sbgnml
from .transform import Transform
from .transform import transform_with_padding
