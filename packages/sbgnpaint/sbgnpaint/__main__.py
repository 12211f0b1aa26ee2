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
import sys

# local repo modules
from .cli import main


sys.exit(main())
