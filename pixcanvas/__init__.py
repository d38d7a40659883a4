# Copyright 2026 The pixcanvas authors
#
# This file is part of "pixcanvas".
#
# "pixcanvas" is free software: you can redistribute it and/or modify
# it under the terms of the GNU General Public License as published by
# the Free Software Foundation, either version 3 of the License, or
# (at your option) any later version.
#
# "pixcanvas" is distributed in the hope that it will be useful,
# but WITHOUT ANY WARRANTY; without even the implied warranty of
# MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
# GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License
# along with "pixcanvas".  If not, see <http://www.gnu.org/licenses/>.

"Fixed-resolution canvas scaled, letterboxed and centred on a resizable display"

version = 1, 0, 0

from pixcanvas.viewport import ViewportMapper
from pixcanvas.canvas import FixedCanvas
