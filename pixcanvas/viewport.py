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


from math import floor
from pixcanvas.util import validSize, clamp


class ViewportMapper:
    """Fit a fixed-size logical canvas inside a physical display area.

    The canvas is scaled uniformly by the largest factor that keeps it
    entirely inside the display, then centred; the unused area forms
    symmetric letterbox (top/bottom) or pillarbox (left/right) bars.
    Every query takes the current physical width and height, so a single
    mapper serves a window that is resized from frame to frame.

    A display with zero or negative width/height is not an error: the
    methods return the corresponding zero or negative values and callers
    should check 'displayable' (or a positive scale) before drawing."""

    __slots__ = "_size",

    def __init__(self, width, height):
        object.__setattr__(self, "_size", validSize((width, height), "Logical size"))

    def __setattr__(self, name, value):
        raise AttributeError("{} is immutable".format(type(self).__name__))

    def __reduce__(self): return type(self), self._size

    def __repr__(self):
        return "<{} {}x{}>".format(type(self).__name__, *self._size)

    def __eq__(self, other):
        if isinstance(other, ViewportMapper): return self._size == other._size
        return NotImplemented

    def __hash__(self): return hash((ViewportMapper, self._size))

# Metrics

    @property
    def size(self): return self._size

    @property
    def logicalWidth(self): return self._size[0]

    @property
    def logicalHeight(self): return self._size[1]

    @property
    def aspectRatio(self):
        w, h = self._size
        return w / h

# Scaling

    def scaleFactors(self, width, height):
        "Horizontal and vertical factors that would fill the display exactly"
        w, h = self._size
        return width / w, height / h

    def computeScale(self, width, height):
        "Largest uniform scale factor for which the canvas fits the display"
        return min(self.scaleFactors(width, height))

    def displayable(self, width, height):
        return self.computeScale(width, height) > 0

    def _placement(self, width, height, scale):
        w, h = self._size
        w *= scale
        h *= scale
        return (width - w) / 2, (height - h) / 2, w, h

    def computeScaledSize(self, width, height):
        "Size of the canvas after scaling to fit the display"
        return self.computePlacement(width, height)[2:]

    def computePadding(self, width, height):
        "Left and top padding that centre the scaled canvas"
        return self.computePlacement(width, height)[:2]

    def computePlacement(self, width, height):
        "Return (left, top, width, height) of the canvas on the display"
        return self._placement(width, height, self.computeScale(width, height))

# Coordinate mapping

    def mapPhysicalToLogical(self, x, y, width, height):
        """Convert a display position (e.g. the mouse) to canvas pixel coordinates;
        positions in the padding bars are clamped to the nearest canvas edge"""
        s = self.computeScale(width, height)
        if s <= 0: return 0, 0
        left, top = self._placement(width, height, s)[:2]
        w, h = self._size
        return (floor(clamp((x - left) / s, 0, w)),
            floor(clamp((y - top) / s, 0, h)))

    def mapLogicalToPhysical(self, x, y, width, height):
        "Convert canvas coordinates to a display position"
        s = self.computeScale(width, height)
        left, top = self._placement(width, height, s)[:2]
        return left + x * s, top + y * s
