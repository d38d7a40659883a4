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


import sys
from math import isfinite
from numbers import Real
from traceback import format_exc

def logError():
    "Print error message to stderr"
    print(format_exc(), file=sys.stderr)

def validSize(size, name="size"):
    "Check that a (width, height) pair is positive and finite"
    w, h = size
    for x in w, h:
        if isinstance(x, bool) or not isinstance(x, Real):
            raise TypeError("{} must contain real numbers, not {!r}".format(name, x))
        if not (isfinite(x) and x > 0):
            raise ValueError("{} must be positive and finite; got {}x{}".format(name, w, h))
    return w, h

def clamp(x, lo, hi):
    "Restrict a value to the closed interval [lo, hi]"
    return lo if x < lo else hi if x > hi else x
