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


import pygame
import pygame.display as _pd
from pygame.transform import scale as _scale, smoothscale as _smoothscale
from pixcanvas.viewport import ViewportMapper
from pixcanvas.util import validSize, logError

# pygame 1.9 <--> 2.0 compatibility
SIZECHANGED = getattr(pygame, "WINDOWSIZECHANGED", None)


class FixedCanvas:
    """An off-screen surface with a fixed size that is drawn scaled and
    centred onto a screen of any size. Draw onto 'surface' using canvas
    coordinates, then call 'drawTo' once per frame; use 'mousePosition'
    to read the pointer in canvas coordinates."""
    smooth = False
    barColor = "black"
    minScale = 0
    frameRate = 60
    quit = False
    frameCount = 0

    def __init__(self, size=(800,600), bg="white"):
        w, h = validSize(size, "Canvas size")
        self._srf = pygame.Surface((max(1, round(w)), max(1, round(h))))
        self._mapper = ViewportMapper(*self._srf.get_size())
        self.bg = bg
        self.clear()

    def __str__(self):
        return "<{} {}x{}>".format(type(self).__name__, *self.size)

    @property
    def surface(self): return self._srf

    @property
    def mapper(self): return self._mapper

    @property
    def size(self): return self._srf.get_size()

    @property
    def width(self): return self.size[0]

    @property
    def height(self): return self.size[1]

    def clear(self):
        "Fill the canvas with its background colour"
        if self.bg is not None: self._srf.fill(self.bg)
        return self

    def placement(self, size):
        "Destination rectangle of the scaled canvas; None if it cannot be drawn"
        m = self._mapper
        s = m.computeScale(*size)
        if s <= 0 or s < self.minScale: return None
        left, top, w, h = m.computePlacement(*size)
        r = pygame.Rect(round(left), round(top), round(w), round(h))
        return r if r.width > 0 and r.height > 0 else None

    def drawTo(self, screen, size=None):
        "Draw the canvas scaled to fit and centred on the screen surface"
        if size is None: size = screen.get_size()
        r = self.placement(size)
        if r is None: return None
        c = self.barColor
        if c is not None:
            screen.fill(c, pygame.Rect((0,0), (round(size[0]), round(size[1]))))
        srf = self._srf
        if r.size != srf.get_size():
            srf = (_smoothscale if self.smooth else _scale)(srf, r.size)
        screen.blit(srf, r.topleft)
        return r

    def mousePosition(self, pos=None, size=None):
        "Mouse position in canvas coordinates"
        if pos is None: pos = pygame.mouse.get_pos()
        if size is None:
            srf = _pd.get_surface()
            if srf is None:
                raise pygame.error("No display mode has been set; pass the display size explicitly")
            size = srf.get_size()
        return self._mapper.mapPhysicalToLogical(pos[0], pos[1], *size)

# Drawing / event loop

    def play(self, ondraw=None, onevent=None, caption="pixcanvas", size=None, mode=True):
        "Initialize pygame and run the main drawing / event handling loop"
        if not pygame.get_init(): pygame.init()
        self._clock = pygame.time.Clock()
        _pd.set_caption(caption)
        if size is None: size = self.size
        self._mode = pygame.RESIZABLE if mode is True else int(mode)
        _pd.set_mode(size, self._mode)
        self.quit = False
        self.frameCount = 0
        while not self.quit:
            try:
                self.frameCount += 1
                if ondraw: ondraw(self)
                self.drawTo(_pd.get_surface())
                _pd.flip()
                self._clock.tick(self.frameRate)
                self._evHandle(onevent)
            except Exception: logError()
        pygame.quit()
        return self

    def _evHandle(self, onevent):
        "Handle events in the pygame event queue"
        for ev in pygame.event.get():
            try:
                if ev.type == pygame.QUIT: self.quit = True
                elif ev.type in (pygame.VIDEORESIZE, SIZECHANGED):
                    size = ev.size if hasattr(ev, "size") else (ev.x, ev.y)
                    if size != _pd.get_surface().get_size():
                        _pd.set_mode(size, self._mode)
                if onevent: onevent(self, ev)
            except Exception: logError()
