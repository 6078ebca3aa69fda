#!/usr/bin/env python3

"""
Framebuffer Emulator

Programs for this system cannot write directly into video RAM.  Instead,
sprites are drawn to the screen using an XOR method, one pixel at a time, and
the screen is held here as 64x32 cells, row-major, each either 0 or 1.

Collisions (where a pixel was set, but was unset by an XOR) are reported back
to the caller so the flag register can be updated.

The framebuffer knows nothing about the host display.  A presenter reads the
cells directly whenever it is told a redraw is due.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import SCREEN_WIDTH, SCREEN_HEIGHT
from .ram import RAM


class Framebuffer():
    def __init__(self, vid_width=SCREEN_WIDTH, vid_height=SCREEN_HEIGHT):
        self.vid_width = vid_width
        self.vid_height = vid_height
        self.vid_size = vid_width * vid_height
        self.ram_bank = RAM(self.vid_size)

    @property
    def pixels(self):
        return self.ram_bank.mem

    def clear(self):
        self.ram_bank.clear()

    def get_pixel(self, x, y):
        return self.ram_bank.read(y * self.vid_width + x)

    def xor_pixel(self, x, y):
        # Returns True if a set pixel was erased.  Both axes wrap.
        x %= self.vid_width
        y %= self.vid_height
        vram_loc = y * self.vid_width + x
        pixel = self.ram_bank.read(vram_loc)
        self.ram_bank.write(vram_loc, pixel ^ 1)

        return pixel != 0

    def get_vid_size(self):
        return self.vid_width, self.vid_height
