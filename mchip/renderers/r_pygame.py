#!/usr/bin/env python3

"""
PyGame Renderer Plugin

Draws the monochrome screen onto an SDL window surface via PyGame.  The surface
is allocated at the machine's native 64x32 size, and then the contents are
stretched (in the correct aspect ratio using 'Nearest Neighbour' translation)
to fit the window itself.  This means we don't have to draw the same pixel
multiple times.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import pygame
from .r_null import RendererError, Renderer as RendererBase
from ..constants import APP_NAME

# Background, then foreground
DEFAULT_PALETTE = "222222,DDDDDD"


class Renderer(RendererBase):
    def __init__(self, scale=None, palette=None, **kwargs):
        if scale is None:
            scale = 512  # Default window width if not supplied, or set to default

        pygame.display.init()
        self.set_title(APP_NAME)
        self.scaled_size = (scale, scale // 2)
        self.display_surface = pygame.display.set_mode(self.scaled_size)
        self.rgb_buffer = None
        self.rgb_map = self._parse_palette(DEFAULT_PALETTE if palette is None else palette)
        super().__init__(scale, **kwargs)

    def _parse_palette(self, palette):
        palette_split = palette.split(",")

        if len(palette_split) != 2:
            raise RendererError("Exactly two palette colours are needed: background and foreground.")

        rgb_map = []

        for colour in palette_split:
            if len(colour) != 6:
                raise RendererError("Palette colours must all be 6 hex digits long.")

            try:
                rgb = int(colour, 16)
            except ValueError:
                raise RendererError("Invalid palette colour defined.") from None

            # Split compound RGB values for faster byte-based lookup later
            rgb_map.append(bytes((rgb >> 16, (rgb >> 8) & 0xFF, rgb & 0xFF)))

        return rgb_map

    def draw_screen(self, screen):
        width, height = screen.get_vid_size()
        rgb_map = self.rgb_map

        # Blit the bytes straight to the surface rather than setting pixels one at a time
        self.rgb_buffer = b"".join(rgb_map[pixel] for pixel in screen.pixels)
        render_surface = pygame.image.frombuffer(self.rgb_buffer, (width, height), "RGB")
        scaled_win = pygame.transform.scale(render_surface, self.scaled_size)
        self.display_surface.blit(scaled_win, (0, 0))
        pygame.display.flip()

    def set_title(self, title):
        pygame.display.set_caption(title)

    def shutdown(self):
        # PyGame currently segfaults if display.quit is called via __del__
        pygame.display.quit()
        super().shutdown()
