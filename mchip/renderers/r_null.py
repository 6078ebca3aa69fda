#!/usr/bin/env python3

"""
Null Renderer Plugin

This serves as a base class for other rendering plugins.

The machine never pushes pixels here.  A sprite draw just calls
request_redraw(), and the runner later hands over the screen so the renderer
can paint it, at most once per host frame.

This module can be used on its own as a Renderer plugin if you only want to see
debug output.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"


class RendererError(Exception):
    pass


class Renderer:
    def __init__(self, scale=None, **kwargs):  # pylint: disable=unused-argument
        self.scale = 1 if scale is None else scale
        self.redraw_pending = False
        self.frames_drawn = 0

    def request_redraw(self):
        self.redraw_pending = True

    def refresh_display(self, screen):
        # Returns True if anything was painted
        if not self.redraw_pending:
            return False

        self.redraw_pending = False
        self.draw_screen(screen)
        self.frames_drawn += 1
        return True

    def draw_screen(self, screen):
        pass

    def set_title(self, title):
        pass

    def shutdown(self):
        pass
