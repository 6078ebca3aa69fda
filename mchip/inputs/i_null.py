#!/usr/bin/env python3

"""
Null Input Plugin

Serves as a base class for other Input plugins.  Can be used on its own if zero
input functionality is required, such as when running headless or in tests.

Subclasses only need to keep key_down up to date.  The base class answers the
machine's key queries from it, and tracks the user's pause toggle, which the
runner turns into idle/resume signals.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from ..constants import DEFAULT_KEYMAP


class InputsError(Exception):
    pass


class Inputs:
    def __init__(self, keymap=DEFAULT_KEYMAP, renderer=None):
        self.keymap_dict = {}
        self.renderer = renderer
        self.key_down = [False] * 0x10
        self.paused = False
        keymap_split = keymap.split(",")

        if len(keymap_split) != 0x10:
            raise InputsError("Incorrect number of keys defined -- 16 required.  Use commas to split numbers")

        for key_num, key_defined in enumerate(keymap_split):
            try:
                key_defined_ord = int(key_defined)
            except ValueError:
                raise InputsError("Defined keys are not all integer values") from None

            if key_defined_ord in self.keymap_dict:
                raise InputsError("Duplicate keys defined")

            self.keymap_dict[key_defined_ord] = key_num

    def process_messages(self):
        return False  # Don't exit the program

    def is_key_down(self, key):
        return self.key_down[key]

    def get_pressed_key(self):
        # Lowest numbered key currently held, if any
        for key, down in enumerate(self.key_down):
            if down:
                return key

        return None

    def toggle_pause(self):
        self.paused = not self.paused

    def is_paused(self):
        return self.paused

    def shutdown(self):
        pass
