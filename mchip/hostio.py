#!/usr/bin/env python3

"""
Host I/O Functionality

Handles loading ROM binaries from the host, and bundles together the host-side
collaborators (keypad, display presenter, random number source) that a small
number of instructions need to reach.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from random import randint
from .constants import BYTE_MASK


def random_byte():
    return randint(0, BYTE_MASK)


class Loader:
    def load_binary(self, filename):
        with open(filename, "rb") as f:
            return f.read()


class Peripherals:
    def __init__(self, inputs, renderer, random_source=None):
        self.inputs = inputs
        self.renderer = renderer
        # Any zero-argument callable returning 0-255 will do, so tests can supply a fixed sequence
        self.random_byte = random_byte if random_source is None else random_source
