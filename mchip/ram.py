#!/usr/bin/env python3

"""
RAM Emulator

Supports reading and writing of blocks of memory or individual bytes.  The
machine only ever has a single 4K bank, but the size can be chosen for tests.

Accesses outside the bank are programming errors in the caller, so they raise
rather than wrap.  Instructions reduce their addresses before they get here.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEM_SIZE


class RAMError(Exception):
    pass


class RAM:
    def __init__(self, mem_size=MEM_SIZE):
        self.mem = memoryview(bytearray(mem_size))
        self.mem_top = mem_size - 1
        self.mem_size = mem_size

    def read(self, location):
        self.check_overflow(location)
        return self.mem[location]

    def read_block(self, location, size=1):
        self.check_overflow(location + size - 1)
        return self.mem[location:location + size]

    def write(self, location, byte):
        self.check_overflow(location)
        self.mem[location] = byte

    def write_block(self, location, block):
        block_size = len(block)
        block_top = location + block_size
        self.check_overflow(block_top - 1)
        self.mem[location:block_top] = block

    def check_overflow(self, location):
        if location < 0 or location > self.mem_top:
            raise RAMError("Memory access out of range at 0x{:04x}".format(location))

    def fits(self, location, size):
        # Non-raising check, so loaders can refuse data before touching anything
        return location >= 0 and location + size <= self.mem_size

    def clear(self):
        self.mem[:] = bytes(self.mem_size)
