#!/usr/bin/env python3

"""
Machine State

Everything an instruction can change lives here: memory, the V registers, the
index register (I), the program counter (IP), the call stack, both timers, the
screen and the most recently fetched opcode.

There is no hidden or derived state.  A new object is always fully zeroed,
apart from the program counter, which points at the start of program space.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import MEM_SIZE, NUM_REGISTERS, PROGRAM_LOC, STACK_SIZE
from .framebuffer import Framebuffer
from .ram import RAM
from .stack import Stack


class MachineState:
    def __init__(self):
        self.memory = RAM(MEM_SIZE)
        self.v = memoryview(bytearray(NUM_REGISTERS))  # Assignments over 0xFF raise, so callers must mask
        self.i = 0  # Index register
        self.ip = PROGRAM_LOC
        self.stack = Stack(STACK_SIZE)
        self.delay = 0
        self.sound = 0
        self.screen = Framebuffer()
        self.opcode = 0

    @property
    def sp(self):
        return self.stack.sp
