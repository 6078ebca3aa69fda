#!/usr/bin/env python3

"""
Fetch-Decode-Execute Engine

Owns the machine state for as long as a program runs, and exposes the steps a
host scheduler drives: fetch, decode and execute (or all three via cycle), plus
a separate timer tick meant to be called at 60Hz.

The engine is either running or idle.  While idle, fetch does nothing and decode
hands back a placeholder instruction that does nothing, but timers still tick.
Only idle() and resume() switch between the two.

Loading a ROM always rebuilds the whole state from scratch.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import logging
from .constants import GLYPH_LOC, GLYPHS, MEM_MASK, PROGRAM_LOC
from .debugger import Debugger
from .decoder import Decoder
from .hostio import Peripherals
from .instructions import IDLE, Instruction
from .state import MachineState

MODE_RUNNING = "running"
MODE_IDLE = "idle"

logger = logging.getLogger(__name__)


class LoadError(Exception):
    pass


class Engine:
    def __init__(self, inputs, renderer, random_byte=None, debugger=None):
        self.peripherals = Peripherals(inputs, renderer, random_byte)
        self.debugger = Debugger() if debugger is None else debugger
        self.state = None
        self.decoder = None
        self.mode = MODE_RUNNING
        self.bootstrap()

    def bootstrap(self):
        self.state = MachineState()
        self.state.memory.write_block(GLYPH_LOC, GLYPHS)
        self.decoder = Decoder(self.state, self.peripherals)
        self.mode = MODE_RUNNING

    def load_rom(self, rom):
        # Refuse before touching anything, so a bad ROM never leaves a half-loaded machine behind
        if not self.state.memory.fits(PROGRAM_LOC, len(rom)):
            raise LoadError(
                "ROM is {} bytes, but only {} bytes are available from 0x{:03x}".format(
                    len(rom), self.state.memory.mem_size - PROGRAM_LOC, PROGRAM_LOC
                )
            )

        self.bootstrap()
        self.state.memory.write_block(PROGRAM_LOC, rom)
        logger.info("Loaded %d byte ROM at 0x%03x", len(rom), PROGRAM_LOC)

    def idle(self):
        self.mode = MODE_IDLE

    def resume(self):
        self.mode = MODE_RUNNING

    def is_idle(self):
        return self.mode == MODE_IDLE

    def fetch(self):
        if self.mode == MODE_IDLE:
            return

        # Big-endian word.  Addresses wrap at the top of memory.
        state = self.state
        ip = state.ip
        state.opcode = (state.memory.read(ip & MEM_MASK) << 8) | state.memory.read((ip + 1) & MEM_MASK)

    def decode(self):
        if self.mode == MODE_IDLE:
            return Instruction(IDLE, self.state, self.peripherals)

        return self.decoder.decode(self.state.opcode)

    def execute(self, instruction):
        if self.debugger.is_live():
            self.debugger.output(self.state, instruction)

        instruction.execute()

    def cycle(self):
        self.fetch()
        self.execute(self.decode())

    def tick_timers(self):
        state = self.state

        if state.delay > 0:
            state.delay -= 1

        if state.sound > 0:
            state.sound -= 1
