#!/usr/bin/env python3

"""
Opcode Decoder

Turns a 16-bit opcode into exactly one Instruction.  The first nibble picks the
instruction format.  Most formats identify an instruction outright, but 0x0,
0x8, 0xE and 0xF need a second lookup on the opcode with a format
specific mask applied, keeping the first nibble so entries cannot clash.

Anything not found in either table is fatal.  Note that 0x0 opcodes other than
00E0 and 00EE are rejected here, rather than being treated as a jump.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import WORD_MASK
from .instructions import Instruction

# Formats that map straight to an instruction
DIRECT_FORMATS = {
    0x1: "1nnn",
    0x2: "2nnn",
    0x3: "3xkk",
    0x4: "4xkk",
    0x5: "5xy0",  # Low nibble is ignored
    0x6: "6xkk",
    0x7: "7xkk",
    0x9: "9xy0",  # Low nibble is ignored
    0xA: "Annn",
    0xB: "Bnnn",
    0xC: "Cxkk",
    0xD: "Dxyn"
}

# Formats needing a second lookup, and the mask for it
MASKED_FORMATS = {
    0x0: 0xFFFF,  # Exact match
    0x8: 0xF00F,
    0xE: 0xF0FF,
    0xF: 0xF0FF
}

MASKED_INSTRUCTIONS = {
    # Instructions beginning with nibble 0x0, bitmask 0xFFFF
    0x00E0: "00E0",
    0x00EE: "00EE",
    # Instructions beginning with nibble 0x8, bitmask 0xF00F
    0x8000: "8xy0",
    0x8001: "8xy1",
    0x8002: "8xy2",
    0x8003: "8xy3",
    0x8004: "8xy4",
    0x8005: "8xy5",
    0x8006: "8xy6",
    0x8007: "8xy7",
    0x800E: "8xyE",
    # Instructions beginning with nibble 0xE/0xF, bitmask 0xF0FF
    0xE09E: "Ex9E",
    0xE0A1: "ExA1",
    0xF007: "Fx07",
    0xF00A: "Fx0A",
    0xF015: "Fx15",
    0xF018: "Fx18",
    0xF01E: "Fx1E",
    0xF029: "Fx29",
    0xF033: "Fx33",
    0xF055: "Fx55",
    0xF065: "Fx65"
}


class DecodeError(Exception):
    def __init__(self, opcode, address):
        self.opcode = opcode
        self.address = address
        super().__init__("Opcode 0x{:04x} at address 0x{:03x} is not a valid instruction.".format(opcode, address))


class Decoder:
    def __init__(self, state, peripherals):
        self.state = state
        self.peripherals = peripherals

    def decode(self, opcode):
        state = self.state
        address = state.ip

        # Point at the next instruction before this one takes effect, so jumps and calls can overwrite it
        state.ip = (address + 2) & WORD_MASK

        instr_format = (opcode & 0xF000) >> 12
        kind = DIRECT_FORMATS.get(instr_format)

        if kind is None:
            kind = MASKED_INSTRUCTIONS.get(opcode & MASKED_FORMATS[instr_format])

            if kind is None:
                raise DecodeError(opcode, address)

        return Instruction(
            kind, state, self.peripherals,
            x=(opcode & 0xF00) >> 8,
            y=(opcode & 0xF0) >> 4,
            n=opcode & 0xF,
            kk=opcode & 0xFF,
            nnn=opcode & 0xFFF
        )
