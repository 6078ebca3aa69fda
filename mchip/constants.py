#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

# App identification
APP_NAME = "MonoChip Virtual Machine"
APP_VERSION = "1.0.0"
APP_COPYRIGHT = "Copyright (C) 2022 Gregory Maynard-Hoare, licensed under GNU Affero General Public License v3.0"
APP_INTRO = "{} V{} -- ".format(APP_NAME, APP_VERSION)

# Memory layout
MEM_SIZE = 0x1000      # 4K of byte cells
MEM_MASK = MEM_SIZE - 1
GLYPH_LOC = 0x000      # Built-in hex digit sprites sit at the very bottom of the reserved area
PROGRAM_LOC = 0x200    # First address available to programs

# Register widths
BYTE_MASK = 0xFF
WORD_MASK = 0xFFFF
NUM_REGISTERS = 0x10
FLAG_REGISTER = 0xF

# Call stack depth
STACK_SIZE = 16

# Monochrome display
SCREEN_WIDTH = 64
SCREEN_HEIGHT = 32
SCREEN_PIXELS = SCREEN_WIDTH * SCREEN_HEIGHT

# Timers count down at this rate, regardless of CPU speed
TIMER_FREQ = 60.0
DISPLAY_FREQ = 60.0
DEFAULT_CLOCK_SPEED = 700

# Glyphs for hexadecimal digits 0-F.  Each is 5 rows of 4 pixels, stored in the high nibble of each byte
GLYPH_HEIGHT = 5
GLYPHS = bytes((
    0xF0, 0x90, 0x90, 0x90, 0xF0,  # 0
    0x20, 0x60, 0x20, 0x20, 0x70,  # 1
    0xF0, 0x10, 0xF0, 0x80, 0xF0,  # 2
    0xF0, 0x10, 0xF0, 0x10, 0xF0,  # 3
    0x90, 0x90, 0xF0, 0x10, 0x10,  # 4
    0xF0, 0x80, 0xF0, 0x10, 0xF0,  # 5
    0xF0, 0x80, 0xF0, 0x90, 0xF0,  # 6
    0xF0, 0x10, 0x20, 0x40, 0x40,  # 7
    0xF0, 0x90, 0xF0, 0x90, 0xF0,  # 8
    0xF0, 0x90, 0xF0, 0x10, 0xF0,  # 9
    0xF0, 0x90, 0xF0, 0x90, 0x90,  # A
    0xE0, 0x90, 0xE0, 0x90, 0xE0,  # B
    0xF0, 0x80, 0x80, 0x80, 0xF0,  # C
    0xE0, 0x90, 0x90, 0x90, 0xE0,  # D
    0xF0, 0x80, 0xF0, 0x80, 0xF0,  # E
    0xF0, 0x80, 0xF0, 0x80, 0x80   # F
))

# Default mappings for keys 0-F, later populated into a dictionary.  Note that the keyscans (on a UK QWERTY keyboard)
# and ASCII characters for these are the same code
DEFAULT_KEYMAP = "120,49,50,51,113,119,101,97,115,100,122,99,52,114,102,118"

# Startup
SUPPORTED_RENDERERS = ["pygame", "null"]
LOG_LEVELS = ["debug", "info", "warning", "error"]
