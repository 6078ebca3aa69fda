#!/usr/bin/env python3

"""
Machine Debugger

If enabled, this will log information before each instruction executed:
    * All 16 of the [V] registers, starting with most significant (Vf) and
      reducing to least significant (V0)
    * I  - Index register
    * DT - Delay timer
    * ST - Sound timer
    * IP - Program counter (already pointing past the instruction)
    * OP - OpCode number
    * IN - Decoded instruction

If a crash occurs, all of the above will be logged, with the addition of:
    * SP    - Stack depth
    * Stack - Stack contents
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import logging

logger = logging.getLogger(__name__)


class Debugger:
    def __init__(self):
        self.live = False

    def debug(self, state, instruction, verbose=False):
        debug_str = (
            "V: 0x" + ("{:02x}" * 16) + " I: 0x{:04x} DT: 0x{:02x} ST: 0x{:02x} IP: 0x{:03x} OP: 0x{:04x} IN: {}"
        ).format(
            *[state.v[reg_num] for reg_num in range(15, -1, -1)] +
            [state.i, state.delay, state.sound, state.ip, state.opcode, instruction]
        )

        if verbose:
            stack_items = state.stack.get_items()
            stack_str = (" 0x{:03x}" * len(stack_items)).format(*stack_items)
            debug_str += "\nSP: {}".format(state.sp)
            debug_str += "\nStack:{}".format(stack_str or " (Empty)")

        return debug_str

    def set_live(self, enabled):
        self.live = enabled

    def is_live(self):
        return self.live

    def output(self, state, instruction):
        logger.debug(self.debug(state, instruction))
