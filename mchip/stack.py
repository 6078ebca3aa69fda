#!/usr/bin/env python3

"""
Stack Emulator

The call stack lives outside RAM, as there is no specified location for it and
programs have no way to address it.  It is a fixed array of 16 return
addresses plus a depth counter (SP), matching the machine's register model.

Overflow and underflow are fatal.  They have their own exception types so a
host can tell them apart.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

from .constants import STACK_SIZE, WORD_MASK


class StackError(Exception):
    pass


class StackOverflowError(StackError):
    pass


class StackUnderflowError(StackError):
    pass


class Stack:
    def __init__(self, size=STACK_SIZE):
        self.items = [0] * size
        self.size = size
        self.sp = 0

    def push(self, item):
        if self.sp >= self.size:
            raise StackOverflowError("Stack overflow")

        self.items[self.sp] = item & WORD_MASK
        self.sp += 1

    def pop(self):
        if self.sp <= 0:
            raise StackUnderflowError("Stack underflow")

        self.sp -= 1
        return self.items[self.sp]

    def get_items(self):
        # For debugging
        return self.items[:self.sp]
