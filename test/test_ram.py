#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.ram import RAM, RAMError


class TestRAM(unittest.TestCase):
    def setUp(self):
        self.ram = RAM(5)

    def test_ram_init_default_size(self):
        ram = RAM()
        self.assertEqual(0x1000, ram.mem_size)
        self.assertEqual(bytes(0x1000), bytes(ram.mem))

    def test_ram_init(self):
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_write(self):
        self.ram.write(1, 255)
        self.assertEqual("00ff000000", self.ram.mem.hex())
        self.assertEqual(255, self.ram.read(1))

    def test_ram_write_block(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.ram.write_block(4, bytearray(b"\xFF"))
        self.assertEqual("00fdfe00ff", self.ram.mem.hex())
        self.assertEqual(b"\xFD\xFE", bytes(self.ram.read_block(1, 2)))

    def test_ram_byte_overflow(self):
        self.assertRaises(RAMError, self.ram.write, 5, 255)
        self.assertRaises(RAMError, self.ram.read, 5)
        self.assertRaises(RAMError, self.ram.read, -1)

    def test_ram_block_overflow(self):
        self.assertRaises(RAMError, self.ram.write_block, 4, bytearray(b"\xFE\xFF"))
        self.assertRaises(RAMError, self.ram.read_block, 4, 2)
        # Nothing should have been written
        self.assertEqual("0000000000", self.ram.mem.hex())

    def test_ram_fits(self):
        self.assertTrue(self.ram.fits(0, 5))
        self.assertTrue(self.ram.fits(3, 2))
        self.assertFalse(self.ram.fits(3, 3))
        self.assertFalse(self.ram.fits(-1, 1))

    def test_ram_clear(self):
        self.ram.write_block(1, bytearray(b"\xFD\xFE"))
        self.assertEqual("00fdfe0000", self.ram.mem.hex())
        self.ram.clear()
        self.assertEqual("0000000000", self.ram.mem.hex())
