#!/usr/bin/env python3

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import unittest
from mchip.decoder import DecodeError
from mchip.engine import Engine
from mchip.inputs.i_null import Inputs
from mchip.renderers.r_null import Renderer
from mchip.runner import Runner


class QuittingInputs(Inputs):
    def process_messages(self):
        return True


class TestRunner(unittest.TestCase):
    def setUp(self):
        self.inputs = Inputs()
        self.renderer = Renderer()
        self.engine = Engine(self.inputs, self.renderer)
        self.engine.load_rom(b"\x12\x00")  # JP 0x200 forever

    def _runner(self, inputs=None):
        return Runner(self.engine, self.inputs if inputs is None else inputs, self.renderer, clock_speed=0)

    def test_runner_max_ops(self):
        runner = self._runner()
        runner.run(max_ops=100)
        self.assertEqual(100, runner.total_ops)
        self.assertEqual(0x200, self.engine.state.ip)

    def test_runner_quit(self):
        runner = self._runner(QuittingInputs())
        runner.run(max_ops=100)
        self.assertEqual(0, runner.total_ops)

    def test_runner_ticks_timers(self):
        self.engine.state.delay = 10
        self._runner().run(max_ops=1)
        self.assertLess(self.engine.state.delay, 10)

    def test_runner_pause_and_resume(self):
        self.engine.load_rom(b"\x6A\x05\x7A\x03\x12\x04")
        self.inputs.toggle_pause()

        with self.assertLogs("mchip.runner", level="INFO"):
            self._runner().run(max_ops=5)

        self.assertTrue(self.engine.is_idle())
        self.assertEqual(0x200, self.engine.state.ip)
        self.assertEqual(0, self.engine.state.v[0xA])

        self.inputs.toggle_pause()
        self._runner().run(max_ops=5)
        self.assertFalse(self.engine.is_idle())
        self.assertEqual(8, self.engine.state.v[0xA])

    def test_runner_fatal_error(self):
        self.engine.load_rom(b"\x01\x23")

        with self.assertLogs("mchip.runner", level="ERROR") as logs:
            self.assertRaises(DecodeError, self._runner().run, 10)

        self.assertIn("Emulation halted", logs.output[0])
        self.assertIn("Stack: (Empty)", logs.output[0])

    def test_runner_clock_speed(self):
        self.assertIsNone(Runner(self.engine, self.inputs, self.renderer).core_interval)
        self.assertAlmostEqual(0.002, Runner(self.engine, self.inputs, self.renderer, clock_speed=500).core_interval)
