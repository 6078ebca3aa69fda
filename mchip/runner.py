#!/usr/bin/env python3

"""
Real-time Runner

Drives an Engine against the host clock.  Three things happen on their own
cadences, all from this one thread:
    * Machine cycles, at the chosen clock speed (or as fast as possible)
    * Timer ticks, at 60Hz regardless of clock speed
    * Input polling and display refresh, at 60Hz

Input polling also picks up the user's pause toggle, which becomes an idle or
resume signal to the engine.  Timers keep ticking while paused.

Any fatal machine fault is logged with a full debug dump and then re-raised.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import logging
from time import perf_counter
from .constants import APP_NAME, DISPLAY_FREQ, TIMER_FREQ
from .decoder import DecodeError
from .stack import StackError

TIMER_INTERVAL = 1.0 / TIMER_FREQ
DISPLAY_INTERVAL = 1.0 / DISPLAY_FREQ

logger = logging.getLogger(__name__)


class Runner:
    def __init__(self, engine, inputs, renderer, clock_speed=None):
        self.engine = engine
        self.inputs = inputs
        self.renderer = renderer
        # Clock speed in operations per second.  None or 0 means uncapped.
        self.core_interval = None if not clock_speed or clock_speed <= 0 else 1.0 / clock_speed

        # Performance-related vars
        self.perf_counter_fps = 0
        self.perf_counter_ops = 0
        self.total_ops = 0

    def run(self, max_ops=None):
        # Returns when the user quits, or after max_ops cycles if given
        next_timer_tick_time = next_display_update_time = next_perf_report_time = perf_counter()

        while max_ops is None or self.total_ops < max_ops:
            this_time = perf_counter()  # Do this first for maximum precision

            # Performance counters
            if this_time >= next_perf_report_time:
                next_perf_report_time = this_time + 1.0
                self.renderer.set_title("{} - {} FPS, {} OPS".format(APP_NAME, self.perf_counter_fps,
                                                                    self.perf_counter_ops))
                self.perf_counter_ops = 0
                self.perf_counter_fps = 0

            # Catch up on any timer ticks missed while the host was busy
            while this_time >= next_timer_tick_time:
                self.engine.tick_timers()
                next_timer_tick_time += TIMER_INTERVAL

            # Prevent unnecessary display rendering in excess of host frame rate
            if this_time >= next_display_update_time:
                if self.inputs.process_messages():  # Process inputs at 60Hz too, to avoid slowdown
                    return

                self._sync_pause()
                next_display_update_time = this_time + DISPLAY_INTERVAL

                if self.renderer.refresh_display(self.engine.state.screen):
                    self.perf_counter_fps += 1

            try:
                self.engine.cycle()
            except (DecodeError, StackError):
                logger.error(
                    "Emulation halted.\n%s", self.engine.debugger.debug(self.engine.state, "???", verbose=True)
                )
                raise

            if self.core_interval is not None:
                # Wait for next instruction.  Do this last for maximum precision (takes into account time spent on
                # this instruction)
                next_time = this_time + self.core_interval

                while perf_counter() < next_time:  # Unfortunately we have to do this to get the timing right
                    pass

            self.perf_counter_ops += 1
            self.total_ops += 1

    def _sync_pause(self):
        paused = self.inputs.is_paused()

        if paused and not self.engine.is_idle():
            logger.info("Paused")
            self.engine.idle()
        elif not paused and self.engine.is_idle():
            logger.info("Resumed")
            self.engine.resume()
