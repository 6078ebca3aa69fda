#!/usr/bin/env python3

"""
Main Startup Module

Simply call main(args) to start the machine, replacing args with a dictionary
of options.  This can be done via the Terminal or GUI.

All options must be supplied.  Defaults can be specified with a 'None'.
"""

__copyright__ = "Copyright (C) 2022 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"

import logging
from .constants import APP_INTRO, APP_COPYRIGHT, DEFAULT_CLOCK_SPEED
from .debugger import Debugger
from .engine import Engine
from .hostio import Loader
from .runner import Runner

logger = logging.getLogger(__name__)


class StartupError(Exception):
    pass


def main(args):
    print("".join((APP_INTRO, APP_COPYRIGHT)))
    # Live tracing is logged at debug level, so it forces that level on
    log_level = "debug" if args["debug"] else (args["log_level"] or "info")
    logging.basicConfig(level=log_level.upper(), format="%(levelname)s %(name)s: %(message)s")

    opt_renderer = args["renderer"] or "pygame"

    if opt_renderer == "pygame":
        # pylint: disable=unused-import, import-outside-toplevel, raise-missing-from
        try:
            import pygame  # noqa: F401
        except ImportError:
            raise StartupError("PyGame does not appear to be installed.  Use the null renderer to run headless.")

        from .inputs.i_pygame import Inputs
        from .renderers.r_pygame import Renderer
    else:
        # pylint: disable=import-outside-toplevel
        from .inputs.i_null import Inputs
        from .renderers.r_null import Renderer

    logger.info("Using %s renderer", opt_renderer)

    # Read ROM binary before anything opens a window, so a bad path fails quickly
    rom = Loader().load_binary(args["filename"])

    renderer = Renderer(scale=args["scale"], palette=args["palette"])
    inputs = Inputs(args["keymap"], renderer)

    # Set up debugger and live output if necessary
    debugger = Debugger()
    debugger.set_live(args["debug"])

    engine = Engine(inputs, renderer, debugger=debugger)
    engine.load_rom(rom)

    clock_speed = DEFAULT_CLOCK_SPEED if args["clock_speed"] is None else args["clock_speed"]
    logger.info("Clock speed: %s", "uncapped" if clock_speed <= 0 else "{} ops/s".format(clock_speed))

    try:
        Runner(engine, inputs, renderer, clock_speed=clock_speed).run()
    finally:
        # The machine has stopped, so shut down the host side.  __del__ cannot be relied upon when using PyPy
        inputs.shutdown()
        renderer.shutdown()
