#!/usr/bin/env python3

__author__ = "Gregory Maynard-Hoare"
__copyright__ = "Copyright (C) 2024 Gregory Maynard-Hoare"
__license__ = "GNU Affero General Public License v3.0"
__version__ = "1.0.0"

from argparse import ArgumentParser
from mchip import main
from mchip.constants import DEFAULT_CLOCK_SPEED, DEFAULT_KEYMAP, LOG_LEVELS, SUPPORTED_RENDERERS


def parse_args():
    parser = ArgumentParser()
    parser.add_argument("filename", help="ROM to execute (normally ending in .ch8 or .c8)")
    parser.add_argument(
        "-c", "--clock_speed", type=int,
        help="set the CPU speed in operations/second (default {}, 0 = uncapped)".format(DEFAULT_CLOCK_SPEED)
    )
    parser.add_argument(
        "-r", "--renderer", choices=SUPPORTED_RENDERERS,
        help="set the display and input systems (pygame by default, null runs headless)"
    )
    parser.add_argument(
        "-s", "--scale", type=int,
        help="set the window width in PyGame mode (default 512)"
    )
    parser.add_argument(
        "-k", "--keymap", default=DEFAULT_KEYMAP,
        help="redefine the 16 keyscan codes.  Separate each decimal with a comma.  Escape (27) and P (112) are reserved"
    )
    parser.add_argument(
        "--palette",
        help="redefine the background and foreground colours in comma-separated hex, e.g. 000000,33FF66"
    )
    parser.add_argument(
        "-l", "--log_level", choices=LOG_LEVELS,
        help="set how much is logged (default info)"
    )
    parser.add_argument(
        "-d", "--debug", action="store_true", default=False,
        help="enable live instruction tracing (implies --log_level debug).  Slows CPU execution"
    )
    return parser.parse_args()  # Can call sys.exit(2) if args are incorrect


if __name__ == "__main__":
    args = vars(parse_args())
    # It is possible to start the machine from a GUI by calling this with a dictionary
    main(args)
