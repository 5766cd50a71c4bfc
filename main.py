#!/usr/bin/env python3
"""Funduino Railway - Control Server Entry Point."""

import argparse

from funduino_railway import FunduinoRailway, set_debug
from funduino_railway.config import HOST, PORT, PWM_FREQUENCY
from funduino_railway.web import create_app


def main():
    """Initialize the board and run the control server."""
    parser = argparse.ArgumentParser(description="Funduino Railway Control Server")
    parser.add_argument(
        "-p", "--port",
        type=int,
        default=PORT,
        help=f"Port to run the server on (default: {PORT})",
    )
    parser.add_argument(
        "-d", "--debug",
        action="store_true",
        help="Print every register write",
    )
    parser.add_argument(
        "--no-init",
        action="store_true",
        help="Skip PCA9685 initialization at startup",
    )
    args = parser.parse_args()

    set_debug(args.debug)

    railway = FunduinoRailway()
    if not args.no_init:
        print(f"Initializing PCA9685 at {PWM_FREQUENCY} Hz...")
        railway.initialize(PWM_FREQUENCY)

    app = create_app(railway)

    print("=" * 50)
    print("  Funduino Railway - Control Server")
    print("=" * 50)
    print(f"  Open http://localhost:{args.port}/api in your browser")
    print("  Or use your Pi's IP address from other devices")
    print("=" * 50)

    # One request at a time; the board assumes a single caller.
    app.run(host=HOST, port=args.port, threaded=False)


if __name__ == "__main__":
    main()
