"""Command that checks the FPGA register device can be opened."""

from __future__ import annotations

import argparse
import sys
from typing import Optional, Sequence

from .regio import DEFAULT_DEVICE_PATH, RegisterBus
from .status import Status

BANNER = (
    "\n"
    "                        FPGA Device Test\n"
    "                 ------------------------------\n"
    "                    Device Test Interface v1.0\n"
    "                 ------------------------------\n"
)


def _parse_args(argv: Optional[Sequence[str]]) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="fpgaio", description="Open the FPGA register device and report."
    )
    parser.add_argument(
        "--device",
        default=DEFAULT_DEVICE_PATH,
        help=f"register device file (default: {DEFAULT_DEVICE_PATH})",
    )
    return parser.parse_args(argv)


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Run the device test and return the process exit status."""
    args = _parse_args(argv)
    bus = RegisterBus(args.device)
    try:
        bus.open()
    except OSError as err:
        print(f"Failed to open {args.device}: {err.strerror}", file=sys.stderr)
        print("Check if driver is installed.")
        return int(Status.FAILURE)

    print(BANNER)
    print("\nTest completed successfully.")

    try:
        bus.close()
    except OSError as err:
        print(f"Failed to close device: {err.strerror}", file=sys.stderr)
        return int(Status.FAILURE)

    return int(Status.SUCCESS)


if __name__ == "__main__":
    sys.exit(main())