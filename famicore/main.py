"""Command-line entry point."""

import argparse
from collections.abc import Sequence

from famicore.bus import Bus


def main(argv: Sequence[str] | None = None) -> int:
    """Greet, bring up the system bus and return the exit status."""
    parser = argparse.ArgumentParser(prog="famicore", description="Console emulator.")
    parser.parse_args(argv)
    print("Hello, World!")
    Bus()
    return 1


if __name__ == "__main__":
    raise SystemExit(main())