"""greatcircle — console entry point for the ``haversine`` command."""

import sys

from greatcircle.infrastructure.cli import main


def run() -> None:
    sys.exit(main())


if __name__ == "__main__":
    run()
