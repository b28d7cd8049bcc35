"""CLI entrypoint for the Rally Championship Engine."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from rally_engine import __version__
from rally_engine.config import load_championship
from rally_engine.report import build_report


def main() -> None:
    """Load a championship scenario and print its report.

    An optional scenario path may be given as the first argument;
    otherwise the bundled ``data/championship.yaml`` is used.
    """
    logging.basicConfig(
        level=logging.WARNING, format="%(levelname)s %(name)s: %(message)s"
    )

    path = Path(sys.argv[1]) if len(sys.argv) > 1 else None
    championship = load_championship(path)

    print(f"Rally Championship Engine v{__version__}")
    print("=" * 56)
    print(build_report(championship), end="")


if __name__ == "__main__":
    sys.exit(main() or 0)
