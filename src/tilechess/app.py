"""Application entry point."""

from __future__ import annotations

import sys

from tilechess.ui.bootstrap import run_application


def main() -> None:
    """Launch the tilechess application."""
    sys.exit(run_application())


if __name__ == "__main__":
    main()
