"""Module entry point for running with python -m jgmenu_ob."""

import sys

from jgmenu_ob.cli import main

if __name__ == "__main__":
    sys.exit(main())
