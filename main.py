#!/usr/bin/env python3
"""FreediveComp entry point.

Run with:
    python main.py DYN
    python -m freedivecomp DYN
"""

import sys

from freedivecomp.__main__ import main


if __name__ == "__main__":
    sys.exit(main())
