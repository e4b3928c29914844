#!/usr/bin/env python3
"""
Image to ASCII Converter
========================
Command line entry point; see img2ascii.cli for the options.

Usage:
    python main.py image.png -o art.txt
    python main.py --banner-text "Hello" -w 50 -H 15
"""

import sys

from img2ascii.cli import main


if __name__ == '__main__':
    sys.exit(main())
