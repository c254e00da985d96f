#!/usr/bin/env python3
"""
Minefield - Main entry point.

Usage:
    python main.py [--width W] [--height H] [--density P] [--seed N]
                   [--no-color] [--log-file PATH] [--log-level LEVEL]
"""
import sys

from src.minefield.cli import main


if __name__ == "__main__":
    sys.exit(main())
