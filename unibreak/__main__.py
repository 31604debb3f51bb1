#!/usr/bin/env python3
"""
Entry point for running unibreak as a module.

This allows the package to be run with:
    python -m unibreak breaks "some text"
"""

from unibreak.cli import main

if __name__ == "__main__":
    main()
