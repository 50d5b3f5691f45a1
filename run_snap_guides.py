#!/usr/bin/env python
"""
Launcher script for the Snap Guides demo canvas.

Usage from repo root:
    python run_snap_guides.py [--verbose]

Alternative:
    python -m snap_guides
"""
from snap_guides.app import main

if __name__ == "__main__":
    main()
