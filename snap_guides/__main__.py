"""
Module entrypoint for `python -m snap_guides`.

This allows running the demo canvas as a module from the repository root:
    python -m snap_guides
"""
from snap_guides.app import main

if __name__ == "__main__":
    main()
