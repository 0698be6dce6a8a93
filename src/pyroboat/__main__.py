"""Main entry point for running pyroboat as a module.

Usage:
    python -m pyroboat upload <file>
    python -m pyroboat --help
"""

from pyroboat.cli import main

if __name__ == '__main__':
    main()
