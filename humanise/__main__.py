"""
Allow running the package with: python -m humanise

Examples:
    python -m humanise duration 62345
    python -m humanise list apples bananas strawberries
    python -m humanise config --init
"""

import sys

from .cli import main


if __name__ == '__main__':
    sys.exit(main())
