"""
Utilities package for humanise.

Provides:
- plurals: Count-dependent "s" suffix for nouns and verbs
- lists: Serial-comma English list joining
"""

from __future__ import annotations

from . import plurals
from . import lists

from .plurals import pluralize, plural_suffix
from .lists import humanise_list

__all__ = [
    # Submodules
    'plurals',
    'lists',
    # Functions
    'pluralize',
    'plural_suffix',
    'humanise_list',
]
