"""\
Utilities
=========

Author: Akshay Mestry <xa@mes3.dev>
Created on: Saturday, August 02 2025
Last updated on: Monday, October 19 2026

This module acts as an entry point for combining the filesystem wrappers
used throughout the library.
"""

from __future__ import annotations

from .filesystem import *


__all__: tuple[str, ...] = filesystem.__all__
