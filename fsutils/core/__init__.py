"""\
Core
====

Author: Akshay Mestry <xa@mes3.dev>
Created on: Saturday, August 02 2025
Last updated on: Monday, October 19 2026

This module acts as an entry point for combining the configurations,
errors, path information records and the tree copier of this library.
"""

from __future__ import annotations

from .config import *
from .error import *
from .info import *
from .tree import *


__all__: tuple[str, ...] = (
    config.__all__ + error.__all__ + info.__all__ + tree.__all__
)
