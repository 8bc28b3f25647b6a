"""\
fsutils
=======

Author: Akshay Mestry <xa@mes3.dev>
Created on: Saturday, August 02 2025
Last updated on: Monday, October 19 2026

Filesystem utilities for Python applications

This package (fsutils) makes working with files and directories easier.
It provides functions for checking whether paths exist, listing,
creating, moving and copying files and directories, and reading typed
metadata records about them::

    import fsutils

    if not fsutils.dir_exists("assets"):
        fsutils.mkdir("assets")
    fsutils.copy_tree("assets", "backup/assets")
    info = fsutils.dir_info("backup/assets")
    print(f"Contains {info.num_files} files")
"""

from __future__ import annotations

from .core import *
from .utils import *


__all__: tuple[str, ...] = ("__version__",)
__all__ += core.__all__
__all__ += utils.__all__

__version__: str = "19.10.2026"
