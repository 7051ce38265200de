"""String joining and resource path helpers."""

from __future__ import annotations

import os
from typing import Iterable

PATH_SEPARATOR = os.sep


def join(elements: Iterable[str], separator: str) -> str:
    """Join elements with the separator between consecutive items."""
    return separator.join(elements)


def path_join(*args: str) -> str:
    """Join path pieces with the platform path separator."""
    return join(args, PATH_SEPARATOR)


RESOURCE_ROOT = path_join("assets")
RESOURCE_MODELS = path_join(RESOURCE_ROOT, "models")
RESOURCE_TEXTURES = path_join(RESOURCE_ROOT, "textures")
RESOURCE_SHADERS = path_join(RESOURCE_ROOT, "shaders")
RESOURCE_FONTS = path_join(RESOURCE_ROOT, "fonts")

SOURCE_M1 = path_join("src", "lab_m1")
SOURCE_M2 = path_join("src", "lab_m2")
SOURCE_EXTRA = path_join("src", "lab_extra")