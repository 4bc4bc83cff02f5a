"""Configuration objects and constants for the webify pipeline."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional, Tuple

TEXTURE_IMAGE_TYPES: Tuple[str, ...] = ("tif", "tga", "tiff", "jpeg", "jpg", "gif", "png")
TEXTURES_SUBDIR = Path("materials", "textures")
MESHES_SUBDIR = Path("meshes")
MODELS_ROOT_ENV = "WEBIFY_MODELS_ROOT"


@dataclass
class WebifyConfig:
    """Settings for a single webify run."""

    models_root: Path
    image_types: Tuple[str, ...] = TEXTURE_IMAGE_TYPES


def resolve_models_root(value: Optional[Path]) -> Optional[Path]:
    """Pick the models root from the command line or the environment."""
    if value is not None:
        return value
    override = os.getenv(MODELS_ROOT_ENV)
    if not override:
        return None
    return Path(override).expanduser()
