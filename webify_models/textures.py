"""Relocation of stray textures into their model's textures directory."""

from __future__ import annotations

import logging
import shutil
from dataclasses import replace
from pathlib import Path, PurePath
from typing import Optional

from .config import MESHES_SUBDIR, TEXTURES_SUBDIR
from .errors import FatalPipelineError, OriginalNotRemovedError, check_target_free
from .models import ImageAsset
from .reporting import LoggingProgress, ProgressReporter

logger = logging.getLogger("webify_models")


def _ends_with(path: PurePath, suffix: PurePath) -> bool:
    count = len(suffix.parts)
    return len(path.parts) >= count and path.parts[-count:] == suffix.parts


def is_in_textures_dir(path: Path) -> bool:
    """True when ``path`` already sits in ``materials/textures`` or ``meshes``."""
    return _ends_with(path, TEXTURES_SUBDIR / path.name) or _ends_with(
        path, MESHES_SUBDIR / path.name
    )


def get_new_textures_path(image: ImageAsset, base_path: Path) -> Path:
    """Return ``<model root>/materials/textures`` for the model owning ``image``.

    The model root is the top-level directory below ``base_path`` that contains
    the image, however deeply it is nested. An image lying directly in
    ``base_path`` is treated as belonging to ``base_path`` itself.
    """
    try:
        relative = image.path.relative_to(base_path)
    except ValueError as exc:
        raise FatalPipelineError(
            f"{image.path} is not inside the models directory {base_path}",
            path=image.path,
        ) from exc

    if len(relative.parts) > 1:
        model_path = base_path / relative.parts[0]
    else:
        logger.debug("%s has no model directory, using %s", image.path, base_path)
        model_path = base_path
    return model_path / TEXTURES_SUBDIR


def move_to_textures_dir(
    image: ImageAsset,
    base_path: Path,
    progress: Optional[ProgressReporter] = None,
) -> ImageAsset:
    """Move any stray texture into its model's ``materials/textures`` directory."""
    progress = progress or LoggingProgress()
    progress.set_prefix("Texture Move")
    if is_in_textures_dir(image.path):
        return image

    progress.set_message(f"Moving {image.path} to textures directory...")
    textures_path = get_new_textures_path(image, base_path)
    textures_path.mkdir(parents=True, exist_ok=True)
    progress.set_message(f"Created {textures_path}")

    destination = textures_path / image.path.name
    check_target_free(image.path, destination)
    try:
        shutil.copy(image.path, destination)
    except OSError as exc:
        raise FatalPipelineError(
            f"Could not copy {image.path} to {destination}: {exc}",
            path=image.path,
        ) from exc

    moved = replace(image, path=destination)
    try:
        image.path.unlink()
    except OSError as exc:
        raise OriginalNotRemovedError(image.path, moved, exc) from exc

    progress.set_message(f"Moved {image.path} to {destination}")
    return moved
