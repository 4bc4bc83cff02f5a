"""Discovery of texture images under a models directory."""

from __future__ import annotations

import logging
from pathlib import Path
from typing import AbstractSet, Iterable, List

from .config import TEXTURE_IMAGE_TYPES
from .errors import FatalPipelineError
from .models import ImageAsset

logger = logging.getLogger("webify_models")


def scan_dir_for_images(
    root: Path,
    image_types: Iterable[str] = TEXTURE_IMAGE_TYPES,
) -> List[ImageAsset]:
    """Find texture images below ``root``, ordered by descending extension."""
    logger.info("Scanning for images to webify...")
    logger.warning(
        "Note that webify models is a destructive action and will DELETE the existing non-PNG files."
    )

    allowed = set(image_types)
    images: List[ImageAsset] = []
    try:
        recursive_scan(root, allowed, images)
    except OSError as exc:
        raise FatalPipelineError(
            f"Failed to scan all directories for images: {exc}",
            path=Path(exc.filename) if exc.filename else root,
        ) from exc

    images.sort(key=lambda image: image.extension, reverse=True)
    logger.info("Images found: %d", len(images))
    return images


def recursive_scan(directory: Path, allowed: AbstractSet[str], images: List[ImageAsset]) -> None:
    """Walk ``directory`` in filesystem order, appending qualifying files to ``images``."""
    if not directory.is_dir():
        return
    for path in directory.iterdir():
        if path.is_dir():
            recursive_scan(path, allowed, images)
            continue
        extension = path.suffix[1:]
        if extension in allowed:
            images.append(ImageAsset(path=path, extension=extension))
