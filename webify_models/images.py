"""PNG conversion of scanned texture images."""

from __future__ import annotations

import logging
from dataclasses import replace
from pathlib import Path
from typing import Optional

from filetype import guess
from PIL import Image, UnidentifiedImageError

from .errors import FatalPipelineError, OriginalNotRemovedError, check_target_free
from .models import ImageAsset
from .reporting import LoggingProgress, ProgressReporter

logger = logging.getLogger("webify_models")

# Pillow cannot decode every TIFF variant found in model packs reliably.
UNSUPPORTED_SOURCE_FORMATS = {"TIFF"}
PNG_MODES = {"1", "L", "LA", "I", "I;16", "P", "RGB", "RGBA"}


def detect_content_type(path: Path) -> Optional[str]:
    """Sniff a file signature using filetype; returns the MIME type if known."""
    try:
        kind = guess(str(path))
    except OSError:
        return None
    return kind.mime if kind else None


def convert_to_png(
    image: ImageAsset,
    progress: Optional[ProgressReporter] = None,
) -> ImageAsset:
    """Convert ``image`` to PNG, or hand it back untouched if it already is one."""
    progress = progress or LoggingProgress()
    progress.set_prefix("PNG Conversion")
    if image.extension == "png":
        progress.set_message(f"{image.path} already in PNG, skipping")
        return image

    progress.set_message(f"Converting {image.path}...")
    converted = convert(image)
    progress.set_message(f"{image.path} converted!")
    return converted


def _unreadable(image: ImageAsset, reason: object) -> FatalPipelineError:
    content_type = detect_content_type(image.path) or "unrecognised content"
    return FatalPipelineError(
        f"Failed to convert provided image {image.path} ({content_type}): {reason}",
        path=image.path,
    )


def _png_ready(source: Image.Image) -> Image.Image:
    if source.mode in PNG_MODES:
        return source
    has_alpha = "A" in source.mode or "transparency" in source.info
    return source.convert("RGBA" if has_alpha else "RGB")


def convert(image: ImageAsset) -> ImageAsset:
    """Re-encode ``image`` as a sibling PNG and delete the original file.

    Anything that stops the PNG from being written raises
    :class:`FatalPipelineError`. Failing to delete the original afterwards
    raises :class:`OriginalNotRemovedError` instead, since the PNG is in place.
    """
    target = image.path.with_suffix(".png")
    check_target_free(image.path, target)
    try:
        source = Image.open(image.path)
    except UnidentifiedImageError as exc:
        raise _unreadable(image, exc) from exc
    except (OSError, Image.DecompressionBombError) as exc:
        raise FatalPipelineError(
            f"Failed to open image during PNG conversion {image.path}: {exc}",
            path=image.path,
        ) from exc

    with source:
        if not source.format:
            raise _unreadable(image, "no format detected")
        if source.format in UNSUPPORTED_SOURCE_FORMATS:
            raise FatalPipelineError(
                f"Failed to convert provided image {image.path}: {source.format} sources are not supported",
                path=image.path,
            )
        logger.debug("Detected %s for %s", source.format, image.path)

        try:
            source.load()
        except (OSError, ValueError, Image.DecompressionBombError) as exc:
            raise FatalPipelineError(
                f"Failed to decode image during PNG conversion {image.path}: {exc}",
                path=image.path,
            ) from exc

        try:
            _png_ready(source).save(target, format="PNG")
        except (OSError, ValueError) as exc:
            raise FatalPipelineError(
                f"Could not convert {image.path} to PNG: {exc}",
                path=image.path,
            ) from exc

    converted = replace(image, path=target)
    try:
        image.path.unlink()
    except OSError as exc:
        raise OriginalNotRemovedError(image.path, converted, exc) from exc
    return converted
