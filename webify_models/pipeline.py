"""High-level orchestration of the scan, convert and relocate stages."""

from __future__ import annotations

import logging
import time
from dataclasses import dataclass, field
from pathlib import Path
from typing import List, Optional

from .config import WebifyConfig
from .errors import OriginalNotRemovedError
from .images import convert_to_png
from .models import ImageAsset
from .reporting import LoggingProgress, ProgressReporter
from .scanner import scan_dir_for_images
from .textures import move_to_textures_dir

logger = logging.getLogger("webify_models")


@dataclass
class WebifyResult:
    """Final state of a webify run."""

    models_root: Path
    assets: List[ImageAsset] = field(default_factory=list)
    leftovers: List[Path] = field(default_factory=list)
    total_seconds: float = 0.0


def process_image(
    image: ImageAsset,
    models_root: Path,
    progress: ProgressReporter,
    leftovers: List[Path],
) -> ImageAsset:
    """Run a single asset through conversion and relocation."""
    try:
        image = convert_to_png(image, progress)
    except OriginalNotRemovedError as exc:
        logger.warning("%s", exc)
        leftovers.append(exc.original)
        image = exc.asset

    try:
        image = move_to_textures_dir(image, models_root, progress)
    except OriginalNotRemovedError as exc:
        logger.warning("%s", exc)
        leftovers.append(exc.original)
        image = exc.asset
    return image


def run_webify(
    config: WebifyConfig,
    progress: Optional[ProgressReporter] = None,
) -> WebifyResult:
    """Scan the models directory and webify every texture found, one at a time.

    :class:`~webify_models.errors.FatalPipelineError` is never caught here;
    assets processed before it stay converted and later ones stay untouched.
    """
    progress = progress or LoggingProgress()
    overall_start = time.perf_counter()
    result = WebifyResult(models_root=config.models_root)

    images = scan_dir_for_images(config.models_root, config.image_types)
    total = len(images)
    for index, image in enumerate(images, start=1):
        logger.debug("Processing %s (%d/%d)", image.path, index, total)
        result.assets.append(
            process_image(image, config.models_root, progress, result.leftovers)
        )

    result.total_seconds = time.perf_counter() - overall_start
    logger.info(
        "Finished in %.2fs (%d images, %d originals left behind)",
        result.total_seconds,
        len(result.assets),
        len(result.leftovers),
    )
    return result
