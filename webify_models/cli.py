"""Command-line entry point for webify models."""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path
from typing import Sequence

from .config import MODELS_ROOT_ENV, WebifyConfig, resolve_models_root
from .errors import FatalPipelineError
from .pipeline import run_webify

logger = logging.getLogger("webify_models.cli")


def parse_args(argv: Sequence[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        description=(
            "Convert model textures to PNG and move them into each model's "
            "materials/textures directory. Original files are deleted."
        ),
    )
    parser.add_argument(
        "models_root",
        nargs="?",
        type=Path,
        default=None,
        help=f"Directory holding one sub-directory per model (default: ${MODELS_ROOT_ENV})",
    )
    parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable verbose logging",
    )
    return parser.parse_args(argv)


def main(argv: Sequence[str] | None = None) -> None:
    args = parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        force=True,
    )

    models_root = resolve_models_root(args.models_root)
    if models_root is None:
        logger.error("No models directory given and %s is not set", MODELS_ROOT_ENV)
        sys.exit(1)
    if not models_root.is_dir():
        logger.error("'%s' is not a directory", models_root)
        sys.exit(1)

    config = WebifyConfig(models_root=models_root)
    try:
        result = run_webify(config)
    except (FatalPipelineError, OSError) as exc:
        logger.error("Aborting webify run: %s", exc)
        sys.exit(1)

    for leftover in result.leftovers:
        logger.warning("Original still present: %s", leftover)


if __name__ == "__main__":
    main()
