"""Data models threaded through the webify pipeline."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass
class ImageAsset:
    """Texture image discovered while scanning a models directory.

    ``extension`` is captured once at scan time and is never refreshed, so it
    goes stale after PNG conversion. Only ``path`` tracks the file on disk.
    """

    path: Path
    extension: str
