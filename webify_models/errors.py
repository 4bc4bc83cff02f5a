"""Error types separating aborted runs from recoverable leftovers."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from .models import ImageAsset


class FatalPipelineError(RuntimeError):
    """Condition the webify run has no recovery for; the whole batch stops."""

    def __init__(self, message: str, path: Optional[Path] = None) -> None:
        super().__init__(message)
        self.path = path


class OriginalNotRemovedError(OSError):
    """The new file was written but the superseded original is still on disk.

    ``asset`` already points at the new location so callers can carry on.
    """

    def __init__(self, original: Path, asset: ImageAsset, reason: OSError) -> None:
        super().__init__(f"Could not remove {original} after writing {asset.path}: {reason}")
        self.original = original
        self.asset = asset
        self.errno = reason.errno
        self.filename = str(original)


def check_target_free(source: Path, target: Path) -> None:
    """Abort rather than overwrite a different file already at ``target``."""
    if target.exists() and not target.samefile(source):
        raise FatalPipelineError(
            f"Refusing to overwrite existing {target} with {source}",
            path=source,
        )
