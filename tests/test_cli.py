from __future__ import annotations

from pathlib import Path

import pytest
from PIL import Image

from webify_models import cli
from webify_models.config import MODELS_ROOT_ENV, resolve_models_root


def test_cli_webifies_models_root(tmp_path, make_image):
    make_image(tmp_path / "characterA" / "randomdir" / "skin.jpg")

    cli.main([str(tmp_path)])

    assert (tmp_path / "characterA" / "materials" / "textures" / "skin.png").exists()


def test_cli_reads_models_root_from_environment(tmp_path, make_image, monkeypatch):
    make_image(tmp_path / "characterA" / "skin.gif")
    monkeypatch.setenv(MODELS_ROOT_ENV, str(tmp_path))

    cli.main([])

    assert (tmp_path / "characterA" / "materials" / "textures" / "skin.png").exists()


def test_cli_exits_non_zero_on_fatal_error(tmp_path, make_image):
    make_image(tmp_path / "characterA" / "height.tiff")

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path)])

    assert excinfo.value.code == 1
    assert (tmp_path / "characterA" / "height.tiff").exists()


def test_cli_rejects_missing_directory(tmp_path, monkeypatch):
    monkeypatch.delenv(MODELS_ROOT_ENV, raising=False)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path / "missing")])
    assert excinfo.value.code == 1

    with pytest.raises(SystemExit) as excinfo:
        cli.main([])
    assert excinfo.value.code == 1


def test_resolve_models_root_prefers_explicit_value(tmp_path, monkeypatch):
    monkeypatch.setenv(MODELS_ROOT_ENV, "~/models")

    assert resolve_models_root(tmp_path) == tmp_path
    assert resolve_models_root(None) == Path.home() / "models"


def test_cli_exits_non_zero_on_oversized_image(tmp_path, make_image, monkeypatch):
    image = make_image(tmp_path / "characterA" / "huge.jpg")
    monkeypatch.setattr(Image, "MAX_IMAGE_PIXELS", 2)

    with pytest.raises(SystemExit) as excinfo:
        cli.main([str(tmp_path)])

    assert excinfo.value.code == 1
    assert image.path.exists()
