from __future__ import annotations

from pathlib import Path
from typing import Callable, Tuple

import numpy as np
import pytest
from PIL import Image

from resizer.models.options import ResizeOptions


def gradient(size: Tuple[int, int], mode: str = "RGB") -> Image.Image:
    """Горизонтальный градиент: содержимое не пустое и предсказуемое."""
    width, height = size
    row = np.linspace(0, 255, num=max(width, 1), dtype=np.float32)[:width]
    plane = np.tile(row, (height, 1)).astype(np.uint8)
    if mode == "L":
        return Image.fromarray(plane)
    rgb = np.stack([plane, plane[:, ::-1], np.full_like(plane, 128)], axis=-1)
    image = Image.fromarray(rgb)
    return image.convert(mode) if mode != "RGB" else image


@pytest.fixture
def make_image() -> Callable[..., Path]:
    def make(path: Path, size: Tuple[int, int], mode: str = "RGB", fmt: str | None = None) -> Path:
        path.parent.mkdir(parents=True, exist_ok=True)
        if fmt is None:
            fmt = "PNG" if path.suffix.lower() == ".png" else "JPEG"
        gradient(size, mode).save(path, format=fmt)
        return path

    return make


@pytest.fixture
def scenario_dir(tmp_path: Path, make_image) -> Path:
    source = tmp_path / "src"
    make_image(source / "photo.jpg", (800, 600))
    make_image(source / "icon.png", (100, 100))
    return source


@pytest.fixture
def options_for() -> Callable[..., ResizeOptions]:
    def build(source: Path, save: Path | None = None, **kwargs) -> ResizeOptions:
        kwargs.setdefault("show_progress", False)
        return ResizeOptions(source_dir=source, save_dir=save, **kwargs)

    return build
