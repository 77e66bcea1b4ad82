"""Реестр поддерживаемых форматов: расширение -> (декодер, кодер).

Принципы:
- OCP: новый формат добавляется одной записью в `FORMATS`, без новых веток
  `if ext == ...` в стадиях конвейера.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import BinaryIO, Callable, Dict, Tuple

from PIL import Image

# Режимы, которые плагин JPEG умеет записывать без конвертации
_JPEG_SAVE_MODES = ("1", "L", "RGB", "RGBX", "CMYK", "YCbCr")


def _open_as(pil_format: str) -> Callable[[BinaryIO], Image.Image]:
    def decode(fp: BinaryIO) -> Image.Image:
        # formats=... не даёт PNG-содержимому "пройти" как .jpg и наоборот
        image = Image.open(fp, formats=[pil_format])
        image.load()
        return image

    return decode


def _encode_jpeg(image: Image.Image, fp: BinaryIO, quality: int) -> None:
    if image.mode not in _JPEG_SAVE_MODES:
        image = image.convert("RGB")
    image.save(fp, format="JPEG", quality=quality)


def _encode_png(image: Image.Image, fp: BinaryIO, quality: int) -> None:
    # quality у PNG нет, параметр оставлен ради единой сигнатуры кодеров
    image.save(fp, format="PNG")


@dataclass(frozen=True)
class ImageFormat:
    """Описание формата: имя для PIL, расширения, функции чтения и записи."""
    name: str
    extensions: Tuple[str, ...]
    decode: Callable[[BinaryIO], Image.Image]
    encode: Callable[[Image.Image, BinaryIO, int], None]


JPEG = ImageFormat("JPEG", (".jpg", ".jpeg"), _open_as("JPEG"), _encode_jpeg)
PNG = ImageFormat("PNG", (".png",), _open_as("PNG"), _encode_png)

FORMATS: Dict[str, ImageFormat] = {ext: fmt for fmt in (JPEG, PNG) for ext in fmt.extensions}

# Регистр учитывается: ".JPG" не поддерживается
SUPPORTED_EXTENSIONS = frozenset(FORMATS)


def is_supported(ext: str) -> bool:
    return ext in FORMATS


def format_for(ext: str) -> ImageFormat:
    """Возвращает формат по расширению.

    Raises:
        KeyError: если расширение не зарегистрировано. До стадий конвейера
            такие файлы не доходят — их отсекает обход каталога.
    """
    try:
        return FORMATS[ext]
    except KeyError:
        raise KeyError(f"Неподдерживаемое расширение: {ext!r}") from None
