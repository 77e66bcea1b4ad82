"""Модели данных конвейера изменения размера.

Принципы:
- SRP: только структуры данных, без логики обработки.
- Чистый код: неизменяемость (`frozen=True`) — запись создаётся одной стадией
  и читается другой, никто её не мутирует.
"""
from __future__ import annotations

from dataclasses import dataclass, field
from pathlib import Path
from typing import Optional, Tuple

from PIL import Image


@dataclass(frozen=True)
class ImagePath:
    """Найденный файл-кандидат.

    Fields:
        path: Путь к файлу (как он получен при обходе каталога).
        ext: Расширение с точкой, например ".jpg" (регистр сохраняется).
        relative: Путь относительно корня обхода.
    """
    path: Path
    ext: str
    relative: Path


@dataclass(frozen=True)
class SourceImage:
    """Неизменяемая модель декодированного изображения и его метаданные.

    Fields:
        path: Путь к исходному файлу.
        pil_image: Загруженное изображение PIL.
        width: Ширина, px.
        height: Высота, px.
        mode: Режим PIL, например "RGB".
        size_bytes: Размер файла, если доступен.
    """
    path: Path
    pil_image: Image.Image
    width: int
    height: int
    mode: str
    size_bytes: Optional[int]


@dataclass(frozen=True)
class ResizedImage:
    """Результат стадии ресайза, передаётся стадии сохранения через канал.

    Fields:
        filename: Путь к исходному файлу.
        ext: Расширение исходного файла (определяет кодек при записи).
        width: Новая ширина, px.
        height: Новая высота, px.
        pil_image: Пересэмплированное изображение.
        relative: Путь исходника относительно корня обхода.
    """
    filename: Path
    ext: str
    width: int
    height: int
    pil_image: Image.Image
    relative: Path


@dataclass(frozen=True)
class PipelineResult:
    """Итог запуска конвейера.

    Fields:
        collected: Сколько файлов нашёл обход.
        processed: Сколько файлов записано.
        written: Пути записанных файлов в порядке записи.
        error: Первая ошибка любой из стадий или None.
        secondary_errors: Ошибки второй стадии, возникшие при её остановке.
    """
    collected: int
    processed: int
    written: Tuple[Path, ...] = ()
    error: Optional[BaseException] = None
    secondary_errors: Tuple[BaseException, ...] = field(default_factory=tuple)

    @property
    def ok(self) -> bool:
        return self.error is None

    def raise_for_error(self) -> None:
        if self.error is not None:
            raise self.error
