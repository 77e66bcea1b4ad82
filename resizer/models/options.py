"""Параметры запуска конвейера."""
from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from resizer.models.errors import ConfigError

MIN_JPEG_QUALITY = 1
MAX_JPEG_QUALITY = 95


@dataclass
class ResizeOptions:
    """Проверенные параметры одного запуска.

    Fields:
        source_dir: Каталог с исходными изображениями.
        save_dir: Каталог для результатов; по умолчанию совпадает с `source_dir`.
        scale: Коэффициент масштаба. <0 — уменьшение, >0 — увеличение, 0 недопустим.
        recursive: Обходить ли подкаталоги.
        buffer_size: Ёмкость канала между стадиями.
        jpeg_quality: Качество JPEG при записи.
        show_progress: Показывать ли индикатор прогресса.
    """
    source_dir: Optional[Path]
    save_dir: Optional[Path] = None
    scale: int = 1
    recursive: bool = False
    buffer_size: int = 1
    jpeg_quality: int = 75
    show_progress: bool = True

    def __post_init__(self) -> None:
        # пустая строка из CLI означает "не указано"
        self.source_dir = Path(self.source_dir) if self.source_dir else None
        self.save_dir = Path(self.save_dir) if self.save_dir else None

    @property
    def destination(self) -> Path:
        return self.save_dir if self.save_dir is not None else self.source_dir

    def validate(self) -> "ResizeOptions":
        """Проверяет параметры до начала любой работы с файлами.

        Порядок проверок важен: сначала только значения, затем доступ
        к исходному каталогу.

        Raises:
            ConfigError: если какой-либо параметр недопустим.
        """
        if self.source_dir is None:
            raise ConfigError("Не указан каталог с изображениями (-d)")
        if self.scale == 0:
            raise ConfigError("Коэффициент масштаба должен быть отличен от нуля (-sc)")
        if self.buffer_size < 1:
            raise ConfigError(f"Ёмкость канала должна быть не меньше 1, получено {self.buffer_size}")
        if not MIN_JPEG_QUALITY <= self.jpeg_quality <= MAX_JPEG_QUALITY:
            raise ConfigError(
                f"Качество JPEG должно быть в диапазоне {MIN_JPEG_QUALITY}..{MAX_JPEG_QUALITY}, "
                f"получено {self.jpeg_quality}"
            )
        if not self.source_dir.is_dir():
            raise ConfigError("Каталог не найден или не является каталогом", path=self.source_dir)
        return self
