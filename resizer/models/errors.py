"""Иерархия ошибок конвейера.

Каждая ошибка знает стадию ("config", "collect", "resize", "save") и, если
применимо, файл, на котором она произошла — этого достаточно для одной
понятной строки в логе.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional


class ResizerError(Exception):
    """Базовая ошибка приложения."""

    default_stage: Optional[str] = None

    def __init__(self, message: str, path: Optional[Path] = None, stage: Optional[str] = None) -> None:
        super().__init__(message)
        self.message = message
        self.path = path
        self.stage = stage or self.default_stage

    def __str__(self) -> str:
        parts = []
        if self.stage:
            parts.append(f"[{self.stage}]")
        if self.path is not None:
            parts.append(f"{self.path}:")
        parts.append(self.message)
        return " ".join(parts)


class ConfigError(ResizerError):
    """Неверные или отсутствующие параметры запуска."""

    default_stage = "config"


class FileSystemError(ResizerError, OSError):
    """Ошибка доступа к файловой системе: чтение каталога, открытие/создание файла."""


class DecodeError(ResizerError):
    """Файл не удалось декодировать как изображение заявленного формата."""

    default_stage = "resize"


class EncodeError(ResizerError):
    """Кодек не смог записать изображение."""

    default_stage = "save"


class EmptyImageError(ResizerError):
    """Целевой размер получился нулевым (слишком сильное уменьшение)."""

    default_stage = "resize"
