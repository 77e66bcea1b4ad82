"""Запись результатов на диск.

Имя файла: `<ширина>x<высота>_<имя исходника>`. При рекурсивном обходе
структура подкаталогов исходника повторяется внутри каталога назначения,
поэтому одинаковые имена из разных папок не перезаписывают друг друга.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Set

from resizer.models.errors import EncodeError, FileSystemError
from resizer.models.image_model import ResizedImage
from resizer.services.codec_service import format_for

logger = logging.getLogger(__name__)


def output_name(image: ResizedImage) -> str:
    return f"{image.width}x{image.height}_{Path(image.filename).name}"


class SaveService:
    def __init__(self, destination: str | Path, jpeg_quality: int = 75) -> None:
        self.destination = Path(destination)
        self.jpeg_quality = jpeg_quality
        self._ready_dirs: Set[Path] = set()

    def output_path(self, image: ResizedImage) -> Path:
        return self.destination / Path(image.relative).parent / output_name(image)

    def ensure_dir(self, directory: Path) -> None:
        """Создаёт каталог вместе с родителями один раз за запуск.

        Raises:
            FileSystemError: если каталог создать нельзя.
        """
        if directory in self._ready_dirs:
            return
        if not directory.is_dir():
            try:
                directory.mkdir(parents=True, exist_ok=True)
            except OSError as exc:
                raise FileSystemError(f"Не удалось создать каталог ({exc})", path=directory, stage="save") from exc
            logger.info("Создан каталог: %s", directory)
        self._ready_dirs.add(directory)

    def save(self, image: ResizedImage) -> Path:
        """Кодирует и записывает одну запись.

        Файл закрывается сразу после записи; при ошибке кодека
        недописанный файл удаляется.

        Raises:
            FileSystemError: если не удалось создать каталог или файл.
            EncodeError: если кодек не смог записать изображение.
        """
        image_format = format_for(image.ext)
        self.ensure_dir(self.destination)
        target = self.output_path(image)
        self.ensure_dir(target.parent)

        try:
            fp = open(target, "wb")
        except OSError as exc:
            raise FileSystemError(f"Не удалось создать файл ({exc})", path=target, stage="save") from exc

        try:
            with fp:
                image_format.encode(image.pil_image, fp, self.jpeg_quality)
        except (OSError, ValueError) as exc:
            target.unlink(missing_ok=True)
            raise EncodeError(f"Не удалось записать как {image_format.name} ({exc})", path=target) from exc

        logger.debug("Записан %s", target)
        return target
