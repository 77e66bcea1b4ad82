"""Загрузка изображений с диска и упаковка метаданных.

Принципы:
- SRP: класс отвечает только за открытие файла и декодирование.
- OCP: формат выбирается через реестр `codec_service`, новые форматы не
  требуют правок здесь.
"""
from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image

from resizer.models.errors import DecodeError, FileSystemError
from resizer.models.image_model import SourceImage
from resizer.services.codec_service import format_for


class ImageService:
    def load_image(self, file_path: str | Path, ext: Optional[str] = None) -> SourceImage:
        """Декодирует изображение и возвращает его вместе с метаданными.

        Файл открывается и закрывается внутри вызова: пиксели к этому моменту
        уже загружены в память.

        Args:
            file_path: Путь до файла изображения.
            ext: Расширение, по которому выбирается декодер; по умолчанию суффикс пути.

        Returns:
            `SourceImage` c `PIL.Image.Image`, размерами, режимом и размером файла.

        Raises:
            FileSystemError: если файл не удаётся открыть.
            DecodeError: если содержимое не распознано как изображение нужного формата.
        """
        path = Path(file_path)
        image_format = format_for(ext if ext is not None else path.suffix)

        try:
            fp = open(path, "rb")
        except OSError as exc:
            raise FileSystemError(f"Не удалось открыть файл ({exc})", path=path, stage="resize") from exc

        with fp:
            try:
                pil_image = image_format.decode(fp)
            except (OSError, SyntaxError, ValueError, Image.DecompressionBombError) as exc:
                raise DecodeError(
                    f"Не удалось декодировать как {image_format.name} ({exc})", path=path
                ) from exc

        width, height = pil_image.size
        try:
            size_bytes: Optional[int] = path.stat().st_size
        except OSError:
            size_bytes = None

        return SourceImage(
            path=path,
            pil_image=pil_image,
            width=width,
            height=height,
            mode=pil_image.mode,
            size_bytes=size_bytes,
        )
