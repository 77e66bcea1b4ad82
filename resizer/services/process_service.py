from __future__ import annotations

from pathlib import Path
from typing import Optional

from PIL import Image

from resizer.models.errors import EmptyImageError
from resizer.services.scale_service import target_size


class ProcessService:
    resample = Image.Resampling.LANCZOS

    def target_size(self, image: Image.Image, scale: int) -> tuple[int, int]:
        """
        Новые размеры по исходным границам изображения и коэффициенту масштаба.
        """
        width, height = image.size
        return target_size(width, height, scale)

    def resize(self, image: Image.Image, width: int, height: int, path: Optional[Path] = None) -> Image.Image:
        """
        Пересэмплирование фильтром Ланцоша до (width, height).
        Исходное изображение не мутируется.
        Нулевая сторона — не сбой кодека, а отдельная ошибка с указанием файла.
        """
        if width <= 0 or height <= 0:
            src_w, src_h = image.size
            raise EmptyImageError(
                f"Целевой размер {width}x{height} пуст (исходный {src_w}x{src_h}), "
                "уменьшите модуль коэффициента масштаба",
                path=path,
            )
        # для "P" и "1" Pillow молча подменяет фильтр на NEAREST
        if image.mode == "P":
            image = image.convert("RGBA" if "transparency" in image.info else "RGB")
        elif image.mode == "1":
            image = image.convert("L")
        if image.size == (width, height):
            return image.copy()
        return image.resize((width, height), self.resample)
