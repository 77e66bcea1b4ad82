"""Стадии конвейера: ресайз (производитель) и сохранение (потребитель).

SOLID:
- SRP: стадии только перемещают данные между сервисами и каналом;
  декодирование, пересэмплирование и запись живут в сервисах.
- DIP: сервисы передаются в конструктор, в тестах их легко подменить.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Callable, List, Optional, Sequence

from resizer.controllers.channel import Channel
from resizer.models.image_model import ImagePath, ResizedImage
from resizer.services.image_service import ImageService
from resizer.services.process_service import ProcessService
from resizer.services.save_service import SaveService

logger = logging.getLogger(__name__)


@dataclass
class ResizeWorker:
    """Декодирует каждый путь, считает новый размер и отправляет результат в канал.

    По завершении закрывает канал. При ошибке канал не закрывается:
    его отменяет координатор.
    """
    paths: Sequence[ImagePath]
    channel: Channel[ResizedImage]
    scale: int
    image_service: ImageService = field(default_factory=ImageService)
    process_service: ProcessService = field(default_factory=ProcessService)
    produced: int = 0

    def process(self, image_path: ImagePath) -> ResizedImage:
        source = self.image_service.load_image(image_path.path, image_path.ext)
        width, height = self.process_service.target_size(source.pil_image, self.scale)
        resized = self.process_service.resize(source.pil_image, width, height, path=image_path.path)
        logger.debug(
            "%s (%s, %s байт): %dx%d -> %dx%d",
            image_path.path, source.mode, source.size_bytes, source.width, source.height, width, height,
        )
        return ResizedImage(
            filename=image_path.path,
            ext=image_path.ext,
            width=width,
            height=height,
            pil_image=resized,
            relative=image_path.relative,
        )

    def run(self) -> int:
        for image_path in self.paths:
            self.channel.check()
            self.channel.put(self.process(image_path))
            self.produced += 1
        self.channel.close()
        return self.produced


@dataclass
class SaveWorker:
    """Читает канал до конца потока и записывает каждую запись ровно один раз."""
    channel: Channel[ResizedImage]
    save_service: SaveService
    on_saved: Optional[Callable[[Path], None]] = None
    written: List[Path] = field(default_factory=list)

    def run(self) -> int:
        for image in self.channel:
            target = self.save_service.save(image)
            self.written.append(target)
            if self.on_saved is not None:
                self.on_saved(target)
        return len(self.written)
