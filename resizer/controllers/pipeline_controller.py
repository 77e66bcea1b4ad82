"""Координатор конвейера: обход каталога, запуск двух стадий, сбор итога.

SOLID:
- SRP: класс управляет жизненным циклом канала и стадий (без логики обработки изображений).
- DIP: сервисы передаются полями dataclass, конкретные реализации подставляются по умолчанию.
Clean Code:
- Ошибки не завершают процесс: они возвращаются в `PipelineResult`,
  решение о коде выхода принимает CLI.
"""
from __future__ import annotations

import logging
import threading
from concurrent.futures import ThreadPoolExecutor, wait
from dataclasses import dataclass, field
from typing import Callable, List

from tqdm import tqdm

from resizer.controllers.channel import Channel, ChannelCancelled
from resizer.controllers.workers import ResizeWorker, SaveWorker
from resizer.models.errors import ResizerError
from resizer.models.image_model import PipelineResult, ResizedImage
from resizer.models.options import ResizeOptions
from resizer.services.image_service import ImageService
from resizer.services.path_service import PathService
from resizer.services.process_service import ProcessService
from resizer.services.save_service import SaveService

logger = logging.getLogger(__name__)


@dataclass
class PipelineController:
    """Запускает ResizeWorker и SaveWorker параллельно и ждёт обоих.

    Ответственности:
    - Однократный обход исходного каталога.
    - Владение каналом: создаёт его, передаёт стадиям, отменяет при ошибке.
    - Первая ошибка любой стадии становится ошибкой запуска; ошибки второй
      стадии при остановке попадают в `secondary_errors`.
    """
    options: ResizeOptions

    _path_service: PathService = field(default_factory=PathService)
    _image_service: ImageService = field(default_factory=ImageService)
    _process_service: ProcessService = field(default_factory=ProcessService)

    def run(self) -> PipelineResult:
        options = self.options
        try:
            paths = self._path_service.collect(options.source_dir, options.recursive)
        except ResizerError as exc:
            return PipelineResult(collected=0, processed=0, error=exc)

        if not paths:
            logger.info("В %s нет изображений .jpg/.jpeg/.png", options.source_dir)
            return PipelineResult(collected=0, processed=0)

        logger.info("Найдено изображений: %d, масштаб %+d", len(paths), options.scale)
        channel: Channel[ResizedImage] = Channel(capacity=options.buffer_size)
        errors: List[BaseException] = []
        lock = threading.Lock()

        def guarded(stage: str, run: Callable[[], int]) -> Callable[[], None]:
            def call() -> None:
                try:
                    run()
                except ChannelCancelled:
                    logger.debug("Стадия %s остановлена отменой канала", stage)
                except Exception as exc:
                    with lock:
                        errors.append(exc)
                    channel.cancel()

            return call

        with tqdm(total=len(paths), unit="img", desc="resize", disable=not options.show_progress) as bar:
            resize_worker = ResizeWorker(
                paths=paths,
                channel=channel,
                scale=options.scale,
                image_service=self._image_service,
                process_service=self._process_service,
            )
            save_worker = SaveWorker(
                channel=channel,
                save_service=SaveService(options.destination, jpeg_quality=options.jpeg_quality),
                on_saved=lambda _target: bar.update(1),
            )
            with ThreadPoolExecutor(max_workers=2, thread_name_prefix="resizer") as pool:
                futures = [
                    pool.submit(guarded("resize", resize_worker.run)),
                    pool.submit(guarded("save", save_worker.run)),
                ]
                try:
                    wait(futures)
                except KeyboardInterrupt:
                    channel.cancel()
                    raise

        for secondary in errors[1:]:
            logger.warning("Ошибка при остановке второй стадии: %s", secondary)

        return PipelineResult(
            collected=len(paths),
            processed=len(save_worker.written),
            written=tuple(save_worker.written),
            error=errors[0] if errors else None,
            secondary_errors=tuple(errors[1:]),
        )
