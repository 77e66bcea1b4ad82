from __future__ import annotations

import argparse
import logging
from typing import Optional, Sequence

from tqdm.contrib.logging import logging_redirect_tqdm

from resizer.controllers.pipeline_controller import PipelineController
from resizer.models.errors import ConfigError, FileSystemError
from resizer.models.options import ResizeOptions

logger = logging.getLogger(__name__)

EXIT_OK = 0
EXIT_FAILURE = 1
EXIT_CONFIG = 2

LOG_FORMAT = "%(asctime)s - %(levelname)s - %(threadName)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="resizer",
        description="Пакетное изменение размера изображений JPEG/PNG с сохранением пропорций.",
    )
    parser.add_argument("-d", dest="source_dir", default=None, help="Каталог с изображениями (обязательно).")
    parser.add_argument("-p", dest="save_dir", default=None, help="Каталог для результатов. По умолчанию значение -d.")
    parser.add_argument("-r", dest="recursive", action="store_true", help="Обходить подкаталоги рекурсивно.")
    parser.add_argument(
        "-sc", dest="scale", type=int, default=1,
        help="Коэффициент масштаба. Отрицательный — уменьшение, положительный — увеличение.",
    )
    parser.add_argument("-q", dest="jpeg_quality", type=int, default=75, help="Качество JPEG (1..95).")
    parser.add_argument("-b", dest="buffer_size", type=int, default=1, help="Ёмкость канала между стадиями.")
    parser.add_argument("-v", dest="verbose", action="store_true", help="Подробный лог (DEBUG).")
    parser.add_argument("--no-progress", dest="show_progress", action="store_false", help="Не показывать прогресс.")
    return parser


def configure_logging(verbose: bool = False) -> None:
    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"))
    root = logging.getLogger()
    # повторный запуск в одном процессе (тесты) не должен дублировать вывод
    if root.hasHandlers():
        root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(logging.DEBUG if verbose else logging.INFO)


class ResizerApp:
    def __init__(self, argv: Optional[Sequence[str]] = None) -> None:
        self._args = build_parser().parse_args(list(argv) if argv is not None else None)
        configure_logging(self._args.verbose)

    def options(self) -> ResizeOptions:
        args = self._args
        return ResizeOptions(
            source_dir=args.source_dir,
            save_dir=args.save_dir,
            scale=args.scale,
            recursive=args.recursive,
            buffer_size=args.buffer_size,
            jpeg_quality=args.jpeg_quality,
            show_progress=args.show_progress,
        )

    def run(self) -> int:
        try:
            options = self.options().validate()
        except ConfigError as exc:
            logger.error("%s", exc)
            return EXIT_CONFIG

        with logging_redirect_tqdm():
            result = PipelineController(options=options).run()

        if not result.ok:
            logger.error("%s", result.error)
            # каталог существует, но не читается: это тоже ошибка параметров запуска
            if isinstance(result.error, FileSystemError) and result.error.stage == "collect":
                return EXIT_CONFIG
            return EXIT_FAILURE
        logger.info("Изменён размер изображений: %d", result.processed)
        return EXIT_OK
