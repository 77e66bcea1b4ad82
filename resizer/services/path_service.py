"""Поиск изображений в каталоге.

Порядок результата совпадает с порядком листинга каталога (без сортировки).
Символические ссылки на каталоги обходятся, но каждый реальный каталог
посещается не более одного раза, поэтому циклы ссылок не зацикливают обход.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import List, Set

from resizer.models.errors import FileSystemError
from resizer.models.image_model import ImagePath
from resizer.services.codec_service import is_supported

logger = logging.getLogger(__name__)


class PathService:
    def collect(self, root: str | Path, recursive: bool = False) -> List[ImagePath]:
        """Собирает пути к поддерживаемым изображениям.

        Args:
            root: Корневой каталог.
            recursive: Спускаться ли в подкаталоги (глубина не ограничена).

        Returns:
            Список `ImagePath` в порядке листинга.

        Raises:
            FileSystemError: если корень или подкаталог не удаётся прочитать.
        """
        root = Path(root)
        found: List[ImagePath] = []
        self._walk(root, root, recursive, found, visited=set())
        logger.debug("Найдено изображений в %s: %d", root, len(found))
        return found

    def _walk(self, root: Path, directory: Path, recursive: bool, found: List[ImagePath], visited: Set[Path]) -> None:
        try:
            real = directory.resolve()
            if real in visited:
                logger.debug("Каталог уже обойден, пропуск: %s", directory)
                return
            visited.add(real)
            entries = list(directory.iterdir())
        except OSError as exc:
            raise FileSystemError(f"Не удалось прочитать каталог ({exc})", path=directory, stage="collect") from exc

        for entry in entries:
            try:
                is_dir = entry.is_dir()
                is_file = not is_dir and entry.is_file()
            except OSError as exc:
                raise FileSystemError(f"Не удалось получить сведения о файле ({exc})", path=entry, stage="collect") from exc

            if is_dir:
                if recursive:
                    self._walk(root, entry, recursive, found, visited)
                continue
            if is_file and is_supported(entry.suffix):
                found.append(ImagePath(path=entry, ext=entry.suffix, relative=entry.relative_to(root)))
