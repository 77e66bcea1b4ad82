"""Ограниченный канал между стадией ресайза и стадией сохранения.

Правила:
- закрывает канал только производитель, и только один раз;
- потребитель ничего не отправляет;
- `cancel()` будит обе стороны: любая блокирующая операция после отмены
  завершается `ChannelCancelled`, поэтому ни одна стадия не повисает навсегда.
"""
from __future__ import annotations

import queue
import threading
from typing import Generic, Iterator, TypeVar

T = TypeVar("T")

_CLOSED = object()


class ChannelClosed(Exception):
    """Канал закрыт производителем и прочитан до конца."""


class ChannelCancelled(Exception):
    """Канал отменён: вторая стадия завершилась с ошибкой."""


class Channel(Generic[T]):
    def __init__(self, capacity: int = 1, poll_interval: float = 0.05) -> None:
        if capacity < 1:
            raise ValueError(f"capacity must be >= 1, got {capacity}")
        self.capacity = capacity
        self._queue: "queue.Queue[object]" = queue.Queue(maxsize=capacity)
        self._cancelled = threading.Event()
        self._closed = False
        self._drained = False
        self._poll_interval = poll_interval

    @property
    def cancelled(self) -> bool:
        return self._cancelled.is_set()

    @property
    def closed(self) -> bool:
        return self._closed

    def cancel(self) -> None:
        self._cancelled.set()

    def check(self) -> None:
        if self._cancelled.is_set():
            raise ChannelCancelled()

    def _put(self, item: object) -> None:
        while True:
            self.check()
            try:
                self._queue.put(item, timeout=self._poll_interval)
                return
            except queue.Full:
                continue

    def put(self, item: T) -> None:
        """Отправляет запись; ждёт, пока в канале есть место (backpressure)."""
        if self._closed:
            raise RuntimeError("send on closed channel")
        self._put(item)

    def close(self) -> None:
        """Сигнал "данных больше не будет"."""
        if self._closed:
            raise RuntimeError("close of closed channel")
        self._closed = True
        self._put(_CLOSED)

    def get(self) -> T:
        """Следующая запись.

        Raises:
            ChannelClosed: канал закрыт и пуст.
            ChannelCancelled: канал отменён.
        """
        if self._drained:
            raise ChannelClosed()
        while True:
            self.check()
            try:
                item = self._queue.get(timeout=self._poll_interval)
            except queue.Empty:
                continue
            if item is _CLOSED:
                self._drained = True
                raise ChannelClosed()
            return item  # type: ignore[return-value]

    def __iter__(self) -> Iterator[T]:
        while True:
            try:
                yield self.get()
            except ChannelClosed:
                return
