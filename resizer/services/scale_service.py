"""Арифметика коэффициента масштаба.

Обе стороны считаются одной и той же формулой с одним и тем же коэффициентом,
поэтому пропорции сохраняются с точностью до целочисленного усечения.
"""
from __future__ import annotations

from typing import Tuple

from resizer.models.errors import ConfigError


def new_dimension(original: int, scale: int) -> int:
    """Новый размер стороны.

    - scale < 0 (уменьшение): original / |scale|, целочисленно.
    - scale > 0 (увеличение): original + original / scale.

    Raises:
        ConfigError: если scale == 0.
    """
    if scale == 0:
        raise ConfigError("Коэффициент масштаба должен быть отличен от нуля")
    if original < 0:
        raise ValueError(f"Размер не может быть отрицательным: {original}")
    if scale < 0:
        return original // -scale
    return original + original // scale


def target_size(width: int, height: int, scale: int) -> Tuple[int, int]:
    return new_dimension(width, scale), new_dimension(height, scale)
