# どこで: `src/circlestrip/__init__.py`。
# 何を: ルート `circlestrip` パッケージを定義する。
# なぜ: import 起点を `circlestrip` に統一するため。

from __future__ import annotations

from circlestrip.core import (
    CircleStripError,
    DegenerateInputError,
    NullOutputError,
    SizeMismatchError,
    UnsupportedDtypeError,
    circle_points,
    create_circle,
    create_circle_quarter,
)

__all__ = [
    "CircleStripError",
    "DegenerateInputError",
    "NullOutputError",
    "SizeMismatchError",
    "UnsupportedDtypeError",
    "circle_points",
    "create_circle",
    "create_circle_quarter",
]
