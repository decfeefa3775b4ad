# どこで: `src/circlestrip/core/errors.py`。
# 何を: 円点列生成が送出する例外の型を定義する。
# なぜ: 呼び出し側が入力不備の種類ごとに捕捉できるようにするため。

from __future__ import annotations


class CircleStripError(Exception):
    """circlestrip の入力検証エラーの基底クラス。"""


class NullOutputError(CircleStripError, ValueError):
    """出力バッファが None のときに送出する。"""


class SizeMismatchError(CircleStripError, ValueError):
    """出力バッファの要素数が 2 * count と一致しないときに送出する。"""


class DegenerateInputError(CircleStripError, ValueError):
    """点数 count が 1 未満のときに送出する。"""


class UnsupportedDtypeError(CircleStripError, TypeError):
    """出力バッファの dtype が float32/float64 以外のときに送出する。"""


__all__ = [
    "CircleStripError",
    "DegenerateInputError",
    "NullOutputError",
    "SizeMismatchError",
    "UnsupportedDtypeError",
]
