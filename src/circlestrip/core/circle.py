"""
どこで: `src/circlestrip/core/circle.py`。単位円点列の生成本体。
何を: 半径 1・原点中心の円周上の点を、三角形ストリップ順で呼び出し側バッファへ書き込む。
なぜ: sin/cos 評価を 1 回に抑え、残りを回転と対称反転で求めて大きな点数でも安く作るため。

2 つの変種を提供する。

- `create_circle`: 半円ぶんだけ回転し、各点の鏡像で残り半分を埋める。
- `create_circle_quarter`: 偶数点数では 1/4 円ぶんだけ回転し、書き込み済みの点を
  読み戻して反転することで残りを埋める。奇数点数では `create_circle` と同じ。
"""

from __future__ import annotations

import logging
import operator
from typing import Any, Callable

import numpy as np
from numba import njit  # type: ignore[attr-defined]

from circlestrip.core.errors import (
    DegenerateInputError,
    NullOutputError,
    SizeMismatchError,
    UnsupportedDtypeError,
)
from circlestrip.core.rotation import rotate_step, rotation_increment

_logger = logging.getLogger(__name__)

DRIFT_WARN_COUNT = 10_000
"""回転誤差の蓄積を警告する点数の閾値（float64 基準）。

float32 では数百点で単位円からのずれが 1e-5 を超えうる。
"""

SUPPORTED_DTYPES = (np.dtype(np.float32), np.dtype(np.float64))


def create_circle(count: int, out: np.ndarray, *, clockwise: bool = True) -> None:
    """半円の対称性を使って円周上の点列を `out` へ書き込む。

    Parameters
    ----------
    count : int
        点数 N（1 以上）。
    out : np.ndarray
        float32/float64 の書き込み先。shape (2N,) または (N, 2) の C 連続配列。
    clockwise : bool, optional
        True なら時計回り、False なら反時計回りの巻き順で並べる。

    Raises
    ------
    NullOutputError
        `out` が None の場合。
    DegenerateInputError
        `count` が 1 未満の場合。
    SizeMismatchError
        `out` の要素数が 2N でない場合。
    UnsupportedDtypeError
        `out` の dtype が浮動小数でない場合。

    Notes
    -----
    - N が奇数なら上端 (0, 1) から始め、各回転点の左右反転 (-x, y) を直後に置く。
    - N が偶数なら右端 (1, 0) から始め、各回転点の上下反転 (x, -y) を直後に置き、
      最後に左端 (-1, 0) を 1 回だけ置く。
    - 回転は ceil(N/2) 回以下で、残りは符号反転で求める。
    """
    flat, n = _prepare_output(count, out)
    cos_incr, sin_incr = rotation_increment(n, flat.dtype, clockwise)
    end = _fill_half_numba(flat, n, cos_incr, sin_incr)
    _check_cursor(end, n, "create_circle")


def create_circle_quarter(count: int, out: np.ndarray, *, clockwise: bool = True) -> None:
    """1/4 円の対称性を使って円周上の点列を `out` へ書き込む。

    引数・例外・出力順は `create_circle` と同じ。偶数 N では回転を floor(N/2)/2 回に減らし、
    残りの点は書き込み済みの点を後ろから読み戻して x を反転することで求める。
    反転で得た点は既存の点の符号違いなので、新たな丸め誤差は加わらない。
    """
    flat, n = _prepare_output(count, out)
    cos_incr, sin_incr = rotation_increment(n, flat.dtype, clockwise)
    end = _fill_quarter_numba(flat, n, cos_incr, sin_incr)
    _check_cursor(end, n, "create_circle_quarter")


GENERATORS: dict[str, Callable[..., None]] = {
    "half": create_circle,
    "quarter": create_circle_quarter,
}
"""method 名から生成関数を引くテーブル。"""


def circle_points(
    count: int,
    *,
    clockwise: bool = True,
    method: str = "half",
    dtype: Any = np.float32,
) -> np.ndarray:
    """バッファを確保して生成関数を呼び、shape (N, 2) の点列を返す。

    生成関数自体は確保を行わないため、呼び出し側の確保をまとめた補助関数。
    """
    try:
        generate = GENERATORS[str(method)]
    except KeyError as exc:
        raise ValueError(
            f"method は {sorted(GENERATORS)} のいずれかである必要がある: got={method!r}"
        ) from exc

    n = _as_count(count)
    if n < 1:
        raise DegenerateInputError(f"count は 1 以上である必要がある: got={n}")
    dt = _as_float_dtype(dtype)
    try:
        points = np.zeros((n, 2), dtype=dt)
    except (ValueError, OverflowError) as exc:
        # numpy が配列サイズを表現できない点数も確保失敗として扱う。
        raise MemoryError(f"count={n} の点列を確保できない: {exc}") from exc
    generate(n, points, clockwise=clockwise)
    return points


def _as_count(count: Any) -> int:
    if isinstance(count, (bool, np.bool_)):
        raise TypeError(f"count は整数である必要がある: got={count!r}")
    try:
        return operator.index(count)
    except TypeError as exc:
        raise TypeError(f"count は整数である必要がある: got={count!r}") from exc


def _as_float_dtype(dtype: Any) -> np.dtype:
    try:
        dt = np.dtype(dtype)
    except TypeError as exc:
        raise UnsupportedDtypeError(f"未対応の dtype: got={dtype!r}") from exc
    if dt not in SUPPORTED_DTYPES:
        raise UnsupportedDtypeError(
            f"dtype は float32 か float64 である必要がある: got={dt}"
        )
    return dt


def _prepare_output(count: Any, out: Any) -> tuple[np.ndarray, int]:
    """入力を検証し、`out` を 1 次元ビューにして (flat, N) を返す。

    検証は書き込み前にすべて済ませ、失敗時に部分書き込みを残さない。
    """
    if out is None:
        raise NullOutputError("出力バッファ out は None にできない")

    n = _as_count(count)
    if n < 1:
        raise DegenerateInputError(f"count は 1 以上である必要がある: got={n}")

    if not isinstance(out, np.ndarray):
        raise TypeError(f"out は np.ndarray である必要がある: got={type(out).__name__}")
    _as_float_dtype(out.dtype)

    if out.ndim == 1:
        if out.shape[0] != 2 * n:
            raise SizeMismatchError(
                f"out の長さは 2 * count である必要がある: count={n}, got={out.shape[0]}"
            )
    elif out.ndim == 2:
        if out.shape != (n, 2):
            raise SizeMismatchError(
                f"out の shape は (count, 2) である必要がある: count={n}, got={out.shape}"
            )
    else:
        raise SizeMismatchError(f"out は 1 次元か (count, 2) である必要がある: got={out.shape}")

    if not out.flags.c_contiguous:
        raise ValueError("out は C 連続配列である必要がある")
    if not out.flags.writeable:
        raise ValueError("out は書き込み可能である必要がある")

    if n > DRIFT_WARN_COUNT:
        _logger.warning(
            "count=%d は回転誤差の蓄積で単位円から外れる可能性がある（閾値 %d）",
            n,
            DRIFT_WARN_COUNT,
        )

    # C 連続なので reshape はコピーせずビューを返す。
    return out.reshape(-1), n


def _check_cursor(end: int, count: int, name: str) -> None:
    if int(end) != 2 * count:
        raise RuntimeError(
            f"{name} の書き込み位置が不整合: count={count}, end={int(end)}"
        )


@njit(cache=True)  # type: ignore[misc]
def _fill_odd_numba(out, half, cos_incr, sin_incr):
    """奇数点数の円を書き込み、最終書き込み位置を返す（Numba 版）。"""
    # 上端から右半円を下へ辿る。
    out[0] = 0.0
    out[1] = 1.0
    x = out[0]
    y = out[1]

    cursor = 2
    for _ in range(half):
        x, y = rotate_step(x, y, cos_incr, sin_incr)
        out[cursor] = x
        out[cursor + 1] = y
        # 左右反転。
        out[cursor + 2] = -x
        out[cursor + 3] = y
        cursor += 4
    return cursor


@njit(cache=True)  # type: ignore[misc]
def _fill_even_head_numba(out, steps, cos_incr, sin_incr):
    """偶数点数の円の右端と回転 steps 回ぶんの点対を書き込む（Numba 版）。"""
    # 右端から下半円を左へ辿る。
    out[0] = 1.0
    out[1] = 0.0
    x = out[0]
    y = out[1]

    cursor = 2
    for _ in range(steps):
        x, y = rotate_step(x, y, cos_incr, sin_incr)
        out[cursor] = x
        out[cursor + 1] = y
        # 上下反転。
        out[cursor + 2] = x
        out[cursor + 3] = -y
        cursor += 4
    return cursor


@njit(cache=True)  # type: ignore[misc]
def _fill_half_numba(out, count, cos_incr, sin_incr):
    """`create_circle` の本体（Numba 版）。"""
    half = count // 2
    if count % 2 == 1:
        return _fill_odd_numba(out, half, cos_incr, sin_incr)

    cursor = _fill_even_head_numba(out, half - 1, cos_incr, sin_incr)
    # 左端は自身の鏡像なので 1 回だけ置く。
    out[cursor] = -1.0
    out[cursor + 1] = 0.0
    return cursor + 2


@njit(cache=True)  # type: ignore[misc]
def _fill_quarter_numba(out, count, cos_incr, sin_incr):
    """`create_circle_quarter` の本体（Numba 版）。"""
    half = count // 2
    if count % 2 == 1:
        return _fill_odd_numba(out, half, cos_incr, sin_incr)

    write = _fill_even_head_numba(out, half // 2, cos_incr, sin_incr)

    # 回転で得た右側の点（奇数番の点）を後ろから読み戻し、x を反転して左側を埋める。
    # 上下端にあたる点は読まないよう、half の偶奇で開始位置をずらす。
    if half % 2 == 1:
        read = half - 2
    else:
        read = half - 3
    while read > 0:
        assert 2 * read + 1 < write
        x = out[2 * read]
        y = out[2 * read + 1]
        out[write] = -x
        out[write + 1] = y
        out[write + 2] = -x
        out[write + 3] = -y
        write += 4
        read -= 2

    out[write] = -1.0
    out[write + 1] = 0.0
    return write + 2


__all__ = [
    "DRIFT_WARN_COUNT",
    "GENERATORS",
    "SUPPORTED_DTYPES",
    "circle_points",
    "create_circle",
    "create_circle_quarter",
]
