"""
どこで: `src/circlestrip/cli.py`。デモ用 CLI。
何を: 点数を受け取ってバッファを確保し、円の点列を `x,y` の CSV 行で標準出力へ書く。
なぜ: 生成関数の出力をコマンドラインから手早く確認できるようにするため。
"""

from __future__ import annotations

import argparse
import logging
import sys

from circlestrip.core.circle import circle_points
from circlestrip.core.errors import CircleStripError
from circlestrip.core.runtime_config import runtime_config, set_config_path

_logger = logging.getLogger(__name__)


def main(argv: list[str] | None = None) -> int:
    args = _parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.config is not None:
        set_config_path(args.config)
    cfg = runtime_config()

    count = cfg.count if args.count is None else int(args.count)
    clockwise = cfg.clockwise if args.counter_clockwise is None else not args.counter_clockwise
    method = cfg.method if args.method is None else str(args.method)
    dtype = cfg.dtype if args.dtype is None else str(args.dtype)
    _logger.debug(
        "count=%d clockwise=%s method=%s dtype=%s config=%s",
        count,
        clockwise,
        method,
        dtype,
        cfg.config_path,
    )

    try:
        points = circle_points(count, clockwise=clockwise, method=method, dtype=dtype)
    except MemoryError as exc:
        print(f"Failed to allocate memory using {count} points; {exc}")  # noqa: T201
        return 1
    except CircleStripError as exc:
        _logger.error("%s", exc)
        return 1

    p = int(cfg.precision)
    lines = [f"Circle with {count} points:"]
    lines.extend(f"{float(x):.{p}g},{float(y):.{p}g}" for x, y in points)
    sys.stdout.write("\n".join(lines) + "\n")
    return 0


def _parse_args(argv: list[str] | None) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        prog="circlestrip",
        description="単位円上の点を三角形ストリップ順で CSV 出力します。",
    )
    p.add_argument("count", nargs="?", type=int, default=None, help="点数（省略時は config の circle.count）")
    p.add_argument(
        "--counter-clockwise",
        dest="counter_clockwise",
        action="store_const",
        const=True,
        default=None,
        help="反時計回りの巻き順で出力する",
    )
    p.add_argument(
        "--clockwise",
        dest="counter_clockwise",
        action="store_const",
        const=False,
        help="時計回りの巻き順で出力する（config の指定を上書き）",
    )
    p.add_argument("--method", choices=("half", "quarter"), default=None, help="対称性の使い方")
    p.add_argument("--dtype", choices=("float32", "float64"), default=None, help="出力の浮動小数型")
    p.add_argument("--config", default=None, help="config.yaml のパス")
    p.add_argument("-v", "--verbose", action="store_true", help="デバッグログを表示する")
    return p.parse_args(argv)


__all__ = ["main"]
