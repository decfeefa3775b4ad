# どこで: `src/circlestrip/__main__.py`。
# 何を: `python -m circlestrip` で CLI を起動する。

from __future__ import annotations

import sys

from circlestrip.cli import main

if __name__ == "__main__":
    sys.exit(main())
