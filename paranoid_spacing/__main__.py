"""`python -m paranoid_spacing` 的入口模块。"""

from __future__ import annotations

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
