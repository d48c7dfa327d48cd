"""paranoid_spacing.logging_utils
================================

统一的日志初始化：控制台使用 rich 渲染，可选地按日写入滚动日志文件。
"""

from __future__ import annotations

import logging
from datetime import datetime
from logging.handlers import RotatingFileHandler
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler

_CONFIGURED_FLAG = "_paranoid_spacing_configured"


def parse_level(level: str | int) -> int:
    """将 ``"debug"``/``"INFO"``/数字转换为 logging 级别，无法识别时回退到 INFO。"""

    if isinstance(level, int):
        return level
    value = logging.getLevelName(str(level).strip().upper())
    return value if isinstance(value, int) else logging.INFO


def setup_logger(
    name: str,
    log_dir: Path | None = None,
    level: str | int = logging.INFO,
    to_console: bool = True,
) -> logging.Logger:
    """构建项目日志器，重复调用只会调整级别。

    Args:
        name: 日志器名称，通常为 ``"paranoid_spacing"``。
        log_dir: 日志根目录；提供时在其下按日期建子目录并写入滚动文件。
        level: 日志级别名称或数值。
        to_console: 是否挂载 rich 控制台处理器（输出到 stderr）。

    Returns:
        已完成配置的 ``logging.Logger`` 实例。
    """

    logger = logging.getLogger(name)
    logger.setLevel(parse_level(level))
    if getattr(logger, _CONFIGURED_FLAG, False):
        return logger

    if log_dir is not None:
        day_dir = Path(log_dir).expanduser().resolve() / datetime.now().strftime("%Y-%m-%d")
        day_dir.mkdir(parents=True, exist_ok=True)
        log_file = day_dir / f"paranoid-spacing-{datetime.now().strftime('%Y%m%d')}.log"
        # 单文件 2MB，最多保留 5 个轮转
        file_handler = RotatingFileHandler(
            log_file,
            maxBytes=2 * 1024 * 1024,
            backupCount=5,
            encoding="utf-8",
        )
        file_handler.setFormatter(
            logging.Formatter(
                "%(asctime)s [%(levelname)s] %(name)s: %(message)s",
                datefmt="%Y-%m-%d %H:%M:%S",
            )
        )
        logger.addHandler(file_handler)

    if to_console:
        # 日志走 stderr，stdout 留给处理后的文本
        logger.addHandler(RichHandler(console=Console(stderr=True), rich_tracebacks=True, show_path=False))

    logger.propagate = False
    setattr(logger, _CONFIGURED_FLAG, True)
    return logger
