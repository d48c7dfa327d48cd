"""paranoid_spacing.config
用途: 读取 YAML 配置文件并提供默认值。
依赖: PyYAML、dataclasses、pathlib。
示例: ``from paranoid_spacing.config import load_config``。
"""
from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

__all__ = ["ConfigError", "SpacingConfig", "DEFAULT_CONFIG_FILE", "load_config"]

DEFAULT_CONFIG_FILE = Path("paranoid_spacing.yaml")


class ConfigError(Exception):
    """配置解析相关的异常。"""


@dataclass(frozen=True)
class SpacingConfig:
    """命令行可调整的全部设置。"""

    encoding: str = "utf-8"  # 读写文件使用的编码
    backup_suffix: str = ".bak"  # 原地改写前备份文件的后缀，空字符串表示不备份
    log_level: str = "INFO"  # 日志级别
    log_dir: Optional[Path] = None  # 日志目录，None 表示只输出到控制台
    pattern: str = "*.txt"  # 传入目录时用于筛选文件的 glob


def _load_yaml(path: Path) -> Dict[str, Any]:
    """加载 YAML 并返回字典，空文件视为空配置。"""

    try:
        with path.open("r", encoding="utf-8") as fh:
            data = yaml.safe_load(fh) or {}
    except yaml.YAMLError as exc:
        raise ConfigError(f"解析 YAML 失败: {path}: {exc}") from exc
    except OSError as exc:
        raise ConfigError(f"无法读取配置文件 {path}: {exc}") from exc

    if not isinstance(data, dict):
        raise ConfigError(f"配置文件 {path} 顶层必须是映射类型")
    return data


def load_config(path: Path | None) -> SpacingConfig:
    """加载配置文件；路径为空或文件不存在时返回默认配置。"""

    if path is None:
        return SpacingConfig()
    path = Path(path).expanduser()
    if not path.exists():
        return SpacingConfig()

    data = _load_yaml(path)
    known = {item.name for item in fields(SpacingConfig)}
    unknown = sorted(set(data) - known)
    if unknown:
        raise ConfigError(f"配置文件 {path} 含有未知字段: {', '.join(unknown)}")

    values: Dict[str, Any] = {}
    for key, value in data.items():
        if key == "log_dir":
            values[key] = Path(value).expanduser() if value else None
        elif value is None:
            continue
        elif not isinstance(value, str):
            raise ConfigError(f"配置字段 {key} 应为字符串，实际为 {type(value).__name__}")
        else:
            values[key] = value
    return replace(SpacingConfig(), **values)
