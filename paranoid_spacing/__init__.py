"""
项目: paranoid-spacing
用途: 在中日韩文字与半角英文、数字、符号之间自动插入空格。
依赖: rich（日志与终端输出）、PyYAML（配置文件）。
示例用法:
    from paranoid_spacing import space_text
    print(space_text("當你凝視著bug，bug也凝視著你"))
"""

from __future__ import annotations

__all__ = ["__version__", "space_text", "space_file", "space_path"]

__version__: str = "1.0.0"

from .file_io import space_file, space_path  # noqa: E402
from .spacing import space_text  # noqa: E402
