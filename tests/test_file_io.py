import io
from pathlib import Path

import pytest

from paranoid_spacing.file_io import file_needs_spacing, read_spaced, space_file, space_path


class RecordingWriter(io.StringIO):
    def __init__(self) -> None:
        super().__init__()
        self.events: list[str] = []

    def write(self, s: str) -> int:
        self.events.append("write")
        return super().write(s)

    def flush(self) -> None:
        self.events.append("flush")
        super().flush()


class BrokenWriter(io.StringIO):
    def write(self, s: str) -> int:
        raise OSError("disk full")


def _sample(tmp_path: Path) -> Path:
    path = tmp_path / "sample.txt"
    path.write_bytes("中文ABC\n前面+後面\r\n最後一行123".encode("utf-8"))
    return path


def test_space_file_spaces_each_line_and_keeps_line_endings(tmp_path: Path) -> None:
    out = io.StringIO()
    space_file(_sample(tmp_path), out)
    assert out.getvalue() == "中文 ABC\n前面 + 後面\r\n最後一行 123"


def test_space_file_verbatim_copy(tmp_path: Path) -> None:
    out = io.StringIO()
    space_file(_sample(tmp_path), out, spacing=False)
    assert out.getvalue() == "中文ABC\n前面+後面\r\n最後一行123"


def test_space_file_flushes_after_last_write(tmp_path: Path) -> None:
    out = RecordingWriter()
    space_file(_sample(tmp_path), out)
    assert out.events == ["write", "write", "write", "flush"]


def test_space_file_empty_file(tmp_path: Path) -> None:
    path = tmp_path / "empty.txt"
    path.write_text("", encoding="utf-8")
    out = io.StringIO()
    space_file(path, out)
    assert out.getvalue() == ""


def test_space_file_missing_file_raises(tmp_path: Path) -> None:
    out = io.StringIO()
    with pytest.raises(FileNotFoundError):
        space_file(tmp_path / "missing.txt", out)
    assert out.getvalue() == ""


def test_space_file_propagates_write_errors(tmp_path: Path) -> None:
    with pytest.raises(OSError, match="disk full"):
        space_file(_sample(tmp_path), BrokenWriter())


def test_space_file_propagates_decode_errors(tmp_path: Path) -> None:
    path = tmp_path / "latin1.txt"
    path.write_bytes(b"caf\xe9\n")
    with pytest.raises(UnicodeDecodeError):
        space_file(path, io.StringIO())


def test_space_file_custom_encoding(tmp_path: Path) -> None:
    path = tmp_path / "gbk.txt"
    path.write_bytes("中文ABC\n".encode("gbk"))
    out = io.StringIO()
    space_file(path, out, encoding="gbk")
    assert out.getvalue() == "中文 ABC\n"


def test_read_spaced(tmp_path: Path) -> None:
    original, spaced = read_spaced(_sample(tmp_path))
    assert original == "中文ABC\n前面+後面\r\n最後一行123"
    assert spaced == "中文 ABC\n前面 + 後面\r\n最後一行 123"


def test_space_path_rewrites_with_backup(tmp_path: Path) -> None:
    path = _sample(tmp_path)
    assert space_path(path) is True
    assert path.read_bytes().decode("utf-8") == "中文 ABC\n前面 + 後面\r\n最後一行 123"
    backup = tmp_path / "sample.txt.bak"
    assert backup.read_bytes().decode("utf-8") == "中文ABC\n前面+後面\r\n最後一行123"


def test_space_path_leaves_spaced_file_alone(tmp_path: Path) -> None:
    path = tmp_path / "done.txt"
    path.write_text("中文 ABC\n", encoding="utf-8")
    assert space_path(path) is False
    assert not (tmp_path / "done.txt.bak").exists()


def test_space_path_without_backup(tmp_path: Path) -> None:
    path = _sample(tmp_path)
    assert space_path(path, backup_suffix=None) is True
    assert list(tmp_path.iterdir()) == [path]


def test_file_needs_spacing(tmp_path: Path) -> None:
    assert file_needs_spacing(_sample(tmp_path)) is True
    done = tmp_path / "done.txt"
    done.write_text("中文 ABC\n前面 + 後面\n", encoding="utf-8")
    assert file_needs_spacing(done) is False
    with pytest.raises(FileNotFoundError):
        file_needs_spacing(tmp_path / "missing.txt")
