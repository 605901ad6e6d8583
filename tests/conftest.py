#
# Pytest Fixtures
#

# Standard library -----------------------------------------------------------------------------------------------------
import pathlib
import tempfile

# Third Party ----------------------------------------------------------------------------------------------------------
import pytest


# Fixtures -------------------------------------------------------------------------------------------------------------

@pytest.fixture
def system_tmp(tmp_path: pathlib.Path, monkeypatch: pytest.MonkeyPatch) -> pathlib.Path:
    """Redirect the system temporary directory into an isolated folder for the test."""
    root = tmp_path / "system-tmp"
    root.mkdir()
    monkeypatch.setattr(tempfile, "tempdir", str(root))
    return root


@pytest.fixture
def populated_dir(tmp_path: pathlib.Path) -> pathlib.Path:
    """Create a directory with files, nested subdirectories and a dangling symlink."""
    root = tmp_path / "root"
    root.mkdir()
    (root / "a.txt").write_text("A")
    sub = root / "sub"
    sub.mkdir()
    (sub / "b.bin").write_bytes(b"\x00\x01")
    deep = sub / "deep"
    deep.mkdir()
    (deep / "c.txt").write_text("C")
    try:
        (deep / "dangling").symlink_to(tmp_path / "does-not-exist")
    except OSError as e:
        pytest.skip(f"Symlink not permitted on this platform: {e}")
    return root
