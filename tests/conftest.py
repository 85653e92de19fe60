import pytest


@pytest.fixture
def make_config(tmp_path):
    """
    Write `content` to a file named `name` below a temporary
    directory and return its path as string.
    """

    def _make(name: str, content: str = "") -> str:
        path = tmp_path / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return str(path)

    return _make


@pytest.fixture
def in_tmp_path(tmp_path, monkeypatch):
    """Run the test with `tmp_path` as working directory."""
    monkeypatch.chdir(tmp_path)
    return tmp_path
