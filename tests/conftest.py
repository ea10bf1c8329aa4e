"""
Shared pytest fixtures and configuration for sconf tests.

Provides a sample draft, configuration paths under ``tmp_path`` and
logging isolation between tests.
"""

import json
import sys
from pathlib import Path
from typing import Any, Dict

import pytest

# Put `src/` first so `import sconf` uses workspace code.
_REPO_ROOT = Path(__file__).resolve().parent.parent
sys.path.insert(0, str(_REPO_ROOT / "src"))

from sconf.core.draft import preset  # noqa: E402
from sconf.utils.logger import reset_logging  # noqa: E402


@pytest.fixture(autouse=True)
def isolated_logging(monkeypatch):
    """Give every test a freshly configured logger."""
    monkeypatch.delenv("SCONF_LOG_LEVEL", raising=False)
    monkeypatch.delenv("SCONF_LOG_FILE", raising=False)
    reset_logging()
    yield
    reset_logging()


@pytest.fixture
def sample_draft() -> Dict[str, Dict[str, Any]]:
    """Draft with string, nested object and list presets."""
    return {
        "animal": preset("unicorn"),
        "fruit": preset("apple", {"choices": ["apple", "pear", "orange", "banana"]}),
        "person": preset({"name": "John", "age": 21}, {"description": "Owner"}),
        "list": preset([1, 2, 3, 4, 5]),
    }


@pytest.fixture
def sample_presets() -> Dict[str, Any]:
    return {
        "animal": "unicorn",
        "fruit": "apple",
        "person": {"name": "John", "age": 21},
        "list": [1, 2, 3, 4, 5],
    }


@pytest.fixture
def config_path(tmp_path: Path) -> Path:
    """Path to a configuration file whose parent directory does not exist yet."""
    return tmp_path / ".cache" / "test.json"


@pytest.fixture
def read_json():
    def _read(path: Path) -> Any:
        return json.loads(Path(path).read_text(encoding="utf-8"))

    return _read
