"""
Pytest configuration for canto-braille tests
"""

import json
import shutil
import sys
import tempfile
from pathlib import Path

import pytest

# Make `import canto_braille` work when tests run from a source checkout
_REPO_DIR = Path(__file__).resolve().parent.parent
if str(_REPO_DIR) not in sys.path:
    sys.path.insert(0, str(_REPO_DIR))


def pytest_configure(config):
    config.addinivalue_line("markers", "unit: fast tests of a single module")
    config.addinivalue_line("markers", "integration: end-to-end tests through the CLI")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test files"""
    temp_path = tempfile.mkdtemp()
    yield Path(temp_path)
    shutil.rmtree(temp_path)


@pytest.fixture
def encode_config_path(temp_dir):
    """JSON config that switches the CLI to encoding"""
    config_path = temp_dir / "canto_braille.json"
    config_path.write_text(
        json.dumps({"direction": "encode", "cell_format": "unicode", "strict": False}),
        encoding="utf-8",
    )

    return config_path
