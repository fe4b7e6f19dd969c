from pathlib import Path

import pytest


@pytest.fixture
def examples_dir() -> Path:
    """Directory holding the sample Bella programs."""
    return Path(__file__).parent.parent / 'examples'
