import pytest
from glicko2kit.core.config import get_default_config, set_default_config


@pytest.fixture(autouse=True)
def restore_default_config():
    """tests may replace the process-wide default, put the original back afterwards"""
    original = get_default_config()
    yield
    set_default_config(original)
