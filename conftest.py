import pytest

from sample_chat import config


@pytest.fixture(autouse=True)
def clean_config(tmp_path):
    """Point config at an empty directory before every test."""
    config.init_config(tmp_path / "data-tests")
    yield
