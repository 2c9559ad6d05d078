import sys
import os
from tempfile import TemporaryDirectory
import pytest
# Ensure the project root is on sys.path for all tests
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

SAMPLE_MODEL_PATH = os.path.join(os.path.dirname(__file__), "data", "lsp_sample.json")


@pytest.fixture
def temp_dir():
    """Create a temporary directory for test outputs."""
    with TemporaryDirectory() as dir_path:
        yield dir_path


@pytest.fixture
def sample_model_path():
    return SAMPLE_MODEL_PATH


@pytest.fixture
def sample_model():
    """The sample entity model, loaded fresh for every test."""
    from model_loader import load_model_file
    return load_model_file(SAMPLE_MODEL_PATH)
