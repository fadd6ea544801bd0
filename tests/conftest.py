# tests/conftest.py
import pytest
import sys
import os

# Add the parent directory to the system path to ensure correct module import
sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
from utils.data_structures.hashmap import ChainingHashTable


@pytest.fixture
def table() -> ChainingHashTable:
    """
    Provide an empty table with the default settings (capacity 4, threshold 2/3, growth 2).
    """
    return ChainingHashTable()


@pytest.fixture
def clean_env(monkeypatch):
    """
    Remove every HASHTABLE_* variable so configuration tests start from the bundled defaults.
    """
    for var in list(os.environ):
        if var.startswith("HASHTABLE_"):
            monkeypatch.delenv(var, raising=False)
    return monkeypatch
