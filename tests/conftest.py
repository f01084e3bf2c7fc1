"""Test configuration and fixtures."""

import pytest
from pathlib import Path
import tempfile

from tmcore.config.loader import load_settings_from_string
from tmcore.config.schema import MatchConfig


@pytest.fixture
def sample_settings_yaml():
    """Provide a sample settings YAML for testing."""
    return """
version: 1
locale: de-DE
stemming: true
matching:
  threshold: 0.75
  max_results: 5
"""


@pytest.fixture
def sample_settings(sample_settings_yaml):
    """Provide a loaded settings object for testing."""
    return load_settings_from_string(sample_settings_yaml)


@pytest.fixture
def temp_settings_file(sample_settings_yaml):
    """Provide a temporary settings file for testing."""
    with tempfile.NamedTemporaryFile(mode='w', suffix='.yaml', delete=False, encoding='utf-8') as f:
        f.write(sample_settings_yaml)
        temp_path = Path(f.name)

    yield temp_path

    # Cleanup
    if temp_path.exists():
        temp_path.unlink()


@pytest.fixture
def ui_corpus():
    """Previously translated UI strings, in insertion order."""
    return [
        "Save the file",
        "Save the files",
        "Open the file",
        "Delete the file",
        "Print the document",
    ]


@pytest.fixture
def loose_config():
    """Low threshold so near misses show up."""
    return MatchConfig(threshold=0.5, max_results=10)


class SimpleTestLogger:
    """Simple logger for testing that captures messages."""

    def __init__(self):
        self.messages = []

    def info(self, msg: str, **kv):
        self.messages.append(('info', msg, kv))

    def warn(self, msg: str, **kv):
        self.messages.append(('warn', msg, kv))

    def error(self, msg: str, **kv):
        self.messages.append(('error', msg, kv))

    def clear(self):
        """Clear captured messages."""
        self.messages.clear()


class SimpleTestMeter:
    """Meter that records counters and observations in memory."""

    def __init__(self):
        self.counters = {}
        self.observations = []

    def inc(self, name: str, amount: int = 1, **tags):
        self.counters[name] = self.counters.get(name, 0) + amount

    def observe(self, name: str, value: float, **tags):
        self.observations.append((name, value))


@pytest.fixture
def test_logger():
    """Provide a test logger that captures messages."""
    return SimpleTestLogger()


@pytest.fixture
def test_meter():
    """Provide a test meter that captures metrics."""
    return SimpleTestMeter()
