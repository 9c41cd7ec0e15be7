# Pytest configuration for TinyLingo tests
"""
Shared fixtures.

Every test runs with TINYLINGO_HOME pointed at a temporary directory so the
real ~/.config/tinylingo is never read or written.
"""

import pytest
import sys
from pathlib import Path

# Add project root to path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))

from tinylingo.settings import SmartSettings, TinyLingoConfig


@pytest.fixture(autouse=True)
def tinylingo_home(tmp_path, monkeypatch):
    """Isolate the config directory and environment overrides."""
    home = tmp_path / "tinylingo-home"
    monkeypatch.setenv("TINYLINGO_HOME", str(home))
    monkeypatch.delenv("TINYLINGO_API_KEY", raising=False)
    monkeypatch.delenv("TINYLINGO_DEBUG", raising=False)
    return home


@pytest.fixture
def glossary():
    """A small mixed CJK/ASCII glossary."""
    return {
        "智能抠图": "BGRemover module",
        "联调": "source debugging",
        "提交": "git commit only",
        "背景移除": "background removal feature",
        "godot": "the game engine, not the play",
    }


@pytest.fixture
def smart_config():
    """Config with smart matching enabled."""
    return TinyLingoConfig(smart=SmartSettings(
        enabled=True,
        endpoint="http://127.0.0.1:1234/v1/chat/completions",
        model="qwen3-0.6b",
        fuzzy_threshold=0.1,
    ))


@pytest.fixture
def plain_config():
    """Default config (smart matching disabled)."""
    return TinyLingoConfig()
