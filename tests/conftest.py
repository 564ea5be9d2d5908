"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from themeconv.converters.vscode_converter import ThemeConverter
from themeconv.core import ConversionEngine
from themeconv.parser import ThemeParser
from tests.fixtures import (
    SAMPLE_BAD_SCOPE_JSON,
    SAMPLE_FULL_THEME_JSON,
    SAMPLE_MINIMAL_THEME_JSON,
    create_sample_source_theme,
    sequential_uuids,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Base Fixtures
# ============================================================================


@pytest.fixture
def parser():
    """Create a theme parser instance."""
    return ThemeParser()


@pytest.fixture
def converter():
    """Create a theme converter instance."""
    return ThemeConverter()


@pytest.fixture
def fixed_uuids():
    """Deterministic identifier factory."""
    return sequential_uuids()


@pytest.fixture
def engine(tmp_path):
    """Create a conversion engine writing into a temporary directory."""
    return ConversionEngine(output_dir=str(tmp_path / "out"))


# ============================================================================
# Theme Fixtures
# ============================================================================


@pytest.fixture
def sample_source_theme():
    """Create a fully-populated source theme."""
    return create_sample_source_theme()


@pytest.fixture
def minimal_theme_bytes():
    """The smallest useful theme document, as bytes."""
    return SAMPLE_MINIMAL_THEME_JSON.encode("utf-8")


@pytest.fixture
def full_theme_bytes():
    """A realistic theme document with extra keys, as bytes."""
    return SAMPLE_FULL_THEME_JSON.encode("utf-8")


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def temp_theme_file(tmp_path):
    """Create a temporary theme file."""
    file_path = tmp_path / "sample-dark-color-theme.json"
    file_path.write_text(SAMPLE_FULL_THEME_JSON, encoding="utf-8")
    return file_path


@pytest.fixture
def temp_theme_dir(tmp_path):
    """Create a directory with valid, malformed and unrelated files."""
    theme_dir = tmp_path / "themes"
    theme_dir.mkdir()
    (theme_dir / "dark.json").write_text(SAMPLE_FULL_THEME_JSON, encoding="utf-8")
    (theme_dir / "minimal.json").write_text(SAMPLE_MINIMAL_THEME_JSON, encoding="utf-8")
    (theme_dir / "broken.json").write_text(SAMPLE_BAD_SCOPE_JSON, encoding="utf-8")
    (theme_dir / "notes.txt").write_text("not a theme", encoding="utf-8")
    return theme_dir
