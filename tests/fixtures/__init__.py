# Test fixtures
from .sample_themes import (
    SAMPLE_MINIMAL_THEME_JSON,
    SAMPLE_FULL_THEME,
    SAMPLE_FULL_THEME_JSON,
    SAMPLE_EMPTY_THEME_JSON,
    SAMPLE_BAD_SCOPE_JSON,
    SAMPLE_TRUNCATED_JSON,
    create_sample_source_theme,
    sequential_uuids,
)

__all__ = [
    "SAMPLE_MINIMAL_THEME_JSON",
    "SAMPLE_FULL_THEME",
    "SAMPLE_FULL_THEME_JSON",
    "SAMPLE_EMPTY_THEME_JSON",
    "SAMPLE_BAD_SCOPE_JSON",
    "SAMPLE_TRUNCATED_JSON",
    "create_sample_source_theme",
    "sequential_uuids",
]
