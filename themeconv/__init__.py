"""
themeconv - VS Code to tmTheme Color Scheme Converter

Converts VS Code JSON color themes into TextMate/Sublime property-list
themes. Editor colors become the global settings entry, token rules are
carried over in order with multi-scope selectors joined into one key.
"""

from .converters.vscode_converter import ThemeConverter
from .core import ConversionEngine
from .parser import ParseError, ThemeParser
from .theme import (
    MultiScope,
    OutputRule,
    OutputTheme,
    SingleScope,
    SourceTheme,
    StyleSettings,
    TokenRule,
)

__version__ = "1.0.0"

__all__ = [
    "ThemeConverter",
    "ConversionEngine",
    "ParseError",
    "ThemeParser",
    "MultiScope",
    "OutputRule",
    "OutputTheme",
    "SingleScope",
    "SourceTheme",
    "StyleSettings",
    "TokenRule",
]
