"""
Parser for reading VS Code JSON color themes.
"""

import json
import logging
from typing import Any

from .theme import (
    MultiScope,
    Scope,
    SingleScope,
    SourceTheme,
    StyleSettings,
    TokenRule,
    is_representable,
)

logger = logging.getLogger(__name__)


class ParseError(ValueError):
    """Raised when a theme document does not match the expected shape."""
    pass


class ThemeParser:
    """
    Parses VS Code theme documents into SourceTheme objects.

    Only ``name``, ``colors`` and ``tokenColors`` are read; any other
    top-level keys are ignored.
    """

    SETTINGS_FIELDS = {
        "foreground": "foreground",
        "background": "background",
        "fontStyle": "font_style",
    }

    def parse_bytes(self, data: bytes | str, source: str = "<input>") -> SourceTheme:
        """
        Parse raw theme content.

        Args:
            data: The raw JSON document.
            source: Source name used in error messages.

        Returns:
            Parsed SourceTheme.

        Raises:
            ParseError: If the content is not valid JSON or a field has the wrong type.
        """
        try:
            document = json.loads(data)
        except UnicodeDecodeError as exc:
            raise ParseError(f"Failed to parse {source}: content is not valid text ({exc})") from exc
        except json.JSONDecodeError as exc:
            raise ParseError(f"Failed to parse {source}: invalid JSON ({exc})") from exc

        if not isinstance(document, dict):
            raise ParseError(f"Failed to parse {source}: expected a JSON object at the top level")

        name = document.get("name")
        if name is not None and not isinstance(name, str):
            raise ParseError(f"Failed to parse {source}: 'name' must be a string")

        raw_rules = document.get("tokenColors", [])
        if not isinstance(raw_rules, list):
            raise ParseError(f"Failed to parse {source}: 'tokenColors' must be a list")

        rules = [self._parse_rule(raw, index, source) for index, raw in enumerate(raw_rules)]
        logger.debug("Parsed %d token rules from %s", len(rules), source)

        return SourceTheme(
            name=name,
            colors=document.get("colors"),
            token_colors=rules,
        )

    def _parse_rule(self, raw: Any, index: int, source: str) -> TokenRule:
        """Parse one ``tokenColors`` entry."""
        where = f"{source}: tokenColors[{index}]"
        if not isinstance(raw, dict):
            raise ParseError(f"Failed to parse {where}: expected an object")
        if "scope" not in raw:
            raise ParseError(f"Failed to parse {where}: missing 'scope'")
        if "settings" not in raw:
            raise ParseError(f"Failed to parse {where}: missing 'settings'")

        return TokenRule(
            scope=self._parse_scope(raw["scope"], where),
            settings=self._parse_settings(raw["settings"], where),
        )

    @staticmethod
    def _parse_scope(raw: Any, where: str) -> Scope:
        """Accept either a single selector string or a list of them."""
        if isinstance(raw, str):
            _check_text(raw, where, "scope")
            return SingleScope(raw)
        if isinstance(raw, list) and all(isinstance(item, str) for item in raw):
            for position, item in enumerate(raw):
                _check_text(item, where, f"scope[{position}]")
            return MultiScope(tuple(raw))
        raise ParseError(
            f"Failed to parse {where}: 'scope' must be a string or a list of strings, "
            f"got {type(raw).__name__}"
        )

    def _parse_settings(self, raw: Any, where: str) -> StyleSettings:
        if not isinstance(raw, dict):
            raise ParseError(f"Failed to parse {where}: 'settings' must be an object")

        values = {}
        for key, attr in self.SETTINGS_FIELDS.items():
            value = raw.get(key)
            if value is not None:
                if not isinstance(value, str):
                    raise ParseError(f"Failed to parse {where}: settings.{key} must be a string")
                _check_text(value, where, f"settings.{key}")
            values[attr] = value
        return StyleSettings(**values)


def _check_text(value: str, where: str, field: str) -> None:
    """Reject strings a property list cannot hold."""
    if not is_representable(value):
        raise ParseError(
            f"Failed to parse {where}: {field} contains control characters "
            f"or unpaired surrogates"
        )
