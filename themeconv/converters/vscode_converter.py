"""
VS Code theme to tmTheme converter.

Maps the VS Code color/scope model onto the tmTheme settings array: editor
colors become the leading global rule, and every token rule is carried over
in order with its scope flattened to a single key.
"""

import logging
import os
import plistlib
import uuid
from typing import Callable, Optional

from ..parser import ThemeParser
from ..theme import GLOBAL_SCOPE, OutputRule, OutputTheme, SourceTheme, StyleSettings

logger = logging.getLogger(__name__)

GLOBAL_COLOR_KEYS = {
    "foreground": "editor.foreground",
    "background": "editor.background",
    "font_style": "editor.fontStyle",
}


class ThemeConverter:
    """Converts VS Code JSON themes into tmTheme property lists."""

    SUPPORTED_EXTENSIONS = {".json"}

    def __init__(self, parser: Optional[ThemeParser] = None):
        self.parser = parser or ThemeParser()

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(file_path.lower())
        return ext in ThemeConverter.SUPPORTED_EXTENSIONS

    def load(self, data: bytes, source: str = "<input>") -> SourceTheme:
        """
        Parse raw JSON bytes into a SourceTheme.

        Raises:
            ParseError: If the bytes are not a well-formed theme document.
        """
        return self.parser.parse_bytes(data, source=source)

    @staticmethod
    def convert(
        source: SourceTheme,
        output_name: str,
        uuid_factory: Callable[[], object] = uuid.uuid4,
    ) -> OutputTheme:
        """
        Build the tmTheme model for a parsed source theme.

        Args:
            source: The parsed VS Code theme.
            output_name: Name written verbatim into the output theme.
            uuid_factory: Called once to produce the theme identifier.

        Returns:
            OutputTheme whose first rule is the global rule.
        """
        global_settings = StyleSettings(
            **{attr: source.color(key) for attr, key in GLOBAL_COLOR_KEYS.items()}
        )
        rules = [OutputRule(scope=GLOBAL_SCOPE, settings=global_settings)]
        rules.extend(
            OutputRule(scope=rule.scope.flatten(), settings=rule.settings)
            for rule in source.token_colors
        )

        logger.debug("Converted %d token rules for theme %r", len(source.token_colors), output_name)
        return OutputTheme(name=output_name, uuid=str(uuid_factory()), rules=rules)

    @staticmethod
    def render(theme: OutputTheme) -> bytes:
        """Serialize an OutputTheme as an XML property list."""
        return plistlib.dumps(theme.to_dict(), sort_keys=False)

    def convert_bytes(self, data: bytes, output_name: str, source: str = "<input>") -> bytes:
        """Run load, convert and render in one pass."""
        return self.render(self.convert(self.load(data, source=source), output_name))
