"""
Theme data structures for the source (VS Code) and output (tmTheme) models.
"""

import re
from dataclasses import dataclass, field
from typing import Any, Optional, Union

GLOBAL_SCOPE = ""
SCOPE_SEPARATOR = ", "

# C0 controls other than tab, newline and carriage return, and lone surrogates
_UNREPRESENTABLE_RE = re.compile("[\x00-\x08\x0b\x0c\x0e-\x1f\ud800-\udfff]")


def is_representable(text: str) -> bool:
    """Return True if ``text`` can be written into an XML property list."""
    return _UNREPRESENTABLE_RE.search(text) is None


@dataclass(frozen=True)
class SingleScope:
    """A token rule scope given as one selector string."""
    selector: str

    def flatten(self) -> str:
        return self.selector


@dataclass(frozen=True)
class MultiScope:
    """A token rule scope given as a list of selector strings."""
    selectors: tuple[str, ...]

    def flatten(self) -> str:
        """Join the selectors into a single scope key, keeping their order."""
        return SCOPE_SEPARATOR.join(self.selectors)


Scope = Union[SingleScope, MultiScope]


@dataclass(frozen=True)
class StyleSettings:
    """Optional foreground, background and font style of a rule."""
    foreground: Optional[str] = None
    background: Optional[str] = None
    font_style: Optional[str] = None

    def to_dict(self) -> dict[str, str]:
        """Return only the fields that are set, keyed by their plist names."""
        fields = (
            ("foreground", self.foreground),
            ("background", self.background),
            ("fontStyle", self.font_style),
        )
        return {key: value for key, value in fields if value is not None}


@dataclass(frozen=True)
class TokenRule:
    """A single entry of the source theme's ``tokenColors`` list."""
    scope: Scope
    settings: StyleSettings


@dataclass
class SourceTheme:
    """
    A parsed VS Code color theme.

    ``colors`` is kept as the raw JSON value; only a handful of keys are ever
    looked up from it, and any other content is tolerated.
    """
    name: Optional[str] = None
    colors: Any = None
    token_colors: list[TokenRule] = field(default_factory=list)

    def color(self, key: str) -> Optional[str]:
        """Look up an editor color, treating missing, non-string or unwritable values as absent."""
        if not isinstance(self.colors, dict):
            return None
        value = self.colors.get(key)
        if isinstance(value, str) and is_representable(value):
            return value
        return None


@dataclass(frozen=True)
class OutputRule:
    """One entry of the tmTheme ``settings`` array."""
    scope: str
    settings: StyleSettings

    def to_dict(self) -> dict[str, Any]:
        return {"scope": self.scope, "settings": self.settings.to_dict()}


@dataclass
class OutputTheme:
    """
    A rendered tmTheme document.

    The first rule is always the global rule; the rest follow the source
    token rules in order.
    """
    name: str
    uuid: str
    rules: list[OutputRule] = field(default_factory=list)

    def to_dict(self) -> dict[str, Any]:
        """Build the property-list tree in ``name``, ``uuid``, ``settings`` order."""
        return {
            "name": self.name,
            "uuid": self.uuid,
            "settings": [rule.to_dict() for rule in self.rules],
        }
