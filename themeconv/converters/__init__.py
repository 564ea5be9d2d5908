from .vscode_converter import ThemeConverter

__all__ = ["ThemeConverter"]
