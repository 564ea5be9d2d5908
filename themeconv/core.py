"""
themeconv Core Engine

Reads VS Code theme files (or directories of them), runs them through the
converter and saves the resulting .tmTheme property lists.
"""

import logging
import os
from typing import Optional

from .converters.vscode_converter import ThemeConverter
from .parser import ParseError

logger = logging.getLogger(__name__)

DEFAULT_OUTPUT_DIRNAME = "themeconv_output"
OUTPUT_EXTENSION = ".tmTheme"


class ConversionEngine:
    """
    Main conversion engine.

    Accepts a theme file or a directory of theme files and produces
    tmTheme documents.
    """

    def __init__(self, output_dir: Optional[str] = None, converter: Optional[ThemeConverter] = None):
        self.output_dir = output_dir or os.path.join(os.getcwd(), DEFAULT_OUTPUT_DIRNAME)
        self.converter = converter or ThemeConverter()
        os.makedirs(self.output_dir, exist_ok=True)

    def convert(self, source: str, name: Optional[str] = None, save: bool = True) -> bytes:
        """
        Convert a theme file to a tmTheme document.

        Args:
            source: Path to a .json theme file
            name: Output theme name (defaults to the source file stem)
            save: If True, write the result into the output directory

        Returns:
            The rendered property list
        """
        source = source.strip()

        if not os.path.isfile(source):
            raise FileNotFoundError(f"Theme file not found: {source}")
        if not self.converter.can_handle(source):
            raise ValueError(
                f"Cannot handle source: {source}\n"
                f"Provide a VS Code theme file ({', '.join(sorted(ThemeConverter.SUPPORTED_EXTENSIONS))})."
            )

        theme_name = name or _theme_name(source)
        print(f"[JSON] Converting: {source}")

        with open(source, "rb") as f:
            data = f.read()
        rendered = self.converter.convert_bytes(data, theme_name, source=source)

        if save:
            self._save(theme_name, rendered)

        return rendered

    def convert_directory(self, dir_path: str, save: bool = True) -> list[bytes]:
        """
        Convert all theme files in a directory.

        Files that fail to parse are skipped. When saving, a file whose output
        name was already written in this batch is skipped rather than
        overwriting the earlier result.
        """
        if not os.path.isdir(dir_path):
            raise FileNotFoundError(f"Directory not found: {dir_path}")

        results = []
        written = {}  # output filename -> source filename
        for filename in sorted(os.listdir(dir_path)):
            file_path = os.path.join(dir_path, filename)
            if not os.path.isfile(file_path) or not self.converter.can_handle(file_path):
                continue

            out_name = _output_filename(_theme_name(file_path))
            if save and out_name in written:
                logger.warning(
                    "Skipping %s: %s was already written from %s", filename, out_name, written[out_name]
                )
                print(f"[SKIPPED] {filename}: {out_name} already written from {written[out_name]}")
                continue

            try:
                results.append(self.convert(file_path, save=save))
            except ParseError as e:
                logger.warning("Skipping %s: %s", filename, e)
                print(f"[ERROR] Failed to convert {filename}: {e}")
                continue
            written[out_name] = filename

        logger.info("Converted %d theme(s) from %s", len(results), dir_path)
        return results

    def _save(self, theme_name: str, rendered: bytes) -> str:
        out_path = os.path.join(self.output_dir, _output_filename(theme_name))
        with open(out_path, "wb") as f:
            f.write(rendered)
        logger.info("Saved %s", out_path)
        print(f"[SAVED] {out_path}")
        return out_path

    @staticmethod
    def supported_formats() -> dict:
        """Return a dictionary of all supported input formats."""
        return {
            "VS Code color theme": sorted(ThemeConverter.SUPPORTED_EXTENSIONS),
        }


def _theme_name(file_path: str) -> str:
    """Derive a theme name from the source file name."""
    name, _ = os.path.splitext(os.path.basename(file_path))
    # VS Code theme files are often named like "monokai-color-theme.json"
    for suffix in ("-color-theme", "-theme"):
        if name.endswith(suffix) and len(name) > len(suffix):
            return name[: -len(suffix)]
    return name


def _output_filename(theme_name: str) -> str:
    """Generate a .tmTheme filename from the theme name."""
    safe_name = "".join(c if c.isalnum() or c in "-_ " else "_" for c in theme_name)
    return f"{safe_name}{OUTPUT_EXTENSION}"
