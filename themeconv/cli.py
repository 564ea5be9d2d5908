#!/usr/bin/env python3
"""
themeconv CLI

Command-line interface for converting VS Code color themes to tmTheme.

Usage:
    themeconv <source> [options]
    themeconv monokai-color-theme.json
    themeconv monokai-color-theme.json -n "Monokai Classic"
    themeconv ./themes/                           # convert all .json files in directory
    themeconv one.json two.json                   # convert multiple files

Options:
    -o, --output DIR     Output directory (default: ./themeconv_output)
    -n, --name NAME      Theme name for a single source (default: file name)
    --stdout             Print to stdout instead of saving files
    --formats            Show all supported formats
    -v, --verbose        Enable informational logging
"""

import argparse
import logging
import os
import sys

from themeconv.core import ConversionEngine


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="themeconv",
        description=(
            "VS Code to tmTheme converter\n\n"
            "Converts VS Code JSON color themes into TextMate/Sublime\n"
            "property-list (.tmTheme) color schemes."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=(
            "Examples:\n"
            "  themeconv monokai-color-theme.json\n"
            "  themeconv monokai-color-theme.json -n \"Monokai Classic\"\n"
            "  themeconv ./themes/                     # whole directory\n"
            "  themeconv one.json --stdout             # print to terminal\n"
            "  themeconv one.json -o ./tmthemes        # custom output dir\n"
        ),
    )

    parser.add_argument(
        "sources",
        nargs="*",
        help="Theme files or directories to convert",
    )
    parser.add_argument(
        "-o", "--output",
        default=None,
        help="Output directory (default: ./themeconv_output)",
    )
    parser.add_argument(
        "-n", "--name",
        default=None,
        help="Name of the output theme (single file source only)",
    )
    parser.add_argument(
        "--stdout",
        action="store_true",
        help="Print the property list to stdout instead of saving to files",
    )
    parser.add_argument(
        "--formats",
        action="store_true",
        help="Show all supported input formats and exit",
    )
    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable informational logging",
    )

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.INFO if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.formats:
        _show_formats()
        return

    if not args.sources:
        parser.print_help()
        print("\nError: No sources provided. Specify theme files or directories to convert.")
        sys.exit(1)

    if args.name and (len(args.sources) > 1 or os.path.isdir(args.sources[0])):
        print("Error: --name can only be used with a single theme file.", file=sys.stderr)
        sys.exit(1)

    engine = ConversionEngine(output_dir=args.output)
    save = not args.stdout

    print("=" * 60)
    print("  THEMECONV - VS Code to tmTheme Converter")
    print("=" * 60)
    print()

    success_count = 0
    error_count = 0

    for source in args.sources:
        try:
            if os.path.isdir(source):
                print(f"[DIR] Converting all theme files in: {source}")
                rendered = engine.convert_directory(source, save=save)
            else:
                rendered = [engine.convert(source, name=args.name, save=save)]
            if args.stdout:
                for document in rendered:
                    print(document.decode("utf-8"))
                    print("\n" + "=" * 60 + "\n")
            success_count += len(rendered)
        except (OSError, ValueError) as e:
            print(f"[ERROR] {source}: {e}", file=sys.stderr)
            error_count += 1

    print()
    print("-" * 60)
    print(f"  Done: {success_count} converted, {error_count} errors")
    if save:
        print(f"  Output: {engine.output_dir}")
    print("-" * 60)

    if error_count:
        sys.exit(1)


def _show_formats():
    """Display all supported formats."""
    formats = ConversionEngine.supported_formats()
    print("\nSupported Input Formats:")
    print("-" * 40)
    for category, extensions in formats.items():
        print(f"\n  {category}:")
        for ext in extensions:
            print(f"    {ext}")
    print()


if __name__ == "__main__":
    main()
