"""Build translation catalogs for every locale under a lang directory.

Usage:
    python main.py [lang_path] [--output DIR] [--strict] [--workers N]
"""

import argparse
import sys
from pathlib import Path
from typing import List, Optional

from dotenv import load_dotenv

from infrastructure.configuration import I18nSettings
from infrastructure.i18n import CatalogBuilder, SourceUnavailableError, publish_catalogs
from infrastructure.logging import get_module_logger

logger = get_module_logger()


def build_parser(i18n_settings: I18nSettings) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="parse-translations",
        description="Merge per-locale translation fragments into <locale>.json catalogs.",
    )
    parser.add_argument(
        "lang_path",
        nargs="?",
        default=i18n_settings.LANG_PATH,
        help="Source root with one directory per locale (default: %(default)s)",
    )
    parser.add_argument(
        "--output",
        default=i18n_settings.OUTPUT_PATH or None,
        help="Directory for built catalogs (default: the lang path)",
    )
    parser.add_argument(
        "--strict",
        action="store_true",
        default=i18n_settings.STRICT_KEY_COLLISIONS,
        help="Fail a locale when two fragments produce the same key",
    )
    parser.add_argument(
        "--workers",
        type=int,
        default=i18n_settings.BUILD_MAX_WORKERS,
        help="Maximum number of locales built in parallel (default: %(default)s)",
    )
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Run the catalog publish pipeline.

    Returns:
        Process exit code: 0 when every locale was published, 1 otherwise.
    """
    i18n_settings = I18nSettings()
    args = build_parser(i18n_settings).parse_args(argv)

    try:
        results = publish_catalogs(
            Path(args.lang_path),
            output_path=Path(args.output) if args.output else None,
            builder=CatalogBuilder(strict=args.strict),
            reserved=i18n_settings.RESERVED_SEGMENTS,
            max_workers=args.workers,
        )
    except SourceUnavailableError as e:
        logger.error("lang_path_unavailable", error=str(e))
        print(f"Error: {e}", file=sys.stderr)
        return 1

    failed = 0
    for locale, result in results.items():
        if result.is_success:
            print(result.message)
        else:
            failed += 1
            print(f'Failed to parse "{locale}" translations: {result.message}', file=sys.stderr)

    return 1 if failed else 0


if __name__ == "__main__":
    load_dotenv()
    sys.exit(main())
