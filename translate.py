"""Command-line front end for the translator.

Translates the texts given on the command line with one provider and prints one translation per line.
Settings come from an optional INI file; command-line options take precedence over it.

Example:
    python translate.py "Hello, world" --provider youdao --to zh
"""

from __future__ import annotations

import argparse
import asyncio
import sys
from pathlib import Path
from typing import TYPE_CHECKING, NoReturn

from config.loader import ConfigLoader, ConfigLoaderError
from core.trans import Language, TranslateExceptionError, TranslatorFactory
from core.version import VERSION
from models.config_models import Config
from models.translation_models import ProviderKind
from utils.logger_utils import LoggerUtils

if TYPE_CHECKING:
    import logging
    from collections.abc import Sequence

    from core.trans import TransInterface

logger: logging.Logger = LoggerUtils.get_logger(__name__)


def check_python_version() -> None:
    """Check if Python version is 3.12 or later.

    Raises:
        RuntimeError: If Python version is below 3.12.
    """
    if sys.version_info < (3, 12):
        msg = "Python 3.12 or later is required"
        raise RuntimeError(msg)


class _ArgumentParser(argparse.ArgumentParser):
    def error(self, message: str) -> NoReturn:
        print(f"\n{message}\n", file=sys.stderr)
        self.print_help(sys.stderr)
        raise SystemExit(2)


def parse_arguments(argv: Sequence[str] | None = None) -> argparse.Namespace:
    """Parse command-line arguments.

    Returns:
        argparse.Namespace: Parsed arguments.
    """
    parser = _ArgumentParser(
        description="Translate text with a remote translation provider",
        epilog="Example: python translate.py 'Hello, world' --provider youdao --to zh",
    )
    parser.add_argument("texts", nargs="+", metavar="TEXT", help="Text to translate")
    parser.add_argument(
        "--provider",
        dest="provider",
        metavar="NAME",
        help=f"Translation provider ({', '.join(ProviderKind)})",
    )
    parser.add_argument("--to", dest="tgt_lang", metavar="LANG", help="Target language, e.g. 'en' or 'zh-Hant'")
    parser.add_argument("--from", dest="src_lang", metavar="LANG", help="Source language (detected if omitted)")
    parser.add_argument("--config", dest="config", metavar="FILE", help="INI configuration file")
    parser.add_argument("--debug", dest="debug", action="store_true", help="Enable debug logging")
    parser.add_argument("--version", action="version", version=f"%(prog)s {VERSION}")
    return parser.parse_args(argv)


def load_config(args: argparse.Namespace) -> Config:
    """Load the configuration file, if any, and apply CLI overrides.

    Args:
        args: Command-line arguments.

    Returns:
        Config: Configuration object.

    Raises:
        ConfigLoaderError: If the configuration file cannot be loaded.
        ValueError: If an override names an unknown provider.
    """
    script_name: str = Path(sys.argv[0]).stem
    if args.config:
        return ConfigLoader(
            config_filename=args.config, script_name=script_name, provider=args.provider, debug=args.debug
        ).config

    config = Config()
    config.GENERAL.SCRIPT_NAME = script_name
    config.GENERAL.DEBUG = args.debug
    if args.provider is not None:
        config.TRANSLATION.PROVIDER = args.provider
    return config


def resolve_languages(args: argparse.Namespace, config: Config) -> tuple[Language, Language | None]:
    """Resolve target and source languages; CLI options win over the configuration.

    Raises:
        ValueError: If a language is unknown.
    """
    tgt_lang: Language = Language.parse(args.tgt_lang or config.TRANSLATION.TARGET_LANGUAGE)
    src_text: str = args.src_lang or config.TRANSLATION.SOURCE_LANGUAGE
    src_lang: Language | None = Language.parse(src_text) if src_text else None
    return tgt_lang, src_lang


async def translate(
    engine: TransInterface, texts: Sequence[str], tgt_lang: Language, src_lang: Language | None
) -> list[str]:
    """Translate the texts with one request where the engine allows it."""
    async with engine:
        if len(texts) == 1:
            return [(await engine.translate_one(texts[0], tgt_lang, src_lang)).text]
        return (await engine.translate_many(texts, tgt_lang, src_lang)).text


def main(argv: Sequence[str] | None = None) -> int:
    """Main entry point.

    Returns:
        int: Exit status. 0 on success, 1 on any configuration or translation failure.
    """
    check_python_version()
    args: argparse.Namespace = parse_arguments(argv)

    try:
        config: Config = load_config(args)
    except ConfigLoaderError as err:
        print(f"Error: {err}", file=sys.stderr)
        return 1

    logger_utils = LoggerUtils(config.GENERAL.LOG_FILE)
    if config.GENERAL.DEBUG:
        logger_utils.set_level("DEBUG")
    logger.debug("Configuration: %s", config)

    try:
        tgt_lang, src_lang = resolve_languages(args, config)
        engine: TransInterface = TranslatorFactory.create_from_config(config)
        results: list[str] = asyncio.run(translate(engine, args.texts, tgt_lang, src_lang))
    except (TranslateExceptionError, ValueError) as err:
        logger.debug("Translation failed", exc_info=True)
        print(f"Error: {err}", file=sys.stderr)
        return 1

    for text in results:
        print(text)
    return 0


def run() -> NoReturn:
    sys.exit(main())


if __name__ == "__main__":
    try:
        run()
    except KeyboardInterrupt:
        print("\nCancelled by user.", file=sys.stderr)
        sys.exit(130)
