"""CLI entry point: python -m easyread --url URL [options]"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

import yaml

from easyread import settings
from easyread.errors import ExtractionError
from easyread.items import BlockKind, ExtractedDocument
from easyread.profiles import ExtractionProfile, load_profile
from easyread.query import FetchError, extract, fetch

logger = logging.getLogger(__name__)


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="easyread",
        description=(
            "Turn a web page into a clean reading document: a title plus\n"
            "ordered headings and paragraphs, free of ads and page chrome."
        ),
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    source = parser.add_mutually_exclusive_group(required=True)
    source.add_argument("--url", metavar="URL",
                        help="Page to load and extract")
    source.add_argument("--file", metavar="PATH",
                        help="Extract from a saved HTML file instead of loading a URL")
    parser.add_argument("--format", choices=["rich", "text", "markdown", "json"],
                        default="rich", metavar="{rich,text,markdown,json}",
                        help="Output format (default: rich)")
    parser.add_argument("--static", action="store_true", default=False,
                        help="Use a plain HTTP request instead of headless Chromium")
    parser.add_argument("--profile", default=None, metavar="PATH",
                        help="YAML extraction profile")
    parser.add_argument("--timeout", type=int, default=None, metavar="SECONDS",
                        help="Navigation timeout in seconds (default: 30)")
    parser.add_argument("--log-level", default=settings.LOG_LEVEL,
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
                        metavar="{DEBUG,INFO,WARNING,ERROR}",
                        help=f"Logging level (default: {settings.LOG_LEVEL})")
    return parser


def _print_rich(document: ExtractedDocument) -> None:
    from rich.console import Console
    from rich.markup import escape
    from rich.panel import Panel
    from rich.text import Text

    console = Console()
    console.print(
        Panel.fit(
            f"[bold cyan]{escape(document.title)}[/bold cyan]\n"
            f"Source:   [green]{escape(document.source_url or '-')}[/green]\n"
            f"Blocks:   {len(document.blocks)}\n"
            f"Words:    {document.word_count:,}\n"
            f"Read:     {document.reading_time_minutes} min",
            border_style="cyan",
        ),
    )
    for block in document.blocks:
        if block.kind is BlockKind.HEADING:
            console.print()
            console.print(Text(block.text, style="bold magenta" if block.level == 1 else "bold"))
        else:
            console.print(Text(block.text))
        console.print()


def _render(document: ExtractedDocument, fmt: str) -> None:
    if fmt == "json":
        print(document.model_dump_json(indent=2))
    elif fmt == "markdown":
        print(document.to_markdown(), end="")
    elif fmt == "text":
        print(document.to_text())
    else:
        _print_rich(document)


def main(argv: list[str] | None = None) -> int:
    parser = _build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(level=args.log_level, format=settings.LOG_FORMAT)

    profile: ExtractionProfile | None = None
    if args.profile:
        try:
            profile = load_profile(args.profile, args.url or "")
        except (OSError, ValueError, yaml.YAMLError) as exc:
            print(f"ERROR: could not load profile {args.profile}: {exc}", file=sys.stderr)
            return 1

    try:
        if args.file:
            html = Path(args.file).read_text(encoding="utf-8", errors="replace")
            document = extract(html, profile=profile)
        else:
            document = fetch(
                args.url,
                render_js=not args.static,
                timeout=args.timeout,
                profile=profile,
            )
    except OSError as exc:
        print(f"ERROR: could not read {args.file}: {exc}", file=sys.stderr)
        return 1
    except FetchError as exc:
        logger.debug("fetch failed", exc_info=True)
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1
    except ExtractionError as exc:
        print(f"ERROR: {exc}", file=sys.stderr)
        return 1

    _render(document, args.format)
    return 0


if __name__ == "__main__":
    sys.exit(main())
