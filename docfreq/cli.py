"""CLI entrypoints for docfreq commands."""

from __future__ import annotations

import argparse
import json
import mimetypes
import sys
from pathlib import Path

from .config import load_config
from .errors import DocFreqError
from .ingestion import APPLICATION_PDF, TEXT_PLAIN, DocumentIngestor
from .logging import configure_logging
from .stores import AnalysisStore


def _add_verbose_option(
    parser: argparse.ArgumentParser, *, suppress_default: bool = False
) -> None:
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        default=argparse.SUPPRESS if suppress_default else False,
        help="Log debug detail for ingestion and extraction.",
    )


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="docfreq",
        description="Compute word frequencies for text and PDF documents.",
    )
    _add_verbose_option(parser)
    subparsers = parser.add_subparsers(dest="command", required=True)

    serve_parser = subparsers.add_parser(
        "serve",
        help="Run the upload and retrieval HTTP service.",
    )
    _add_verbose_option(serve_parser, suppress_default=True)
    serve_parser.add_argument(
        "path",
        nargs="?",
        default=".",
        help="Directory containing .docfreq.yml (defaults to current directory).",
    )
    serve_parser.add_argument("--host", help="Override the configured bind host.")
    serve_parser.add_argument("--port", type=int, help="Override the configured port.")

    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Print word frequencies for a local document.",
    )
    _add_verbose_option(analyze_parser, suppress_default=True)
    analyze_parser.add_argument("file", help="Path to a .txt or .pdf document.")
    analyze_parser.add_argument(
        "--media-type",
        choices=[TEXT_PLAIN, APPLICATION_PDF],
        help="Declared media type (guessed from the file suffix when omitted).",
    )
    analyze_parser.add_argument(
        "--top",
        type=int,
        default=0,
        help="Only print the N most frequent words (0 prints all).",
    )
    analyze_parser.add_argument(
        "--json",
        action="store_true",
        help="Emit the analysis payload as JSON.",
    )
    analyze_parser.add_argument(
        "--strict-pages",
        action="store_true",
        help="Fail when any PDF page cannot be extracted instead of skipping it.",
    )

    return parser


def main(argv: list[str] | None = None) -> None:
    """CLI entrypoint for docfreq commands."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command == "serve":
        config = load_config(Path(args.path))
        configure_logging(config.logging, verbose=bool(args.verbose))
        if args.host:
            config.server.host = args.host
        if args.port:
            config.server.port = args.port

        from .service import run_service

        run_service(config)
    elif args.command == "analyze":
        configure_logging(verbose=bool(args.verbose))
        path = Path(args.file)
        media_type = args.media_type or _guess_media_type(path)
        store = AnalysisStore()
        ingestor = DocumentIngestor(store, ignore_page_errors=not args.strict_pages)
        try:
            with path.open("rb") as handle:
                identifier = ingestor.ingest(handle, media_type)
        except FileNotFoundError as exc:
            parser.exit(1, f"{exc}\n")
        except OSError as exc:
            parser.exit(1, f"docfreq analyze failed: {exc}\n")
        except DocFreqError as exc:
            parser.exit(1, f"docfreq analyze failed: {exc}\nRun with --verbose for more details.\n")

        analysis = store.get(identifier)
        entries = analysis.top(args.top) if args.top > 0 else analysis.frequencies
        if args.json:
            payload = {
                "id": analysis.id,
                "frequencies": [entry.to_dict() for entry in entries],
            }
            print(json.dumps(payload, indent=2, ensure_ascii=False))
        else:
            for entry in entries:
                print(f"{entry.frequency:>8}  {entry.word}")
    else:  # pragma: no cover - argparse enforces choices
        parser.exit(1, "Unknown command\n")


def _guess_media_type(path: Path) -> str:
    guessed, _ = mimetypes.guess_type(path.name)
    if guessed == APPLICATION_PDF:
        return APPLICATION_PDF
    if guessed is None or guessed.startswith("text/"):
        return TEXT_PLAIN
    return guessed


if __name__ == "__main__":
    main(sys.argv[1:])
