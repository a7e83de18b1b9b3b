"""Command line front end for the grounding utilities.

Examples:
  grounding excerpt --start 4 --end 9 --text quick document.txt
  echo "Der Hund und die Katze" | grounding language --prefer statistical
  grounding autonym de
"""

from __future__ import annotations

import argparse
import json
import sys

from grounding.errors import InvalidArgumentError
from grounding.models import Span
from grounding.pipeline.iso639 import autonym
from grounding.pipeline.language import classify_language_detailed
from grounding.pipeline.span import build_excerpt, index_to_utf16, normalize


def _read_text(path: str | None) -> str:
    source = path if path and path != "-" else "<stdin>"
    try:
        if source != "<stdin>":
            with open(source, "r", encoding="utf-8") as f:
                return f.read()
        return sys.stdin.read()
    except UnicodeDecodeError as exc:
        raise InvalidArgumentError(f"{source} is not valid UTF-8: {exc}") from exc
    except OSError as exc:
        raise InvalidArgumentError(f"cannot read {source}: {exc}") from exc


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(
        prog="grounding",
        description="Resolve text selections and identify languages",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__.split("\n\n", 1)[1],
    )
    sub = parser.add_subparsers(dest="command", required=True)

    excerpt = sub.add_parser("excerpt", help="Build a marked excerpt around a selection")
    excerpt.add_argument("file", nargs="?", help="Document file (default: stdin)")
    excerpt.add_argument("--start", type=int, required=True, metavar="N",
                         help="Selection start, UTF-16 code units")
    excerpt.add_argument("--end", type=int, required=True, metavar="N",
                         help="Selection end, UTF-16 code units")
    excerpt.add_argument("--text", required=True, help="Selected text")
    excerpt.add_argument("--pad", type=int, default=None, metavar="N",
                         help="Context characters on each side (default: CONTEXT_PAD)")

    language = sub.add_parser("language", help="Identify the language of a text")
    language.add_argument("text", nargs="?", help="Text to classify (default: stdin)")
    language.add_argument("--prefer", choices=["heuristic", "statistical"], default=None,
                          help="Primary detector (default: LANGUAGE_PREFERENCE)")
    language.add_argument("--min-length", type=int, default=None, metavar="N",
                          help="Minimum sample length for the statistical detector")

    name = sub.add_parser("autonym", help="Print a language's name for itself")
    name.add_argument("code", help="ISO 639-1 code, e.g. de")

    return parser.parse_args(argv)


def _run_excerpt(args: argparse.Namespace) -> dict:
    document = _read_text(args.file)
    result = build_excerpt(document, Span(start=args.start, end=args.end, text=args.text), pad=args.pad)
    payload = result.model_dump(by_alias=True)
    normalized = normalize(document)
    payload["span"]["start_utf16"] = index_to_utf16(normalized, result.span.start)
    payload["span"]["end_utf16"] = index_to_utf16(normalized, result.span.end)
    return payload


def _run_language(args: argparse.Namespace) -> dict:
    text = args.text if args.text is not None else _read_text(None)
    result = classify_language_detailed(text, prefer=args.prefer, min_length=args.min_length)
    return result.model_dump()


def main(argv: list[str] | None = None) -> int:
    args = parse_args(argv)
    try:
        if args.command == "excerpt":
            payload = _run_excerpt(args)
        elif args.command == "language":
            payload = _run_language(args)
        else:
            payload = {"code": args.code, "autonym": autonym(args.code)}
    except InvalidArgumentError as exc:
        print(f"[!] {exc}", file=sys.stderr)
        return 2

    print(json.dumps(payload, ensure_ascii=False, indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
