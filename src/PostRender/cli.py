from __future__ import annotations

import argparse
import logging
from pathlib import Path

from . import markdown_parser, renderer_docx, renderer_html, serialization
from .config import load_config
from .utils import configure_logging, read_post, resolve_output_path

SUFFIXES = {"docx": ".docx", "html": ".html", "json": ".json"}


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="PostRender",
        description="Render lightly formatted post text as DOCX, HTML or a JSON document tree.",
    )
    parser.add_argument("input", type=str, help="Path to the post text file")
    parser.add_argument("-o", "--output", type=str, help="Output path (file or directory)")
    parser.add_argument("--format", choices=sorted(SUFFIXES), default="docx", help="Output format")
    parser.add_argument("--style", type=str, help="YAML file with page and font settings for DOCX output")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    return parser


def main(argv: list[str] | None = None) -> None:
    args = build_parser().parse_args(argv)
    configure_logging(verbose=args.verbose)
    input_path = Path(args.input).expanduser()
    if not input_path.exists():
        raise FileNotFoundError(f"Input file not found: {input_path}")
    output_path = resolve_output_path(input_path, args.output, SUFFIXES[args.format])
    style = load_config(args.style)

    logging.info("Reading %s", input_path)
    text = read_post(input_path)
    logging.debug("Input length: %d chars", len(text))

    logging.info("Parsing...")
    document = markdown_parser.parse_document(text)

    logging.info("Rendering %s to %s", args.format.upper(), output_path)
    if args.format == "docx":
        renderer_docx.render_document(document, output_path=output_path, config=style)
    else:
        if args.format == "html":
            rendered = renderer_html.render_html(document)
        else:
            rendered = serialization.to_json(document, indent=2)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(rendered + "\n", encoding="utf-8")

    logging.info("Done. Saved to %s", output_path)


if __name__ == "__main__":
    main()
