"""Command-line interface for tagmaker."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Iterable, Optional

import yaml
from pydantic import ValidationError

from .io_utils import read_data, warn, write_text
from .models import AnySpec, RenderOptions, count_elements, parse_tree
from .nodes import Node, VoidElementError
from .renderer import Renderer

VERSION = "0.1.0"


def _read_file(path: Path) -> object:
    if not path.exists():
        raise SystemExit(f"File not found: {path}")
    try:
        data = read_data(path)
    except (json.JSONDecodeError, yaml.YAMLError) as exc:
        raise SystemExit(f"Could not parse {path}: {exc}") from exc
    except (OSError, UnicodeDecodeError) as exc:
        raise SystemExit(f"Could not read {path}: {exc}") from exc
    if data is None:
        raise SystemExit(f"{path} is empty.")
    return data


def _load_tree_spec(path: Path) -> AnySpec:
    data = _read_file(path)
    try:
        return parse_tree(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid node tree in {path}: {exc}") from exc


def _build_nodes(spec: AnySpec, path: Path) -> Node:
    try:
        return spec.to_node()
    except VoidElementError as exc:
        raise SystemExit(f"{path}: {exc}") from exc


def _load_render_options(path: Optional[str]) -> RenderOptions:
    if path is None:
        return RenderOptions()
    options_path = Path(path)
    data = _read_file(options_path)
    try:
        return RenderOptions.model_validate(data)
    except ValidationError as exc:
        raise SystemExit(f"Invalid render options in {options_path}: {exc}") from exc


def _handle_render(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    options = _load_render_options(args.config)
    # Flags given on the command line win over the options file.
    if args.pretty:
        options.format_output = True
    if args.indent is not None:
        if args.indent < 0:
            raise SystemExit("--indent must not be negative.")
        options.indent = args.indent

    node = _build_nodes(_load_tree_spec(input_path), input_path)
    html_text = Renderer(options).run(node)
    if not html_text.endswith("\n"):
        html_text += "\n"

    if args.output:
        output_path = write_text(Path(args.output), html_text)
        print(f"Rendered {input_path} to {output_path}.")
    else:
        sys.stdout.write(html_text)


def _handle_validate(args: argparse.Namespace) -> None:
    input_path = Path(args.input)
    data = _read_file(input_path)

    errors: list[str] = []
    try:
        spec = parse_tree(data)
    except ValidationError as exc:
        for error in exc.errors():
            location = ".".join(str(part) for part in error["loc"])
            errors.append(f"{input_path}: {location}: {error['msg']}")
    else:
        try:
            spec.to_node()
        except VoidElementError as exc:
            errors.append(f"{input_path}: {exc}")

    if errors:
        for message in errors:
            warn(message)
        raise SystemExit(1)

    print(f"Validated tree with {count_elements(spec)} element(s).")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagmaker",
        description="Render HTML element trees described in YAML or JSON.",
    )
    parser.add_argument(
        "--version",
        action="version",
        version=f"tagmaker {VERSION}",
        help="Show the tagmaker version and exit.",
    )
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Log debug messages to stderr.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render a node tree file to HTML.",
        description="Build the nodes described by a tree file and render them to HTML.",
    )
    render_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the node tree (YAML, or JSON with a .json suffix).",
    )
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Path to write the HTML to; defaults to stdout.",
    )
    render_parser.add_argument(
        "--config",
        default=None,
        help="Path to a render options file (formatOutput, indent).",
    )
    render_parser.add_argument(
        "--pretty",
        action="store_true",
        help="Indent the output and put nested elements on their own lines.",
    )
    render_parser.add_argument(
        "--indent",
        type=int,
        default=None,
        help="Spaces per nesting level when formatting output.",
    )
    render_parser.set_defaults(func=_handle_render)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate a node tree file without rendering it.",
        description="Check a tree file against the schema and the void element rules.",
    )
    validate_parser.add_argument(
        "--in",
        dest="input",
        required=True,
        help="Path to the node tree (YAML, or JSON with a .json suffix).",
    )
    validate_parser.set_defaults(func=_handle_validate)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
