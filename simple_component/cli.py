"""Command-line interface for simple_component."""

import argparse
from pathlib import Path
from typing import Iterable, Optional

from pydantic import ValidationError

from . import bem, bemx
from .builder import build_component, build_components, load_components_file
from .exceptions import SimpleComponentError
from .io_utils import warn, write_text
from .models import ComponentsFile
from .page import render_page


def _load(path: Path) -> ComponentsFile:
    if not path.exists():
        raise SystemExit(f"Components file not found: {path}")
    try:
        return load_components_file(path)
    except ValidationError as exc:
        raise SystemExit(f"Invalid components file {path}: {exc}") from exc


def _handle_render(args: argparse.Namespace) -> None:
    path = Path(args.input)
    components_file = _load(path)
    try:
        components = build_components(components_file.components)
    except SimpleComponentError as exc:
        raise SystemExit(f"{path}: {exc}") from exc

    if args.page:
        title = args.title if args.title is not None else components_file.page.title
        output = render_page(components, title=title, lang=components_file.page.lang)
    else:
        output = "\n".join(component.render() for component in components)

    if args.output:
        write_text(args.output, output + "\n")
    else:
        print(output)


def _handle_validate(args: argparse.Namespace) -> None:
    path = Path(args.input)
    components_file = _load(path)

    errors: list[str] = []
    for index, spec in enumerate(components_file.components, start=1):
        try:
            build_component(spec)
        except SimpleComponentError as exc:
            errors.append(f"{path} component {index} <{spec.tag}>: {exc}")

    if errors:
        for message in errors:
            warn(message)
        raise SystemExit(1)

    print(f"Validated {len(components_file.components)} component(s) in {path}")


def _handle_bem(args: argparse.Namespace) -> None:
    try:
        print(bem.generate(args.block, args.element, args.modifiers))
    except SimpleComponentError as exc:
        raise SystemExit(str(exc)) from exc


def _handle_bemx(args: argparse.Namespace) -> None:
    try:
        print(bemx.generate(args.block, args.parent, args.modifiers, args.parent_modifiers))
    except SimpleComponentError as exc:
        raise SystemExit(str(exc)) from exc


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="simple-component",
        description="Render HTML components and generate BEM/BEMX class strings.",
    )
    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render the components described in a YAML file.",
        description="Build every component of a components file and print its HTML.",
    )
    render_parser.add_argument("input", help="Path to the components YAML file.")
    render_parser.add_argument(
        "--out",
        dest="output",
        default=None,
        help="Write the HTML to this file instead of stdout.",
    )
    render_parser.add_argument(
        "--page",
        action="store_true",
        help="Wrap the rendered components in a complete HTML document.",
    )
    render_parser.add_argument(
        "--title",
        default=None,
        help="Document title used with --page (overrides the file's page.title).",
    )
    render_parser.set_defaults(func=_handle_render)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Check that every component of a YAML file can be built.",
        description="Validate a components file and report each invalid component.",
    )
    validate_parser.add_argument("input", help="Path to the components YAML file.")
    validate_parser.set_defaults(func=_handle_validate)

    bem_parser = subparsers.add_parser(
        "bem",
        help="Print a BEM class string.",
        description="Generate block, block__element and --modifier classes.",
    )
    bem_parser.add_argument("block", help="Block name.")
    bem_parser.add_argument("--element", "-e", default=None, help="Element name.")
    bem_parser.add_argument(
        "--modifier",
        "-m",
        action="append",
        dest="modifiers",
        default=[],
        help="Modifier (repeatable).",
    )
    bem_parser.set_defaults(func=_handle_bem)

    bemx_parser = subparsers.add_parser(
        "bemx",
        help="Print a contextual BEMX class string.",
        description="Generate BEM classes for a block plus its parent-context classes.",
    )
    bemx_parser.add_argument("block", help="Child block name.")
    bemx_parser.add_argument("--parent", default=None, help="Parent block name.")
    bemx_parser.add_argument(
        "--modifier",
        "-m",
        action="append",
        dest="modifiers",
        default=[],
        help="Child modifier (repeatable).",
    )
    bemx_parser.add_argument(
        "--parent-modifier",
        "-p",
        action="append",
        dest="parent_modifiers",
        default=[],
        help="Parent modifier applied in the child's context (repeatable).",
    )
    bemx_parser.set_defaults(func=_handle_bemx)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":  # pragma: no cover
    main()
