"""Command-line interface for tagkit."""

import argparse
from pathlib import Path
from typing import Iterable, Optional

import yaml
from jinja2 import TemplateError

from .config import RenderContext, load_spec
from .errors import TagkitError
from .io_utils import read_yaml, warn, write_html


def _emit(output: str, out: Optional[str]) -> None:
    if out:
        write_html(out, output)
    else:
        print(output)


def _context(args: argparse.Namespace, template_dirs: Optional[list] = None) -> RenderContext:
    defaults = Path(args.defaults) if args.defaults else None
    if defaults is not None and not defaults.exists():
        raise SystemExit(f"Defaults file not found: {defaults}")
    try:
        return RenderContext.from_file(defaults, template_dirs)
    except (TagkitError, yaml.YAMLError) as exc:
        raise SystemExit(f"Invalid defaults file {defaults}: {exc}") from exc


def _load_specs(path: Path):
    if not path.exists():
        raise SystemExit(f"Spec file not found: {path}")
    try:
        return load_spec(path)
    except (TagkitError, yaml.YAMLError) as exc:
        raise SystemExit(str(exc)) from exc


def _handle_render(args: argparse.Namespace) -> None:
    ctx = _context(args)
    specs = _load_specs(Path(args.spec))
    try:
        output = "\n".join(ctx.render(spec) for spec in specs)
    except TagkitError as exc:
        raise SystemExit(f"Cannot render {args.spec}: {exc}") from exc
    _emit(output, args.out)


def _handle_page(args: argparse.Namespace) -> None:
    template_path = Path(args.template)
    template_dirs = [Path(path) for path in args.templates] if args.templates else [template_path.parent]
    ctx = _context(args, template_dirs)

    variables = {}
    if args.context:
        variables = read_yaml(args.context) or {}
        if not isinstance(variables, dict):
            raise SystemExit(f"{args.context} must contain a mapping of template variables.")

    env = ctx.jinja_env()
    try:
        name = template_path.relative_to(template_dirs[0]).as_posix() if args.templates else template_path.name
        output = env.get_template(name).render(**variables)
    except (TemplateError, TagkitError, ValueError) as exc:
        raise SystemExit(f"Cannot render page {template_path}: {exc}") from exc
    _emit(output, args.out)


def _handle_validate(args: argparse.Namespace) -> None:
    ctx = RenderContext()
    specs = _load_specs(Path(args.spec))

    errors: list[str] = []
    for spec in specs:
        errors.extend(ctx.validate(spec))

    if errors:
        for error in errors:
            warn(error)
        raise SystemExit(1)
    print(f"{args.spec}: {len(specs)} element spec(s) valid.")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="tagkit",
        description="Render immutable HTML element trees",
    )
    parser.add_argument(
        "--version",
        action="version",
        version="tagkit 0.1.0",
        help="Show the tagkit version and exit.",
    )

    subparsers = parser.add_subparsers(dest="command")

    render_parser = subparsers.add_parser(
        "render",
        help="Render an element spec to HTML.",
        description="Build the element tree described by a YAML spec and print its HTML.",
    )
    render_parser.add_argument("spec", help="Path to the YAML element spec.")
    render_parser.add_argument(
        "--defaults",
        help="YAML file with global defaults and theme tables.",
    )
    render_parser.add_argument(
        "--out",
        help="Write the HTML to this file instead of stdout.",
    )
    render_parser.set_defaults(func=_handle_render)

    page_parser = subparsers.add_parser(
        "page",
        help="Render a Jinja page template with element globals.",
        description=(
            "Render a Jinja template in which every element class (Div, InputText, ...) "
            "is available as a global."
        ),
    )
    page_parser.add_argument("template", help="Path to the page template.")
    page_parser.add_argument(
        "--templates",
        action="append",
        help="Template search directory (repeatable). Defaults to the template's directory.",
    )
    page_parser.add_argument(
        "--context",
        help="YAML file with template variables.",
    )
    page_parser.add_argument(
        "--defaults",
        help="YAML file with global defaults and theme tables.",
    )
    page_parser.add_argument(
        "--out",
        help="Write the HTML to this file instead of stdout.",
    )
    page_parser.set_defaults(func=_handle_page)

    validate_parser = subparsers.add_parser(
        "validate",
        help="Validate an element spec.",
        description="Check element names and constrained attribute values in a YAML spec.",
    )
    validate_parser.add_argument("spec", help="Path to the YAML element spec.")
    validate_parser.set_defaults(func=_handle_validate)

    return parser


def main(argv: Optional[Iterable[str]] = None) -> None:
    parser = build_parser()
    args = parser.parse_args(list(argv) if argv is not None else None)
    if hasattr(args, "func"):
        args.func(args)
    else:
        parser.print_help()


__all__ = ["build_parser", "main"]


if __name__ == "__main__":
    main()
