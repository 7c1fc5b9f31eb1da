"""Command-line interface: declaration JSON in, nomnoml DSL out."""

import argparse
import os
import sys
from contextlib import nullcontext, redirect_stdout
from enum import IntEnum
from typing import List, Optional

from typegraph.config import load_settings
from typegraph.core.loader import DeclarationFormatError, load_declarations
from typegraph.graph.pipeline import AssociationGraphBuilder
from typegraph.render.diagram import render_diagram


class ExitCode(IntEnum):
    SUCCESS = 0
    INPUT_ERROR = 1


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="typegraph",
        description="Render a class diagram (nomnoml DSL) from front-end type declarations",
    )
    parser.add_argument("input", help="declaration JSON written by the front end")
    parser.add_argument("-o", "--out", help="output DSL file (default: stdout)")
    parser.add_argument("--config", help="JSON config file; its keys override the environment")
    parser.add_argument("-m", "--member-associations", action="store_true", default=None,
                        help="show associations between types and their member types")
    parser.add_argument("--no-modifiers", dest="modifiers", action="store_false", default=None,
                        help="hide public/private/protected/static modifiers")
    parser.add_argument("--no-property-types", dest="property_types", action="store_false",
                        default=None, help="hide property types and method return types")
    parser.add_argument("--nomnoml", nargs="+", metavar="LINE",
                        help='nomnoml directives, i.e. "#arrowSize: 1"')
    parser.add_argument("--verbose", action="store_true", default=None,
                        help="print every association as it is created")
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)

    # stdout carries the DSL unless it goes to a file; reports go to stderr then
    reports = nullcontext() if args.out else redirect_stdout(sys.stderr)
    with reports:
        dsl = _run(args)
    if dsl is None:
        return ExitCode.INPUT_ERROR

    if args.out:
        out_dir = os.path.dirname(os.path.abspath(args.out))
        os.makedirs(out_dir, exist_ok=True)
        with open(args.out, "w", encoding="utf-8") as f:
            f.write(dsl)
        print(f"[SAVE] Diagram saved to: {args.out}")
    else:
        sys.stdout.write(dsl + "\n")

    return ExitCode.SUCCESS


def _run(args: argparse.Namespace) -> Optional[str]:
    """Load settings and declarations, build associations and render. None on bad input."""
    try:
        settings = load_settings(args.config).merge(
            member_associations=args.member_associations,
            modifiers=args.modifiers,
            property_types=args.property_types,
            nomnoml=args.nomnoml,
            verbose=args.verbose,
        )
    except (OSError, ValueError) as e:
        print(f"[ERROR] Invalid configuration: {e}")
        return None

    try:
        declarations = load_declarations(args.input)
    except FileNotFoundError as e:
        print(f"[ERROR] {e}")
        return None
    except DeclarationFormatError as e:
        print(f"[ERROR] Malformed declarations: {e}")
        return None

    builder = AssociationGraphBuilder(declarations, verbose=settings.verbose)
    if settings.member_associations:
        builder.build()

    return render_diagram(declarations, settings, catalog=builder.catalog)


if __name__ == "__main__":
    sys.exit(main())
