"""Command-line interface that applies ``cweSns`` bindings to a template file."""

from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Sequence

import jsonschema

from ..errors import BindingError
from ..loader import DocumentLoaderError, load_document
from ..models import ServiceDefinition
from ..plugin import CweSnsPlugin


def build_parser() -> argparse.ArgumentParser:
    """Construct the CLI argument parser."""

    parser = argparse.ArgumentParser(
        prog="cwe-sns-binding",
        description="Route EventBridge rules to Lambda functions through SNS",
    )
    subparsers = parser.add_subparsers(dest="command")

    apply_parser = subparsers.add_parser(
        "apply", help="Add cweSns resources to a compiled CloudFormation template."
    )
    apply_parser.add_argument(
        "service_file",
        type=Path,
        help="Serverless-style service definition (YAML or JSON).",
    )
    apply_parser.add_argument(
        "--template",
        type=Path,
        required=True,
        help="Compiled CloudFormation template containing the event rules.",
    )
    apply_parser.add_argument(
        "--stage",
        default=None,
        help="Deployment stage; defaults to provider.stage or 'dev'.",
    )
    apply_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the mutated template here instead of standard output.",
    )
    apply_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Log every cweSns binding before it is applied.",
    )
    apply_parser.add_argument(
        "--no-validate",
        dest="validate",
        action="store_false",
        default=True,
        help="Skip JSON schema validation of the cweSns events.",
    )

    return parser


def _handle_apply(args: argparse.Namespace) -> int:
    if args.verbose:
        logging.basicConfig(level=logging.INFO, format="%(message)s")

    try:
        service = ServiceDefinition.from_mapping(
            load_document(args.service_file), stage=args.stage
        )
        template: dict[str, Any] = load_document(args.template)
        plugin = CweSnsPlugin(
            service, template, verbose=args.verbose, validate=args.validate
        )
        plugin.modify_template()
    except (BindingError, DocumentLoaderError) as exc:
        print(f"Error: {exc}")
        return 2
    except jsonschema.ValidationError as exc:
        print(f"Error: {exc.message}")
        return 2

    output = json.dumps(template, indent=2)
    if args.output:
        args.output.write_text(output + "\n", encoding="utf-8")
    else:
        print(output)
    return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point used by tests and the ``python -m`` invocation."""

    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "apply":
        return _handle_apply(args)

    parser.print_help()
    return 0


def run() -> None:  # pragma: no cover - thin wrapper for module execution
    """Execute the CLI and exit with the produced status code."""

    raise SystemExit(main())


if __name__ == "__main__":  # pragma: no cover - module execution guard
    run()
