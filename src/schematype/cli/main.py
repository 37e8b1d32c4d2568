# Copyright 2026 Schematype Contributors
# SPDX-License-Identifier: Apache-2.0

"""Entry point for the schematype command-line interface."""

import argparse
import dataclasses
import sys
from pathlib import Path

from schematype.artifact import serialize, write_artifact
from schematype.config import ResolverConfig, ResolverConfigError, load_resolver_config
from schematype.errors import ResolutionError
from schematype.logging_utils import configure_logging
from schematype.model.loader import SchemaLoadError, load_schema_node
from schematype.registry.symbols import get_default_registry
from schematype.resolver import resolve, type_name_from_title

# ###############
# Public Interface
# ###############


def main() -> None:
    """Run the schematype CLI."""
    parser = argparse.ArgumentParser(
        prog="schematype",
        description="schematype - resolve JSON schema nodes into type descriptors",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging on stderr")
    subparsers = parser.add_subparsers(dest="command", metavar="COMMAND")

    # resolve subcommand
    resolve_parser = subparsers.add_parser(
        "resolve",
        help="Resolve a schema file into a type descriptor",
        description="Resolve a JSON schema node and print its type descriptor as JSON.",
    )
    resolve_parser.add_argument("schema", help="Path to the JSON schema file")
    resolve_parser.add_argument(
        "--name",
        help="Nominal type name (default: derived from the schema title or file name)",
    )
    resolve_parser.add_argument("--output", help="Write the descriptor to this file instead of stdout")
    _add_registry_arguments(resolve_parser)

    # symbols subcommand
    symbols_parser = subparsers.add_parser(
        "symbols",
        help="Look up constant names in the symbol registry",
        description="Print the registry name of each numeric constant (decimal or 0x-prefixed hex).",
    )
    symbols_parser.add_argument("values", nargs="+", type=_parse_int, metavar="VALUE")
    _add_registry_arguments(symbols_parser)

    args = parser.parse_args()
    if args.command is None:
        parser.print_help()
        sys.exit(0)

    configure_logging(verbose=args.verbose)
    sys.exit(_dispatch(args))


# ################
# Implementation
# ################


def _add_registry_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--config", help="Path to a resolver configuration YAML file")
    parser.add_argument(
        "--registry",
        help="URL or path of the constant registry document (overrides the configuration)",
    )


def _parse_int(text: str) -> int:
    try:
        return int(text, 0)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: {text!r}") from None


def _dispatch(args: argparse.Namespace) -> int:
    """Dispatch to the appropriate subcommand handler."""
    if args.command == "resolve":
        return _cmd_resolve(args)
    if args.command == "symbols":
        return _cmd_symbols(args)
    return 0


def _load_config(args: argparse.Namespace) -> ResolverConfig:
    """Build the resolver configuration from --config and --registry.

    Raises:
        ResolverConfigError: If the configuration file is invalid.
    """
    config = ResolverConfig()
    if args.config is not None:
        config = load_resolver_config(Path(args.config))
    if args.registry is not None:
        config = dataclasses.replace(config, registry_url=args.registry)
    return config


def _cmd_resolve(args: argparse.Namespace) -> int:
    """Handle the resolve subcommand."""
    schema_path = Path(args.schema)
    try:
        config = _load_config(args)
        node = load_schema_node(schema_path)
        name = args.name or type_name_from_title(node.title or schema_path.name.split(".")[0])
        descriptor = resolve(name, node, config=config)
        if args.output is not None:
            write_artifact(descriptor, Path(args.output))
    except (ResolverConfigError, SchemaLoadError, ResolutionError, OSError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    if args.output is not None:
        print(f"Wrote type descriptor for '{name}' to '{args.output}'.")
    else:
        print(serialize(descriptor))
    return 0


def _cmd_symbols(args: argparse.Namespace) -> int:
    """Handle the symbols subcommand."""
    try:
        registry = get_default_registry(_load_config(args))
    except (ResolverConfigError, ResolutionError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1

    exit_code = 0
    for value in args.values:
        try:
            print(f"{value} {registry.lookup(value)}")
        except ResolutionError as exc:
            print(f"Error: {exc}", file=sys.stderr)
            exit_code = 1
    return exit_code
