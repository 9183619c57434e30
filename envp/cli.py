"""
ABOUTME: Command-line interface for resolving environment configuration
ABOUTME: Hydrates from .env files, applies the log level and prints typed values
"""

import argparse
import json
import logging
import sys
from pathlib import Path

from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import (
    get_default_reader,
    get_env_string,
    parse_bool,
    parse_float,
    parse_int,
    redact,
)
from .envfiles import DEFAULT_ENV, load_env_from_env_files
from .exceptions import ParseError
from .loglevel import set_log_level_from_env

console = Console()
err_console = Console(stderr=True)


def _split_key(spec: str) -> tuple[str, str]:
    key, sep, rest = spec.partition("=")
    if not sep or not key:
        raise argparse.ArgumentTypeError(f"expected KEY=..., got {spec!r}")
    return key, rest


def _plain_spec(kind):
    def parse(spec: str) -> dict:
        key, default = _split_key(spec)
        return {"kind": kind, "key": key, "default": default}

    return parse


def _bool_spec(spec: str) -> dict:
    key, default = _split_key(spec)
    try:
        value = parse_bool(default, key=key)
    except ParseError as e:
        raise argparse.ArgumentTypeError(str(e)) from e
    return {"kind": "bool", "key": key, "default": value}


def _range_spec(kind, parser):
    def parse(spec: str) -> dict:
        key, rest = _split_key(spec)
        parts = rest.split(":")
        if len(parts) != 3:
            raise argparse.ArgumentTypeError(
                f"expected {key}=DEFAULT:MIN:MAX, got {spec!r}"
            )
        try:
            default, min_value, max_value = (parser(p, key=key) for p in parts)
        except ParseError as e:
            raise argparse.ArgumentTypeError(str(e)) from e
        return {
            "kind": kind,
            "key": key,
            "default": default,
            "min": min_value,
            "max": max_value,
        }

    return parse


def _choice_spec(spec: str) -> dict:
    key, rest = _split_key(spec)
    default, sep, allowed = rest.partition(":")
    if not sep or not allowed:
        raise argparse.ArgumentTypeError(
            f"expected {key}=DEFAULT:A,B,..., got {spec!r}"
        )
    return {
        "kind": "choice",
        "key": key,
        "default": default,
        "allowed": allowed.split(","),
    }


def cli(argv=None) -> argparse.Namespace:
    """
    Parse and return command-line arguments for the envp tool.

    Returns:
        argparse.Namespace: Parsed arguments selecting the environment name, .env directory, log level key, the typed keys to resolve and the output format.
    """
    p = argparse.ArgumentParser(
        description="Load .env files and resolve typed environment configuration"
    )
    p.add_argument(
        "--env",
        type=str,
        default=None,
        help=f"Environment name used to pick .env files (default: $ENVP_ENV or {DEFAULT_ENV})",
    )
    p.add_argument(
        "--dir",
        type=Path,
        default=None,
        help="Directory holding the .env files (default: current directory)",
    )
    p.add_argument(
        "--log-level-key",
        type=str,
        default="LOG_LEVEL",
        help="Environment variable holding the log level name",
    )
    p.add_argument(
        "--string",
        dest="specs",
        action="append",
        type=_plain_spec("string"),
        metavar="KEY=DEFAULT",
        help="Resolve a string value",
    )
    p.add_argument(
        "--password",
        dest="specs",
        action="append",
        type=_plain_spec("password"),
        metavar="KEY=DEFAULT",
        help="Resolve a secret; only a redacted form is shown",
    )
    p.add_argument(
        "--choice",
        dest="specs",
        action="append",
        type=_choice_spec,
        metavar="KEY=DEFAULT:A,B",
        help="Resolve a string restricted to a set of values",
    )
    p.add_argument(
        "--int",
        dest="specs",
        action="append",
        type=_range_spec("int", parse_int),
        metavar="KEY=DEFAULT:MIN:MAX",
        help="Resolve an integer within an inclusive range",
    )
    p.add_argument(
        "--float",
        dest="specs",
        action="append",
        type=_range_spec("float", parse_float),
        metavar="KEY=DEFAULT:MIN:MAX",
        help="Resolve a float within an inclusive range",
    )
    p.add_argument(
        "--bool",
        dest="specs",
        action="append",
        type=_bool_spec,
        metavar="KEY=DEFAULT",
        help="Resolve a boolean (true/false/1/0/t/f)",
    )
    p.add_argument(
        "--json",
        action="store_true",
        help="Output results in JSON format instead of a rich console table",
    )
    p.add_argument(
        "--version",
        action="version",
        version="envp 0.1.0",
    )
    return p.parse_args(argv)


def resolve(spec: dict):
    """Resolve one parsed option spec through the typed accessors."""
    reader = get_default_reader()
    kind = spec["kind"]
    key = spec["key"]
    default = spec["default"]
    if kind == "string":
        return reader.get_string(key, default)
    if kind == "password":
        return reader.get_password(key, default)
    if kind == "choice":
        return reader.get_string_from(key, default, spec["allowed"])
    if kind == "int":
        return reader.get_int(key, default, spec["min"], spec["max"])
    if kind == "float":
        return reader.get_float(key, default, spec["min"], spec["max"])
    if kind == "bool":
        return reader.get_bool(key, default)
    raise ValueError(f"Unknown value kind: {kind}")


def _display(spec: dict, value):
    if spec["kind"] == "password":
        return redact(value)
    return value


def main(argv=None):
    """
    Execute the main entry point for the envp CLI.

    Configures rich logging, hydrates the environment from .env files, applies the
    log level, then resolves every requested key and prints the results. Invalid
    environment values terminate with exit status 1.
    """
    a = cli(argv)

    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=err_console, rich_tracebacks=True)],
    )

    env = a.env if a.env is not None else get_env_string("ENVP_ENV", DEFAULT_ENV)
    env = env or DEFAULT_ENV
    loaded = load_env_from_env_files(env, a.dir)
    if not a.json:
        if loaded:
            for env_path in loaded:
                console.print(f"✅ Loaded environment from {env_path}")
        else:
            console.print("⚠️  No .env file found, using system environment variables")

    set_log_level_from_env(a.log_level_key)

    try:
        results = [(spec, resolve(spec)) for spec in a.specs or []]
    except KeyboardInterrupt:
        console.print("\n❌ Interrupted by user")
        sys.exit(1)

    if a.json:
        print(
            json.dumps(
                {
                    "env": env,
                    "loaded_files": [str(p) for p in loaded],
                    "values": {s["key"]: _display(s, v) for s, v in results},
                },
                indent=2,
            )
        )
        return

    if results:
        table = Table(
            title=f"Configuration - {env}", show_header=True, header_style="bold magenta"
        )
        table.add_column("Key", style="cyan")
        table.add_column("Type")
        table.add_column("Value", justify="right")
        for spec, value in results:
            table.add_row(spec["key"], spec["kind"], str(_display(spec, value)))
        console.print(table)


if __name__ == "__main__":
    main()
