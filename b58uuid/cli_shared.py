from __future__ import annotations

import json
import os
import sys
from dataclasses import dataclass
from typing import Any

from dotenv import load_dotenv
from rich.console import Console
from rich.markup import escape


class B58UUIDCliError(Exception):
    pass


class UsageError(B58UUIDCliError):
    pass


class OpError(B58UUIDCliError):
    pass


B58UUID_OUTPUT = "B58UUID_OUTPUT"
B58UUID_GENERATE_KIND = "B58UUID_GENERATE_KIND"
B58UUID_PLAIN_JSON = "B58UUID_PLAIN_JSON"
B58UUID_QUIET = "B58UUID_QUIET"

OUTPUT_FORMATS = ("text", "json")
GENERATE_KINDS = ("random", "v4", "v7")


def _eprint(msg: str) -> None:
    print(msg, file=sys.stderr)


_ERROR_CONSOLE = Console(stderr=True)


def _rich_error(msg: str) -> None:
    _ERROR_CONSOLE.print(f"[bold red]error:[/bold red] {escape(msg)}", highlight=False, soft_wrap=True)


@dataclass(frozen=True)
class GlobalOpts:
    output: str = "text"
    generate_kind: str = "random"
    pretty: bool = True
    quiet: bool = False


def _truthy(raw: str | None) -> bool:
    return str(raw or "").strip().lower() in {"1", "true", "yes", "on"}


def _env_or_none(*names: str) -> str | None:
    for n in names:
        v = (os.environ.get(n) or "").strip()
        if v:
            return v
    return None


def _choice(val: str, name: str, choices: tuple[str, ...]) -> str:
    v = val.strip().lower()
    if v not in choices:
        raise UsageError(f"invalid {name} {val!r} (expected one of: {', '.join(choices)})")
    return v


def _bootstrap_env() -> None:
    # Use python-dotenv package defaults: discover and load .env without
    # overriding already-exported process environment values.
    load_dotenv()


def _resolve_global_opts(
    *,
    output: str | None = None,
    plain_json: bool = False,
    quiet: bool = False,
) -> GlobalOpts:
    raw_output = output or _env_or_none(B58UUID_OUTPUT) or "text"
    raw_kind = _env_or_none(B58UUID_GENERATE_KIND) or "random"
    return GlobalOpts(
        output=_choice(raw_output, f"output format (--output / {B58UUID_OUTPUT})", OUTPUT_FORMATS),
        generate_kind=_choice(raw_kind, B58UUID_GENERATE_KIND, GENERATE_KINDS),
        pretty=not (plain_json or _truthy(os.environ.get(B58UUID_PLAIN_JSON))),
        quiet=quiet or _truthy(os.environ.get(B58UUID_QUIET)),
    )


def _warn(g: GlobalOpts, msg: str) -> None:
    if not g.quiet:
        _eprint(f"warning: {msg}")


def _print_json(obj: Any, *, pretty: bool) -> None:
    if pretty:
        sys.stdout.write(json.dumps(obj, indent=2, sort_keys=True) + "\n")
    else:
        sys.stdout.write(json.dumps(obj, separators=(",", ":"), sort_keys=True) + "\n")


def _print_lines(lines: list[str]) -> None:
    for line in lines:
        sys.stdout.write(line + "\n")
