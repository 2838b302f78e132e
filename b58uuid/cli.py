from __future__ import annotations

import sys
from collections.abc import Callable

import click
import typer

from . import __version__
from .cli_shared import (
    GENERATE_KINDS,
    GlobalOpts,
    OpError,
    UsageError,
    _bootstrap_env,
    _choice,
    _print_json,
    _print_lines,
    _resolve_global_opts,
    _rich_error,
    _warn,
)
from .errors import (
    B58UUIDError,
    Base58OverflowError,
    InvalidBase58Error,
    InvalidLengthError,
    RandomSourceError,
)
from .generator import generate, generate_uuid4, generate_uuid7
from .id58 import decode
from .uuid_text import decode_uuid, encode_uuid

MAX_GENERATE_COUNT = 10000

_GENERATORS: dict[str, Callable[[], str]] = {
    "random": lambda: generate(),
    "v4": lambda: generate_uuid4(),
    "v7": lambda: generate_uuid7(),
}

# typer releases that vendor click raise their own exception tree rooted at
# typer.TyperException; older ones raise the installed click's exceptions.
_CLICK_ERRORS: tuple[type[Exception], ...] = tuple(
    t for t in (click.ClickException, getattr(typer, "TyperException", None)) if t is not None
)

_ERROR_KINDS: dict[type[B58UUIDError], str] = {
    InvalidLengthError: "InvalidLength",
    InvalidBase58Error: "InvalidBase58",
    Base58OverflowError: "Overflow",
}


app = typer.Typer(
    name="b58uuid",
    help="Convert UUIDs to and from fixed-width 22-character base58 ids.",
    no_args_is_help=True,
    add_completion=False,
)


def _version_callback(value: bool) -> None:
    if value:
        typer.echo(f"b58uuid {__version__}")
        raise typer.Exit(code=0)


@app.callback()
def app_callback(
    ctx: typer.Context,
    output: str | None = typer.Option(
        None,
        "--output",
        "-o",
        help="Output format: text or json (env override: B58UUID_OUTPUT)",
    ),
    plain_json: bool = typer.Option(False, "--plain-json", help="Emit compact JSON output"),
    quiet: bool = typer.Option(False, "--quiet", help="Suppress stderr warnings"),
    version: bool = typer.Option(False, "--version", callback=_version_callback, is_eager=True),
) -> None:
    del version
    ctx.obj = {"g": _resolve_global_opts(output=output, plain_json=plain_json, quiet=quiet)}


def _ctx_global(ctx: typer.Context) -> GlobalOpts:
    if isinstance(ctx.obj, dict) and isinstance(ctx.obj.get("g"), GlobalOpts):
        return ctx.obj["g"]
    return _resolve_global_opts()


def _read_values(values: list[str], g: GlobalOpts) -> list[str]:
    out: list[str] = []
    for v in values:
        if v != "-":
            out.append(v)
            continue
        skipped = 0
        for line in sys.stdin:
            s = line.strip()
            if not s:
                skipped += 1
                continue
            out.append(s)
        if skipped:
            _warn(g, f"skipped {skipped} blank stdin line(s)")
    if not out:
        raise UsageError("no input values")
    return out


def _emit(g: GlobalOpts, *, kind: str, items: list[dict[str, object]], text_key: str) -> None:
    if g.output == "json":
        _print_json({"kind": kind, "items": items}, pretty=g.pretty)
    else:
        _print_lines([str(item[text_key]) for item in items])


@app.command("generate", help="Generate fresh base58 ids.")
def generate_cmd(
    ctx: typer.Context,
    count: int = typer.Option(1, "--count", "-n", min=1, max=MAX_GENERATE_COUNT, help="How many ids"),
    kind: str | None = typer.Option(
        None,
        "--kind",
        help="random (all 128 bits random), v4 or v7 (env override: B58UUID_GENERATE_KIND)",
    ),
) -> None:
    g = _ctx_global(ctx)
    k = _choice(kind, "--kind", GENERATE_KINDS) if kind else g.generate_kind
    gen = _GENERATORS[k]
    try:
        ids = [gen() for _ in range(count)]
    except RandomSourceError as e:
        raise OpError(f"generate failed: {e}") from e
    _emit(
        g,
        kind="b58uuid.generate.v1",
        items=[{"b58": v, "uuid": str(decode_uuid(v))} for v in ids],
        text_key="b58",
    )


@app.command("encode", help="Encode UUID text as 22-character base58 ids ('-' reads stdin).")
def encode_cmd(
    ctx: typer.Context,
    values: list[str] = typer.Argument(..., help="UUIDs (canonical or 32 hex digits)"),
) -> None:
    g = _ctx_global(ctx)
    items: list[dict[str, object]] = []
    for v in _read_values(values, g):
        try:
            items.append({"uuid": v, "b58": encode_uuid(v)})
        except B58UUIDError as e:
            raise OpError(f"cannot encode {v!r}: {e}") from e
    _emit(g, kind="b58uuid.encode.v1", items=items, text_key="b58")


@app.command("decode", help="Decode base58 ids into canonical UUID text ('-' reads stdin).")
def decode_cmd(
    ctx: typer.Context,
    values: list[str] = typer.Argument(..., help="22-character base58 ids"),
) -> None:
    g = _ctx_global(ctx)
    items: list[dict[str, object]] = []
    for v in _read_values(values, g):
        try:
            items.append({"b58": v, "uuid": str(decode_uuid(v))})
        except B58UUIDError as e:
            raise OpError(f"cannot decode {v!r}: {e}") from e
    _emit(g, kind="b58uuid.decode.v1", items=items, text_key="uuid")


def _check_one(value: str) -> dict[str, object]:
    try:
        decode(value)
    except B58UUIDError as e:
        return {
            "value": value,
            "valid": False,
            "error": _ERROR_KINDS.get(type(e), type(e).__name__),
            "message": str(e),
        }
    return {"value": value, "valid": True}


@app.command("check", help="Report whether values are valid base58 ids; exits 1 if any is not.")
def check_cmd(
    ctx: typer.Context,
    values: list[str] = typer.Argument(..., help="Values to validate ('-' reads stdin)"),
) -> None:
    g = _ctx_global(ctx)
    results = [_check_one(v) for v in _read_values(values, g)]
    if g.output == "json":
        _print_json({"kind": "b58uuid.check.v1", "items": results}, pretty=g.pretty)
    else:
        _print_lines(
            [
                f"ok {r['value']}" if r["valid"] else f"invalid {r['value']}: {r['message']}"
                for r in results
            ]
        )
    if not all(r["valid"] for r in results):
        raise typer.Exit(code=1)


@app.command("inspect", help="Show the UUID fields behind one base58 id.")
def inspect_cmd(
    ctx: typer.Context,
    value: str = typer.Argument(..., help="22-character base58 id"),
) -> None:
    g = _ctx_global(ctx)
    try:
        u = decode_uuid(value)
    except B58UUIDError as e:
        raise OpError(f"cannot decode {value!r}: {e}") from e
    info: dict[str, object] = {
        "b58": value,
        "uuid": str(u),
        "hex": u.hex,
        "int": str(u.int),
        "version": u.version,
        "variant": u.variant,
    }
    if g.output == "json":
        _print_json({"kind": "b58uuid.inspect.v1", **info}, pretty=g.pretty)
    else:
        _print_lines([f"{k}: {'-' if v is None else v}" for k, v in info.items()])


def main(argv: list[str] | None = None) -> int:
    argv = list(sys.argv[1:] if argv is None else argv)
    try:
        _bootstrap_env()
        result = app(args=argv, prog_name="b58uuid", standalone_mode=False)
        if result is None:
            return 0
        return int(result)
    except typer.Exit as e:
        return int(e.exit_code)
    except _CLICK_ERRORS as e:
        _rich_error(e.format_message())  # type: ignore[attr-defined]
        return int(getattr(e, "exit_code", 1))
    except UsageError as e:
        _rich_error(str(e))
        return 2
    except (OpError, B58UUIDError) as e:
        _rich_error(str(e))
        return 1


if __name__ == "__main__":
    raise SystemExit(main(sys.argv[1:]))
