# schemast/cli.py
"""
schemast CLI -- click commands over a schema package directory.

Provides the ``schemast`` console entry-point declared in pyproject.toml as
``schemast.cli:cli``.  Every command loads the package, applies its edits to
the syntax trees and writes back only the modules that changed:

- add-type:     scaffold empty schema types
- add-field:    append one field declaration to a type
- remove-field: remove a field declaration by name
- show:         list the fields a type declares
- apply:        add the types and fields described in a YAML file
- config:       show the effective configuration
"""

from __future__ import annotations

import ast
from contextlib import contextmanager
from pathlib import Path
from typing import Iterator, Optional

import click
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape as _esc
from rich.padding import Padding

from . import cli_theme as theme
from .config import get_config
from .context import Context
from .descriptor import EnumPair, FieldDescriptor, FieldType
from .errors import SchemastError
from .utils.logging import get_logger, setup_logging

console = Console()
_logger = get_logger(__name__)

_VERSION_NUMBER = "0.1.0"


def _print_version(
    ctx: click.Context,
    _param: click.Parameter,
    value: bool,
) -> None:
    if not value or ctx.resilient_parsing:
        return
    theme.print_version(_VERSION_NUMBER, console)
    ctx.exit()


@contextmanager
def _schemast_errors() -> Iterator[None]:
    """Turn library errors into clean CLI failures."""
    try:
        yield
    except SchemastError as exc:
        _logger.error(str(exc))
        raise click.ClickException(str(exc)) from exc


def _load_context(ctx: click.Context) -> Context:
    schema_dir: Path = ctx.obj["schema_dir"]
    with _schemast_errors():
        return Context.load(schema_dir)


def _write(context: Context) -> None:
    for path in context.print():
        console.print(theme.info(f"wrote {_esc(str(path))}"))


def _parse_key_values(items: tuple[str, ...], option: str) -> dict[str, str]:
    out: dict[str, str] = {}
    for item in items:
        key, sep, value = item.partition("=")
        if not sep or not key:
            raise click.BadParameter(f"expected KEY=VALUE, got {item!r}", param_hint=option)
        out[key] = value
    return out


def _parse_enum_values(items: tuple[str, ...]) -> tuple[EnumPair, ...]:
    pairs = []
    for item in items:
        name, sep, value = item.partition("=")
        pairs.append(EnumPair(name, value if sep else name))
    return tuple(pairs)


# ---------------------------------------------------------------------------
# Main CLI group
# ---------------------------------------------------------------------------


@click.group(invoke_without_command=True)
@click.option(
    "--version",
    is_flag=True,
    callback=_print_version,
    expose_value=False,
    is_eager=True,
    help="Show version and exit.",
)
@click.option("--dir", "schema_dir", type=click.Path(file_okay=False, path_type=Path), default=None, help="Schema package directory (default: SCHEMAST_SCHEMA_DIR or ./schema).")
@click.option("--verbose", "-v", is_flag=True, default=False, help="Log every edit to stderr.")
@click.pass_context
def cli(ctx: click.Context, schema_dir: Optional[Path], verbose: bool) -> None:
    """schemast -- synthesize and edit schema field declarations."""
    cfg = get_config()
    ctx.ensure_object(dict)
    ctx.obj["schema_dir"] = schema_dir if schema_dir is not None else cfg.schema_dir
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())
        return
    setup_logging(
        level="DEBUG" if verbose else cfg.log_level,
        log_dir=cfg.log_dir,
        console_output=verbose,
    )


# ---------------------------------------------------------------------------
# Edits
# ---------------------------------------------------------------------------


@cli.command("add-type")
@click.argument("names", nargs=-1, required=True)
@click.pass_context
def add_type(ctx: click.Context, names: tuple[str, ...]) -> None:
    """Scaffold empty schema types.

    \b
    Examples:
      schemast add-type User Group
    """
    context = _load_context(ctx)
    with _schemast_errors():
        for name in names:
            context.add_type(name)
            console.print(theme.ok(f"type {_esc(name)} scaffolded"))
    _write(context)


@cli.command("add-field")
@click.argument("type_name")
@click.argument("field_name")
@click.option("--type", "-t", "field_type", type=click.Choice([t.value for t in FieldType]), default=FieldType.STRING.value, show_default=True, help="Field type.")
@click.option("--nillable", is_flag=True, default=False, help="Field may hold NULL.")
@click.option("--optional", is_flag=True, default=False, help="Field is not required on create.")
@click.option("--unique", is_flag=True, default=False, help="Field values must be unique.")
@click.option("--sensitive", is_flag=True, default=False, help="Field is omitted from printed output.")
@click.option("--immutable", is_flag=True, default=False, help="Field cannot be updated.")
@click.option("--comment", type=str, default="", help="Field comment.")
@click.option("--struct-tag", type=str, default="", help="Struct tag for generated entities.")
@click.option("--storage-key", type=str, default="", help="Column name override.")
@click.option("--schema-type", "schema_types", multiple=True, metavar="DIALECT=TYPE", help="Column type override for one dialect (repeatable).")
@click.option("--value", "values", multiple=True, metavar="NAME[=VALUE]", help="Enum member (repeatable).")
@click.pass_context
def add_field(
    ctx: click.Context,
    type_name: str,
    field_name: str,
    field_type: str,
    nillable: bool,
    optional: bool,
    unique: bool,
    sensitive: bool,
    immutable: bool,
    comment: str,
    struct_tag: str,
    storage_key: str,
    schema_types: tuple[str, ...],
    values: tuple[str, ...],
) -> None:
    """Append a field declaration to TYPE_NAME.

    \b
    Examples:
      schemast add-field User email --unique --comment "login address"
      schemast add-field User status -t enum --value active --value disabled
    """
    if values and field_type != FieldType.ENUM.value:
        raise click.BadParameter(
            f"only enum fields take values, not {field_type}", param_hint="--value"
        )
    desc = FieldDescriptor(
        name=field_name,
        type=FieldType(field_type),
        nillable=nillable,
        optional=optional,
        unique=unique,
        sensitive=sensitive,
        immutable=immutable,
        comment=comment,
        struct_tag=struct_tag,
        storage_key=storage_key,
        schema_type=_parse_key_values(schema_types, "--schema-type"),
        enum_values=_parse_enum_values(values),
    )
    context = _load_context(ctx)
    with _schemast_errors():
        context.append_field(type_name, desc)
    console.print(theme.ok(f"field {_esc(field_name)} added to {_esc(type_name)}"))
    _write(context)


@cli.command("remove-field")
@click.argument("type_name")
@click.argument("field_name")
@click.pass_context
def remove_field(ctx: click.Context, type_name: str, field_name: str) -> None:
    """Remove the field declaration FIELD_NAME from TYPE_NAME."""
    context = _load_context(ctx)
    with _schemast_errors():
        context.remove_field(type_name, field_name)
    console.print(theme.ok(f"field {_esc(field_name)} removed from {_esc(type_name)}"))
    _write(context)


@cli.command("apply")
@click.argument("file_path", type=click.Path(exists=True, dir_okay=False, path_type=Path))
@click.pass_context
def apply(ctx: click.Context, file_path: Path) -> None:
    """Add the types and fields described in a YAML file.

    Types that do not exist yet are scaffolded; fields a type already
    declares are skipped.  Nothing is written unless every edit succeeds.

    \b
    Examples:
      schemast apply schema.yaml
    """
    from .loader import load_type_specs

    try:
        specs = load_type_specs(file_path)
    except ValidationError as exc:
        raise click.ClickException(f"Invalid schema file: {exc}") from exc

    context = _load_context(ctx)
    added = skipped = 0
    with _schemast_errors():
        for spec in specs:
            if not context.has_type(spec.name):
                context.add_type(spec.name)
                console.print(theme.ok(f"type {_esc(spec.name)} scaffolded"))
            existing = set(context.field_names(spec.name))
            for desc in spec.fields:
                if desc.name in existing:
                    console.print(theme.warn(f"{spec.name}.{desc.name} already declared, skipped"))
                    _logger.warning(f"Skipped existing field {spec.name}.{desc.name}")
                    skipped += 1
                    continue
                context.append_field(spec.name, desc)
                existing.add(desc.name)
                added += 1
    console.print(theme.info(f"{added} field(s) added, {skipped} skipped"))
    _write(context)


# ---------------------------------------------------------------------------
# Inspection
# ---------------------------------------------------------------------------


@cli.command("show")
@click.argument("type_name")
@click.pass_context
def show(ctx: click.Context, type_name: str) -> None:
    """List the fields TYPE_NAME declares."""
    context = _load_context(ctx)
    with _schemast_errors():
        names = context.field_names(type_name)
        decls = [ast.unparse(context.find_field(type_name, n)) for n in names]

    theme.section(type_name, console, uppercase=False)
    if not names:
        console.print(theme.info("no fields declared"))
        return
    t = theme.make_clean_table()
    t.add_column("Field", style=f"bold {theme.CORAL}", no_wrap=True)
    t.add_column("Declaration", style=theme.GREIGE)
    for name, decl in zip(names, decls):
        t.add_row(_esc(name), _esc(decl))
    console.print(Padding(t, (0, 0, 0, 2)))
    console.print()
    console.print(theme.info(f"{len(names)} field(s)"))


@cli.command("config")
def config_show() -> None:
    """Show the effective configuration."""
    cfg = get_config()
    theme.section("Configuration", console)
    t = theme.make_kv_table()
    t.add_row("schema_dir", str(cfg.schema_dir))
    t.add_row("indent", str(cfg.indent))
    t.add_row("log_level", cfg.log_level)
    t.add_row("log_dir", str(cfg.log_dir))
    console.print(Padding(t, (0, 0, 0, 2)))


def main() -> None:
    cli(obj={})


if __name__ == "__main__":
    main()
