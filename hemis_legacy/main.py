from __future__ import annotations

import json
import sys
from pathlib import Path
from typing import Any, Optional

import typer

from hemis_legacy.adapter import ConversionError, decode, encode, encode_list
from hemis_legacy.config import get_settings
from hemis_legacy.registry import resolve_entity
from hemis_legacy.reporter import build_descriptor_table, build_entities_table, print_table
from hemis_legacy.utils.logging import configure_logging, get_logger

app = typer.Typer(help="HEMIS legacy (CUBA) adapter CLI.")
log = get_logger(__name__)


@app.callback()
def _setup() -> None:
    settings = get_settings()
    configure_logging(level=settings.log_level, json_logs=settings.log_json)


@app.command()
def info() -> None:
    """
    Show effective configuration values.
    """
    settings = get_settings()
    typer.echo(
        f"env={settings.app_env} | log_level={settings.log_level} json_logs={settings.log_json} | "
        f"return_nulls_default={settings.return_nulls_default} "
        f"default_view={settings.default_view or '-'}"
    )


@app.command()
def entities() -> None:
    """
    List registered CUBA entity names and their record types.
    """
    print_table(build_entities_table())


@app.command()
def describe(
    entity: str = typer.Argument(..., help="CUBA entity name, e.g. hemishe_EStudent."),
) -> None:
    """
    Show how an entity's fields are named and filtered on the wire.
    """
    try:
        table = build_descriptor_table(entity)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)
    print_table(table)


@app.command()
def normalize(
    path: Path = typer.Argument(..., exists=True, dir_okay=False, help="JSON document or list of documents."),
    entity: str = typer.Option(..., "--entity", "-e", help="CUBA entity name of the documents."),
    view: Optional[str] = typer.Option(None, "--view", "-v", help="CUBA view name (_local drops references)."),
    return_nulls: Optional[bool] = typer.Option(
        None,
        "--return-nulls/--no-return-nulls",
        help="Emit null-valued fields (default from settings).",
    ),
) -> None:
    """
    Decode CUBA documents into the entity's record type and encode them back.

    Useful to check what a legacy client's payload turns into after a PUT.
    """
    settings = get_settings()
    include_nulls = settings.return_nulls_default if return_nulls is None else return_nulls
    effective_view = view if view is not None else settings.default_view

    try:
        record_type = resolve_entity(entity)
    except ValueError as exc:
        typer.echo(str(exc), err=True)
        raise typer.Exit(code=2)

    payload: Any = json.loads(path.read_text(encoding="utf-8"))
    try:
        if isinstance(payload, list):
            records = [decode(document, record_type) for document in payload]
            result: Any = encode_list(records, entity, include_nulls, effective_view)
        else:
            result = encode(decode(payload, record_type), entity, include_nulls, effective_view)
    except ConversionError as exc:
        typer.echo(f"Malformed document: {exc}", err=True)
        raise typer.Exit(code=2)

    log.debug(f"Normalized {path}", extra={"entity": entity, "view": effective_view})
    typer.echo(json.dumps(result, indent=2, ensure_ascii=False, default=str))


def main() -> None:
    try:
        app()
    except KeyboardInterrupt:
        typer.echo("Cancelled by user.", err=True)
        sys.exit(130)


if __name__ == "__main__":
    main()
