from __future__ import annotations

import json
from pathlib import Path
from typing import Optional

import typer

from apfid.alphafold import AlphaFoldId
from apfid.config import load_settings
from apfid.core.logging_utils import configure_logging, get_logger
from apfid.errors import ApfidError
from apfid.record import Apfid, parse_apfid
from apfid.table import normalize_table, read_table, write_table

logger = get_logger(__name__)
app = typer.Typer(no_args_is_help=True)


@app.callback()
def main(
    log_level: Optional[str] = typer.Option(None, help="Log level (default: APFID_LOG_LEVEL or INFO)."),
):
    settings = load_settings()
    configure_logging(log_level or settings.log_level)


def _parse(raw: str) -> Apfid:
    try:
        return parse_apfid(raw)
    except ApfidError as e:
        raise typer.BadParameter(str(e)) from e


@app.command("parse")
def parse_cmd(
    raw: str = typer.Argument(..., help="APFID string, e.g. 1abc:2_A5_B20."),
    version: Optional[int] = typer.Option(None, help="Output grammar version: 1 or 2."),
    lower: Optional[bool] = typer.Option(None, "--lower/--upper", help="Case of the experiment token."),
):
    """Print the canonical form of an APFID."""
    settings = load_settings()
    record = _parse(raw)
    try:
        record.set_version(settings.default_version if version is None else version)
    except ApfidError as e:
        raise typer.BadParameter(str(e)) from e
    typer.echo(record.to_string(lower=settings.lowercase if lower is None else lower))


@app.command("show")
def show_cmd(raw: str = typer.Argument(..., help="APFID string.")):
    """Print the parsed fields of an APFID as JSON."""
    record = _parse(raw)
    typer.echo(json.dumps(record.to_dict(), indent=2))


@app.command("alphafold")
def alphafold_cmd(raw: str = typer.Argument(..., help="AlphaFold id, e.g. AF-P69905-F1-v4.")):
    """Print the display, download and embedded forms of an AlphaFold id."""
    try:
        af_id = AlphaFoldId(raw)
    except ApfidError as e:
        raise typer.BadParameter(str(e)) from e
    typer.echo(json.dumps({
        "uniprot_id": af_id.uniprot_id,
        "file_no": af_id.file_no,
        "version": af_id.version,
        "id": str(af_id),
        "dl_id": af_id.dl_id,
        "psskb_id": af_id.psskb_id,
    }, indent=2))


@app.command("normalize")
def normalize_cmd(
    input: Path = typer.Option(..., help="Input table (.csv or .parquet)."),
    output: Path = typer.Option(..., help="Output table (.csv or .parquet)."),
    column: Optional[str] = typer.Option(None, help="Column with raw APFIDs (default: APFID_COLUMN)."),
    version: Optional[int] = typer.Option(None, help="Output grammar version: 1 or 2."),
    lower: Optional[bool] = typer.Option(None, "--lower/--upper", help="Case of the experiment token."),
    coerce: bool = typer.Option(False, help="Leave unparseable rows empty instead of failing."),
):
    """Add a canonical APFID column to a table."""
    settings = load_settings()
    col = column or settings.column
    df = read_table(input)
    if col not in df.columns:
        raise typer.BadParameter(f"Column '{col}' not found in {input}.")
    try:
        out = normalize_table(
            df,
            column=col,
            version=settings.default_version if version is None else version,
            lower=settings.lowercase if lower is None else lower,
            errors="coerce" if coerce else "raise",
        )
    except ApfidError as e:
        raise typer.BadParameter(str(e)) from e
    write_table(out, output)
    logger.info("Wrote %d rows to %s", len(out), output)
