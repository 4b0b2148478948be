"""CLI commands for timezone offsets, DST and conversion."""

from __future__ import annotations

from typing import Annotated, Any

import typer

from ...global_config import TRANSITION_RESOLUTION_MS, UTC_ZONE
from ...instant import to_instant
from ...tz import convert, find_year_transitions, is_dst, resolve_offset
from ...utils.time import assert_iana_zone, format_ts_for_display
from ..base import BaseCLI

app = typer.Typer(
    name="tz",
    help="Timezone commands (offset, is-dst, transitions, convert)",
)

InstantArg = Annotated[
    str,
    typer.Argument(help="ISO-8601 date or datetime; no offset means UTC"),
]
ZoneArg = Annotated[str, typer.Argument(help="IANA zone, e.g. America/New_York")]

cli = BaseCLI()


def _check_zone(zone: str) -> None:
    if zone != UTC_ZONE:
        assert_iana_zone(zone)


@app.command("offset")
def offset_command(instant: InstantArg, zone: ZoneArg) -> None:
    """Offset of ZONE at INSTANT in minutes (positive = behind UTC)."""

    def _offset() -> dict[str, Any]:
        _check_zone(zone)
        at = to_instant(instant)
        return {
            "zone": zone,
            "at": at,
            "local": format_ts_for_display(at.to_datetime(), tz=zone),
            "offset_minutes": resolve_offset(at, zone),
        }

    cli.handle_cli_operation(operation="offset", op_callable=_offset)


@app.command("is-dst")
def is_dst_command(instant: InstantArg, zone: ZoneArg) -> None:
    """Whether INSTANT falls inside ZONE's daylight-saving period."""

    def _is_dst() -> dict[str, Any]:
        _check_zone(zone)
        at = to_instant(instant)
        return {"zone": zone, "at": at, "dst": is_dst(at, zone)}

    cli.handle_cli_operation(operation="is-dst", op_callable=_is_dst)


@app.command("transitions")
def transitions_command(
    year: Annotated[int, typer.Argument(help="Calendar year")],
    zone: ZoneArg,
    resolution_ms: Annotated[
        int,
        typer.Option("--resolution-ms", help="Search precision in milliseconds"),
    ] = TRANSITION_RESOLUTION_MS,
) -> None:
    """First and second offset transitions of ZONE in YEAR."""

    def _transitions() -> dict[str, Any]:
        _check_zone(zone)
        window = find_year_transitions(year, zone, resolution_ms=resolution_ms)
        result: dict[str, Any] = {"zone": zone, "year": year, "start": window.start, "end": window.end}
        if not window.has_dst:
            result["message"] = f"{zone} has no DST in {year}"
        return result

    cli.handle_cli_operation(operation="transitions", op_callable=_transitions)


@app.command("convert")
def convert_command(
    instant: InstantArg,
    from_zone: Annotated[str, typer.Argument(help="Zone the wall clock is read in")],
    to_zone: Annotated[str, typer.Argument(help="Zone to re-express it in")],
) -> None:
    """Re-express INSTANT's FROM_ZONE wall clock as a TO_ZONE wall clock."""

    def _convert() -> dict[str, Any]:
        _check_zone(from_zone)
        _check_zone(to_zone)
        return {
            "from_zone": from_zone,
            "to_zone": to_zone,
            "result": convert(instant, from_zone, to_zone),
        }

    cli.handle_cli_operation(operation="convert", op_callable=_convert)
