"""CLI commands for calendar arithmetic."""

from __future__ import annotations

from typing import Annotated, Any

import typer

from ... import arithmetic
from ...instant import to_instant
from ...units import CalendarUnit
from ..base import BaseCLI

app = typer.Typer(
    name="calc",
    help="Calendar arithmetic (add, subtract, diff, start-of, end-of)",
)

InstantArg = Annotated[
    str,
    typer.Argument(help="ISO-8601 date or datetime; no offset means UTC"),
]
UnitArg = Annotated[
    str,
    typer.Argument(help=f"Unit: {', '.join(u.value for u in CalendarUnit)}"),
]


class CalcCLI(BaseCLI):
    """CLI helpers for calendar arithmetic."""

    def shift(self, *, instant: str, amount: float, unit: str, sign: int) -> dict[str, Any]:
        """Run add (sign=1) or subtract (sign=-1) and print the result."""
        operation = "add" if sign > 0 else "subtract"

        def _shift() -> dict[str, Any]:
            start = to_instant(instant)
            func = arithmetic.add if sign > 0 else arithmetic.subtract
            return {"from": start, "result": func(start, amount, unit)}

        return self.handle_cli_operation(operation=operation, op_callable=_shift)

    def bound(self, *, instant: str, unit: str, end: bool) -> dict[str, Any]:
        """Run start-of or end-of and print the result."""
        operation = "end-of" if end else "start-of"

        def _bound() -> dict[str, Any]:
            start = to_instant(instant)
            func = arithmetic.end_of if end else arithmetic.start_of
            return {"from": start, "unit": CalendarUnit.coerce(unit), "result": func(start, unit)}

        return self.handle_cli_operation(operation=operation, op_callable=_bound)


cli = CalcCLI()


# Amounts such as "-1" are values, not options
SIGNED_AMOUNT = {"ignore_unknown_options": True}


@app.command("add", context_settings=SIGNED_AMOUNT)
def add_command(
    instant: InstantArg,
    amount: Annotated[float, typer.Argument(help="Number of units (may be negative)")],
    unit: UnitArg,
) -> None:
    """Add AMOUNT units to INSTANT."""
    cli.shift(instant=instant, amount=amount, unit=unit, sign=1)


@app.command("subtract", context_settings=SIGNED_AMOUNT)
def subtract_command(
    instant: InstantArg,
    amount: Annotated[float, typer.Argument(help="Number of units (may be negative)")],
    unit: UnitArg,
) -> None:
    """Subtract AMOUNT units from INSTANT."""
    cli.shift(instant=instant, amount=amount, unit=unit, sign=-1)


@app.command("diff")
def diff_command(
    a: InstantArg,
    b: InstantArg,
    unit: Annotated[
        str,
        typer.Option("-u", "--unit", help="Unit to express the difference in"),
    ] = CalendarUnit.DAY.value,
) -> None:
    """Signed difference A - B in UNIT."""

    def _diff() -> dict[str, Any]:
        return {"unit": CalendarUnit.coerce(unit), "result": arithmetic.diff(a, b, unit)}

    cli.handle_cli_operation(operation="diff", op_callable=_diff)


@app.command("start-of")
def start_of_command(instant: InstantArg, unit: UnitArg) -> None:
    """Truncate INSTANT to the start of its UNIT (weeks start Monday)."""
    cli.bound(instant=instant, unit=unit, end=False)


@app.command("end-of")
def end_of_command(instant: InstantArg, unit: UnitArg) -> None:
    """Advance INSTANT to the last millisecond of its UNIT."""
    cli.bound(instant=instant, unit=unit, end=True)
