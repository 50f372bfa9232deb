"""CSV rendering of a projection run."""

from __future__ import annotations

import csv
import io
from datetime import date

from investcalc.models import CalculatorParams
from investcalc.schemas.projection import ProjectionResult

HEADERS = [
    "Month",
    "Date",
    "Total Capital",
    "Total Contributions",
    "Monthly Return",
    "Investment Gains",
    "Required Monthly Return (%)",
    "Progress to Target (%)",
    "Remaining Months",
]


def plain_number(value: float) -> str:
    # 10000.0 -> "10000", 2.5 -> "2.5"
    return str(int(value)) if float(value).is_integer() else str(value)


def format_month(value: date) -> str:
    return value.strftime("%b %Y")


def export_filename(reference: date) -> str:
    return f"investment-projection-{reference.isoformat()}.csv"


def render_csv(projection: ProjectionResult, params: CalculatorParams, reference: date) -> str:
    """Preamble describing the inputs, a blank line, then one line per row."""
    buffer = io.StringIO()
    time_frame = params.targetTimeFrame or "Auto-calculated"
    buffer.write(f"Investment Calculator Export - {reference.isoformat()}\n")
    buffer.write(f"Initial Capital: {plain_number(params.initialCapital)}\n")
    buffer.write(f"Monthly Input: {plain_number(params.monthlyInput)}\n")
    buffer.write(f"Annual Return: {plain_number(params.annualReturn)}%\n")
    buffer.write(f"Target Capital: {plain_number(params.targetCapital)}\n")
    buffer.write(f"Target Timeframe: {time_frame} months\n")
    buffer.write("\n")

    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(HEADERS)
    for row in projection.rows:
        progress = row.capital / params.targetCapital * 100 if params.targetCapital else 0.0
        writer.writerow(
            [
                row.month,
                format_month(row.futureDate),
                f"{row.capital:.2f}",
                f"{row.totalContributions:.2f}",
                f"{row.monthlyReturn:.2f}",
                f"{row.gains:.2f}",
                f"{row.requiredMonthlyReturn * 100:.3f}",
                f"{progress:.1f}",
                row.remainingMonths,
            ]
        )
    return buffer.getvalue()


__all__ = ["HEADERS", "export_filename", "format_month", "plain_number", "render_csv"]
