"""Command-line interface for categorical-axis.

This module provides the Click-based CLI for inspecting the tick layout of a
category list.
"""

import json
import sys

import click

from categorical_axis.core.config import StyleConfig
from categorical_axis.core.errors import CategoricalAxisError
from categorical_axis.core.types import AxisType, ChartContext, Direction
from categorical_axis.formatting.date_formatter import from_epoch_millis, to_epoch_millis
from categorical_axis.formatting.number_formatter import to_decimal
from categorical_axis.ticks.category_calculator import calculate_category_ticks


def _parse_categories(values: tuple[str, ...], axis_type: AxisType) -> list:
    """Convert command-line strings to categories of the given axis type."""
    if axis_type == AxisType.NUMBER:
        return [to_decimal(v) for v in values]
    if axis_type == AxisType.DATE:
        return [from_epoch_millis(to_epoch_millis(v)) for v in values]
    return list(values)


def _observed_range(categories: list, axis_type: AxisType) -> tuple[float, float]:
    """Default min/max: the numeric extent of the categories, or (0, 0) for text."""
    if axis_type == AxisType.NUMBER:
        return float(min(categories)), float(max(categories))
    if axis_type == AxisType.DATE:
        millis = [to_epoch_millis(c) for c in categories]
        return float(min(millis)), float(max(millis))
    return 0.0, 0.0


@click.command()
@click.argument("categories", nargs=-1, required=True)
@click.option(
    "--axis-type",
    "-t",
    type=click.Choice([t.value for t in AxisType]),
    default=AxisType.TEXT.value,
    help="Kind of value the categories hold",
)
@click.option(
    "--direction",
    "-d",
    type=click.Choice([d.value for d in Direction]),
    default=Direction.HORIZONTAL.value,
    help="Axis direction (x or y)",
)
@click.option("--working-space", "-w", type=float, required=True, help="Axis extent in pixels")
@click.option("--tick-space-percentage", "-p", type=float, default=None, help="Fraction of the axis used by ticks")
@click.option("--min", "min_value", type=float, default=None, help="Observed minimum (default: from categories)")
@click.option("--max", "max_value", type=float, default=None, help="Observed maximum (default: from categories)")
@click.option("--log-y/--linear-y", default=False, help="Clamp the minimum for a logarithmic Y axis")
@click.option("--date-pattern", default=None, help="LDML date pattern, e.g. 'yyyy-MM-dd'")
@click.option("--locale", envvar="CATEGORICAL_AXIS_LOCALE", default=None, help="Locale for labels")
@click.option("--time-zone", envvar="CATEGORICAL_AXIS_TIME_ZONE", default=None, help="Time zone for date labels")
@click.option("--decimal-pattern", default=None, help="LDML number pattern, e.g. '#,##0.00'")
@click.option("--json", "as_json", is_flag=True, help="Print labels and locations as JSON")
def main(
    categories,
    axis_type,
    direction,
    working_space,
    tick_space_percentage,
    min_value,
    max_value,
    log_y,
    date_pattern,
    locale,
    time_zone,
    decimal_pattern,
    as_json,
):
    """categorical-axis-ticks - Print tick labels and locations for a category list.

    \b
    Examples:
        categorical-axis-ticks A B C -w 300 -p 1.0
        categorical-axis-ticks 1 10 100 -t number -w 600 --json
        categorical-axis-ticks 2024-01-01 2024-02-01 -t date -w 400 --date-pattern 'MMM yyyy'
    """
    axis = AxisType(axis_type)

    try:
        style = StyleConfig.from_dict(
            {
                "axis_tick_space_percentage": tick_space_percentage,
                "y_axis_logarithmic": log_y,
                "date_pattern": date_pattern,
                "locale": locale,
                "time_zone": time_zone,
                "decimal_pattern": decimal_pattern,
            }
        )
        values = _parse_categories(categories, axis)
        observed_min, observed_max = _observed_range(values, axis)
        if min_value is None:
            min_value = observed_min
        if max_value is None:
            max_value = observed_max

        chart = ChartContext(x_axis_type=axis, style=style)
        chart.add_series("categories", values)
        ticks = calculate_category_ticks(Direction(direction), working_space, min_value, max_value, chart)
    except CategoricalAxisError as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if as_json:
        click.echo(json.dumps({"labels": ticks.tick_labels, "locations": ticks.tick_locations}))
        return

    for label, location in ticks:
        click.echo(f"{location}\t{label}")


if __name__ == "__main__":
    main()
