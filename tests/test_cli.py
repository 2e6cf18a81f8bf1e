import json

from click.testing import CliRunner

from categorical_axis import cli


def run(*args, env=None):
    return CliRunner().invoke(cli.main, list(args), env=env)


def test_text_categories_tab_separated():
    result = run("A", "B", "C", "-w", "300", "-p", "1.0")

    assert result.exit_code == 0
    assert result.output == "50.0\tA\n150.0\tB\n250.0\tC\n"


def test_number_categories_json():
    result = run("0", "5", "10", "-t", "number", "-w", "300", "-p", "1.0", "--json")

    assert result.exit_code == 0
    assert json.loads(result.output) == {"labels": ["0", "5", "10"], "locations": [50.0, 150.0, 250.0]}


def test_date_categories_json():
    result = run(
        "2024-01-01",
        "2024-02-01",
        "-t",
        "date",
        "-w",
        "200",
        "-p",
        "1.0",
        "--date-pattern",
        "MMM yyyy",
        "--json",
    )

    assert result.exit_code == 0
    assert json.loads(result.output)["labels"] == ["Jan 2024", "Feb 2024"]


def test_locale_from_environment():
    result = run(
        "1000",
        "2000",
        "-t",
        "number",
        "-w",
        "200",
        "--decimal-pattern",
        "#,##0",
        "--json",
        env={"CATEGORICAL_AXIS_LOCALE": "de_DE"},
    )

    assert result.exit_code == 0
    assert json.loads(result.output)["labels"] == ["1.000", "2.000"]


def test_date_axis_without_pattern_fails():
    result = run("2024-01-01", "-t", "date", "-w", "200")

    assert result.exit_code == 1
    assert "Error:" in result.output
    assert "date pattern" in result.output


def test_invalid_percentage_fails():
    result = run("A", "-w", "200", "-p", "1.5")

    assert result.exit_code == 1
    assert "Error:" in result.output


def test_log_y_with_non_positive_min_fails():
    result = run("A", "-w", "200", "--log-y", "--min", "0", "--max", "10")

    assert result.exit_code == 1
    assert "Logarithmic" in result.output


def test_categories_required():
    result = run("-w", "200")

    assert result.exit_code != 0
