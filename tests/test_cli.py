"""Tests for the typer CLI."""

from typer.testing import CliRunner

from storefront.__main__ import app

runner = CliRunner()

# wide enough that no table cell wraps
WIDE = {"COLUMNS": "160"}


def test_catalog_lists_all_categories():
    result = runner.invoke(app, ["catalog"], env=WIDE)
    assert result.exit_code == 0
    for name in ("Laptop", "Jeans", "Apples"):
        assert name in result.output


def test_catalog_single_category():
    result = runner.invoke(app, ["catalog", "--category", "clothing"], env=WIDE)
    assert result.exit_code == 0
    assert "Jacket" in result.output
    assert "Laptop" not in result.output


def test_catalog_unknown_category():
    result = runner.invoke(app, ["catalog", "--category", "toys"], env=WIDE)
    assert result.exit_code == 1
    assert "Unknown category" in result.output


def test_catalog_uses_env_stock():
    result = runner.invoke(app, ["catalog"], env={**WIDE, "STOREFRONT_INITIAL_STOCK": "7"})
    assert result.exit_code == 0
    assert " 7 " in result.output


def test_bad_env_exits():
    result = runner.invoke(app, ["catalog"], env={**WIDE, "STOREFRONT_BULK_DISCOUNT": "lots"})
    assert result.exit_code == 1
    assert "STOREFRONT_BULK_DISCOUNT" in result.output


def test_nan_discount_exits_cleanly():
    result = runner.invoke(app, ["catalog"], env={**WIDE, "STOREFRONT_BULK_DISCOUNT": "nan"})
    assert result.exit_code == 1
    assert "STOREFRONT_BULK_DISCOUNT" in result.output
    assert not isinstance(result.exception, ArithmeticError)


def test_shop_exits_on_menu_choice():
    result = runner.invoke(app, ["shop", "--seed", "1"], input="5\n")
    assert result.exit_code == 0
    assert "Goodbye" in result.output


def test_shop_end_of_input():
    result = runner.invoke(app, ["shop"], input="")
    assert result.exit_code == 0
    assert "End of input" in result.output
