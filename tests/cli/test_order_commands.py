"""Tests for the `order build` CLI command."""

import pytest
from click.testing import CliRunner

from ordering.infrastructure.cli.main import cli


def _invoke(*args):
    return CliRunner().invoke(cli, ["order", "build", *args])


class TestOrderBuild:

    def test_merges_matching_items(self):
        result = _invoke("--item", "1:10.00:2", "--item", "1:10.00:3")
        assert result.exit_code == 0
        assert "1 line(s)" in result.output
        assert result.output.splitlines()[2].split() == ["1", "5", "10.00"]

    def test_textually_equal_prices_merge(self):
        result = _invoke("--item", "1:10.0:2", "--item", "1:10.00:3")
        assert result.exit_code == 0
        assert "1 line(s)" in result.output

    def test_different_prices_stay_apart(self):
        result = _invoke("--item", "1:10.00:2", "--item", "1:15.00:3")
        assert result.exit_code == 0
        assert "2 line(s)" in result.output

    def test_incorrect_item_is_reported(self):
        result = _invoke("--item", "1:-5.00:2")
        assert result.exit_code == 1
        assert "negative price" in result.output

    def test_malformed_item_is_usage_error(self):
        result = _invoke("--item", "1:10.00")
        assert result.exit_code == 2
        assert "ProductId:Price:Qty" in result.output

    @pytest.mark.parametrize("price", ["NaN", "sNaN", "Infinity", "-Infinity"])
    def test_non_finite_price_is_usage_error(self, price):
        result = _invoke("--item", f"1:{price}:2")
        assert result.exit_code == 2
        assert f"Invalid price '{price}'" in result.output

    def test_bad_quantity_is_usage_error(self):
        result = _invoke("--item", "1:10.00:many")
        assert result.exit_code == 2
        assert "Invalid quantity" in result.output

    def test_item_required(self):
        result = _invoke()
        assert result.exit_code == 2


class TestLogLevelOption:

    def test_accepts_log_level(self):
        result = CliRunner().invoke(
            cli, ["--log-level", "debug", "order", "build", "--item", "1:1:1"]
        )
        assert result.exit_code == 0

    def test_rejects_unknown_level(self):
        result = CliRunner().invoke(
            cli, ["--log-level", "loud", "order", "build", "--item", "1:1:1"]
        )
        assert result.exit_code == 2
