"""Tests for symbol normalization utilities."""

import pytest

from feedcheck.exchanges.normalization import (
    SymbolConvention,
    build_symbol_set,
    split_pair,
    to_exchange_symbol,
)
from feedcheck.exchanges.protocol import ExchangeInstrument


class TestToExchangeSymbol:
    """Tests for to_exchange_symbol function."""

    def test_no_separator(self):
        """Test concatenated symbols (BTCUSDT)."""
        assert to_exchange_symbol("BTC", "USDT", SymbolConvention("")) == "BTCUSDT"

    def test_separators(self):
        """Test every supported separator."""
        assert to_exchange_symbol("BTC", "USDT", SymbolConvention("-")) == "BTC-USDT"
        assert to_exchange_symbol("BTC", "USDT", SymbolConvention("/")) == "BTC/USDT"
        assert to_exchange_symbol("BTC", "USDT", SymbolConvention("_")) == "BTC_USDT"

    def test_lower_casing(self):
        """Test lower-case exchanges (btcusdt)."""
        assert to_exchange_symbol("BTC", "USDT", SymbolConvention("", "lower")) == "btcusdt"

    def test_upper_casing_normalizes_input(self):
        """Test that upper casing applies even to lower-case input."""
        assert to_exchange_symbol("btc", "usd", SymbolConvention("-")) == "BTC-USD"

    def test_preserve_casing(self):
        """Test pass-through casing."""
        assert to_exchange_symbol("Btc", "usd", SymbolConvention("_", "preserve")) == "Btc_usd"


class TestSymbolConvention:
    """Tests for SymbolConvention validation."""

    def test_default_convention(self):
        convention = SymbolConvention()
        assert convention.separator == ""
        assert convention.casing == "upper"

    def test_invalid_separator(self):
        with pytest.raises(ValueError, match="Unsupported separator"):
            SymbolConvention(separator=":")

    def test_invalid_casing(self):
        with pytest.raises(ValueError, match="Unsupported casing"):
            SymbolConvention(casing="title")


class TestBuildSymbolSet:
    """Tests for build_symbol_set function."""

    def test_only_tradable_instruments(self, sample_instruments):
        """Test that non-tradable instruments are excluded."""
        symbols = build_symbol_set(sample_instruments, SymbolConvention("_"))
        assert symbols == frozenset({"BTC_USDT", "ETH_USD"})

    def test_same_content_any_casing(self):
        """Test that convention casing applies to every instrument."""
        convention = SymbolConvention("", "lower")
        symbols = build_symbol_set([ExchangeInstrument("BTC", "USDT", True)], convention)
        assert symbols == frozenset({"btcusdt"})

    def test_empty(self):
        assert build_symbol_set([], SymbolConvention()) == frozenset()


class TestSplitPair:
    """Tests for split_pair function."""

    def test_slash_separated(self):
        assert split_pair("BTC/USD") == ("BTC", "USD")

    def test_case_insensitive(self):
        assert split_pair("eth/usdt") == ("ETH", "USDT")

    def test_splits_on_first_slash(self):
        assert split_pair("BTC/USD/PERP") == ("BTC", "USD/PERP")

    def test_whitespace_stripped(self):
        assert split_pair("  BTC / USD ") == ("BTC", "USD")

    def test_single_currency(self):
        assert split_pair("BTC") == ("BTC", "")

    def test_empty_symbol(self):
        assert split_pair("") == ("", "")
