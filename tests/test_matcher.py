"""Tests for feed/exchange pair matching."""

import itertools

from feedcheck.exchanges.normalization import SymbolConvention, to_exchange_symbol
from feedcheck.matcher import MatchResult, match_pairs


QUOTES = ("USD", "USDT")


class TestMatchPairs:
    """Tests for match_pairs function."""

    def test_btc_eth_scenario(self):
        """Test BTCUSDT and ETHUSD on a no-separator exchange."""
        matches = match_pairs(
            ["BTC", "ETH"], QUOTES, SymbolConvention(""), frozenset({"BTCUSDT", "ETHUSD"})
        )

        assert [m.pair for m in matches] == ["BTC/USDT", "ETH/USD"]
        assert [m.symbol for m in matches] == ["BTCUSDT", "ETHUSD"]

    def test_membership_iff_symbol_in_set(self):
        """Test that a pair matches exactly when its symbol is in the set."""
        bases = ["ADA", "BTC", "DOGE"]
        convention = SymbolConvention("-")
        symbols = frozenset({"ADA-USD", "BTC-USDT", "BTC-USD", "XRP-USD"})

        matches = {(m.base, m.quote) for m in match_pairs(bases, QUOTES, convention, symbols)}

        for base, quote in itertools.product(bases, QUOTES):
            expected = to_exchange_symbol(base, quote, convention) in symbols
            assert ((base, quote) in matches) is expected

    def test_order_base_then_quote(self):
        """Test ordering by base ascending, quote in configured order."""
        symbols = frozenset({"ETHUSDT", "ETHUSD", "BTCUSDT", "BTCUSD"})
        matches = match_pairs(["ETH", "BTC"], ("USDT", "USD"), SymbolConvention(""), symbols)

        assert [m.pair for m in matches] == ["BTC/USDT", "BTC/USD", "ETH/USDT", "ETH/USD"]

    def test_no_cross_quote_inference(self):
        """Test that USD support does not imply USDT support."""
        matches = match_pairs(["BTC"], QUOTES, SymbolConvention("_"), frozenset({"BTC_USD"}))
        assert matches == [MatchResult("BTC", "USD", "BTC_USD")]

    def test_no_partial_symbol_matching(self):
        """Test that prefixes of longer symbols do not match."""
        matches = match_pairs(["BTC"], QUOTES, SymbolConvention(""), frozenset({"WBTCUSD", "BTCUSDC"}))
        assert matches == []

    def test_no_matches_is_empty_list(self):
        assert match_pairs(["BTC"], QUOTES, SymbolConvention(""), frozenset()) == []

    def test_lower_case_exchange(self):
        """Test matching against a lower-case exchange convention."""
        matches = match_pairs(["BTC"], QUOTES, SymbolConvention("", "lower"), frozenset({"btcusdt"}))
        assert [m.pair for m in matches] == ["BTC/USDT"]
        assert matches[0].symbol == "btcusdt"
