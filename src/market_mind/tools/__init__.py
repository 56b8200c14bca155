"""Analysis tools."""

from market_mind.tools.analysis import ticker_analysis
from market_mind.tools.ranking import stock_ranking
from market_mind.tools.stocks import stock_list, stock_lookup

__all__ = [
    "stock_list",
    "stock_lookup",
    "stock_ranking",
    "ticker_analysis",
]
