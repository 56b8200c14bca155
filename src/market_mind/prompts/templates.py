"""Prompt templates for sentiment analysis."""

from typing import Any

from market_mind.data.news import get_financial_news

# Prompt definitions
PROMPTS = {
    "sentiment_analysis": {
        "description": "News sentiment and RSI trend assessment for one ticker, as JSON",
        "arguments": [{"name": "ticker", "required": True}],
    },
}

_SENTIMENT_ANALYSIS = """You are a financial analyst specializing in sentiment analysis and quantitative trading strategies based on the "Unconventional RSI" and "20 SMA High/Low Band" methodologies. For the given stock ticker, you must perform an analysis based on a specific set of rules.

Your entire analysis MUST adhere to the following trading strategy:

**Core Strategy: Swing Trading with Unconventional RSI and Magic Bands**

**1. Trend Identification (Unconventional RSI)**:
    *   **RSI Range Shifts**: The market trend is defined ONLY by these RSI ranges. Your analysis MUST state which range the stock is in.
        *   **(40-80)**: Bullish
        *   **(60-80)**: Strong Bullish
        *   **(40-60) OR (60-40)**: Sideways
        *   **(60-20)**: Bearish
        *   **(40-20)**: Strong Bearish
    *   **Key Levels**: RSI 40 acts as support in a bull market. RSI 60 acts as resistance in a bear market.

**2. Key Tools & Rules**:
    *   **20-SMA High/Low "Magic Bands"**: the slope of the SMAs must be upward for long positions and downward for short positions. No trades in a sideways market.
    *   **Market Structure** (mandatory): higher tops and higher bottoms for a long position, lower tops and lower bottoms for a short position.
    *   **GFS (Grandfather-Father-Son) 5-Star Setup**: Daily, Hourly, and 15-Minute timeframes.
        *   **5-Star Long**: Monthly RSI > 60, Weekly RSI > 60, Daily RSI > 60/40.
        *   **5-Star Short**: Monthly RSI above 60, Weekly RSI < 40, Daily RSI < 40/60.

**Context**:
    *   Overall market sentiment score (-1 to 1): {market_sentiment:.2f}
    *   Latest headlines:
{headline_block}

**Your Task**:

1.  Score the sentiment of each headline above from -1 (very negative) to 1 (very positive).
2.  Aggregate the individual scores into an overall sentiment score for {ticker}, from -1 to 1.
3.  Give step-by-step reasoning. It MUST EXPLICITLY state the current RSI Range Shift (e.g., "The stock is in a Strong Bullish trend with an RSI range of 60-80.") and reference the market structure and Magic Band rules.
4.  Return the headlines you used.

Respond with a single JSON object and nothing else:

```json
{{
  "headlines": ["..."],
  "sentimentPolarityScores": [0.0],
  "overallSentimentScore": 0.0,
  "reasoning": "..."
}}
```

Ticker: {ticker}
"""


def list_prompts() -> list[dict[str, Any]]:
    """List available prompts."""
    return [
        {
            "name": name,
            "description": info["description"],
            "arguments": info["arguments"],
        }
        for name, info in PROMPTS.items()
    ]


def build_sentiment_prompt(ticker: str, headlines: list[str], market_sentiment: float) -> str:
    """Render the sentiment analysis prompt for one ticker."""
    headline_block = "\n".join(f"        {i}. {h}" for i, h in enumerate(headlines, start=1))
    return _SENTIMENT_ANALYSIS.format(
        ticker=ticker,
        headline_block=headline_block,
        market_sentiment=market_sentiment,
    )


def get_prompt(name: str, arguments: dict[str, Any]) -> dict[str, Any] | None:
    """
    Get a prompt by name with arguments filled in.

    Returns dict with 'messages' key for MCP GetPromptResult.
    """
    if name not in PROMPTS:
        return None

    if name == "sentiment_analysis":
        ticker = str(arguments.get("ticker", "")).upper().strip()
        headlines = arguments.get("headlines") or get_financial_news(ticker)
        market_sentiment = float(arguments.get("market_sentiment", 0.0))
        return {
            "messages": [
                {
                    "role": "user",
                    "content": build_sentiment_prompt(ticker, headlines, market_sentiment),
                }
            ]
        }

    return None
