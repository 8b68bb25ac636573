from __future__ import annotations

from typing import Any, Literal

from pydantic import BaseModel, Field, field_validator

DEFAULT_FEEDS_URL = (
    "https://raw.githubusercontent.com/flare-foundation/"
    "ftso-v2-example-value-provider/main/src/config/feeds.json"
)


class ExchangeSettings(BaseModel):
    enabled: bool = True
    url: str | None = None
    separator: Literal["", "-", "/", "_"] | None = None
    casing: Literal["upper", "lower", "preserve"] | None = None
    options: dict[str, Any] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}


class Settings(BaseModel):
    feeds_url: str = DEFAULT_FEEDS_URL
    quotes: list[str] = Field(default_factory=lambda: ["USD", "USDT"], min_length=1)
    timeout: float = Field(default=10.0, gt=0)
    exchanges: dict[str, ExchangeSettings] = Field(default_factory=dict)

    model_config = {"extra": "forbid"}

    @field_validator("quotes")
    @classmethod
    def _normalize_quotes(cls, value: list[str]) -> list[str]:
        quotes: list[str] = []
        for quote in value:
            quote = quote.strip().upper()
            if not quote:
                raise ValueError("quote currencies must be non-empty")
            if quote not in quotes:
                quotes.append(quote)
        return quotes
