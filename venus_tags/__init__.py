"""Venus v4 market tag collection from The Graph."""

from __future__ import annotations

from venus_tags.extractors.market_extractor import collect_all_tags
from venus_tags.extractors.models import ContractTag, RawMarket

__all__ = ["ContractTag", "RawMarket", "collect_all_tags"]
