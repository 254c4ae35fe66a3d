"""Market validation, transformation and collection for Venus subgraphs."""

from __future__ import annotations

from venus_tags.extractors.market_extractor import collect_all_tags
from venus_tags.extractors.models import ContractTag, RawMarket
from venus_tags.extractors.tag_transformer import transform_market
from venus_tags.extractors.url_builder import build_subgraph_url
from venus_tags.extractors.validator import is_acceptable

__all__ = [
    "ContractTag",
    "RawMarket",
    "build_subgraph_url",
    "collect_all_tags",
    "is_acceptable",
    "transform_market",
]
