"""Conversion of subgraph markets into registry tags."""

from __future__ import annotations

from beartype import beartype

from venus_tags.extractors.models import ContractTag, RawMarket
from venus_tags.extractors.validator import is_acceptable
from venus_tags.utils.config import MAX_TAG_LENGTH, PROJECT_NAME, WEBSITE_LINK
from venus_tags.utils.logger import get_logger

logger = get_logger(__name__)

ELLIPSIS = "..."


@beartype
def truncate(text: str, max_length: int = MAX_TAG_LENGTH) -> str:
    """
    Shorten text to at most max_length characters.

    When the text is cut, its tail is replaced by "..." so the result is
    exactly max_length characters long.
    """
    if len(text) <= max_length:
        return text
    return text[: max_length - len(ELLIPSIS)] + ELLIPSIS


@beartype
def transform_market(chain_id: str, market: RawMarket) -> ContractTag | None:
    """
    Build a registry tag for a single market.

    Args:
        chain_id: EIP-155 chain ID the market lives on
        market: Market entity from the subgraph

    Returns:
        ContractTag, or None if the market's name or symbol is rejected
    """
    valid = True
    if not is_acceptable(market.name):
        logger.warning(f"Skipping market {market.id}: invalid name {market.name!r}")
        valid = False
    if not is_acceptable(market.symbol):
        logger.warning(f"Skipping market {market.id}: invalid symbol {market.symbol!r}")
        valid = False
    if not valid:
        return None

    return ContractTag(
        contract_address=f"eip155:{chain_id}:{market.id}",
        public_name_tag=truncate(f"{market.symbol} Token"),
        project_name=PROJECT_NAME,
        website_link=WEBSITE_LINK,
        public_note=f"{PROJECT_NAME}'s official {market.name} token (Isolated)",
    )
