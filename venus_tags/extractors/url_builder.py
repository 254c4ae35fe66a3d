"""Subgraph endpoint resolution for supported chains."""

from __future__ import annotations

from beartype import beartype

from venus_tags.errors import UnsupportedChainError
from venus_tags.utils.config import API_KEY_PLACEHOLDER, SUBGRAPH_URLS


@beartype
def supported_chain_ids() -> list[str]:
    """Return the chain IDs that have a configured subgraph."""
    return list(SUBGRAPH_URLS)


@beartype
def build_subgraph_url(chain_id: str, api_key: str) -> str:
    """
    Resolve the subgraph URL for a chain and insert the gateway API key.

    Args:
        chain_id: EIP-155 chain ID as a decimal string (e.g., "56")
        api_key: The Graph gateway API key

    Returns:
        Endpoint URL with the API key substituted

    Raises:
        UnsupportedChainError: If the chain ID is not numeric or not configured
        ValueError: If the API key is empty
    """
    if not chain_id.isdecimal() or chain_id not in SUBGRAPH_URLS:
        supported = ", ".join(supported_chain_ids())
        raise UnsupportedChainError(f"Unsupported chain ID: {chain_id}. Supported chain IDs are: {supported}")

    if not api_key.strip():
        raise ValueError("API key must be a non-empty string")

    return SUBGRAPH_URLS[chain_id].replace(API_KEY_PLACEHOLDER, api_key)
