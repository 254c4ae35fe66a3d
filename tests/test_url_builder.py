"""Tests for subgraph endpoint resolution module."""

from __future__ import annotations

import pytest

from venus_tags.errors import UnsupportedChainError
from venus_tags.extractors.url_builder import build_subgraph_url, supported_chain_ids
from venus_tags.utils.config import API_KEY_PLACEHOLDER, SUBGRAPH_URLS


@pytest.mark.parametrize("chain_id", sorted(SUBGRAPH_URLS))
def test_build_subgraph_url_inserts_api_key(chain_id: str) -> None:
    """Test every supported chain resolves to a URL carrying the API key."""
    url = build_subgraph_url(chain_id, "test-key-123")

    assert "test-key-123" in url
    assert API_KEY_PLACEHOLDER not in url
    assert url.startswith("https://")


def test_supported_chain_ids() -> None:
    """Test the supported chain list matches the configured table."""
    assert supported_chain_ids() == list(SUBGRAPH_URLS)
    assert "56" in supported_chain_ids()
    assert "1" in supported_chain_ids()


@pytest.mark.parametrize("chain_id", ["999999", "", "bsc", "56a", "-56", " 56", "5.6"])
def test_build_subgraph_url_unsupported_chain(chain_id: str) -> None:
    """Test unknown or non-numeric chain IDs list every supported chain."""
    with pytest.raises(UnsupportedChainError) as exc_info:
        build_subgraph_url(chain_id, "test-key")

    message = str(exc_info.value)
    assert "Unsupported chain ID" in message
    for supported in SUBGRAPH_URLS:
        assert supported in message


def test_unsupported_chain_error_is_value_error() -> None:
    """Test configuration errors can be caught as ValueError."""
    with pytest.raises(ValueError):
        build_subgraph_url("12345678", "test-key")


def test_build_subgraph_url_empty_api_key() -> None:
    """Test an empty API key raises ValueError."""
    with pytest.raises(ValueError, match="API key must be a non-empty string"):
        build_subgraph_url("56", "  ")
