"""Data models for subgraph markets and registry tags."""

from __future__ import annotations

from dataclasses import dataclass

from venus_tags.errors import MalformedMarketError


@dataclass(frozen=True)
class RawMarket:
    """Represents a Venus market entity as returned by the subgraph."""

    id: str
    name: str
    symbol: str
    accrual_block_number: int

    @classmethod
    def from_dict(cls, item: object) -> RawMarket:
        """
        Build a market from a GraphQL `markets` entry.

        The subgraph serialises BigInt fields as strings, so the block number
        may arrive as either an int or a decimal string.

        Raises:
            MalformedMarketError: If the entry is missing fields or has bad types
        """
        if not isinstance(item, dict):
            raise MalformedMarketError(f"Market entry is not an object: {item!r}")

        market_id = item.get("id")
        name = item.get("name")
        symbol = item.get("symbol")
        block = item.get("accrualBlockNumber")

        if not isinstance(market_id, str) or not isinstance(name, str) or not isinstance(symbol, str):
            raise MalformedMarketError(f"Market entry has missing or non-string fields: {item!r}")

        # bool is an int subclass
        if isinstance(block, bool) or not isinstance(block, (int, str)):
            raise MalformedMarketError(f"Market {market_id} has invalid accrualBlockNumber: {block!r}")
        try:
            block_number = int(block)
        except ValueError:
            raise MalformedMarketError(f"Market {market_id} has invalid accrualBlockNumber: {block!r}") from None

        return cls(id=market_id, name=name, symbol=symbol, accrual_block_number=block_number)


@dataclass(frozen=True)
class ContractTag:
    """A registry tag describing one market contract."""

    contract_address: str
    public_name_tag: str
    project_name: str
    website_link: str
    public_note: str

    def to_dict(self) -> dict[str, str]:
        """Return the tag in the registry's field naming."""
        return {
            "contractAddress": self.contract_address,
            "publicNameTag": self.public_name_tag,
            "projectName": self.project_name,
            "websiteLink": self.website_link,
            "publicNote": self.public_note,
        }
