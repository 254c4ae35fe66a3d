"""Venus subgraph client for GraphQL requests."""

from __future__ import annotations

from beartype import beartype
from httpx import Client

from venus_tags.errors import SubgraphHTTPError, SubgraphNoDataError, SubgraphQueryError
from venus_tags.extractors.models import RawMarket
from venus_tags.utils.config import GRAPHQL_HEADERS, HTTP_TIMEOUT, PAGE_SIZE
from venus_tags.utils.logger import get_logger

logger = get_logger(__name__)

MARKETS_QUERY = f"""
query GetMarkets($lastBlock: BigInt) {{
    markets(
        first: {PAGE_SIZE}
        orderBy: accrualBlockNumber
        orderDirection: asc
        where: {{ accrualBlockNumber_gt: $lastBlock }}
    ) {{
        id
        name
        symbol
        accrualBlockNumber
    }}
}}
"""


class SubgraphClient:
    """Client for querying Venus market entities from The Graph."""

    def __init__(self, client: Client | None = None) -> None:
        """
        Initialize the subgraph client.

        Args:
            client: Optional httpx client (creates new if None)
        """
        self.client = client if client is not None else Client(timeout=HTTP_TIMEOUT)

    @beartype
    def fetch_markets_page(self, url: str, last_block: int) -> list[RawMarket]:
        """
        Fetch one page of markets accrued after a block number.

        Args:
            url: Subgraph endpoint URL with the API key already inserted
            last_block: Only markets with accrualBlockNumber above this are returned

        Returns:
            Up to PAGE_SIZE markets ordered by accrualBlockNumber ascending

        Raises:
            SubgraphHTTPError: If the endpoint returns a non-success status
            SubgraphQueryError: If the response carries GraphQL errors
            SubgraphNoDataError: If the response has no usable market data
        """
        payload = {
            "query": MARKETS_QUERY,
            "variables": {"lastBlock": last_block},
        }

        response = self.client.post(url, json=payload, headers=GRAPHQL_HEADERS)
        if not response.is_success:
            raise SubgraphHTTPError(response.status_code)

        try:
            result = response.json()
        except ValueError:
            raise SubgraphNoDataError("Response body is not valid JSON") from None
        if not isinstance(result, dict):
            raise SubgraphNoDataError("Response body is not a JSON object")

        errors = result.get("errors")
        if errors:
            if not isinstance(errors, list):
                errors = [errors]
            messages = [self._error_message(error) for error in errors]
            for message in messages:
                logger.error(f"GraphQL error: {message}")
            raise SubgraphQueryError(messages)

        data = result.get("data")
        markets = data.get("markets") if isinstance(data, dict) else None
        if not isinstance(markets, list):
            raise SubgraphNoDataError("No data returned from GraphQL query")

        return [RawMarket.from_dict(item) for item in markets]

    @staticmethod
    def _error_message(error: object) -> str:
        """Extract the message of a single GraphQL error entry."""
        if isinstance(error, dict) and isinstance(error.get("message"), str):
            return error["message"]
        return str(error)

    def close(self) -> None:
        """Close the HTTP client."""
        self.client.close()

    def __enter__(self) -> SubgraphClient:
        """Context manager entry."""
        return self

    def __exit__(self, exc_type: object, exc_val: object, exc_tb: object) -> None:
        """Context manager exit."""
        self.close()
