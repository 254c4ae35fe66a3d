"""Market collection logic for Venus isolated pools."""

from __future__ import annotations

from beartype import beartype
from httpx import HTTPError

from venus_tags.errors import PaginationError, TagCollectionError, VenusTagsError
from venus_tags.extractors.models import ContractTag, RawMarket
from venus_tags.extractors.tag_transformer import transform_market
from venus_tags.extractors.url_builder import build_subgraph_url
from venus_tags.parser.subgraph_client import SubgraphClient
from venus_tags.utils.config import PAGE_SIZE
from venus_tags.utils.logger import get_logger

logger = get_logger(__name__)


@beartype
def next_cursor(page: list[RawMarket], last_block: int) -> int:
    """
    Compute the cursor for the page following a full page.

    Args:
        page: Markets returned for last_block
        last_block: Cursor the page was fetched with

    Returns:
        Highest accrualBlockNumber in the page

    Raises:
        PaginationError: If the page is unsorted or does not move past last_block
    """
    previous = last_block
    for market in page:
        if market.accrual_block_number <= last_block:
            raise PaginationError(
                f"Market {market.id} at block {market.accrual_block_number} is not past cursor {last_block}"
            )
        if market.accrual_block_number < previous:
            raise PaginationError(f"Page is not sorted by accrualBlockNumber at market {market.id}")
        previous = market.accrual_block_number
    return max(market.accrual_block_number for market in page)


@beartype
def collect_all_tags(
    chain_id: str,
    api_key: str,
    api_client: SubgraphClient | None = None,
) -> list[ContractTag]:
    """
    Fetch every Venus market on a chain and convert it into registry tags.

    Pages are requested sequentially with accrualBlockNumber as the cursor
    until a page shorter than PAGE_SIZE comes back.

    Args:
        chain_id: EIP-155 chain ID as a decimal string (e.g., "56")
        api_key: The Graph gateway API key
        api_client: Optional subgraph client (creates new if None)

    Returns:
        Tags for all accepted markets, in fetch order

    Raises:
        UnsupportedChainError: If the chain ID has no configured subgraph
        TagCollectionError: If any page fails to load
    """
    url = build_subgraph_url(chain_id, api_key)

    should_close = api_client is None
    if api_client is None:
        api_client = SubgraphClient()

    tags: list[ContractTag] = []
    last_block = 0
    pages = 0
    fetched = 0
    try:
        while True:
            page = api_client.fetch_markets_page(url, last_block)
            pages += 1
            fetched += len(page)

            for market in page:
                tag = transform_market(chain_id, market)
                if tag is not None:
                    tags.append(tag)

            logger.log_progress(pages, fetched, len(tags))

            if len(page) != PAGE_SIZE:
                break
            last_block = next_cursor(page, last_block)
    except (VenusTagsError, HTTPError) as e:
        logger.error(f"Error fetching Venus markets on chain {chain_id}: {e}")
        raise TagCollectionError(f"Error fetching Venus markets: {e}") from e
    except Exception as e:
        logger.exception(f"Unknown error fetching Venus markets on chain {chain_id}")
        raise TagCollectionError("An unknown error occurred while fetching Venus markets") from e
    finally:
        if should_close:
            api_client.close()

    logger.record_metric("pages_fetched", pages)
    logger.record_metric("markets_fetched", fetched)
    logger.record_metric("tags_accepted", len(tags))
    logger.record_metric("markets_rejected", fetched - len(tags))
    logger.log_summary()
    return tags
