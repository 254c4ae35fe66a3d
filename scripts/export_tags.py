"""Export Venus v4 market tags for a chain as registry JSON."""

from __future__ import annotations

import json
import os
import sys
from pathlib import Path

from beartype import beartype

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from venus_tags.errors import VenusTagsError
from venus_tags.extractors.market_extractor import collect_all_tags
from venus_tags.extractors.url_builder import supported_chain_ids
from venus_tags.utils.config import API_KEY_ENV_VAR


@beartype
def main(chain_id: str, api_key: str, output: Path | None = None) -> None:
    """
    Collect tags for a chain and write them as a JSON array.

    Args:
        chain_id: EIP-155 chain ID (e.g., "56")
        api_key: The Graph gateway API key
        output: Output file path (prints to stdout if None)
    """
    try:
        tags = collect_all_tags(chain_id, api_key)
    except VenusTagsError as e:
        print(f"\nError: {e}", file=sys.stderr)
        sys.exit(1)

    document = json.dumps([tag.to_dict() for tag in tags], indent=2)
    if output is None:
        print(document)
        return

    output.write_text(document + "\n", encoding="utf-8")
    print(f"Wrote {len(tags)} tags for chain {chain_id} to {output}", file=sys.stderr)


if __name__ == "__main__":
    if len(sys.argv) < 2:
        print("Usage: python scripts/export_tags.py <chain_id> [output.json]")
        print(f"Supported chain IDs: {', '.join(supported_chain_ids())}")
        print(f"The API key is read from the {API_KEY_ENV_VAR} environment variable.")
        sys.exit(1)

    api_key = os.environ.get(API_KEY_ENV_VAR, "")
    if not api_key:
        print(f"Error: {API_KEY_ENV_VAR} is not set", file=sys.stderr)
        sys.exit(1)

    output_path = Path(sys.argv[2]) if len(sys.argv) > 2 else None
    main(sys.argv[1], api_key, output_path)
