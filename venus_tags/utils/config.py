"""Configuration constants for the Venus v4 tag exporter."""

from __future__ import annotations

from pathlib import Path

# Logging
LOGS_DIR = Path(__file__).parent.parent.parent / "logs"

# The Graph gateway configuration
API_KEY_PLACEHOLDER = "[api-key]"
API_KEY_ENV_VAR = "THE_GRAPH_API_KEY"

# Venus isolated pools subgraphs, keyed by EIP-155 chain ID
SUBGRAPH_URLS: dict[str, str] = {
    "1": f"https://gateway.thegraph.com/api/{API_KEY_PLACEHOLDER}/subgraphs/id/Htf6Hh1qgkvxQxqbcv4Jp5AatsaiY5dNLVcySkpCaxQ8",
    "56": f"https://gateway.thegraph.com/api/{API_KEY_PLACEHOLDER}/subgraphs/id/H2a3D64RByYTfVEvaRdgrKSPMzbpeB8KZhJvCG3ycC3T",
    "204": f"https://gateway.thegraph.com/api/{API_KEY_PLACEHOLDER}/subgraphs/id/DTDcmYYDaNM8bmLFywmNmhCaq5QaQHJbjsL1XSjPpTfM",
    "324": f"https://gateway.thegraph.com/api/{API_KEY_PLACEHOLDER}/subgraphs/id/8DTQwEr1JrUcLRSVRy8QkdmF8sYFUJb8ERqeqsR9hiQW",
    "42161": f"https://gateway.thegraph.com/api/{API_KEY_PLACEHOLDER}/subgraphs/id/3HaA9t6kKhv2LbiQPNhG4Bd6NmQdp7tHRBJUFUQCt1ks",
}

GRAPHQL_HEADERS: dict[str, str] = {
    "Content-Type": "application/json",
    "Accept": "application/json",
}

# HTTP client timeout (seconds)
HTTP_TIMEOUT = 30.0

# Subgraph pagination
PAGE_SIZE = 1000  # Maximum entities The Graph returns per query

# Tag output
MAX_TAG_LENGTH = 44
PROJECT_NAME = "Venus v4"
WEBSITE_LINK = "https://venus.io/"
