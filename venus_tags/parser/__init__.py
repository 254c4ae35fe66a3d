"""GraphQL clients for The Graph subgraphs."""
