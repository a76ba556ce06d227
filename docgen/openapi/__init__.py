"""OpenAPI document retrieval and indexing."""
