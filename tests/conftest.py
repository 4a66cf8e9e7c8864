from typing import Any

import pytest

from similarity_service.services.similarity.lookup import SimilarityLookupService


def similarity_settings(name: str, **params: Any) -> dict[str, Any]:
    """Flat index settings declaring one similarity: similarity_settings("s", type="BM25", k1=2.0)."""
    return {f"index.similarity.{name}.{key}": value for key, value in params.items()}


@pytest.fixture
def lookup_for():
    """Build a SimilarityLookupService from flat or nested index settings."""

    def build(settings: dict[str, Any] | None = None) -> SimilarityLookupService:
        return SimilarityLookupService.from_settings(settings or {})

    return build


@pytest.fixture
def field_mapping():
    """Mapping with a single string field, optionally bound to a named similarity."""

    def build(similarity: str | None = None, field: str = "field1") -> dict[str, Any]:
        definition: dict[str, Any] = {"type": "string"}
        if similarity is not None:
            definition["similarity"] = similarity
        return {"type": {"properties": {field: definition}}}

    return build


@pytest.fixture
def declare():
    return similarity_settings
