"""
Prebuilt similarities: zero-configuration instances available under canonical names in every
index. The table is fixed when this module is imported; each instance is built on first use,
exactly once, and shared afterwards.
"""

import threading
from collections.abc import Iterable

from similarity_service.services.similarity.base import Similarity, SimilarityFactory
from similarity_service.services.similarity.params import ParameterBag
from similarity_service.services.similarity.strategies import (
    build_bm25,
    build_default,
    build_lm_dirichlet,
)

DEFAULT_SIMILARITY = "default"


class PrebuiltSimilarity:
    """Named, lazily built, shared similarity. Providers compare and hash by name."""

    def __init__(self, name: str, factory: SimilarityFactory) -> None:
        self.name = name
        self._factory = factory
        self._lock = threading.Lock()
        self._instance: Similarity | None = None

    def __eq__(self, other: object) -> bool:
        return isinstance(other, PrebuiltSimilarity) and other.name == self.name

    def __hash__(self) -> int:
        return hash(self.name)

    def __repr__(self) -> str:
        return f"PrebuiltSimilarity({self.name!r})"

    def get(self) -> Similarity:
        instance = self._instance
        if instance is not None:
            return instance
        with self._lock:
            if self._instance is None:
                self._instance = self._factory(ParameterBag(self.name))
            return self._instance


class PrebuiltSimilarityRegistry:
    """Read-only table of prebuilt similarities keyed by canonical name."""

    def __init__(self, providers: Iterable[PrebuiltSimilarity]) -> None:
        self._providers = {p.name: p for p in providers}

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def names(self) -> list[str]:
        return list(self._providers)

    def provider(self, name: str) -> PrebuiltSimilarity | None:
        return self._providers.get(name)

    def lookup(self, name: str) -> Similarity | None:
        """Return the shared instance for name, or None if name is not prebuilt."""
        provider = self._providers.get(name)
        return provider.get() if provider is not None else None


PREBUILT_SIMILARITIES = PrebuiltSimilarityRegistry(
    [
        PrebuiltSimilarity(DEFAULT_SIMILARITY, build_default),
        PrebuiltSimilarity("BM25", build_bm25),
        PrebuiltSimilarity("LMDirichlet", build_lm_dirichlet),
    ]
)
