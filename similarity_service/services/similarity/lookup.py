"""
Similarity lookup: builds every declared similarity of an index once, eagerly, and resolves
similarity names for field mappings. Declared names shadow prebuilt ones; an absent or empty
name resolves to the prebuilt "default".
"""

from collections.abc import Mapping
from types import MappingProxyType
from typing import Any

from similarity_service.config.logging import get_logger, log_extra
from similarity_service.config.similarity.models import SimilarityDefinition
from similarity_service.services.similarity.base import Similarity, SimilarityFactory
from similarity_service.services.similarity.errors import (
    MissingParameterError,
    SimilarityConfigError,
    UnknownSimilarityError,
    UnknownStrategyTypeError,
)
from similarity_service.services.similarity.params import ParameterBag, group_settings
from similarity_service.services.similarity.prebuilt import (
    DEFAULT_SIMILARITY,
    PREBUILT_SIMILARITIES,
    PrebuiltSimilarityRegistry,
)
from similarity_service.services.similarity.strategies import STRATEGY_REGISTRY, get_similarity_factory

logger = get_logger(__name__)


def build_similarity(
    name: str,
    definition: SimilarityDefinition,
    factories: Mapping[str, SimilarityFactory] = STRATEGY_REGISTRY,
) -> Similarity:
    """
    Build one declared similarity with the factory selected by its type.
    Raises MissingParameterError without a type, UnknownStrategyTypeError for an unregistered
    type, and whatever SimilarityConfigError the factory raises for its parameters.
    """
    if not definition.type:
        raise MissingParameterError(name, "type")
    factory = get_similarity_factory(definition.type, factories)
    if factory is None:
        raise UnknownStrategyTypeError(name, definition.type)
    return factory(ParameterBag(name, definition.parameters))


class SimilarityLookupService:
    """
    Immutable name -> Similarity lookup for one index.

    Construction is all-or-nothing: if any declared similarity fails to build, the error
    propagates and no service exists. After construction the lookup is read-only and safe to
    share between threads.
    """

    def __init__(
        self,
        definitions: Mapping[str, SimilarityDefinition] | None = None,
        factories: Mapping[str, SimilarityFactory] = STRATEGY_REGISTRY,
        prebuilt: PrebuiltSimilarityRegistry = PREBUILT_SIMILARITIES,
    ) -> None:
        similarities: dict[str, Similarity] = {}
        for name, definition in (definitions or {}).items():
            try:
                similarity = build_similarity(name, definition, factories)
            except SimilarityConfigError as e:
                logger.error(
                    "Failed to build similarity",
                    **log_extra(similarity=name, type=definition.type, error_code=e.error_code, error=e.message),
                )
                raise
            logger.debug("Similarity built", **log_extra(similarity=name, type=similarity.type_name))
            similarities[name] = similarity

        self._similarities: Mapping[str, Similarity] = MappingProxyType(similarities)
        self._prebuilt = prebuilt
        logger.info(
            "Similarity lookup ready",
            **log_extra(declared=len(similarities), prebuilt=len(prebuilt.names())),
        )

    @classmethod
    def from_settings(
        cls,
        index_settings: Mapping[str, Any],
        factories: Mapping[str, SimilarityFactory] = STRATEGY_REGISTRY,
        prebuilt: PrebuiltSimilarityRegistry = PREBUILT_SIMILARITIES,
    ) -> "SimilarityLookupService":
        """Build from raw index settings, reading every `index.similarity.<name>.*` group."""
        definitions = {
            name: SimilarityDefinition.from_section(name, section)
            for name, section in group_settings(index_settings).items()
        }
        return cls(definitions, factories=factories, prebuilt=prebuilt)

    def __contains__(self, name: object) -> bool:
        return name in self._similarities or name in self._prebuilt

    @property
    def declared(self) -> Mapping[str, Similarity]:
        """User-declared similarities by name (read-only view)."""
        return self._similarities

    def names(self) -> list[str]:
        """Every resolvable name: declared first, then prebuilt names not shadowed by them."""
        return list(self._similarities) + [n for n in self._prebuilt.names() if n not in self._similarities]

    def get(self, name: str | None) -> Similarity | None:
        """Like resolve(), but returns None for an unknown name."""
        if not name:
            name = DEFAULT_SIMILARITY
        similarity = self._similarities.get(name)
        if similarity is not None:
            return similarity
        return self._prebuilt.lookup(name)

    def resolve(self, name: str | None) -> Similarity:
        """
        Resolve name: declared similarities first, then prebuilt ones; None or "" resolves to
        "default". Raises UnknownSimilarityError for any other name found in neither.
        """
        similarity = self.get(name)
        if similarity is None:
            raise UnknownSimilarityError(name or DEFAULT_SIMILARITY)
        return similarity

    def default(self) -> Similarity:
        return self.resolve(DEFAULT_SIMILARITY)
