"""
Field mapping parser: walks a mapping's properties and binds each field to the similarity its
`similarity` property names, resolved once at mapping time.
"""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from similarity_service.services.similarity.base import Similarity
from similarity_service.services.similarity.errors import UnknownSimilarityError
from similarity_service.services.similarity.lookup import SimilarityLookupService


class MapperParsingError(ValueError):
    """A mapping definition could not be parsed."""

    def __init__(self, message: str, field: str | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.field = field


@dataclass(frozen=True)
class FieldMapping:
    """One mapped field. `similarity_name` is None when the mapping did not set one."""

    name: str
    type: str
    similarity_name: str | None
    similarity: Similarity


class DocumentMapping:
    """Fields of a parsed mapping, by full (dotted) name."""

    def __init__(self, fields: list[FieldMapping], type_name: str | None = None) -> None:
        self.type_name = type_name
        self._fields = {f.name: f for f in fields}

    def __contains__(self, name: object) -> bool:
        return name in self._fields

    def __iter__(self) -> Iterator[FieldMapping]:
        return iter(self._fields.values())

    def __len__(self) -> int:
        return len(self._fields)

    @property
    def fields(self) -> list[FieldMapping]:
        return list(self._fields.values())

    def field(self, name: str) -> FieldMapping | None:
        return self._fields.get(name)


def _split_type(mapping: Mapping[str, Any]) -> tuple[str | None, Mapping[str, Any]]:
    """Accept {"properties": ...} or a single-type wrapper {"<type>": {"properties": ...}}."""
    if "properties" in mapping:
        return None, mapping
    if len(mapping) == 1:
        type_name, body = next(iter(mapping.items()))
        if isinstance(body, Mapping) and "properties" in body:
            return type_name, body
    raise MapperParsingError("Mapping must define 'properties' at the root or under a single type name")


def _walk(
    properties: Mapping[str, Any],
    lookup: SimilarityLookupService,
    path: str,
    out: list[FieldMapping],
) -> None:
    for field_name, field_def in properties.items():
        full_name = f"{path}{field_name}"
        if not isinstance(field_def, Mapping):
            raise MapperParsingError(f"Field [{full_name}] must be an object", field=full_name)
        if "properties" in field_def:
            children = field_def["properties"]
            if not isinstance(children, Mapping):
                raise MapperParsingError(f"Field [{full_name}] properties must be an object", field=full_name)
            _walk(children, lookup, f"{full_name}.", out)
            continue
        field_type = field_def.get("type")
        if not isinstance(field_type, str) or not field_type:
            raise MapperParsingError(f"No type specified for field [{full_name}]", field=full_name)
        similarity_name = field_def.get("similarity")
        if similarity_name is not None and not isinstance(similarity_name, str):
            raise MapperParsingError(f"Field [{full_name}] similarity must be a string", field=full_name)
        try:
            similarity = lookup.resolve(similarity_name)
        except UnknownSimilarityError as e:
            raise MapperParsingError(
                f"Unknown similarity [{e.name}] for field [{full_name}]", field=full_name
            ) from e
        out.append(
            FieldMapping(
                name=full_name,
                type=field_type,
                similarity_name=similarity_name,
                similarity=similarity,
            )
        )


def parse_mapping(mapping: Mapping[str, Any], lookup: SimilarityLookupService) -> DocumentMapping:
    """
    Parse a mapping and resolve each field's similarity through lookup. Object fields (those
    with nested properties) are walked recursively; leaf names are joined with '.'.
    Raises MapperParsingError for malformed mappings and unknown similarity names.
    """
    type_name, body = _split_type(mapping)
    properties = body["properties"]
    if not isinstance(properties, Mapping):
        raise MapperParsingError("'properties' must be an object")
    fields: list[FieldMapping] = []
    _walk(properties, lookup, "", fields)
    return DocumentMapping(fields, type_name=type_name)


class PerFieldSimilarity:
    """Similarity by field name; fields absent from the mapping get the default."""

    def __init__(self, mapping: DocumentMapping, default: Similarity) -> None:
        self._by_field = {f.name: f.similarity for f in mapping}
        self.default = default

    def get(self, field_name: str) -> Similarity:
        return self._by_field.get(field_name, self.default)
