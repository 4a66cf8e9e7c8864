"""
Render resolved similarities and field bindings back into index settings and mappings.
Output feeds straight back into SimilarityLookupService.from_settings and parse_mapping.
"""

from typing import Any

from similarity_service.services.mapping.mapper import DocumentMapping
from similarity_service.services.similarity.lookup import SimilarityLookupService


def build_similarity_settings(lookup: SimilarityLookupService) -> dict[str, Any]:
    """Declared similarities as {"index": {"similarity": {<name>: {<flat settings>}}}}. Prebuilt ones are implicit."""
    return {
        "index": {
            "similarity": {name: similarity.to_settings() for name, similarity in lookup.declared.items()}
        }
    }


def _field_properties(mapping: DocumentMapping) -> dict[str, Any]:
    """Rebuild nested properties from dotted field names."""
    properties: dict[str, Any] = {}
    for field in mapping:
        *parents, leaf = field.name.split(".")
        node = properties
        for parent in parents:
            node = node.setdefault(parent, {"properties": {}})["properties"]
        prop: dict[str, Any] = {"type": field.type}
        if field.similarity_name is not None:
            prop["similarity"] = field.similarity_name
        node[leaf] = prop
    return properties


def build_index_body(
    lookup: SimilarityLookupService,
    mapping: DocumentMapping | None = None,
    index_settings: dict[str, Any] | None = None,
) -> dict[str, Any]:
    """
    Build an index definition body: similarity settings merged over the given index_settings
    (e.g. number_of_shards), plus mappings with each field's similarity name.
    """
    settings = dict(index_settings or {})
    index_section = dict(settings.get("index", {}))
    index_section.update(build_similarity_settings(lookup)["index"])
    settings["index"] = index_section
    body: dict[str, Any] = {"settings": settings}
    if mapping is not None:
        body["mappings"] = {"properties": _field_properties(mapping)}
    return body
