import pytest

from similarity_service.services.mapping.mapper import MapperParsingError, PerFieldSimilarity, parse_mapping
from similarity_service.services.similarity.strategies.bm25 import BM25Similarity
from similarity_service.services.similarity.strategies.default import DefaultSimilarity


def test_field_binds_declared_similarity(lookup_for, declare, field_mapping) -> None:
    lookup = lookup_for(declare("my_similarity", type="BM25", k1=2.0))
    mapping = parse_mapping(field_mapping("my_similarity"), lookup)
    field = mapping.field("field1")
    assert field is not None
    assert field.type == "string"
    assert field.similarity_name == "my_similarity"
    assert field.similarity is lookup.resolve("my_similarity")
    assert mapping.type_name == "type"


def test_field_binds_prebuilt_similarity(lookup_for, field_mapping) -> None:
    lookup = lookup_for({})
    field = parse_mapping(field_mapping("BM25"), lookup).field("field1")
    assert field.similarity is lookup.resolve("BM25")


def test_field_without_similarity_gets_default(lookup_for, field_mapping) -> None:
    lookup = lookup_for({})
    field = parse_mapping(field_mapping(), lookup).field("field1")
    assert field.similarity_name is None
    assert field.similarity is lookup.default()
    assert isinstance(field.similarity, DefaultSimilarity)


def test_unknown_similarity_fails_mapping(lookup_for, field_mapping) -> None:
    with pytest.raises(MapperParsingError) as exc_info:
        parse_mapping(field_mapping("unknown"), lookup_for({}))
    assert exc_info.value.field == "field1"
    assert "Unknown similarity [unknown]" in exc_info.value.message


def test_object_fields_are_walked_with_dotted_names(lookup_for, declare) -> None:
    lookup = lookup_for(declare("short_text", type="BM25", b=0.3))
    mapping = parse_mapping(
        {
            "properties": {
                "title": {"type": "text", "similarity": "short_text"},
                "author": {
                    "properties": {
                        "name": {"type": "text", "similarity": "short_text"},
                        "bio": {"type": "text"},
                    }
                },
            }
        },
        lookup,
    )
    assert [f.name for f in mapping] == ["title", "author.name", "author.bio"]
    assert len(mapping) == 3
    assert "author.name" in mapping
    assert "author" not in mapping
    assert mapping.type_name is None
    assert mapping.field("author.name").similarity == BM25Similarity(b=0.3)


@pytest.mark.parametrize(
    "mapping",
    [
        {},
        {"a": {"properties": {}}, "b": {"properties": {}}},
        {"properties": {"f": "text"}},
        {"properties": {"f": {"similarity": "BM25"}}},
        {"properties": {"f": {"type": "text", "similarity": 3}}},
        {"properties": {"obj": {"properties": ["x"]}}},
        {"properties": []},
    ],
)
def test_malformed_mappings(lookup_for, mapping) -> None:
    with pytest.raises(MapperParsingError):
        parse_mapping(mapping, lookup_for({}))


def test_per_field_similarity(lookup_for, declare) -> None:
    lookup = lookup_for(declare("short_text", type="BM25", b=0.3))
    mapping = parse_mapping({"properties": {"title": {"type": "text", "similarity": "short_text"}}}, lookup)
    per_field = PerFieldSimilarity(mapping, lookup.default())
    assert per_field.get("title") == BM25Similarity(b=0.3)
    assert per_field.get("body") is lookup.default()
