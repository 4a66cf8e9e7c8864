"""Request/response schemas for the /similarity routes."""

from typing import Any

from pydantic import BaseModel, Field

from similarity_service.services.similarity.base import Similarity


class SimilarityInfo(BaseModel):
    """A resolved similarity and the settings that rebuild it."""

    name: str = Field(..., description="Name the similarity resolves under")
    type: str = Field(..., description="default|BM25|DFR|IB|LMDirichlet|LMJelinekMercer")
    prebuilt: bool = Field(default=False, description="True for built-in, zero-configuration entries")
    parameters: dict[str, Any] = Field(default_factory=dict, description="Effective parameters, defaults included")
    settings: dict[str, Any] = Field(default_factory=dict, description="Flat settings section for this similarity")

    @classmethod
    def from_similarity(cls, name: str, similarity: Similarity, prebuilt: bool = False) -> "SimilarityInfo":
        return cls(
            name=name,
            type=similarity.type_name,
            prebuilt=prebuilt,
            parameters=similarity.effective_parameters(),
            settings=similarity.to_settings(),
        )


class FieldBinding(BaseModel):
    """Similarity bound to one mapped field."""

    field: str = Field(..., description="Full field name (object fields joined with '.')")
    field_type: str = Field(..., description="Mapped field type")
    similarity: str = Field(..., description="Similarity name; 'default' when the field sets none")
    type: str = Field(..., description="Similarity type")
    parameters: dict[str, Any] = Field(default_factory=dict)


class ResolveRequest(BaseModel):
    """POST /similarity/resolve request body."""

    profile: str | None = Field(
        default=None,
        description="Profile name from static.json; omitted or 'active' uses the active profile",
    )
    settings: dict[str, Any] | None = Field(
        default=None,
        description="Inline index settings (flat dotted keys or nested objects); wins over profile",
    )
    mapping: dict[str, Any] | None = Field(
        default=None,
        description="Optional mapping whose fields are bound to their similarities",
    )


class ResolveResponse(BaseModel):
    """POST /similarity/resolve response body."""

    similarities: list[SimilarityInfo] = Field(default_factory=list, description="Declared similarities")
    fields: list[FieldBinding] = Field(default_factory=list)
    index_body: dict[str, Any] = Field(default_factory=dict, description="Settings and mappings to create the index with")
