"""/similarity: inspect prebuilt and configured similarities; validate settings and mappings."""

from fastapi import APIRouter, HTTPException, Request

from similarity_service.config.similarity.static import resolve_index_settings
from similarity_service.controllers.schema.similarity import (
    FieldBinding,
    ResolveRequest,
    ResolveResponse,
    SimilarityInfo,
)
from similarity_service.services.indexing.index_body import build_index_body
from similarity_service.services.mapping.mapper import MapperParsingError, parse_mapping
from similarity_service.services.similarity.errors import SimilarityConfigError, UnknownSimilarityError
from similarity_service.services.similarity.lookup import SimilarityLookupService
from similarity_service.services.similarity.prebuilt import DEFAULT_SIMILARITY, PREBUILT_SIMILARITIES

router = APIRouter(prefix="/similarity", tags=["similarity"])


def _bad_request(error_code: str, message: str) -> HTTPException:
    return HTTPException(status_code=400, detail={"error_code": error_code, "message": message})


@router.get("/prebuilt", response_model=list[SimilarityInfo])
async def list_prebuilt() -> list[SimilarityInfo]:
    """Prebuilt similarities with their default parameters."""
    return [
        SimilarityInfo.from_similarity(name, PREBUILT_SIMILARITIES.lookup(name), prebuilt=True)
        for name in PREBUILT_SIMILARITIES.names()
    ]


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_similarities(body: ResolveRequest) -> ResolveResponse:
    """
    Build every similarity declared by the inline settings (or the named profile) and, when a
    mapping is given, bind each field to its similarity. Any invalid similarity or unknown
    similarity name in the mapping fails the whole request with 400.
    """
    try:
        index_settings = resolve_index_settings(body.profile, body.settings)
    except ValueError as e:
        raise _bad_request("unknown_profile", str(e)) from e

    try:
        lookup = SimilarityLookupService.from_settings(index_settings)
    except SimilarityConfigError as e:
        raise HTTPException(status_code=400, detail=e.to_dict()) from e

    fields: list[FieldBinding] = []
    mapping = None
    if body.mapping is not None:
        try:
            mapping = parse_mapping(body.mapping, lookup)
        except MapperParsingError as e:
            raise _bad_request("mapper_parsing_error", e.message) from e
        fields = [
            FieldBinding(
                field=f.name,
                field_type=f.type,
                similarity=f.similarity_name or DEFAULT_SIMILARITY,
                type=f.similarity.type_name,
                parameters=f.similarity.effective_parameters(),
            )
            for f in mapping
        ]

    return ResolveResponse(
        similarities=[SimilarityInfo.from_similarity(name, sim) for name, sim in lookup.declared.items()],
        fields=fields,
        index_body=build_index_body(lookup, mapping),
    )


@router.get("/{name}", response_model=SimilarityInfo)
async def get_similarity(name: str, request: Request) -> SimilarityInfo:
    """Resolve a name against the similarities configured for this service."""
    lookup: SimilarityLookupService = request.app.state.similarity_lookup
    try:
        similarity = lookup.resolve(name)
    except UnknownSimilarityError as e:
        raise HTTPException(status_code=404, detail=e.to_dict()) from e
    return SimilarityInfo.from_similarity(name, similarity, prebuilt=name not in lookup.declared)
