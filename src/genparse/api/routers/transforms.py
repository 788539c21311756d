"""
API routes for the extraction, parsing and editing transforms.

Endpoints
---------
- `POST /extract/backticks`          : outer fenced block of a completion.
- `POST /extract/backticks-multiple` : labeled fenced blocks, in order.
- `POST /extract/decorators`         : ``@need`` markers with context.
- `POST /parse/yaml`                 : YAML document in ``generated.text``.
- `POST /edit/gen-ui`                : GenUI wrapper rewrite of a TSX module.

All routes answer 200 with the transform's sentinel (``null`` / ``[]`` /
untouched text) when nothing could be extracted; only request-shape errors
produce 4xx responses.
"""

from __future__ import annotations

from fastapi import APIRouter

from genparse.api.schemas import (
    AnnotationsResponse,
    CodeRequest,
    ExtractionResponse,
    MultiBlockRequest,
    MultiBlockResponse,
    TextRequest,
    TsxRequest,
    YamlRequest,
    YamlResponse,
)
from genparse.core.contracts import GenUiEdit
from genparse.facade import edit, extract, parse

router = APIRouter()


@router.post(
    "/extract/backticks",
    response_model=ExtractionResponse,
    tags=["Extract"],
    summary="Extract the outer fenced block",
)
async def backticks(request: TextRequest) -> ExtractionResponse:
    """Return the trimmed body between the first and last fence lines."""
    return ExtractionResponse(result=await extract.backticks(request.text))


@router.post(
    "/extract/backticks-multiple",
    response_model=MultiBlockResponse,
    tags=["Extract"],
    summary="Extract labeled fenced blocks",
)
async def backticks_multiple(request: MultiBlockRequest) -> MultiBlockResponse:
    """Return label → body for every label found, searching in the given order."""
    found = await extract.backticks_multiple(request.text, request.delimiters)
    return MultiBlockResponse(result=found)


@router.post(
    "/extract/decorators",
    response_model=AnnotationsResponse,
    tags=["Extract"],
    summary="List @need markers",
)
async def decorators(request: CodeRequest) -> AnnotationsResponse:
    """Return every well-formed ``@need:<type>:<description>`` marker."""
    return AnnotationsResponse(result=await extract.decorators(request.code))


@router.post(
    "/parse/yaml",
    response_model=YamlResponse,
    tags=["Parse"],
    summary="Decode a YAML completion",
)
async def yaml(request: YamlRequest) -> YamlResponse:
    """Decode ``generated.text``; ``null`` when it is not a usable YAML document."""
    parsed = await parse.yaml(request.generated.model_dump(), request.query)
    return YamlResponse(result=parsed)


@router.post(
    "/edit/gen-ui",
    response_model=GenUiEdit,
    tags=["Edit"],
    summary="Rewrite section/view imports into GenUI wrappers",
)
async def gen_ui(request: TsxRequest) -> GenUiEdit:
    """Rewrite generated component references; see :mod:`genparse.editors.genui`."""
    return await edit.gen_ui(request.tsx)


__all__ = ["router"]
