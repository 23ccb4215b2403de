"""Resolve endpoint."""

from fastapi import APIRouter, HTTPException, Request, status

from funcystr.api.models import ResolveRequest, ResolveResponse
from funcystr.exceptions import NestingDepthError

router = APIRouter()


@router.post("/resolve", response_model=ResolveResponse)
async def resolve_template(body: ResolveRequest, request: Request):
    """Resolve all function templates in the given text."""
    resolver = request.app.state.resolver
    try:
        result = await resolver.resolve(body.text, body.params)
    except NestingDepthError as e:
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail=str(e),
        ) from e
    return ResolveResponse(result=result)
