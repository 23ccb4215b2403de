"""Function listing endpoint."""

from fastapi import APIRouter, Request

from funcystr.api.models import FunctionListResponse

router = APIRouter()


@router.get("/functions", response_model=FunctionListResponse)
def list_functions(request: Request):
    """List registered functions grouped by category."""
    return request.app.state.resolver.registry.to_api_format()
