"""
Resource library endpoint.

Endpoints:
- GET /api/resources - Resource categories and their item counts
"""

from typing import Any

from fastapi import APIRouter, Depends, Request

from src.api.deps import get_rules
from src.rules.models import Rules

router = APIRouter()


@router.get(
    "/resources",
    summary="List resource categories",
    description="Categories shown on the resources page, configured in rules.yaml.",
)
def list_resources(request: Request, rules: Rules = Depends(get_rules)) -> dict[str, Any]:
    content = {
        "success": True,
        "categories": [c.model_dump() for c in rules.resources.categories],
    }
    request.state.response_json = content
    return content
