import json
from typing import Any

from fastapi import Request

_NOT_JSON = object()


async def read_json_body(request: Request) -> Any:
    """
    Parse the request body as JSON.

    Returns a sentinel (never a dict) when the body is empty or malformed,
    so field validation reports it as a bad body.
    """
    raw = await request.body()
    if not raw:
        return _NOT_JSON
    try:
        return json.loads(raw)
    except (json.JSONDecodeError, UnicodeDecodeError):
        return _NOT_JSON
