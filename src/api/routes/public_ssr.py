"""
Public UI shell routes.

Serves the pre-built front-end bundle. Any GET outside the API prefix
returns the matching file from the build directory, or index.html with
server markup injected into the root element so client-side routing can
take over.
"""

from __future__ import annotations

import logging
from pathlib import Path

from fastapi import APIRouter, Depends, HTTPException, Request, status
from fastapi.responses import FileResponse, HTMLResponse, PlainTextResponse, Response

from src.api.deps import Settings, get_rules, get_settings, get_shell_renderer
from src.ports.renderer import ShellRendererPort
from src.rules.models import Rules

logger = logging.getLogger(__name__)

router = APIRouter()

ROOT_PLACEHOLDER = '<div id="root"></div>'


# --- Helpers ---


def resolve_build_file(build_dir: Path, url_path: str) -> Path | None:
    """
    Map a URL path to a file inside the build directory.

    Returns None for directories, missing files and anything that
    resolves outside build_dir.
    """
    relative = url_path.lstrip("/")
    if not relative:
        return None

    root = build_dir.resolve()
    candidate = (root / relative).resolve()
    if not candidate.is_relative_to(root):
        return None
    if not candidate.is_file():
        return None
    return candidate


def inject_markup(template: str, markup: str) -> str:
    """Place rendered markup inside the root element."""
    return template.replace(ROOT_PLACEHOLDER, f'<div id="root">{markup}</div>', 1)


def render_shell_page(build_dir: Path, location: str, renderer: ShellRendererPort) -> Response:
    index_path = build_dir / "index.html"
    try:
        template = index_path.read_text(encoding="utf-8")
    except OSError as e:
        logger.error("Error loading HTML from %s: %s", index_path, e)
        return PlainTextResponse(
            "Error loading HTML", status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
        )

    markup = renderer.render(location)
    return HTMLResponse(content=inject_markup(template, markup), status_code=status.HTTP_200_OK)


# --- Catch-all ---


@router.get(
    "/{full_path:path}",
    response_class=HTMLResponse,
    include_in_schema=False,
)
def serve_shell(
    full_path: str,
    request: Request,
    settings: Settings = Depends(get_settings),
    rules: Rules = Depends(get_rules),
    renderer: ShellRendererPort = Depends(get_shell_renderer),
) -> Response:
    """
    Serve a build file or the UI shell.

    Unknown API paths are 404s, never the shell.
    """
    path = "/" + full_path
    api_prefix = rules.http.api_prefix.rstrip("/")
    if path == api_prefix or path.startswith(api_prefix + "/"):
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Not Found")

    build_file = resolve_build_file(settings.build_dir, full_path)
    if build_file is not None:
        return FileResponse(build_file)

    location = request.url.path
    if request.url.query:
        location = f"{location}?{request.url.query}"
    return render_shell_page(settings.build_dir, location, renderer)
