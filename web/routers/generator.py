"""Generator and results pages.

Server-rendered HTML routes using Jinja2 templates:
- GET / - Empty generation form
- POST / - Submit the form; redirects to the results page on success
- POST /suggestion - Put a prompt suggestion into the form
- GET /results/{id} - Stored result with sharable metadata
- GET /results/{id}/download - Generated image as an attachment
"""

from __future__ import annotations

from functools import partial
from pathlib import Path
from typing import Annotated

import httpx
from fastapi import APIRouter, Depends, Form, HTTPException, Query, Request
from fastapi import status as http_status
from fastapi.responses import HTMLResponse, RedirectResponse, Response
from fastapi.templating import Jinja2Templates
from sqlalchemy.orm import Session

from nopasswords import __version__
from nopasswords.analytics import get_analytics
from nopasswords.config import Settings
from nopasswords.generation.client import request_generation
from nopasswords.generation.form import (
    ENCRYPTION_OPTIONS,
    SUGGESTIONS,
    GenerationForm,
    NavigateFn,
)
from nopasswords.results.download import (
    DownloadError,
    download_qr_code,
    image_url_for,
)
from nopasswords.results.schema import PageMetadata
from nopasswords.results.service import (
    ResultNotFoundError,
    build_metadata,
    load_result,
    record_to_result,
)
from nopasswords.types import NO_RESULT, DownloadVariant, GeneratedResult, ResultView
from web.deps import get_db, get_http_client, get_settings_dep

router = APIRouter()

TEMPLATES_DIR = Path(__file__).resolve().parent.parent / "templates"
templates = Jinja2Templates(directory=str(TEMPLATES_DIR))

# Type aliases for dependencies
DbSession = Annotated[Session, Depends(get_db)]
AppSettings = Annotated[Settings, Depends(get_settings_dep)]
HttpClient = Annotated[httpx.Client, Depends(get_http_client)]


def _ignore_navigation(path: str) -> None:
    """Navigation callback for pages that only display a result."""


def _make_form(
    client: httpx.Client,
    settings: Settings,
    navigate: NavigateFn = _ignore_navigation,
    result: ResultView = NO_RESULT,
) -> GenerationForm:
    """Wire a form controller to the configured collaborators."""
    generate = partial(
        request_generation,
        client,
        settings.generate_url,
        timeout=settings.request_timeout,
    )
    analytics = get_analytics(client, settings.analytics_url)
    return GenerationForm(generate, analytics, navigate, result)


def _render(
    request: Request,
    form: GenerationForm,
    metadata: PageMetadata | None = None,
    status_code: int = http_status.HTTP_200_OK,
) -> HTMLResponse:
    return templates.TemplateResponse(
        request=request,
        name="generator.html",
        context={
            "version": __version__,
            "form": form,
            "metadata": metadata,
            "suggestions": SUGGESTIONS,
            "encryption_options": ENCRYPTION_OPTIONS,
        },
        status_code=status_code,
    )


@router.get("/", response_class=HTMLResponse, name="generator_home")
def home(
    request: Request,
    client: HttpClient,
    settings: AppSettings,
) -> HTMLResponse:
    """Render the empty generation form."""
    return _render(request, _make_form(client, settings))


@router.post("/", name="generator_submit", response_model=None)
def submit(
    request: Request,
    client: HttpClient,
    settings: AppSettings,
    wifi_name: str = Form(""),
    wifi_password: str = Form(""),
    prompt: str = Form(""),
    encryption: str = Form("WPA"),
) -> HTMLResponse | RedirectResponse:
    """Handle a generation form submission.

    Invalid input re-renders the form with field messages (400). A failed
    generation re-renders it with an error banner (502). Success redirects
    to the canonical results page.
    """
    destinations: list[str] = []
    form = _make_form(client, settings, navigate=destinations.append)

    submitted = form.submit(
        {
            "wifi_name": wifi_name,
            "wifi_password": wifi_password,
            "prompt": prompt,
            "encryption": encryption,
        }
    )
    if submitted:
        return RedirectResponse(
            url=destinations[-1],
            status_code=http_status.HTTP_303_SEE_OTHER,
        )

    if form.field_errors:
        return _render(
            request, form, status_code=http_status.HTTP_400_BAD_REQUEST
        )
    return _render(request, form, status_code=http_status.HTTP_502_BAD_GATEWAY)


@router.post("/suggestion", response_class=HTMLResponse, name="generator_suggestion")
def apply_suggestion(
    request: Request,
    client: HttpClient,
    settings: AppSettings,
    suggestion: str = Form(""),
    wifi_name: str = Form(""),
    wifi_password: str = Form(""),
    encryption: str = Form("WPA"),
) -> HTMLResponse:
    """Replace the prompt with the picked suggestion without submitting."""
    form = _make_form(client, settings)
    form.values.update(
        wifi_name=wifi_name, wifi_password=wifi_password, encryption=encryption
    )
    if suggestion:
        form.select_suggestion(suggestion)
    return _render(request, form)


@router.get("/results/{result_id}", response_class=HTMLResponse, name="results_page")
def results_page(
    request: Request,
    result_id: str,
    db: DbSession,
    client: HttpClient,
    settings: AppSettings,
) -> HTMLResponse:
    """Render a stored result with its sharable metadata."""
    try:
        record = load_result(db, result_id)
    except ResultNotFoundError:
        raise HTTPException(
            status_code=http_status.HTTP_404_NOT_FOUND,
            detail=f"Result not found: {result_id}",
        ) from None

    metadata = build_metadata(record, settings)
    form = _make_form(client, settings, result=record_to_result(result_id, record))
    return _render(request, form, metadata=metadata)


@router.get("/results/{result_id}/download", name="results_download")
def results_download(
    result_id: str,
    db: DbSession,
    client: HttpClient,
    settings: AppSettings,
    variant: DownloadVariant = Query(
        DownloadVariant.PASSWORD, description="Which image to download"
    ),
) -> Response:
    """Serve one of the generated images as a file download."""
    try:
        record = load_result(db, result_id)
    except ResultNotFoundError:
        raise HTTPException(
            status_code=http_status.HTTP_404_NOT_FOUND,
            detail=f"Result not found: {result_id}",
        ) from None

    result = record_to_result(result_id, record)
    url = None
    if isinstance(result, GeneratedResult):
        url = image_url_for(result, variant)
    if url is None:
        raise HTTPException(
            status_code=http_status.HTTP_404_NOT_FOUND,
            detail=f"No {variant.value} image for result: {result_id}",
        )

    try:
        image = download_qr_code(client, url, timeout=settings.download_timeout)
    except DownloadError as e:
        raise HTTPException(
            status_code=http_status.HTTP_502_BAD_GATEWAY,
            detail=str(e),
        ) from None

    return Response(
        content=image.content,
        media_type=image.media_type,
        headers={"Content-Disposition": f'attachment; filename="{image.filename}"'},
    )
