"""Analyzer page — type selection, form submit, result rendering."""

from fastapi import APIRouter, Depends, Form, Query, Request
from fastapi.responses import HTMLResponse
from loguru import logger
from pydantic import ValidationError

from config.settings import settings
from src.analyzer.client import AnalyzerClient
from src.analyzer.models import AnalysisType, parse_outcome_json
from src.analyzer.state import HELP_TEXT, PLACEHOLDERS, AnalyzerPage
from src.api.app import limiter
from src.api.dependencies import get_analyzer
from src.views.renderer import build_view
from src.views.templating import templates

router = APIRouter(tags=["analyzer"])

MAX_INPUT_LEN = 256


def _render_page(request: Request, page: AnalyzerPage) -> HTMLResponse:
    view = build_view(page.result) if page.result is not None else None
    return templates.TemplateResponse(
        request,
        "analyzer.html",
        {
            "page": page,
            "view": view,
            "types": list(AnalysisType),
            "placeholders": PLACEHOLDERS,
            "help_text": HELP_TEXT,
        },
    )


@router.get("/", response_class=HTMLResponse)
async def analyzer_page(
    request: Request,
    analysis_type: AnalysisType = Query(AnalysisType.WALLET, alias="type"),
    address: str = Query("", max_length=MAX_INPUT_LEN),
    token_id: str = Query("", max_length=MAX_INPUT_LEN),
) -> HTMLResponse:
    """Empty analyzer page; ``?type=`` switches analysis type, inputs carry over."""
    page = AnalyzerPage()
    page.change_address(address)
    page.change_token_id(token_id)
    page.select_type(analysis_type)
    return _render_page(request, page)


@router.post("/select-type", response_class=HTMLResponse)
async def select_type(
    request: Request,
    analysis_type: AnalysisType = Form(alias="type"),
    address: str = Form("", max_length=MAX_INPUT_LEN),
    token_id: str = Form("", max_length=MAX_INPUT_LEN),
    result: str = Form(""),
) -> HTMLResponse:
    """Type switch without scripts: inputs and the shown result are kept.

    The result round-trips through a hidden form field. A field that no
    longer parses is dropped rather than rejected.
    """
    page = AnalyzerPage()
    page.change_address(address)
    page.change_token_id(token_id)
    if result:
        try:
            page.result = parse_outcome_json(result)
        except ValidationError as e:
            logger.warning(f"[PAGE] Dropping unreadable carried result: {e.error_count()} errors")
    page.select_type(analysis_type)
    return _render_page(request, page)


@router.post("/", response_class=HTMLResponse)
@limiter.limit(settings.analyze_rate_limit)
async def submit_analysis(
    request: Request,
    analysis_type: AnalysisType = Form(AnalysisType.WALLET),
    address: str = Form("", max_length=MAX_INPUT_LEN),
    token_id: str = Form("", max_length=MAX_INPUT_LEN),
    client: AnalyzerClient = Depends(get_analyzer),
) -> HTMLResponse:
    """Run one analysis and render the page with its result or an alert."""
    page = AnalyzerPage(analysis_type=analysis_type)
    page.change_address(address)
    page.change_token_id(token_id)
    await page.submit(client)
    return _render_page(request, page)
