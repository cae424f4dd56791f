"""Terbilang conversion routes."""
from __future__ import annotations
from fastapi import APIRouter, Query, Request
from fastapi.responses import PlainTextResponse
import structlog

from ...config import Settings
from ...conversion.normalizer import normalize
from ...conversion.words import make_terbilang
from ...errors import NumberParseError
from ...pipeline import convert, error_payload
from ..serialization import render_payload

logger = structlog.get_logger(__name__)

router = APIRouter()


async def _read_body(request: Request) -> dict:
    """JSON body as a dict; anything unparseable counts as no body."""
    try:
        data = await request.json()
    except ValueError:
        return {}
    return data if isinstance(data, dict) else {}


def _first_present(*values) -> str | None:
    for value in values:
        if value is not None:
            return str(value)
    return None


async def _handle(
    request: Request,
    angka: str | None,
    q: str | None,
    case: str | None,
    currency: str | None,
    fmt: str | None,
    pretty: str | None,
):
    settings: Settings = request.app.state.settings

    raw = _first_present(angka, q)
    body: dict = {}
    if request.method == "POST":
        body = await _read_body(request)
        if not raw:
            raw = _first_present(body.get("angka"), body.get("q"))

    case = _first_present(case, body.get("case"), settings.default_case.value)
    currency = _first_present(currency, body.get("currency"))
    fmt = _first_present(fmt, body.get("format"), "json")
    render = dict(fmt=fmt, pretty=pretty is not None, allow_xml=settings.enable_xml)

    try:
        payload = convert(raw or "", case=case, currency=currency)
    except NumberParseError as e:
        return render_payload(error_payload(e), status_code=400, **render)
    return render_payload(payload, **render)


@router.get("")
async def terbilang_get(
    request: Request,
    angka: str | None = None,
    q: str | None = None,
    case: str | None = None,
    currency: str | None = None,
    fmt: str | None = Query(None, alias="format"),
    pretty: str | None = None,
):
    """Spell out ``?angka=`` (or ``?q=``) in Indonesian words."""
    return await _handle(request, angka, q, case, currency, fmt, pretty)


@router.post("")
async def terbilang_post(
    request: Request,
    angka: str | None = None,
    q: str | None = None,
    case: str | None = None,
    currency: str | None = None,
    fmt: str | None = Query(None, alias="format"),
    pretty: str | None = None,
):
    """Same as GET; input may also come from a JSON body ``{"angka": "1.000,25"}``."""
    return await _handle(request, angka, q, case, currency, fmt, pretty)


@router.options("")
async def terbilang_options():
    return {"ok": True}


@router.get("/plain", response_class=PlainTextResponse)
async def terbilang_plain(angka: str | None = None):
    """Legacy endpoint: bare words as text/plain."""
    try:
        words = make_terbilang(normalize(angka)).words
    except NumberParseError as e:
        logger.info("terbilang_plain_rejected", error=str(e.code))
        return PlainTextResponse("Input tidak valid", status_code=400)
    return PlainTextResponse(words)
