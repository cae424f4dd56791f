"""Response rendering: compact JSON, pretty JSON or flat XML."""
from __future__ import annotations
import json
import xml.etree.ElementTree as ET
from typing import Any

from starlette.responses import JSONResponse, Response

XML_DECLARATION = '<?xml version="1.0" encoding="UTF-8"?>'


class PrettyJSONResponse(JSONResponse):
    def render(self, content: Any) -> bytes:
        return json.dumps(content, ensure_ascii=False, indent=2).encode("utf-8")


def _xml_text(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)


def payload_to_xml(payload: dict) -> str:
    """Render a flat payload as ``<response>`` with one child per key."""
    root = ET.Element("response")
    for key, value in payload.items():
        ET.SubElement(root, key).text = _xml_text(value)
    ET.indent(root, space="  ")
    return f"{XML_DECLARATION}\n{ET.tostring(root, encoding='unicode')}"


def render_payload(payload: dict, fmt: str | None = None, pretty: bool = False,
                   status_code: int = 200, allow_xml: bool = True) -> Response:
    """Pick the response type from ``fmt`` (json, pretty or xml)."""
    fmt = (fmt or "json").strip().lower()
    if fmt == "xml" and allow_xml:
        return Response(
            content=payload_to_xml(payload),
            status_code=status_code,
            media_type="application/xml",
        )
    if pretty or fmt == "pretty":
        return PrettyJSONResponse(content=payload, status_code=status_code)
    return JSONResponse(content=payload, status_code=status_code)
