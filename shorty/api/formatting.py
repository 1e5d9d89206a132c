"""
Rendering of a freshly shortened link.

Formats (selected by the `format` query parameter, case-insensitive):
- text: the bare link
- json: {"url": link}
- xml:  <response><url>link</url></response>
- anything else: an HTML anchor
"""

import html
from enum import Enum

from fastapi.responses import HTMLResponse, JSONResponse, PlainTextResponse, Response


class OutputFormat(Enum):
    TEXT = "text"
    JSON = "json"
    XML = "xml"
    HTML = "html"

    @classmethod
    def parse(cls, value: str) -> "OutputFormat":
        try:
            return cls((value or "").strip().lower())
        except ValueError:
            return cls.HTML


def render_link(link: str, output_format: OutputFormat) -> Response:
    if output_format == OutputFormat.TEXT:
        return PlainTextResponse(link)

    if output_format == OutputFormat.JSON:
        return JSONResponse({"url": link})

    if output_format == OutputFormat.XML:
        body = "\n".join([
            '<?xml version="1.0"?>',
            '<response>',
            f'  <url>{html.escape(link)}</url>',
            '</response>',
        ])
        return Response(content=body, media_type="application/xml")

    escaped = html.escape(link)
    return HTMLResponse(f'<a href="{escaped}">{escaped}</a>')
