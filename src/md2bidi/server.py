"""FastAPI web service for rendering chat messages with bidi markers.

Endpoints::

    GET  /              Usage summary.
    GET  /health        Health check.
    GET  /styles        List available wrapper presets.
    POST /render        Send a raw message, receive ``{html, direction}``.
    POST /render/file   Upload a .md file and receive an HTML document back.

Run::

    uvicorn md2bidi.server:app --host 0.0.0.0 --port 8000
"""

from __future__ import annotations

from fastapi import FastAPI, File, Form, HTTPException, UploadFile
from fastapi.responses import HTMLResponse

from md2bidi import __version__
from md2bidi.converter import Converter
from md2bidi.style_manager import StyleManager

app = FastAPI(
    title="md2bidi",
    description="Markdown to bidi-aware HTML rendering service",
    version=__version__,
)

_INDEX_HTML = """<!DOCTYPE html>
<html>
<head><meta charset="utf-8"><title>md2bidi</title></head>
<body>
<h1>md2bidi</h1>
<p>POST a <code>message</code> form field to <code>/render</code>.</p>
</body>
</html>
"""


def _make_converter(style: str, allow_raw_html: bool, hard_wrap: bool = False) -> Converter:
    try:
        return Converter(style_preset=style, allow_raw_html=allow_raw_html, hard_wrap=hard_wrap)
    except ValueError as exc:
        raise HTTPException(status_code=400, detail=str(exc)) from exc


@app.get("/", response_class=HTMLResponse)
async def index() -> HTMLResponse:
    """Serve a short usage page."""
    return HTMLResponse(content=_INDEX_HTML)


@app.get("/health")
async def health() -> dict[str, str]:
    """Health check endpoint."""
    return {"status": "ok", "version": __version__}


@app.get("/styles")
async def list_styles() -> dict[str, list[str]]:
    """List available wrapper presets."""
    return {"presets": StyleManager.PRESETS}


@app.post("/render")
async def render_message(
    message: str = Form(""),
    style: str = Form("inline-block"),
    allow_raw_html: bool = Form(False),
    hard_wrap: bool = Form(False),
) -> dict[str, str]:
    """Render one chat message.

    - **message**: raw Markdown message text
    - **style**: wrapper preset name
    - **allow_raw_html**: pass raw HTML through instead of escaping it
    - **hard_wrap**: render single newlines as line breaks
    """
    converter = _make_converter(style, allow_raw_html, hard_wrap)
    result = converter.render(message)
    return {"html": result.html, "direction": result.direction.value}


@app.post("/render/file", response_class=HTMLResponse)
async def render_file(
    file: UploadFile = File(...),
    style: str = Form("inline-block"),
    encoding: str = Form("utf-8"),
    allow_raw_html: bool = Form(False),
) -> HTMLResponse:
    """Upload a Markdown file and receive a standalone HTML document.

    - **file**: Markdown file (.md)
    - **style**: wrapper preset name
    - **encoding**: source file encoding
    """
    raw = await file.read()
    try:
        md_text = raw.decode(encoding)
    except (LookupError, UnicodeDecodeError) as exc:
        raise HTTPException(status_code=400, detail=f"cannot decode upload: {exc}") from exc

    converter = _make_converter(style, allow_raw_html)
    result = converter.render(md_text)
    title = (file.filename or "message.md").rsplit(".", 1)[0]
    return HTMLResponse(
        content=result.as_document(title=title),
        headers={"X-Content-Direction": result.direction.value},
    )
