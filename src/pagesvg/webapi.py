import logging
import math
import os

from fastapi import FastAPI, File, HTTPException, Query, UploadFile
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import Response

from pagesvg import __version__
from pagesvg.conversion import (
    ConversionError,
    ConversionService,
    DocumentOpenError,
    PageRangeError,
)
from pagesvg.conversion.adapters import PyMuPdfRenderer

logger = logging.getLogger(__name__)

app = FastAPI(
    title="pagesvg",
    version=os.getenv("PAGESVG_VERSION", __version__),
    description="Convert one page of an uploaded PDF document to SVG.",
)

# Global configuration defaults
MAX_UPLOAD_MB = int(os.getenv("MAX_UPLOAD_MB", "50"))

SERVICE: ConversionService | None = None


@app.on_event("startup")
async def _startup() -> None:
    global SERVICE
    SERVICE = ConversionService(PyMuPdfRenderer())


@app.get("/health")
def health() -> dict[str, str]:
    """Basic health check endpoint."""
    return {"status": "ok"}


async def _read_upload(file: UploadFile) -> bytes:
    CHUNK = 1024 * 1024
    max_bytes = MAX_UPLOAD_MB * 1024 * 1024
    buf = bytearray()
    while True:
        chunk = await file.read(CHUNK)
        if not chunk:
            break
        buf.extend(chunk)
        if len(buf) > max_bytes:
            raise HTTPException(status_code=413, detail={"code": "payload_too_large", "message": f"upload exceeds {MAX_UPLOAD_MB} MB"})
    return bytes(buf)


@app.post("/convert")
async def convert(
    file: UploadFile = File(...),
    page: int = Query(1, description="1-based page number"),
    zoom: float = Query(1.0, gt=0, description="scale factor applied to the page"),
) -> Response:
    """Convert one page of the uploaded PDF and return it as image/svg+xml.

    Accepts multipart/form-data with a single required part named "file".
    """
    if not math.isfinite(zoom):
        raise HTTPException(status_code=422, detail={"code": "invalid_zoom", "message": f"zoom factor must be finite: {zoom}"})

    global SERVICE
    assert SERVICE is not None

    data = await _read_upload(file)
    name = file.filename or "upload"
    try:
        svg = await run_in_threadpool(SERVICE.convert_bytes, data, page, zoom=zoom, name=name)
    except (DocumentOpenError, PageRangeError) as e:
        raise HTTPException(status_code=422, detail=e.detail()) from e
    except ConversionError as e:
        logger.exception("render failed for %s page %d", name, page)
        raise HTTPException(status_code=500, detail=e.detail()) from e
    return Response(content=svg, media_type="image/svg+xml")


def run() -> None:
    """Run an ASGI server using uvicorn.

    Exposes the app at host:port (default 0.0.0.0:8080). Set PORT env var to override.
    """
    import uvicorn

    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8080"))
    reload = os.getenv("RELOAD", "false").lower() in {"1", "true", "yes", "on"}

    uvicorn.run("pagesvg.webapi:app", host=host, port=port, reload=reload)


if __name__ == "__main__":
    run()
