import logging

from .errors import PageRangeError
from .interfaces import DocumentHandle, PageRequest, RendererGateway

logger = logging.getLogger(__name__)


class ConversionService:
    """Core domain service converting one document page to SVG.

    This service is framework-agnostic. It owns the document handle for the
    duration of a call and releases it on every exit path, while using the
    renderer gateway for everything that touches the PDF itself.
    """

    def __init__(self, renderer: RendererGateway) -> None:
        self._renderer = renderer

    def convert(self, request: PageRequest) -> bytes:
        """Render `request.page` (1-based) of the document at `request.path`."""
        logger.info("converting %s page %d", request.path, request.page)
        doc = self._renderer.open(request.path)
        return self._render(doc, request.page, request.zoom)

    def convert_bytes(self, data: bytes, page: int = 1, *, zoom: float = 1.0, name: str = "upload") -> bytes:
        """Same as `convert`, over a document held in memory."""
        logger.info("converting %s (%d bytes) page %d", name, len(data), page)
        doc = self._renderer.open_bytes(data, name)
        return self._render(doc, page, zoom)

    def _render(self, doc: DocumentHandle, page: int, zoom: float) -> bytes:
        try:
            count = doc.page_count
            if not 1 <= page <= count:
                raise PageRangeError(page, count)
            svg = doc.render_svg(page - 1, zoom=zoom)
        finally:
            doc.close()
        out = svg.encode("utf-8")
        logger.debug("rendered page %d of %d: %d bytes", page, count, len(out))
        return out
