import logging
from pathlib import Path

import pymupdf

from .errors import DocumentOpenError, RenderError
from .interfaces import DocumentHandle, RendererGateway

logger = logging.getLogger(__name__)


class PyMuPdfDocument(DocumentHandle):
    def __init__(self, doc: pymupdf.Document, name: str) -> None:
        self._doc = doc
        self._name = name

    @property
    def page_count(self) -> int:
        return self._doc.page_count

    def render_svg(self, index: int, *, zoom: float = 1.0) -> str:
        # pymupdf pages are 0-indexed
        try:
            page = self._doc.load_page(index)
            return page.get_svg_image(matrix=pymupdf.Matrix(zoom, zoom))
        except Exception as e:
            raise RenderError(index + 1, str(e) or type(e).__name__) from e

    def close(self) -> None:
        if not self._doc.is_closed:
            self._doc.close()
            logger.debug("closed %s", self._name)


class PyMuPdfRenderer(RendererGateway):
    def open(self, path: str) -> PyMuPdfDocument:
        p = Path(path)
        if not p.is_file():
            raise DocumentOpenError(path, "not a regular file" if p.exists() else "no such file")
        try:
            doc = pymupdf.open(path)
        except Exception as e:
            raise DocumentOpenError(path, str(e) or type(e).__name__) from e
        return self._checked(doc, path)

    def open_bytes(self, data: bytes, name: str = "upload") -> PyMuPdfDocument:
        try:
            doc = pymupdf.open(stream=data, filetype="pdf")
        except Exception as e:
            raise DocumentOpenError(name, str(e) or type(e).__name__) from e
        return self._checked(doc, name)

    @staticmethod
    def _checked(doc: pymupdf.Document, name: str) -> PyMuPdfDocument:
        """Reject documents that opened but cannot be rendered as a PDF page."""
        reason = None
        if not doc.is_pdf:
            reason = "not a PDF document"
        elif doc.needs_pass:
            reason = "document is encrypted"
        if reason is not None:
            doc.close()
            raise DocumentOpenError(name, reason)
        logger.debug("opened %s (%d pages)", name, doc.page_count)
        return PyMuPdfDocument(doc, name)
