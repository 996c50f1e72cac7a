"""
Domain layer for page conversion.
Provides the renderer gateway, the error taxonomy and a service that
orchestrates a single page-to-SVG conversion, so front-ends (CLI or HTTP)
can use the same core logic.
"""

from .errors import ConversionError, DocumentOpenError, PageRangeError, RenderError
from .interfaces import DocumentHandle, PageRequest, RendererGateway
from .service import ConversionService
