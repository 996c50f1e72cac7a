from dataclasses import dataclass
from typing import Protocol


class DocumentHandle(Protocol):
    @property
    def page_count(self) -> int:
        ...

    def render_svg(self, index: int, *, zoom: float = 1.0) -> str:
        """Render the page at the zero-based `index` as SVG markup."""

    def close(self) -> None:
        ...


class RendererGateway(Protocol):
    def open(self, path: str) -> DocumentHandle:
        """Open the document at `path`. The caller owns the returned handle
        and must close it.
        """

    def open_bytes(self, data: bytes, name: str = "upload") -> DocumentHandle:
        ...


@dataclass(frozen=True)
class PageRequest:
    path: str
    page: int = 1
    zoom: float = 1.0
