import pymupdf
import pytest

from pagesvg.conversion.interfaces import DocumentHandle, RendererGateway
from pagesvg.conversion.errors import DocumentOpenError


def _write_pdf(path, pages: int) -> None:
    doc = pymupdf.open()
    for i in range(pages):
        page = doc.new_page(width=200, height=100)
        page.insert_text((20, 50), f"page {i + 1}", fontsize=12)
    doc.save(str(path))
    doc.close()


@pytest.fixture
def sample_pdf(tmp_path):
    """Five-page PDF; each page is 200x100pt and labelled with its number."""
    path = tmp_path / "sample.pdf"
    _write_pdf(path, 5)
    return path


@pytest.fixture
def sample_pdf_bytes(sample_pdf):
    return sample_pdf.read_bytes()


class FakeDocument(DocumentHandle):
    def __init__(self, pages: int, fail_render: Exception | None = None) -> None:
        self.pages = pages
        self.fail_render = fail_render
        self.closed = False
        self.rendered: list[tuple[int, float]] = []

    @property
    def page_count(self) -> int:
        return self.pages

    def render_svg(self, index: int, *, zoom: float = 1.0) -> str:
        if self.fail_render is not None:
            raise self.fail_render
        self.rendered.append((index, zoom))
        return f'<svg xmlns="http://www.w3.org/2000/svg" data-index="{index}"/>'

    def close(self) -> None:
        self.closed = True


class FakeRenderer(RendererGateway):
    def __init__(self, doc: FakeDocument | None) -> None:
        self.doc = doc
        self.opened: list[str] = []

    def open(self, path: str) -> FakeDocument:
        self.opened.append(path)
        if self.doc is None:
            raise DocumentOpenError(path, "no such file")
        return self.doc

    def open_bytes(self, data: bytes, name: str = "upload") -> FakeDocument:
        return self.open(name)


@pytest.fixture
def fake_document():
    return FakeDocument(pages=3)


@pytest.fixture
def fake_renderer(fake_document):
    return FakeRenderer(fake_document)


@pytest.fixture
def missing_renderer():
    return FakeRenderer(None)
