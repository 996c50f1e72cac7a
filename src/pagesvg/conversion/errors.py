class ConversionError(Exception):
    """Base class for failures that end a conversion.

    Each subclass carries a stable `code` (used in HTTP error details) and the
    process exit status the CLI reports for it.
    """

    code = "conversion_failed"
    exit_code = 1

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message

    def detail(self) -> dict[str, str]:
        return {"code": self.code, "message": self.message}


class DocumentOpenError(ConversionError):
    code = "cannot_open"
    exit_code = 3

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"cannot open document '{path}': {reason}")
        self.path = path
        self.reason = reason


class PageRangeError(ConversionError):
    code = "invalid_page"
    exit_code = 4

    def __init__(self, page: int, page_count: int) -> None:
        noun = "page" if page_count == 1 else "pages"
        super().__init__(f"invalid page index {page}: document has {page_count} {noun}")
        self.page = page
        self.page_count = page_count


class RenderError(ConversionError):
    code = "render_failed"
    exit_code = 5

    def __init__(self, page: int, reason: str) -> None:
        super().__init__(f"failed to render page {page}: {reason}")
        self.page = page
        self.reason = reason
