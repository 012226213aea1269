from pydantic import BaseModel
from typing import Optional


class ProblemDetail(BaseModel):
    """RFC 7807 compliant error response."""

    type: str = "about:blank"
    title: str
    detail: Optional[str] = None
    status: int
    instance: Optional[str] = None
    code: str


class DomainException(Exception):
    """Base class for domain-specific exceptions."""

    def __init__(
        self,
        status_code: int,
        title: str,
        *,
        code: str,
        detail: str | None = None,
        type_: str = "about:blank",
    ) -> None:
        self.status_code = status_code
        self.title = title
        self.detail = detail
        self.type = type_
        self.code = code


class InvalidRoll(DomainException):
    def __init__(self, detail: str, index: int | None = None) -> None:
        if index is not None:
            detail = f"roll #{index + 1}: {detail}"
        super().__init__(
            status_code=422,
            title="Invalid roll",
            detail=detail,
            code="invalid_roll",
        )
