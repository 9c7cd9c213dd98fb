"""Custom exceptions for the analyzer."""

from typing import Any


class SEOKitError(Exception):
    """Base exception for SEOKit."""

    def __init__(
        self,
        message: str,
        code: str = "error",
        details: dict[str, Any] | None = None,
    ):
        self.message = message
        self.code = code
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        return {"code": self.code, "message": self.message, "details": self.details}


class InvalidPageContentError(SEOKitError):
    """Page content does not match the expected shape."""

    def __init__(self, message: str, errors: list[dict] | None = None):
        super().__init__(
            message=message,
            code="invalid_page_content",
            details={"errors": errors or []},
        )


class CapabilityUnavailableError(SEOKitError):
    """An optional NLP oracle capability cannot be served."""

    def __init__(self, capability: str, reason: str | None = None):
        message = f"NLP oracle capability '{capability}' is unavailable"
        if reason:
            message = f"{message}: {reason}"
        super().__init__(
            message=message,
            code="capability_unavailable",
            details={"capability": capability},
        )
        self.capability = capability
