"""Custom exceptions for delta_render."""

from typing import Optional


class DeltaRenderError(Exception):
    """Base exception for delta_render errors."""

    def __init__(self, message: str, details: Optional[str] = None):
        super().__init__(message)
        self.message = message
        self.details = details

    def __str__(self) -> str:
        if self.details:
            return f"{self.message}: {self.details}"
        return self.message


class DeltaShapeError(DeltaRenderError, ValueError):
    """Exception raised when a Delta does not have the expected shape."""

    pass


class ConfigurationError(DeltaRenderError):
    """Exception raised for invalid parser or renderer configuration."""

    pass


class RenderingError(DeltaRenderError):
    """Exception raised during document rendering."""

    pass
