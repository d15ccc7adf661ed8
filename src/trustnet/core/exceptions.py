"""Custom exceptions for trustnet."""

from __future__ import annotations

from pathlib import Path
from typing import Any


class TrustNetError(Exception):
    """Base exception for all trustnet errors."""

    def __init__(self, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(message)
        self.message = message
        self.details = details or {}

    def __str__(self) -> str:
        if self.details:
            return f"{self.message} | Details: {self.details}"
        return self.message


class GraphError(TrustNetError):
    """Raised when graph operations fail."""

    def __init__(
        self,
        message: str,
        node_count: int | None = None,
        edge_count: int | None = None,
    ) -> None:
        counts = {"node_count": node_count, "edge_count": edge_count}
        super().__init__(
            message,
            details={key: value for key, value in counts.items() if value is not None},
        )
        self.node_count = node_count
        self.edge_count = edge_count


class CentralityError(GraphError):
    """Raised when eigenvector centrality is requested with invalid parameters."""

    def __init__(
        self,
        message: str,
        max_iterations: int | None = None,
        tolerance: float | None = None,
    ) -> None:
        super().__init__(message)
        self.details.update({"max_iterations": max_iterations, "tolerance": tolerance})
        self.max_iterations = max_iterations
        self.tolerance = tolerance


class IngestError(TrustNetError):
    """Raised when a relation dataset cannot be read."""

    def __init__(
        self,
        message: str,
        path: Path | str | None = None,
        line_number: int | None = None,
    ) -> None:
        super().__init__(
            message,
            details={
                "path": str(path) if path is not None else None,
                "line_number": line_number,
            },
        )
        self.path = path
        self.line_number = line_number


class ConfigurationError(TrustNetError):
    """Raised when settings are missing or inconsistent."""

    def __init__(self, message: str, setting: str | None = None) -> None:
        super().__init__(message, details={"setting": setting})
        self.setting = setting
