"""
Export results and file naming.
"""

import re
from dataclasses import dataclass
from typing import Optional


_WHITESPACE = re.compile(r"\s+")


class ExportError(RuntimeError):
    """Raised when an image cannot be produced."""


@dataclass
class ExportResult:
    """
    Outcome of an export action.

    Attributes:
        ok: Whether an image was produced
        filename: Suggested download filename
        content: PNG bytes (None on failure)
        error: Failure reason (None on success)
    """
    ok: bool
    filename: Optional[str] = None
    content: Optional[bytes] = None
    error: Optional[str] = None

    @classmethod
    def success(cls, filename: str, content: bytes) -> "ExportResult":
        return cls(ok=True, filename=filename, content=content)

    @classmethod
    def failure(cls, filename: Optional[str], error: str) -> "ExportResult":
        return cls(ok=False, filename=filename, error=error)

    @property
    def status(self) -> str:
        """Human-readable status line."""
        if self.ok:
            return f"Saved {self.filename} ({len(self.content)} bytes)"
        return f"Export failed: {self.error}"


def slugify_title(title: Optional[str]) -> str:
    """Replace each run of whitespace in a chart title with one underscore."""
    return _WHITESPACE.sub("_", title or "")


def chart_filename(title: Optional[str]) -> str:
    return f"{slugify_title(title)}_chart.png"


def legend_filename(title: Optional[str]) -> str:
    return f"{slugify_title(title)}_legend.png"
