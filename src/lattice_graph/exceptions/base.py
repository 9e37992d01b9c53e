"""Root of the lattice-graph exception tree."""

from typing import Dict, Optional


class LatticeGraphError(Exception):
    """Base exception for all lattice-graph errors.

    ``details`` holds context such as the file being read; it is rendered
    after the message as ``(key=value, ...)``.
    """

    def __init__(self, message: str, details: Optional[Dict[str, str]] = None):
        super().__init__(message)
        self.message = message
        self.details = dict(details) if details else {}

    def add_context(self, key: str, value: object) -> "LatticeGraphError":
        """Attach context unless ``key`` is already set; returns self for re-raising."""
        self.details.setdefault(key, str(value))
        return self

    def __str__(self) -> str:
        text = super().__str__()
        if not self.details:
            return text
        context = ", ".join(f"{key}={value}" for key, value in self.details.items())
        return f"{text} ({context})"
