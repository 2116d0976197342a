"""Base types used across the changelog agent."""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional


@dataclass(frozen=True)
class Commit:
    """Information about a single commit."""

    hash: str
    message: str
    date: datetime
    author: str
    diff: Optional[str] = None  # None until the patch has been fetched

    def to_dict(self) -> Dict[str, Any]:
        """Render the commit in the JSON shape handed to the model."""
        return {
            "hash": self.hash,
            "message": self.message,
            "date": self.date.isoformat(),
            "author": self.author,
            "diff": self.diff,
        }
