"""Selection policy for the commit history extractor."""

from datetime import datetime, timedelta, timezone
from typing import List, Optional

from pydantic import BaseModel, Field, field_validator, model_validator

DEFAULT_NUM_DAYS = 7


class HistoryQuery(BaseModel):
    """Which commits to fetch: the last N days or the last N commits, never both."""

    model_config = {"frozen": True}

    num_days: Optional[int] = Field(None, gt=0, description="Look back this many days")
    num_commits: Optional[int] = Field(None, gt=0, description="Look back this many commits")
    exclude_pattern: Optional[str] = Field(
        None, description="Drop commits whose subject contains this literal substring"
    )

    @field_validator("exclude_pattern")
    @classmethod
    def _empty_pattern_is_none(cls, value: Optional[str]) -> Optional[str]:
        return value or None

    @model_validator(mode="after")
    def _check_single_mode(self) -> "HistoryQuery":
        if self.num_days is not None and self.num_commits is not None:
            raise ValueError("Cannot specify both num_days and num_commits")
        return self

    @property
    def by_commit_count(self) -> bool:
        return self.num_commits is not None

    @property
    def effective_days(self) -> int:
        return self.num_days if self.num_days is not None else DEFAULT_NUM_DAYS

    def since(self, now: Optional[datetime] = None) -> datetime:
        """Start of the day-count window, in UTC."""
        now = now or datetime.now(timezone.utc)
        return now - timedelta(days=self.effective_days)

    def describe(self) -> str:
        if self.by_commit_count:
            window = f"last {self.num_commits} commits"
        else:
            window = f"last {self.effective_days} days"
        if self.exclude_pattern:
            window += f" excluding '{self.exclude_pattern}'"
        return window

    def selection_args(self, now: Optional[datetime] = None) -> List[str]:
        """git log arguments selecting the commit window."""
        if self.by_commit_count:
            return ["-n", str(self.num_commits)]
        return [f"--since={self.since(now).replace(microsecond=0).isoformat()}"]
