"""Exception types raised across the changelog agent."""


class ChangelogError(Exception):
    """Base class for all changelog agent errors."""


class ConfigurationError(ChangelogError):
    """Raised when the run configuration is missing or contradictory."""


class CommitExtractionError(ChangelogError):
    """Raised when git history cannot be read.

    The ``kind`` tags the failure ("repository" or "git_command") so the tool
    layer can report it without parsing the message.
    """

    def __init__(self, kind: str, detail: str):
        super().__init__(detail)
        self.kind = kind
        self.detail = detail


class ToolLoopLimitError(ChangelogError):
    """Raised when the model keeps requesting tools past the configured cap."""

    def __init__(self, max_tool_rounds: int):
        super().__init__(f"Model requested tools for more than {max_tool_rounds} rounds without answering")
        self.max_tool_rounds = max_tool_rounds
