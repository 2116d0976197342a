"""
Commit history extraction for the changelog agent.

Lists commits in a window with one line of metadata each, filters them by
subject, and attaches the full patch of every surviving commit.
"""

import re
from dataclasses import replace
from datetime import datetime
from typing import List, Optional

from git import Repo
from git.exc import GitCommandError, GitError
from loguru import logger

from changelog_agent.errors import CommitExtractionError
from changelog_agent.models.base import Commit
from changelog_agent.models.query import HistoryQuery

FIELD_DELIMITER = "|"
LOG_FORMAT = FIELD_DELIMITER.join(["%h", "%s", "%ad", "%an"])
GIT_ISO_DATE_FORMAT = "%Y-%m-%d %H:%M:%S %z"
GIT_ISO_DATE_PATTERN = re.compile(r"^\d{4}-\d{2}-\d{2} \d{2}:\d{2}:\d{2} [+-]\d{4}$")


def build_log_args(query: HistoryQuery, now: Optional[datetime] = None) -> List[str]:
    """Arguments for ``git log`` producing one delimited line per commit."""
    return query.selection_args(now) + [f"--pretty=format:{LOG_FORMAT}", "--date=iso"]


def parse_log_line(line: str) -> Commit:
    """Parse ``hash|subject|date|author`` into a Commit without a diff.

    The date is the last field shaped like git's ``iso`` date (never the
    final field, which belongs to the author). Fields before it form the
    subject and fields after it the author, so a ``|`` in either does not
    shift the others. Only an author name holding its own ``|<iso date>|``
    segment would be misread.
    Raises ValueError for lines that cannot be split or dated.
    """
    fields = line.split(FIELD_DELIMITER)
    commit_hash = fields[0].strip()
    if len(fields) < 4 or not commit_hash:
        raise ValueError(f"expected 4 '{FIELD_DELIMITER}'-separated fields in log line: {line!r}")

    date_index = None
    for index in range(len(fields) - 2, 1, -1):
        if GIT_ISO_DATE_PATTERN.match(fields[index].strip()):
            date_index = index
            break
    if date_index is None:
        raise ValueError(f"no git iso date in log line: {line!r}")

    message = FIELD_DELIMITER.join(fields[1:date_index])
    author = FIELD_DELIMITER.join(fields[date_index + 1 :]).strip()
    date = datetime.strptime(fields[date_index].strip(), GIT_ISO_DATE_FORMAT)

    return Commit(
        hash=commit_hash,
        message=message,
        date=date,
        author=author,
    )


def parse_log_output(output: str) -> List[Commit]:
    """Parse every non-empty line of log output, skipping malformed ones."""
    commits = []
    for line in output.splitlines():
        if not line.strip():
            continue
        try:
            commits.append(parse_log_line(line))
        except ValueError as e:
            logger.warning(f"Skipping malformed log line: {str(e)}")
    return commits


def filter_commits(commits: List[Commit], exclude_pattern: Optional[str]) -> List[Commit]:
    """Drop commits whose message contains ``exclude_pattern`` verbatim."""
    if not exclude_pattern:
        return list(commits)
    return [commit for commit in commits if exclude_pattern not in commit.message]


def attach_diffs(repo: Repo, commits: List[Commit]) -> List[Commit]:
    """Fetch the patch of each commit, one ``git show`` at a time, keeping order."""
    enriched = []
    for commit in commits:
        logger.debug(f"Fetching diff for commit: {commit.hash} - {commit.message}")
        enriched.append(replace(commit, diff=repo.git.show(commit.hash)))
    return enriched


def _open_repo(repo_path: str) -> Repo:
    try:
        return Repo(repo_path)
    except GitError as e:
        raise CommitExtractionError("repository", f"{repo_path} is not a readable git repository: {e!r}") from e


def get_git_commits(repo_path: str, query: HistoryQuery, now: Optional[datetime] = None) -> List[Commit]:
    """Return the commits selected by ``query``, most recent first, with diffs."""
    repo = _open_repo(repo_path)
    log_args = build_log_args(query, now)

    try:
        output = repo.git.log(*log_args)
        commits = filter_commits(parse_log_output(output), query.exclude_pattern)
        commits = attach_diffs(repo, commits)
    except GitCommandError as e:
        raise CommitExtractionError("git_command", str(e)) from e

    logger.info(f"Extracted {len(commits)} commits ({query.describe()})")
    return commits
