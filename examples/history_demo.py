#!/usr/bin/env python3
"""
examples/history_demo.py

Shows what the get_commits tool hands to the model, without calling the
model: the selected commits of a repository with the size of their diffs.
"""

import argparse
import os

from changelog_agent.config import build_query
from changelog_agent.history import get_git_commits


def parse_args():
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(description="Preview the commits the changelog agent would see")
    parser.add_argument(
        "--repo-path",
        type=str,
        default=os.getcwd(),
        help="Path to Git repository (default: current directory)",
    )
    window = parser.add_mutually_exclusive_group()
    window.add_argument("--num-days", type=int, help="Number of days to look back (default: 7)")
    window.add_argument("--num-commits", type=int, help="Number of commits to look back")
    parser.add_argument("--exclude", type=str, help="Skip commits whose message contains this text")
    return parser.parse_args()


def format_commit(commit) -> str:
    """Format a single commit for display."""
    diff_lines = len(commit.diff.splitlines()) if commit.diff else 0
    return f"""
Commit: {commit.hash}
Author: {commit.author}
Date: {commit.date.strftime('%Y-%m-%d %H:%M:%S %z')}
Message: {commit.message}
Diff: {diff_lines} lines
{'=' * 80}"""


def main():
    args = parse_args()
    query = build_query(args.num_days, args.num_commits, args.exclude)

    print(f"Reading {query.describe()} from {args.repo_path}")
    commits = get_git_commits(args.repo_path, query)

    for commit in commits:
        print(format_commit(commit))
    print(f"\n{len(commits)} commits selected")


if __name__ == "__main__":
    main()
