"""Changelog Agent: summarize recent git history with a tool-calling LLM."""
