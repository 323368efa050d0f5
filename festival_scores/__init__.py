"""Scoring and leaderboard service for a multi-event festival."""
