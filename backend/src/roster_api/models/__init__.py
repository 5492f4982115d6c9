"""Data models package."""
