"""Core exceptions and logging helpers."""
