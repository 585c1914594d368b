"""Filesystem helpers."""

from pathlib import Path


def get_project_root() -> Path:
    """Return the repository root (the directory containing glledger/)."""
    return Path(__file__).resolve().parents[2]


__all__ = ["get_project_root"]
