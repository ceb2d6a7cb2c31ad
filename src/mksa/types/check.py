"""Dimensional validation result types."""

from __future__ import annotations

from pydantic import BaseModel


class CheckResult(BaseModel):
    """Result of a single dimensional check."""

    name: str
    passed: bool
    expected: str = ""
    actual: str = ""
    message: str = ""
