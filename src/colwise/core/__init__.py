"""Core types, result models and settings for column-wise iteration."""

from colwise.core.enums import OutputType
from colwise.core.models import SnippetResult, TimingReport, UniqueCount

__all__ = [
    "OutputType",
    "SnippetResult",
    "TimingReport",
    "UniqueCount",
]
