"""Result models returned by the iteration helpers.

These are small, validated records. They exist so that results such as the
unique-value tally or the loop timing comparison carry named fields instead of
bare tuples, and so that they print readably in the lesson walkthrough.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, Field, computed_field, model_validator

from .types import Count, Seconds

__all__ = ["UniqueCount", "TimingReport", "SnippetResult"]


class UniqueCount(BaseModel):
    """Tally of a vector: how many elements, how many distinct values."""

    total: Count = Field(..., description="Number of elements, missing included.")
    distinct: Count = Field(..., description="Number of distinct values.")
    distinct_nonzero: Count = Field(
        ..., description="Number of distinct values other than zero."
    )

    @model_validator(mode="after")
    def _check_bounds(self) -> "UniqueCount":
        if self.distinct > self.total:
            raise ValueError("Distinct values cannot outnumber elements.")
        if self.distinct_nonzero > self.distinct:
            raise ValueError("Non-zero distinct values cannot exceed distinct values.")
        return self


class TimingReport(BaseModel):
    """Wall-clock comparison of a pre-allocated loop against a growing one.

    Attributes:
        n: Number of results each loop produced.
        repeats: How many times each loop was run; the best run is kept.
        preallocated_seconds: Best time of the pre-allocated loop.
        growing_seconds: Best time of the loop that grows its output.
    """

    n: Count = Field(..., description="Number of results per loop.")
    repeats: int = Field(1, ge=1, description="Runs per strategy.")
    preallocated_seconds: Seconds
    growing_seconds: Seconds

    @computed_field
    @property
    def slowdown(self) -> float:
        """How many times slower growing the output was."""
        return self.growing_seconds / max(self.preallocated_seconds, 1e-12)

    def __str__(self) -> str:
        return (
            f"n={self.n}: pre-allocated {self.preallocated_seconds:.6f}s, "
            f"growing {self.growing_seconds:.6f}s ({self.slowdown:.1f}x slower)"
        )


class SnippetResult(BaseModel):
    """Outcome of evaluating one lesson snippet."""

    title: str
    ok: bool = True
    value: Optional[Any] = Field(None, description="What the snippet evaluated to.")
    error: Optional[str] = Field(None, description="Error message if it raised.")

    model_config = ConfigDict(arbitrary_types_allowed=True)
