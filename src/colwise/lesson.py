"""The iteration lesson as an ordered walkthrough.

Each :class:`Snippet` pairs a short piece of prose with a callable that
evaluates one example from the notes. :func:`run_lesson` evaluates them in
order, one at a time, logging each result the way an interactive session
would print it.
"""

import typing as tp

import pandas as pd
from pydantic import BaseModel, ConfigDict, Field

from .core.config import settings
from .core.models import SnippetResult
from .data import datasets
from .functional import loops, mapping, summaries
from .logger.logger import get_logger

__all__ = ["Snippet", "SNIPPETS", "run_lesson"]

log = get_logger(__name__)


class Snippet(BaseModel):
    """One evaluable block of the lesson."""

    title: str = Field(..., description="Section heading.")
    prose: str = Field("", description="Explanation shown before the code runs.")
    evaluate: tp.Callable[[], tp.Any] = Field(..., exclude=True)

    model_config = ConfigDict(arbitrary_types_allowed=True, frozen=True)

    def run(self) -> SnippetResult:
        """Evaluate the snippet, recording a failure instead of raising."""
        try:
            value = self.evaluate()
        except Exception as exc:
            log.error("Snippet '%s' failed: %s", self.title, exc)
            return SnippetResult(title=self.title, ok=False, error=str(exc))
        return SnippetResult(title=self.title, value=value)


def _unique_tally() -> dict:
    counts = datasets.mixed_counts()
    tally = summaries.count_unique(counts)
    return {
        "length": len(counts),
        "n_unique": summaries.n_unique(counts),
        **tally.model_dump(),
    }


def _weather_overview() -> pd.DataFrame:
    df = datasets.weather()
    return pd.DataFrame(
        {
            "type": summaries.column_types(df),
            "n_unique": summaries.unique_counts(df),
            "n_missing": summaries.missing_counts(df),
        }
    )


SNIPPETS: tp.List[Snippet] = [
    Snippet(
        title="For loop over columns",
        prose=(
            "Allocate the output first, loop over seq_along(df), and store one "
            "mean per column."
        ),
        evaluate=lambda: loops.column_means(datasets.example_frame()),
    ),
    Snippet(
        title="Growing the output",
        prose=(
            "Concatenating onto the result inside the loop copies it every "
            "time. Compare against the pre-allocated loop."
        ),
        evaluate=lambda: loops.compare_strategies(
            settings.TIMING_N, settings.TIMING_REPEATS
        ),
    ),
    Snippet(
        title="map_dbl",
        prose="The same column means in one call, with a double output.",
        evaluate=lambda: mapping.map_dbl(
            datasets.example_frame(), lambda col: col.mean()
        ),
    ),
    Snippet(
        title="Counting unique values",
        prose="How many elements, and how many of them are different?",
        evaluate=_unique_tally,
    ),
    Snippet(
        title="Practice: weather",
        prose="Type, distinct values and missing values of every weather column.",
        evaluate=_weather_overview,
    ),
    Snippet(
        title="Counting missing values",
        prose='Nulls and the markers "NA" and "" all count as missing.',
        evaluate=lambda: summaries.missing_counts(datasets.missing_frame()),
    ),
    Snippet(
        title="modify",
        prose="Transform every numeric column and keep the table's shape.",
        evaluate=lambda: mapping.map_if(
            datasets.missing_frame(),
            pd.api.types.is_numeric_dtype,
            summaries.rescale01,
        ),
    ),
]


def run_lesson(
    snippets: tp.Optional[tp.Sequence[Snippet]] = None,
) -> tp.List[SnippetResult]:
    """Evaluate the lesson snippets in order.

    Args:
        snippets: Snippets to run. Defaults to :data:`SNIPPETS`.

    Returns:
        One SnippetResult per snippet, failures included.
    """
    snippets = SNIPPETS if snippets is None else snippets

    results = []
    for i, snippet in enumerate(snippets, start=1):
        log.info("[%d/%d] %s", i, len(snippets), snippet.title)
        if snippet.prose:
            log.info("%s", snippet.prose)
        result = snippet.run()
        if result.ok:
            log.info("\n%s", result.value)
        results.append(result)

    failed = sum(not result.ok for result in results)
    log.info("Lesson finished: %d snippet(s), %d failed", len(results), failed)
    return results
