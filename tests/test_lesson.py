import pandas as pd
import pytest

from colwise.core.models import SnippetResult, TimingReport
from colwise.core.config import settings
from colwise.lesson import SNIPPETS, Snippet, run_lesson


@pytest.fixture
def quick_timing(monkeypatch):
    monkeypatch.setattr(settings, "TIMING_N", 100)
    monkeypatch.setattr(settings, "TIMING_REPEATS", 1)


def test_lesson_runs_every_snippet_in_order(quick_timing):
    results = run_lesson()

    assert [result.title for result in results] == [s.title for s in SNIPPETS]
    assert all(result.ok for result in results), [r.error for r in results]


def test_lesson_results(quick_timing):
    results = {result.title: result.value for result in run_lesson()}

    means = results["For loop over columns"]
    pd.testing.assert_series_equal(means, results["map_dbl"])

    assert isinstance(results["Growing the output"], TimingReport)

    tally = results["Counting unique values"]
    assert tally["length"] == 9
    assert tally["distinct_nonzero"] == 3

    assert results["Counting missing values"].to_dict() == {"x": 1, "y": 3, "z": 0}

    rescaled = results["modify"]
    assert rescaled["x"].max() == 1.0
    assert rescaled["y"].tolist()[0] == "a"


def test_failing_snippet_is_recorded_and_lesson_continues():
    def boom():
        raise RuntimeError("no data")

    snippets = [
        Snippet(title="broken", evaluate=boom),
        Snippet(title="fine", evaluate=lambda: 42),
    ]
    results = run_lesson(snippets)

    assert results[0] == SnippetResult(title="broken", ok=False, error="no data")
    assert results[1].ok
    assert results[1].value == 42
