"""
abdash.reporting.significance
=============================

Per-test significance report for the dashboard's significance view.

The reporter joins the workshop's test summary (one row per A/B test, with
vote counts) to the individual responses (one row per participant and test,
with a click-likelihood score per variant), runs every significance test for
each A/B test and returns polars tables ready for display.

Examples
--------
>>> import polars as pl
>>> from abdash.reporting.significance import SignificanceReporter
>>> summary = pl.DataFrame({
...     "Test Name": ["Headline"],
...     "Variant A Votes": [80],
...     "Variant B Votes": [20],
... })
>>> responses = pl.DataFrame({
...     "Test Name": ["Headline"] * 3,
...     "Variant A Click Likelihood": [5.0, 4.0, None],
...     "Variant B Click Likelihood": [2.0, 3.0, 2.0],
... })
>>> rep = SignificanceReporter(summary, responses)
>>> rep.per_test_table()["vote_significant_99"].to_list()
[True]
>>> rep.summary_counts()["significant_95_vote"]
1
"""

from __future__ import annotations
import logging
import math
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional, Tuple

import polars as pl

from abdash.api.significance import ComparisonSignificance, analyze_comparison
from abdash.core.config import SignificanceConfig
from abdash.core.errors import DatasetSchemaError
from abdash.core.names import TestName

logger = logging.getLogger(__name__)

# Test summary columns
TEST_NAME = "Test Name"
TEST_TYPE = "Test Type"
WINNER = "Winner"
VOTES_A = "Variant A Votes"
VOTES_B = "Variant B Votes"
TOTAL_VOTES = "Total Votes"
SHARE_A = "Variant A %"
SHARE_B = "Variant B %"

# Response columns
CLICK_A = "Variant A Click Likelihood"
CLICK_B = "Variant B Click Likelihood"

DISPLAY_COLUMNS = [
    "Chi-Square",
    "Vote P-Value",
    "Vote Significant (95%)",
    "Vote Significant (99%)",
    "T-Statistic",
    "Click P-Value",
    "Click Significant (95%)",
    "Click Significant (99%)",
    "Effect Size (Cohen's h)",
    "Effect Magnitude",
]

SUMMARY_REQUIRED = [TEST_NAME, VOTES_A, VOTES_B]
RESPONSES_REQUIRED = [TEST_NAME, CLICK_A, CLICK_B]

PER_TEST_SCHEMA: Dict[str, Any] = {
    "test_name": pl.Utf8,
    "votes_a": pl.Int64,
    "votes_b": pl.Int64,
    "chi_square": pl.Float64,
    "vote_p_value": pl.Float64,
    "vote_significant_95": pl.Boolean,
    "vote_significant_99": pl.Boolean,
    "vote_status": pl.Utf8,
    "n_scores_a": pl.Int64,
    "n_scores_b": pl.Int64,
    "t_statistic": pl.Float64,
    "click_p_value": pl.Float64,
    "click_degrees_of_freedom": pl.Int64,
    "mean_difference": pl.Float64,
    "click_significant_95": pl.Boolean,
    "click_significant_99": pl.Boolean,
    "click_status": pl.Utf8,
    "cohens_h": pl.Float64,
    "effect_magnitude": pl.Utf8,
    "ci_a_lower": pl.Float64,
    "ci_a_upper": pl.Float64,
    "ci_b_lower": pl.Float64,
    "ci_b_upper": pl.Float64,
    "recommendation": pl.Utf8,
}


def _require_columns(frame: pl.DataFrame, required: List[str], frame_name: str) -> None:
    missing = [c for c in required if c not in frame.columns]
    if missing:
        raise DatasetSchemaError(frame_name, missing)


def _yes_no(flag: bool) -> str:
    return "Yes" if flag else "No"


def _missing(value: Any) -> bool:
    return value is None or (isinstance(value, float) and math.isnan(value))


def _count(value: Any) -> int:
    # null and NaN vote counts read as no votes
    return 0 if _missing(value) else int(value)


def _share(percent: Any) -> Optional[float]:
    if _missing(percent):
        return None
    return float(percent) / 100


@dataclass(frozen=True)
class _TestRow:
    name: TestName
    summary: Dict[str, Any]
    votes_a: int
    votes_b: int
    n_scores_a: int
    n_scores_b: int
    result: ComparisonSignificance


@dataclass
class SignificanceReporter:
    """
    Significance view over a test summary and its responses.

    Attributes
    ----------
    test_summary : pl.DataFrame
        One row per A/B test. Requires ``Test Name``, ``Variant A Votes`` and
        ``Variant B Votes``; ``Total Votes``, ``Variant A %``/``Variant B %``
        (0-100), ``Test Type`` and ``Winner`` are used when present.
    responses : pl.DataFrame
        One row per response. Requires ``Test Name`` and both click-likelihood
        columns; null and NaN scores are ignored.
    config : SignificanceConfig
        Interval level and display precision
    """

    test_summary: pl.DataFrame
    responses: pl.DataFrame
    config: SignificanceConfig = field(default_factory=SignificanceConfig)

    def __post_init__(self) -> None:
        self.config.validate()
        _require_columns(self.test_summary, SUMMARY_REQUIRED, "test_summary")
        _require_columns(self.responses, RESPONSES_REQUIRED, "responses")

    def _scores(self, test_name: str, column: str) -> List[float]:
        return (
            self.responses.filter(pl.col(TEST_NAME) == test_name)
            .get_column(column)
            .cast(pl.Float64, strict=False)
            .drop_nulls()
            .drop_nans()
            .to_list()
        )

    def _evaluate(self) -> List[_TestRow]:
        rows: List[_TestRow] = []
        for row in self.test_summary.iter_rows(named=True):
            name = TestName(str(row[TEST_NAME]))
            votes_a, votes_b = _count(row.get(VOTES_A)), _count(row.get(VOTES_B))
            total = row.get(TOTAL_VOTES)
            scores_a = self._scores(name, CLICK_A)
            scores_b = self._scores(name, CLICK_B)
            result = analyze_comparison(
                votes_a=votes_a,
                votes_b=votes_b,
                scores_a=scores_a,
                scores_b=scores_b,
                share_a=_share(row.get(SHARE_A)),
                share_b=_share(row.get(SHARE_B)),
                total_votes=None if _missing(total) else _count(total),
                config=self.config,
            )
            logger.debug(
                "%s: vote p=%.4f click p=%.4f",
                name,
                result.vote_test.p_value,
                result.click_test.p_value,
            )
            rows.append(_TestRow(name, row, votes_a, votes_b, len(scores_a), len(scores_b), result))
        return rows

    def comparisons(self) -> List[Tuple[TestName, ComparisonSignificance]]:
        """Run every significance test for each row of the test summary."""
        return [(r.name, r.result) for r in self._evaluate()]

    def per_test_table(self) -> pl.DataFrame:
        """
        One row per test with full-precision numeric columns.

        Columns follow ``PER_TEST_SCHEMA``.
        """
        rows = []
        for r in self._evaluate():
            votes, clicks = r.result.vote_test, r.result.click_test
            rows.append(
                {
                    "test_name": r.name,
                    "votes_a": r.votes_a,
                    "votes_b": r.votes_b,
                    "chi_square": votes.statistic,
                    "vote_p_value": votes.p_value,
                    "vote_significant_95": votes.significant_95,
                    "vote_significant_99": votes.significant_99,
                    "vote_status": votes.status,
                    "n_scores_a": r.n_scores_a,
                    "n_scores_b": r.n_scores_b,
                    "t_statistic": clicks.statistic,
                    "click_p_value": clicks.p_value,
                    "click_degrees_of_freedom": clicks.degrees_of_freedom,
                    "mean_difference": clicks.mean_difference,
                    "click_significant_95": clicks.significant_95,
                    "click_significant_99": clicks.significant_99,
                    "click_status": clicks.status,
                    "cohens_h": r.result.effect.cohens_h,
                    "effect_magnitude": r.result.effect.magnitude,
                    "ci_a_lower": r.result.interval_a.lower,
                    "ci_a_upper": r.result.interval_a.upper,
                    "ci_b_lower": r.result.interval_b.lower,
                    "ci_b_upper": r.result.interval_b.upper,
                    "recommendation": r.result.recommendation,
                }
            )
        return pl.DataFrame(rows, schema=PER_TEST_SCHEMA)

    def summary_counts(self) -> Dict[str, int]:
        """
        Count tests significant at each level, for votes and for clicks.

        Returns keys ``total``, ``significant_95_vote``, ``significant_99_vote``,
        ``significant_95_click``, ``significant_99_click``,
        ``not_significant_vote`` and ``not_significant_click`` (at 95%).
        """
        table = self.per_test_table()
        sums = table.select(
            pl.col("vote_significant_95").sum().alias("significant_95_vote"),
            pl.col("vote_significant_99").sum().alias("significant_99_vote"),
            pl.col("click_significant_95").sum().alias("significant_95_click"),
            pl.col("click_significant_99").sum().alias("significant_99_click"),
        ).row(0, named=True)

        counts = {key: int(value or 0) for key, value in sums.items()}
        total = table.height
        counts = {
            "total": total,
            **counts,
            "not_significant_vote": total - counts["significant_95_vote"],
            "not_significant_click": total - counts["significant_95_click"],
        }
        logger.info(
            "significance summary: %d tests, %d significant votes, %d significant clicks (95%%)",
            total,
            counts["significant_95_vote"],
            counts["significant_95_click"],
        )
        return counts

    def display_table(self) -> pl.DataFrame:
        """
        Formatted table with the dashboard's column names.

        Numbers are rendered with ``config`` precision and flags as Yes/No.
        ``Test Type``, ``Winner`` and the vote percentages are carried over from
        the summary when present.
        """
        passthrough = [
            c for c in (TEST_TYPE, WINNER, SHARE_A, SHARE_B) if c in self.test_summary.columns
        ]
        columns = [TEST_NAME, *passthrough, *DISPLAY_COLUMNS]

        rows = []
        for r in self._evaluate():
            shown = r.result.to_display()
            row: Dict[str, Any] = {TEST_NAME: r.name}
            for column in passthrough:
                value = r.summary.get(column)
                row[column] = "" if value is None else str(value)
            row.update(
                {
                    "Chi-Square": shown["chi_square"],
                    "Vote P-Value": shown["vote_p_value"],
                    "Vote Significant (95%)": _yes_no(shown["vote_significant_95"]),
                    "Vote Significant (99%)": _yes_no(shown["vote_significant_99"]),
                    "T-Statistic": shown["t_statistic"],
                    "Click P-Value": shown["click_p_value"],
                    "Click Significant (95%)": _yes_no(shown["click_significant_95"]),
                    "Click Significant (99%)": _yes_no(shown["click_significant_99"]),
                    "Effect Size (Cohen's h)": shown["cohens_h"],
                    "Effect Magnitude": shown["effect_magnitude"],
                }
            )
            rows.append(row)

        return pl.DataFrame(rows, schema={c: pl.Utf8 for c in columns})
