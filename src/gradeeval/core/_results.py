"""Outcomes of evaluating a single assignment."""

import dataclasses
import enum
from typing import Any, Iterable, Optional, Union

import pandas as pd

from .._util import ensure_df


class SkipReason(enum.Enum):
    """Why an assignment was left out of the results."""

    NOT_YET_DUE = "not yet due"
    INVALID_POINTS_POSSIBLE = "points_possible must be a positive number"
    INVALID_TIMESTAMP = "timestamp could not be parsed"
    INVALID_SCORE = "score must be a finite number"

    @property
    def is_error(self) -> bool:
        """Errors are reported as diagnostics; other skips are silent."""
        return self is not SkipReason.NOT_YET_DUE


# aliases for the recoverable error kinds
InvalidPointsPossible = SkipReason.INVALID_POINTS_POSSIBLE
InvalidTimestamp = SkipReason.INVALID_TIMESTAMP
InvalidScore = SkipReason.INVALID_SCORE


@dataclasses.dataclass(frozen=True)
class AssignmentResult:
    """The graded result for one assignment.

    Attributes
    ----------
    assignment_id : int
    assignment_name : str
    points_possible : float
    score : float
        The score after any late penalty. Zero if nothing was submitted.
    submitted_at : Optional[str]
        The submission timestamp, exactly as given, or `None` if nothing was
        submitted.
    due_at : str
        The due date, exactly as given.

    """

    assignment_id: int
    assignment_name: str
    points_possible: Any
    score: Any
    submitted_at: Optional[str]
    due_at: str

    def to_dict(self) -> dict:
        return dataclasses.asdict(self)


@dataclasses.dataclass(frozen=True)
class Skipped:
    """Marks an assignment that was left out of the results.

    Attributes
    ----------
    assignment_id : int
    assignment_name : str
    reason : SkipReason
    detail : str
        A human-readable explanation, used in diagnostics.

    """

    assignment_id: int
    assignment_name: str
    reason: SkipReason
    detail: str = ""

    @property
    def message(self) -> str:
        detail = self.detail or self.reason.value
        return f"error processing assignment {self.assignment_name}: {detail}"


Outcome = Union[AssignmentResult, Skipped]


def to_dataframe(results: Iterable[AssignmentResult]) -> pd.DataFrame:
    """Tabulate results, one row per assignment.

    The table is indexed by assignment id, with a column for each field of
    :class:`AssignmentResult` and an extra ``percentage`` column containing
    the score as a fraction of the points possible.

    Parameters
    ----------
    results : Iterable[AssignmentResult]
        The results, as returned by :meth:`GradeEvaluator.evaluate`.

    Returns
    -------
    pd.DataFrame

    """
    columns = [f.name for f in dataclasses.fields(AssignmentResult)]
    table = pd.DataFrame([r.to_dict() for r in results], columns=columns)
    table = ensure_df(table.set_index("assignment_id"))
    table["percentage"] = table["score"].astype(float) / table[
        "points_possible"
    ].astype(float)
    return table
