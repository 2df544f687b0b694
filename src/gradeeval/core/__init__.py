from ._amounts import Points, Percentage
from ._records import Course, Assignment, AssignmentGroup, Submission
from ._results import (
    AssignmentResult,
    Skipped,
    SkipReason,
    Outcome,
    InvalidPointsPossible,
    InvalidTimestamp,
    InvalidScore,
    to_dataframe,
)
from ._evaluator import EvaluatorOptions, GradeEvaluator, evaluate

__all__ = [
    "Points",
    "Percentage",
    "Course",
    "Assignment",
    "AssignmentGroup",
    "Submission",
    "AssignmentResult",
    "Skipped",
    "SkipReason",
    "Outcome",
    "InvalidPointsPossible",
    "InvalidTimestamp",
    "InvalidScore",
    "to_dataframe",
    "EvaluatorOptions",
    "GradeEvaluator",
    "evaluate",
]
