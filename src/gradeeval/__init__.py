"""A package for evaluating a learner's grades within an assignment group."""

from .core import (
    Points,
    Percentage,
    Course,
    Assignment,
    AssignmentGroup,
    Submission,
    AssignmentResult,
    Skipped,
    SkipReason,
    InvalidPointsPossible,
    InvalidTimestamp,
    InvalidScore,
    EvaluatorOptions,
    GradeEvaluator,
    evaluate,
    to_dataframe,
)
from .exceptions import (
    GradeEvaluationError,
    AssignmentGroupMismatch,
    MalformedRecordError,
)

from . import io
from . import policies

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
    "InvalidPointsPossible",
    "InvalidTimestamp",
    "InvalidScore",
    "EvaluatorOptions",
    "GradeEvaluator",
    "evaluate",
    "to_dataframe",
    "GradeEvaluationError",
    "AssignmentGroupMismatch",
    "MalformedRecordError",
    "io",
    "policies",
]
