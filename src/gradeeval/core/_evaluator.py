"""Evaluates a learner's grades within a single assignment group."""

import dataclasses
import logging
from typing import Optional, Sequence, Union, Mapping

import pandas as pd

from .._util import to_timestamp, is_finite_number
from ..exceptions import AssignmentGroupMismatch
from ..policies.lates import LateInfo, LatePolicy, DEFAULT_LATE_POLICY, apply_penalty
from ._records import (
    Assignment,
    AssignmentGroup,
    Course,
    Submission,
    as_assignment_group,
    as_course,
    as_submissions,
)
from ._results import AssignmentResult, Outcome, Skipped, SkipReason

logger = logging.getLogger(__name__)

TimestampLike = Union[pd.Timestamp, str]


# EvaluatorOptions ---------------------------------------------------------------------


@dataclasses.dataclass
class EvaluatorOptions:
    """Configures the behavior of a :class:`GradeEvaluator`.

    Attributes
    ----------
    now : Optional[Union[pd.Timestamp, str]]
        The instant against which due dates are compared. Assignments due
        strictly after this instant are left out of the results. If `None`, the
        current UTC time is read at each evaluation. Default: `None`.
    late_policy : Callable[[LateInfo], Penalty]
        The policy applied to late submissions. Default: deduct 10% of the
        points earned.
    lateness_fudge : int
        Number of seconds past the due date within which a submission is not
        considered late. Default: 0.
    learner_id : Optional[int]
        If given, only submissions made by this learner are considered.
        Default: `None`, meaning the first submission for an assignment is
        used regardless of who made it.

    """

    now: Optional[TimestampLike] = None
    late_policy: LatePolicy = DEFAULT_LATE_POLICY
    lateness_fudge: int = 0
    learner_id: Optional[int] = None


# private helper functions =============================================================


def _index_submissions(
    submissions: Sequence[Submission], learner_id: Optional[int]
) -> dict:
    """Map assignment ids to the first matching submission for each."""
    index = {}
    for submission in submissions:
        if learner_id is not None and submission.learner_id != learner_id:
            continue
        index.setdefault(submission.assignment_id, submission)
    return index


def _skip(assignment: Assignment, reason: SkipReason, detail: str = "") -> Skipped:
    return Skipped(assignment.id, assignment.name, reason, detail)


# GradeEvaluator -----------------------------------------------------------------------


class GradeEvaluator:
    """Computes per-assignment results for a learner in an assignment group.

    Parameters
    ----------
    options : Optional[EvaluatorOptions]
        Configures the evaluator. If `None`, the defaults are used.

    Example
    -------
    >>> evaluator = GradeEvaluator(EvaluatorOptions(now="2024-01-01T00:00:00Z"))
    >>> results = evaluator.evaluate(course, assignment_group, submissions)

    """

    def __init__(self, options: Optional[EvaluatorOptions] = None):
        self.options = options if options is not None else EvaluatorOptions()

    def evaluate(
        self,
        course: Union[Course, Mapping],
        assignment_group: Union[AssignmentGroup, Mapping],
        submissions: Sequence[Union[Submission, Mapping]],
        *,
        now: Optional[TimestampLike] = None,
        learner_id: Optional[int] = None,
    ) -> list[AssignmentResult]:
        """Compute the results for each assignment in the group.

        Assignments with an invalid number of points possible, or with
        timestamps or scores that cannot be understood, are left out and a
        diagnostic is logged for each. Assignments which are not yet due are
        left out silently.

        Parameters
        ----------
        course : Union[Course, Mapping]
            The course. Mappings are converted with :meth:`Course.from_dict`.
        assignment_group : Union[AssignmentGroup, Mapping]
            The assignment group; must belong to `course`.
        submissions : Sequence[Union[Submission, Mapping]]
            The submissions. For each assignment, the first matching submission
            is used.
        now : Optional[Union[pd.Timestamp, str]]
            Overrides :attr:`EvaluatorOptions.now` for this call.
        learner_id : Optional[int]
            Overrides :attr:`EvaluatorOptions.learner_id` for this call.

        Returns
        -------
        list[AssignmentResult]
            One result per graded assignment, in the order of the group.

        Raises
        ------
        AssignmentGroupMismatch
            If the assignment group does not belong to the course.

        """
        outcomes = self.outcomes(
            course, assignment_group, submissions, now=now, learner_id=learner_id
        )
        return [o for o in outcomes if isinstance(o, AssignmentResult)]

    def outcomes(
        self,
        course: Union[Course, Mapping],
        assignment_group: Union[AssignmentGroup, Mapping],
        submissions: Sequence[Union[Submission, Mapping]],
        *,
        now: Optional[TimestampLike] = None,
        learner_id: Optional[int] = None,
    ) -> list[Outcome]:
        """Like :meth:`evaluate`, but keeps a :class:`Skipped` for each left-out assignment."""
        course = as_course(course)
        assignment_group = as_assignment_group(assignment_group)

        if assignment_group.course_id != course.id:
            raise AssignmentGroupMismatch(course.id, assignment_group.course_id)

        submissions = as_submissions(submissions)
        now = self._resolve_now(now)
        if learner_id is None:
            learner_id = self.options.learner_id

        by_assignment = _index_submissions(submissions, learner_id)

        outcomes = []
        number_late = 0
        for assignment in assignment_group.assignments:
            submission = by_assignment.get(assignment.id)
            outcome, was_late = self._evaluate_assignment(
                assignment, submission, now, number_late
            )
            number_late += was_late

            if isinstance(outcome, Skipped) and outcome.reason.is_error:
                logger.error(outcome.message)

            outcomes.append(outcome)

        return outcomes

    def _resolve_now(self, now: Optional[TimestampLike]) -> pd.Timestamp:
        if now is None:
            now = self.options.now
        if now is None:
            return pd.Timestamp.now(tz="UTC")

        timestamp = to_timestamp(now)
        if pd.isna(timestamp):
            raise ValueError(f"Cannot interpret {now!r} as the current time.")
        return timestamp

    def _evaluate_assignment(
        self,
        assignment: Assignment,
        submission: Optional[Submission],
        now: pd.Timestamp,
        number_late: int,
    ) -> tuple[Outcome, bool]:
        """Evaluate one assignment. Also reports whether the submission was late."""
        points_possible = assignment.points_possible
        if not is_finite_number(points_possible) or points_possible <= 0:
            detail = (
                f"invalid points_possible {assignment.points_possible!r}; "
                "must be a positive number"
            )
            return _skip(assignment, SkipReason.INVALID_POINTS_POSSIBLE, detail), False

        due_at = to_timestamp(assignment.due_at)
        if pd.isna(due_at):
            detail = f"cannot parse due_at {assignment.due_at!r}"
            return _skip(assignment, SkipReason.INVALID_TIMESTAMP, detail), False

        if due_at > now:
            return _skip(assignment, SkipReason.NOT_YET_DUE), False

        if submission is None:
            return self._result(assignment, score=0, submitted_at=None), False

        submitted_at = to_timestamp(submission.submitted_at)
        if pd.isna(submitted_at):
            detail = f"cannot parse submitted_at {submission.submitted_at!r}"
            return _skip(assignment, SkipReason.INVALID_TIMESTAMP, detail), False

        if not is_finite_number(submission.score):
            detail = f"invalid score {submission.score!r}"
            return _skip(assignment, SkipReason.INVALID_SCORE, detail), False

        lateness = submitted_at - due_at
        score = submission.score
        was_late = lateness > pd.Timedelta(self.options.lateness_fudge, unit="s")
        if was_late:
            info = LateInfo(assignment, submission, lateness, number_late + 1)
            score = apply_penalty(score, self.options.late_policy(info))

        result = self._result(assignment, score=score, submitted_at=submission.submitted_at)
        return result, was_late

    @staticmethod
    def _result(assignment: Assignment, score, submitted_at) -> AssignmentResult:
        return AssignmentResult(
            assignment_id=assignment.id,
            assignment_name=assignment.name,
            points_possible=assignment.points_possible,
            score=score,
            submitted_at=submitted_at,
            due_at=assignment.due_at,
        )


def evaluate(
    course: Union[Course, Mapping],
    assignment_group: Union[AssignmentGroup, Mapping],
    submissions: Sequence[Union[Submission, Mapping]],
    *,
    now: Optional[TimestampLike] = None,
    learner_id: Optional[int] = None,
    options: Optional[EvaluatorOptions] = None,
) -> list[AssignmentResult]:
    """Evaluate grades with a :class:`GradeEvaluator`.

    A convenience wrapper; see :meth:`GradeEvaluator.evaluate` for details.

    """
    evaluator = GradeEvaluator(options)
    return evaluator.evaluate(
        course, assignment_group, submissions, now=now, learner_id=learner_id
    )
