"""Records describing a course, its assignments, and learner submissions.

Every record is a frozen dataclass; the evaluator reads them and never
modifies them. Each has a ``from_dict`` constructor accepting the JSON-shaped
mappings used by learning management systems, e.g.:

    >>> Assignment.from_dict(
    ...     {"id": 1, "name": "Algebra", "due_at": "2023-10-01T23:59:59Z", "points_possible": 100}
    ... )
    Assignment(id=1, name='Algebra', due_at='2023-10-01T23:59:59Z', points_possible=100)

"""

import dataclasses
from collections.abc import Mapping
from typing import Any, Sequence, Tuple

from ..exceptions import MalformedRecordError


def _require(dct: Mapping, key: str, kind: str) -> Any:
    try:
        return dct[key]
    except KeyError:
        raise MalformedRecordError(kind, key) from None


@dataclasses.dataclass(frozen=True)
class Course:
    """A course.

    Attributes
    ----------
    id : int
        The unique identifier of the course.
    name : str
        The course's name.

    """

    id: int
    name: str = ""

    @classmethod
    def from_dict(cls, dct: Mapping) -> "Course":
        return cls(id=_require(dct, "id", "course"), name=dct.get("name", ""))


@dataclasses.dataclass(frozen=True)
class Assignment:
    """A single assignment within an assignment group.

    Attributes
    ----------
    id : int
        The unique identifier of the assignment.
    name : str
        The assignment's name.
    due_at : str
        The due date, as an ISO-8601 string.
    points_possible : float
        The total number of points available. Must be positive for the
        assignment to be graded.

    """

    id: int
    name: str
    due_at: str
    points_possible: Any

    @classmethod
    def from_dict(cls, dct: Mapping) -> "Assignment":
        return cls(
            id=_require(dct, "id", "assignment"),
            name=_require(dct, "name", "assignment"),
            due_at=_require(dct, "due_at", "assignment"),
            points_possible=_require(dct, "points_possible", "assignment"),
        )


@dataclasses.dataclass(frozen=True)
class AssignmentGroup:
    """A weighted bucket of assignments belonging to a course.

    Attributes
    ----------
    id : int
        The unique identifier of the group.
    name : str
        The group's name.
    group_weight : float
        The weight of the group in the course grade. Carried along but not used
        when evaluating.
    course_id : int
        The id of the course this group belongs to.
    assignments : Tuple[Assignment, ...]
        The group's assignments, in order.

    """

    id: int
    name: str
    group_weight: float
    course_id: int
    assignments: Tuple[Assignment, ...] = ()

    def __post_init__(self):
        # store as a tuple so that the group is hashable and read-only
        object.__setattr__(self, "assignments", tuple(self.assignments))

    @classmethod
    def from_dict(cls, dct: Mapping) -> "AssignmentGroup":
        assignments = _require(dct, "assignments", "assignment group")
        return cls(
            id=_require(dct, "id", "assignment group"),
            name=dct.get("name", ""),
            group_weight=dct.get("group_weight", 0),
            course_id=_require(dct, "course_id", "assignment group"),
            assignments=tuple(
                a if isinstance(a, Assignment) else Assignment.from_dict(a)
                for a in assignments
            ),
        )


@dataclasses.dataclass(frozen=True)
class Submission:
    """A learner's submission for an assignment.

    Attributes
    ----------
    learner_id : int
        The learner who made the submission.
    assignment_id : int
        The assignment the submission is for.
    submitted_at : str
        When the submission was made, as an ISO-8601 string.
    score : float
        The raw score awarded, before any late penalty.

    """

    learner_id: int
    assignment_id: int
    submitted_at: str
    score: Any

    @classmethod
    def from_dict(cls, dct: Mapping) -> "Submission":
        """Build a submission from its nested mapping form.

        The mapping is expected to look like::

            {"learner_id": 1, "assignment_id": 3,
             "submission": {"submitted_at": "2023-10-11T12:00:00Z", "score": 40}}

        """
        inner = _require(dct, "submission", "submission")
        if not isinstance(inner, Mapping):
            raise MalformedRecordError("submission", "submission")
        return cls(
            learner_id=_require(dct, "learner_id", "submission"),
            assignment_id=_require(dct, "assignment_id", "submission"),
            submitted_at=_require(inner, "submitted_at", "submission"),
            score=_require(inner, "score", "submission"),
        )


def as_course(x) -> Course:
    return x if isinstance(x, Course) else Course.from_dict(x)


def as_assignment_group(x) -> AssignmentGroup:
    return x if isinstance(x, AssignmentGroup) else AssignmentGroup.from_dict(x)


def as_submissions(xs: Sequence) -> Tuple[Submission, ...]:
    return tuple(x if isinstance(x, Submission) else Submission.from_dict(x) for x in xs)
