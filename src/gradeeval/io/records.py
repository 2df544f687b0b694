"""Read course, assignment group, and submission records from plain mappings.

These are the JSON-shaped objects produced by learning management system
APIs, e.g.:

.. code::

    {
        "course": {"id": 1, "name": "Mathematics"},
        "assignment_group": {"id": 1, "name": "Homework", "group_weight": 20,
                             "course_id": 1, "assignments": [...]},
        "submissions": [{"learner_id": 1, "assignment_id": 1,
                         "submission": {"submitted_at": "...", "score": 90}}]
    }

"""

import typing
from collections.abc import Mapping, Sequence

from ..core import Course, AssignmentGroup, Submission
from ..exceptions import MalformedRecordError


class CourseData(typing.NamedTuple):
    """Everything needed to evaluate one assignment group."""

    course: Course
    assignment_group: AssignmentGroup
    submissions: typing.Tuple[Submission, ...]


def read_course(dct: Mapping) -> Course:
    """Read a :class:`Course` from a mapping with keys ``id`` and ``name``."""
    return Course.from_dict(dct)


def read_assignment_group(dct: Mapping) -> AssignmentGroup:
    """Read an :class:`AssignmentGroup`, including its nested assignments."""
    return AssignmentGroup.from_dict(dct)


def read_submissions(items: Sequence[Mapping]) -> typing.Tuple[Submission, ...]:
    """Read a sequence of :class:`Submission`, preserving order."""
    return tuple(Submission.from_dict(item) for item in items)


def read_all(dct: Mapping) -> CourseData:
    """Read a course, assignment group, and submissions from one mapping.

    Parameters
    ----------
    dct : Mapping
        A mapping with keys ``"course"``, ``"assignment_group"``, and
        ``"submissions"``. The submissions key may be omitted, in which case
        there are no submissions.

    Returns
    -------
    CourseData

    Raises
    ------
    MalformedRecordError
        If a required key is missing.

    """
    for key in ("course", "assignment_group"):
        if key not in dct:
            raise MalformedRecordError("course data", key)

    return CourseData(
        course=read_course(dct["course"]),
        assignment_group=read_assignment_group(dct["assignment_group"]),
        submissions=read_submissions(dct.get("submissions", [])),
    )
