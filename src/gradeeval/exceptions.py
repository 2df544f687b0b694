"""Exceptions raised when evaluating grades."""


class GradeEvaluationError(Exception):
    """Base class for all errors raised by :mod:`gradeeval`."""


class AssignmentGroupMismatch(GradeEvaluationError, ValueError):
    """The assignment group does not belong to the given course.

    Attributes
    ----------
    course_id : int
        The id of the course that was supplied.
    group_course_id : int
        The course id recorded on the assignment group.

    """

    def __init__(self, course_id, group_course_id):
        self.course_id = course_id
        self.group_course_id = group_course_id
        super().__init__(
            "Invalid assignment group: does not belong to the specified course "
            f"(course id {course_id!r}, group's course id {group_course_id!r})."
        )


class MalformedRecordError(GradeEvaluationError, ValueError):
    """A mapping is missing a key needed to build a record."""

    def __init__(self, kind: str, key: str):
        self.kind = kind
        self.key = key
        super().__init__(f"Malformed {kind}: missing required key {key!r}.")
