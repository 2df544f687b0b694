"""Example data that is used in the documentation and tests."""

from .io.records import read_all, CourseData


def mathematics_homework() -> CourseData:
    """Three homeworks: one on time, one with zero points possible, one late."""
    return read_all(
        {
            "course": {"id": 1, "name": "Mathematics"},
            "assignment_group": {
                "id": 1,
                "name": "Homework",
                "group_weight": 20,
                "course_id": 1,
                "assignments": [
                    {
                        "id": 1,
                        "name": "Algebra",
                        "due_at": "2023-10-01T23:59:59Z",
                        "points_possible": 100,
                    },
                    {
                        "id": 2,
                        "name": "Geometry",
                        "due_at": "2023-10-05T23:59:59Z",
                        "points_possible": 0,
                    },
                    {
                        "id": 3,
                        "name": "Calculus",
                        "due_at": "2023-10-10T23:59:59Z",
                        "points_possible": 50,
                    },
                ],
            },
            "submissions": [
                {
                    "learner_id": 1,
                    "assignment_id": 1,
                    "submission": {"submitted_at": "2023-09-30T12:00:00Z", "score": 90},
                },
                {
                    "learner_id": 1,
                    "assignment_id": 3,
                    "submission": {"submitted_at": "2023-10-11T12:00:00Z", "score": 40},
                },
            ],
        }
    )
