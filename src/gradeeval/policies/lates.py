"""Policies for penalizing late submissions."""

import typing
from typing import Optional, Union, Callable

import pandas as pd

from ..core._amounts import Percentage, Points
from ..core._records import Assignment, Submission


class LateInfo(typing.NamedTuple):
    """Contains information about a single late submission.

    Attributes
    ----------
    assignment : Assignment
        The assignment that was submitted late.
    submission : Submission
        The late submission.
    lateness : pd.Timedelta
        How far past the due date the submission was made.
    number : int
        The number of late submissions seen so far in the assignment group,
        including this one.

    """

    assignment: Assignment
    submission: Submission
    lateness: pd.Timedelta
    number: int


Penalty = Optional[Union[Points, Percentage]]
"""A type alias for a penalty returned by a late policy.

This can be a fixed number of points (:class:`gradeeval.Points`), a percentage of
the points earned (:class:`gradeeval.Percentage`), or ``None`` to indicate that no
penalty should be applied.

"""

LatePolicy = Callable[[LateInfo], Penalty]


class Deduct:
    """A late policy that deducts a fixed amount from the score.

    Parameters
    ----------
    amount : Union[Points, Percentage]
        The amount to deduct from the score. This can be a fixed number of
        points, or a percentage of the points earned.

    """

    def __init__(self, amount: Union[Points, Percentage]):
        self.amount = amount

    def __call__(self, _: LateInfo) -> Penalty:
        return self.amount

    def __repr__(self):
        return f"Deduct({self.amount!r})"


class Forgive:
    """A late policy that forgives the first N late submissions.

    Late submissions are counted in the order in which their assignments appear
    in the assignment group.

    Parameters
    ----------
    number : int
        The number of late submissions to forgive.
    then : Callable[[LateInfo], Penalty]
        The policy to apply to late submissions after the first N.
        By default, this deducts 10% of the points earned.

    """

    def __init__(self, number: int, then: LatePolicy = Deduct(Percentage(10))):
        self.number = number
        self.then = then

    def __call__(self, info: LateInfo) -> Penalty:
        if info.number <= self.number:
            return None
        else:
            return self.then(info)

    def __repr__(self):
        return f"Forgive({self.number!r}, then={self.then!r})"


DEFAULT_LATE_POLICY = Deduct(Percentage(10))


def apply_penalty(score, penalty: Penalty):
    """Apply a penalty returned by a late policy to a raw score."""
    if penalty is None:
        return score
    if not isinstance(penalty, (Points, Percentage)):
        raise TypeError("Unknown deduction type.")
    return penalty.deduct_from(score)
