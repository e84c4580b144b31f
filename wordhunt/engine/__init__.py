from .scoring import score, is_solved
from .constraints import (
    Absent, Present, Correct, LetterState, ConstraintSet,
    filter_candidates, constraints_from_feedback, satisfies,
)
from .validation import validate_guess

__all__ = [
    "score", "is_solved",
    "Absent", "Present", "Correct", "LetterState", "ConstraintSet",
    "filter_candidates", "constraints_from_feedback", "satisfies",
    "validate_guess",
]
