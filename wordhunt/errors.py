"""
Error taxonomy for a solving session.

Every session-ending condition is a SolverError subclass with a stable
`kind` string; the loop reports that kind when it gives up. CorpusError is
raised while loading a dictionary and never inside a session.
"""


class SolverError(Exception):
    kind = "SolverError"


class InvalidGuess(SolverError):
    """The chosen word is not in the corpus."""
    kind = "InvalidGuess"


class NoCandidates(SolverError):
    """The constraints leave no consistent word (or nothing to rank)."""
    kind = "NoCandidates"


class ObservationError(SolverError):
    """The observer could not produce letter states."""
    kind = "ObservationError"


class FeedbackPending(ObservationError):
    """Feedback for the last guess is not available yet."""
    kind = "FeedbackPending"


class SubmissionError(SolverError):
    """The submitter could not deliver the guess."""
    kind = "SubmissionError"


class GuessBudgetExhausted(SolverError):
    kind = "GuessBudgetExhausted"


class CorpusError(ValueError):
    """Dictionary source is unusable (malformed entry under 'reject', or empty)."""
