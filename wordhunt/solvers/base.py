from __future__ import annotations
from typing import Dict, Optional, Type

from wordhunt.config import MAX_GUESSES

# ---- Global solver registry ----
REGISTRY: Dict[str, Type["BaseSolver"]] = {}


def register(cls: Type["BaseSolver"]) -> Type["BaseSolver"]:
    """
    Decorator: @register on a solver class adds it to REGISTRY by its `id`.
    """
    sid = getattr(cls, "id", None)
    if not sid:
        raise ValueError(f"{cls.__name__} must define a non-empty `id`")
    if sid in REGISTRY:
        raise ValueError(f"Duplicate solver id: {sid}")
    REGISTRY[sid] = cls
    return cls


# ---- Base class that solvers inherit ----
class BaseSolver:
    """
    A solver turns one round's state into a guess.

    The session passes `state` as a dict with keys:
        "round":       guesses already made this session (0-based)
        "candidates":  words still consistent with the feedback (List[str])
        "constraints": the round's ConstraintSet
        "corpus":      the session's WordCorpus
        "max_guesses": guess budget
    Solvers hold no per-game state beyond `last_mode`, so one instance can
    be reused across games after reset().
    """
    id = "base"
    name = "Base"
    version = "0.0.0"

    def __init__(self):
        self.max_guesses: int = MAX_GUESSES
        self.last_mode: Optional[str] = None

    def reset(self, *, max_guesses: int = MAX_GUESSES) -> None:
        self.max_guesses = int(max_guesses)
        self.last_mode = None

    def next_guess(self, state: dict) -> str:
        raise NotImplementedError("Override in subclass")
