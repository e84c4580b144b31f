from .core import Session, SessionResult, SessionState, run_case, run_batch
from .collaborators import Observer, Submitter, SimulatedGame
from .io import write_csv, write_manifest

__all__ = [
    "Session", "SessionResult", "SessionState", "run_case", "run_batch",
    "Observer", "Submitter", "SimulatedGame", "write_csv", "write_manifest",
]
