from .config import Settings
from .datasets import WordCorpus
from .harness import Session, SessionResult

__all__ = ["Settings", "WordCorpus", "Session", "SessionResult"]
