from .corpus import WordCorpus, is_well_formed
from .validator import validate_wordlist, pretty_summary
from .io import read_lines

__all__ = ["WordCorpus", "is_well_formed", "validate_wordlist", "pretty_summary", "read_lines"]
