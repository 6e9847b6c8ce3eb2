from .coordinate import Coordinate, InvalidInput
from .lexicon import KeywordRule, load_rules, match_rule

__all__ = ["Coordinate", "InvalidInput", "KeywordRule", "load_rules", "match_rule"]
