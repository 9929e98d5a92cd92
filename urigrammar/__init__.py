from .exceptions import UriGrammarException, InvalidPattern, InvalidURI
from .parse_tree import PTNode, VirtualPTNode
from .pattern import Pattern, P
from .uri import ParsedURIParts, parse, match_uri, is_valid_uri, split_uri


__version__ = '0.1.0'

__all__ = [
    'UriGrammarException', 'InvalidPattern', 'InvalidURI',
    'PTNode', 'VirtualPTNode',
    'Pattern', 'P',
    'ParsedURIParts', 'parse', 'match_uri', 'is_valid_uri', 'split_uri',
]
