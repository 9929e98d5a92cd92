from typing import Optional, Tuple

from .exceptions import InvalidURI
from .parse_tree import PTNode
from .rules import URI


__all__ = [
    'ParsedURIParts', 'parse', 'match_uri', 'is_valid_uri', 'split_uri',
]

# tags of the host alternatives, the first one found in a tree wins
HOST_KINDS = ('ipv6address', 'ipvfuture', 'ipv4address', 'reg_name')


class ParsedURIParts(object):
    """Raw components of a URI, nothing decoded

    user_info, host and port are empty strings when there is no authority,
    query and fragment are empty strings when their delimiter is missing.
    The has_* flags tell "absent" from "empty".
    """

    FIELDS = ('scheme', 'user_info', 'host', 'port', 'path', 'query', 'fragment',
              'host_kind', 'has_authority', 'has_user_info', 'has_port', 'has_query', 'has_fragment')

    def __init__(self, scheme: str, user_info: str = '', host: str = '', port: str = '',
                 path: str = '', query: str = '', fragment: str = '',
                 host_kind: Optional[str] = None,
                 has_authority: bool = False, has_user_info: bool = False, has_port: bool = False,
                 has_query: bool = False, has_fragment: bool = False):
        self.scheme: str = scheme
        self.user_info: str = user_info
        self.host: str = host
        self.port: str = port
        self.path: str = path
        self.query: str = query
        self.fragment: str = fragment
        self.host_kind: Optional[str] = host_kind
        self.has_authority: bool = has_authority
        self.has_user_info: bool = has_user_info
        self.has_port: bool = has_port
        self.has_query: bool = has_query
        self.has_fragment: bool = has_fragment

    @classmethod
    def from_tree(cls, tree: PTNode) -> 'ParsedURIParts':
        """Collect components from the tagged parse tree of a URI"""

        def content(tag) -> str:
            node = tree.first(tag)
            return node.content if node is not None else ''

        host_kind = None
        for kind in HOST_KINDS:
            if tree.first(kind) is not None:
                host_kind = kind
                break

        return cls(
            scheme=content('scheme'),
            user_info=content('user_info'),
            host=content('host'),
            port=content('port'),
            path=content('path'),
            query=content('query'),
            fragment=content('fragment'),
            host_kind=host_kind,
            has_authority=tree.first('authority') is not None,
            has_user_info=tree.first('user_info') is not None,
            has_port=tree.first('port') is not None,
            has_query=tree.first('query') is not None,
            has_fragment=tree.first('fragment') is not None,
        )

    def unsplit(self) -> str:
        """Put the components back together, with their delimiters"""
        s = self.scheme + ':'
        if self.has_authority:
            s += '//'
            if self.has_user_info:
                s += self.user_info + '@'
            s += self.host
            if self.has_port:
                s += ':' + self.port
        s += self.path
        if self.has_query:
            s += '?' + self.query
        if self.has_fragment:
            s += '#' + self.fragment
        return s

    def as_dict(self) -> dict:
        return {f: getattr(self, f) for f in self.FIELDS}

    def __eq__(self, o):
        if isinstance(o, ParsedURIParts):
            return self.as_dict() == o.as_dict()
        return False

    def __hash__(self):
        return hash(tuple(self.as_dict().items()))

    def __repr__(self):
        fields = ', '.join('{}={!r}'.format(f, getattr(self, f)) for f in self.FIELDS)
        return '{}({})'.format(self.__class__.__name__, fields)


def match_uri(text: str) -> Optional[PTNode]:
    """Parse tree of <text> as a whole URI, or None if it is not one"""
    if not isinstance(text, str):
        raise TypeError('URI must be str, not {}'.format(type(text).__name__))
    # a match that leaves characters behind is no match
    return URI.fullmatch(text)


def parse(text: str) -> Tuple[bool, Optional[ParsedURIParts]]:
    """Validate and split <text>

    Return (True, parts) for a valid URI, (False, None) otherwise.
    """
    tree = match_uri(text)
    if tree is None:
        return False, None
    return True, ParsedURIParts.from_tree(tree)


def is_valid_uri(text: str) -> bool:
    return match_uri(text) is not None


def split_uri(text: str) -> ParsedURIParts:
    """Like parse, but raise InvalidURI for an invalid URI"""
    ok, parts = parse(text)
    if not ok:
        raise InvalidURI(text)
    assert parts is not None
    return parts
