"""Pattern combinators

Every pattern yields all the ways it matches at a position, in priority order.
Sequencing, choice and repetition backtrack by pulling the next match from
the generators of their members, so no state outlives a single call.
"""

from typing import Iterator, List, Optional, Tuple

from .exceptions import InvalidPattern
from .parse_tree import PTNode, VirtualPTNode


__all__ = [
    'Pattern', 'PText', 'PInChars', 'PUInt', 'PTag',
    'PAny', 'PRepeat', 'PAdjacent', 'PAtomic', 'P',
]

DIGITS = '0123456789'


class Pattern(object):
    def match(self, text: str, start: int = 0) -> Iterator[PTNode]:
        """Match pattern from <text>, start at <start>, iterate over all possible matches as PTNode"""
        raise NotImplementedError

    @classmethod
    def make(cls, o) -> 'Pattern':
        if isinstance(o, Pattern):
            return o
        elif isinstance(o, str):
            return PText(o)
        else:
            raise InvalidPattern('Can not make a pattern from {!r}'.format(o))

    def __add__(self, pattern) -> 'Pattern':
        return PAdjacent([self, self.make(pattern)])

    def __radd__(self, pattern) -> 'Pattern':
        return PAdjacent([self.make(pattern), self])

    def __or__(self, pattern) -> 'Pattern':
        return PAny([self, self.make(pattern)])

    def __ror__(self, pattern) -> 'Pattern':
        return PAny([self.make(pattern), self])

    def fullmatch(self, text: str) -> Optional[PTNode]:
        """Match the whole <text>, return the first parse tree that consumes all of it"""
        for pt in self.match(text, 0):
            if pt.index1 == len(text):
                return pt
        return None

    def extract(self, text: str) -> List[PTNode]:
        """Extract info from text by the pattern, and return every match, forming a parse tree"""
        return list(self.extractiter(text))

    extractall = extract

    def extractiter(self, text: str) -> Iterator[PTNode]:
        """Extract info from text by the pattern, and return every match, forming parse trees"""
        for n in self.finditer(text):
            if n:
                yield n

    def finditer(self, text: str) -> Iterator[PTNode]:
        """Find pattern in text, yield them one after another"""
        cur = 0
        ll = len(text)

        while cur <= ll:
            m = False
            for pt in self.match(text, cur):
                m = True
                yield pt
                if pt.index1 > cur:
                    cur = pt.index1
                else:
                    cur += 1
                break
            if not m:
                cur += 1

    def findall(self, text: str) -> List[str]:
        return [n.content for n in self.finditer(text)]


class PText(Pattern):
    """A plain pattern that just match text as it is"""

    def __init__(self, text: str):
        self.text: str = text

    def match(self, text: str, start: int = 0) -> Iterator[PTNode]:
        if text.startswith(self.text, start):
            yield PTNode(text, start=start, end=start + len(self.text))

    def __repr__(self):
        return repr(self.text)


class PInChars(Pattern):
    def __init__(self, chars: str):
        self.chars: str = chars

    def match(self, text: str, start: int = 0) -> Iterator[PTNode]:
        if start >= len(text):
            return
        elif text[start] in self.chars:
            yield PTNode(text, start=start, end=start + 1)

    def __repr__(self):
        return '[{}]'.format(self.chars)


class PUInt(Pattern):
    """An unsigned decimal of 1 to <digits> digits, whose value is at most <max_value>

    Digits are read as many as possible, then the number as a whole is accepted or rejected.
    A leading zero is only allowed for "0" itself.
    """

    def __init__(self, digits: int, max_value: int):
        if digits < 1:
            raise InvalidPattern('A number needs at least one digit')
        self.digits: int = digits
        self.max_value: int = max_value

    def match(self, text: str, start: int = 0) -> Iterator[PTNode]:
        end = start
        limit = min(len(text), start + self.digits)
        while end < limit and text[end] in DIGITS:
            end += 1
        if end == start:
            return
        number = text[start: end]
        if len(number) > 1 and number[0] == '0':
            return
        if int(number) > self.max_value:
            return
        yield PTNode(text, start=start, end=end)

    def __repr__(self):
        return '\\d{{1,{}}}(<={})'.format(self.digits, self.max_value)


class PTag(Pattern):
    def __init__(self, pattern: Pattern, tag):
        self.pattern: Pattern = pattern
        assert tag is not None
        self.tag = tag

    def match(self, text: str, start: int = 0) -> Iterator[PTNode]:
        for pt in self.pattern.match(text, start):
            # wrap rather than relabel, so tags of inner patterns survive
            yield PTNode.lead([pt], tag=self.tag)

    def __repr__(self):
        return '(?<{}>:{})'.format(self.tag, self.pattern)


class PAny(Pattern):
    """Ordered choice, every match of a clause comes before those of the next one"""

    def __init__(self, patterns: List[Pattern]):
        assert patterns
        self.patterns: List[Pattern] = patterns

    def match(self, text: str, start: int = 0) -> Iterator[PTNode]:
        for pattern in self.patterns:
            for pt in pattern.match(text, start):
                yield pt

    def __or__(self, pattern) -> Pattern:
        return PAny(list(self.patterns) + [self.make(pattern)])

    def __ror__(self, pattern) -> Pattern:
        return PAny([self.make(pattern)] + list(self.patterns))

    def __repr__(self):
        return '|'.join(['(' + str(p) + ')' for p in self.patterns])


# (last node, previous chain), so that attempts of a repeat share their common head
NodeChain = Tuple[PTNode, Optional['NodeChain']]


class PRepeat(Pattern):
    def __init__(self, pattern: Pattern, _from: int, _to: Optional[int] = None):
        self.pattern: Pattern = pattern
        if _to is not None:
            assert _to >= _from
        self._from: int = _from
        self._to: Optional[int] = _to

    def match(self, text: str, start: int = 0) -> Iterator[PTNode]:
        # depth first over repetition counts, a count is yielded after every
        # longer attempt built on it
        head: NodeChain = (PTNode(text, start, start), None)

        mtc_stk: List[Iterator[PTNode]] = [self._extend(text, start, 0)]
        chn_stk: List[NodeChain] = [head]

        while mtc_stk:
            try:
                n2 = next(mtc_stk[-1])
            except StopIteration:
                mtc_stk.pop()
                chn = chn_stk.pop()
                # len(chn_stk) is now the repeat count of chn
                if len(chn_stk) >= self._from:
                    yield self._lead(chn)
            else:
                chn = (n2, chn_stk[-1])
                mtc_stk.append(self._extend(text, n2.index1, len(chn_stk)))
                chn_stk.append(chn)

    def _extend(self, text: str, start: int, count: int) -> Iterator[PTNode]:
        if self._to is not None and count >= self._to:
            return
        for n2 in self.pattern.match(text, start):
            # repeat expect it's sub pattern to proceed
            if n2:
                yield n2

    @staticmethod
    def _lead(chn: Optional[NodeChain]) -> PTNode:
        nodes: List[PTNode] = []
        while chn is not None:
            nodes.append(chn[0])
            chn = chn[1]
        nodes.reverse()
        return VirtualPTNode.lead(nodes)

    def __repr__(self):
        to = self._to if isinstance(self._to, int) else ''
        return '(%s){%s,%s}' % (self.pattern, self._from, to)


class PAdjacent(Pattern):
    def __init__(self, patterns: List[Pattern]):
        assert patterns
        assert len(patterns) >= 1
        self.patterns: List[Pattern] = patterns

    def match(self, text: str, start: int = 0) -> Iterator[PTNode]:
        idx_ptn = 0
        mtc_stk: List[Iterator[PTNode]] = [self.patterns[idx_ptn].match(text, start)]
        res_stk: List[Optional[PTNode]] = [None]

        while True:
            try:
                res_nxt = next(mtc_stk[-1])
            except StopIteration:
                idx_ptn -= 1
                if idx_ptn < 0:
                    return
                mtc_stk.pop()
                res_stk.pop()
            else:
                res_stk[-1] = res_nxt
                idx_ptn += 1
                if idx_ptn < len(self.patterns):
                    mtc_stk.append(self.patterns[idx_ptn].match(text, res_nxt.index1))
                    res_stk.append(None)
                else:
                    yield PTNode.lead(res_stk)  # type: ignore
                    idx_ptn -= 1

    def __add__(self, pattern) -> Pattern:
        return PAdjacent(list(self.patterns) + [self.make(pattern)])

    def __radd__(self, pattern) -> Pattern:
        return PAdjacent([self.make(pattern)] + list(self.patterns))

    def __repr__(self):
        return ''.join('({})'.format(p) for p in self.patterns)


class PAtomic(Pattern):
    """Commit to the first match of a pattern, never backtrack into it"""

    def __init__(self, pattern: Pattern):
        self.pattern: Pattern = pattern

    def match(self, text: str, start: int = 0) -> Iterator[PTNode]:
        for pt in self.pattern.match(text, start):
            yield pt
            return

    def __repr__(self):
        return '(?>{})'.format(self.pattern)


class P(object):
    @staticmethod
    def ic(chars: str) -> Pattern:
        """ANY Char"""
        return PInChars(chars)

    @staticmethod
    def tag(pattern, tag) -> Pattern:
        """tag a pattern"""
        return PTag(Pattern.make(pattern), tag=tag)

    @staticmethod
    def repeat(pattern, _from: Optional[int] = None, _to: Optional[int] = None,
               exact: Optional[int] = None) -> Pattern:
        """repeat a pattern some times

        if _to is None, repeat time upbound is not limited
        """
        if exact is not None:
            _from = exact
            _to = exact

        if _from is None:
            _from = 0

        if _to is not None and _to < _from:
            raise InvalidPattern('Repeat upper bound less than lower bound')

        return PRepeat(Pattern.make(pattern), _from=_from, _to=_to)

    n = repeat

    @classmethod
    def n01(cls, pattern) -> Pattern:
        """A pattern can be both match or not"""
        return cls.repeat(Pattern.make(pattern), 0, 1)

    @staticmethod
    def any(*patterns) -> Pattern:
        """Try to match patterns in order, select the first one match"""
        return PAny([Pattern.make(p) for p in patterns])

    @staticmethod
    def pattern(pattern) -> Pattern:
        return Pattern.make(pattern)

    @staticmethod
    def atomic(pattern) -> Pattern:
        """Only the first match of pattern counts"""
        return PAtomic(Pattern.make(pattern))

    @staticmethod
    def uint(digits: int, max_value: int) -> Pattern:
        """Unsigned decimal number, range checked"""
        return PUInt(digits, max_value)
