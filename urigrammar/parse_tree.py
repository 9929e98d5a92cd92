from typing import Iterator, List, Optional

from termcolor import colored


__all__ = [
    'PTNode', 'VirtualPTNode'
]


class PTNode(object):
    """Parse Tree Node

    A view of text[start: end], no character is copied until content is asked for
    """

    def __init__(self, text: str, start: int, end: int, children: Optional[List['PTNode']] = None, tag=None):
        self.text: str = text
        assert end >= start >= 0
        self.index0: int = start
        self.index1: int = end
        self._children: List['PTNode'] = children if children is not None else []
        self.tag = tag

    @property
    def content(self) -> str:
        return self.text[self.index0: self.index1]

    # start(), end() as methods, simulating re MatchObject behaviour
    def start(self) -> int:
        return self.index0

    def end(self) -> int:
        return self.index1

    @property
    def children(self) -> List['PTNode']:
        return node_children(self)

    def __repr__(self):
        c = '{}, {}, content={}'.format(self.index0, self.index1, repr(self.content))
        if self.tag:
            c += ', tag={}'.format(repr(self.tag))
        elif self.children:
            c += ', children=[{}]'.format(', '.join([repr(n) for n in self.children]))
        return '{}('.format(self.__class__.__name__) + c + ')'

    def __bool__(self):
        return self.index1 > self.index0

    @classmethod
    def lead(cls, pts: List['PTNode'], tag=None) -> 'PTNode':
        """Make a new PTNode as the common parent of nodes <pts> """

        for p1, p2 in zip(pts[:-1], pts[1:]):
            assert p1.index1 == p2.index0

        return cls(pts[0].text, pts[0].index0, pts[-1].index1, children=list(pts), tag=tag)

    def fetch(self, tag) -> Iterator['PTNode']:
        """Fetch those nodes whose tag == <tag>, in document order"""
        if self.tag == tag:
            yield self
        for n in self.children:
            yield from n.fetch(tag)

    def first(self, tag) -> Optional['PTNode']:
        """The first node tagged <tag>, or None"""
        return next(self.fetch(tag), None)

    def __eq__(self, o):
        if isinstance(o, PTNode):
            return self.text == o.text \
                and self.index0 == o.index0 \
                and self.index1 == o.index1 \
                and self.children == o.children \
                and self.tag == o.tag
        return False

    def pp(self):
        """Pretty Print in terminals, designed for terminal users"""
        pretty_print_tree(self)


class VirtualPTNode(PTNode):
    """A class of nodes that is transparent to callers"""


def node_children(n: PTNode) -> List[PTNode]:
    return list(iter_node_children(n))


def iter_node_children(n: PTNode) -> Iterator[PTNode]:
    for c in n._children:
        # an empty port or path is still worth reporting, other empty nodes are see-through
        if isinstance(c, VirtualPTNode) or not (c or c.tag is not None):
            yield from iter_node_children(c)
        else:
            yield c


def pretty_print_tree(tree: PTNode):
    # for i in tag_lst, tag_lst[i] is the tag most close to the leaf
    tag_lst: List[Optional[str]] = [None] * (tree.index1 - tree.index0)

    start0 = tree.index0

    def set_tag(node, tl):
        """Traverse the parse tree and set tag_lst"""
        if node.tag is not None:
            for i in range(node.index0 - start0, node.index1 - start0):
                tl[i] = node.tag
        for cn in node.children:
            set_tag(cn, tl)

    set_tag(tree, tag_lst)

    colors = ['red', 'green', 'yellow', 'blue', 'magenta', 'cyan']
    white = 'white'

    def tag_color(tag):
        if tag is None:
            return white
        return colors[sum(map(ord, tag)) % len(colors)]

    color_lst = [tag_color(tag) for tag in tag_lst]

    # extend several chars on both sides
    extend_n = 10
    left_i = max(0, tree.index0 - extend_n)
    right_i = min(len(tree.text), tree.index1 + extend_n)

    left_str = tree.text[left_i: tree.index0]
    left_str = ('...' + left_str) if left_i > 0 else left_str

    right_str = tree.text[tree.index1: right_i]
    right_str = (right_str + '...') if right_i < len(tree.text) else right_str

    # whole string to print
    ws = colored(left_str, attrs=['dark'])
    for offset, color in enumerate(color_lst):
        i = tree.index0 + offset
        ws += colored(tree.text[i], color)
    ws += colored(right_str, attrs=['dark'])

    print(ws)
