"""
Immutable rose trees.

A tree is a payload plus an ordered tuple of child trees. Nothing here
mutates a tree: every edit returns a new node that shares the untouched
subtrees with the old one.

Most functions take the tree first. ``is_child`` and ``path_to`` take the
thing being looked for first, which reads better when partially applied.
"""

from collections import namedtuple
from functools import reduce as ft_reduce

_Tree = namedtuple('Tree', ['value', 'children'])


class Tree(_Tree):
    """
    A single node. Build these with ``new`` so that bare child values get
    wrapped into leaves.
    """

    def __repr__(self):
        if not self.children:
            return 'Tree({!r})'.format(self.value)
        return 'Tree({!r}, {!r})'.format(self.value, list(self.children))


del _Tree


def new(value=None, children=()):
    """
    Creates a tree, promoting every child that isn't a Tree to a leaf.

    >>> new('a', ['b', new('c', ['d'])])
    Tree('a', [Tree('b'), Tree('c', [Tree('d')])])

    >>> new()
    Tree(None)
    """
    if isinstance(children, (str, bytes)):
        raise TypeError('children must be a sequence, not {!r}'.format(
            children,
        ))
    return Tree(value, tuple(wrap(child) for child in children))


def wrap(child):
    if isinstance(child, Tree):
        return child
    return new(child)


def is_leaf(tree):
    return not tree.children


def is_child(candidate, tree):
    """
    True when ``candidate`` is equal to one of the direct children of tree.

    Equality is structural, so two separately built but identical
    subtrees can't be told apart.
    """
    return candidate in tree.children


# Index helpers


def _insert_position(size, index):
    # -1 appends, -2 lands before the last child and so on
    if index < 0:
        index = size + index + 1
    return min(max(index, 0), size)


def _child_index(tree, index):
    size = len(tree.children)
    i = index + size if index < 0 else index
    if not 0 <= i < size:
        raise IndexError(
            'child index {} out of range for a tree with {} children'.format(
                index, size,
            ),
        )
    return i


# Child editing


def insert_child(tree, child, index):
    """
    Returns a copy of tree with ``child`` inserted at ``index``.

    ``-1`` appends. Other negative indexes count back from the end and
    an index past the last child also appends.

    >>> t = new('a', ['b', 'c'])
    >>> [c.value for c in insert_child(t, 'x', -1).children]
    ['b', 'c', 'x']
    >>> [c.value for c in insert_child(t, 'x', -2).children]
    ['b', 'x', 'c']
    >>> [c.value for c in insert_child(t, 'x', 99).children]
    ['b', 'c', 'x']
    """
    children = tree.children
    i = _insert_position(len(children), index)
    return tree._replace(
        children=children[:i] + (wrap(child),) + children[i:],
    )


def add_child(tree, child):
    """Prepends ``child``"""
    return insert_child(tree, child, 0)


def remove_child(tree, index):
    """
    Removes the child at ``index``, returning ``(child, new_tree)``.

    Raises IndexError when there is no such child.
    """
    i = _child_index(tree, index)
    children = tree.children
    return children[i], tree._replace(children=children[:i] + children[i + 1:])


pop_at = remove_child


def pop_child(tree):
    if not tree.children:
        raise IndexError('pop from a tree with no children')
    return remove_child(tree, 0)


def update_at(tree, index, f):
    """Replaces the child at ``index`` with ``f(child)``"""
    i = _child_index(tree, index)
    children = tree.children
    child = wrap(f(children[i]))
    return tree._replace(children=children[:i] + (child,) + children[i + 1:])


# Lookup


def get(tree, index):
    return tree.children[_child_index(tree, index)]


def fetch(tree, index, default=None):
    try:
        return get(tree, index)
    except IndexError:
        return default


def path_to(target, tree):
    """
    Returns the nodes from ``tree`` down to the first node equal to
    ``target`` in a depth-first walk, both ends included. None when
    ``target`` isn't in the tree.

    >>> t = new('a', ['b', new('c', ['d'])])
    >>> [n.value for n in path_to(new('d'), t)]
    ['a', 'c', 'd']
    >>> path_to(new('z'), t) is None
    True
    """
    if tree == target:
        return (tree,)
    for child in tree.children:
        path = path_to(target, child)
        if path is not None:
            return (tree,) + path
    return None


# Whole tree operations


def iter_depth_first(tree):
    """
    Yields every node in pre-order: a node, then each of its subtrees from
    left to right.
    """
    stack = [tree]
    while stack:
        node = stack.pop()
        yield node
        stack.extend(reversed(node.children))


def values(tree):
    return [node.value for node in iter_depth_first(tree)]


# Tree, a, ((Tree, a) -> a) -> a
def reduce(tree, initial, f):
    """
    Folds ``f(node, acc)`` over every node in depth-first pre-order,
    starting with the root.

    >>> t = new('a', ['b', new('c', ['d'])])
    >>> reduce(t, '', lambda node, acc: acc + node.value)
    'abcd'
    """

    def step(acc, node):
        return f(node, acc)

    return ft_reduce(step, iter_depth_first(tree), initial)


def length(tree):
    """Total number of nodes, root included"""
    return 1 + sum(length(child) for child in tree.children)


def map(tree, f):
    """
    Applies ``f`` to every node while keeping the shape of the tree.

    ``f`` receives a node and returns its replacement (bare values are
    wrapped). The children of whatever ``f`` returns are mapped in turn,
    so children that ``f`` adds get visited too.
    """
    node = wrap(f(tree))
    return node._replace(
        children=tuple(map(child, f) for child in node.children),
    )
