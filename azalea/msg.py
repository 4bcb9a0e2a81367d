"""
Outcomes returned by zipper moves that can't be made.

These are values, not exceptions. Walking a tree means running into them
all the time ("go right until there is nothing to the right, then go up"),
so callers branch on them rather than catching anything.

Every outcome is falsy and carries the zipper it came from::

    loc = z.down()
    while loc:
        loc = loc.right()
    # loc is a NoRightSibling (or NoChildren); loc.zipper is where we stopped
"""

from collections import namedtuple


class Message(object):
    """
    Base class for all other messages
    """


class NavigationError(Message):
    reason = 'cannot move'

    def __bool__(self):
        return False

    # outcomes of different kinds never compare equal, even from the
    # same zipper
    def __eq__(self, other):
        return type(self) is type(other) and tuple.__eq__(self, other)

    def __ne__(self, other):
        return not self == other

    __hash__ = tuple.__hash__


class NoChildren(NavigationError, namedtuple('NoChildren', ['zipper'])):
    """down() from a leaf"""
    reason = 'focus has no children'


class NoRightSibling(
    NavigationError, namedtuple('NoRightSibling', ['zipper']),
):
    """right() from the rightmost child, or from the root"""
    reason = 'focus has no right sibling'


class NoLeftSibling(NavigationError, namedtuple('NoLeftSibling', ['zipper'])):
    """left() from the leftmost child, or from the root"""
    reason = 'focus has no left sibling'


class NoParent(NavigationError, namedtuple('NoParent', ['zipper'])):
    """up() from the root"""
    reason = 'focus is the root'


class RootHasNoSiblings(
    NavigationError, namedtuple('RootHasNoSiblings', ['zipper']),
):
    """insert_left() or insert_right() at the root"""
    reason = 'the root has no siblings'


def describe(outcome):
    """
    One line rendering of an outcome, for printing.

    >>> from azalea import tree, zipper
    >>> describe(zipper.from_tree(tree.new('a')).up())
    "[ERROR] NoParent: focus is the root (at 'a')"
    """
    return '[ERROR] {}: {} (at {!r})'.format(
        type(outcome).__name__,
        outcome.reason,
        outcome.zipper.focus.value,
    )
