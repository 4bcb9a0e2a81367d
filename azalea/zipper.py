"""
A Huet zipper over azalea trees.

A zipper is a focused node plus a stack of crumbs, one per ancestor level,
innermost first. Each crumb holds the parent as it was when we moved down
into it together with the siblings to the left (nearest last) and to the
right (nearest first) of the focus. Moving up stitches the focus back
between its siblings, so edits made anywhere below show up in the tree
returned by ``to_root``.

see http://en.wikipedia.org/wiki/Zipper_(data_structure)

>>> from azalea import tree
>>> t = tree.new('a', ['b', 'c'])
>>> from_tree(t).down().right().insert_left('x').root()
Tree('a', [Tree('b'), Tree('x'), Tree('c')])
"""

from collections import namedtuple

from . import tree
from .msg import (
    NoChildren, NoLeftSibling, NoParent, NoRightSibling, RootHasNoSiblings,
)
from .tree import Tree

Crumb = namedtuple('Crumb', ['parent', 'left', 'right'])


def from_tree(root):
    if not isinstance(root, Tree):
        raise TypeError('from_tree expects a Tree, got {!r}'.format(root))
    return Zipper(root, ())


# Crumb, Tree -> Tree
def _rebuild(crumb, focus):
    parent = crumb.parent
    children = crumb.left + (focus,) + crumb.right
    unchanged = len(children) == len(parent.children) and all(
        a is b for a, b in zip(children, parent.children)
    )
    if unchanged:
        return parent
    return parent._replace(children=children)


_Zipper = namedtuple('Zipper', ['focus', 'crumbs'])


class Zipper(_Zipper):

    def __repr__(self):
        return '<azalea.Zipper({!r}) depth={}>'.format(
            self.focus.value, len(self.crumbs),
        )

    ## Context
    def node(self):
        return self.focus

    def root(self):
        """The whole tree with every edit applied"""
        return self.to_root().focus

    def is_root(self):
        # a crumb without a parent marks the top just like an empty stack
        return not self.crumbs or self.crumbs[0].parent is None

    def is_end(self):
        """
        True when the focus is the last node of a depth-first walk of the
        whole tree: it has no children and neither it nor any ancestor has
        a right sibling.
        """
        if self.focus.children:
            return False
        return all(not crumb.right for crumb in self.crumbs)

    ## Navigation
    def down(self):
        children = self.focus.children
        if not children:
            return NoChildren(self)

        crumb = Crumb(parent=self.focus, left=(), right=children[1:])
        return self._replace(
            focus=children[0],
            crumbs=(crumb,) + self.crumbs,
        )

    def up(self):
        if self.is_root():
            return NoParent(self)

        crumb, crumbs = self.crumbs[0], self.crumbs[1:]
        return self._replace(focus=_rebuild(crumb, self.focus), crumbs=crumbs)

    def to_root(self):
        loc = self
        while not loc.is_root():
            loc = loc.up()
        return loc

    def right(self):
        if self.is_root() or not self.crumbs[0].right:
            return NoRightSibling(self)

        crumb = self.crumbs[0]
        return self._replace(
            focus=crumb.right[0],
            crumbs=(crumb._replace(
                left=crumb.left + (self.focus,),
                right=crumb.right[1:],
            ),) + self.crumbs[1:],
        )

    def left(self):
        if self.is_root() or not self.crumbs[0].left:
            return NoLeftSibling(self)

        crumb = self.crumbs[0]
        return self._replace(
            focus=crumb.left[-1],
            crumbs=(crumb._replace(
                left=crumb.left[:-1],
                right=(self.focus,) + crumb.right,
            ),) + self.crumbs[1:],
        )

    def leftmost(self):
        """Returns the left most sibling at this location or self"""
        if self.is_root() or not self.crumbs[0].left:
            return self

        crumb = self.crumbs[0]
        t = crumb.left + (self.focus,) + crumb.right
        return self._replace(
            focus=t[0],
            crumbs=(crumb._replace(left=(), right=t[1:]),) + self.crumbs[1:],
        )

    def rightmost(self):
        """Returns the right most sibling at this location or self"""
        if self.is_root() or not self.crumbs[0].right:
            return self

        crumb = self.crumbs[0]
        t = crumb.left + (self.focus,) + crumb.right
        return self._replace(
            focus=t[-1],
            crumbs=(crumb._replace(left=t[:-1], right=()),) + self.crumbs[1:],
        )

    def leftmost_descendant(self):
        loc = self
        while loc.focus.children:
            loc = loc.down()
        return loc

    def rightmost_descendant(self):
        loc = self
        while loc.focus.children:
            loc = loc.down().rightmost()
        return loc

    ## Enumeration
    def next(self):
        """
        Moves to the next node of a depth-first pre-order walk.

        For example given the following tree:

                a
              /   \\
             b     e
             ^     ^
            c d   f g

        starting at a, next visits b, c, d, e, f, g. Calling next at g
        returns NoParent; its zipper is back at the root.
        """
        loc = self.down()
        if loc:
            return loc

        loc = self
        while True:
            r = loc.right()
            if r:
                return r
            u = loc.up()
            if not u:
                return u
            loc = u

    def preorder_iter(self):
        loc = self
        while loc:
            yield loc
            loc = loc.next()

    def find(self, predicate):
        """
        Returns the first location, walking the whole tree depth-first from
        the root, whose focus satisfies predicate(node). None when no node
        does.
        """
        for loc in self.to_root().preorder_iter():
            if predicate(loc.focus):
                return loc
        return None

    ## Editing
    def replace(self, value):
        return self._replace(focus=tree.wrap(value))

    def edit(self, f, *args):
        """Replace the node at this loc with the value of f(node, *args)"""
        return self.replace(f(self.focus, *args))

    def append_child(self, child):
        """
        Inserts the child as the rightmost child of the focus, without
        moving.
        """
        return self._replace(focus=tree.insert_child(self.focus, child, -1))

    def insert_child(self, child):
        """
        Inserts the child as the leftmost child of the focus, without
        moving.
        """
        return self._replace(focus=tree.insert_child(self.focus, child, 0))

    def insert_left(self, sibling):
        """Insert sibling as left sibling of the focus without moving"""
        if self.is_root():
            return RootHasNoSiblings(self)

        crumb = self.crumbs[0]
        index = len(crumb.left)
        parent = tree.insert_child(crumb.parent, sibling, index)
        return self._replace(crumbs=(crumb._replace(
            parent=parent,
            left=crumb.left + (parent.children[index],),
        ),) + self.crumbs[1:])

    def insert_right(self, sibling):
        """Insert sibling as right sibling of the focus without moving"""
        if self.is_root():
            return RootHasNoSiblings(self)

        crumb = self.crumbs[0]
        index = len(crumb.left) + 1
        parent = tree.insert_child(crumb.parent, sibling, index)
        return self._replace(crumbs=(crumb._replace(
            parent=parent,
            right=(parent.children[index],) + crumb.right,
        ),) + self.crumbs[1:])

    def remove(self):
        """
        Removes the focus from its parent, returning the location that
        would have preceded it in a depth-first walk.

        For example given the following tree:

                a
              /   \\
             b     e
             ^     ^
            c d   f g
            ^
          c1 c2

        removing c would return b, removing d would return c2.
        """
        if self.is_root():
            return NoParent(self)

        crumb, crumbs = self.crumbs[0], self.crumbs[1:]
        if crumb.left:
            _, parent = tree.remove_child(crumb.parent, len(crumb.left))
            return self._replace(
                focus=crumb.left[-1],
                crumbs=(crumb._replace(
                    parent=parent,
                    left=crumb.left[:-1],
                ),) + crumbs,
            ).rightmost_descendant()

        return self._replace(
            focus=crumb.parent._replace(children=crumb.right),
            crumbs=crumbs,
        )


del _Zipper
