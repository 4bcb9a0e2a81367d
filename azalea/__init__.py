from . import msg, tree, zipper
from .msg import (
    NavigationError, NoChildren, NoLeftSibling, NoParent, NoRightSibling,
    RootHasNoSiblings,
)
from .tree import Tree
from .zipper import Crumb, Zipper, from_tree

__version__ = '0.1.0'
