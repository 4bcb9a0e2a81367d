import pytest

from azalea import msg, tree, zipper


@pytest.fixture
def root():
    return zipper.from_tree(tree.new('a', ['b']))


@pytest.mark.parametrize('cls', [
    msg.NoChildren, msg.NoRightSibling, msg.NoLeftSibling, msg.NoParent,
    msg.RootHasNoSiblings,
])
def test_outcomes_are_falsy(root, cls):
    outcome = cls(root)
    assert not outcome
    assert isinstance(outcome, msg.NavigationError)
    assert outcome.zipper is root


def test_outcomes_of_different_kinds_differ(root):
    assert msg.NoParent(root) == msg.NoParent(root)
    assert msg.NoParent(root) != msg.NoRightSibling(root)
    assert not msg.NoParent(root) != msg.NoParent(root)
    assert msg.NoChildren(root) != msg.NoLeftSibling(root)
    assert len({msg.NoParent(root), msg.NoParent(root)}) == 1


def test_describe(root):
    assert msg.describe(root.down().down()) == (
        "[ERROR] NoChildren: focus has no children (at 'b')"
    )
    assert msg.describe(root.insert_left('x')) == (
        "[ERROR] RootHasNoSiblings: the root has no siblings (at 'a')"
    )
