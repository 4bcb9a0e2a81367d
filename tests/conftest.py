import random
import string

import pytest

from azalea import tree


def gen_empty_tree(rng):
    value = ''.join(
        rng.choice(string.ascii_letters) for _ in range(rng.randint(8, 12))
    )
    return tree.new(value)


def gen_tree(rng, depth=None):
    """
    A random tree at most ``depth`` levels below the root, where a node
    n levels from the bottom has between 1 and n children.
    """
    if depth is None:
        depth = rng.randint(1, 5)
    node = gen_empty_tree(rng)
    if depth == 0:
        return node
    children = [
        gen_tree(rng, depth - 1) for _ in range(rng.randint(1, depth))
    ]
    return node._replace(children=tuple(children))


@pytest.fixture(params=range(25))
def rng(request):
    return random.Random(request.param)


@pytest.fixture
def random_tree(rng):
    return gen_tree(rng)


@pytest.fixture
def other_tree(rng, random_tree):
    return gen_tree(rng)


@pytest.fixture
def sample():
    """
    a
    ├── b
    ├── c
    │   ├── d
    │   └── e
    │       └── f
    └── g
        └── h
    """
    return tree.new('a', [
        'b',
        tree.new('c', ['d', tree.new('e', ['f'])]),
        tree.new('g', [tree.new('h')]),
    ])
