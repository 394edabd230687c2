from itertools import count, islice

from hypothesis import given, strategies as st

from propcheck.generators import integer_tree
from propcheck.lazy_tree import FILTERED, LazyTree


def example_tree():
    return LazyTree(1, [LazyTree(2, [LazyTree(3)]), LazyTree(4)])


def naturals(n):
    return LazyTree(n, lambda: (naturals(m) for m in count(n + 1)))


def test_each_is_depth_first():
    assert example_tree().to_list() == [1, 2, 3, 4]


def test_map_keeps_shape():
    assert example_tree().map(lambda x: x + 1).to_list() == [2, 3, 4, 5]


def test_map_propagates_exceptions():
    def explode(x):
        if x == 3:
            raise ValueError(x)
        return x

    values = example_tree().map(explode).each()
    assert next(values) == 1
    assert next(values) == 2
    try:
        next(values)
    except ValueError as e:
        assert e.args == (3,)
    else:
        assert False, 'Expected ValueError'


def test_children_can_be_iterated_repeatedly():
    tree = LazyTree(0, lambda: (LazyTree(i) for i in range(3)))
    assert [c.root for c in tree.children] == [0, 1, 2]
    assert [c.root for c in tree.children] == [0, 1, 2]


def test_sibling_cursors_are_independent():
    tree = example_tree()
    first = tree.children
    second = tree.children
    assert next(first).root == 2
    assert next(second).root == 2
    assert next(first).root == 4


def test_traversal_of_infinite_tree_is_lazy():
    assert list(islice(naturals(0).each(), 5)) == [0, 1, 2, 3, 4]


def test_map_of_infinite_tree_is_lazy():
    doubled = naturals(0).map(lambda x: x * 2)
    assert list(islice(doubled.each(), 4)) == [0, 2, 4, 6]


def test_flatten_puts_inner_children_first():
    tree = LazyTree(
        LazyTree('a', [LazyTree('b')]),
        [LazyTree(LazyTree('c', [LazyTree('d')]))]
    )
    assert tree.flatten().to_list() == ['a', 'b', 'c', 'd']


def test_bind_tries_inner_shrinks_before_outer_ones():
    tree = LazyTree(1, [LazyTree(0)])

    def inner(x):
        return LazyTree(x * 10, [LazyTree(x * 10 - 1)])

    assert tree.bind(inner).to_list() == [10, 9, 0, -1]


def test_filtered_children_are_skipped():
    tree = LazyTree(1, [LazyTree(FILTERED, [LazyTree(5)]), LazyTree(2)])
    assert [c.root for c in tree.children] == [2]
    assert tree.to_list() == [1, 2]


def test_filtered_root_has_no_traversal():
    assert LazyTree(FILTERED, [LazyTree(1)]).to_list() == []


def test_mapping_to_filtered_removes_subtrees():
    tree = LazyTree(1, [LazyTree(2, [LazyTree(5)]), LazyTree(3)])
    filtered = tree.map(lambda x: FILTERED if x == 2 else x)
    assert filtered.to_list() == [1, 3]


def test_wrap_has_no_children():
    assert LazyTree.wrap('x').to_list() == ['x']


def test_zip_changes_one_position_at_a_time():
    trees = [
        LazyTree(1, [LazyTree(0)]),
        LazyTree('a', [LazyTree('b'), LazyTree('c')]),
    ]
    zipped = LazyTree.zip(trees)
    assert zipped.root == (1, 'a')
    assert [c.root for c in zipped.children] == [
        (0, 'a'), (1, 'b'), (1, 'c'),
    ]


def test_zip_of_nothing_is_a_leaf():
    assert LazyTree.zip([]).to_list() == [()]


@given(st.lists(st.integers(-1000, 1000), max_size=5))
def test_zipped_children_differ_in_exactly_one_coordinate(values):
    zipped = LazyTree.zip([integer_tree(v) for v in values])
    assert zipped.root == tuple(values)
    for child in zipped.children:
        differences = [
            i for i, (u, v) in enumerate(zip(child.root, zipped.root))
            if u != v
        ]
        assert len(differences) == 1


@given(st.lists(st.integers(-1000, 1000), min_size=1, max_size=3))
def test_zip_keeps_shrinking_deeper(values):
    zipped = LazyTree.zip([integer_tree(v) for v in values])
    for root in islice(zipped.each(), 300):
        assert len(root) == len(values)
        for u, v in zip(root, values):
            assert abs(u) <= abs(v)
