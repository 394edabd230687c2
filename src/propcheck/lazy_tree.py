from itertools import chain


class _Filtered(object):
    def __repr__(self):
        return "FILTERED"

    def __bool__(self):
        return False


# Marks a value rejected by a `where` condition. Trees whose root is
# FILTERED are skipped during generation and never show up as children.
FILTERED = _Filtered()


class LazyTree(object):
    """A rose tree whose root is eager and whose children are computed on
    demand.

    The root is the value to be used for testing; the children are
    'smaller' values related to it, used while shrinking. The children may
    be given either as a re-iterable collection or as a function returning
    a fresh iterable, so that every access to `children` starts a new,
    independent iteration.
    """

    def __init__(self, root, children=()):
        self.root = root
        self.__children = children

    @classmethod
    def wrap(cls, value):
        return cls(value)

    @property
    def children(self):
        children = self.__children
        if callable(children):
            children = children()
        return (c for c in children if c.root is not FILTERED)

    def __repr__(self):
        return "LazyTree(%r)" % (self.root,)

    def map(self, function):
        """Apply function eagerly to the root and lazily to every child."""
        return LazyTree(
            function(self.root),
            lambda: (child.map(function) for child in self.children)
        )

    def flatten(self):
        """Turn a tree of trees into a single tree.

        Children of the root tree come before the flattened children of the
        outer tree, so shrinking the inner value is tried first.
        """
        root_tree = self.root

        def children():
            return chain(
                root_tree.children,
                (child.flatten() for child in self.children)
            )
        return LazyTree(root_tree.root, children)

    def bind(self, function):
        return self.map(function).flatten()

    def each(self):
        """Depth-first traversal: the root, then each child's traversal.

        This is lazy and potentially infinite.
        """
        if self.root is FILTERED:
            return
        yield self.root
        for child in self.children:
            yield from child.each()

    def to_list(self):
        return list(self.each())

    @classmethod
    def zip(cls, trees):
        """Combine trees into one tree of tuples.

        Each child replaces exactly one position with one of that
        position's children, keeping every other position at its root.
        """
        trees = tuple(trees)

        def children():
            for i, tree in enumerate(trees):
                for child in tree.children:
                    yield cls.zip(trees[:i] + (child,) + trees[i + 1:])
        return cls(tuple(tree.root for tree in trees), children)
