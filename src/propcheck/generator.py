from random import Random

from propcheck.configuration import Configuration
from propcheck.errors import ArgumentError, GeneratorExhaustedError
from propcheck.helper import call_splatted
from propcheck.lazy_tree import FILTERED, LazyTree


def check_size(size):
    if isinstance(size, bool) or not isinstance(size, int) or size < 0:
        raise ArgumentError(
            'size must be a nonnegative integer but got %r' % (size,))
    return size


class Generator(object):
    """A Generator wraps a function that, given a size, a random number
    generator and a Configuration, produces a LazyTree of output values.

    The root of this tree is the value to be used during testing, and the
    children are 'smaller' values related to the root, to be used while
    shrinking.
    """

    default_size = 10
    default_rng = Random()
    default_config = Configuration(max_consecutive_attempts=100)

    def __init__(self, function):
        self.__function = function

    def generate(
        self, size=None, rng=None, max_consecutive_attempts=None,
        config=None
    ):
        if size is None:
            size = self.default_size
        if rng is None:
            rng = self.default_rng
        if config is None:
            config = self.default_config
        if max_consecutive_attempts is not None:
            config = config.merge(
                max_consecutive_attempts=max_consecutive_attempts)
        check_size(size)

        for _ in range(config.max_consecutive_attempts):
            result = self.__function(size, rng, config)
            if result.root is not FILTERED:
                return result

        raise GeneratorExhaustedError((
            'Exhausted %d consecutive generation attempts.\n\n'
            'Probably too few generator results were adhering to a '
            '`where` condition.') % (config.max_consecutive_attempts,))

    def call(self, size=None, rng=None):
        """Generate a single value, dropping its shrink candidates."""
        return self.generate(size, rng).root

    def sample(self, n=10, size=None, rng=None):
        return [self.call(size, rng) for _ in range(n)]

    @classmethod
    def wrap(cls, value):
        """A generator that always returns value and never shrinks."""
        return cls(lambda size, rng, config: LazyTree.wrap(value))

    def bind(self, function):
        """Compose with a generator that depends on this one's output.

        function receives a generated value and returns a Generator.
        Shrinking the inner generator's value is tried before shrinking
        this one's.
        """
        def generate(size, rng, config):
            outer = self.generate(size, rng, config=config)
            return outer.bind(
                lambda value: function(value).generate(
                    size, rng, config=config)
            )
        return Generator(generate)

    def map(self, function):
        return Generator(
            lambda size, rng, config: self.generate(
                size, rng, config=config).map(function)
        )

    def where(self, condition):
        """Only produce (and shrink to) values for which condition holds.

        Dict values are passed to condition as keyword arguments.
        """
        def check(value):
            if call_splatted(condition, value):
                return value
            return FILTERED
        return self.map(check)

    def resize(self, function):
        """Transform the size before it is passed on to this generator."""
        return Generator(
            lambda size, rng, config: self.generate(
                function(size), rng, config=config)
        )

    def with_config(self, **overrides):
        """Run this generator with overrides merged into its
        Configuration."""
        Configuration().merge(**overrides)
        return Generator(
            lambda size, rng, config: self.generate(
                size, rng, config=config.merge(**overrides))
        )
