from contextlib import closing
import copy
from random import Random

import click

from propcheck import generators, output_formatter
from propcheck.configuration import Configuration
from propcheck.errors import ArgumentError, GeneratorExhaustedError, \
    UserError
from propcheck.hooks import Hooks
from propcheck.lazy_tree import FILTERED
from propcheck.shrinker import Shrinker, Volume


class Property(object):
    """A check that a function succeeds for all generated inputs.

    Generators are given either positionally, in which case the checked
    function is called with positional arguments, or by name, in which
    case it is called with keyword arguments. All the with_* and hook
    methods return a new Property and leave this one unchanged.
    """

    default_config = Configuration()

    def __init__(self, *generators, **named_generators):
        if not generators and not named_generators:
            raise ArgumentError('No generators specified!')
        if generators and named_generators:
            raise ArgumentError(
                'Generators must be given either positionally or by name, '
                'not both')
        self.generators = generators
        self.named_generators = named_generators
        self.conditions = ()
        self.config = self.default_config
        self.hooks = Hooks()
        self.printer = click.echo

    @classmethod
    def forall(cls, *generators, **named_generators):
        return cls(*generators, **named_generators)

    def __changed(self, **attributes):
        result = copy.copy(self)
        for name, value in attributes.items():
            setattr(result, name, value)
        return result

    def with_config(self, **overrides):
        return self.__changed(config=self.config.merge(**overrides))

    def where(self, condition):
        """Only check inputs for which condition returns a true value.

        condition is called with the generated values the same way the
        checked function is.
        """
        return self.__changed(conditions=self.conditions + (condition,))

    def before(self, hook):
        return self.__changed(hooks=self.hooks.add_before(hook))

    def after(self, hook):
        return self.__changed(hooks=self.hooks.add_after(hook))

    def around(self, hook):
        return self.__changed(hooks=self.hooks.add_around(hook))

    def call_with_bindings(self, function, bindings):
        if self.named_generators:
            return function(**bindings)
        return function(*bindings)

    def bindings_generator(self):
        if self.named_generators:
            generator = generators.fixed_hash(self.named_generators)
        else:
            generator = generators.tuple(*self.generators)
        if not self.conditions:
            return generator

        def adhering(bindings):
            for condition in self.conditions:
                if not self.call_with_bindings(condition, bindings):
                    return FILTERED
            return bindings
        return generator.map(adhering)

    def check(self, function):
        """Run function on up to n_runs generated inputs.

        If it raises, the input is shrunk and the exception for the
        smallest failing input is re-raised, with a report attached.
        Returns the number of successful runs.
        """
        config = self.config
        generator = self.bindings_generator()
        n_successful = 0
        failure = None

        attempts = self.__attempts(generator, Random(config.seed))
        with closing(attempts):
            for tree in attempts:
                try:
                    self.call_with_bindings(function, tree.root)
                except UserError:
                    raise
                except Exception as problem:
                    failure = (tree, problem)
                    break
                n_successful += 1

        if failure is not None:
            tree, problem = failure
            self.__report_failure(function, tree, problem, n_successful)

        if n_successful < config.n_runs:
            raise GeneratorExhaustedError((
                'Could not perform `n_runs = %d` runs (exhausted %d tries) '
                'because too few generator results were adhering to the '
                '`where` condition.\n\nTry refining your generators '
                'instead.') % (config.n_runs, config.max_generate_attempts))
        return n_successful

    def __attempts(self, generator, rng):
        config = self.config
        size = 1
        budget = self.hooks.wrap(
            range(min(config.n_runs, config.max_generate_attempts)))
        with closing(budget):
            for _ in budget:
                yield generator.generate(size, rng, config=config)
                size += 1

    def __volume(self):
        if self.config.debug:
            return Volume.debug
        if self.config.verbose:
            return Volume.normal
        return Volume.quiet

    def __report_failure(self, function, tree, problem, n_successful):
        config = self.config
        volume = self.__volume()
        report = output_formatter.pre_output(n_successful, tree.root, problem)
        if volume >= Volume.normal:
            self.printer(report)

        shrinker = Shrinker(
            tree, lambda root: self.call_with_bindings(function, root),
            problem, max_shrink_steps=config.max_shrink_steps,
            volume=volume, hooks=self.hooks, printer=self.printer,
        )
        result = shrinker.shrink()

        conclusion = output_formatter.post_output(
            result, config.max_shrink_steps)
        if volume >= Volume.normal:
            self.printer(conclusion)

        exception = result.exception
        exception.prop_check_info = {
            'original_input': tree.root,
            'original_exception_message': str(problem),
            'shrunken_input': result.root,
            'shrunken_exception': exception,
            'n_successful': n_successful,
            'n_shrink_steps': result.steps,
        }
        exception.add_note(report + conclusion)
        raise exception


def forall(*generators, **named_generators):
    return Property.forall(*generators, **named_generators)
