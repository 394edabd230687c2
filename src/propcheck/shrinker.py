from collections import namedtuple
from contextlib import closing
from enum import IntEnum
import sys

from propcheck.errors import UserError
from propcheck.hooks import Hooks


class Volume(IntEnum):
    quiet = 0
    normal = 1
    debug = 2


ShrinkResult = namedtuple(
    'ShrinkResult', ('root', 'exception', 'steps', 'shrunk'))


class Shrinker(object):
    """Walks the shrink candidates of a failing LazyTree looking for a
    smaller input that still fails.

    Whenever a child fails it becomes the new problem and its own
    children are tried next. The cursor over the siblings it was found
    among is kept in a single slot, so when the new problem has no more
    children we resume there, but only one level up.
    """

    def __init__(
        self, tree, evaluate, exception=None, *,
        max_shrink_steps=10000, volume=Volume.quiet, hooks=None,
        printer=None, io=None
    ):
        self.__evaluate = evaluate
        self.__volume = volume
        self.__hooks = hooks or Hooks()
        self.__printer = printer or (lambda s: None)
        self.__io = io or sys.stdout
        self.__status_length = 0
        self.max_shrink_steps = max_shrink_steps
        self.problem_child = tree
        self.problem_exception = exception
        self.steps = 0
        self.shrinks = 0

    def output(self, text):
        if self.__volume >= Volume.normal:
            self.__echo(text)

    def debug(self, text):
        if self.__volume >= Volume.debug:
            self.__echo(text)

    def __echo(self, text):
        self.__clear_status()
        self.__printer(text)

    def __clear_status(self):
        if self.__status_length:
            self.__io.write('\r')
            self.__io.write(' ' * self.__status_length)
            self.__io.write('\r')
            self.__status_length = 0

    def __write_status(self, text):
        self.__io.write(text)
        self.__status_length += len(text)
        self.__io.flush()

    def shrink(self):
        self.output('Shrinking...')
        siblings = self.problem_child.children
        parent_siblings = None

        budget = self.__hooks.wrap(range(self.max_shrink_steps))
        with closing(budget):
            for _ in budget:
                sibling = next(siblings, None)
                while sibling is None and parent_siblings is not None:
                    siblings = parent_siblings
                    parent_siblings = None
                    sibling = next(siblings, None)
                if sibling is None:
                    break

                self.steps += 1
                if self.__volume >= Volume.normal:
                    self.__write_status('.')

                try:
                    self.__evaluate(sibling.root)
                except UserError:
                    raise
                except Exception as e:
                    self.shrinks += 1
                    self.debug('Shrink %d (step %d): now %r' % (
                        self.shrinks, self.steps, sibling.root))
                    self.problem_child = sibling
                    self.problem_exception = e
                    parent_siblings = siblings
                    siblings = sibling.children

        self.__clear_status()
        return ShrinkResult(
            self.problem_child.root, self.problem_exception, self.steps,
            self.shrinks > 0,
        )
