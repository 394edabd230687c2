from contextlib import ExitStack, contextmanager


def _nothing():
    pass


class Hooks(object):
    """Code to run before, after and around every trial and every shrink
    step of a property check.

    Hooks are immutable: the add_* methods return new Hooks.
    """

    def __init__(self, before=_nothing, after=_nothing, arounds=()):
        self.before = before
        self.after = after
        self.arounds = arounds

    def add_before(self, hook):
        old_before = self.before

        def before():
            old_before()
            hook()
        return Hooks(before, self.after, self.arounds)

    def add_after(self, hook):
        old_after = self.after

        def after():
            hook()
            old_after()
        return Hooks(self.before, after, self.arounds)

    def add_around(self, hook):
        """hook is a generator function which yields exactly once, in the
        style of contextlib.contextmanager."""
        return Hooks(
            self.before, self.after, self.arounds + (contextmanager(hook),))

    @contextmanager
    def run(self):
        with ExitStack() as stack:
            for around in self.arounds:
                stack.enter_context(around())
            self.before()
            try:
                yield
            finally:
                self.after()

    def wrap(self, iterable):
        """Yield every element of iterable while inside the hooks."""
        for element in iterable:
            with self.run():
                yield element
