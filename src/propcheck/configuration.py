from collections import namedtuple
import datetime

from propcheck.errors import ArgumentError


FIELDS = (
    'verbose', 'debug', 'n_runs', 'max_generate_attempts',
    'max_shrink_steps', 'max_consecutive_attempts', 'default_epoch', 'seed',
)

POSITIVE_FIELDS = (
    'n_runs', 'max_generate_attempts', 'max_shrink_steps',
    'max_consecutive_attempts',
)


class Configuration(namedtuple('Configuration', FIELDS)):
    """Settings for a single property check.

    Instances are immutable; use `merge` to derive a changed copy.
    A `default_epoch` of None means the current time, looked up whenever
    a date generator needs it.
    """
    __slots__ = ()

    def __new__(
        cls, verbose=False, debug=False, n_runs=100,
        max_generate_attempts=10000, max_shrink_steps=10000,
        max_consecutive_attempts=30, default_epoch=None, seed=None
    ):
        self = super().__new__(
            cls, verbose, debug, n_runs, max_generate_attempts,
            max_shrink_steps, max_consecutive_attempts, default_epoch, seed
        )
        for name in POSITIVE_FIELDS:
            value = getattr(self, name)
            if isinstance(value, bool) or not isinstance(value, int) or \
                    value <= 0:
                raise ArgumentError(
                    '%s must be a positive integer but got %r' % (
                        name, value))
        if default_epoch is not None and \
                not isinstance(default_epoch, datetime.datetime):
            raise ArgumentError(
                'default_epoch must be a datetime but got %r' % (
                    default_epoch,))
        return self

    def merge(self, **overrides):
        unknown = sorted(set(overrides) - set(FIELDS))
        if unknown:
            raise ArgumentError(
                'Unknown configuration option(s): %s' % (', '.join(unknown),))
        values = self._asdict()
        values.update(overrides)
        return Configuration(**values)

    @property
    def epoch(self):
        if self.default_epoch is None:
            return datetime.datetime.now()
        return self.default_epoch
