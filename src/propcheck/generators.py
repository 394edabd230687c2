"""Commonly used generators.

Every function in here returns a Generator. Numbers start small (around
zero) and become more extreme as the size grows, unless stated otherwise.
"""

import builtins
import datetime as dt
import math
import sys

from propcheck.errors import ArgumentError, GeneratorExhaustedError
from propcheck.generator import Generator
from propcheck.helper import halvings
from propcheck.lazy_tree import FILTERED, LazyTree


def constant(value):
    """Always returns the same value, regardless of size or rng."""
    return Generator.wrap(value)


def integer_tree(value, low=None, high=None):
    """A tree for value whose children move it toward zero.

    If low or high are given, the value moves toward the point of
    [low, high] closest to zero instead, and never leaves that range.
    """
    target = 0
    if low is not None and low > 0:
        target = low
    elif high is not None and high < 0:
        target = high
    return _shrink_toward(target, value, low, high)


def _shrink_toward(target, value, low, high):
    return LazyTree(
        value, lambda: _integer_shrinks(target, value, low, high))


def _integer_shrinks(target, value, low, high):
    offset = value - target
    if offset == 0:
        return
    # Below the target we first try the mirror image, as "same magnitude,
    # positive" is likely to be the simpler failing case.
    if offset < 0:
        mirror = target - offset
        if high is None or mirror <= high:
            yield _shrink_toward(target, mirror, low, high)
    for x in halvings(offset):
        yield _shrink_toward(target, target + x, low, high)


def choose(low, high):
    """A random integer in [low, high], which does not scale with size.

    This makes choose useful for picking one out of several
    possibilities; for most other purposes you probably want `integer`.
    """
    if low > high:
        raise ArgumentError(
            'choose needs low <= high but got %r > %r' % (low, high))
    return Generator(
        lambda size, rng, config: integer_tree(
            rng.randint(low, high), low, high)
    )


def integer():
    return Generator(
        lambda size, rng, config: integer_tree(rng.randint(-size, size))
    )


def nonnegative_integer():
    return integer().map(abs)


def positive_integer():
    return nonnegative_integer().map(lambda x: x + 1)


def nonpositive_integer():
    return nonnegative_integer().map(lambda x: -x)


def negative_integer():
    return positive_integer().map(lambda x: -x)


def _fraction(parts):
    a, b, c = parts
    return builtins.float(a) + builtins.float(b) / (abs(c) + 1.0)


def real_float():
    """Finite floats, built as a + b / (|c| + 1) from three integers."""
    return tuple(integer(), integer(), integer()).map(_fraction)


SPECIAL_FLOATS = (
    math.nan, math.inf, -math.inf,
    sys.float_info.max, -sys.float_info.max,
    sys.float_info.min, -sys.float_info.min,
    sys.float_info.epsilon, -sys.float_info.epsilon,
    5e-324, -5e-324,
)


def nan():
    return constant(math.nan)


def infinity():
    return one_of(constant(math.inf), constant(-math.inf))


def special_float():
    """One of SPECIAL_FLOATS. These do not shrink."""
    return Generator(
        lambda size, rng, config: LazyTree(rng.choice(SPECIAL_FLOATS)))


def float():
    """Mostly real floats, sometimes one of the SPECIAL_FLOATS.

    Special floats never shrink to other special floats, only toward real
    ones.
    """
    return frequency((99, real_float()), (1, special_float()))


def boolean():
    return one_of(constant(False), constant(True))


def none():
    return constant(None)


def one_of(*choices):
    """Picks one of choices uniformly at random. Shrinks toward earlier
    choices."""
    if not choices:
        raise ArgumentError('one_of needs at least one generator')
    return choose(0, len(choices) - 1).bind(lambda index: choices[index])


def frequency(*weighted):
    """Picks one of the (weight, generator) pairs, proportionally to the
    weights.

    Shrinking moves toward pairs given earlier, independent of their
    weights.
    """
    choices = []
    for weight, generator in weighted:
        if isinstance(weight, bool) or not isinstance(weight, int) or \
                weight <= 0:
            raise ArgumentError(
                'frequency weights must be positive integers but got %r' % (
                    weight,))
        choices.extend([generator] * weight)
    return one_of(*choices)


def optional(generator):
    """Mostly values from generator, sometimes None."""
    return frequency((9, generator), (1, none()))


def tuple(*generators):
    """Exactly one value from each of generators, in order.

    Shrinks one position at a time.
    """
    return Generator(
        lambda size, rng, config: LazyTree.zip(
            [g.generate(size, rng, config=config) for g in generators])
    )


def fixed_hash(mapping=None, **named):
    """Dicts with the given keys, each value taken from the generator under
    the same key."""
    mapping = dict(mapping or {}, **named)
    keys = list(mapping)
    return tuple(*[mapping[k] for k in keys]).map(
        lambda values: dict(zip(keys, values)))


def _length(min, max):
    if min < 0:
        raise ArgumentError('min must be nonnegative but got %r' % (min,))
    if max is None:
        return nonnegative_integer().map(lambda n: n + min)
    if min > max:
        raise ArgumentError(
            'min must not exceed max but got %r > %r' % (min, max))
    return choose(min, max)


def _identity(x):
    return x


def array(element, min=0, max=None, uniq=False):
    """Lists of values from element.

    Without max, lengths scale with size. Shrinks toward shorter lists and
    toward lists with shrunk elements.

    uniq may be True, to reject equal elements, or a function whose
    results must be distinct.
    """
    length = _length(min, max)
    if not uniq:
        return length.bind(
            lambda n: tuple(*[element] * n).map(list))
    key = _identity if uniq is True else uniq
    return length.bind(
        lambda n: _unique_elements(element, n, min, key))


def _unique_elements(element, count, min, key):
    def generate(size, rng, config):
        trees = []
        seen = []
        attempts = 0
        while len(trees) < count:
            tree = element.generate(size, rng, config=config)
            k = key(tree.root)
            if k in seen:
                attempts += 1
                if attempts >= config.max_consecutive_attempts:
                    if len(trees) >= min:
                        break
                    raise GeneratorExhaustedError((
                        'Could not generate %d unique elements after %d '
                        'consecutive duplicates (only found %d).') % (
                            count, attempts, len(trees)))
                continue
            attempts = 0
            seen.append(k)
            trees.append(tree)
        return LazyTree.zip(trees).map(
            lambda values: _unique_or_filtered(values, key))
    return Generator(generate)


def _unique_or_filtered(values, key):
    # Keys are compared by equality, so unhashable elements such as lists
    # work too.
    keys = []
    for v in values:
        k = key(v)
        if k in keys:
            return FILTERED
        keys.append(k)
    return list(values)


def set_of(element, min=0, max=None):
    return array(element, min=min, max=max, uniq=True).map(set)


def dictionary(key, value, min=0, max=None):
    """Dicts with keys from key and values from value.

    Keys are unique, so min is respected exactly.
    """
    return array(
        tuple(key, value), min=min, max=max, uniq=lambda kv: kv[0]
    ).map(dict)


def printable_ascii_char():
    return choose(32, 126).map(chr)


readable_ascii_char = printable_ascii_char


def ascii_char():
    return choose(0, 127).map(chr)


def _is_printable(c):
    return c.isprintable()


def printable_char():
    return char().where(_is_printable)


def char():
    # Surrogates can not be encoded, so they are skipped.
    return one_of(
        choose(0, 0xD7FF), choose(0xE000, sys.maxunicode)
    ).map(chr)


def _string(chars, min, max):
    return array(chars, min=min, max=max).map(''.join)


def printable_ascii_string(min=0, max=None):
    return _string(printable_ascii_char(), min, max)


readable_ascii_string = printable_ascii_string


def ascii_string(min=0, max=None):
    return _string(ascii_char(), min, max)


def printable_string(min=0, max=None):
    return _string(printable_char(), min, max)


def string(min=0, max=None):
    return _string(char(), min, max)


def _from_epoch(epoch, build):
    def generate(size, rng, config):
        base = config.epoch if epoch is None else epoch
        return build(base).generate(size, rng, config=config)
    return Generator(generate)


SECONDS_PER_DAY = 24 * 60 * 60


def date(epoch=None):
    """Dates around epoch (default: the configured default_epoch)."""
    return _from_epoch(epoch, lambda base: integer().map(
        lambda days: _as_date(base) + dt.timedelta(days=days)))


def _as_date(value):
    if isinstance(value, dt.datetime):
        return value.date()
    return value


def timedelta():
    return tuple(integer(), choose(0, SECONDS_PER_DAY - 1)).map(
        lambda ds: dt.timedelta(days=ds[0], seconds=ds[1]))


def datetime(epoch=None):
    """Datetimes around epoch (default: the configured default_epoch)."""
    return _from_epoch(epoch, lambda base: timedelta().map(
        lambda delta: _as_datetime(base) + delta))


def _as_datetime(value):
    if isinstance(value, dt.datetime):
        return value
    return dt.datetime.combine(value, dt.time())


def time():
    """Times of day, shrinking toward midnight."""
    return choose(0, SECONDS_PER_DAY - 1).map(
        lambda s: dt.time(s // 3600, (s // 60) % 60, s % 60))
