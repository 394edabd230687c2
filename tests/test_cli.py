from random import Random

from click.testing import CliRunner

from propcheck import generators as g
from propcheck.__main__ import main
from propcheck.generator import Generator


def sample(*args):
    return CliRunner().invoke(main, ['sample'] + list(args))


def test_prints_count_values():
    result = sample('integer', '--count', '5', '--seed', '1')
    assert result.exit_code == 0
    values = result.output.splitlines()
    assert len(values) == 5
    assert all(-10 <= int(v) <= 10 for v in values)


def test_size_is_respected():
    result = sample('nonnegative_integer', '--size', '3', '--seed', '2')
    assert result.exit_code == 0
    assert all(0 <= int(v) <= 3 for v in result.output.splitlines())


def test_same_seed_same_output():
    assert sample('printable_ascii_string', '--seed', '11').output == \
        sample('printable_ascii_string', '--seed', '11').output


def test_shrinks_are_indented():
    result = sample(
        'positive_integer', '--count', '1', '--size', '1000', '--seed', '3',
        '--shrinks')
    assert result.exit_code == 0
    lines = result.output.splitlines()
    assert not lines[0].startswith(' ')
    assert all(line.startswith('  ') for line in lines[1:])


def test_unknown_generator():
    result = sample('no_such_thing')
    assert result.exit_code == 2
    assert 'no such generator' in result.output


def test_generator_needing_arguments():
    result = sample('choose')
    assert result.exit_code == 2
    assert 'take no arguments' in result.output


def test_negative_size():
    result = sample('integer', '--size', '-1')
    assert result.exit_code == 2


def test_seed_is_an_integer():
    result = sample('integer', '--count', '5', '--seed', '1')
    expected = g.integer().sample(5, Generator.default_size, Random(1))
    assert result.output.splitlines() == [repr(v) for v in expected]


def test_non_integer_seed():
    result = sample('integer', '--seed', 'x')
    assert result.exit_code == 2
