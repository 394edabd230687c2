from random import Random

import click

from propcheck import generators
from propcheck.errors import ArgumentError
from propcheck.generator import Generator, check_size


def validate_generator(ctx, param, value):
    factory = getattr(generators, value, None)
    if value.startswith('_') or not callable(factory):
        raise click.BadParameter('%s: no such generator' % (value,))
    try:
        generator = factory()
    except (TypeError, ArgumentError):
        raise click.BadParameter(
            '%s: only generators that take no arguments can be sampled' % (
                value,))
    if not isinstance(generator, Generator):
        raise click.BadParameter('%s: not a generator' % (value,))
    return generator


def validate_size(ctx, param, value):
    try:
        return check_size(value)
    except ArgumentError as e:
        raise click.BadParameter(str(e))


@click.group()
def main():
    """propcheck: property based testing with shrinking."""


@main.command(
    help="""
Print sample values of one of the built-in generators, to see whether it
behaves the way you expect. NAME is the name of a generator function that
takes no arguments, e.g. 'integer' or 'printable_ascii_string'.
""".strip()
)
@click.option('--count', '-n', default=10, type=click.IntRange(min=0), help=(
    'Number of values to print'))
@click.option(
    '--size', default=Generator.default_size, type=click.INT,
    callback=validate_size, help=(
        'Size to generate at. Larger sizes produce more extreme values.'))
@click.option('--seed', default=None, type=click.INT, help=(
    'Seed for the random number generator, for reproducible output'))
@click.option('--shrinks', default=False, is_flag=True, help=(
    'Also print the first level of shrink candidates of each value'))
@click.argument('generator', metavar='NAME', callback=validate_generator)
def sample(generator, count, size, seed, shrinks):
    rng = Random(seed)
    for _ in range(count):
        tree = generator.generate(size, rng)
        click.echo(repr(tree.root))
        if shrinks:
            for child in tree.children:
                click.echo('  %r' % (child.root,))


if __name__ == '__main__':
    main()
