from propcheck.configuration import Configuration
from propcheck.errors import ArgumentError, Error, \
    GeneratorExhaustedError, UserError
from propcheck.generator import Generator
from propcheck.hooks import Hooks
from propcheck.lazy_tree import FILTERED, LazyTree
from propcheck.property import Property, forall
from propcheck.shrinker import Shrinker, ShrinkResult, Volume
from propcheck import generators

__version__ = '0.1.0'

__all__ = [
    'ArgumentError', 'Configuration', 'Error', 'FILTERED', 'Generator',
    'GeneratorExhaustedError', 'Hooks', 'LazyTree', 'Property',
    'ShrinkResult', 'Shrinker', 'UserError', 'Volume', 'forall',
    'generators',
]
