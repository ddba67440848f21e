__version__ = 0.1

from . import propositional

from .propositional import *  # noqa

from .qm import QMVal, QuineMcCluskey, TooManySymbols, minimize, prime_implicants  # noqa

__all__ = propositional.__all__ + [
    'QMVal', 'QuineMcCluskey', 'TooManySymbols', 'minimize', 'prime_implicants'
]
