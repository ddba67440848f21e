"""Named propositional variables.
"""
from __future__ import annotations

from typing import final

from .formula import φ, Formula


@final
class Symbol(Formula[φ]):
    """A class whose instances are propositional variables. Identity is
    structural: two symbols with the same name are the same variable.

    >>> Symbol('X') == Symbol('X')
    True
    >>> Symbol('X')
    Symbol('X')
    >>> print(Symbol('X'))
    X
    >>> Symbol(1)
    Traceback (most recent call last):
    ...
    ValueError: 1 is not a valid symbol name
    """

    def __init__(self, name: str) -> None:
        super().__init__()
        if not isinstance(name, str) or not name:
            raise ValueError(f'{name!r} is not a valid symbol name')
        self._args = (name, )

    @property
    def name(self) -> str:
        """The name of the symbol.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
        """
        return self.args[0]
