"""We introduce the connectives as subclasses of :class:`.Formula`. In
contrast to the variadic :class:`And` and :class:`Or` of first-order
libraries, all connectives here take exactly one or two arguments, and no
flattening takes place. The helpers :func:`conjunction` and
:func:`disjunction` build right-nested chains from sequences.
"""
from __future__ import annotations

from typing import final

from .formula import φ, Formula


class BinaryFormula(Formula[φ]):
    """Common base of the binary connectives :class:`And`, :class:`Or`,
    :class:`Implies`, and :class:`Equivalent`.
    """

    def __init__(self, lhs: Formula[φ], rhs: Formula[φ]) -> None:
        super().__init__()
        for arg in (lhs, rhs):
            if not isinstance(arg, Formula):
                raise ValueError(f'{arg!r} is not a Formula')
        self._args = (lhs, rhs)

    @property
    def lhs(self) -> Formula[φ]:
        """The left-hand side of the connective.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[0]

    @property
    def rhs(self) -> Formula[φ]:
        """The right-hand side of the connective.

        .. seealso::
            * :attr:`args <.formula.Formula.args>` -- all arguments as a tuple
            * :attr:`op <.formula.Formula.op>` -- operator
        """
        return self.args[1]


@final
class Equivalent(BinaryFormula[φ]):
    r"""A class whose instances are equivalences in the sense that their
    toplevel operator represents the Boolean operator
    :math:`\longleftrightarrow`.

    >>> Equivalent(Symbol('X'), Not(Symbol('Y')))
    Equivalent(Symbol('X'), Not(Symbol('Y')))
    """
    pass


@final
class Implies(BinaryFormula[φ]):
    r"""A class whose instances are implications in the sense that their
    toplevel operator represents the Boolean operator :math:`\longrightarrow`.

    >>> Implies(Symbol('X'), Symbol('Y'))
    Implies(Symbol('X'), Symbol('Y'))

    .. seealso::
        * :meth:`>>, __rshift__() <.formula.Formula.__rshift__>` -- \
            infix notation of :class:`Implies`
        * :meth:`\<\<, __lshift__() <.formula.Formula.__lshift__>` -- \
            infix notation of converse :class:`Implies`
    """
    pass


@final
class And(BinaryFormula[φ]):
    r"""A class whose instances are conjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\wedge`.

    >>> And(Symbol('X'), And(Symbol('Y'), Symbol('Z')))
    And(Symbol('X'), And(Symbol('Y'), Symbol('Z')))

    .. seealso::
        * :meth:`&, __and__() <.formula.Formula.__and__>` -- \
            infix notation of :class:`And`
        * :func:`conjunction` -- conjunction of a sequence of formulas
    """

    @classmethod
    def dual(cls) -> type[Or]:
        r"""A class method yielding the class :class:`Or`, which implements
        the dual operator :math:`\vee` of :math:`\wedge`.
        """
        return Or

    @classmethod
    def neutral_element(cls) -> _T:
        r"""A class method yielding :data:`.T`, the value of an empty
        conjunction.
        """
        return _T()


@final
class Or(BinaryFormula[φ]):
    r"""A class whose instances are disjunctions in the sense that their
    toplevel operator represents the Boolean operator :math:`\vee`.

    .. seealso::
        * :meth:`|, __or__() <.formula.Formula.__or__>` -- \
            infix notation of :class:`Or`
        * :func:`disjunction` -- disjunction of a sequence of formulas
    """

    @classmethod
    def dual(cls) -> type[And]:
        r"""A class method yielding the class :class:`And`, which implements
        the dual operator :math:`\wedge` of :math:`\vee`.
        """
        return And

    @classmethod
    def neutral_element(cls) -> _F:
        r"""A class method yielding :data:`.F`, the value of an empty
        disjunction.
        """
        return _F()


@final
class Not(Formula[φ]):
    r"""A class whose instances are negated formulas in the sense that their
    toplevel operator is the Boolean operator :math:`\neg`.

    >>> Not(Symbol('X'))
    Not(Symbol('X'))

    .. seealso::
        * :meth:`~, __invert__() <.formula.Formula.__invert__>` -- \
            short notation of :class:`Not`
    """

    def __init__(self, arg: Formula[φ]) -> None:
        super().__init__()
        if not isinstance(arg, Formula):
            raise ValueError(f'{arg!r} is not a Formula')
        self._args = (arg, )

    @property
    def arg(self) -> Formula[φ]:
        r"""The one argument of the operator :math:`\neg`.
        """
        return self.args[0]


def _chain(op: type[And] | type[Or], args: tuple[Formula, ...]) -> Formula:
    if not args:
        return op.neutral_element()
    result = args[-1]
    for arg in reversed(args[:-1]):
        result = op(arg, result)
    return result


def conjunction(*args: Formula[φ]) -> Formula[φ]:
    """Right-nested :class:`And` of `args`. An empty conjunction is
    :data:`.T`, and a single argument is returned as is.

    >>> conjunction(Symbol('X'), Symbol('Y'), Symbol('Z'))
    And(Symbol('X'), And(Symbol('Y'), Symbol('Z')))
    >>> conjunction()
    T
    """
    return _chain(And, args)


def disjunction(*args: Formula[φ]) -> Formula[φ]:
    """Right-nested :class:`Or` of `args`. An empty disjunction is
    :data:`.F`, and a single argument is returned as is.

    >>> disjunction(Symbol('X'))
    Symbol('X')
    >>> disjunction()
    F
    """
    return _chain(Or, args)


from .atomic import Symbol  # noqa, used in doctests only
from .truth import _F, _T
