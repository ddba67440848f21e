"""Conversion between propositional formulas and Boolean expressions of
`SymPy <https://www.sympy.org/>`_. Symbols are mapped by name.

>>> import sympy
>>> from proplogic.propositional import Not, Symbol
>>> X, Y = Symbol('X'), Symbol('Y')
>>> to_sympy(X >> Not(Y))
Implies(X, ~Y)
>>> a, b = sympy.symbols('a b')
>>> from_sympy(sympy.Implies(a, b))
Implies(Symbol('a'), Symbol('b'))

SymPy evaluates trivial subexpressions on construction, so that
:func:`to_sympy` returns an equivalent expression, which need not have the
same shape:

>>> to_sympy(X & T)
X
"""
from __future__ import annotations

from typing import Any

import sympy
from sympy.logic import boolalg

from ..propositional import (And, Equivalent, F, Formula, Implies, Not, Or,
                             Symbol, T, conjunction, disjunction)


def to_sympy(f: Formula[Any]) -> boolalg.Boolean:
    """Convert `f` into a SymPy Boolean expression.
    """
    match f:
        case _ if f is T:
            return sympy.true
        case _ if f is F:
            return sympy.false
        case Symbol():
            return sympy.Symbol(f.name)
        case Not():
            return boolalg.Not(to_sympy(f.arg))
        case And():
            return boolalg.And(to_sympy(f.lhs), to_sympy(f.rhs))
        case Or():
            return boolalg.Or(to_sympy(f.lhs), to_sympy(f.rhs))
        case Implies():
            return boolalg.Implies(to_sympy(f.lhs), to_sympy(f.rhs))
        case Equivalent():
            return boolalg.Equivalent(to_sympy(f.lhs), to_sympy(f.rhs))
    raise ValueError(f'cannot convert {f!r} to sympy')


def from_sympy(expr: sympy.Basic) -> Formula[Any]:
    """Convert the SymPy Boolean expression `expr` into a formula. The
    n-ary operators of SymPy are nested to the right. An n-ary equivalence
    becomes the conjunction of the equivalences of neighboring arguments.

    >>> import sympy
    >>> a, b, c = sympy.symbols('a b c')
    >>> from_sympy(sympy.Or(a, b, c))
    Or(Symbol('a'), Or(Symbol('b'), Symbol('c')))
    >>> from proplogic.propositional import Equivalent, Symbol, equivalent
    >>> A, B, C = Symbol('a'), Symbol('b'), Symbol('c')
    >>> equivalent(from_sympy(sympy.Equivalent(a, b, c)),
    ...            Equivalent(A, B) & Equivalent(B, C))
    True
    >>> from_sympy(a + b)
    Traceback (most recent call last):
    ...
    ValueError: a + b is not a propositional expression
    """
    match expr:
        case boolalg.BooleanTrue():
            return T
        case boolalg.BooleanFalse():
            return F
        case sympy.Symbol():
            return Symbol(expr.name)
        case boolalg.Not():
            return Not(from_sympy(expr.args[0]))
        case boolalg.And():
            return conjunction(*(from_sympy(arg) for arg in expr.args))
        case boolalg.Or():
            return disjunction(*(from_sympy(arg) for arg in expr.args))
        case boolalg.Implies():
            lhs, rhs = expr.args
            return Implies(from_sympy(lhs), from_sympy(rhs))
        case boolalg.Equivalent():
            args = [from_sympy(arg) for arg in expr.args]
            return conjunction(*(Equivalent(x, y) for x, y in zip(args, args[1:])))
    raise ValueError(f'{expr} is not a propositional expression')
