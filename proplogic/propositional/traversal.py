"""Function versions of the traversal methods of :class:`.Formula`, with the
function argument first. This order suits :func:`functools.partial`:

>>> from functools import partial
>>> from proplogic.propositional import And, Not, Symbol
>>> negate_args = partial(transform, Not)
>>> negate_args(And(Symbol('X'), Symbol('Y')))
And(Not(Symbol('X')), Not(Symbol('Y')))
"""
from __future__ import annotations

from typing import Any, Callable

from .formula import A, φ, ψ, Formula


def transform(fn: Callable[[Formula[φ]], Formula[ψ]], f: Formula[φ]) -> Formula[ψ]:
    """Apply `fn` to the arguments of the toplevel operator of `f`.

    .. seealso:: :meth:`.Formula.transform`
    """
    return f.transform(fn)


def deep_transform(fn: Callable[[Formula[φ]], Formula[φ]], f: Formula[φ]) -> Formula[φ]:
    """Apply `fn` bottom-up to all nodes of `f`.

    .. seealso:: :meth:`.Formula.deep_transform`
    """
    return f.deep_transform(fn)


def fold_formula(fn: Callable[[Formula[φ], A], A], seed: A, f: Formula[φ]) -> A:
    """Reduce `f` to a single value starting from `seed`.

    .. seealso:: :meth:`.Formula.fold`
    """
    return f.fold(fn, seed)


def reconnect(fn: Callable[[Formula[φ], Formula[φ]], A], f: Formula[φ]) -> A:
    """Pass the two arguments of the binary operator of `f` to `fn`.

    .. seealso:: :meth:`.Formula.reconnect`
    """
    return f.reconnect(fn)


def reconnect_map(combine: Callable[[A, A], Any], project: Callable[[Formula[φ]], A],
                  f: Formula[φ]) -> Any:
    """Combine the projections of the two arguments of the binary operator of
    `f`.

    .. seealso:: :meth:`.Formula.reconnect_map`
    """
    return f.reconnect_map(combine, project)
