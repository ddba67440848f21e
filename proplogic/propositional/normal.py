"""Normal form computation as a chain of passes

    Fancy --mk_normal--> Normal --mk_nnf--> NNF --mk_cnf--> CNF
                                                \\--mk_dnf--> DNF

Each pass is a *flat* rewrite rule, which only looks at the toplevel node of
its argument, driven bottom-up by :meth:`.Formula.deep_transform`. A rule sees
a node only after all its subformulas have been rewritten, so that one sweep
suffices as long as a rule does not reintroduce its own pattern above the
node it rewrites. Where a rule creates new instances of its pattern below the
node, it reapplies itself there via :meth:`.Formula.transform`.

The passes normalize shapes only. Truth values are kept as they are:

>>> from proplogic.propositional import And, Or, Symbol, T
>>> mk_cnf(Or(And(Symbol('X'), T), Symbol('Y')))
And(Or(Symbol('X'), Symbol('Y')), Or(T, Symbol('Y')))
"""
from __future__ import annotations

from typing import Any

from .boolean import And, Equivalent, Implies, Not, Or
from .forms import CNF, DNF, Fancy, NNF, Normal, cnf, dnf, nnf, normal
from .formula import Formula


def mk_normal_val(f: Formula[Any]) -> Formula[Any]:
    """Translate :class:`.Implies` and :class:`.Equivalent` at the toplevel of
    `f` into :class:`.Not`, :class:`.And`, and :class:`.Or`. This is a flat
    rule meant for :meth:`.Formula.deep_transform`.

    >>> from proplogic.propositional import Symbol
    >>> X, Y = Symbol('X'), Symbol('Y')
    >>> mk_normal_val(Equivalent(X, Y))
    And(Or(Not(Symbol('X')), Symbol('Y')), Or(Not(Symbol('Y')), Symbol('X')))
    """
    match f:
        case Implies(lhs=x, rhs=y):
            return Or(Not(x), y)
        case Equivalent(lhs=x, rhs=y):
            return And(Implies(x, y), Implies(y, x)).transform(mk_normal_val)
        case _:
            return f


def mk_normal(f: Formula[Fancy]) -> Formula[Normal]:
    """Convert a :class:`.Fancy` formula into an equivalent :class:`.Normal`
    one. Formulas of all other forms are :class:`.Normal` already.

    >>> from proplogic.propositional import Symbol
    >>> mk_normal(Implies(Symbol('X'), Symbol('Y')))
    Or(Not(Symbol('X')), Symbol('Y'))
    """
    return normal(f.deep_transform(mk_normal_val))


def de_morgan(f: Formula[Any]) -> Formula[Any]:
    """Move a :class:`.Not` at the toplevel of `f` into a conjunction or
    disjunction by De Morgan's laws. The fresh negations are rewritten in
    turn, which handles chains of negated connectives. This is a flat rule
    meant for :meth:`.Formula.deep_transform`.

    >>> from proplogic.propositional import Symbol
    >>> X, Y, Z = Symbol('X'), Symbol('Y'), Symbol('Z')
    >>> de_morgan(Not(Or(X, And(Y, Z))))
    And(Not(Symbol('X')), Or(Not(Symbol('Y')), Not(Symbol('Z'))))
    """
    match f:
        case Not(arg=And() | Or() as arg):
            return arg.dual()(Not(arg.lhs), Not(arg.rhs)).transform(de_morgan)
        case _:
            return f


def double_negation(f: Formula[Any]) -> Formula[Any]:
    """Remove a double :class:`.Not` at the toplevel of `f`. This is a flat
    rule meant for :meth:`.Formula.deep_transform`.
    """
    match f:
        case Not(arg=Not(arg=x)):
            return x
        case _:
            return f


def mk_nnf(f: Formula[Normal]) -> Formula[NNF]:
    """Convert a :class:`.Normal` formula into an equivalent formula in
    :class:`.NNF`. Formulas in :class:`.CNF` or :class:`.DNF` are in
    :class:`.NNF` already.

    De Morgan's laws are applied in a first sweep and the double negations
    that this creates are removed in a second one. Doing both in one sweep
    would leave double negations behind in nestings like ``not not (X and
    Y)``.

    >>> from proplogic.propositional import Symbol
    >>> mk_nnf(Not(Not(And(Symbol('X'), Symbol('Y')))))
    And(Symbol('X'), Symbol('Y'))
    """
    return nnf(f.deep_transform(de_morgan).deep_transform(double_negation))


def mk_cnf_val(f: Formula[Any]) -> Formula[Any]:
    """Make sure that the toplevel :class:`.Or` of `f` has no :class:`.And`
    argument by the distributive law. This is a flat rule meant for
    :meth:`.Formula.deep_transform`.
    """
    match f:
        case Or(lhs=And() as x, rhs=y):
            return x.transform(lambda arg: mk_cnf_val(Or(arg, y)))
        case Or(lhs=y, rhs=And() as x):
            return mk_cnf_val(Or(x, y))
        case _:
            return f


def mk_cnf(f: Formula[NNF]) -> Formula[CNF]:
    """Convert a formula in :class:`.NNF` into an equivalent formula in
    :class:`.CNF`.

    >>> from proplogic.propositional import Symbol
    >>> X, Y, Z = Symbol('X'), Symbol('Y'), Symbol('Z')
    >>> mk_cnf(Or(X, And(Y, Z)))
    And(Or(Symbol('Y'), Symbol('X')), Or(Symbol('Z'), Symbol('X')))
    """
    return cnf(f.deep_transform(mk_cnf_val))


def mk_dnf_val(f: Formula[Any]) -> Formula[Any]:
    """Make sure that the toplevel :class:`.And` of `f` has no :class:`.Or`
    argument by the distributive law. This is a flat rule meant for
    :meth:`.Formula.deep_transform`.
    """
    match f:
        case And(lhs=Or() as x, rhs=y):
            return x.transform(lambda arg: mk_dnf_val(And(arg, y)))
        case And(lhs=y, rhs=Or() as x):
            return mk_dnf_val(And(x, y))
        case _:
            return f


def mk_dnf(f: Formula[NNF]) -> Formula[DNF]:
    """Convert a formula in :class:`.NNF` into an equivalent formula in
    :class:`.DNF`.

    >>> from proplogic.propositional import Symbol
    >>> X, Y, Z = Symbol('X'), Symbol('Y'), Symbol('Z')
    >>> mk_dnf(And(Or(X, Y), Z))
    Or(And(Symbol('X'), Symbol('Z')), And(Symbol('Y'), Symbol('Z')))
    """
    return dnf(f.deep_transform(mk_dnf_val))
