r"""Form tags restrict the shape of formulas. They are used exclusively as the
type argument of :class:`.formula.Formula` and have no representation at run
time:

1. :class:`Fancy` -- no restriction at all;

2. :class:`Normal` -- no :class:`.Implies` and no :class:`.Equivalent`;

3. :class:`NNF` -- :class:`Normal`, and :class:`.Not` occurs only on atoms;

4. :class:`CNF` -- :class:`NNF`, and no :class:`.Or` contains an
   :class:`.And`;

5. :class:`DNF` -- :class:`NNF`, and no :class:`.And` contains an
   :class:`.Or`.

Since the tags form a class hierarchy and the type variable of
:class:`.formula.Formula` is covariant, a static type checker accepts a
``Formula[CNF]`` wherever a ``Formula[NNF]`` is expected but rejects a
``Formula[Fancy]`` there.

Python erases type arguments, so the compiler passes cannot know the form of
their input. The validators :func:`is_normal`, :func:`is_nnf`, :func:`is_cnf`,
and :func:`is_dnf` check shapes explicitly. The casts :func:`assume_form`,
:func:`fancy`, :func:`normal`, :func:`nnf`, :func:`cnf`, and :func:`dnf` only
change the static type. Their callers must make sure that the shape really
fits.

>>> from proplogic.propositional import And, Implies, Not, Or, Symbol
>>> X, Y = Symbol('X'), Symbol('Y')
>>> is_nnf(Or(Not(X), Y))
True
>>> is_nnf(Not(Or(X, Y)))
False
>>> require_form(Implies(X, Y), Normal)
Traceback (most recent call last):
...
proplogic.propositional.forms.FormError: X --> Y is not in Normal form
"""

from __future__ import annotations

from typing import Any, Callable, Final, TypeVar, cast
from typing_extensions import TypeIs

from ..support.excepthook import NoTraceException


class Form:
    """Upper bound for the form type variable of :class:`.formula.Formula`.
    Tags are never instantiated.
    """

    def __init__(self) -> None:
        raise TypeError(f'form tag {self.__class__.__name__} cannot be instantiated')


class Fancy(Form):
    """Formulas without any shape guarantee.
    """
    pass


class Normal(Fancy):
    """Formulas without :class:`.Implies` and :class:`.Equivalent`.
    """
    pass


class NNF(Normal):
    """Negation normal form: :class:`.Not` occurs only directly above
    :data:`.T`, :data:`.F`, or a :class:`.Symbol`.
    """
    pass


class CNF(NNF):
    """Conjunctive normal form: no :class:`.Or` has an :class:`.And` in its
    subtree.
    """
    pass


class DNF(NNF):
    """Disjunctive normal form: no :class:`.And` has an :class:`.Or` in its
    subtree.
    """
    pass


ψ = TypeVar('ψ', bound=Form)


class FormError(NoTraceException):
    """Raised by :func:`require_form` when a formula does not have the shape
    demanded by a form tag.
    """

    def __init__(self, formula: Formula[Any], form: type[Form]) -> None:
        super().__init__(f'{formula} is not in {form.__name__} form')
        self.formula = formula
        self.form = form


def _contains(f: Formula[Any], op: type[Formula[Any]]) -> bool:
    return f.fold(lambda g, found: found or isinstance(g, op), False)


def is_normal(f: Formula[Any]) -> TypeIs[Formula[Normal]]:
    """Test that `f` contains neither :class:`.Implies` nor
    :class:`.Equivalent`.
    """
    return not _contains(f, Implies) and not _contains(f, Equivalent)


def is_nnf(f: Formula[Any]) -> TypeIs[Formula[NNF]]:
    """Test that `f` is :class:`Normal` and that :class:`.Not` has only atoms
    as arguments.

    >>> from proplogic.propositional import Not, Symbol, T
    >>> is_nnf(Not(T)), is_nnf(Not(Not(Symbol('X'))))
    (True, False)
    """
    def misplaced_not(g: Formula[Any], found: bool) -> bool:
        return found or (isinstance(g, Not) and not Formula.is_atom(g.arg))

    return is_normal(f) and not f.fold(misplaced_not, False)


def is_cnf(f: Formula[Any]) -> TypeIs[Formula[CNF]]:
    """Test that `f` is in :class:`NNF` and that no :class:`.Or` has an
    :class:`.And` strictly inside its subtree.

    >>> from proplogic.propositional import And, Or, Symbol
    >>> X, Y, Z = Symbol('X'), Symbol('Y'), Symbol('Z')
    >>> is_cnf(And(Or(X, Y), Z)), is_cnf(Or(And(X, Y), Z))
    (True, False)
    """
    def bad_or(g: Formula[Any], found: bool) -> bool:
        return found or (isinstance(g, Or) and any(_contains(arg, And) for arg in g.args))

    return is_nnf(f) and not f.fold(bad_or, False)


def is_dnf(f: Formula[Any]) -> TypeIs[Formula[DNF]]:
    """Test that `f` is in :class:`NNF` and that no :class:`.And` has an
    :class:`.Or` strictly inside its subtree.
    """
    def bad_and(g: Formula[Any], found: bool) -> bool:
        return found or (isinstance(g, And) and any(_contains(arg, Or) for arg in g.args))

    return is_nnf(f) and not f.fold(bad_and, False)


_VALIDATORS: Final[dict[type[Form], Callable[[Formula[Any]], bool]]] = {
    Fancy: lambda f: True,
    Normal: is_normal,
    NNF: is_nnf,
    CNF: is_cnf,
    DNF: is_dnf}


def in_form(f: Formula[Any], form: type[Form]) -> bool:
    """Test whether `f` has the shape required by the tag `form`.

    >>> from proplogic.propositional import And, Or, Symbol
    >>> X, Y = Symbol('X'), Symbol('Y')
    >>> [in_form(And(X, Y), form) for form in (Fancy, Normal, NNF, CNF, DNF)]
    [True, True, True, True, True]
    """
    try:
        validator = _VALIDATORS[form]
    except KeyError:
        raise ValueError(f'{form!r} is not a form tag') from None
    return validator(f)


def assume_form(f: Formula[Any], form: type[ψ]) -> Formula[ψ]:
    """*Unchecked* cast of `f` to the form `form`. Nothing is verified; the
    caller asserts that `f` already has the required shape. Use
    :func:`require_form` where that is not certain.

    >>> from proplogic.propositional import Implies, Symbol
    >>> f = assume_form(Implies(Symbol('X'), Symbol('Y')), Normal)  # wrong
    >>> is_normal(f)
    False
    """
    return cast(Formula[ψ], f)


def require_form(f: Formula[Any], form: type[ψ]) -> Formula[ψ]:
    """Checked cast of `f` to the form `form`. Raises :exc:`FormError` if `f`
    does not have the required shape.
    """
    if not in_form(f, form):
        raise FormError(f, form)
    return assume_form(f, form)


def fancy(f: Formula[Any]) -> Formula[Fancy]:
    """Cast to :class:`Fancy`. This is always safe.
    """
    return assume_form(f, Fancy)


def normal(f: Formula[Any]) -> Formula[Normal]:
    """Unchecked cast to :class:`Normal`.
    """
    return assume_form(f, Normal)


def nnf(f: Formula[Any]) -> Formula[NNF]:
    """Unchecked cast to :class:`NNF`.
    """
    return assume_form(f, NNF)


def cnf(f: Formula[Any]) -> Formula[CNF]:
    """Unchecked cast to :class:`CNF`.
    """
    return assume_form(f, CNF)


def dnf(f: Formula[Any]) -> Formula[DNF]:
    """Unchecked cast to :class:`DNF`.
    """
    return assume_form(f, DNF)


from .formula import Formula
from .boolean import And, Equivalent, Implies, Not, Or
