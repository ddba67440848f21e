from __future__ import annotations

from abc import abstractmethod
from typing import (TYPE_CHECKING, Any, Callable, Final, Generic, Mapping,
                    Optional, Self, TypeVar)
from typing_extensions import TypeIs

from IPython.lib import pretty

if TYPE_CHECKING:
    from .forms import CNF, DNF, Form, NNF, Normal


φ = TypeVar('φ', bound='Form', covariant=True)
"""A type variable denoting the form tag of a formula with upper bound
:class:`.forms.Form`. It is a pure phantom: it appears in type annotations
used by static type checkers but has no run time representation.
"""

ψ = TypeVar('ψ', bound='Form')
"""A type variable denoting the form tag of a transformed formula.
"""

A = TypeVar('A')
"""A type variable denoting the accumulator type of :meth:`.Formula.fold`.
"""


class ShapeInvariantViolation(AssertionError):
    """Raised when an algorithm meets a formula of a shape that its own
    construction rules out. This indicates an error in :mod:`proplogic`
    itself, not in its input, and is never caught there.
    """
    pass


class Formula(Generic[φ]):
    r"""This abstract base class implements representations of and methods on
    propositional formulas recursively built from

    1. the truth values :math:`\top` and :math:`\bot` and named symbols,

    2. negation :math:`\lnot`,

    3. conjunction :math:`\land` and disjunction :math:`\lor`,

    4. implication :math:`\longrightarrow` and equivalence
       :math:`\longleftrightarrow`.

    Each operator is a subclass: :class:`.truth._T`, :class:`.truth._F`,
    :class:`.atomic.Symbol`, :class:`.boolean.Not`, :class:`.boolean.And`,
    :class:`.boolean.Or`, :class:`.boolean.Implies`,
    :class:`.boolean.Equivalent`. Formulas are immutable. Each node owns its
    arguments, which are formulas themselves except for the name of a symbol.

    .. note::

        :class:`Formula` depends on a type variable :data:`.φ` for the form
        tag of the formula. See :mod:`.forms` for details.
    """

    _args: tuple[Any, ...]
    _hash: Optional[int]

    @property
    def op(self) -> type[Self]:
        """Operator. This property can be used with instances of subclasses of
        :class:`Formula`. It yields the respective subclass.
        """
        return type(self)

    @property
    def args(self) -> tuple[Any, ...]:
        """The arguments of a formula as a tuple.
        """
        return self._args

    def __and__(self, other: Formula[Any]) -> Formula[Any]:
        """Override the :obj:`& <object.__and__>` operator to apply
        :class:`.boolean.And`.

        >>> Symbol('X') & Symbol('Y')
        And(Symbol('X'), Symbol('Y'))
        """
        return And(self, other)

    def __eq__(self, other: object) -> bool:
        """A recursive test for *structural* equality of `self` and `other`.

        This is not logical equivalence, for which there is
        :meth:`equivalent_to`.

        >>> Or(Symbol('X'), Symbol('Y')) == Or(Symbol('X'), Symbol('Y'))
        True
        >>> Or(Symbol('X'), Symbol('Y')) == Or(Symbol('Y'), Symbol('X'))
        False
        """
        if self is other:
            return True
        if not isinstance(other, Formula):
            return False
        if self.op is not other.op:
            return False
        if hash(self) != hash(other):
            return False
        return self.args == other.args

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash((self.op.__name__, self.args))
        return self._hash

    @abstractmethod
    def __init__(self, *args: object) -> None:
        """This abstract base class is not supposed to have instances itself.
        """
        self._hash = None

    def __invert__(self) -> Formula[Any]:
        """Override the :obj:`~ <object.__invert__>` operator to apply
        :class:`.boolean.Not`.

        >>> ~ Symbol('X')
        Not(Symbol('X'))
        """
        return Not(self)

    def __lshift__(self, other: Formula[Any]) -> Formula[Any]:
        r"""Override the :obj:`\<\< <object.__lshift__>` operator to apply
        :class:`.boolean.Implies` with reversed sides.

        >>> Symbol('X') << Symbol('Y')
        Implies(Symbol('Y'), Symbol('X'))
        """
        return Implies(other, self)

    def __or__(self, other: Formula[Any]) -> Formula[Any]:
        """Override the :obj:`| <object.__or__>` operator to apply
        :class:`.boolean.Or`.
        """
        return Or(self, other)

    def __repr__(self) -> str:
        """A representation of `self` that is suitable for use as an input.
        """
        r = self.op.__name__
        r += '('
        if self.args:
            r += self.args[0].__repr__()
            for a in self.args[1:]:
                r += ', ' + a.__repr__()
        r += ')'
        return r

    def __rshift__(self, other: Formula[Any]) -> Formula[Any]:
        """Override the :obj:`>> <object.__rshift__>` operator to apply
        :class:`.boolean.Implies`.

        >>> Symbol('X') >> Symbol('Y')
        Implies(Symbol('X'), Symbol('Y'))
        """
        return Implies(self, other)

    def __str__(self) -> str:
        """Infix representation used in printing.

        >>> X, Y, Z = Symbol('X'), Symbol('Y'), Symbol('Z')
        >>> print(Equivalent(And(X, Not(Y)), Or(Or(X, Z), T)))
        X and not Y <--> (X or Z) or T
        >>> print(Not(Implies(X, Not(Not(Y)))))
        not (X --> not not Y)
        """
        SYMBOL: Final = {
            And: 'and', Or: 'or', Implies: '-->', Equivalent: '<-->',
            Not: 'not', _F: 'F', _T: 'T'}
        PRECEDENCE: Final = {
            And: 50, Or: 50, Implies: 10, Equivalent: 10,
            Not: 99, _F: 99, _T: 99, Symbol: 99}
        SPACING: Final = ' '
        match self:
            case And() | Or() | Implies() | Equivalent():
                L = []
                for arg in self.args:
                    arg_as_str = str(arg)
                    if PRECEDENCE[self.op] >= PRECEDENCE[arg.op]:
                        arg_as_str = f'({arg_as_str})'
                    L.append(arg_as_str)
                return f'{SPACING}{SYMBOL[self.op]}{SPACING}'.join(L)
            case Not():
                arg_as_str = str(self.arg)
                if PRECEDENCE[self.arg.op] < PRECEDENCE[Not]:
                    arg_as_str = f'({arg_as_str})'
                return f'{SYMBOL[Not]}{SPACING}{arg_as_str}'
            case _F() | _T():
                return SYMBOL[self.op]
            case Symbol():
                return self.name
            case _:
                raise ShapeInvariantViolation(f'unknown operator {self.op!r}')

    def as_latex(self) -> str:
        r"""LaTeX representation as a string, which can be used elsewhere.

        >>> f = Implies(Symbol('X'), Or(Symbol('Y'), F))
        >>> f.as_latex()
        'X \\, \\longrightarrow \\, Y \\, \\vee \\, \\bot'

        .. seealso:: :meth:`_repr_latex_` -- LaTeX representation for Jupyter notebooks
        """
        SYMBOL: Final = {
            And: '\\wedge', Or: '\\vee', Implies: '\\longrightarrow',
            Equivalent: '\\longleftrightarrow', Not: '\\neg', _F: '\\bot',
            _T: '\\top'}
        PRECEDENCE: Final = {
            And: 50, Or: 50, Implies: 10, Equivalent: 10,
            Not: 99, _F: 99, _T: 99, Symbol: 99}
        SPACING: Final = ' \\, '
        match self:
            case And() | Or() | Implies() | Equivalent():
                L = []
                for arg in self.args:
                    arg_as_latex = arg.as_latex()
                    if PRECEDENCE[self.op] >= PRECEDENCE[arg.op]:
                        arg_as_latex = f'({arg_as_latex})'
                    L.append(arg_as_latex)
                return f'{SPACING}{SYMBOL[self.op]}{SPACING}'.join(L)
            case Not():
                arg_as_latex = self.arg.as_latex()
                if PRECEDENCE[self.arg.op] < PRECEDENCE[Not]:
                    arg_as_latex = f'({arg_as_latex})'
                return f'{SYMBOL[Not]}{SPACING}{arg_as_latex}'
            case _F() | _T():
                return SYMBOL[self.op]
            case Symbol():
                return self.name
            case _:
                raise ShapeInvariantViolation(f'unknown operator {self.op!r}')

    def depth(self) -> int:
        """The depth of a formula is the maximal length of a path from the root
        to an atom in the expression tree:

        >>> X, Y = Symbol('X'), Symbol('Y')
        >>> And(X, Implies(Not(X), Y)).depth()
        3

        Atoms have depth 0.
        """
        if self.is_atom(self):
            return 0
        return max(arg.depth() for arg in self.args) + 1

    def size(self) -> int:
        """The number of nodes in the expression tree.

        >>> And(Symbol('X'), Not(Symbol('Y'))).size()
        4
        """
        return self.fold(lambda _, count: count + 1, 0)

    # Generic traversal

    def transform(self, fn: Callable[[Formula[φ]], Formula[ψ]]) -> Formula[ψ]:
        """Apply `fn` to the arguments of the toplevel operator of `self` and
        rebuild with the same operator. Atoms are returned unchanged.

        >>> And(T, F).transform(Not)
        And(Not(T), Not(F))
        >>> Symbol('X').transform(Not)
        Symbol('X')
        """
        match self:
            case _T() | _F() | Symbol():
                return self  # type: ignore[return-value]
            case Not() | And() | Or() | Implies() | Equivalent():
                return self.op(*(fn(arg) for arg in self.args))
            case _:
                raise ShapeInvariantViolation(f'unknown operator {self.op!r}')

    def deep_transform(self, fn: Callable[[Formula[φ]], Formula[φ]]) -> Formula[φ]:
        """Recursively :meth:`transform` `self` beginning at the atoms, and
        finally apply `fn` to the resulting toplevel node itself. When `fn` is
        called, all arguments of its argument have been processed already.
        The traversal uses an explicit stack, so that the depth of `self` is
        not limited by the recursion limit of Python.

        >>> def swap(f):
        ...     return Or(f.rhs, f.lhs) if isinstance(f, Or) else f
        >>> Or(Symbol('X'), Or(Symbol('Y'), Symbol('Z'))).deep_transform(swap)
        Or(Or(Symbol('Z'), Symbol('Y')), Symbol('X'))
        """
        # Post-order: a node is pushed once before and once after its
        # arguments. `done` holds the processed arguments from left to right.
        stack: list[tuple[Formula[φ], bool]] = [(self, False)]
        done: list[Formula[φ]] = []
        while stack:
            node, args_done = stack.pop()
            if self.is_atom(node):
                done.append(fn(node))
            elif not args_done:
                stack.append((node, True))
                stack.extend((arg, False) for arg in reversed(node.args))
            else:
                n = len(node.args)
                processed = iter(done[-n:])
                del done[-n:]
                done.append(fn(node.transform(lambda _: next(processed))))
        return done[0]

    def fold(self, fn: Callable[[Formula[φ], A], A], seed: A) -> A:
        """Reduce `self` to a single value, beginning at the atoms. Each node
        is passed to `fn` exactly once together with the value accumulated so
        far. The order in which the arguments of a node are visited is not
        specified, so `fn` should not depend on it. Like
        :meth:`deep_transform`, this does not recurse.

        >>> f = Or(Symbol('Y'), And(Symbol('X'), Symbol('Y')))
        >>> sorted(f.fold(lambda g, names: names | {str(g)} if isinstance(g, Symbol) else names, set()))
        ['X', 'Y']
        """
        acc = seed
        stack: list[tuple[Formula[φ], bool]] = [(self, False)]
        while stack:
            node, args_done = stack.pop()
            if args_done or self.is_atom(node):
                acc = fn(node, acc)
            else:
                stack.append((node, True))
                # The last argument is on top, so it is folded first.
                stack.extend((arg, False) for arg in node.args)
        return acc

    def reconnect(self, fn: Callable[[Formula[φ], Formula[φ]], A]) -> A:
        """Pass the two arguments of a binary operator to `fn`. This replaces
        the connective by another formula constructor or by an arbitrary binary
        function.

        >>> And(Symbol('X'), Symbol('Y')).reconnect(Or)
        Or(Symbol('X'), Symbol('Y'))
        >>> Not(T).reconnect(Or)
        Traceback (most recent call last):
        ...
        proplogic.propositional.formula.ShapeInvariantViolation: reconnect requires a binary operator, not Not(T)
        """
        match self:
            case And() | Or() | Implies() | Equivalent():
                return fn(self.lhs, self.rhs)
            case _:
                raise ShapeInvariantViolation(
                    f'reconnect requires a binary operator, not {self!r}')

    def reconnect_map(self, combine: Callable[[A, A], Any], project: Callable[[Formula[φ]], A]) -> Any:
        """Like :meth:`reconnect` but first apply `project` to both arguments,
        so that `combine` need not work on formulas.

        >>> Or(T, F).reconnect_map(lambda a, b: a or b, lambda f: f is T)
        True
        """
        return self.reconnect(lambda lhs, rhs: combine(project(lhs), project(rhs)))

    # Semantics and normal forms

    def eval(self, mapping: Mapping[str, bool]) -> bool:
        """Evaluate `self` under `mapping`.

        .. seealso:: :func:`.semantics.evaluate`
        """
        from .semantics import evaluate
        return evaluate(mapping, self)

    def equivalent_to(self, other: Formula[Any]) -> bool:
        """Logical equivalence, i.e., equality of truth tables.

        .. seealso:: :func:`.semantics.equivalent`
        """
        from .semantics import equivalent
        return equivalent(self, other)

    def to_normal(self) -> Formula[Normal]:
        """Eliminate :class:`.Implies` and :class:`.Equivalent`.

        .. seealso:: :func:`.normal.mk_normal`
        """
        from .normal import mk_normal
        return mk_normal(self)

    def to_nnf(self) -> Formula[NNF]:
        """Convert to negation normal form.

        >>> Not(And(Symbol('X'), Implies(Symbol('Y'), F))).to_nnf()
        Or(Not(Symbol('X')), And(Symbol('Y'), Not(F)))
        """
        from .normal import mk_nnf, mk_normal
        return mk_nnf(mk_normal(self))

    def to_cnf(self) -> Formula[CNF]:
        """Convert to conjunctive normal form.

        >>> Or(And(Symbol('X'), Symbol('Y')), Symbol('Z')).to_cnf()
        And(Or(Symbol('X'), Symbol('Z')), Or(Symbol('Y'), Symbol('Z')))
        """
        from .normal import mk_cnf
        return mk_cnf(self.to_nnf())

    def to_dnf(self) -> Formula[DNF]:
        """Convert to disjunctive normal form.
        """
        from .normal import mk_dnf
        return mk_dnf(self.to_nnf())

    # Interactive use

    def _repr_latex_(self) -> str:
        """A LaTeX representation for Jupyter notebooks. In general, the
        underlying method :meth:`as_latex` should be used instead.
        """
        return f'$\\displaystyle {self.as_latex()}$'

    def _repr_pretty_(self, p: pretty.RepresentationPrinter, cycle: bool) -> None:
        assert not cycle
        if not self.args:
            p.text(repr(self))
            return
        op = self.__class__.__name__
        with p.group(len(op) + 1, op + '(', ')'):
            for idx, arg in enumerate(self.args):
                if idx:
                    p.text(',')
                    p.breakable()
                p.pretty(arg)

    # Type narrowing

    @staticmethod
    def is_and(f: Formula[Any]) -> TypeIs[And[Any]]:
        """Type narrowing :func:`isinstance` test for :class:`.boolean.And`.
        """
        return isinstance(f, And)

    @staticmethod
    def is_atom(f: Formula[Any]) -> TypeIs[_T[Any] | _F[Any] | Symbol[Any]]:
        """Test for :data:`.T`, :data:`.F`, and :class:`.atomic.Symbol`.
        """
        return isinstance(f, (_T, _F, Symbol))

    @staticmethod
    def is_equivalent(f: Formula[Any]) -> TypeIs[Equivalent[Any]]:
        """Type narrowing :func:`isinstance` test for
        :class:`.boolean.Equivalent`.
        """
        return isinstance(f, Equivalent)

    @staticmethod
    def is_false(f: Formula[Any]) -> TypeIs[_F[Any]]:
        """Type narrowing :func:`isinstance` test for :class:`.truth._F`.
        """
        return isinstance(f, _F)

    @staticmethod
    def is_implies(f: Formula[Any]) -> TypeIs[Implies[Any]]:
        """Type narrowing :func:`isinstance` test for :class:`.boolean.Implies`.
        """
        return isinstance(f, Implies)

    @staticmethod
    def is_not(f: Formula[Any]) -> TypeIs[Not[Any]]:
        """Type narrowing :func:`isinstance` test for :class:`.boolean.Not`.
        """
        return isinstance(f, Not)

    @staticmethod
    def is_or(f: Formula[Any]) -> TypeIs[Or[Any]]:
        """Type narrowing :func:`isinstance` test for :class:`.boolean.Or`.
        """
        return isinstance(f, Or)

    @staticmethod
    def is_symbol(f: Formula[Any]) -> TypeIs[Symbol[Any]]:
        """Type narrowing :func:`isinstance` test for :class:`.atomic.Symbol`.
        """
        return isinstance(f, Symbol)

    @staticmethod
    def is_true(f: Formula[Any]) -> TypeIs[_T[Any]]:
        """Type narrowing :func:`isinstance` test for :class:`.truth._T`.
        """
        return isinstance(f, _T)


# The following imports are intentionally late to avoid circularity.
from .atomic import Symbol
from .boolean import And, Equivalent, Implies, Not, Or
from .truth import _F, F, _T, T  # noqa, F and T used in doctests only
