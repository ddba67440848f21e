r"""Truth tables and the evaluation of formulas under symbol mappings.

A :class:`SymbolMapping` assigns truth values to symbol names. A
:data:`TruthTable` maps each of the :math:`2^n` total mappings of the :math:`n \geq 1`
symbols of a formula to the value of the formula under that mapping. Two
formulas are *equivalent* if their truth tables are equal as dictionaries:

>>> from proplogic.propositional import And, Not, Or, Symbol
>>> X, Y = Symbol('X'), Symbol('Y')
>>> equivalent(Not(And(X, Y)), Or(Not(Y), Not(X)))
True
>>> equivalent(Or(X, Not(X)), T)
False

The last example shows that the symbols take part in the comparison: the
table of ``Or(X, Not(X))`` has a column for `X`, the table of :data:`.T` is
empty.
"""
from __future__ import annotations

from itertools import product
from typing import Any, Iterable, Iterator, Mapping, Optional, TypeAlias

from ..support.excepthook import NoTraceException
from .atomic import Symbol
from .boolean import And, Equivalent, Implies, Not, Or, conjunction, disjunction
from .forms import DNF, dnf
from .formula import Formula, ShapeInvariantViolation
from .normal import mk_normal_val
from .truth import _F, F, _T, T


class UnboundSymbolError(NoTraceException):
    """Raised when a formula is evaluated under a mapping that has no value
    for one of its symbols.
    """

    def __init__(self, symbol: str) -> None:
        super().__init__(f'no truth value for symbol {symbol!r}')
        self.symbol = symbol


class SymbolMapping(Mapping[str, bool]):
    """An immutable and hashable mapping from symbol names to truth values,
    i.e., one row of a truth table. Iteration follows the lexicographic order
    of the names.

    >>> m = SymbolMapping({'Y': False, 'X': True})
    >>> m
    SymbolMapping({'X': True, 'Y': False})
    >>> list(m.values())
    [True, False]
    >>> m == {'X': True, 'Y': False}
    True
    >>> {m: 1}[SymbolMapping(X=True, Y=False)]
    1
    """

    _items: dict[str, bool]
    _hash: Optional[int]

    def __init__(self, items: Mapping[str, bool] | Iterable[tuple[str, bool]] = (),
                 **kwargs: bool) -> None:
        d = dict(items, **kwargs)
        for name, value in d.items():
            if not isinstance(value, bool):
                raise ValueError(f'{value!r} is not a truth value for {name!r}')
        self._items = dict(sorted(d.items()))
        self._hash = None

    def __getitem__(self, name: str) -> bool:
        return self._items[name]

    def __hash__(self) -> int:
        if self._hash is None:
            self._hash = hash(frozenset(self._items.items()))
        return self._hash

    def __iter__(self) -> Iterator[str]:
        return iter(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}({self._items!r})'


TruthTable: TypeAlias = dict[SymbolMapping, bool]
"""A mapping from all total :class:`SymbolMapping` of the symbols of a
formula to the respective truth value of that formula.
"""


def symbols(f: Formula[Any]) -> frozenset[str]:
    """The set of names of all symbols occurring in `f`.

    >>> from proplogic.propositional import And, Not, Symbol
    >>> sorted(symbols(And(Symbol('Y'), Not(Symbol('X')))))
    ['X', 'Y']
    """
    def insert(g: Formula[Any], names: frozenset[str]) -> frozenset[str]:
        if isinstance(g, Symbol):
            return names | {g.name}
        return names

    return f.fold(insert, frozenset())


def _from_bool(value: bool) -> Formula[Any]:
    return T if value else F


def _to_bool(f: Formula[Any]) -> bool:
    match f:
        case _T():
            return True
        case _F():
            return False
        case _:
            raise ShapeInvariantViolation(f'{f!r} has not been reduced to a truth value')


def evaluate(mapping: Mapping[str, bool], f: Formula[Any]) -> bool:
    """Evaluate `f` under `mapping`. Raise :exc:`UnboundSymbolError` if
    `mapping` lacks a symbol of `f`. Implications and equivalences are
    evaluated via their normal form translation.

    >>> from proplogic.propositional import Implies, Not, Symbol
    >>> evaluate({'X': True}, Not(Symbol('X')))
    False
    >>> evaluate({'X': False, 'Y': False}, Implies(Symbol('X'), Symbol('Y')))
    True
    >>> evaluate({}, Symbol('X'))
    Traceback (most recent call last):
    ...
    proplogic.propositional.semantics.UnboundSymbolError: no truth value for symbol 'X'
    """
    def reduce(g: Formula[Any]) -> Formula[Any]:
        match g:
            case _T() | _F():
                return g
            case Symbol(name=name):
                try:
                    value = mapping[name]
                except KeyError:
                    raise UnboundSymbolError(name) from None
                return _from_bool(value)
            case Not(arg=_T()):
                return F
            case Not(arg=_F()):
                return T
            case And():
                return _from_bool(g.reconnect_map(lambda x, y: x and y, _to_bool))
            case Or():
                return _from_bool(g.reconnect_map(lambda x, y: x or y, _to_bool))
            case Implies() | Equivalent():
                return _from_bool(evaluate(mapping, mk_normal_val(g)))
            case _:
                raise ShapeInvariantViolation(f'cannot reduce {g!r}')

    return _to_bool(f.deep_transform(reduce))


def truth_table(f: Formula[Any]) -> TruthTable:
    """The truth table of `f`. Its rows are enumerated in the lexicographic
    order of the symbol names with :obj:`True` before :obj:`False`.

    >>> from proplogic.propositional import And, Symbol
    >>> for row, value in truth_table(And(Symbol('X'), Symbol('Y'))).items():
    ...     print(dict(row), value)
    {'X': True, 'Y': True} True
    {'X': True, 'Y': False} False
    {'X': False, 'Y': True} False
    {'X': False, 'Y': False} False

    The rows are the mappings of the symbols of `f`. A formula without
    symbols has no rows at all, so that the truth values cannot be told apart
    by their tables:

    >>> truth_table(T)
    {}
    >>> equivalent(T, F)
    True
    """
    names = sorted(symbols(f))
    table: TruthTable = {}
    if not names:
        return table
    for values in product((True, False), repeat=len(names)):
        mapping = SymbolMapping(zip(names, values))
        table[mapping] = evaluate(mapping, f)
    return table


def equivalent(f: Formula[Any], g: Formula[Any]) -> bool:
    """Test `f` and `g` for equality of their truth tables.
    """
    return truth_table(f) == truth_table(g)


def true_mappings(table: TruthTable) -> list[SymbolMapping]:
    """The rows of `table` with value :obj:`True`, i.e., the models.
    """
    return [mapping for mapping, value in table.items() if value]


def to_formula(table: TruthTable) -> Formula[DNF]:
    """A formula with truth table `table`: the disjunction over all true rows
    of the conjunction of the literals given by the row. Without true rows
    the result is :data:`.F`.

    >>> from proplogic.propositional import Or, Symbol
    >>> to_formula(truth_table(Or(Symbol('X'), Symbol('Y'))))
    Or(And(Symbol('X'), Symbol('Y')), Or(And(Symbol('X'), Not(Symbol('Y'))), And(Not(Symbol('X')), Symbol('Y'))))
    >>> to_formula({})
    F
    """
    def literal(name: str, value: bool) -> Formula[DNF]:
        return Symbol(name) if value else Not(Symbol(name))

    products = (conjunction(*(literal(name, value) for name, value in mapping.items()))
                for mapping in true_mappings(table))
    return dnf(disjunction(*products))
