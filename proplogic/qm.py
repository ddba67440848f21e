"""This module :mod:`proplogic.qm` implements the generation of prime
implicants by the Quine–McCluskey algorithm [McCluskey-1956]_.

The true rows of the truth table of a formula are projected to rows of
:class:`QMVal`, one cell per symbol in the lexicographic order of the symbol
names. Rows of the same generation that have their
:attr:`QMVal.DONT_CARE` cells in the same positions and differ in exactly one
other cell are merged into a row of the next generation, in which that cell is
:attr:`QMVal.DONT_CARE`. Rows without a merge partner in their generation are
prime implicants.

>>> from proplogic.propositional import And, Not, Or, Symbol
>>> X, Y = Symbol('X'), Symbol('Y')
>>> minimize(Or(And(X, Y), And(X, Not(Y))))
[(QMVal.TRUE, QMVal.DONT_CARE)]
>>> minimize.symbols
['X', 'Y']

The selection of a minimal cover from the prime implicants is not
implemented. Still, the disjunction of all prime implicants is equivalent to
the input formula:

>>> implicants_to_formula(minimize(X >> Y), minimize.symbols)
Or(Symbol('Y'), Not(Symbol('X')))

.. [McCluskey-1956]
   E. J. McCluskey. Minimization of Boolean functions. Bell System Technical
   Journal 35(6), pp. 1417–1444, 1956.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import auto, Enum
import logging
import time
from typing import Any, Iterable, Optional, Sequence, TypeAlias

from .propositional import (Formula, Not, Symbol, SymbolMapping, conjunction,
                            disjunction, symbols, true_mappings, truth_table)
from .propositional.forms import DNF, dnf
from .support.excepthook import NoTraceException
from .support.logging import DeltaTimeFormatter, Timer

# Create logger
delta_time_formatter = DeltaTimeFormatter(
    '%(asctime)s - %(name)s - %(levelname)-5s - %(delta)s: %(message)s')

stream_handler = logging.StreamHandler()
stream_handler.setFormatter(delta_time_formatter)

logger = logging.getLogger(__name__)
logger.propagate = False
logger.addHandler(stream_handler)
logger.addFilter(lambda record: record.msg.strip() != '')
logger.setLevel(logging.WARNING)


class QMVal(Enum):
    """The value of one cell of a row in the Quine–McCluskey algorithm.
    """

    TRUE = auto()
    """The symbol is true.
    """

    FALSE = auto()
    """The symbol is false.
    """

    DONT_CARE = auto()
    """The value of the symbol does not matter.
    """

    @classmethod
    def from_bool(cls, value: bool) -> QMVal:
        return cls.TRUE if value else cls.FALSE

    def __repr__(self) -> str:
        return f'{self.__class__.__name__}.{self.name}'

    def __str__(self) -> str:
        return {QMVal.TRUE: '1', QMVal.FALSE: '0', QMVal.DONT_CARE: '-'}[self]


Row: TypeAlias = tuple[QMVal, ...]
"""One row of the Quine–McCluskey algorithm, i.e., one implicant.
"""


class TooManySymbols(NoTraceException):
    """Raised when the number of symbols of a formula exceeds the option
    `max_symbols` of :class:`QuineMcCluskey`.
    """
    pass


def row_to_str(row: Row) -> str:
    """Compact representation of `row`.

    >>> row_to_str((QMVal.TRUE, QMVal.DONT_CARE, QMVal.FALSE))
    '1-0'
    """
    return ''.join(str(cell) for cell in row)


def qm_mappings(mappings: Iterable[SymbolMapping]) -> list[Row]:
    """Project each of `mappings` to a row. Since :class:`.SymbolMapping`
    iterates its names in lexicographic order, the cells of all rows follow
    the same symbol order.

    >>> qm_mappings([SymbolMapping(X=True, Y=False)])
    [(QMVal.TRUE, QMVal.FALSE)]
    """
    return [tuple(QMVal.from_bool(value) for value in mapping.values())
            for mapping in mappings]


def is_comparable(x: Row, y: Row) -> bool:
    """Test whether `x` and `y` have :attr:`QMVal.DONT_CARE` in exactly the
    same positions.
    """
    return all((a is QMVal.DONT_CARE) == (b is QMVal.DONT_CARE) for a, b in zip(x, y))


def diff(x: Row, y: Row) -> int:
    """The number of positions in which `x` and `y` differ.
    """
    return sum(1 for a, b in zip(x, y) if a is not b)


def merge(x: Row, y: Row) -> Row:
    """Keep the cells in which `x` and `y` agree, and set all others to
    :attr:`QMVal.DONT_CARE`.

    >>> row_to_str(merge((QMVal.TRUE, QMVal.FALSE), (QMVal.TRUE, QMVal.TRUE)))
    '1-'
    """
    return tuple(a if a is b else QMVal.DONT_CARE for a, b in zip(x, y))


def covers(row: Row, mapping: SymbolMapping) -> bool:
    """Test whether the implicant `row` covers the total `mapping`, i.e.,
    whether they agree on all cells that are not :attr:`QMVal.DONT_CARE`.
    The cells of `row` refer to the names of `mapping` in lexicographic order.
    """
    return all(cell is QMVal.DONT_CARE or cell is QMVal.from_bool(value)
               for cell, value in zip(row, mapping.values()))


def implicant_to_formula(row: Row, names: Sequence[str]) -> Formula[DNF]:
    """The conjunction of literals described by `row`, where the cells of
    `row` refer to `names`.

    >>> implicant_to_formula((QMVal.FALSE, QMVal.DONT_CARE), ['X', 'Y'])
    Not(Symbol('X'))
    >>> implicant_to_formula((QMVal.DONT_CARE, QMVal.DONT_CARE), ['X', 'Y'])
    T
    """
    if len(row) != len(names):
        raise ValueError(f'{len(row)} cells do not match {len(names)} names')
    literals: list[Formula[Any]] = []
    for cell, name in zip(row, names):
        match cell:
            case QMVal.TRUE:
                literals.append(Symbol(name))
            case QMVal.FALSE:
                literals.append(Not(Symbol(name)))
            case QMVal.DONT_CARE:
                pass
    return dnf(conjunction(*literals))


def implicants_to_formula(rows: Iterable[Row], names: Sequence[str]) -> Formula[DNF]:
    """The disjunction of :func:`implicant_to_formula` over `rows`. Without
    any rows, this is :data:`.F`.
    """
    return dnf(disjunction(*(implicant_to_formula(row, names) for row in rows)))


@dataclass
class Options:
    """This class holds options that can be provided to
    :meth:`.QuineMcCluskey.__call__`.
    """

    log_level: int
    """The `log_level` of the logger used by :class:`.QuineMcCluskey`.
    """

    max_symbols: Optional[int]
    """An upper bound on the number of symbols of the input formula. The
    truth table has :math:`2^n` rows for :math:`n` symbols, so that the bound
    protects against calls that would not terminate in reasonable time.
    :obj:`None` means no bound.
    """

    def __init__(self, log_level: int = logging.NOTSET,
                 max_symbols: Optional[int] = None) -> None:
        self.log_level = log_level
        if max_symbols is not None and max_symbols < 0:
            raise ValueError(f'negative max_symbols={max_symbols}')
        self.max_symbols = max_symbols


@dataclass
class QuineMcCluskey:
    """A callable class that computes all prime implicants of a formula.
    After a call, the attributes hold the symbol order of the result and
    some statistics.

    >>> from proplogic.propositional import Or, Symbol
    >>> qm = QuineMcCluskey()
    >>> [row_to_str(row) for row in qm(Or(Symbol('X'), Symbol('Y')))]
    ['1-', '-1']
    >>> qm.generations
    [3, 2]
    >>> qm(Or(Symbol('X'), Symbol('Y')), max_symbols=1)
    Traceback (most recent call last):
    ...
    proplogic.qm.TooManySymbols: 2 symbols exceed max_symbols=1
    """

    options: Optional[Options] = None
    """The options that have been passed to :meth:`.__call__`.
    """

    symbols: Optional[list[str]] = None
    """The symbol names of the input formula in lexicographic order. The
    cells of the resulting rows refer to these names.
    """

    generations: Optional[list[int]] = None
    """The number of distinct rows in each generation, beginning with the true
    rows of the truth table.
    """

    result: Optional[list[Row]] = None
    """The prime implicants as returned by :meth:`.__call__`.
    """

    time_truth_table: Optional[float] = None
    """The time spent for computing the truth table.
    """

    time_merging: Optional[float] = None
    """The time spent for merging rows.
    """

    time_total: Optional[float] = None
    """The total time spent in :meth:`.__call__`.
    """

    def __call__(self, f: Formula[Any], **options) -> list[Row]:
        """The entry point of the callable class :class:`.QuineMcCluskey`.

        :param f:
          The input formula. It may have any form.

        :param `**options`:
          Keyword arguments with keywords corresponding to attributes of
          :class:`.Options`.

        :returns:
          The list of all prime implicants of `f` without duplicates. The
          cells of each row refer to :attr:`.symbols`. A formula without true
          rows yields the empty list.
        """
        timer = Timer()
        delta_time_formatter.set_reference_time(time.time())
        QuineMcCluskey.__init__(self)
        self.options = Options(**options)
        save_level = logger.getEffectiveLevel()
        try:
            logger.setLevel(self.options.log_level)
            logger.info(f'{self.options}')
            self.symbols = sorted(symbols(f))
            n = len(self.symbols)
            if self.options.max_symbols is not None and n > self.options.max_symbols:
                raise TooManySymbols(
                    f'{n} symbols exceed max_symbols={self.options.max_symbols}')
            truth_table_timer = Timer()
            rows = qm_mappings(true_mappings(truth_table(f)))
            self.time_truth_table = truth_table_timer.get()
            logger.info(f'{len(rows)} of {2 ** n} rows are true')
            merging_timer = Timer()
            self.result = self.prime_implicants(rows)
            self.time_merging = merging_timer.get()
            logger.info(f'found {len(self.result)} prime implicants')
        finally:
            logger.setLevel(save_level)
        self.time_total = timer.get()
        return self.result

    def prime_implicants(self, rows: Iterable[Row]) -> list[Row]:
        """Merge `rows` generation by generation as long as possible, and
        return all rows that have not been merged, without duplicates.

        >>> QuineMcCluskey().prime_implicants([])
        []
        """
        done: list[Row] = []
        todo = list(dict.fromkeys(rows))
        self.generations = []
        while todo:
            self.generations.append(len(todo))
            logger.debug(f'generation {len(self.generations)}: {len(todo)} rows')
            unmerged = list(todo)
            following: list[Row] = []
            for i, x in enumerate(todo):
                mergeable = [y for y in todo[i + 1:] if is_comparable(x, y) and diff(x, y) == 1]
                if mergeable:
                    merged = {x, *mergeable}
                    unmerged = [u for u in unmerged if u not in merged]
                    following.extend(merge(x, y) for y in mergeable)
            done.extend(unmerged)
            # Equal rows have equal merge partners, so duplicates are dropped.
            todo = list(dict.fromkeys(following))
        return list(dict.fromkeys(done))


minimize = QuineMcCluskey()
"""A ready-to-use instance of :class:`.QuineMcCluskey`.
"""


def prime_implicants(rows: Iterable[Row]) -> list[Row]:
    """All prime implicants of the function whose true rows are `rows`.

    >>> [row_to_str(r) for r in prime_implicants(qm_mappings([
    ...     SymbolMapping(X=True, Y=True), SymbolMapping(X=False, Y=True)]))]
    ['-1']
    """
    return QuineMcCluskey().prime_implicants(rows)
