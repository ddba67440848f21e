r"""Implementation of propositional formulas and of the algorithms on them that
only need their syntax tree.

An abstract base class :class:`Formula` implements representations of and
methods on propositional formulas recursively built using

1. the truth values :math:`\top` and :math:`\bot`,

2. symbols, i.e. named propositional variables,

3. negation :math:`\lnot`,

4. conjunction :math:`\land` and disjunction :math:`\lor`,

5. implication :math:`\longrightarrow` and equivalence
   :math:`\longleftrightarrow`.

Operators are mapped to classes as follows:

+--------------+--------------+----------------+---------------+---------------+--------------+-------------------------+-----------------------------+
| :math:`\top` | :math:`\bot` | symbols        | :math:`\lnot` | :math:`\land` | :math:`\lor` | :math:`\longrightarrow` | :math:`\longleftrightarrow` |
+--------------+--------------+----------------+---------------+---------------+--------------+-------------------------+-----------------------------+
| :class:`_T`  | :class:`_F`  | :class:`Symbol`| :class:`Not`  | :class:`And`  | :class:`Or`  | :class:`Implies`        | :class:`Equivalent`         |
+--------------+--------------+----------------+---------------+---------------+--------------+-------------------------+-----------------------------+

The truth values are singletons with unique instances :data:`T` and
:data:`F`:

>>> T is _T()
True

Formulas are built by calling the classes or with Python operators:

>>> X, Y = Symbol('X'), Symbol('Y')
>>> f = (X >> Y) & ~ Y
>>> f
And(Implies(Symbol('X'), Symbol('Y')), Not(Symbol('Y')))
>>> print(f)
(X --> Y) and not Y

Formulas can be evaluated, tabulated, and converted into normal forms:

>>> f.eval({'X': False, 'Y': False})
True
>>> len(truth_table(f))
4
>>> f.to_dnf()
Or(And(Not(Symbol('X')), Not(Symbol('Y'))), And(Symbol('Y'), Not(Symbol('Y'))))
>>> equivalent(f, f.to_cnf())
True
"""  # noqa

from .formula import Formula, ShapeInvariantViolation  # noqa

from .atomic import Symbol  # noqa

from .boolean import And, Equivalent, Implies, Not, Or, conjunction, disjunction  # noqa

from .truth import _T, T, _F, F  # noqa

from .forms import (Form, Fancy, Normal, NNF, CNF, DNF, FormError,  # noqa
                    assume_form, require_form, in_form, fancy, normal, nnf, cnf, dnf,
                    is_normal, is_nnf, is_cnf, is_dnf)

from .traversal import transform, deep_transform, fold_formula, reconnect, reconnect_map  # noqa

from .normal import (mk_normal, mk_nnf, mk_cnf, mk_dnf,  # noqa
                     mk_normal_val, de_morgan, double_negation, mk_cnf_val, mk_dnf_val)

from .semantics import (SymbolMapping, TruthTable, UnboundSymbolError,  # noqa
                        symbols, evaluate, truth_table, equivalent, true_mappings,
                        to_formula)


__all__ = [
    'Formula', 'Symbol', 'And', 'Equivalent', 'Implies', 'Not', 'Or', 'T', 'F',
    'conjunction', 'disjunction',

    'Form', 'Fancy', 'Normal', 'NNF', 'CNF', 'DNF', 'FormError',
    'assume_form', 'require_form', 'in_form',
    'fancy', 'normal', 'nnf', 'cnf', 'dnf',
    'is_normal', 'is_nnf', 'is_cnf', 'is_dnf',

    'transform', 'deep_transform', 'fold_formula', 'reconnect', 'reconnect_map',

    'mk_normal', 'mk_nnf', 'mk_cnf', 'mk_dnf',

    'SymbolMapping', 'TruthTable', 'UnboundSymbolError', 'ShapeInvariantViolation',
    'symbols', 'evaluate', 'truth_table', 'equivalent', 'true_mappings',
    'to_formula'
]
