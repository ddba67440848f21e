# tests/test_interop_sympy.py

import pytest
import sympy

from proplogic import (And, Equivalent, F, Implies, Not, Or, Symbol, T, is_cnf, is_dnf,
                       truth_table)
from proplogic.interop.sympy import from_sympy, to_sympy

X, Y, Z = Symbol('X'), Symbol('Y'), Symbol('Z')

WITHOUT_CONSTANTS = [
    Implies(X, Y),
    Equivalent(X, Y),
    Not(And(X, Or(Y, Not(Z)))),
    Equivalent(Implies(X, Y), Or(Not(Z), X)),
    Or(And(X, Y), And(Not(X), Z)),
]


def _agree(f, g):
    """Test that `g` has the value of `f` in each row of the truth table of `f`."""
    return all(g.eval(mapping) == value for mapping, value in truth_table(f).items())


class TestToSympy:

    def test_evaluation(self, sample):
        expr = to_sympy(sample)
        for mapping, value in truth_table(sample).items():
            substitution = {sympy.Symbol(name): v for name, v in mapping.items()}
            assert bool(expr.subs(substitution)) == value

    def test_round_trip(self, sample):
        assert _agree(sample, from_sympy(to_sympy(sample)))


class TestFromSympy:

    @pytest.mark.parametrize("f", WITHOUT_CONSTANTS, ids=str)
    def test_cnf(self, f):
        g = from_sympy(sympy.to_cnf(to_sympy(f)))
        assert is_cnf(g)
        assert _agree(f, g)

    @pytest.mark.parametrize("f", WITHOUT_CONSTANTS, ids=str)
    def test_dnf(self, f):
        g = from_sympy(sympy.to_dnf(to_sympy(f)))
        assert is_dnf(g)
        assert _agree(f, g)

    def test_truth_values(self):
        assert from_sympy(sympy.true) is T
        assert from_sympy(sympy.false) is F

    def test_not_propositional(self):
        x = sympy.Symbol('x')
        with pytest.raises(ValueError):
            from_sympy(x < 1)
