# tests/test_semantics.py

import pytest

from proplogic import (And, F, Not, Or, ShapeInvariantViolation, Symbol, SymbolMapping, T,
                       UnboundSymbolError, disjunction, equivalent, evaluate,
                       is_dnf, symbols, to_formula, true_mappings, truth_table)


class TestTruthTable:

    def test_size(self, sample):
        n = len(symbols(sample))
        assert len(truth_table(sample)) == (2 ** n if n else 0)

    def test_rows_are_total(self, sample):
        for mapping in truth_table(sample):
            assert set(mapping) == symbols(sample)

    def test_conjunction(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        assert truth_table(And(X, Y)) == {
            SymbolMapping(X=True, Y=True): True,
            SymbolMapping(X=True, Y=False): False,
            SymbolMapping(X=False, Y=True): False,
            SymbolMapping(X=False, Y=False): False}

    def test_without_symbols(self):
        assert truth_table(T) == {}
        assert truth_table(And(T, Not(F))) == {}
        assert equivalent(T, F)


class TestEvaluation:

    def test_negation(self, symbols_xyz):
        X, _, _ = symbols_xyz
        assert Not(X).eval({'X': False}) is True
        assert evaluate(SymbolMapping(X=True), Not(X)) is False

    def test_agrees_with_table(self, sample):
        for mapping, value in truth_table(sample).items():
            assert sample.eval(mapping) == value

    def test_unbound_symbol(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        with pytest.raises(UnboundSymbolError) as excinfo:
            evaluate({'X': True}, Or(X, Y))
        assert excinfo.value.symbol == 'Y'

    def test_extra_symbols_are_ignored(self, symbols_xyz):
        X, _, _ = symbols_xyz
        assert X.eval({'X': True, 'Q': False}) is True

    def test_invalid_truth_value(self):
        with pytest.raises(ValueError):
            SymbolMapping(X=1)


class TestEquivalence:

    def test_reflexive(self, sample):
        assert equivalent(sample, sample)

    def test_symmetric(self, sample, symbols_xyz):
        X, Y, _ = symbols_xyz
        for other in (Or(Not(X), Y), sample.to_dnf(), And(X, Not(X))):
            assert equivalent(sample, other) == equivalent(other, sample)

    def test_transitive(self, sample):
        cnf, dnf = sample.to_cnf(), sample.to_dnf()
        assert equivalent(sample, cnf) and equivalent(cnf, dnf)
        assert equivalent(sample, dnf)

    def test_de_morgan(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        assert Not(And(X, Y)).equivalent_to(Or(Not(X), Not(Y)))
        assert Not(And(X, Y)) != Or(Not(X), Not(Y))

    def test_symbols_matter(self, symbols_xyz):
        X, _, _ = symbols_xyz
        assert not equivalent(Or(X, Not(X)), T)


class TestToFormula:

    def test_round_trip(self, sample):
        table = truth_table(sample)
        g = to_formula(table)
        assert is_dnf(g)
        if true_mappings(table):
            assert truth_table(g) == table
        else:
            assert g is F
            assert truth_table(g) == {}

    def test_contradiction(self, symbols_xyz):
        X, _, _ = symbols_xyz
        assert to_formula(truth_table(And(X, Not(X)))) is F


class TestDeepFormulas:
    """Long right-nested chains as built by :func:`to_formula`."""

    @staticmethod
    def _literals(n):
        return [Symbol(f'X{i}') for i in range(n)]

    def test_round_trip_with_255_true_rows(self):
        table = truth_table(disjunction(*self._literals(8)))
        assert len(true_mappings(table)) == 255
        assert truth_table(to_formula(table)) == table

    def test_nine_symbols(self):
        table = truth_table(disjunction(*self._literals(9)))
        g = to_formula(table)
        rows = list(table)
        for mapping in rows[::64] + rows[-1:]:
            assert g.eval(mapping) == table[mapping]

    def test_evaluate_long_disjunction(self):
        f = disjunction(*self._literals(1000))
        assert len(symbols(f)) == 1000
        mapping = {f'X{i}': i == 999 for i in range(1000)}
        assert evaluate(mapping, f) is True
        assert evaluate(dict.fromkeys(mapping, False), f) is False

    def test_dnf_of_long_disjunction(self):
        g = to_formula(truth_table(disjunction(*self._literals(9))))
        h = g.to_dnf()
        assert is_dnf(h)
        assert h.size() == g.size()


class TestShapes:

    def test_symbol_name(self):
        with pytest.raises(ValueError):
            Symbol('')

    def test_reconnect_requires_binary_operator(self, symbols_xyz):
        X, _, _ = symbols_xyz
        with pytest.raises(ShapeInvariantViolation):
            Not(X).reconnect(lambda lhs, rhs: lhs)

    def test_reconnect_map(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        assert And(X, Y).reconnect_map(lambda a, b: a + b, lambda f: f.size()) == 2

    def test_structural_equality_and_hash(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        assert And(X, Y) == And(Symbol('X'), Symbol('Y'))
        assert len({And(X, Y), And(X, Y), And(Y, X)}) == 2
