# tests/test_qm.py

import logging

import pytest

from proplogic import And, F, Not, Or, T, symbols, true_mappings, truth_table
from proplogic.qm import (Options, QMVal, QuineMcCluskey, TooManySymbols, covers, diff,
                          implicants_to_formula, is_comparable, logger, merge, minimize,
                          qm_mappings, row_to_str)

TRUE, FALSE, DONT_CARE = QMVal.TRUE, QMVal.FALSE, QMVal.DONT_CARE


class TestRows:

    def test_str(self):
        assert [str(v) for v in QMVal] == ['1', '0', '-']

    def test_comparable(self):
        assert is_comparable((TRUE, DONT_CARE), (FALSE, DONT_CARE))
        assert not is_comparable((TRUE, DONT_CARE), (DONT_CARE, TRUE))

    @pytest.mark.parametrize("x, y, expected", [
        ((TRUE, TRUE), (TRUE, TRUE), 0),
        ((TRUE, FALSE), (TRUE, TRUE), 1),
        ((TRUE, DONT_CARE), (FALSE, TRUE), 2),
    ])
    def test_diff(self, x, y, expected):
        assert diff(x, y) == expected

    def test_merge(self):
        assert merge((TRUE, FALSE, TRUE), (TRUE, TRUE, TRUE)) == (TRUE, DONT_CARE, TRUE)

    def test_symbol_order(self, symbols_xyz):
        X, Y, Z = symbols_xyz
        rows = qm_mappings(true_mappings(truth_table(And(Z, And(Not(Y), X)))))
        assert rows == [(TRUE, FALSE, TRUE)]


class TestMinimize:

    def test_merge_scenario(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        assert minimize(Or(And(X, Y), And(X, Not(Y)))) == [(TRUE, DONT_CARE)]
        assert minimize.symbols == ['X', 'Y']

    def test_soundness(self, sample):
        table = truth_table(sample)
        for row in minimize(sample):
            for mapping, value in table.items():
                if covers(row, mapping):
                    assert value

    def test_coverage(self, sample):
        implicants = minimize(sample)
        for mapping in true_mappings(truth_table(sample)):
            assert any(covers(row, mapping) for row in implicants)

    def test_no_duplicates(self, sample):
        implicants = minimize(sample)
        assert len(set(implicants)) == len(implicants)

    def test_primality(self, sample):
        implicants = minimize(sample)
        for x in implicants:
            for y in implicants:
                assert not (is_comparable(x, y) and diff(x, y) == 1)

    def test_disjunction_of_implicants(self, sample):
        g = implicants_to_formula(minimize(sample), minimize.symbols)
        for mapping, value in truth_table(sample).items():
            assert g.eval(mapping) == value

    def test_contradiction(self, symbols_xyz):
        X, _, _ = symbols_xyz
        assert minimize(And(X, Not(X))) == []
        assert minimize(F) == []

    def test_tautology(self, symbols_xyz):
        X, _, _ = symbols_xyz
        assert minimize(Or(X, Not(X))) == [(DONT_CARE,)]
        assert minimize(T) == []

    def test_three_symbols(self, symbols_xyz):
        X, Y, Z = symbols_xyz
        f = Or(And(X, Y), And(Not(X), Z))
        assert sorted(row_to_str(row) for row in minimize(f)) == ['-11', '0-1', '11-']


class TestOptions:

    def test_statistics(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        qm = QuineMcCluskey()
        qm(Or(X, Y))
        assert qm.generations == [3, 2]
        assert qm.time_total >= 0.0
        assert qm.result == [(TRUE, DONT_CARE), (DONT_CARE, TRUE)]

    def test_state_is_reset(self, symbols_xyz):
        X, _, _ = symbols_xyz
        qm = QuineMcCluskey()
        qm(X, max_symbols=3)
        qm(X)
        assert qm.options == Options()

    def test_max_symbols(self, sample):
        if not symbols(sample):
            pytest.skip('no symbols')
        with pytest.raises(TooManySymbols):
            minimize(sample, max_symbols=len(symbols(sample)) - 1)
        minimize(sample, max_symbols=len(symbols(sample)))

    def test_negative_max_symbols(self):
        with pytest.raises(ValueError):
            Options(max_symbols=-1)

    def test_log_level_is_restored(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        level = logger.level
        minimize(And(X, Y), log_level=logging.CRITICAL)
        assert logger.level == level
