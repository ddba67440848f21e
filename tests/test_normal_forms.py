# tests/test_normal_forms.py

import pytest

from proplogic import (CNF, DNF, NNF, Equivalent, FormError, Formula, Implies,
                       Normal, Not, Or, Symbol, equivalent, in_form, is_cnf,
                       is_dnf, is_nnf, is_normal, mk_cnf, mk_dnf, mk_nnf,
                       mk_normal, require_form)


class TestPostconditions:
    """Each conversion yields the promised shape and keeps the truth table."""

    def test_normal(self, sample):
        g = sample.to_normal()
        assert is_normal(g)
        assert equivalent(g, sample)

    def test_nnf(self, sample):
        g = sample.to_nnf()
        assert is_nnf(g)
        assert equivalent(g, sample)

    def test_cnf(self, sample):
        g = sample.to_cnf()
        assert is_cnf(g)
        assert equivalent(g, sample)

    def test_dnf(self, sample):
        g = sample.to_dnf()
        assert is_dnf(g)
        assert equivalent(g, sample)

    def test_forms_are_nested(self, sample):
        g = sample.to_cnf()
        assert in_form(g, NNF) and in_form(g, Normal)


class TestIdempotence:

    def test_mk_normal(self, sample):
        g = mk_normal(sample)
        assert mk_normal(g) == g

    def test_mk_nnf(self, sample):
        g = mk_nnf(mk_normal(sample))
        assert mk_nnf(g) == g

    def test_mk_cnf(self, sample):
        g = sample.to_cnf()
        assert mk_cnf(g) == g

    def test_mk_dnf(self, sample):
        g = sample.to_dnf()
        assert mk_dnf(g) == g


class TestScenarios:

    def test_mk_normal_implication(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        assert mk_normal(Implies(X, Y)) == Or(Not(X), Y)

    def test_nnf_pushes_negation_to_symbols(self, symbols_xyz):
        X, Y, Z = symbols_xyz
        g = Not(Or(X, Not(Or(Y, Z)))).to_nnf()
        assert str(g) == 'not X and (Y or Z)'

    def test_equivalence_is_expanded(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        g = mk_normal(Equivalent(X, Y))
        assert not g.fold(lambda h, found: found or Formula.is_equivalent(h), False)


class TestForms:

    def test_require_form_accepts(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        f = Or(Not(X), Y)
        assert require_form(f, CNF) is f

    def test_require_form_rejects(self, symbols_xyz):
        X, Y, _ = symbols_xyz
        with pytest.raises(FormError) as excinfo:
            require_form(Implies(X, Y), Normal)
        assert excinfo.value.form is Normal
        assert str(excinfo.value) == 'X --> Y is not in Normal form'

    def test_dnf_is_not_cnf(self, symbols_xyz):
        X, Y, Z = symbols_xyz
        f = Or(X, Not(Y) & Z)
        assert is_dnf(f) and not is_cnf(f)
        with pytest.raises(FormError):
            require_form(f, CNF)
        assert require_form(f, DNF) is f

    def test_unknown_form_tag(self):
        with pytest.raises(ValueError):
            in_form(Symbol('X'), int)
