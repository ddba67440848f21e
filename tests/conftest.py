# tests/conftest.py

"""Shared fixtures for the proplogic tests.

The fixture `sample` runs a test once for each formula in :data:`SAMPLES`.
The samples cover all operators, truth values inside connectives, nested
negations and formulas without true rows.
"""

import sys
from pathlib import Path

import pytest

# Ensure the project can be imported without installation
project_root = Path(__file__).parent.parent
if str(project_root) not in sys.path:
    sys.path.insert(0, str(project_root))

from proplogic import And, Equivalent, F, Implies, Not, Or, Symbol, T  # noqa: E402

X, Y, Z = Symbol('X'), Symbol('Y'), Symbol('Z')

SAMPLES = [
    T,
    F,
    X,
    Not(X),
    Not(Not(X)),
    And(X, Y),
    Or(X, Not(Y)),
    Implies(X, Y),
    Equivalent(X, Y),
    Not(And(X, Or(Y, Not(Z)))),
    And(Implies(X, Y), Not(Y)),
    Equivalent(Implies(X, Y), Or(Not(Z), X)),
    Not(Not(Or(X, Y))),
    Or(And(X, Y), And(Not(X), Z)),
    And(Or(X, Y), And(Or(Not(X), Z), Or(Y, Not(Z)))),
    And(Or(X, T), F),
    Not(Equivalent(X, Not(Y))),
    And(X, Not(X)),
    Or(X, Not(X)),
    Implies(Equivalent(X, Y), Equivalent(Y, Z)),
]


@pytest.fixture(params=SAMPLES, ids=str)
def sample(request):
    """One formula of :data:`SAMPLES`."""
    return request.param


@pytest.fixture
def symbols_xyz():
    """The symbols X, Y and Z."""
    return X, Y, Z
