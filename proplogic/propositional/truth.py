"""The truth values :data:`T` and :data:`F`.
"""
from __future__ import annotations

from typing import final, Optional

from .formula import φ, Formula


@final
class _T(Formula[φ]):
    """A singleton class whose sole instance represents the constant formula
    that is always true.

    >>> _T()
    T
    >>> _T() is _T()
    True
    """

    # This is a quite basic implementation of a singleton class. It does not
    # support subclassing.

    _instance: Optional[_T] = None

    def __init__(self) -> None:
        super().__init__()
        self._args = ()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'T'


T: _T = _T()
"""Support use as a constant without parentheses.

>>> T is _T()
True
"""


@final
class _F(Formula[φ]):
    """A singleton class whose sole instance represents the constant formula
    that is always false.

    >>> _F()
    F
    >>> _F() is _F()
    True
    """

    _instance: Optional[_F] = None

    def __init__(self) -> None:
        super().__init__()
        self._args = ()

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __repr__(self) -> str:
        return 'F'


F: _F = _F()
"""Support use as a constant without parentheses.

>>> F is _F()
True
"""
