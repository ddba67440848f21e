"""Errors caused by the input of :mod:`proplogic` derive from
:exc:`NoTraceException`: :exc:`.UnboundSymbolError`, :exc:`.FormError` and
:exc:`.TooManySymbols`. In the Python shell and in IPython they print as
``UnboundSymbolError: no truth value for symbol 'X'`` without a traceback.
Errors of :mod:`proplogic` itself are :exc:`.ShapeInvariantViolation` and keep
their traceback.
"""
import sys
from typing import Any, Optional
from types import TracebackType

import IPython


class NoTraceException(Exception):
    """Base class of the input errors of :mod:`proplogic`.
    """
    pass


def handler(exc: NoTraceException, tb: Optional[TracebackType]) -> None:
    print(f'{exc.__class__.__name__}: {exc}', file=sys.stderr, flush=True)


# Python shell

def excepthook(exc_type: type[BaseException], exc: BaseException,
               tb: Optional[TracebackType]) -> None:
    if isinstance(exc, NoTraceException):
        handler(exc, tb)
    else:
        sys_excepthook(exc_type, exc, tb)


sys_excepthook = sys.excepthook
sys.excepthook = excepthook


# IPython

def ipy_custom_exc(ipy: Any, exc_type: type[NoTraceException],
                   exc: NoTraceException, tb: TracebackType, tb_offset=None) -> None:
    handler(exc, tb)


ipy = IPython.get_ipython()
if ipy is not None:
    ipy.set_custom_exc((NoTraceException,), ipy_custom_exc)
