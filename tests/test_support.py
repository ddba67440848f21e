# tests/test_support.py

import logging
import time

from proplogic import FormError, Implies, Normal, Symbol, UnboundSymbolError
from proplogic.support.excepthook import NoTraceException, excepthook
from proplogic.support.logging import DeltaTimeFormatter, Timer


class TestExcepthook:

    def test_input_errors_share_base(self):
        assert issubclass(UnboundSymbolError, NoTraceException)
        assert issubclass(FormError, NoTraceException)

    def test_message_without_traceback(self, capsys):
        exc = UnboundSymbolError('X')
        excepthook(type(exc), exc, None)
        assert capsys.readouterr().err == "UnboundSymbolError: no truth value for symbol 'X'\n"

    def test_form_error_message(self, capsys):
        exc = FormError(Implies(Symbol('X'), Symbol('Y')), Normal)
        excepthook(type(exc), exc, None)
        assert capsys.readouterr().err == 'FormError: X --> Y is not in Normal form\n'


class TestLogging:

    def test_delta_field(self):
        formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
        formatter.set_reference_time(time.time())
        record = logging.LogRecord('proplogic.qm', logging.INFO, __file__, 1,
                                   'found 2 prime implicants', None, None)
        assert formatter.format(record).endswith(': found 2 prime implicants')
        assert hasattr(record, 'delta')

    def test_timer_reset(self):
        timer = Timer()
        time.sleep(0.01)
        elapsed = timer.get()
        timer.reset()
        assert timer.get() <= elapsed
