import sys

from IPython.lib.pretty import pretty

from cpc import ParserError, TranslationError, parse_formula
from cpc.support import excepthook


def test_excepthook_is_installed_on_import():
    assert sys.excepthook is excepthook.excepthook


def test_excepthook_prints_message_without_traceback(capsys):
    excepthook.excepthook(ParserError, ParserError('x'), None)
    captured = capsys.readouterr()
    assert captured.err == 'ParserError: x\n'
    assert captured.out == ''


def test_excepthook_delegates_other_exceptions(monkeypatch, capsys):
    calls = []
    monkeypatch.setattr(excepthook, 'sys_excepthook',
                        lambda *args: calls.append(args))
    exc = ValueError('bad')
    excepthook.excepthook(ValueError, exc, None)
    assert calls == [(ValueError, exc, None)]
    assert capsys.readouterr().err == ''


def test_ipython_handler(capsys):
    excepthook.ipy_custom_exc(None, TranslationError, TranslationError('refused'), None)
    assert capsys.readouterr().err == 'TranslationError: refused\n'


def test_pretty_printing():
    assert pretty(parse_formula('P ∧ Q')) == "And(Atom('P'), Atom('Q'))"
    assert pretty(parse_formula('¬P')) == "Not(Atom('P'))"
