import sys

from algebra1.support.excepthook import excepthook, NoTraceException


def test_no_trace_exception_prints_message_only(capsys):
    try:
        raise NoTraceException('KeyboardInterrupt')
    except NoTraceException as exc:
        excepthook(type(exc), exc, exc.__traceback__)
    err = capsys.readouterr().err
    assert err == 'KeyboardInterrupt\n'


def test_other_exceptions_get_a_traceback(capsys):
    try:
        raise RuntimeError('boom')
    except RuntimeError as exc:
        excepthook(type(exc), exc, exc.__traceback__)
    err = capsys.readouterr().err
    assert 'Traceback' in err
    assert 'RuntimeError: boom' in err


def test_hook_is_installed():
    assert sys.excepthook is excepthook
