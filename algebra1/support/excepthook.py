import sys
from types import TracebackType
from typing import Optional


class NoTraceException(Exception):
    """Raised by :func:`algebra1.sqf.sqf` when a factorization is interrupted
    from the keyboard. The hook installed by this module reports it with its
    message only.
    """
    pass


def excepthook(exc_type: type[BaseException], exc: BaseException,
               tb: Optional[TracebackType]) -> None:
    if isinstance(exc, NoTraceException):
        print(exc, file=sys.stderr, flush=True)
    else:
        sys.__excepthook__(exc_type, exc, tb)


sys.excepthook = excepthook
