import inspect
import sys
from typing import Any


_debug_trace = False


def set_debug_trace(b: bool):
    global _debug_trace
    _debug_trace = b


def printf(format: str, *args: Any):
    print(format.format(*args), end="")


def printf_err(format: str, *args: Any):
    print(format.format(*args), end="", file=sys.stderr)


def debugf(format: str, *args: Any):
    if not _debug_trace:
        return

    frame = inspect.currentframe()
    caller = frame.f_back if frame is not None else None
    name = caller.f_code.co_name if caller is not None else "?"
    printf_err("\33[1m{0:>32s}\33[0m - {1:s}\n", name, format.format(*args))
