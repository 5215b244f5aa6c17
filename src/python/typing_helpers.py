import traceback
from typing import NoReturn, Optional, TypeVar, overload

T = TypeVar("T")


@overload
def req(optional: None, msg: str = "") -> NoReturn:
    ...


@overload
def req(optional: T, msg: str = "") -> T:
    ...


def req(optional: Optional[T], msg: str = "") -> T:
    """Unwraps an optional value, raising with the calling line if it is not set."""
    if optional is None:
        offending_frame: traceback.FrameSummary = traceback.extract_stack()[-2]

        filename = offending_frame.filename
        line_number = offending_frame.lineno
        line = offending_frame.line

        raise RuntimeError(
            f"Failed the required optional check: {line} at {filename} line: "
            f"{line_number}. {msg}".rstrip()
        )

    return optional
