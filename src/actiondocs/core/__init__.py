"""Runtime plumbing shared by the generator: context, logging, errors, processes."""
from .context import RunContext
from .errors import Failure, ScriptError
from .logging import log_event, utc_now_iso
from .result import Err, Ok, Result

__all__ = [
    "Err",
    "Failure",
    "Ok",
    "Result",
    "RunContext",
    "ScriptError",
    "log_event",
    "utc_now_iso",
]
