"""
utils.py

Small logging helper shared by the IO layer. Failures are logged here once,
with context, right before they are re-raised as typed world file errors.

The public helper:
- `safe_log_exception(msg, exc, level=logging.DEBUG, **ctx)` : logs exceptions robustly
"""

from typing import Any
import sys
import logging

logger = logging.getLogger(__name__)


def safe_log_exception(msg: str, exc: Exception, level: int = logging.DEBUG, **ctx: Any) -> None:
    """Log an exception robustly.

    Logs `msg`, the exception and any keyword context at `level` with the
    traceback attached. The default is DEBUG because every caller re-raises
    and the caller decides whether the failure is an error. If logging itself
    fails, writes a compact line to `sys.stderr`. Never raises.
    """
    try:
        if ctx:
            ctx_s = ' | '.join(f"{k}={v!r}" for k, v in ctx.items())
            logger.log(level, '%s | %s | %s', msg, exc, ctx_s, exc_info=exc)
        else:
            logger.log(level, '%s | %s', msg, exc, exc_info=exc)
    except Exception:
        try:
            sys.stderr.write(f'LOGGING FAILURE: {msg} {exc}\n')
        except Exception:
            pass
