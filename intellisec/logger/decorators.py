import functools
import time
from typing import Any, Callable, TypeVar, cast

from intellisec.logger import session_logger

F = TypeVar("F", bound=Callable[..., Any])


def _describe(value: Any) -> str:
    # Scanned text may be sensitive; record its size, never its content
    if isinstance(value, (str, bytes)):
        return f"<{type(value).__name__} len={len(value)}>"
    return type(value).__name__


def log_execution_time(func: F) -> F:
    """Decorator to log execution time of a function.

    Logs:
    - Start of execution with argument types (string arguments as lengths only)
    - End of execution with duration
    - Exceptions if they occur
    """
    @functools.wraps(func)
    def wrapper(*args: Any, **kwargs: Any) -> Any:
        func_name = func.__qualname__

        session_logger.debug(
            f"Starting {func_name}",
            args=[_describe(a) for a in args],
            kwargs={k: _describe(v) for k, v in kwargs.items()},
        )

        start_time = time.perf_counter()
        try:
            result = func(*args, **kwargs)
        except Exception as e:
            duration = time.perf_counter() - start_time
            session_logger.error(
                f"Failed {func_name}",
                duration_seconds=round(duration, 4),
                error=str(e),
                error_type=type(e).__name__,
                success=False,
            )
            raise

        duration = time.perf_counter() - start_time
        session_logger.debug(
            f"Completed {func_name}",
            duration_seconds=round(duration, 4),
            success=True,
        )
        return result

    return cast(F, wrapper)
