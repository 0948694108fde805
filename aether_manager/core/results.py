# aether_manager/core/results.py
from functools import wraps
from typing import Any, Callable

from aether_manager.core.exceptions import AetherError
from aether_manager.core.signals import global_signals
from aether_manager.utils.logger_utils import logger


def ok(data: Any = None) -> dict:
    return {"success": True, "data": data}


def failure(error: str, kind: str) -> dict:
    return {"success": False, "error": error, "error_kind": kind}


def service_operation(action: str) -> Callable:
    """
    Turns a raising service method into one that returns a result dict:
    {"success": True, "data": ...} or {"success": False, "error": ..., "error_kind": ...}.
    """

    def decorator(fn: Callable) -> Callable:
        @wraps(fn)
        def wrapper(*args, **kwargs):
            try:
                return ok(fn(*args, **kwargs))
            except AetherError as e:
                logger.error(f"{action} failed: {e}")
                global_signals.operation_failed.emit(str(e), e.kind)
                return failure(str(e), e.kind)
            except Exception as e:
                logger.error(f"Unexpected error during {action}: {e}", exc_info=True)
                global_signals.operation_failed.emit(str(e), "unexpected")
                return failure(f"An unexpected error occurred: {e}", "unexpected")

        return wrapper

    return decorator
