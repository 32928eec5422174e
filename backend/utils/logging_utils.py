"""
Structured logging helpers shared by the intake pipeline and vision client

Context travels in the record's ``extra`` so a JSON log formatter can pick
it up; the message itself stays readable in plain text logs.
"""

import time
import logging
from typing import Dict, Any, Optional, Callable, TypeVar, List
from contextlib import contextmanager
from functools import wraps

logger = logging.getLogger(__name__)

T = TypeVar('T')

# Below this an exterior read is logged at WARNING
DATA_QUALITY_WARN_BELOW = 0.8


@contextmanager
def log_operation(operation_name: str, context: Dict[str, Any], logger: Optional[logging.Logger] = None):
    """
    Log start, completion or failure of a block, with its duration.

    Usage:
        with log_operation("photo_intake", {"address": address}, logger):
            ...
    """
    log = logger or logging.getLogger(__name__)
    started = time.perf_counter()
    log.info(f"Starting {operation_name}", extra={'operation': operation_name, 'context': context, 'status': 'started'})

    try:
        yield
    except Exception as e:
        elapsed = time.perf_counter() - started
        log.error(f"Failed {operation_name} after {elapsed:.2f}s: {e}", extra={
            'operation': operation_name,
            'context': context,
            'status': 'failed',
            'duration_seconds': elapsed,
            'error_type': type(e).__name__,
        })
        raise

    elapsed = time.perf_counter() - started
    log.info(f"Completed {operation_name} in {elapsed:.2f}s", extra={
        'operation': operation_name,
        'context': context,
        'status': 'completed',
        'duration_seconds': elapsed,
    })


def log_with_context(level: str, message: str, context: Dict[str, Any], logger: Optional[logging.Logger] = None):
    log = logger or logging.getLogger(__name__)
    getattr(log, level.lower(), log.info)(message, extra={'context': context})


def timed_operation(operation_name: Optional[str] = None):
    """Decorator logging how long each call to a (vision) function took"""
    def decorator(func: Callable[..., T]) -> Callable[..., T]:
        name = operation_name or func.__name__

        @wraps(func)
        def wrapper(*args, **kwargs) -> T:
            started = time.perf_counter()
            try:
                result = func(*args, **kwargs)
            except Exception as e:
                logger.error(f"[TIMING] {name} failed after {time.perf_counter() - started:.2f}s: {e}")
                raise
            logger.info(f"[TIMING] {name} completed in {time.perf_counter() - started:.2f}s")
            return result

        return wrapper
    return decorator


def log_data_quality(data_type: str, quality_score: float,
                     issues: Optional[List[str]] = None,
                     logger: Optional[logging.Logger] = None):
    """
    Log how usable a photo read was.

    Args:
        data_type: Record kind ("exterior", "equipment")
        quality_score: Model confidence, 0.0-1.0
        issues: Clarification issues raised for the record
    """
    issues = issues or []
    level = "info" if quality_score >= DATA_QUALITY_WARN_BELOW and not issues else "warning"
    log_with_context(level, f"[DATA_QUALITY] {data_type}: {quality_score:.2f}, {len(issues)} issue(s)", {
        'data_type': data_type,
        'quality_score': quality_score,
        'issues': issues,
    }, logger)
