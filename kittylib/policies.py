"""
Error handling policies for KittyLib.

This module provides a flexible error handling system through the Policy pattern,
allowing callers to decide what happens when an operation receives input it
cannot process: degrade to a fallback (the default), report and continue, or
fail fast.

Exceptions raised by user callbacks and predicates are never routed through a
policy; they always propagate to the caller.
"""

from abc import ABC, abstractmethod
from typing import Any, Dict, List, Optional
import sys


class ErrorPolicy(ABC):
    """
    Base class for error handling policies.

    Subclasses implement different strategies for handling invalid input
    detected by a KittyLib operation.
    """

    @abstractmethod
    def handle(self, error: Exception, operation: str, value: Any, default: Any = None) -> Any:
        """
        Handle an error detected by an operation.

        Args:
            error: The exception describing the problem
            operation: Name of the operation that detected it (e.g., 'filter_deep')
            value: The offending input value
            default: The fallback the operation returns when it continues

        Returns:
            The value the operation should return in place of a result,
            or re-raises the exception to stop the operation.
        """
        pass


class PermissivePolicy(ErrorPolicy):
    """
    Policy that silently returns the operation's fallback.

    This is the default behavior everywhere. It holds no state, so a single
    instance can be shared by any number of concurrent calls.
    """

    def handle(self, error: Exception, operation: str, value: Any, default: Any = None) -> Any:
        """Return the fallback unchanged."""
        return default


class FailFastPolicy(ErrorPolicy):
    """
    Policy that immediately re-raises any error.

    Selected by ``strict=True``. Useful when callers rely on type-checking
    and want malformed input reported instead of degraded.
    """

    def handle(self, error: Exception, operation: str, value: Any, default: Any = None) -> Any:
        """Re-raise the error immediately."""
        raise error


class CollectErrorsPolicy(ErrorPolicy):
    """
    Policy that collects all errors without output, for batch processing.

    Useful for running many operations and presenting every problem at the end.
    """

    def __init__(self):
        """Initialize the policy."""
        self.errors: List[Dict[str, Any]] = []

    def handle(self, error: Exception, operation: str, value: Any, default: Any = None) -> Any:
        """Silently record the error and return the fallback."""
        self._record(error, operation, value)
        return default

    def _record(self, error: Exception, operation: str, value: Any) -> Dict[str, Any]:
        record = {
            'operation': operation,
            'value': value,
            'error': error,
            'error_type': type(error).__name__,
            'error_message': str(error),
        }
        self.errors.append(record)
        return record

    def get_statistics(self) -> dict:
        """
        Get statistics about errors encountered.

        Returns:
            Dictionary with error counts and details
        """
        by_type: Dict[str, int] = {}
        by_operation: Dict[str, int] = {}
        for record in self.errors:
            by_type[record['error_type']] = by_type.get(record['error_type'], 0) + 1
            by_operation[record['operation']] = by_operation.get(record['operation'], 0) + 1

        return {
            'total_errors': len(self.errors),
            'by_type': by_type,
            'by_operation': by_operation,
            'errors': self.errors,
        }


class ContinueOnErrorsPolicy(CollectErrorsPolicy):
    """
    Policy that reports errors and continues.

    Errors are collected for later inspection like CollectErrorsPolicy, and
    additionally printed as warnings on stderr when verbose.
    """

    def __init__(self, verbose: bool = True):
        """
        Initialize the policy.

        Args:
            verbose: If True, print warnings to stderr when errors occur
        """
        super().__init__()
        self.verbose = verbose

    def handle(self, error: Exception, operation: str, value: Any, default: Any = None) -> Any:
        """Record the error, warn if verbose, and return the fallback."""
        self._record(error, operation, value)
        if self.verbose:
            print(f"\nWARNING: Error in {operation} for {value!r}: {error}", file=sys.stderr)
        return default


class ThresholdPolicy(ErrorPolicy):
    """
    Policy that tolerates errors up to a threshold, then fails fast.

    Useful when some malformed input is expected but too much of it
    indicates a systemic problem that should halt processing.
    """

    def __init__(self, max_errors: int = 10, verbose: bool = True):
        """
        Initialize threshold policy.

        Args:
            max_errors: Maximum errors to tolerate before failing
            verbose: If True, print warnings for errors
        """
        self.max_errors = max_errors
        self.error_count = 0
        self.verbose = verbose
        self.errors: List[Exception] = []

    def handle(self, error: Exception, operation: str, value: Any, default: Any = None) -> Any:
        """Handle error if under threshold, otherwise raise."""
        self.error_count += 1
        self.errors.append(error)

        if self.error_count > self.max_errors:
            raise RuntimeError(f"Error threshold exceeded ({self.max_errors} errors)") from error

        if self.verbose:
            print(f"\nWARNING [{self.error_count}/{self.max_errors}]: Error in {operation} for {value!r}: {error}",
                  file=sys.stderr)

        return default


_PERMISSIVE = PermissivePolicy()
_FAIL_FAST = FailFastPolicy()


def create_policy(strict: bool = False, verbose: bool = False) -> ErrorPolicy:
    """
    Convenience function to create an error policy.

    Args:
        strict: If True, use FailFastPolicy
        verbose: If True (and not strict), report errors on stderr
            through a ContinueOnErrorsPolicy

    Returns:
        An ErrorPolicy configured appropriately
    """
    if strict:
        return FailFastPolicy()
    if verbose:
        return ContinueOnErrorsPolicy(verbose=True)
    return PermissivePolicy()


def resolve_policy(policy: Optional[ErrorPolicy] = None, strict: bool = False) -> ErrorPolicy:
    """Pick the policy for a call: an explicit policy wins over the strict flag."""
    if policy is not None:
        return policy
    return _FAIL_FAST if strict else _PERMISSIVE
