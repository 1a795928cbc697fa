'''
Custom exception and warning classes for charfun.

This module defines the exception hierarchy used throughout the package. Fatal
conditions (invalid arguments, parameter vectors that cannot be broadcast to a
common length) stop evaluation of the whole batched call. Recoverable
conditions (a Poisson series that hit its iteration cap) are reported as
warnings next to a still-usable numeric result.

Every exception and warning renders its message together with optional
details and a context dictionary, so that the offending parameter and value
show up in tracebacks without extra work at the raising site.
'''

import inspect
import warnings
from pathlib import Path
from typing import Any, Dict, Optional, Tuple, Union

import numpy as np


def _format_message(message: str,
                    details: Optional[str],
                    context: Optional[Dict[str, Any]],
                    frame_depth: int = 2) -> str:
    """Build the full message shared by errors and warnings."""
    full_message = message
    if details:
        full_message += f"\n\nDetails: {details}"

    if context:
        context_str = "\n".join(f"  {k}: {v}" for k, v in context.items())
        full_message += f"\n\nContext:\n{context_str}"

    frame = inspect.currentframe()
    try:
        for _ in range(frame_depth):
            if frame is None:
                break
            frame = frame.f_back
        if frame is not None:
            caller_info = inspect.getframeinfo(frame)
            full_message += f"\n\nLocation: {Path(caller_info.filename).name}:{caller_info.lineno}"
    finally:
        del frame  # Avoid reference cycles

    return full_message


def _summarize(value: Any) -> Any:
    """Shorten large arrays for display in a context dictionary."""
    if isinstance(value, np.ndarray) and value.size > 10:
        return f"Array with shape {value.shape}"
    return value


class CharFunError(Exception):
    """Base exception class for all charfun errors.

    Attributes:
        message: The error message
        details: Additional details about the error
        context: Dictionary containing contextual information about the error
    """

    def __init__(self,
                 message: str,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details
        self.context = context or {}
        super().__init__(_format_message(message, details, context, frame_depth=3))


class ParameterError(CharFunError):
    """Exception raised for invalid arguments.

    Used for a convolution order that is not a positive scalar integer, a
    negative noncentrality parameter, non-positive shape, rate or degrees of
    freedom, and any other value outside its admissible range.

    Attributes:
        param_name: The name of the parameter that caused the error
        param_value: The invalid parameter value
        constraint: Description of the constraint that was violated
    """

    def __init__(self,
                 message: str,
                 param_name: Optional[str] = None,
                 param_value: Optional[Any] = None,
                 constraint: Optional[str] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.param_name = param_name
        self.param_value = param_value
        self.constraint = constraint

        context_dict = context or {}
        if param_name:
            context_dict["Parameter"] = param_name
        if param_value is not None:
            context_dict["Value"] = _summarize(param_value)
        if constraint:
            context_dict["Constraint"] = constraint

        super().__init__(message, details, context_dict)


class DimensionError(CharFunError):
    """Exception raised when parameter vectors cannot share a common length.

    Attributes:
        array_name: The name of the array that caused the error
        expected_shape: The expected shape of the array
        actual_shape: The actual shape of the array
    """

    def __init__(self,
                 message: str,
                 array_name: Optional[str] = None,
                 expected_shape: Optional[Union[Tuple[int, ...], str]] = None,
                 actual_shape: Optional[Tuple[int, ...]] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.array_name = array_name
        self.expected_shape = expected_shape
        self.actual_shape = actual_shape

        context_dict = context or {}
        if array_name:
            context_dict["Array"] = array_name
        if expected_shape is not None:
            context_dict["Expected Shape"] = expected_shape
        if actual_shape is not None:
            context_dict["Actual Shape"] = actual_shape

        super().__init__(message, details, context_dict)


class DistributionError(CharFunError):
    """Exception raised for an unknown or unsupported distribution family.

    Attributes:
        distribution_type: The requested family name
        issue: Description of the issue
    """

    def __init__(self,
                 message: str,
                 distribution_type: Optional[str] = None,
                 issue: Optional[str] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.distribution_type = distribution_type
        self.issue = issue

        context_dict = context or {}
        if distribution_type:
            context_dict["Distribution"] = distribution_type
        if issue:
            context_dict["Issue"] = issue

        super().__init__(message, details, context_dict)


class ConfigurationError(CharFunError):
    """Exception raised for invalid configuration sections, options or values.

    Attributes:
        section: The configuration section
        option: The configuration option
        value: The rejected value
    """

    def __init__(self,
                 message: str,
                 section: Optional[str] = None,
                 option: Optional[str] = None,
                 value: Optional[Any] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.section = section
        self.option = option
        self.value = value

        context_dict = context or {}
        if section:
            context_dict["Section"] = section
        if option:
            context_dict["Option"] = option
        if value is not None:
            context_dict["Value"] = value

        super().__init__(message, details, context_dict)


class CharFunWarning(Warning):
    """Base warning class for all charfun warnings.

    Attributes:
        message: The warning message
        details: Additional details about the warning
        context: Dictionary containing contextual information about the warning
    """

    def __init__(self,
                 message: str,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.message = message
        self.details = details
        self.context = context or {}
        super().__init__(_format_message(message, details, context, frame_depth=3))


class ConvergenceWarning(CharFunWarning):
    """Warning for a truncated series that did not reach its tolerance.

    The accompanying result is a partial sum: usable, but possibly less
    accurate than requested.

    Attributes:
        iterations: The number of iterations performed
        tolerance: The tolerance that was requested
        last_weight: The weight of the last term added to the series
    """

    def __init__(self,
                 message: str,
                 iterations: Optional[int] = None,
                 tolerance: Optional[float] = None,
                 last_weight: Optional[float] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.iterations = iterations
        self.tolerance = tolerance
        self.last_weight = last_weight

        context_dict = context or {}
        if iterations is not None:
            context_dict["Iterations"] = iterations
        if tolerance is not None:
            context_dict["Tolerance"] = tolerance
        if last_weight is not None:
            context_dict["Last Weight"] = last_weight

        super().__init__(message, details, context_dict)


class NumericWarning(CharFunWarning):
    """Warning for values that may be numerically unreliable.

    Attributes:
        operation: The operation where the issue was detected
        issue: Description of the numerical issue
        value: The value that may cause numerical issues
    """

    def __init__(self,
                 message: str,
                 operation: Optional[str] = None,
                 issue: Optional[str] = None,
                 value: Optional[Any] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
        self.operation = operation
        self.issue = issue
        self.value = value

        context_dict = context or {}
        if operation:
            context_dict["Operation"] = operation
        if issue:
            context_dict["Issue"] = issue
        if value is not None:
            context_dict["Value"] = _summarize(value)

        super().__init__(message, details, context_dict)


# Helper functions for raising exceptions with consistent formatting

def raise_parameter_error(message: str,
                          param_name: Optional[str] = None,
                          param_value: Optional[Any] = None,
                          constraint: Optional[str] = None,
                          details: Optional[str] = None,
                          context: Optional[Dict[str, Any]] = None) -> None:
    """Raise a ParameterError with consistent formatting.

    Raises:
        ParameterError: The formatted parameter error
    """
    raise ParameterError(message, param_name, param_value, constraint, details, context)


def raise_dimension_error(message: str,
                          array_name: Optional[str] = None,
                          expected_shape: Optional[Union[Tuple[int, ...], str]] = None,
                          actual_shape: Optional[Tuple[int, ...]] = None,
                          details: Optional[str] = None,
                          context: Optional[Dict[str, Any]] = None) -> None:
    """Raise a DimensionError with consistent formatting.

    Raises:
        DimensionError: The formatted dimension error
    """
    raise DimensionError(message, array_name, expected_shape, actual_shape, details, context)


# Helper functions for issuing warnings with consistent formatting

def warn_convergence(message: str,
                     iterations: Optional[int] = None,
                     tolerance: Optional[float] = None,
                     last_weight: Optional[float] = None,
                     details: Optional[str] = None,
                     context: Optional[Dict[str, Any]] = None) -> None:
    """Issue a ConvergenceWarning with consistent formatting.

    Args:
        message: The primary warning message
        iterations: The number of iterations performed
        tolerance: The tolerance that was requested
        last_weight: The weight of the last term added
        details: Additional details about the warning
        context: Dictionary containing contextual information about the warning
    """
    warnings.warn(
        ConvergenceWarning(message, iterations, tolerance, last_weight, details, context),
        stacklevel=2
    )


def warn_numeric(message: str,
                 operation: Optional[str] = None,
                 issue: Optional[str] = None,
                 value: Optional[Any] = None,
                 details: Optional[str] = None,
                 context: Optional[Dict[str, Any]] = None) -> None:
    """Issue a NumericWarning with consistent formatting.

    Args:
        message: The primary warning message
        operation: The operation where the issue was detected
        issue: Description of the numerical issue
        value: The value that may cause numerical issues
        details: Additional details about the warning
        context: Dictionary containing contextual information about the warning
    """
    warnings.warn(
        NumericWarning(message, operation, issue, value, details, context),
        stacklevel=2
    )
