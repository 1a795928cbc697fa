# charfun/core/types.py

"""
Type aliases shared across charfun.

These aliases document the array contracts of the characteristic function
routines: a real evaluation grid of any shape goes in, a complex array of the
same shape comes out, and every distribution parameter may be given either
as a scalar or as a vector with one entry per component.
"""

from typing import Callable, Dict, Literal, Sequence, Union

import numpy as np
import pandas as pd

# Evaluation grid: real values at which a CF is sampled, any shape
GridLike = Union[float, int, Sequence[float], np.ndarray, pd.Series]

# Scalar-or-vector distribution parameter
ParameterLike = Union[float, int, Sequence[float], np.ndarray, pd.Series]

# Column of real grid points after flattening
GridColumn = np.ndarray

# Complex CF values, shaped like the evaluation grid
CFArray = np.ndarray

# Single-argument characteristic function, as consumed by inversion routines
CFCallable = Callable[[GridLike], CFArray]

# Per-chunk component kernel: (grid column, parameter slice) -> |t| x k matrix
ComponentKernel = Callable[[GridColumn, Dict[str, np.ndarray]], np.ndarray]

# Central evaluator used inside a Poisson mixture: (grid column, alpha, beta) -> CF column
CentralCF = Callable[[GridColumn, float, float], np.ndarray]

# How chunk partials are folded together
CombineMode = Literal["log", "product"]

LogLevel = Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
