'''
Chunked evaluation of CFs of linear combinations.

The CF of Y = coef_1 X_1 + ... + coef_N X_N with independent components is
the product cf_1(coef_1 t) * ... * cf_N(coef_N t). Evaluating all components
at once materializes a |t| x N matrix, which for long parameter vectors and
fine grids does not fit in memory. The combinator therefore splits the N
components into contiguous chunks, evaluates one |t| x k block per chunk and
folds the block's partial result into a running total.

Two fold modes exist. In "log" mode a kernel returns log-CF values, a chunk
contributes its row sums and the total is exponentiated once at the end. In
"product" mode a kernel returns CF values and a chunk contributes its row
products. Since both folds are sums/products over independent components, the
chunk size never changes the result beyond floating point rounding.
'''

import logging
import math
from functools import reduce
from typing import Iterator, List, Optional

import numpy as np

from charfun.core.config import get_numerical_config
from charfun.core.exceptions import raise_parameter_error
from charfun.core.parameters import ComponentParameters, component_summary
from charfun.core.types import CFArray, CombineMode, ComponentKernel, GridColumn, GridLike
from charfun.core.validation import finalize_cf, validate_convolution_order, validate_grid

logger = logging.getLogger("charfun.models.characteristic.combinator")

_FOLD_MODES = ("log", "product")


def chunk_size_for(grid_size: int,
                   budget: Optional[int] = None,
                   grid_unit: Optional[int] = None) -> int:
    """Number of components evaluated together for a grid of grid_size points.

    A grid of grid_unit points gets budget components per chunk; larger grids
    get proportionally fewer, smaller grids proportionally more.

    Args:
        grid_size: Number of evaluation points
        budget: Components per chunk at grid_unit points (configured default)
        grid_unit: Reference grid size (configured default, 2**16)

    Returns:
        int: Chunk size, at least 1
    """
    config = get_numerical_config()
    budget = config.chunk_budget if budget is None else budget
    grid_unit = config.grid_unit if grid_unit is None else grid_unit

    if grid_size <= 0:
        return max(1, budget)
    return max(1, math.ceil(budget / (grid_size / grid_unit)))


def iter_chunks(n_components: int, chunk_size: int) -> Iterator[slice]:
    """Yield contiguous component slices of at most chunk_size entries."""
    if chunk_size < 1:
        raise_parameter_error(
            f"chunk_size must be a positive integer, got {chunk_size}",
            param_name="chunk_size",
            param_value=chunk_size,
            constraint=">= 1"
        )
    for start in range(0, n_components, chunk_size):
        yield slice(start, min(start + chunk_size, n_components))


def _chunk_partial(t: GridColumn,
                   params: ComponentParameters,
                   kernel: ComponentKernel,
                   mode: CombineMode,
                   index: slice) -> np.ndarray:
    """Evaluate one chunk and reduce it over its components."""
    block = np.asarray(kernel(t, params.select(index)))
    if mode == "log":
        return block.sum(axis=1)
    return block.prod(axis=1)


def combine_components(t: GridColumn,
                       params: ComponentParameters,
                       kernel: ComponentKernel,
                       mode: CombineMode = "log",
                       chunk_size: Optional[int] = None) -> np.ndarray:
    """Combine independent components into the CF of their weighted sum.

    Args:
        t: Flattened real evaluation grid
        params: Broadcast component parameters
        kernel: Function (t, parameter slice) -> |t| x k matrix of per-component
            log-CF values (mode "log") or CF values (mode "product")
        mode: Fold mode, "log" or "product"
        chunk_size: Components per chunk; None uses chunk_size_for(t.size)

    Returns:
        np.ndarray: Complex CF column of length t.size

    Raises:
        ParameterError: If the mode or chunk size is invalid
    """
    if mode not in _FOLD_MODES:
        raise_parameter_error(
            f"mode must be one of {_FOLD_MODES}, got {mode!r}",
            param_name="mode",
            param_value=mode,
            constraint=" or ".join(_FOLD_MODES)
        )

    if chunk_size is None:
        chunk_size = chunk_size_for(t.size)

    chunks: List[slice] = list(iter_chunks(params.size, chunk_size))
    logger.debug(f"Combining {component_summary(params)} over {t.size} grid points "
                 f"in {len(chunks)} chunk(s) of at most {chunk_size}")

    partials = (_chunk_partial(t, params, kernel, mode, index) for index in chunks)
    if mode == "log":
        total = reduce(np.add, partials, np.zeros(t.size, dtype=np.complex128))
        with np.errstate(over='ignore', under='ignore'):
            return np.exp(total)
    return reduce(np.multiply, partials, np.ones(t.size, dtype=np.complex128))


def linear_combination_cf(t: GridLike,
                          params: ComponentParameters,
                          kernel: ComponentKernel,
                          mode: CombineMode = "log",
                          n: Optional[int] = None,
                          chunk_size: Optional[int] = None) -> CFArray:
    """CF of a linear combination, shaped like the evaluation grid.

    Validates the grid and the convolution order, combines the components in
    memory-bounded chunks and applies the shared post-processing: CF(0) = 1
    exactly, the caller's grid shape and n-fold self-convolution.

    Args:
        t: Real evaluation grid of any shape
        params: Broadcast component parameters
        kernel: Per-chunk component kernel
        mode: Fold mode, "log" or "product"
        n: Convolution order (positive integer, default 1)
        chunk_size: Components per chunk; None uses the configured policy

    Returns:
        CFArray: Complex array with the shape of t
    """
    order = validate_convolution_order(n)
    grid, shape = validate_grid(t)
    cf = combine_components(grid, params, kernel, mode=mode, chunk_size=chunk_size)
    return finalize_cf(cf, grid, shape, order)
