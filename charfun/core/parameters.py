# charfun/core/parameters.py

"""
Parameter broadcasting and validation for linear combinations.

Every characteristic function routine accepts its distribution parameters as
scalars or vectors. Before evaluation they are turned into one fixed-length
parameter set: absent parameters take their documented default, scalars are
broadcast to the common component count N, and vectors of any other length
are rejected. The result is a frozen ComponentParameters container that the
chunked combinator slices into contiguous component blocks.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, Mapping, Optional, Tuple

import numpy as np

from charfun.core.exceptions import raise_dimension_error, raise_parameter_error
from charfun.core.types import ParameterLike
from charfun.utils.misc import ensure_array


@dataclass(frozen=True)
class ComponentParameters:
    """Broadcast parameter vectors of a linear combination.

    Attributes:
        values: Mapping from parameter name to a 1-D float array of length size
        size: Number of components N
    """

    values: Dict[str, np.ndarray] = field(default_factory=dict)
    size: int = 0

    def __getitem__(self, name: str) -> np.ndarray:
        return self.values[name]

    def __contains__(self, name: str) -> bool:
        return name in self.values

    def __iter__(self) -> Iterator[str]:
        return iter(self.values)

    def __len__(self) -> int:
        return self.size

    def names(self) -> Tuple[str, ...]:
        """Return the parameter names in insertion order."""
        return tuple(self.values)

    def select(self, index: slice) -> Dict[str, np.ndarray]:
        """Return the parameter vectors restricted to a block of components.

        Args:
            index: Contiguous slice of component positions

        Returns:
            Dict mapping each parameter name to its sliced vector
        """
        return {name: value[index] for name, value in self.values.items()}

    def component(self, i: int) -> Dict[str, float]:
        """Return the scalar parameters of component i."""
        return {name: float(value[i]) for name, value in self.values.items()}


def broadcast_parameters(params: Mapping[str, Optional[ParameterLike]],
                         defaults: Optional[Mapping[str, float]] = None) -> ComponentParameters:
    """Broadcast scalar-or-vector parameters to a common length.

    Args:
        params: Mapping from parameter name to its value; None means absent
        defaults: Default value for each parameter that may be absent

    Returns:
        ComponentParameters: Float vectors of identical length N

    Raises:
        DimensionError: If a parameter is empty or two non-scalar parameters
            have different lengths
        ParameterError: If a parameter is absent and has no default, or holds
            non-finite values

    Examples:
        >>> p = broadcast_parameters({'df': [1, 2, 3], 'coef': None}, {'coef': 1.0})
        >>> p.size, p['coef'].tolist()
        (3, [1.0, 1.0, 1.0])
    """
    defaults = defaults or {}
    arrays: Dict[str, np.ndarray] = {}

    for name, value in params.items():
        if value is None:
            if name not in defaults:
                raise_parameter_error(
                    f"Parameter {name} is required",
                    param_name=name,
                    constraint="must be provided"
                )
            value = defaults[name]

        array = np.ravel(ensure_array(value, dtype=np.float64))
        if not np.all(np.isfinite(array)):
            raise_parameter_error(
                f"Parameter {name} must contain only finite values",
                param_name=name,
                param_value=array,
                constraint="finite"
            )
        if array.size == 0:
            raise_dimension_error(
                f"Parameter {name} is empty",
                array_name=name,
                expected_shape="scalar or (N,) with N >= 1",
                actual_shape=array.shape
            )
        arrays[name] = array

    lengths = {name: array.size for name, array in arrays.items() if array.size != 1}
    size = max(lengths.values()) if lengths else 1
    for name, length in lengths.items():
        if length != size:
            raise_dimension_error(
                f"Parameter {name} has {length} components, which cannot be "
                f"broadcast to the common size {size}",
                array_name=name,
                expected_shape=f"scalar or ({size},)",
                actual_shape=(length,),
                context={"Sizes": {k: v.size for k, v in arrays.items()}}
            )

    broadcast = {name: np.broadcast_to(array, (size,)).copy() if array.size == 1 else array
                 for name, array in arrays.items()}
    return ComponentParameters(values=broadcast, size=size)


def validate_positive_parameters(params: ComponentParameters, *names: str) -> None:
    """Check that the named parameter vectors are strictly positive.

    Raises:
        ParameterError: If any entry is <= 0
    """
    for name in names:
        values = params[name]
        if np.any(values <= 0):
            raise_parameter_error(
                f"Parameter {name} must be positive, got {values[values <= 0][0]}",
                param_name=name,
                param_value=values,
                constraint="> 0"
            )


def validate_nonnegative_parameters(params: ComponentParameters, *names: str) -> None:
    """Check that the named parameter vectors are non-negative.

    Raises:
        ParameterError: If any entry is < 0
    """
    for name in names:
        values = params[name]
        if np.any(values < 0):
            raise_parameter_error(
                f"Parameter {name} must be non-negative, got {values[values < 0][0]}",
                param_name=name,
                param_value=values,
                constraint=">= 0"
            )


def component_summary(params: ComponentParameters) -> Dict[str, Any]:
    """Short description of a parameter set for log messages."""
    return {"components": params.size, "parameters": list(params.names())}
