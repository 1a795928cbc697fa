'''
Result containers for characteristic function evaluation.

A noncentral CF is a truncated Poisson series, so besides the complex values
the caller may want to know whether every series reached its tolerance. The
dataclasses below carry the numeric estimate together with an explicit
convergence status and per-component diagnostics, and export them to plain
dictionaries or a pandas summary table.
'''

from dataclasses import asdict, dataclass, field
from datetime import datetime
from typing import Any, Dict, List

import numpy as np
import pandas as pd


@dataclass
class MixtureSeriesResult:
    """Outcome of one Poisson-weighted mixture series.

    Attributes:
        cf: Complex CF column of the noncentral component
        converged: Whether the ascending branch reached the tolerance
        n_terms: Number of central evaluations that were summed
        last_weight: Poisson weight of the last term of the ascending branch
        delta: Noncentrality parameter of the component
        tolerance: Requested tolerance
    """

    cf: np.ndarray
    converged: bool
    n_terms: int
    last_weight: float
    delta: float
    tolerance: float

    def summary(self) -> Dict[str, Any]:
        """Return the scalar diagnostics without the CF values."""
        return {
            "delta": self.delta,
            "converged": self.converged,
            "n_terms": self.n_terms,
            "last_weight": self.last_weight,
            "tolerance": self.tolerance,
        }


@dataclass
class CharacteristicFunctionResult:
    """CF values together with their convergence status.

    Attributes:
        family: Name of the distribution family
        cf: Complex CF array shaped like the evaluation grid
        converged: True when every component series reached its tolerance
        components: Per-component series diagnostics
        creation_time: Timestamp when the result was created
        metadata: Additional information about the evaluation
    """

    family: str
    cf: np.ndarray
    converged: bool = True
    components: List[MixtureSeriesResult] = field(default_factory=list)
    creation_time: datetime = field(default_factory=datetime.now)
    metadata: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert the result object to a dictionary.

        Returns:
            Dict[str, Any]: Dictionary with arrays converted to lists
        """
        result_dict = asdict(self)
        result_dict["cf"] = {"real": self.cf.real.tolist(), "imag": self.cf.imag.tolist()}
        result_dict["components"] = [c.summary() for c in self.components]
        result_dict["creation_time"] = self.creation_time.isoformat()
        return result_dict

    def to_frame(self) -> pd.DataFrame:
        """Return per-component series diagnostics as a DataFrame."""
        frame = pd.DataFrame([c.summary() for c in self.components],
                             columns=["delta", "converged", "n_terms",
                                      "last_weight", "tolerance"])
        frame.index.name = "component"
        return frame

    def __str__(self) -> str:
        status = "converged" if self.converged else "NOT converged"
        return (f"CharacteristicFunctionResult(family={self.family!r}, "
                f"shape={self.cf.shape}, {status}, components={len(self.components)})")
