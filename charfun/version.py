# charfun/version.py
"""
charfun version information

Version and metadata of the package, exposed as charfun.__version__. The
package follows semantic versioning (MAJOR.MINOR.PATCH).
"""

from typing import Any, Dict, Tuple

# Version components
VERSION_MAJOR = 1
VERSION_MINOR = 0
VERSION_PATCH = 0

# Full version string
__version__ = f"{VERSION_MAJOR}.{VERSION_MINOR}.{VERSION_PATCH}"

# Package metadata
__title__ = "charfun"
__description__ = "Characteristic functions of linear combinations of random variables"
__license__ = "MIT"

# Python version requirements
__python_requires__ = ">=3.10"

# Package dependencies
__dependencies__ = {
    "numpy": ">=1.26.0",
    "scipy": ">=1.11.3",
    "pandas": ">=2.1.1",
    "numba": ">=0.58.0",
}

VERSION_HISTORY = [
    {
        "version": "1.0.0",
        "release_date": "2026-10-18",
        "changes": [
            "Complex log-gamma function with Lanczos, reflection and pole handling",
            "CFs of linear combinations of log-chi-square, Student t, inverse-gamma and log-beta variables",
            "Noncentral log-beta CF as an adaptive Poisson mixture series",
            "Chunked evaluation of long parameter vectors under a memory budget",
        ]
    },
]


def get_version_info() -> Dict[str, Any]:
    """
    Get detailed version information about charfun.

    Returns:
        Dict containing the version string, its components, the release date
        and the changes of the current release.
    """
    current_version = VERSION_HISTORY[0]

    return {
        "version": __version__,
        "major": VERSION_MAJOR,
        "minor": VERSION_MINOR,
        "patch": VERSION_PATCH,
        "release_date": current_version["release_date"],
        "changes": current_version["changes"],
        "python_requires": __python_requires__,
        "dependencies": __dependencies__,
        "license": __license__
    }


def get_version_components() -> Tuple[int, int, int]:
    """Get the version components as a (major, minor, patch) tuple."""
    return (VERSION_MAJOR, VERSION_MINOR, VERSION_PATCH)

