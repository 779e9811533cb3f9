"""scalaropt - one-dimensional nonlinear optimization routines.

Example
-------
>>> from scalaropt import golden_section, newton_v1
>>> round(golden_section(lambda x: (x - 2.0) ** 2, 0.0, 5.0, atol=1e-10), 8)
2.0
>>> newton_v1(1.0, lambda x: 2 * (x - 2.0), lambda x: 2.0)
2.0
"""

__version__ = "0.1.0"

from .chebyshev import (
    chebcheck,
    chebderiv,
    chebeval,
    chebfit,
    chebmin,
    chebnodes,
    chebtrim,
    chebzeros,
    from_canonical,
    remap,
    to_canonical,
)
from .core import (
    ATOL,
    DTOL,
    NSTEPS,
    ConvergenceError,
    SolverConfig,
    resolve_config,
)
from .derivatives import autodiff_derivatives, deriv2_fd, deriv_fd
from .golden import PHI, golden_section
from .logging import configure_logging, get_logger, set_log_level
from .monitors import TraceMonitor, log_monitor, noop_monitor
from .newton import newton_v1, newton_v2
from .spi import simple_spi

__all__ = [
    "ATOL",
    "ConvergenceError",
    "DTOL",
    "NSTEPS",
    "PHI",
    "SolverConfig",
    "TraceMonitor",
    "autodiff_derivatives",
    "chebcheck",
    "chebderiv",
    "chebeval",
    "chebfit",
    "chebmin",
    "chebnodes",
    "chebtrim",
    "chebzeros",
    "configure_logging",
    "deriv2_fd",
    "deriv_fd",
    "from_canonical",
    "get_logger",
    "golden_section",
    "log_monitor",
    "newton_v1",
    "newton_v2",
    "noop_monitor",
    "remap",
    "resolve_config",
    "set_log_level",
    "simple_spi",
    "to_canonical",
]
