"""Background execution of SSW computations with request coalescing."""

from .coordinator import ComputeCoordinator

__all__ = ["ComputeCoordinator"]
