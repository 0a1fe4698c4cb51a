"""Linear solvers, Riccati and calibration estimators, quaternions, a tick timer and bounded containers."""

__version__ = "0.1.0"

__all__ = ["boundedlist", "errors", "estimation", "linalg", "quaternion", "ringqueue", "timer"]