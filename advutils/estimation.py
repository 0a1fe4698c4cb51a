"""Iterative estimators: discrete-time Riccati solver and sensor calibration fits."""

from __future__ import annotations

from collections.abc import Callable

import numpy as np
from numpy.typing import ArrayLike, NDArray

from advutils.errors import ConvergenceError, SingularMatrixError, UtilsError

Matrix = NDArray[np.float64]

_Jacobian = Callable[[Matrix, Matrix], tuple[Matrix, Matrix]]


def _as_matrix(value: ArrayLike, name: str) -> Matrix:
    matrix = np.array(value, dtype=np.float64)
    if matrix.ndim != 2:
        raise ValueError(f"{name} must be a two-dimensional matrix")
    return matrix


def _inverse(matrix: Matrix) -> Matrix:
    try:
        return np.linalg.inv(matrix)
    except np.linalg.LinAlgError as exc:
        raise SingularMatrixError("matrix is not invertible") from exc


def dare(
    a: ArrayLike,
    b: ArrayLike,
    q: ArrayLike,
    r: ArrayLike,
    nmax: int = 100,
    tol: float = 1e-6,
) -> Matrix:
    """Solve ``P = A'PA - (B'PA)' inv(R + B'PB) B'PA + Q`` by doubling iteration.

    Stops once the relative Frobenius norm of the update drops below ``tol``.
    Raises :class:`ConvergenceError` after ``nmax`` iterations without reaching it.
    """
    a_k = _as_matrix(a, "a")
    b_m = _as_matrix(b, "b")
    q_m = _as_matrix(q, "q")
    r_m = _as_matrix(r, "r")
    n = a_k.shape[0]
    if a_k.shape != (n, n):
        raise ValueError("a must be square")
    if r_m.shape[0] != r_m.shape[1]:
        raise ValueError("r must be square")
    if b_m.shape != (n, r_m.shape[0]):
        raise ValueError("b must have as many rows as a and as many columns as r")
    if q_m.shape != (n, n):
        raise ValueError("q must be square and the same size as a")

    g = b_m @ _inverse(r_m) @ b_m.T
    h = q_m.copy()
    identity = np.eye(n)
    for _ in range(nmax):
        igp = _inverse(identity + g @ h)
        a_igp = a_k @ igp
        a_next = a_igp @ a_k
        g = g + a_igp @ g @ a_k.T
        increment = a_k.T @ h @ igp @ a_k
        h = h + increment
        if np.linalg.norm(increment) / np.linalg.norm(h) < tol:
            return h
        a_k = a_next
    raise ConvergenceError(f"Riccati iteration did not converge in {nmax} steps")


def _check_data(data: ArrayLike, min_rows: int) -> Matrix:
    samples = np.array(data, dtype=np.float64)
    if samples.ndim != 2 or samples.shape[1] != 3:
        raise ValueError("data must be a matrix with three columns")
    if samples.shape[0] < min_rows:
        raise ValueError(f"data must hold at least {min_rows} measurements")
    return samples


def _start(samples: Matrix, x0: ArrayLike | None, size: int, gains: tuple[int, ...]) -> Matrix:
    if x0 is not None:
        params = np.array(x0, dtype=np.float64).reshape(-1)
        if params.shape[0] != size:
            raise ValueError(f"x0 must hold {size} parameters")
        return params
    params = np.zeros(size)
    params[:3] = samples.mean(axis=0)
    params[list(gains)] = 1.0
    return params


def _target_squared(samples: Matrix, params: Matrix, radius: float) -> float:
    if radius != 0:
        return radius * radius
    centred = samples - params[:3]
    spread = centred.max() - centred.min()
    return 0.25 * spread * spread


def _fit(
    samples: Matrix,
    params: Matrix,
    k2: float,
    nmax: int,
    tol: float,
    jacobian: _Jacobian,
) -> Matrix:
    for _ in range(nmax):
        d = samples - params[:3]
        jr, scaled = jacobian(d, params)
        residual = np.sum(scaled * scaled, axis=1) - k2
        try:
            delta = np.linalg.solve(jr.T @ jr, jr.T @ residual)
        except np.linalg.LinAlgError as exc:
            raise SingularMatrixError("measurements do not determine every parameter") from exc
        params = params - delta
        if np.linalg.norm(delta) < tol:
            return params
        if np.isnan(d[-1]).any():
            raise UtilsError("calibration diverged")
    raise ConvergenceError(f"calibration did not converge in {nmax} iterations")


def _jacobian_9(d: Matrix, p: Matrix) -> tuple[Matrix, Matrix]:
    s = np.array(
        [
            [p[3], p[4], p[5]],
            [p[4], p[6], p[7]],
            [p[5], p[7], p[8]],
        ]
    )
    t = d @ s
    rx = -2.0 * t
    d1, d2, d3 = d[:, 0], d[:, 1], d[:, 2]
    r1, r2, r3 = rx[:, 0], rx[:, 1], rx[:, 2]
    jr = np.column_stack(
        [
            rx @ s,
            -d1 * r1,
            -d2 * r1 - d1 * r2,
            -d3 * r1 - d1 * r3,
            -d2 * r2,
            -d3 * r2 - d2 * r3,
            -d3 * r3,
        ]
    )
    return jr, t


def _jacobian_6(d: Matrix, p: Matrix) -> tuple[Matrix, Matrix]:
    gains = p[3:6]
    jr = np.hstack([-2.0 * d * gains * gains, 2.0 * gains * d * d])
    return jr, d * gains


def gauss_newton_9(
    data: ArrayLike,
    radius: float = 0.0,
    x0: ArrayLike | None = None,
    nmax: int = 200,
    tol: float = 1e-6,
) -> Matrix:
    """Fit measurements to a sphere with 3 biases and a symmetric 3x3 gain matrix.

    Returns ``[b1, b2, b3, s11, s12, s13, s22, s23, s33]``. A zero ``radius`` is
    estimated from the data spread; without ``x0`` the fit starts at the data
    mean with unit gains. ``data`` needs at least 9 rows of 3 columns.
    """
    samples = _check_data(data, 9)
    params = _start(samples, x0, 9, (3, 6, 8))
    k2 = _target_squared(samples, params, radius)
    return _fit(samples, params, k2, nmax, tol, _jacobian_9)


def gauss_newton_6(
    data: ArrayLike,
    radius: float = 0.0,
    x0: ArrayLike | None = None,
    nmax: int = 200,
    tol: float = 1e-6,
) -> Matrix:
    """Fit measurements to a sphere with 3 biases and 3 diagonal gains.

    Returns ``[b1, b2, b3, s11, s22, s33]``. A zero ``radius`` is estimated from
    the data spread; without ``x0`` the fit starts at the data mean with unit
    gains. ``data`` needs at least 6 rows of 3 columns.
    """
    samples = _check_data(data, 6)
    params = _start(samples, x0, 6, (3, 4, 5))
    k2 = _target_squared(samples, params, radius)
    return _fit(samples, params, k2, nmax, tol, _jacobian_6)