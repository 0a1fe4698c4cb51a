"""Triangular solvers, LU factorizations and dense linear system solvers."""

from __future__ import annotations

import numpy as np
from numpy.typing import ArrayLike, NDArray

from advutils.errors import SingularMatrixError

Matrix = NDArray[np.float64]


def _as_matrix(value: ArrayLike, name: str) -> Matrix:
    matrix = np.array(value, dtype=np.float64)
    if matrix.ndim != 2:
        raise ValueError(f"{name} must be a two-dimensional matrix")
    return matrix


def _as_square(value: ArrayLike, name: str) -> Matrix:
    matrix = _as_matrix(value, name)
    rows, cols = matrix.shape
    if rows != cols or rows == 0:
        raise ValueError(f"{name} must be a non-empty square matrix")
    return matrix


def _as_rhs(value: ArrayLike, rows: int) -> tuple[Matrix, bool]:
    """Return the right-hand side as a column block and whether it was a vector."""
    rhs = np.array(value, dtype=np.float64)
    is_vector = rhs.ndim == 1
    if is_vector:
        rhs = rhs[:, np.newaxis]
    if rhs.ndim != 2:
        raise ValueError("right-hand side must be a vector or a matrix")
    if rhs.shape[0] != rows:
        raise ValueError("right-hand side must have as many rows as the system matrix")
    return rhs, is_vector


def _as_permutation(value: ArrayLike, rows: int) -> NDArray[np.intp]:
    perm = np.asarray(value).reshape(-1).astype(np.intp)
    if perm.shape[0] != rows:
        raise ValueError("permutation must have one entry per matrix row")
    return perm


def _shape_result(result: Matrix, is_vector: bool) -> Matrix:
    return result[:, 0] if is_vector else result


def _forward(a: Matrix, b: Matrix) -> Matrix:
    result = np.empty_like(b)
    for i in range(a.shape[0]):
        result[i] = (b[i] - a[i, :i] @ result[:i]) / a[i, i]
    return result


def _backward(a: Matrix, b: Matrix) -> Matrix:
    result = np.empty_like(b)
    for i in reversed(range(a.shape[0])):
        result[i] = (b[i] - a[i, i + 1 :] @ result[i + 1 :]) / a[i, i]
    return result


def fwsub(a: ArrayLike, b: ArrayLike) -> Matrix:
    """Solve ``a @ x = b`` by forward substitution; ``a`` is taken as lower triangular."""
    lower = _as_square(a, "a")
    rhs, is_vector = _as_rhs(b, lower.shape[0])
    return _shape_result(_forward(lower, rhs), is_vector)


def fwsub_perm(a: ArrayLike, b: ArrayLike, p: ArrayLike) -> Matrix:
    """Forward substitution on the rows of ``b`` reordered by permutation ``p``."""
    lower = _as_square(a, "a")
    rhs, is_vector = _as_rhs(b, lower.shape[0])
    perm = _as_permutation(p, lower.shape[0])
    return _shape_result(_forward(lower, rhs[perm]), is_vector)


def bksub(a: ArrayLike, b: ArrayLike) -> Matrix:
    """Solve ``a @ x = b`` by backward substitution; ``a`` is taken as upper triangular."""
    upper = _as_square(a, "a")
    rhs, is_vector = _as_rhs(b, upper.shape[0])
    return _shape_result(_backward(upper, rhs), is_vector)


def bksub_perm(a: ArrayLike, b: ArrayLike, p: ArrayLike) -> Matrix:
    """Backward substitution on the rows of ``b`` reordered by permutation ``p``."""
    upper = _as_square(a, "a")
    rhs, is_vector = _as_rhs(b, upper.shape[0])
    perm = _as_permutation(p, upper.shape[0])
    return _shape_result(_backward(upper, rhs[perm]), is_vector)


def quad_prod(a: ArrayLike, b: ArrayLike) -> Matrix:
    """Return the quadratic form ``a @ b @ a.T``."""
    left = _as_matrix(a, "a")
    middle = _as_matrix(b, "b")
    cols = left.shape[1]
    if middle.shape != (cols, cols):
        raise ValueError("b must be square with as many rows as a has columns")
    return left @ middle @ left.T


def lu_crout(a: ArrayLike) -> tuple[Matrix, Matrix]:
    """Crout factorization ``a = L @ U`` with ``U`` unit upper triangular.

    Raises :class:`SingularMatrixError` when a diagonal entry of ``L`` is zero.
    """
    matrix = _as_square(a, "a")
    n = matrix.shape[0]
    lower = np.zeros((n, n))
    upper = np.eye(n)
    for j in range(n):
        lower[j:, j] = matrix[j:, j] - lower[j:, :j] @ upper[:j, j]
        pivot = lower[j, j]
        if pivot == 0:
            raise SingularMatrixError(f"zero pivot in column {j}")
        upper[j, j:] = (matrix[j, j:] - lower[j, :j] @ upper[:j, j:]) / pivot
    return lower, upper


def lu_cormen(a: ArrayLike) -> tuple[Matrix, Matrix]:
    """Doolittle factorization ``a = L @ U`` with ``L`` unit lower triangular, no pivoting.

    Raises :class:`SingularMatrixError` when a pivot is zero.
    """
    work = _as_square(a, "a")
    n = work.shape[0]
    lower = np.eye(n)
    upper = np.zeros((n, n))
    for k in range(n):
        pivot = work[k, k]
        if pivot == 0:
            raise SingularMatrixError(f"zero pivot in column {k}")
        upper[k, k] = pivot
        lower[k + 1 :, k] = work[k + 1 :, k] * (1.0 / pivot)
        upper[k, k + 1 :] = work[k, k + 1 :]
        work[k + 1 :, k + 1 :] -= np.outer(lower[k + 1 :, k], upper[k, k + 1 :])
    return lower, upper


def lup_cormen(a: ArrayLike) -> tuple[Matrix, Matrix, NDArray[np.intp], int]:
    """Factorization with partial pivoting ``a[perm] = L @ U``.

    Returns ``(L, U, perm, sign)`` where ``L`` is unit lower triangular, ``perm``
    lists the original row index of each factorized row and ``sign`` (+1 or -1)
    is the factor that turns ``det(U)`` into ``det(a)``. Raises
    :class:`SingularMatrixError` when no non-zero pivot exists.
    """
    work = _as_square(a, "a")
    n = work.shape[0]
    perm = np.arange(n, dtype=np.intp)
    sign = 1
    for k in range(n - 1):
        pivot_row = k + int(np.argmax(np.abs(work[k:, k])))
        if work[pivot_row, k] == 0:
            raise SingularMatrixError(f"no non-zero pivot in column {k}")
        if pivot_row != k:
            perm[[k, pivot_row]] = perm[[pivot_row, k]]
            work[[k, pivot_row]] = work[[pivot_row, k]]
            sign = -sign
        work[k + 1 :, k] *= 1.0 / work[k, k]
        work[k + 1 :, k + 1 :] -= np.outer(work[k + 1 :, k], work[k, k + 1 :])
    lower = np.tril(work, -1) + np.eye(n)
    upper = np.triu(work)
    return lower, upper, perm, sign


def lin_solve_lu(a: ArrayLike, b: ArrayLike) -> Matrix:
    """Solve ``a @ x = b`` through an LU factorization without pivoting."""
    matrix = _as_square(a, "a")
    rhs, is_vector = _as_rhs(b, matrix.shape[0])
    lower, upper = lu_cormen(matrix)
    return _shape_result(_backward(upper, _forward(lower, rhs)), is_vector)


def lin_solve_lup(a: ArrayLike, b: ArrayLike) -> Matrix:
    """Solve ``a @ x = b`` through an LU factorization with partial pivoting."""
    matrix = _as_square(a, "a")
    rhs, is_vector = _as_rhs(b, matrix.shape[0])
    lower, upper, perm, _ = lup_cormen(matrix)
    return _shape_result(_backward(upper, _forward(lower, rhs[perm])), is_vector)


def lin_solve_gauss(a: ArrayLike, b: ArrayLike) -> Matrix:
    """Solve ``a @ x = b`` by Gaussian elimination with partial pivoting.

    A singular matrix yields an all-zero solution.
    """
    work = _as_square(a, "a")
    n = work.shape[0]
    rhs, is_vector = _as_rhs(b, n)
    for k in range(n - 1):
        pivot_row = k + int(np.argmax(np.abs(work[k:, k])))
        if work[pivot_row, k] == 0:
            return _shape_result(np.zeros_like(rhs), is_vector)
        if pivot_row != k:
            work[[k, pivot_row]] = work[[pivot_row, k]]
            rhs[[k, pivot_row]] = rhs[[pivot_row, k]]
        factors = work[k + 1 :, k] * (1.0 / work[k, k])
        work[k + 1 :, k + 1 :] -= np.outer(factors, work[k, k + 1 :])
        work[k + 1 :, k] = 0.0
        rhs[k + 1 :] -= np.outer(factors, rhs[k])
    return _shape_result(_backward(work, rhs), is_vector)