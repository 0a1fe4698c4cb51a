# advutils

A small library of numerical routines and fixed-capacity data structures.
Matrices go in and come out as NumPy arrays.

## Modules

- `advutils.linalg`: dense linear algebra.
  - `fwsub(a, b)` and `bksub(a, b)` do forward and backward substitution. They
    take `a` to be lower or upper triangular and do not check it.
  - `fwsub_perm(a, b, p)` and `bksub_perm(a, b, p)` first reorder the rows of
    `b` by the permutation `p`.
  - `quad_prod(a, b)` returns `a @ b @ a.T`.
  - `lu_crout(a)` returns `(L, U)`, where `U` is unit upper triangular.
  - `lu_cormen(a)` returns `(L, U)`, where `L` is unit lower triangular. It does
    no pivoting.
  - `lup_cormen(a)` uses partial pivoting. It returns `(L, U, perm, sign)` such
    that `a[perm] == L @ U`, and `sign * det(U) == det(a)`.
  - `lin_solve_lu`, `lin_solve_lup` and `lin_solve_gauss` solve `a @ x = b`.
    The right-hand side `b` can be a vector or a matrix. When the matrix is
    singular, `lin_solve_gauss` returns an all-zero solution.
- `advutils.estimation`: iterative estimators.
  - `dare(a, b, q, r, nmax=100, tol=1e-6)` solves the discrete-time algebraic
    Riccati equation by doubling iteration.
  - `gauss_newton_9(data, radius=0.0, x0=None, nmax=200, tol=1e-6)` fits
    3-axis measurements to a sphere. It uses three biases and a symmetric gain
    matrix, and returns `[b1, b2, b3, s11, s12, s13, s22, s23, s33]`.
  - `gauss_newton_6(...)` does the same fit with diagonal gains and returns
    `[b1, b2, b3, s11, s22, s33]`.
  - In both fits, a `radius` of zero means the radius is estimated from the
    spread of the data. Without `x0`, the fit starts at the data mean with unit
    gains.
- `advutils.quaternion`: `Quaternion`, a frozen dataclass.
  - It provides `normalized()`, `conjugate()`, multiplication with `*`, and
    `rotate(v)`, which computes `q' * v * q` for an `Axis3` or a `Quaternion`.
  - `EulerConverter().to_euler(q)` returns roll, pitch and yaw as an `Axis3`.
    If the roll falls outside ±π/2, it is replaced by the previous roll.
- `advutils.timer`: `Timer(interval, last_tick=0, running=True)`.
  - `process(tick)` adds the number of whole intervals elapsed since
    `last_tick` to `event_count`.
  - Ticks are 32-bit unsigned counters, so the timer keeps counting correctly
    across wrap-around.
- `advutils.ringqueue`: `RingQueue(capacity)`, a bounded double-ended queue.
  - Single-item methods are `push`, `push_front`, `pop`, `pop_back`, `peek`
    and `peek_back`.
  - Batch methods are `push_many`, `push_front_many`, `pop_many` and
    `pop_back_many`. A batch operation either completes in full or leaves the
    queue unchanged.
  - `flush` empties the queue.
- `advutils.boundedlist`: `BoundedList(capacity)`, a bounded ordered sequence.
  - It has `push`, `push_front`, `insert`, `update`, `pop`, `pop_back`,
    `remove`, `peek`, `peek_back`, `peek_at` and `flush`.
  - It can be iterated, and `len()` works on it.

## Errors

The package's own exceptions live in `advutils.errors` and all derive from
`UtilsError`:

- `FullError`: a container has no room.
- `EmptyError`: a container does not hold enough items. This includes calling
  `BoundedList.flush` on an empty list.
- `SingularMatrixError`: a zero pivot, a matrix that cannot be inverted, or
  measurements that do not determine the fit.
- `ConvergenceError`: the iteration limit was reached.
- `UtilsError` itself: a calibration fit diverged.

Other exceptions come from Python itself:

- Positions outside a `BoundedList` raise `IndexError`.
- Inputs of the wrong shape or size raise `ValueError`.

## Example

```python
import numpy as np
from advutils.estimation import dare
from advutils.linalg import lin_solve_lup
from advutils.ringqueue import RingQueue

x = lin_solve_lup(np.array([[4.0, 3.0], [6.0, 3.0]]), np.array([[10.0], [12.0]]))

p = dare(
    np.array([[1.0, 1.0], [0.0, 1.0]]),
    np.array([[0.0], [1.0]]),
    np.eye(2),
    np.array([[1.0]]),
    100,
    1e-6,
)

q = RingQueue(4)
q.push_many([1, 2, 3])
q.push_front(0)
assert q.pop_many(2) == [0, 1]
```

## Scope

This is a library only. It has no command-line tool, and it does not store or
persist anything. The containers hold ordinary Python objects in memory and
grow up to their capacity. They do not use fixed-size byte buffers.

## Installing and testing

From a checkout:

```
pip install ".[test]"
pytest
```