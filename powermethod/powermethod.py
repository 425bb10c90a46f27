# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Callable, Iterable, Optional, Self
import logging
import numpy as np

from .backend import ArrayLike, ArrayNamespace, get_namespace, namespace_of_arrays, copy, dot, norm, normalize, random_vector
from .linearoperator import Operator, rows
from .utils import check_non_neg, check_vector

logger = logging.getLogger(__name__)

class PowerMethod[T: ArrayLike]:
    """
    Power method for the dominant eigenpair of a linear operator.

    The solver keeps a Ritz vector and a Ritz value as the current estimate of the eigenvector
    and eigenvalue with the largest magnitude. On construction the starting vector is normalized
    and one power iteration is applied. The Ritz value stays 0.0 until :meth:`compute` was
    called at least once, so callers can tell a refined estimate from a fresh solver.

    The operator is only referenced, never copied. It has to stay unchanged as long as the
    solver is used.
    """

    #: Current estimate of the eigenvalue.
    ritz_value: float
    #: Current estimate of the eigenvector, normalized to one.
    ritz_vector: T
    #: Residual norms observed after each refinement step.
    residuals: list[float]

    _op: Operator[T]
    _dim: int
    _nr_iterations: int

    def __init__(
            self,
            op: Operator[T],
            initial: Optional[T] = None, /, *,
            namespace: Optional[ArrayNamespace[T]] = None,
            seed: Optional[int] = None) -> None:
        self._op = op
        self._dim = rows(op)
        self._nr_iterations = 0
        self.residuals = []

        if initial is None:
            xp = get_namespace(np if namespace is None else namespace)
            x0 = random_vector(xp, self._dim, seed)
        else:
            check_vector("initial", initial, self._dim)
            xp = namespace_of_arrays(initial)
            x0 = initial
        x0 = normalize(x0)

        self.ritz_value = 0.0
        self.ritz_vector = xp.zeros_like(x0)
        self._bootstrap(x0)

    @classmethod
    def restore(
            cls,
            op: Operator[T],
            ritz_vector: T,
            ritz_value: float,
            nr_iterations: int,
            residuals: Iterable[float] = ()) -> Self:
        """
        Rebuild a solver from a previously stored state. No bootstrap iteration is performed,
        so refinement continues exactly where it stopped.
        """
        check_non_neg("nr_iterations", nr_iterations)
        obj = cls.__new__(cls)
        obj._op = op
        obj._dim = rows(op)
        check_vector("ritz_vector", ritz_vector, obj._dim)
        obj._nr_iterations = int(nr_iterations)
        obj.residuals = [float(res) for res in residuals]
        obj.ritz_value = float(ritz_value)
        obj.ritz_vector = copy(ritz_vector)
        return obj

    @property
    def operator(self) -> Operator[T]:
        return self._op

    @property
    def dim(self) -> int:
        return self._dim

    def power_iteration(self, x: Optional[T] = None) -> T:
        """Return A x / |A x|, using the Ritz vector if x is not given."""
        x = self.ritz_vector if x is None else x
        return normalize(self._op @ x)

    def rayleigh_quotient(self, x: Optional[T] = None) -> float:
        """Return x^T A x, using the Ritz vector if x is not given."""
        x = self.ritz_vector if x is None else x
        return dot(x, self._op @ x)

    def residual(self) -> float:
        """Norm of the Ritz residual A x - lambda x for the current Ritz vector."""
        return self._ritz_pair(self.ritz_vector)[1]

    def converged(self, tol: float) -> bool:
        """Check whether the Ritz residual of the current Ritz pair is below tol."""
        return self.residual() < tol

    def compute(
            self,
            max_iterations: int,
            tol: float,
            callback: Optional[Callable[[int, float, float], bool]] = None) -> bool:
        """
        Refine the Ritz pair with at most max_iterations power iterations and return True as
        soon as the Ritz residual drops below tol. Consecutive calls continue the refinement.
        The callback is called with the iteration count, the Ritz value and the residual after
        each step; returning True from it stops the refinement.
        """
        check_non_neg("max_iterations", max_iterations)
        check_non_neg("tol", tol)
        if max_iterations == 0:
            return self.converged(tol)

        is_converged = False
        start = self._nr_iterations
        for _ in range(max_iterations):
            self._nr_iterations += 1
            self._step()
            self.ritz_value, residual = self._ritz_pair(self.ritz_vector)
            self.residuals.append(residual)
            is_converged = residual < tol
            stop = callback is not None and callback(self._nr_iterations, self.ritz_value, residual)
            if is_converged or stop:
                break

        logger.debug("%s: %d iterations, eigenvalue %g, residual %g, converged %s",
                     type(self).__name__, self._nr_iterations - start,
                     self.ritz_value, self.residuals[-1], is_converged)
        return is_converged

    def eigenvalue(self) -> float:
        return self.ritz_value

    def eigenvector(self) -> T:
        """Copy of the current Ritz vector."""
        return copy(self.ritz_vector)

    def nr_iterations(self) -> int:
        return self._nr_iterations

    def _ritz_pair(self, x: T) -> tuple[float, float]:
        ax = self._op @ x
        value = dot(x, ax)
        return value, norm(ax - value * x)

    def _bootstrap(self, x0: T) -> None:
        self.ritz_vector = self.power_iteration(x0)

    def _step(self) -> None:
        self.ritz_vector = self.power_iteration()
