# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable
from dataclasses import dataclass
import time

from .backend import ArrayLike, size
from .linearoperator import Operator, MatVecOperator
from .powermethod import PowerMethod
from .acceleratedpowermethod import AcceleratedPowerMethod
from .utils import check_pos, check_non_neg

@dataclass(kw_only=True)
class PowerIterationResult[T: ArrayLike]:
    #: Eigenvector
    array: T
    #: Eigenvalue
    value: float
    #: Whether the Ritz residual dropped below the tolerance.
    converged: bool
    #: Number of refinement steps.
    iterations: int
    #: Time taken to compute the eigenvector and eigenvalue.
    time: float
    #: Ritz residual after each step.
    residuals: list[float]

@dataclass
class PowerIteration:
    """
    Power iteration eigenvalue solver for the eigenvalue with the largest magnitude.
    """

    #: Maximum number of power iterations
    nsteps: int = 100

    #: Ritz residual, below which the algorithm is stopped
    eps: float = 1e-8

    #: Momentum of the accelerated power method, zero disables the acceleration
    beta: float = 0.0

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "nsteps":
            check_pos(name, value)
        elif name in ("eps", "beta"):
            check_non_neg(name, value)
        super().__setattr__(name, value)

    def __call__[T: ArrayLike](
            self,
            mat: Operator[T] | Callable[[T], T],
            guess: T, /) -> PowerIterationResult[T]:
        """
        Solve the eigenvalue problem for a linear operator or a matrix vector product callable,
        starting from the initial guess.
        """
        op = mat if hasattr(mat, "shape") else MatVecOperator(mat, size(guess))

        stamp = time.time()
        if self.beta > 0.0:
            solver = AcceleratedPowerMethod(op, guess, beta=self.beta)
        else:
            solver = PowerMethod(op, guess)
        converged = solver.compute(self.nsteps, self.eps)

        return PowerIterationResult(array=solver.eigenvector(),
                                    value=solver.eigenvalue(),
                                    converged=converged,
                                    iterations=solver.nr_iterations(),
                                    time=time.time() - stamp,
                                    residuals=solver.residuals)
