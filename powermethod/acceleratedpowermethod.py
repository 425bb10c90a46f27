# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Iterable, Optional, Self

from .backend import ArrayLike, ArrayNamespace, copy, norm
from .linearoperator import Operator
from .powermethod import PowerMethod
from .utils import check_non_neg, check_vector

class AcceleratedPowerMethod[T: ArrayLike](PowerMethod[T]):
    """
    Power method with momentum. Each step applies the three term recurrence
    :math:`y = A x_t - \\beta x_{t-1}` and rescales :math:`x_t` and :math:`y` by the same factor.
    For symmetric positive semi-definite operators :math:`\\beta = \\lambda_2^2 / 4` yields the
    optimal rate, :math:`\\beta = 0` is the plain power method.
    """

    #: Momentum of the three term recurrence.
    beta: float
    #: Previous Ritz vector, scaled consistently with the current one.
    previous_vector: T

    def __init__(
            self,
            op: Operator[T],
            initial: Optional[T] = None, /, *,
            beta: float = 0.0,
            namespace: Optional[ArrayNamespace[T]] = None,
            seed: Optional[int] = None) -> None:
        self.beta = beta
        super().__init__(op, initial, namespace=namespace, seed=seed)

    def __setattr__(self, name: str, value: Any) -> None:
        if name == "beta":
            check_non_neg(name, value)
        super().__setattr__(name, value)

    @classmethod
    def restore(
            cls,
            op: Operator[T],
            ritz_vector: T,
            ritz_value: float,
            nr_iterations: int,
            residuals: Iterable[float] = (), *,
            previous_vector: Optional[T] = None,
            beta: float = 0.0) -> Self:
        obj = super().restore(op, ritz_vector, ritz_value, nr_iterations, residuals)
        obj.beta = beta
        if previous_vector is None:
            previous_vector = ritz_vector * 0.0
        check_vector("previous_vector", previous_vector, obj.dim)
        obj.previous_vector = copy(previous_vector)
        return obj

    def accelerated_power_iteration(
            self,
            x: Optional[T] = None,
            previous: Optional[T] = None) -> tuple[T, T]:
        """
        Return the next vector of the recurrence and the current vector rescaled by the same
        factor. Defaults to the Ritz vector and the previous Ritz vector.
        """
        x = self.ritz_vector if x is None else x
        previous = self.previous_vector if previous is None else previous
        y = self._op @ x
        if self.beta != 0.0:
            y = y - self.beta * previous
        scale = norm(y)
        return y / scale, x / scale

    def _bootstrap(self, x0: T) -> None:
        y = self._op @ x0
        scale = norm(y)
        self.ritz_vector = y / scale
        self.previous_vector = x0 / scale

    def _step(self) -> None:
        self.ritz_vector, self.previous_vector = self.accelerated_power_iteration()
