# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Protocol, Callable
from .backend import ArrayLike
from .linearoperator import Operator

class EigSolverResult[T: ArrayLike](Protocol):
    """Protocol for the result of an eigenvalue solver."""

    #: The eigenvector corresponding to the computed eigenvalue.
    array: T

    #: The computed eigenvalue.
    value: float

class EigSolver[T: EigSolverResult](Protocol):
    """Protocol for an iterative eigenvalue solver."""

    def __call__[S: ArrayLike](self,
                 mat: Operator[S] | Callable[[S], S],
                 guess: S, /
                 ) -> T:
        """
        Solve an eigenvalue problem for a linear map with an initial guess.
        """
        ...
