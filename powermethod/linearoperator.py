# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Optional, Protocol
from dataclasses import dataclass
from scipy.sparse import issparse
from scipy.sparse.linalg import LinearOperator

from .backend import ArrayLike
from .utils import check_pos

class Operator[T: ArrayLike](Protocol):
    """
    Protocol for a square linear map. Dense arrays, scipy sparse matrices and scipy linear
    operators satisfy it without any wrapping.
    """

    @property
    def shape(self) -> tuple[int, ...]: ...

    def __matmul__(self, x: T, /) -> T:
        """Apply the linear map to a vector."""
        ...

def rows(op: Operator) -> int:
    """Dimension of the vectors the operator acts on."""
    return int(op.shape[0])

@dataclass(frozen=True)
class MatVecOperator[T: ArrayLike]:
    """
    Operator defined by a matrix vector product callable, e.g. a Hessian vector product
    or a matrix free stencil.
    """

    #: Callable mapping a vector of length dim to a vector of length dim.
    matvec: Callable[[T], T]
    #: Dimension of the vector space.
    dim: int

    def __post_init__(self) -> None:
        check_pos("dim", self.dim)

    @property
    def shape(self) -> tuple[int, int]:
        return (self.dim, self.dim)

    def __matmul__(self, x: T) -> T:
        return self.matvec(x)

def as_operator(obj: Any, dim: Optional[int] = None) -> Operator:
    """
    Return obj as an Operator. Callables without a shape are wrapped in a MatVecOperator,
    which requires the dimension.
    """
    if issparse(obj) or isinstance(obj, LinearOperator):
        return obj
    if hasattr(obj, "shape") and hasattr(obj, "__matmul__"):
        if len(obj.shape) != 2:
            raise ValueError(f"Operator must be two dimensional, got shape {tuple(obj.shape)}")
        return obj
    if callable(obj):
        if dim is None:
            raise ValueError("The dimension must be provided for a matrix vector product callable.")
        return MatVecOperator(obj, dim)
    raise TypeError(f"Object of type {type(obj).__name__} is not a linear operator.")
