# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""Structural types for arrays and array namespaces following the Python array API standard."""

from typing import Any, Optional, Protocol, Self

type Device = Any
type DType = Any

class ArrayLike(Protocol):
    """Minimal array interface used by the solvers."""

    @property
    def shape(self) -> tuple[int | None, ...]: ...
    @property
    def ndim(self) -> int: ...
    @property
    def dtype(self) -> DType: ...
    @property
    def device(self) -> Device: ...

    def __add__(self, other: Any, /) -> Self: ...
    def __sub__(self, other: Any, /) -> Self: ...
    def __mul__(self, other: Any, /) -> Self: ...
    def __rmul__(self, other: Any, /) -> Self: ...
    def __truediv__(self, other: Any, /) -> Self: ...
    def __neg__(self) -> Self: ...
    def __getitem__(self, key: Any, /) -> Any: ...
    def __setitem__(self, key: Any, value: Any, /) -> None: ...
    def __float__(self) -> float: ...

class ArrayNamespace[T: ArrayLike](Protocol):
    """Subset of an array API namespace used by the solvers."""

    float64: DType

    def asarray(
            self,
            obj: Any, /, *,
            dtype: Optional[DType] = None,
            device: Optional[Device] = None,
            copy: Optional[bool] = None) -> T: ...
    def zeros(
            self,
            shape: int | tuple[int, ...], /, *,
            dtype: Optional[DType] = None,
            device: Optional[Device] = None) -> T: ...
    def zeros_like(self, x: T, /, *, dtype: Optional[DType] = None, device: Optional[Device] = None) -> T: ...
    def sum(self, x: T, /, *, axis: Any = None, dtype: Optional[DType] = None, keepdims: bool = False) -> T: ...
    def sqrt(self, x: T, /) -> T: ...
    def abs(self, x: T, /) -> T: ...
    def all(self, x: T, /, *, axis: Any = None, keepdims: bool = False) -> T: ...
    def isfinite(self, x: T, /) -> T: ...
    def __array_namespace_info__(self) -> Any: ...
