# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from math import sqrt
from typing import Any, Optional
import numpy as np
import array_api_compat as api
from array_api_compat import to_device
from array_api_compat import size as _size

from .array_namespace import ArrayNamespace, ArrayLike, Device, DType


def get_namespace(obj: Any) -> ArrayNamespace:
    if not api.is_array_api_obj(obj):
        try:
            obj = obj.zeros(1)
        except AttributeError:
            raise TypeError("Provided object is not a recognized array or namespace.")
    return api.array_namespace(obj) # type: ignore

def namespace_of_arrays[T: ArrayLike](*arrays: T) -> ArrayNamespace[T]:
    return api.array_namespace(*arrays) # type: ignore

def size(array: ArrayLike) -> int:
    val = _size(array)
    if val is None:
        raise ValueError("Array size is unknown (None).")
    return val

def copy[T: ArrayLike](x: T) -> T:
    return namespace_of_arrays(x).asarray(x, copy=True)

def dot(x: ArrayLike, y: ArrayLike) -> float:
    xp = namespace_of_arrays(x, y)
    return float(xp.sum(x * y))

def norm(x: ArrayLike) -> float:
    return sqrt(dot(x, x))

def normalize[T: ArrayLike](x: T) -> T:
    """Return x scaled to unit euclidean norm. The input is left untouched."""
    return x / norm(x)

def random_vector[T: ArrayLike](
        xp: ArrayNamespace[T],
        dim: int,
        seed: Optional[int] = None,
        dtype: Optional[DType] = None,
        device: Optional[Device] = None) -> T:
    """Vector with entries drawn uniformly from [-1, 1]."""
    data = np.random.default_rng(seed).uniform(-1.0, 1.0, dim)
    dtype = xp.float64 if dtype is None else dtype
    return xp.asarray(data, dtype=dtype, device=device)
