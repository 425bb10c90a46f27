# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Optional, Type, overload
import h5py
import numpy as np

from .backend import ArrayNamespace, ArrayLike, to_device
from .linearoperator import Operator
from .powermethod import PowerMethod
from .acceleratedpowermethod import AcceleratedPowerMethod
from .poweriteration import PowerIterationResult

@overload
def write(group: h5py.Group, obj: PowerMethod) -> None: ...
@overload
def write(group: h5py.Group, obj: PowerIterationResult) -> None: ...
#implementation
def write(group: h5py.Group, obj: Any) -> None:
    if isinstance(obj, AcceleratedPowerMethod):
        group.attrs["beta"] = obj.beta
        group.create_dataset("previous_vector", data=_to_numpy(obj.previous_vector))
    if isinstance(obj, PowerMethod):
        group.attrs["ritz_value"] = obj.eigenvalue()
        group.attrs["nr_iterations"] = obj.nr_iterations()
        group.create_dataset("ritz_vector", data=_to_numpy(obj.eigenvector()))
        group.create_dataset("residuals", data=np.asarray(obj.residuals, dtype=np.float64))
    elif isinstance(obj, PowerIterationResult):
        group.attrs["value"] = obj.value
        group.attrs["converged"] = obj.converged
        group.attrs["iterations"] = obj.iterations
        group.attrs["time"] = obj.time
        group.create_dataset("array", data=_to_numpy(obj.array))
        group.create_dataset("residuals", data=np.asarray(obj.residuals, dtype=np.float64))
    else:
        raise ValueError(f"Cannot write object of type {type(obj).__name__}.")

@overload
def read[T: ArrayLike](group: h5py.Group, cls: Type[PowerMethod[T]], xp: ArrayNamespace[T], op: Operator[T]) -> PowerMethod[T]: ...
@overload
def read[T: ArrayLike](group: h5py.Group, cls: Type[AcceleratedPowerMethod[T]], xp: ArrayNamespace[T], op: Operator[T]) -> AcceleratedPowerMethod[T]: ...
@overload
def read[T: ArrayLike](group: h5py.Group, cls: Type[PowerIterationResult[T]], xp: ArrayNamespace[T]) -> PowerIterationResult[T]: ...
#implementation
def read(group: h5py.Group, cls: Any, xp: ArrayNamespace, op: Optional[Operator] = None) -> Any:
    if cls in (PowerMethod, AcceleratedPowerMethod):
        if op is None:
            raise ValueError("Operator must be provided to read a power method.")
        kwargs = {}
        if cls == AcceleratedPowerMethod:
            kwargs["beta"] = float(get_attr(group, "beta"))
            kwargs["previous_vector"] = get_array(group, "previous_vector", xp)
        return cls.restore(op,
                           get_array(group, "ritz_vector", xp),
                           float(get_attr(group, "ritz_value")),
                           int(get_attr(group, "nr_iterations")),
                           [float(res) for res in get_dataset(group, "residuals")],
                           **kwargs)
    elif cls == PowerIterationResult:
        return PowerIterationResult(array=get_array(group, "array", xp),
                                    value=float(get_attr(group, "value")),
                                    converged=bool(get_attr(group, "converged")),
                                    iterations=int(get_attr(group, "iterations")),
                                    time=float(get_attr(group, "time")),
                                    residuals=[float(res) for res in get_dataset(group, "residuals")])

    raise ValueError("Invalid class.")

def get_attr(group: h5py.Group, name: str) -> Any:
    return group.attrs[name]

def get_dataset(group: h5py.Group, name: str) -> np.ndarray:
    dataset = group[name]
    assert isinstance(dataset, h5py.Dataset)
    return np.asarray(dataset)

def get_array[T: ArrayLike](group: h5py.Group, name: str, xp: ArrayNamespace[T]) -> T:
    return xp.asarray(get_dataset(group, name))

def _to_numpy(array: ArrayLike) -> np.ndarray:
    return np.asarray(to_device(array, "cpu"))
