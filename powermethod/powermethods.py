# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Any, Callable, Optional, Type, overload
import h5py

from .backend import ArrayNamespace, get_namespace, random_vector
from .linearoperator import Operator, MatVecOperator, as_operator
from .powermethod import PowerMethod
from .acceleratedpowermethod import AcceleratedPowerMethod
from .poweriteration import PowerIteration, PowerIterationResult
from .options import SolverOptions, set_options, get_options

from .io import write as _write
from .io import read as _read

class PowerMethods[NDArray: Any]:
    """
    Entry point bound to an array namespace. All vectors created here live in that namespace,
    and the defaults of the solvers are taken from the active :class:`SolverOptions`.
    """

    #: Array namespace for the underlying array library.
    namespace: ArrayNamespace[NDArray]

    def __init__(self, namespace: Any) -> None:
        object.__setattr__(self, "namespace", get_namespace(namespace))
        set_options(self.options())

    #-------------------------------------------------------------------------------------------------
    # base wrapper

    def random_vector(self, dim: int, seed: Optional[int] = None) -> NDArray:
        """
        Vector of length dim with entries drawn uniformly from [-1, 1].
        """
        return random_vector(self.namespace, dim, seed)

    def matvec_operator(self, matvec: Callable[[NDArray], NDArray], dim: int) -> MatVecOperator[NDArray]:
        """
        Linear operator defined by a matrix vector product callable.
        """
        return MatVecOperator(matvec, dim)

    #-------------------------------------------------------------------------------------------------
    # solver wrapper

    def power_method(
            self,
            op: Operator[NDArray] | Any,
            initial: Optional[NDArray] = None, *,
            seed: Optional[int] = None,
            ) -> PowerMethod[NDArray]:
        """
        Power method for the dominant eigenpair of op. Without an initial vector a random
        one is drawn, using the seed of the active options if none is given.
        """
        seed = self.get_options().seed if seed is None else seed
        return PowerMethod(as_operator(op), initial, namespace=self.namespace, seed=seed)

    def accelerated_power_method(
            self,
            op: Operator[NDArray] | Any,
            initial: Optional[NDArray] = None, *,
            beta: float,
            seed: Optional[int] = None,
            ) -> AcceleratedPowerMethod[NDArray]:
        """
        Power method with momentum beta for the dominant eigenpair of op.
        """
        seed = self.get_options().seed if seed is None else seed
        return AcceleratedPowerMethod(as_operator(op), initial, beta=beta, namespace=self.namespace, seed=seed)

    def power_iteration(
            self, *,
            nsteps: Optional[int] = None,
            eps: Optional[float] = None,
            beta: float = 0.0,
            ) -> PowerIteration:
        """
        Power iteration eigenvalue solver. Missing settings are taken from the active options.
        """
        opts = self.get_options()
        return PowerIteration(nsteps=opts.max_iterations if nsteps is None else nsteps,
                              eps=opts.eps if eps is None else eps,
                              beta=beta)

    #-------------------------------------------------------------------------------------------------
    # io wrapper

    def write(self, group: h5py.Group, obj: PowerMethod[NDArray] | PowerIterationResult[NDArray]) -> None:
        """
        Write a power method solver or a power iteration result to a hdf5 group.
        """
        _write(group, obj)

    @overload
    def read(self, group: h5py.Group, cls: Type[PowerMethod[NDArray]], op: Operator[NDArray]) -> PowerMethod[NDArray]: ...
    @overload
    def read(self, group: h5py.Group, cls: Type[AcceleratedPowerMethod[NDArray]], op: Operator[NDArray]) -> AcceleratedPowerMethod[NDArray]: ...
    @overload
    def read(self, group: h5py.Group, cls: Type[PowerIterationResult[NDArray]]) -> PowerIterationResult[NDArray]: ...
    # implementation
    def read(self, group: h5py.Group, cls: Any, op: Optional[Operator[NDArray]] = None) -> Any:
        """
        Read a power method solver or a power iteration result from a hdf5 group. Solvers need
        the operator they were created with.
        """
        return _read(group, cls, self.namespace, op)

    #-------------------------------------------------------------------------------------------------
    # options

    def options(
            self, *,
            max_iterations: int = 100,
            eps: float = 1e-8,
            seed: Optional[int] = None,
            ) -> SolverOptions:
        """
        Manager for the default solver settings.
        """
        return SolverOptions(namespace=self.namespace, max_iterations=max_iterations, eps=eps, seed=seed)

    def set_options(self, options: SolverOptions) -> None:
        """
        Set options globally. The options are stored in a thread local variable.
        """
        set_options(options)

    def get_options(self) -> SolverOptions:
        """
        Get the current options.
        """
        return get_options(self.namespace)
