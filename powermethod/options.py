# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from typing import Hashable, Any, Optional, Self
import threading

from .backend import ArrayNamespace
from .utils import check_pos, check_non_neg

class Options:

    key: Hashable

    def __init__(self, namespace: ArrayNamespace):
        self.key = (namespace, threading.get_ident())

    def __enter__(self) -> Self:
        global _opts
        if self.key in _opts:
            self._tmp = _opts[self.key]
        else:
            self._tmp = None
        _opts[self.key] = self
        return self

    def __exit__(self, *_) -> None:
        global _opts
        if self._tmp is not None:
            _opts[self.key] = self._tmp
        else:
            del _opts[self.key]

class SolverOptions(Options):
    """
    Context manager for the default settings of the power method solvers.
    """

    #: Maximum number of power iterations.
    max_iterations: int
    #: Ritz residual, below which the iteration is stopped.
    eps: float
    #: Seed for random starting vectors, None draws a fresh one every time.
    seed: Optional[int]

    def __init__(
            self, *,
            namespace: ArrayNamespace,
            max_iterations: int = 100,
            eps: float = 1e-8,
            seed: Optional[int] = None):
        check_pos("max_iterations", max_iterations)
        check_non_neg("eps", eps)
        self.max_iterations = max_iterations
        self.eps = eps
        self.seed = seed
        super().__init__(namespace)

_opts: dict[Any, Options] = {}

def get_options(namespace: ArrayNamespace) -> SolverOptions:
    global _opts
    key = (namespace, threading.get_ident())
    if key in _opts:
        return _opts[key] # type: ignore
    else:
        raise KeyError("No options set for the current thread.")

def set_options(opts: SolverOptions) -> None:
    global _opts
    _opts[opts.key] = opts
