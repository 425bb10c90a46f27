# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

"""typing has all classes used in the external API of powermethod."""

from .array_namespace import ArrayLike, ArrayNamespace
from .linearoperator import Operator, MatVecOperator
from .localeigsolver import EigSolver, EigSolverResult
from .powermethod import PowerMethod
from .acceleratedpowermethod import AcceleratedPowerMethod
from .poweriteration import PowerIteration, PowerIterationResult
from .options import Options, SolverOptions

from .powermethods import PowerMethods
