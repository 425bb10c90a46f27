# Copyright© 2025-2026 Gesellschaft zur Förderung der angewandten Forschung e.V.
# acting on behalf of its Fraunhofer Institut für Graphische Datenverarbeitung.
# Licensed under the EUPL. See LICENSE.txt.

from .linearoperator import Operator, MatVecOperator, as_operator, rows
from .powermethod import PowerMethod
from .acceleratedpowermethod import AcceleratedPowerMethod
from .poweriteration import PowerIteration, PowerIterationResult
from .options import SolverOptions, set_options, get_options
from .powermethods import PowerMethods
