import numpy as np
import array_api_compat as api

backends = [api.array_namespace(np.zeros(1))]

#import torch as tr
#tr.set_default_dtype(tr.float64)
#backends.append(api.array_namespace(tr.zeros(1)))

#import cupy as cp
#backends.append(api.array_namespace(cp.zeros(1)))

def symmetric_matrix(eigvals, seed: int = 0) -> np.ndarray:
    """Dense symmetric matrix with the given spectrum and a random orthonormal eigenbasis."""
    rng = np.random.default_rng(seed)
    q, _ = np.linalg.qr(rng.normal(size=(len(eigvals), len(eigvals))))
    return q @ np.diag(eigvals) @ q.T

def to_namespace(xp, data):
    return xp.asarray(np.asarray(data, dtype=np.float64))

def vector_norm(x) -> float:
    return float(np.linalg.norm(np.asarray(x)))

def sign_aligned(x, ref) -> np.ndarray:
    """Flip x so that it points into the same half space as ref."""
    x = np.asarray(x)
    return x if float(x @ np.asarray(ref)) >= 0.0 else -x
