import unittest
import numpy as np

from powermethod import PowerMethods
from powermethod.typing import PowerIteration
from utils import backends, symmetric_matrix, to_namespace

class TestPowerIteration(unittest.TestCase):

    def setUp(self):
        self.powermethods = [PowerMethods(backend) for backend in backends]
        self.mat = symmetric_matrix([8.0, 3.0, 2.0, 1.0, 0.5], seed=0)
        self.exact = float(np.max(np.abs(np.linalg.eigvalsh(self.mat))))

    def test_solve(self) -> None:
        for pm in self.powermethods:
            guess = to_namespace(pm.namespace, np.ones(5))
            solver = pm.power_iteration(nsteps=500, eps=1e-10)
            res = solver(self.mat, guess)
            self.assertTrue(res.converged)
            self.assertAlmostEqual(res.value, self.exact, delta=1e-8)
            self.assertEqual(len(res.residuals), res.iterations)
            self.assertLess(res.residuals[-1], 1e-10)
            self.assertGreaterEqual(res.time, 0.0)

    def test_callable(self) -> None:
        for pm in self.powermethods:
            guess = to_namespace(pm.namespace, np.ones(5))
            solver = pm.power_iteration(nsteps=500, eps=1e-10)
            res = solver(lambda x: self.mat @ x, guess)
            self.assertTrue(res.converged)
            self.assertAlmostEqual(res.value, self.exact, delta=1e-8)

    def test_momentum(self) -> None:
        for pm in self.powermethods:
            guess = to_namespace(pm.namespace, np.ones(5))
            plain = pm.power_iteration(nsteps=500, eps=1e-10)(self.mat, guess)
            accel = pm.power_iteration(nsteps=500, eps=1e-10, beta=9.0/4.0)(self.mat, guess)
            self.assertTrue(accel.converged)
            self.assertAlmostEqual(accel.value, self.exact, delta=1e-8)
            self.assertLess(accel.iterations, plain.iterations)

    def test_budget(self) -> None:
        for pm in self.powermethods:
            guess = to_namespace(pm.namespace, np.ones(5))
            res = pm.power_iteration(nsteps=3, eps=0.0)(self.mat, guess)
            self.assertFalse(res.converged)
            self.assertEqual(res.iterations, 3)

    def test_settings(self) -> None:
        solver = PowerIteration()
        with self.assertRaises(ValueError):
            solver.nsteps = 0
        with self.assertRaises(ValueError):
            solver.eps = -1.0
        with self.assertRaises(ValueError):
            PowerIteration(beta=-0.1)
        self.assertEqual(solver.nsteps, 100)

if __name__ == "__main__":
    unittest.main()
