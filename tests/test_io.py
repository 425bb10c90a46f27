import unittest
import os
import h5py
import numpy as np

from powermethod import PowerMethods
from powermethod.typing import PowerMethod, AcceleratedPowerMethod, PowerIterationResult
from utils import backends, symmetric_matrix, to_namespace

path = os.path.dirname(__file__)
class TestIO(unittest.TestCase):

    def setUp(self) -> None:
        self.powermethods = [PowerMethods(backend) for backend in backends]
        self.mat = symmetric_matrix([4.0, 2.0, 1.0, 0.5], seed=0)

        os.makedirs(f"{path}/data", exist_ok=True)
        self.file = h5py.File(f"{path}/data/test_io.h5", "w")

    def tearDown(self) -> None:
        self.file.close()
        os.remove(f"{path}/data/test_io.h5")
        os.rmdir(f"{path}/data")

    def test_powermethod(self) -> None:
        for pm in self.powermethods:
            group = self.file.create_group("powermethod")
            ref = pm.power_method(self.mat, seed=1)
            ref.compute(5, 0.0)

            pm.write(group, ref)
            solver = pm.read(group, PowerMethod, self.mat)

            self.assertIs(type(solver), PowerMethod)
            self.assertEqual(solver.nr_iterations(), ref.nr_iterations())
            self.assertEqual(solver.eigenvalue(), ref.eigenvalue())
            self.assertEqual(solver.residuals, ref.residuals)
            self.assertTrue(np.array_equal(np.asarray(solver.eigenvector()),
                                           np.asarray(ref.eigenvector())))

            ref.compute(3, 0.0)
            solver.compute(3, 0.0)
            self.assertAlmostEqual(solver.eigenvalue(), ref.eigenvalue(), delta=1e-14)

            del self.file["powermethod"]

    def test_acceleratedpowermethod(self) -> None:
        for pm in self.powermethods:
            group = self.file.create_group("acceleratedpowermethod")
            ref = pm.accelerated_power_method(self.mat, beta=0.25, seed=2)
            ref.compute(4, 0.0)

            pm.write(group, ref)
            solver = pm.read(group, AcceleratedPowerMethod, self.mat)

            self.assertIs(type(solver), AcceleratedPowerMethod)
            self.assertEqual(solver.beta, 0.25)
            self.assertTrue(np.array_equal(np.asarray(solver.previous_vector),
                                           np.asarray(ref.previous_vector)))

            ref.compute(3, 0.0)
            solver.compute(3, 0.0)
            self.assertTrue(np.allclose(np.asarray(solver.eigenvector()),
                                        np.asarray(ref.eigenvector()), atol=1e-14))

            del self.file["acceleratedpowermethod"]

    def test_result(self) -> None:
        for pm in self.powermethods:
            group = self.file.create_group("result")
            guess = to_namespace(pm.namespace, np.ones(4))
            ref = pm.power_iteration(nsteps=200, eps=1e-10)(self.mat, guess)

            pm.write(group, ref)
            res = pm.read(group, PowerIterationResult)

            self.assertEqual(res.value, ref.value)
            self.assertEqual(res.converged, ref.converged)
            self.assertEqual(res.iterations, ref.iterations)
            self.assertEqual(res.residuals, ref.residuals)
            self.assertTrue(np.array_equal(np.asarray(res.array), np.asarray(ref.array)))

            del self.file["result"]

    def test_invalid(self) -> None:
        for pm in self.powermethods:
            group = self.file.create_group("invalid")
            with self.assertRaises(ValueError):
                pm.write(group, self.mat)
            with self.assertRaises(ValueError):
                pm.read(group, PowerMethod)
            del self.file["invalid"]

if __name__ == "__main__":
    unittest.main()
