from __future__ import annotations

import unittest

import numpy as np

from utm33.grid import LatLng
from utm33.interpolation import quadratic, quadratic_latlng


class TestQuadratic(unittest.TestCase):
    def test_linear_samples_degenerate_to_line(self) -> None:
        for x in (-3.0, -1.0, -0.25, 0.0, 0.5, 1.0, 1.75, 2.0, 7.5):
            self.assertEqual(quadratic(1.0, 2.0, 3.0, x), 1.0 + x)

    def test_passes_through_samples(self) -> None:
        f0, f1, f2 = 4.25, -1.5, 9.0
        self.assertEqual(quadratic(f0, f1, f2, 0.0), f0)
        self.assertAlmostEqual(quadratic(f0, f1, f2, 1.0), f1, places=12)
        self.assertAlmostEqual(quadratic(f0, f1, f2, 2.0), f2, places=12)

    def test_reproduces_parabola(self) -> None:
        def f(x: float) -> float:
            return 0.5 * x * x - 2.0 * x + 3.0

        for x in (-1.0, 0.3, 1.5, 4.0):
            self.assertAlmostEqual(quadratic(f(0.0), f(1.0), f(2.0), x), f(x), places=12)

    def test_accepts_arrays(self) -> None:
        x = np.linspace(-1.0, 3.0, 9)
        np.testing.assert_allclose(quadratic(1.0, 2.0, 3.0, x), 1.0 + x, rtol=0.0, atol=1.0e-15)

    def test_latlng_components_are_independent(self) -> None:
        p = quadratic_latlng(LatLng(1.0, 10.0), LatLng(2.0, 10.0), LatLng(3.0, 10.0), 0.5)
        self.assertAlmostEqual(p.latitude, 1.5, places=15)
        self.assertAlmostEqual(p.longitude, 10.0, places=15)


if __name__ == "__main__":
    unittest.main()
