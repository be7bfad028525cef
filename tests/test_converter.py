from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
import unittest

import utm33
from utm33.config import ConverterConfig
from utm33.converter import UTM33Converter, default_converter
from utm33.errors import IncompleteNeighborhoodError
from utm33.grid import LatLng

from _helpers import linear_table


class TestConverterConfig(unittest.TestCase):
    def test_defaults(self) -> None:
        cfg = ConverterConfig()
        self.assertEqual(cfg.granularity, 50000)
        self.assertEqual(cfg.backend, "auto")
        self.assertIsNone(cfg.data_path)

    def test_validation(self) -> None:
        with self.assertRaises(ValueError):
            ConverterConfig(granularity=0)
        with self.assertRaises(ValueError):
            ConverterConfig(granularity=2.5)  # type: ignore[arg-type]
        with self.assertRaises(ValueError):
            ConverterConfig(backend="jax")
        with self.assertRaises(ValueError):
            ConverterConfig(data_path="  ")


class TestUTM33Converter(unittest.TestCase):
    def test_convert_per_backend(self) -> None:
        for backend in ("python", "numpy", "auto"):
            conv = UTM33Converter(ConverterConfig(backend=backend))
            res = conv.convert(146001.89, 6851888.74)
            self.assertIsInstance(res, LatLng)
            self.assertAlmostEqual(res.latitude, 61.636432, delta=1.0e-5)
            self.assertAlmostEqual(res.longitude, 8.312486, delta=1.0e-5)

    def test_try_convert_and_covers(self) -> None:
        conv = UTM33Converter(ConverterConfig(backend="python"))
        self.assertIsNone(conv.try_convert(1200001.0, 7750000.0))
        self.assertFalse(conv.covers(1200001.0, 7750000.0))
        self.assertTrue(conv.covers(146001.89, 6851888.74))
        with self.assertRaises(IncompleteNeighborhoodError):
            conv.convert(1200001.0, 7750000.0)

    def test_custom_table(self) -> None:
        conv = UTM33Converter(ConverterConfig(backend="numpy"), table=linear_table())
        res = conv.convert(60000.0, 20000.0)
        self.assertAlmostEqual(res.latitude, 60.2, places=10)
        self.assertAlmostEqual(res.longitude, 10.3, places=10)

    def test_table_granularity_must_match(self) -> None:
        with self.assertRaises(ValueError):
            UTM33Converter(ConverterConfig(granularity=1000), table=linear_table())

    def test_module_level_convert(self) -> None:
        self.assertIs(default_converter(), default_converter())
        res = utm33.convert(146001.89, 6851888.74)
        self.assertAlmostEqual(res.latitude, 61.636432, delta=1.0e-5)

    def test_concurrent_calls_agree(self) -> None:
        conv = UTM33Converter(ConverterConfig(backend="python"))
        expected = conv.convert(412345.6, 7123456.7)
        with ThreadPoolExecutor(max_workers=4) as pool:
            results = list(pool.map(lambda _: conv.convert(412345.6, 7123456.7), range(32)))
        self.assertTrue(all(r == expected for r in results))


if __name__ == "__main__":
    unittest.main()
