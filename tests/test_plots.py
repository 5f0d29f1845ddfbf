"""
Unit tests for plot generation.
"""

import os
import shutil
import tempfile
import unittest

import numpy as np

from rocket_flight.config import create_test_config
from rocket_flight.main import SimulationLog, run_simulation
from rocket_flight.plotting import (
    generate_all_plots,
    extract_log_data,
    find_burnout_index,
    TrajectoryData,
)


class TestPlotGeneration(unittest.TestCase):
    """Plots are written for a short real flight."""

    @classmethod
    def setUpClass(cls):
        _, cls.log, _ = run_simulation(config=create_test_config(max_time=2.0, launch_angle=0.0))

    def setUp(self):
        self.temp_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.temp_dir, ignore_errors=True)

    def test_generate_all_plots_creates_files(self):
        saved = generate_all_plots(self.log, self.temp_dir)
        self.assertEqual(len(saved), 5)
        for path in saved:
            self.assertTrue(os.path.exists(path), f"Plot file not found: {path}")
            self.assertTrue(path.endswith('.png'))

    def test_output_directory_created(self):
        new_dir = os.path.join(self.temp_dir, 'new_subdir', 'nested')
        saved = generate_all_plots(self.log, new_dir)
        self.assertTrue(os.path.isdir(new_dir))
        self.assertGreater(len(saved), 0)

    def test_empty_log_rejected(self):
        with self.assertRaises(ValueError):
            generate_all_plots(SimulationLog(), self.temp_dir)


class TestDataExtraction(unittest.TestCase):

    def test_extract_log_data_shapes(self):
        _, log, _ = run_simulation(config=create_test_config(max_time=0.5))
        data = extract_log_data(log)
        self.assertIsInstance(data, TrajectoryData)
        n = len(log.time)
        self.assertEqual(data.time.shape, (n,))
        self.assertEqual(data.altitude.shape, (n,))
        self.assertTrue(np.all(data.fuel >= 0))
        self.assertEqual(data.net_ay.shape, (n,))
        self.assertTrue(np.all(data.gravity_ay < 0))
        np.testing.assert_allclose(data.net_ay,
                                   data.thrust_ay + data.drag_ay + data.gravity_ay)

    def test_find_burnout_index(self):
        _, log, _ = run_simulation(config=create_test_config(max_time=0.5))
        data = extract_log_data(log)
        self.assertEqual(find_burnout_index(data), len(data.time) - 1)

        data.fuel = np.array([5.0, 2.0, 0.0, 0.0] + [0.0] * (len(data.time) - 4))
        self.assertEqual(find_burnout_index(data), 2)


if __name__ == '__main__':
    unittest.main()
