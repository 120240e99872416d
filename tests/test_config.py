import pathlib
import tempfile
import unittest
from unittest import mock

from vibrosense.config.app_config import AppPaths
from vibrosense.config.runtime import VibroConfig, config_from_mapping, load_config
from vibrosense.core.signal_generator import GeneratorConfig


class VibroConfigTest(unittest.TestCase):
    def test_defaults_match_demo_device(self):
        cfg = VibroConfig()
        self.assertEqual(cfg.window_size, 300)
        self.assertEqual(cfg.tick_interval_ms, 30.0)
        self.assertEqual(cfg.connect_delay_s, 2.0)
        self.assertEqual(cfg.max_recordings, 5)
        self.assertEqual(GeneratorConfig.from_settings(cfg), GeneratorConfig())

    def test_generator_block_is_flattened_and_unknown_keys_ignored(self):
        cfg = config_from_mapping(
            {
                "generator": {"window_size": 120, "amplitude": 0.5},
                "max_recordings": 3,
                "colour": "blue",
            }
        )
        self.assertEqual(cfg.window_size, 120)
        self.assertEqual(cfg.amplitude, 0.5)
        self.assertEqual(cfg.max_recordings, 3)

    def test_values_are_sanitized(self):
        cfg = config_from_mapping(
            {
                "max_recordings": 0,
                "tick_interval_ms": -5,
                "haptics": {"haptic_intensity": 3.0},
                "baseline_jitter": -0.1,
            }
        )
        self.assertEqual(cfg.max_recordings, 1)
        self.assertEqual(cfg.tick_interval_ms, 1.0)
        self.assertEqual(cfg.haptic_intensity, 1.0)
        self.assertEqual(cfg.baseline_jitter, 0.1)

    def test_empty_mapping_gives_defaults(self):
        self.assertEqual(config_from_mapping(None), VibroConfig())
        self.assertEqual(config_from_mapping({}), VibroConfig())

    def test_load_config_from_yaml(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "vibrosense.yaml"
            path.write_text(
                "generator:\n  phase_step: 0.1\nconnect_delay_s: 1.5\n", encoding="utf-8"
            )
            cfg = load_config(path)
        self.assertEqual(cfg.phase_step, 0.1)
        self.assertEqual(cfg.connect_delay_s, 1.5)

    def test_load_config_missing_file_falls_back(self):
        self.assertEqual(load_config(None), VibroConfig())
        self.assertEqual(load_config("/nonexistent/vibrosense.yaml"), VibroConfig())

    def test_load_config_rejects_non_mapping(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "bad.yaml"
            path.write_text("- a\n- b\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_config(path)


class AppPathsTest(unittest.TestCase):
    def test_env_overrides(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            root = pathlib.Path(tmpdir)
            with mock.patch.dict(
                "os.environ",
                {
                    "VIBROSENSE_DATA_ROOT": str(root / "data"),
                    "VIBROSENSE_LOG_DIR": str(root / "logs"),
                },
            ):
                paths = AppPaths(base_dir=root / "unused")
            paths.ensure()
            self.assertEqual(paths.exports, root / "data" / "exports")
            self.assertTrue(paths.exports.is_dir())
            self.assertTrue(paths.logs.is_dir())


if __name__ == "__main__":
    unittest.main()
