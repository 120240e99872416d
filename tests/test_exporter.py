import json
import pathlib
import tempfile
import unittest
from datetime import datetime, timezone

import numpy as np

from vibrosense.core.models import Recording
from vibrosense.dataio.exporter import EXPORT_HEADERS, export_logs
from vibrosense.dataio.file_paths import build_export_paths, sanitize_name
from vibrosense.dataio.log_loader import load_export

WHEN = datetime(2025, 12, 4, 15, 30, 45, tzinfo=timezone.utc)


def _recordings():
    return [
        Recording(timestamp=WHEN, samples=np.linspace(-1.0, 1.0, 300)),
        Recording(timestamp=WHEN, samples=np.sin(np.arange(300) * 0.2) * 0.2),
    ]


class ExporterTest(unittest.TestCase):
    def test_export_writes_csv_and_sidecar(self):
        recs = _recordings()
        with tempfile.TemporaryDirectory() as tmpdir:
            result = export_logs(recs, pathlib.Path(tmpdir), clock=lambda: WHEN)

            self.assertIsNotNone(result)
            self.assertEqual(result.data_path.name, "recordings_20251204_153045.csv")
            self.assertEqual(result.rows_written, 600)
            self.assertEqual(result.recording_count, 2)

            header = result.data_path.read_text(encoding="utf-8").splitlines()[0]
            self.assertEqual(header, ",".join(EXPORT_HEADERS))

            meta = json.loads(result.meta_path.read_text(encoding="utf-8"))
            self.assertEqual(meta["count"], 2)
            self.assertEqual(meta["capacity"], 300)
            self.assertEqual(
                [entry["recording_id"] for entry in meta["recordings"]],
                [str(rec.recording_id) for rec in recs],
            )

            loaded = load_export(result.data_path)
            for rec in recs:
                np.testing.assert_allclose(loaded[str(rec.recording_id)], rec.samples)

    def test_exports_in_the_same_second_do_not_overwrite(self):
        recs = _recordings()
        with tempfile.TemporaryDirectory() as tmpdir:
            first = export_logs(recs, pathlib.Path(tmpdir), clock=lambda: WHEN)
            second = export_logs(recs[:1], pathlib.Path(tmpdir), clock=lambda: WHEN)

            self.assertNotEqual(first.data_path, second.data_path)
            self.assertEqual(second.data_path.name, "recordings_20251204_153045_1.csv")
            self.assertEqual(second.meta_path.name, "recordings_20251204_153045_1.csv.meta.json")
            self.assertEqual(len(load_export(first.data_path)), 2)
            self.assertEqual(len(load_export(second.data_path)), 1)

    def test_empty_log_exports_nothing(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            self.assertIsNone(export_logs([], pathlib.Path(tmpdir)))
            self.assertEqual(list(pathlib.Path(tmpdir).iterdir()), [])

    def test_previews_are_rendered(self):
        recs = _recordings()
        with tempfile.TemporaryDirectory() as tmpdir:
            result = export_logs(recs, pathlib.Path(tmpdir), previews=True, clock=lambda: WHEN)
            self.assertEqual(len(result.preview_paths), 2)
            for path in result.preview_paths:
                self.assertTrue(path.exists())
                self.assertEqual(path.suffix, ".png")

    def test_load_export_rejects_foreign_csv(self):
        with tempfile.TemporaryDirectory() as tmpdir:
            path = pathlib.Path(tmpdir) / "other.csv"
            path.write_text("time,x\n1,2\n", encoding="utf-8")
            with self.assertRaises(ValueError):
                load_export(path)


class FilePathsTest(unittest.TestCase):
    def test_sanitize_name(self):
        self.assertEqual(sanitize_name("shake test/1"), "shake_test_1")
        self.assertEqual(sanitize_name("///"), "recordings")

    def test_sidecar_sits_next_to_data(self):
        paths = build_export_paths(pathlib.Path("out"), WHEN, name="demo run")
        self.assertEqual(paths.data_path, pathlib.Path("out/demo_run_20251204_153045.csv"))
        self.assertEqual(paths.meta_path.name, "demo_run_20251204_153045.csv.meta.json")


if __name__ == "__main__":
    unittest.main()
