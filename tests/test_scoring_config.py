import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from resume_analyzer.core.config.scoring import (  # noqa: E402
    DEFAULT_SCORING_CONFIG_PATH,
    get_scoring_config,
    get_scoring_value,
    load_scoring_config,
)


class ScoringConfigTests(unittest.TestCase):
    def test_bundled_file_has_expected_defaults(self):
        config = load_scoring_config(DEFAULT_SCORING_CONFIG_PATH)
        self.assertEqual(config["ats"]["weights"]["skills"], 40)
        self.assertEqual(config["suggestions"]["low_ats_threshold"], 70)

    def test_dot_path_lookup(self):
        self.assertEqual(get_scoring_value("compatibility.similarity_weight"), 0.6)
        self.assertEqual(get_scoring_value("extraction.max_entries.work_experience"), 10)
        self.assertEqual(get_scoring_value("ats.missing.key", 5), 5)
        self.assertEqual(get_scoring_value("ats.weights.skills.deeper", "x"), "x")
        self.assertIsNone(get_scoring_value(""))

    def test_config_is_cached(self):
        self.assertIs(get_scoring_config(), get_scoring_config())

    def test_missing_file_is_runtime_error(self):
        with self.assertRaises(RuntimeError):
            load_scoring_config(Path(tempfile.gettempdir()) / "no-such-scoring.yaml")

    def test_invalid_files_are_runtime_errors(self):
        with tempfile.TemporaryDirectory() as tmp:
            broken = Path(tmp) / "broken.yaml"
            broken.write_text("ats: [unclosed", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                load_scoring_config(broken)

            scalar = Path(tmp) / "scalar.yaml"
            scalar.write_text("just text", encoding="utf-8")
            with self.assertRaises(RuntimeError):
                load_scoring_config(scalar)

            partial = Path(tmp) / "partial.yaml"
            partial.write_text("ats:\n  weights: {}\n", encoding="utf-8")
            with self.assertRaises(RuntimeError) as ctx:
                load_scoring_config(partial)
            self.assertIn("compatibility", str(ctx.exception))


if __name__ == "__main__":
    unittest.main()
