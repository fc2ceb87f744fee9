import sys
import tempfile
import unittest
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

import joblib  # noqa: E402
from sklearn.feature_extraction.text import TfidfVectorizer  # noqa: E402
from sklearn.linear_model import LogisticRegression  # noqa: E402

from resume_analyzer.semantic import (  # noqa: E402
    LEVEL_LABELS,
    FallbackSimilarityModel,
    TrainedSimilarityModel,
    build_similarity_model,
    label_for_similarity,
)

_TRAINING_ROWS = [
    ("Experienced C# developer with 5 years in .NET and React", "Senior .NET Engineer position requiring C# and React", "Senior"),
    ("Junior developer with basic C# knowledge", "Senior .NET Engineer position requiring C# and React", "Junior"),
    ("Mid-level developer with 3 years C# and SQL experience", "Mid-level .NET Developer with SQL", "Mid"),
    ("No relevant experience", "Senior .NET Engineer position requiring C# and React", "Reject"),
]


def _fit_artifact() -> dict:
    texts = [resume for resume, _, _ in _TRAINING_ROWS] + [job for _, job, _ in _TRAINING_ROWS]
    vectorizer = TfidfVectorizer().fit(texts)
    pairs = vectorizer.transform([f"{resume}\n{job}" for resume, job, _ in _TRAINING_ROWS])
    classifier = LogisticRegression(max_iter=200).fit(pairs, [label for _, _, label in _TRAINING_ROWS])
    return {"vectorizer": vectorizer, "classifier": classifier}


class FallbackSimilarityTests(unittest.TestCase):
    def setUp(self):
        self.model = FallbackSimilarityModel()

    def test_identical_texts_are_fully_similar(self):
        prediction = self.model.score_and_predict("python docker aws", "AWS Docker python")
        self.assertAlmostEqual(prediction.similarity, 1.0)
        self.assertEqual(prediction.level_label, "Senior")

    def test_identical_word_sets_never_exceed_one(self):
        for size in (3, 6, 12, 13):
            text = " ".join(f"term{index}" for index in range(size))
            prediction = self.model.score_and_predict(text, text)
            self.assertLessEqual(prediction.similarity, 1.0)
            self.assertAlmostEqual(prediction.similarity, 1.0)
            self.assertEqual(prediction.level_label, "Senior")

    def test_disjoint_or_empty_texts_score_zero(self):
        self.assertEqual(self.model.score_and_predict("alpha beta", "gamma delta").similarity, 0.0)
        prediction = self.model.score_and_predict("", "gamma delta")
        self.assertEqual(prediction.similarity, 0.0)
        self.assertEqual(prediction.level_label, "Reject")

    def test_presence_vectors_ignore_repetition(self):
        prediction = self.model.score_and_predict("a b a b a b", "a c")
        self.assertAlmostEqual(prediction.similarity, 0.5)
        self.assertEqual(prediction.level_label, "Junior")

    def test_threshold_bands_are_exclusive(self):
        self.assertEqual(label_for_similarity(0.71), "Senior")
        self.assertEqual(label_for_similarity(0.7), "Mid")
        self.assertEqual(label_for_similarity(0.51), "Mid")
        self.assertEqual(label_for_similarity(0.5), "Junior")
        self.assertEqual(label_for_similarity(0.31), "Junior")
        self.assertEqual(label_for_similarity(0.3), "Reject")


class StrategySelectionTests(unittest.TestCase):
    def test_missing_artifact_selects_fallback(self):
        self.assertIsInstance(build_similarity_model(None), FallbackSimilarityModel)
        self.assertIsInstance(build_similarity_model("does/not/exist.joblib"), FallbackSimilarityModel)

    def test_unreadable_artifact_selects_fallback(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "broken.joblib"
            path.write_bytes(b"definitely not a model")
            self.assertIsInstance(build_similarity_model(path), FallbackSimilarityModel)

    def test_trained_artifact_is_loaded_and_queried(self):
        with tempfile.TemporaryDirectory() as tmp_dir:
            path = Path(tmp_dir) / "level.joblib"
            joblib.dump(_fit_artifact(), path)
            model = build_similarity_model(path)

        self.assertIsInstance(model, TrainedSimilarityModel)
        prediction = model.score_and_predict(
            "Experienced C# developer with React",
            "Senior .NET Engineer position requiring C# and React",
        )
        self.assertIn(prediction.level_label, LEVEL_LABELS)
        self.assertGreaterEqual(prediction.similarity, 0.0)
        self.assertLessEqual(prediction.similarity, 1.0)


if __name__ == "__main__":
    unittest.main()
