from __future__ import annotations

import logging
import math
from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path
from typing import Any, Protocol

from resume_analyzer.core.config import settings
from resume_analyzer.core.config.scoring import get_scoring_value
from resume_analyzer.core.errors import LevelModelLoadError

logger = logging.getLogger(__name__)

LEVEL_LABELS = ("Junior", "Mid", "Senior", "Reject")


@dataclass(frozen=True)
class SimilarityPrediction:
    similarity: float
    level_label: str


class SimilarityModel(Protocol):
    name: str

    def score_and_predict(self, resume_text: str, job_text: str) -> SimilarityPrediction:
        """Return similarity in [0, 1] and a candidate-level label."""


def cosine_similarity(left: list[float], right: list[float]) -> float:
    if len(left) != len(right):
        return 0.0
    dot = sum(a * b for a, b in zip(left, right))
    left_norm = math.sqrt(sum(a * a for a in left))
    right_norm = math.sqrt(sum(b * b for b in right))
    if left_norm <= 0 or right_norm <= 0:
        return 0.0
    return min(1.0, max(0.0, dot / (left_norm * right_norm)))


def _presence_vectors(left_text: str, right_text: str) -> tuple[list[float], list[float]]:
    left_words = set(left_text.lower().split())
    right_words = set(right_text.lower().split())
    vocabulary = sorted(left_words | right_words)
    left = [1.0 if word in left_words else 0.0 for word in vocabulary]
    right = [1.0 if word in right_words else 0.0 for word in vocabulary]
    return left, right


def label_for_similarity(similarity: float) -> str:
    senior = float(get_scoring_value("similarity.level_thresholds.senior", 0.7))
    mid = float(get_scoring_value("similarity.level_thresholds.mid", 0.5))
    junior = float(get_scoring_value("similarity.level_thresholds.junior", 0.3))
    if similarity > senior:
        return "Senior"
    if similarity > mid:
        return "Mid"
    if similarity > junior:
        return "Junior"
    return "Reject"


class FallbackSimilarityModel:
    """Bag-of-words presence cosine with fixed label bands. No I/O."""

    name = "fallback"

    def score_and_predict(self, resume_text: str, job_text: str) -> SimilarityPrediction:
        left, right = _presence_vectors(resume_text or "", job_text or "")
        similarity = cosine_similarity(left, right)
        return SimilarityPrediction(similarity=similarity, level_label=label_for_similarity(similarity))


class TrainedSimilarityModel:
    """Wraps a fitted scikit-learn vectorizer + classifier pair."""

    name = "trained"

    def __init__(self, vectorizer: Any, classifier: Any) -> None:
        self._vectorizer = vectorizer
        self._classifier = classifier

    @classmethod
    def from_path(cls, path: str | Path) -> "TrainedSimilarityModel":
        import joblib

        try:
            artifact = joblib.load(Path(path))
        except Exception as exc:
            raise LevelModelLoadError(f"Unable to load level model '{path}': {exc}") from exc

        if not isinstance(artifact, dict) or "vectorizer" not in artifact or "classifier" not in artifact:
            raise LevelModelLoadError(
                f"Invalid level model '{path}': expected a mapping with 'vectorizer' and 'classifier'."
            )
        return cls(vectorizer=artifact["vectorizer"], classifier=artifact["classifier"])

    def score_and_predict(self, resume_text: str, job_text: str) -> SimilarityPrediction:
        from sklearn.metrics.pairwise import cosine_similarity as sk_cosine_similarity

        vectors = self._vectorizer.transform([resume_text or "", job_text or ""])
        similarity = float(sk_cosine_similarity(vectors[0:1], vectors[1:2])[0][0])
        pair_features = self._vectorizer.transform([f"{resume_text or ''}\n{job_text or ''}"])
        label = str(self._classifier.predict(pair_features)[0])
        return SimilarityPrediction(similarity=min(1.0, max(0.0, similarity)), level_label=label)


def build_similarity_model(model_path: str | Path | None) -> SimilarityModel:
    if model_path and Path(model_path).is_file():
        try:
            model = TrainedSimilarityModel.from_path(model_path)
        except LevelModelLoadError as exc:
            logger.warning("level_model_load_failed path=%s error=%s", model_path, exc)
        else:
            logger.info("similarity_model_selected strategy=trained path=%s", model_path)
            return model
    logger.info("similarity_model_selected strategy=fallback")
    return FallbackSimilarityModel()


@lru_cache(maxsize=1)
def get_similarity_model() -> SimilarityModel:
    return build_similarity_model(settings.level_model_path)
