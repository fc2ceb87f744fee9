from .similarity import (
    LEVEL_LABELS,
    FallbackSimilarityModel,
    SimilarityModel,
    SimilarityPrediction,
    TrainedSimilarityModel,
    build_similarity_model,
    cosine_similarity,
    get_similarity_model,
    label_for_similarity,
)

__all__ = [
    "LEVEL_LABELS",
    "FallbackSimilarityModel",
    "SimilarityModel",
    "SimilarityPrediction",
    "TrainedSimilarityModel",
    "build_similarity_model",
    "cosine_similarity",
    "get_similarity_model",
    "label_for_similarity",
]
