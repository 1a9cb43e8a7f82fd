"""
Linguistic Engine (Text Module)
Keyword, sentiment and emotion scoring over transcript tokens
"""
import numpy as np
from typing import Dict, List, Tuple

from .lexicon import Lexicon, DEFAULT_LEXICON
from config import (
    TEXT_FEATURE_DIM, NEGATIVE_KEYWORD_WEIGHT, CRITICAL_KEYWORD_WEIGHT,
    EMOTION_WORD_WEIGHT, SCORE_CEILING, NEUTRAL_SENTIMENT,
    STRESS_WEIGHTS, STRESS_SENTIMENT_THRESHOLD, STRESS_SENTIMENT_BONUS,
    FEATURE_NAMES
)


class LinguisticEngine:
    """
    Text Feature Extraction (8 features)

    Index layout:
        0  has_keywords      1.0 if any negative keyword was found
        1  keyword_threat    10 per negative + 50 per critical, capped at 100
        2  is_critical       1.0 if any critical keyword was found
        3  is_negative       1.0 if negative matches outnumber positive ones
        4  sentiment_score   50 (neutral) up to 100 (all negative)
        5  emotion_score     strongest emotion, 20 per matching word, capped
        6  stress_score      weighted fear + anger + sentiment bonus, capped
        7  fear_score        fear emotion score, capped

    Each sub-score makes its own pass over the tokens; repeated tokens
    count every time they occur.
    """

    def __init__(self, lexicon: Lexicon = DEFAULT_LEXICON):
        self.lexicon = lexicon

    def extract(self, tokens: List[str]) -> np.ndarray:
        """Extract all 8 text features from lower-cased tokens."""
        features = np.zeros(TEXT_FEATURE_DIM, dtype=np.float32)

        has_keywords, keyword_threat, is_critical = self._compute_keywords(tokens)
        features[0] = 1.0 if has_keywords else 0.0
        features[1] = keyword_threat
        features[2] = 1.0 if is_critical else 0.0

        is_negative, sentiment_score = self._compute_sentiment(tokens)
        features[3] = 1.0 if is_negative else 0.0
        features[4] = sentiment_score

        emotion_scores = self._compute_emotion_scores(tokens)
        fear_score = emotion_scores.get('fear', 0.0)
        anger_score = emotion_scores.get('anger', 0.0)
        max_emotion = max(emotion_scores.values(), default=0.0)

        features[5] = min(max_emotion, SCORE_CEILING)
        features[6] = self._compute_stress(fear_score, anger_score, sentiment_score)
        features[7] = min(fear_score, SCORE_CEILING)

        return features

    def _compute_keywords(self, tokens: List[str]) -> Tuple[bool, float, bool]:
        has_keywords = False
        is_critical = False
        keyword_threat = 0.0

        for w in tokens:
            # A token in both sets contributes both increments
            if w in self.lexicon.negative_words:
                has_keywords = True
                keyword_threat += NEGATIVE_KEYWORD_WEIGHT
            if w in self.lexicon.critical_keywords:
                is_critical = True
                keyword_threat += CRITICAL_KEYWORD_WEIGHT

        return has_keywords, min(keyword_threat, SCORE_CEILING), is_critical

    def _compute_sentiment(self, tokens: List[str]) -> Tuple[bool, float]:
        """
        Negativity-intensity sentiment.

        Returns (is_negative, score). The score never drops below the
        neutral 50: positive matches only dilute the negative fraction.
        """
        neg_count = sum(1 for w in tokens if w in self.lexicon.negative_words)
        pos_count = sum(1 for w in tokens if w in self.lexicon.positive_words)

        is_negative = neg_count > pos_count
        total = neg_count + pos_count
        if total == 0:
            return is_negative, NEUTRAL_SENTIMENT

        ratio = neg_count / total
        return is_negative, NEUTRAL_SENTIMENT + ratio * (SCORE_CEILING - NEUTRAL_SENTIMENT)

    def _compute_emotion_scores(self, tokens: List[str]) -> Dict[str, float]:
        scores = {}
        for emotion, keywords in self.lexicon.emotion_keywords.items():
            count = sum(1 for w in tokens if w in keywords)
            scores[emotion] = float(count * EMOTION_WORD_WEIGHT)
        return scores

    def _compute_stress(
        self,
        fear_score: float,
        anger_score: float,
        sentiment_score: float
    ) -> float:
        stress = (fear_score * STRESS_WEIGHTS['fear']) + (anger_score * STRESS_WEIGHTS['anger'])
        if sentiment_score > STRESS_SENTIMENT_THRESHOLD:
            stress += STRESS_SENTIMENT_BONUS
        return min(stress, SCORE_CEILING)

    def describe(self, features: np.ndarray) -> Dict[str, float]:
        """Name the text features for logging."""
        return {name: float(val) for name, val in zip(FEATURE_NAMES[:TEXT_FEATURE_DIM], features)}
