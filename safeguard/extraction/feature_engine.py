"""
Feature Engine
Main coordinator for text and audio feature extraction
Produces the 17-dimensional distress feature vector
"""
import numpy as np
from typing import Optional, Sequence

from .lexicon import Lexicon, DEFAULT_LEXICON, tokenize
from .linguistic_engine import LinguisticEngine
from .acoustic_engine import AcousticEngine
from safeguard.memory.baseline_manager import BaselineManager
from config import TEXT_FEATURE_DIM, AUDIO_FEATURE_DIM


class FeatureExtractor:
    """
    Feature extraction coordinator for one capture session.

    Text updates write the text block (indices 0-7), audio updates write
    the audio block (indices 8-16). The two blocks are kept apart and only
    joined, then normalized, when the vector is read.

    Not thread-safe: one extractor per session, driven from one thread.
    """

    def __init__(
        self,
        lexicon: Lexicon = DEFAULT_LEXICON,
        baseline_manager: Optional[BaselineManager] = None,
        verbose: bool = False
    ):
        self.lexicon = lexicon
        self.baseline_manager = baseline_manager or BaselineManager()
        self.verbose = verbose

        # Initialize sub-engines
        self.linguistic_engine = LinguisticEngine(lexicon)
        self.acoustic_engine = AcousticEngine(
            baseline_pitch=self.baseline_manager.baseline_pitch,
            baseline_energy=self.baseline_manager.baseline_energy
        )

        self._text_features = np.zeros(TEXT_FEATURE_DIM, dtype=np.float32)
        self._audio_features = np.zeros(AUDIO_FEATURE_DIM, dtype=np.float32)

        if self.verbose:
            print(f"     [FeatureExtractor] Ready ({len(lexicon.negative_words)} negative, "
                  f"{len(lexicon.positive_words)} positive, "
                  f"{len(lexicon.critical_keywords)} critical keywords)")

    @property
    def baseline_pitch(self) -> float:
        return self.baseline_manager.baseline_pitch

    @property
    def baseline_energy(self) -> float:
        return self.baseline_manager.baseline_energy

    @property
    def text_features(self) -> np.ndarray:
        return self._text_features.copy()

    @property
    def audio_features(self) -> np.ndarray:
        return self._audio_features.copy()

    @property
    def raw_features(self) -> np.ndarray:
        """Un-normalized 17-dim vector."""
        return np.concatenate([self._text_features, self._audio_features]).astype(np.float32)

    def process_text(self, text: Optional[str]):
        """
        Score a transcript chunk into the text block.

        None or empty text leaves the previous text features untouched.
        """
        if not text:
            return

        tokens = tokenize(text)
        self._text_features = self.linguistic_engine.extract(tokens)

        if self.verbose:
            print(f"     [FeatureExtractor] Text features: "
                  f"{self.linguistic_engine.describe(self._text_features)}")

    def update_audio_features(
        self,
        pitch_mean: float,
        pitch_std: float,
        energy_mean: float,
        energy_std: float,
        zcr: float,
        tempo: float
    ):
        """Store the latest audio window statistics in the audio block."""
        self._audio_features = self.acoustic_engine.extract(
            pitch_mean, pitch_std, energy_mean, energy_std, zcr, tempo
        )

        if self.verbose:
            print(f"     [FeatureExtractor] Audio features: {self._audio_features}")

    def set_scaler_params(
        self,
        mean: Optional[Sequence[float]],
        std: Optional[Sequence[float]]
    ) -> bool:
        """Replace normalization params; invalid input is ignored."""
        return self.baseline_manager.set_scaler_params(mean, std)

    def load_scaler_params(self, path: str) -> bool:
        return self.baseline_manager.load_scaler_params(path)

    def get_feature_vector(self) -> np.ndarray:
        """
        Get the normalized feature vector.

        Returns:
            New 17-dim float32 array, (raw - mean) / std per index
        """
        return self.baseline_manager.normalize(self.raw_features)
