"""
Acoustic Engine (Audio Module)
Packs pre-computed audio window statistics into the audio feature block
"""
import numpy as np

from config import AUDIO_FEATURE_DIM, DEFAULT_TEMPO, BASELINE_PITCH, BASELINE_ENERGY


class AcousticEngine:
    """
    Audio Feature Block (9 features, vector indices 8-16)

    Pitch, energy, zero-crossing rate and tempo arrive already computed by
    the host's audio analysis; no signal processing happens here and no
    value is validated (negative or NaN inputs pass through).

    Block layout:
        0  pitch_mean      (vector index 8)
        1  pitch_std       (9)
        2  energy_mean     (10)
        3  energy_std      (11)
        4  zcr             (12)
        5  tempo           (13) falls back to DEFAULT_TEMPO when not > 0
        6  pitch_delta     (14) always 0.0
        7  energy_delta    (15) always 0.0
        8  baseline_flag   (16) always 0.0
    """

    def __init__(
        self,
        baseline_pitch: float = BASELINE_PITCH,
        baseline_energy: float = BASELINE_ENERGY
    ):
        # Kept for when deviation features are re-enabled with a retrained model
        self.baseline_pitch = baseline_pitch
        self.baseline_energy = baseline_energy

    def extract(
        self,
        pitch_mean: float,
        pitch_std: float,
        energy_mean: float,
        energy_std: float,
        zcr: float,
        tempo: float
    ) -> np.ndarray:
        """Build the 9 audio features."""
        features = np.zeros(AUDIO_FEATURE_DIM, dtype=np.float32)

        features[0] = pitch_mean
        features[1] = pitch_std
        features[2] = energy_mean
        features[3] = energy_std
        features[4] = zcr
        # A zero tempo would sit far outside the training distribution
        features[5] = tempo if tempo > 0 else DEFAULT_TEMPO

        # Training data had zero variance for the baseline deviations
        # (mean 0, scale 1). A real difference such as 200 Hz becomes a
        # 200-sigma outlier, so these stay 0 to match training.
        features[6] = 0.0
        features[7] = 0.0
        features[8] = 0.0

        return features
