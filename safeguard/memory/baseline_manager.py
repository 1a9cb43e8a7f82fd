"""
Baseline Manager
Holds the reference pitch/energy and the z-score scaler used on output
"""
import os
import json
import numpy as np
from typing import Optional, Sequence

from config import FEATURE_DIM, BASELINE_PITCH, BASELINE_ENERGY


class BaselineManager:
    """
    Manages per-feature normalization parameters.

    Defaults to the identity transform (mean 0, std 1). Replacement
    parameters are accepted only as a complete pair of FEATURE_DIM-long
    numeric sequences; anything else is ignored and the previous pair
    stays in effect. A zero std is not guarded against.
    """

    def __init__(
        self,
        baseline_pitch: float = BASELINE_PITCH,
        baseline_energy: float = BASELINE_ENERGY
    ):
        self.baseline_pitch = baseline_pitch
        self.baseline_energy = baseline_energy

        self.mean = np.zeros(FEATURE_DIM, dtype=np.float32)
        self.std = np.ones(FEATURE_DIM, dtype=np.float32)

    def _as_params(self, values: Optional[Sequence[float]]) -> Optional[np.ndarray]:
        """Convert to a float32 vector, or None if not FEATURE_DIM numbers."""
        if values is None:
            return None
        try:
            arr = np.array(values, dtype=np.float32)
        except (TypeError, ValueError):
            return None
        if arr.shape != (FEATURE_DIM,):
            return None
        return arr

    def set_scaler_params(
        self,
        mean: Optional[Sequence[float]],
        std: Optional[Sequence[float]]
    ) -> bool:
        """
        Replace scaler mean and std together.

        Returns:
            True if applied, False if either argument was rejected
        """
        new_mean = self._as_params(mean)
        new_std = self._as_params(std)

        if new_mean is None or new_std is None:
            print(f"  [BaselineManager] Ignoring scaler params (expected {FEATURE_DIM} values each)")
            return False

        self.mean = new_mean
        self.std = new_std
        return True

    def load_scaler_params(self, path: str) -> bool:
        """
        Load scaler params from a JSON file.

        Accepts {"mean": [...], "std": [...]} or a StandardScaler export
        {"mean": [...], "scale": [...]}.
        """
        if not path or not os.path.exists(path):
            print(f"  Warning: Scaler params file not found: {path!r}")
            return False

        try:
            with open(path, 'r') as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            print(f"  Warning: Could not load scaler params: {e}")
            return False

        if not isinstance(data, dict):
            print(f"  Warning: Scaler params file is not a JSON object: {path}")
            return False

        std = data.get("std", data.get("scale"))
        applied = self.set_scaler_params(data.get("mean"), std)
        if applied:
            print(f"  Loaded scaler params from {path}")
        return applied

    def get_mean(self) -> np.ndarray:
        return self.mean.copy()

    def get_std(self) -> np.ndarray:
        return self.std.copy()

    def normalize(self, raw_features: np.ndarray) -> np.ndarray:
        """
        Z-score a raw feature vector.

        Formula: (raw - mean) / std
        """
        return ((raw_features - self.mean) / self.std).astype(np.float32)
