"""
Safeguard - Distress Feature Extraction Core

Turns live transcripts and audio window statistics into the
17-dimensional feature vector consumed by the distress classifier:
- Keyword, sentiment and emotion scoring from text
- Audio descriptor aggregation
- Z-score normalization against trained scaler params
- Threat levels and emergency debounce for monitoring sessions
"""

__version__ = "1.0.0"

from safeguard.extraction.feature_engine import FeatureExtractor
from safeguard.memory.baseline_manager import BaselineManager
from safeguard.orchestration.monitor import ThreatMonitor
from safeguard.utils.safety_checker import SafetyChecker, ThreatLevel

__all__ = [
    'FeatureExtractor',
    'BaselineManager',
    'ThreatMonitor',
    'SafetyChecker',
    'ThreatLevel'
]
