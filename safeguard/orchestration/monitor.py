"""
Threat Monitor
Routes host speech/audio events into the feature extractor and safety checker
"""
import time
from typing import Any, Callable, Dict, List, Optional

from safeguard.extraction.feature_engine import FeatureExtractor
from safeguard.utils.safety_checker import SafetyChecker, ThreatLevel
from config import EMERGENCY_DEBOUNCE_SECONDS


class ThreatMonitor:
    """
    One monitoring session.

    The host owns audio capture, speech-to-text and calling; it forwards
    their events here. Every threat level is pushed to on_threat_update,
    and a HIGH level fires on_emergency with the first emergency contact,
    at most once per debounce window.
    """

    def __init__(
        self,
        feature_extractor: Optional[FeatureExtractor] = None,
        safety_checker: Optional[SafetyChecker] = None,
        emergency_contacts: Optional[List[str]] = None,
        on_threat_update: Optional[Callable[[str], None]] = None,
        on_emergency: Optional[Callable[[str], None]] = None,
        debounce_seconds: float = EMERGENCY_DEBOUNCE_SECONDS,
        clock: Callable[[], float] = time.monotonic
    ):
        self.features = feature_extractor or FeatureExtractor()
        self.safety_checker = safety_checker or SafetyChecker()
        self.emergency_contacts = list(emergency_contacts or [])
        self.on_threat_update = on_threat_update
        self.on_emergency = on_emergency
        self.debounce_seconds = debounce_seconds
        self._clock = clock

        self.is_monitoring = False
        self.threat_level = ThreatLevel.SAFE
        self.last_emergency_time: Optional[float] = None
        self.emergency_count = 0

    @property
    def emergency_number(self) -> str:
        return self.emergency_contacts[0] if self.emergency_contacts else ''

    def start(self):
        if self.is_monitoring:
            return
        self.is_monitoring = True
        print("  [ThreatMonitor] Monitoring started")

    def stop(self):
        if not self.is_monitoring:
            return
        self.is_monitoring = False
        self._update_threat_level(ThreatLevel.SAFE)
        print("  [ThreatMonitor] Monitoring stopped")

    def on_speech_results(self, results: Optional[List[str]]):
        """Handle speech-to-text hypotheses for one utterance."""
        if not self.is_monitoring or not results:
            return

        text = ' '.join(results).lower()
        print(f"  [ThreatMonitor] Detected text: {text}")

        self.features.process_text(text)

        level = self.safety_checker.assess_text(text)
        self._update_threat_level(level)
        if level == ThreatLevel.HIGH:
            self.trigger_emergency()

    def on_pitch_detected(self, pitch: float):
        if not self.is_monitoring:
            return
        if self.safety_checker.assess_pitch(pitch) == ThreatLevel.HIGH:
            self._update_threat_level(ThreatLevel.HIGH)
            self.trigger_emergency()

    def on_energy_detected(self, energy: float):
        if not self.is_monitoring:
            return
        self.safety_checker.assess_energy(energy)

    def on_audio_window(
        self,
        pitch_mean: float,
        pitch_std: float,
        energy_mean: float,
        energy_std: float,
        zcr: float,
        tempo: float
    ):
        if not self.is_monitoring:
            return
        self.features.update_audio_features(
            pitch_mean, pitch_std, energy_mean, energy_std, zcr, tempo
        )

    def trigger_emergency(self) -> bool:
        """
        Fire the emergency callback unless one fired within the debounce window.

        Returns:
            True if the trigger was accepted
        """
        now = self._clock()
        if (self.last_emergency_time is not None
                and now - self.last_emergency_time < self.debounce_seconds):
            print("  [ThreatMonitor] Emergency debounced")
            return False

        self.last_emergency_time = now
        self.emergency_count += 1
        print("  [ThreatMonitor] EMERGENCY TRIGGERED!")

        number = self.emergency_number
        if not number or self.on_emergency is None:
            print("  [ThreatMonitor] No emergency contact/handler configured")
            return True

        try:
            self.on_emergency(number)
        except Exception as e:
            print(f"  Warning: Emergency handler failed: {e}")
        return True

    def _update_threat_level(self, level: ThreatLevel):
        self.threat_level = level
        if self.on_threat_update is None:
            return
        try:
            self.on_threat_update(level.value)
        except Exception as e:
            print(f"  Warning: Threat update handler failed: {e}")

    def get_feature_vector(self):
        return self.features.get_feature_vector()

    def snapshot(self) -> Dict[str, Any]:
        return {
            "threat_level": self.threat_level.value,
            "features": self.get_feature_vector().tolist(),
            "is_monitoring": self.is_monitoring,
            "emergency_count": self.emergency_count,
        }
