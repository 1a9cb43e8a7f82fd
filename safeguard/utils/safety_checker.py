"""
Safety Checker
Coarse threat level from transcript phrases and acoustic alarms
"""
from enum import Enum
from typing import List, Optional

from config import (
    CRITICAL_PHRASES, ALERT_PHRASES,
    HIGH_PITCH_THRESHOLD, HIGH_ENERGY_THRESHOLD, NO_PITCH
)


class ThreatLevel(str, Enum):
    """Threat levels published to the host."""

    SAFE = "SAFE"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class SafetyChecker:
    """
    Evaluates transcripts and acoustic events for threat indicators.

    Phrases are matched as substrings of the lower-cased transcript, so
    "no" also fires inside "know". False negatives are worse than false
    positives here.
    """

    def __init__(
        self,
        critical_phrases: Optional[List[str]] = None,
        alert_phrases: Optional[List[str]] = None,
        pitch_threshold: float = HIGH_PITCH_THRESHOLD,
        energy_threshold: float = HIGH_ENERGY_THRESHOLD
    ):
        if critical_phrases is None:
            critical_phrases = CRITICAL_PHRASES
        if alert_phrases is None:
            alert_phrases = ALERT_PHRASES
        self.critical_phrases = [p.lower() for p in critical_phrases]
        self.alert_phrases = [p.lower() for p in alert_phrases]
        self.pitch_threshold = pitch_threshold
        self.energy_threshold = energy_threshold

        # Statistics tracking
        self.total_evaluations = 0
        self.high_count = 0

    def assess_text(self, text: Optional[str]) -> ThreatLevel:
        """
        Evaluate a transcript.

        Returns:
            HIGH on any critical phrase, else MEDIUM on any alert phrase,
            else SAFE
        """
        self.total_evaluations += 1

        if not text:
            return ThreatLevel.SAFE

        lowered = text.lower()

        for phrase in self.critical_phrases:
            if phrase in lowered:
                self.high_count += 1
                print(f"  [SafetyChecker] Critical phrase detected: '{phrase}'")
                return ThreatLevel.HIGH

        for phrase in self.alert_phrases:
            if phrase in lowered:
                return ThreatLevel.MEDIUM

        return ThreatLevel.SAFE

    def assess_pitch(self, pitch: float) -> ThreatLevel:
        """A pitch above the threshold is treated as screaming."""
        if pitch == NO_PITCH:
            return ThreatLevel.SAFE
        if pitch > self.pitch_threshold:
            self.high_count += 1
            print(f"  [SafetyChecker] High pitch detected: {pitch:.1f} Hz")
            return ThreatLevel.HIGH
        return ThreatLevel.SAFE

    def assess_energy(self, energy: float) -> ThreatLevel:
        """
        Loud noise is reported but does not raise the level until the
        energy threshold is calibrated.
        """
        if energy > self.energy_threshold:
            print(f"  [SafetyChecker] High energy detected: {energy:.1f}")
        return ThreatLevel.SAFE

    def get_stats(self) -> dict:
        return {
            "total_evaluations": self.total_evaluations,
            "high_count": self.high_count,
        }
