from __future__ import annotations

from typing import List

import numpy as np

from safeguard.extraction.feature_engine import FeatureExtractor
from safeguard.orchestration.monitor import ThreatMonitor
from safeguard.utils.safety_checker import ThreatLevel


class FakeClock:
    def __init__(self) -> None:
        self.now = 1000.0

    def __call__(self) -> float:
        return self.now


def make_monitor(contacts=("5550100",)):
    levels: List[str] = []
    calls: List[str] = []
    clock = FakeClock()
    monitor = ThreatMonitor(
        feature_extractor=FeatureExtractor(),
        emergency_contacts=list(contacts),
        on_threat_update=levels.append,
        on_emergency=calls.append,
        clock=clock,
    )
    monitor.start()
    return monitor, levels, calls, clock


def test_events_ignored_until_started() -> None:
    levels: List[str] = []
    monitor = ThreatMonitor(on_threat_update=levels.append)
    monitor.on_speech_results(["help me"])
    monitor.on_pitch_detected(900.0)
    monitor.on_audio_window(200.0, 1.0, 60.0, 1.0, 0.1, 0.0)
    assert levels == []
    assert np.array_equal(monitor.get_feature_vector(), np.zeros(17))


def test_speech_results_feed_extractor_and_checker() -> None:
    monitor, levels, calls, _ = make_monitor()
    monitor.on_speech_results(["Help", "POLICE"])

    vec = monitor.get_feature_vector()
    assert vec[2] == 1.0
    assert vec[1] == 100.0
    assert levels == ["HIGH"]
    assert calls == ["5550100"]


def test_medium_and_safe_levels_do_not_call() -> None:
    monitor, levels, calls, _ = make_monitor()
    monitor.on_speech_results(["go away"])
    monitor.on_speech_results(["lovely weather"])
    assert levels == ["MEDIUM", "SAFE"]
    assert calls == []


def test_empty_results_are_ignored() -> None:
    monitor, levels, _, _ = make_monitor()
    monitor.on_speech_results([])
    monitor.on_speech_results(None)
    assert levels == []


def test_emergency_is_debounced() -> None:
    monitor, _, calls, clock = make_monitor()
    monitor.on_speech_results(["help"])
    clock.now += 1.0
    monitor.on_pitch_detected(800.0)
    assert calls == ["5550100"]

    clock.now += 3.0
    monitor.on_pitch_detected(800.0)
    assert calls == ["5550100", "5550100"]
    assert monitor.emergency_count == 2


def test_high_pitch_raises_threat() -> None:
    monitor, levels, calls, _ = make_monitor()
    monitor.on_pitch_detected(150.0)
    monitor.on_pitch_detected(-1)
    assert levels == []
    monitor.on_pitch_detected(620.0)
    assert levels == ["HIGH"]
    assert len(calls) == 1


def test_energy_does_not_change_level() -> None:
    monitor, levels, _, _ = make_monitor()
    monitor.on_energy_detected(120.0)
    assert levels == []
    assert monitor.threat_level == ThreatLevel.SAFE


def test_audio_window_updates_audio_block() -> None:
    monitor, _, _, _ = make_monitor()
    monitor.on_audio_window(240.0, 12.0, 66.0, 4.0, 0.15, 0.0)
    vec = monitor.get_feature_vector()
    assert vec[8] == 240.0
    assert vec[13] == 125.0


def test_no_contact_still_counts_trigger() -> None:
    monitor, _, calls, _ = make_monitor(contacts=())
    assert monitor.trigger_emergency() is True
    assert calls == []
    assert monitor.emergency_count == 1


def test_failing_handlers_do_not_break_session() -> None:
    def boom(_: str) -> None:
        raise RuntimeError("dialer unavailable")

    monitor = ThreatMonitor(
        emergency_contacts=["112"],
        on_threat_update=boom,
        on_emergency=boom,
    )
    monitor.start()
    monitor.on_speech_results(["help"])
    assert monitor.threat_level == ThreatLevel.HIGH
    assert monitor.emergency_count == 1


def test_stop_resets_to_safe() -> None:
    monitor, levels, _, _ = make_monitor()
    monitor.on_speech_results(["help"])
    monitor.stop()
    assert levels == ["HIGH", "SAFE"]
    assert monitor.is_monitoring is False

    monitor.stop()
    assert levels == ["HIGH", "SAFE"]


def test_start_twice_is_no_op(capsys) -> None:
    monitor, _, _, _ = make_monitor()
    capsys.readouterr()
    monitor.start()
    assert capsys.readouterr().out == ""


def test_snapshot() -> None:
    monitor, _, _, _ = make_monitor()
    monitor.on_speech_results(["get away"])
    snap = monitor.snapshot()
    assert snap["threat_level"] == "MEDIUM"
    assert snap["is_monitoring"] is True
    assert len(snap["features"]) == 17
    assert snap["emergency_count"] == 0
