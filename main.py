"""
Main entry point for Safeguard
Runs an interactive monitoring session over typed transcripts.
"""
from typing import List, Optional

from safeguard.extraction.feature_engine import FeatureExtractor
from safeguard.memory.baseline_manager import BaselineManager
from safeguard.orchestration.monitor import ThreatMonitor
from safeguard.utils.safety_checker import SafetyChecker
from config import SCALER_PARAMS_PATH, FEATURE_NAMES


def create_monitor(
    emergency_contacts: Optional[List[str]] = None,
    scaler_path: str = None,
    verbose: bool = True
) -> ThreatMonitor:
    """
    Create a monitoring session.

    Args:
        emergency_contacts: Numbers to call, first one is used
        scaler_path: JSON scaler params (uses env var if not provided)
        verbose: Print per-update feature values

    Returns:
        Configured ThreatMonitor
    """
    print("=" * 60)
    print("Initializing Safeguard distress monitor")
    print("=" * 60)

    baseline_manager = BaselineManager()
    scaler_path = scaler_path or SCALER_PARAMS_PATH
    if scaler_path:
        baseline_manager.load_scaler_params(scaler_path)
    else:
        print("  No scaler params configured, using identity scaling")

    feature_extractor = FeatureExtractor(
        baseline_manager=baseline_manager,
        verbose=verbose
    )

    monitor = ThreatMonitor(
        feature_extractor=feature_extractor,
        safety_checker=SafetyChecker(),
        emergency_contacts=emergency_contacts,
        on_threat_update=lambda level: print(f"  >> Threat level: {level}"),
        on_emergency=lambda number: print(f"  >> Calling emergency contact {number}")
    )
    return monitor


def run_interactive_session(monitor: ThreatMonitor):
    """Read transcripts from stdin and print the feature vector per turn."""
    print("\nType a transcript line, 'audio p ps e es zcr tempo' for an audio window,")
    print("'vector' to print the feature vector, 'quit' to exit")
    print("-" * 40 + "\n")

    monitor.start()

    while True:
        try:
            user_input = input("Transcript: ").strip()

            if not user_input:
                continue

            if user_input.lower() == 'quit':
                break

            if user_input.lower() == 'vector':
                _print_vector(monitor)
                continue

            if user_input.lower().startswith('audio '):
                values = [float(v) for v in user_input.split()[1:]]
                if len(values) != 6:
                    print("  Expected 6 values: pitch_mean pitch_std energy_mean energy_std zcr tempo")
                    continue
                monitor.on_audio_window(*values)
                monitor.on_pitch_detected(values[0])
                continue

            monitor.on_speech_results([user_input])
            _print_vector(monitor)

        except KeyboardInterrupt:
            break
        except ValueError as e:
            print(f"\nError: {e}")

    monitor.stop()
    print("Session ended.")


def _print_vector(monitor: ThreatMonitor):
    snapshot = monitor.snapshot()
    print("-" * 40)
    print(f"  Threat level: {snapshot['threat_level']}")
    for name, value in zip(FEATURE_NAMES, snapshot['features']):
        print(f"  {name:>16}: {value:.3f}")
    print("-" * 40)


if __name__ == "__main__":
    import sys

    contacts = sys.argv[1:]
    run_interactive_session(create_monitor(emergency_contacts=contacts))
