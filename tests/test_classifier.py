import pytest

from depthalert.alerts.classifier import AlertClassifier
from depthalert.bus.messages import AlertLevel, HapticPattern


@pytest.mark.parametrize("distance, level", [
    (0.0, AlertLevel.CRITICAL),
    (0.3, AlertLevel.CRITICAL),
    (0.4999, AlertLevel.CRITICAL),
    (0.5, AlertLevel.WARNING),
    (0.7, AlertLevel.WARNING),
    (1.0, AlertLevel.CAUTION),
    (1.5, AlertLevel.CAUTION),
    (2.0, AlertLevel.SAFE),
    (3.0, AlertLevel.SAFE),
    (float("inf"), AlertLevel.SAFE),
])
def test_default_thresholds(distance, level):
    assert AlertClassifier().classify(distance) == level


def test_custom_thresholds():
    classifier = AlertClassifier(critical_distance=1.0, warning_distance=2.0, caution_distance=4.0)
    assert classifier.classify(0.9) == AlertLevel.CRITICAL
    assert classifier.classify(1.0) == AlertLevel.WARNING
    assert classifier.classify(3.9) == AlertLevel.CAUTION
    assert classifier.classify(4.0) == AlertLevel.SAFE


def test_thresholds_must_be_ordered():
    with pytest.raises(ValueError):
        AlertClassifier(critical_distance=1.5, warning_distance=1.0)


def test_levels_are_ordered():
    assert AlertLevel.SAFE < AlertLevel.CAUTION < AlertLevel.WARNING < AlertLevel.CRITICAL
    assert max(AlertLevel) == AlertLevel.CRITICAL


@pytest.mark.parametrize("level, pattern", [
    (AlertLevel.SAFE, HapticPattern.TAP),
    (AlertLevel.CAUTION, HapticPattern.TAP),
    (AlertLevel.WARNING, HapticPattern.WARNING),
    (AlertLevel.CRITICAL, HapticPattern.CRITICAL),
])
def test_haptic_pattern_per_level(level, pattern):
    assert level.haptic_pattern == pattern
