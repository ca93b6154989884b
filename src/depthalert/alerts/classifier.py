"""Distance to alert level classification."""

from __future__ import annotations

from depthalert.bus.messages import AlertLevel


class AlertClassifier:
    """Maps a distance in meters to an AlertLevel.

    Boundaries are exclusive: a distance exactly on a threshold falls into the
    safer level. Infinity (nothing seen) is SAFE.
    """

    def __init__(
        self,
        critical_distance: float = 0.5,
        warning_distance: float = 1.0,
        caution_distance: float = 2.0,
    ) -> None:
        if not critical_distance <= warning_distance <= caution_distance:
            raise ValueError(
                "thresholds must satisfy critical <= warning <= caution, got "
                f"{critical_distance}, {warning_distance}, {caution_distance}"
            )
        self.critical_distance = critical_distance
        self.warning_distance = warning_distance
        self.caution_distance = caution_distance

    def classify(self, distance: float) -> AlertLevel:
        if distance < self.critical_distance:
            return AlertLevel.CRITICAL
        if distance < self.warning_distance:
            return AlertLevel.WARNING
        if distance < self.caution_distance:
            return AlertLevel.CAUTION
        return AlertLevel.SAFE
