"""Spoken phrases for obstacle alerts."""

from __future__ import annotations

import math

from depthalert.bus.messages import ObstacleSummary, Zone


def format_distance(distance: float) -> str:
    """Human-friendly distance: centimeters under a meter, one decimal above."""
    if math.isinf(distance):
        return "clear"
    if distance < 1:
        return f"{int(distance * 100)} centimeters"
    return f"{distance:.1f} meters"


def critical_message(distance: float, zone: Zone) -> str:
    return f"Stop! Obstacle {zone.phrase} at {format_distance(distance)}"


def warning_message(distance: float, zone: Zone) -> str:
    return f"Caution, {format_distance(distance)} {zone.phrase}"


def describe_surroundings(summary: ObstacleSummary, caution_distance: float = 2.0) -> str:
    """Describe every zone plus the nearest obstacle, e.g. for an on-demand announcement."""
    parts = []
    for label, stats in (("Left", summary.left), ("Ahead", summary.center), ("Right", summary.right)):
        if stats.min_distance < caution_distance:
            parts.append(f"{label}: {format_distance(stats.min_distance)}.")
        else:
            parts.append(f"{label}: clear.")

    if summary.nearest_distance < caution_distance:
        parts.append(
            f"Nearest obstacle is {format_distance(summary.nearest_distance)} "
            f"{summary.nearest_zone.phrase}."
        )
    else:
        parts.append("Path is clear.")
    return " ".join(parts)
