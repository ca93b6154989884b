from depthalert.perception.floor_detector import FloorChangeDetector
from depthalert.perception.geometry import BufferGeometry
from depthalert.perception.zone_analyzer import ZoneAnalyzer

__all__ = ["BufferGeometry", "FloorChangeDetector", "ZoneAnalyzer"]
