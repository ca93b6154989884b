from depthalert.alerts.classifier import AlertClassifier
from depthalert.alerts.scheduler import AnnouncementScheduler

__all__ = ["AlertClassifier", "AnnouncementScheduler"]
