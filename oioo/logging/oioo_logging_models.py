from .models import Entry, LogLevel


class ContainerTrace(Entry, kw_only=True):
    occupied: int
    queued: int
    occupancy: int
    level: LogLevel = LogLevel.TRACE

class ContainerDebug(Entry, kw_only=True):
    occupied: int
    queued: int
    occupancy: int
    level: LogLevel = LogLevel.DEBUG
