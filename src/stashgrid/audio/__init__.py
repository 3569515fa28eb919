from .notifier import NotificationSink, NullNotifier, SoundNotifier, notify_safely

__all__ = [
    "NotificationSink",
    "NullNotifier",
    "SoundNotifier",
    "notify_safely",
]
