import logging
import os
import threading
from dataclasses import dataclass
from typing import Any, Dict, Optional, Protocol


logger = logging.getLogger("stashgrid.audio.notifier")


class NotificationSink(Protocol):
    """One-way port for pickup/drop sounds. Must never raise or block."""

    def notify(self, sound_ref: Optional[str]) -> None:  # pragma: no cover - protocol method
        ...


def notify_safely(sink: NotificationSink, sound_ref: Optional[str]) -> None:
    """Send ``sound_ref`` to ``sink``; a failing sink is logged and ignored."""
    try:
        sink.notify(sound_ref)
    except Exception:  # noqa: BLE001
        logger.exception("Notification sink failed for '%s'", sound_ref)


class NullNotifier:
    """Discards notifications; useful for headless hosts."""

    def notify(self, sound_ref: Optional[str]) -> None:
        if sound_ref:
            logger.debug("Notify (silent): %s", sound_ref)


@dataclass
class _SoundWrapper:
    """A thin wrapper around a backend sound object to normalize interface."""

    obj: Any

    def play(self, volume: float) -> None:
        play = getattr(self.obj, "play", None)
        if not callable(play):
            return
        # Some backends accept (volume=...), others positional
        try:
            play(volume=volume)  # type: ignore[call-arg]
        except TypeError:
            play(volume)  # type: ignore[misc]


class SoundNotifier:
    """Plays item sounds through an audio backend, degrading to silence.

    Sound references are file paths. Each reference is loaded once and cached;
    references that cannot be loaded (missing file, remote URL, no backend) are
    remembered as unplayable so they are not retried on every drop.
    """

    def __init__(
        self,
        *,
        enabled: bool = True,
        volume: float = 0.3,
        backend: Optional[Any] = None,
    ) -> None:
        """Create a notifier.

        Args:
            enabled: Whether playback is enabled.
            volume: Playback volume [0.0, 1.0].
            backend: Optional backend module (e.g., arcade). If None, the
                     notifier attempts to import arcade when first needed.
        """
        self._lock = threading.RLock()
        self._enabled = bool(enabled)
        self._volume = self._clamp_volume(volume)
        self._backend = backend
        self._sounds: Dict[str, Optional[_SoundWrapper]] = {}

    @property
    def enabled(self) -> bool:
        return self._enabled

    @enabled.setter
    def enabled(self, value: bool) -> None:
        with self._lock:
            self._enabled = bool(value)

    @property
    def volume(self) -> float:
        return self._volume

    @volume.setter
    def volume(self, value: float) -> None:
        with self._lock:
            self._volume = self._clamp_volume(value)

    def notify(self, sound_ref: Optional[str]) -> None:
        self.play(sound_ref)

    def play(self, sound_ref: Optional[str]) -> bool:
        """Attempt to play ``sound_ref``. Returns True on success, never raises."""
        if not sound_ref:
            return False
        with self._lock:
            if not self._enabled:
                logger.debug("Playback disabled (sound=%s)", sound_ref)
                return False
            if sound_ref not in self._sounds:
                self._sounds[sound_ref] = self._load(sound_ref)
            snd = self._sounds[sound_ref]
        if snd is None:
            return False
        try:
            snd.play(self._volume)
            return True
        except Exception:  # noqa: BLE001
            logger.exception("Unexpected error while playing '%s'", sound_ref)
            return False

    def register_sound(self, sound_ref: str, sound_obj: Any) -> None:
        """Register a pre-constructed backend sound object for a reference."""
        with self._lock:
            self._sounds[sound_ref] = _SoundWrapper(sound_obj)

    def _load(self, sound_ref: str) -> Optional[_SoundWrapper]:
        if "://" in sound_ref:
            logger.debug("Remote sound '%s' is not supported by the audio backend", sound_ref)
            return None
        if not os.path.exists(sound_ref):
            logger.info("Sound asset not found at %s", sound_ref)
            return None
        backend = self._ensure_backend()
        if backend is None:
            logger.info("No audio backend available; cannot load %s", sound_ref)
            return None
        try:
            # Arcade API: Sound(path, streaming=False)
            return _SoundWrapper(backend.Sound(sound_ref, streaming=False))
        except Exception:  # noqa: BLE001
            logger.exception("Backend failed to load %s", sound_ref)
            return None

    def _ensure_backend(self) -> Optional[Any]:
        if self._backend is not None:
            return self._backend
        # Lazy import arcade so hosts without audio need not install it
        try:
            import importlib

            self._backend = importlib.import_module("arcade")
        except Exception:  # noqa: BLE001
            self._backend = None
            logger.debug("Arcade backend not available; running in silent mode")
        return self._backend

    @staticmethod
    def _clamp_volume(v: float) -> float:
        try:
            fv = float(v)
        except Exception:  # noqa: BLE001
            return 1.0
        return max(0.0, min(1.0, fv))
