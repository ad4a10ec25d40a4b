"""Short beep played when the snake eats. Sound is optional."""

import logging
from typing import Optional

import numpy as np
import pygame

from .config import SAMPLE_RATE, TONE_DURATION_MS, TONE_FREQUENCY, TONE_VOLUME

logger = logging.getLogger(__name__)


def make_square_wave(freq: int, duration_ms: int, volume: float,
                     sample_rate: int = SAMPLE_RATE, channels: int = 1) -> np.ndarray:
    """16-bit square wave samples, shaped (n,) for mono or (n, channels) otherwise."""
    n = max(1, int(sample_rate * duration_ms / 1000))
    t = np.arange(n) / sample_rate
    wave = np.where(np.sin(2 * np.pi * freq * t) >= 0, 1.0, -1.0)
    samples = (wave * max(0.0, min(1.0, volume)) * (2 ** 15 - 1)).astype(np.int16)
    if channels > 1:
        samples = np.ascontiguousarray(np.repeat(samples[:, None], channels, axis=1))
    return samples


class EatTone:
    """Lazily built beep; every failure just turns the sound off"""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled
        self._sound: Optional[pygame.mixer.Sound] = None

    def _build(self) -> Optional[pygame.mixer.Sound]:
        if pygame.mixer.get_init() is None:
            pygame.mixer.init(frequency=SAMPLE_RATE, size=-16, channels=1)
        freq, _size, channels = pygame.mixer.get_init()
        samples = make_square_wave(TONE_FREQUENCY, TONE_DURATION_MS, TONE_VOLUME,
                                   sample_rate=freq, channels=channels)
        return pygame.sndarray.make_sound(samples)

    def play(self):
        if not self.enabled:
            return
        try:
            if self._sound is None:
                self._sound = self._build()
            self._sound.play()
        except Exception as e:
            logger.debug("Sound unavailable, muting: %s", e)
            self.enabled = False
            self._sound = None
