"""Piezo speaker tones."""

import math

from ..config import SPEAKER_CHANNEL
from ..debug import debug
from .pca9685 import PCA9685
from .registers import CHIP_RESOLUTION


def tone_off_step(frequency: float) -> int:
    # Scaled against the PWM carrier, so pitch follows the init() frequency.
    return math.floor(CHIP_RESOLUTION * frequency / 1000)


class SpeakerController:
    """Plays blocking tones on the speaker channel."""

    def __init__(self, pwm: PCA9685, channel: int = SPEAKER_CHANNEL):
        self.pwm = pwm
        self.channel = channel

    def play_tone(self, frequency: float, duration_ms: float) -> None:
        """Play a tone, then silence the speaker.

        Blocks for the full duration; tones cannot overlap.

        Args:
            frequency: Frequency in Hz (e.g., 440 for A4)
            duration_ms: Duration in milliseconds
        """
        off = tone_off_step(frequency)

        debug(f"Tone {frequency} Hz for {duration_ms} ms")
        self.pwm.set_pwm(self.channel, 0, off)
        self.pwm.pause(duration_ms)
        self.pwm.set_pwm(self.channel, 0, 0)
