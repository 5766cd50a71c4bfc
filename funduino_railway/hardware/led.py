"""Signal LED control."""

from enum import IntEnum

from ..debug import debug
from .pca9685 import PCA9685
from .registers import CHIP_RESOLUTION


class LEDNum(IntEnum):
    """Signal LEDs, numbered from 1. LED n sits on channel n - 1."""
    Green1 = 1
    Yellow1 = 2
    Red1 = 3
    Green2 = 4
    Yellow2 = 5
    Red2 = 6

    @property
    def channel(self) -> int:
        return self.value - 1


class LEDController:
    """Switches signal LEDs fully on or off."""

    def __init__(self, pwm: PCA9685):
        self.pwm = pwm

    def set_led(self, led: int, state: bool) -> None:
        """Turn an LED on or off.

        Args:
            led: LED number (LEDNum or plain 1-6)
            state: True to turn on, False to turn off
        """
        channel = led - 1
        off = CHIP_RESOLUTION - 1 if state else 0

        debug(f"LED {led} -> {'on' if state else 'off'}")
        self.pwm.set_pwm(channel, 0, off)
