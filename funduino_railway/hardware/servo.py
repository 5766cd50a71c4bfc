"""Servo positioning in degrees."""

import math
from typing import Mapping, Optional

from ..debug import debug
from ..servo_config import SERVOS, ServoConfig, ServoNum
from .pca9685 import PCA9685


def degrees_to_pulse(config: ServoConfig, degrees: float) -> int:
    """Map 0-180 degrees linearly onto a servo's offset range.

    Values outside 0-180 are not clamped and extrapolate past the
    calibrated range.
    """
    return math.floor(degrees * config.spread / 180) + config.min_offset


class ServoController:
    """Moves the board's servos to an angle."""

    def __init__(
        self,
        pwm: PCA9685,
        servos: Optional[Mapping[ServoNum, ServoConfig]] = None,
    ):
        """Initialize the servo controller.

        Args:
            pwm: Driver to write pulses through
            servos: Servo registry (defaults to the board wiring)
        """
        self.pwm = pwm
        self.servos = servos if servos is not None else SERVOS

    def get_servo_config(self, servo: ServoNum) -> ServoConfig:
        """Look up a servo's calibration. Raises KeyError for unknown ids."""
        return self.servos[servo]

    def set_position(self, servo: ServoNum, degrees: float) -> int:
        """Set a servo to a position.

        Args:
            servo: Servo identifier
            degrees: Position in degrees (0-180)

        Returns:
            The off step written to the servo's channel
        """
        config = self.get_servo_config(servo)
        pulse = degrees_to_pulse(config, degrees)

        debug(f"Servo {servo} -> {degrees} deg, pulse {pulse}")
        self.pwm.set_pwm(config.pin_number, 0, pulse)
        return pulse
