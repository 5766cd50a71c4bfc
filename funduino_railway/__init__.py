"""Funduino Railway: PCA9685 control of signal LEDs, servos and a speaker."""

from .debug import set_debug, is_debug_enabled
from .hardware import LEDNum
from .railway import FunduinoRailway
from .servo_config import SERVOS, ServoConfig, ServoNum

__all__ = [
    "FunduinoRailway",
    "LEDNum",
    "SERVOS",
    "ServoConfig",
    "ServoNum",
    "set_debug",
    "is_debug_enabled",
]
