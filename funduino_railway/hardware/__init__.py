"""Hardware drivers for Funduino Railway."""

from .pca9685 import PCA9685, calc_freq_prescaler
from .led import LEDController, LEDNum
from .servo import ServoController, degrees_to_pulse
from .speaker import SpeakerController

__all__ = [
    "PCA9685",
    "calc_freq_prescaler",
    "LEDController",
    "LEDNum",
    "ServoController",
    "degrees_to_pulse",
    "SpeakerController",
]
