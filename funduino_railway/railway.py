"""High-level interface to the railway board."""

from typing import Optional

from .config import PWM_FREQUENCY
from .debug import debug, set_debug
from .hardware.pca9685 import PCA9685
from .hardware.led import LEDController
from .hardware.servo import ServoController
from .hardware.speaker import SpeakerController
from .servo_config import ServoNum


class FunduinoRailway:
    """Signal LEDs, servos and speaker behind one PCA9685."""

    def __init__(self, pwm: Optional[PCA9685] = None):
        """Create the board controllers.

        Args:
            pwm: Driver to use (defaults to a PCA9685 on the configured bus)
        """
        self.pwm = pwm if pwm is not None else PCA9685()
        self.leds = LEDController(self.pwm)
        self.servos = ServoController(self.pwm)
        self.speaker = SpeakerController(self.pwm)
        self.frequency: Optional[float] = None

    @property
    def is_initialized(self) -> bool:
        """Whether initialize() has run. The chip is never queried."""
        return self.frequency is not None

    def initialize(self, freq: float = PWM_FREQUENCY) -> None:
        """Initialize the PCA9685 at a fixed frequency (default 50 Hz)."""
        debug(f"Initializing PCA9685 at {freq} Hz")
        self.pwm.init(freq)
        self.frequency = freq

    def set_led(self, led: int, state: bool) -> None:
        self.leds.set_led(led, state)

    def set_servo_position(self, servo: ServoNum, degrees: float) -> int:
        return self.servos.set_position(servo, degrees)

    def play_tone(self, frequency: float, duration_ms: float) -> None:
        self.speaker.play_tone(frequency, duration_ms)

    def set_debug(self, enabled: bool) -> None:
        """Enable or disable debugging output."""
        set_debug(enabled)
