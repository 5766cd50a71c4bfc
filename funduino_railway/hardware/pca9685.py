"""PCA9685 16-Channel PWM driver for the Funduino railway board."""

import math
import time
from typing import Callable, Optional

import smbus2 as smbus

from ..config import I2C_BUS, PCA9685_ADDRESS, PWM_FREQUENCY, OSCILLATOR_SETTLE_MS
from ..debug import debug
from . import registers as reg


def calc_freq_prescaler(freq: float) -> int:
    """Compute the PRESCALE value for a PWM frequency.

    The result is not range checked; the chip only accepts 3-255.
    """
    return math.floor(reg.OSCILLATOR_HZ / (freq * reg.CHIP_RESOLUTION) - 1)


class PCA9685:
    """Register-level driver for PCA9685 PWM controller."""

    def __init__(
        self,
        address: int = PCA9685_ADDRESS,
        bus: Optional[smbus.SMBus] = None,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """Set up the driver. No register is written until init().

        Args:
            address: I2C address of the PCA9685 (default 0x40)
            bus: Open SMBus, or None to open I2C_BUS
            sleep: Blocking delay in seconds
        """
        self.bus = bus if bus is not None else smbus.SMBus(I2C_BUS)
        self.address = address
        self._sleep = sleep

    def _write(self, register: int, value: int) -> None:
        """Write an 8-bit value to the specified register."""
        self.bus.write_byte_data(self.address, register, value)
        debug(f"I2C: Write 0x{value:02X} to register 0x{register:02X}")

    def pause(self, ms: float) -> None:
        """Block for the given number of milliseconds."""
        self._sleep(ms / 1000.0)

    def init(self, freq: float = PWM_FREQUENCY) -> None:
        """Configure the PWM frequency and restart the oscillator.

        Must run before any channel is set. Running it again repeats the
        whole sequence, settle delay included.

        Args:
            freq: Frequency in Hz (typically 50 for servos)
        """
        prescaler = calc_freq_prescaler(freq)
        debug(f"Setting PWM frequency to {freq} Hz, pre-scale {prescaler}")

        self._write(reg.MODE1, reg.SLEEP)  # prescale is only writable asleep
        self._write(reg.PRESCALE, prescaler)
        self._write(reg.ALL_LED_ON_L, 0x00)
        self._write(reg.ALL_LED_ON_H, 0x00)
        self._write(reg.ALL_LED_OFF_L, 0x00)
        self._write(reg.ALL_LED_OFF_H, 0x00)
        self._write(reg.MODE1, reg.WAKE)
        self.pause(OSCILLATOR_SETTLE_MS)
        self._write(reg.MODE1, reg.RESTART)

    def set_pwm(self, channel: int, on: int, off: int) -> None:
        """Set a single PWM channel.

        Args:
            channel: PWM channel (0-15)
            on: On step (0-4095)
            off: Off step (0-4095)
        """
        base = reg.channel_base(channel)
        self._write(base, on & 0xFF)
        self._write(base + 1, (on >> 8) & 0x0F)
        self._write(base + 2, off & 0xFF)
        self._write(base + 3, (off >> 8) & 0x0F)

        debug(f"channel: {channel}  LED_ON: {on} LED_OFF: {off}")
