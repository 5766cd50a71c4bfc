"""PCA9685 register map."""

# Mode registers
MODE1 = 0x00
MODE2 = 0x01

# MODE1 values, written as whole bytes
SLEEP = 0x10
WAKE = 0x00
RESTART = 0x80

PRESCALE = 0xFE

# All channels at once
ALL_LED_ON_L = 0xFA
ALL_LED_ON_H = 0xFB
ALL_LED_OFF_L = 0xFC
ALL_LED_OFF_H = 0xFD

# Channel 0, other channels follow every CHANNEL_STRIDE bytes
LED0_ON_L = 0x06
LED0_ON_H = 0x07
LED0_OFF_L = 0x08
LED0_OFF_H = 0x09

CHANNEL_STRIDE = 4
NUM_CHANNELS = 16

# Internal oscillator and steps per PWM cycle
OSCILLATOR_HZ = 25_000_000
CHIP_RESOLUTION = 4096


def channel_base(channel: int) -> int:
    """Return the ON_L register address of a channel."""
    return LED0_ON_L + CHANNEL_STRIDE * channel
