"""Configuration constants for Funduino Railway."""

# I2C bus number and address for PCA9685
I2C_BUS = 1
PCA9685_ADDRESS = 0x40

# PWM carrier frequency (Hz)
PWM_FREQUENCY = 50

# Oscillator settle time after wake (ms)
OSCILLATOR_SETTLE_MS = 1000

# Speaker is wired to LED8
SPEAKER_CHANNEL = 8

# Debug output at startup
DEBUG = False

# Web server settings
HOST = "0.0.0.0"
PORT = 5000
