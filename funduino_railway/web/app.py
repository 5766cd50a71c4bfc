"""Flask web application for Funduino Railway."""

import math
from typing import Any

from flask import Flask, jsonify, request

from ..config import PWM_FREQUENCY
from ..debug import is_debug_enabled
from ..hardware.led import LEDNum
from ..railway import FunduinoRailway
from ..servo_config import ServoNum


def _parse_enum(enum_cls, value: Any):
    """Accept either a member name ("Red1") or its number."""
    if isinstance(value, bool):
        raise TypeError(value)
    if isinstance(value, str) and not value.isdigit():
        return enum_cls[value]
    if isinstance(value, float) and not value.is_integer():
        raise ValueError(value)
    return enum_cls(int(value))


def _parse_number(value: Any) -> float:
    """Accept a finite JSON number."""
    if isinstance(value, bool):
        raise TypeError(value)
    number = float(value)
    if not math.isfinite(number):
        raise ValueError(value)
    return number


def create_app(railway: FunduinoRailway) -> Flask:
    """Create and configure the Flask application.

    Args:
        railway: FunduinoRailway instance to drive

    Returns:
        Configured Flask application
    """
    app = Flask(__name__)

    def error(message: str, code: int = 400):
        return jsonify({"status": "error", "message": message}), code

    def not_initialized():
        return error("PCA9685 not initialized, POST /init first", 409)

    @app.errorhandler(OSError)
    def bus_error(e):
        return error(f"I2C error: {e}", 500)

    @app.route("/api")
    def api_info():
        """Show available API endpoints."""
        return jsonify({
            "endpoints": {
                "/status": "GET - Initialization and debug state",
                "/init": "POST - Initialize PCA9685 at a frequency",
                "/led": "POST - Switch a signal LED on or off",
                "/servo": "POST - Move a servo to an angle",
                "/tone": "POST - Play a tone on the speaker",
                "/debug": "POST - Enable or disable debug output",
            }
        })

    @app.route("/status", methods=["GET"])
    def get_status():
        """Get board state as known to this process."""
        return jsonify({
            "initialized": railway.is_initialized,
            "frequency": railway.frequency,
            "debug": is_debug_enabled(),
            "leds": [led.name for led in LEDNum],
            "servos": {s.name: railway.servos.get_servo_config(s).to_dict() for s in ServoNum},
        })

    @app.route("/init", methods=["POST"])
    def init():
        """Initialize the PCA9685."""
        data = request.get_json(silent=True) or {}
        try:
            freq = _parse_number(data.get("frequency", PWM_FREQUENCY))
        except (TypeError, ValueError):
            return error("frequency must be a number")
        if freq <= 0:
            return error("frequency must be positive")

        railway.initialize(freq)
        return jsonify({"status": "ok", "frequency": freq})

    @app.route("/led", methods=["POST"])
    def set_led():
        """Switch a single LED."""
        if not railway.is_initialized:
            return not_initialized()

        data = request.get_json(silent=True) or {}
        if "led" not in data:
            return error("No led provided")
        try:
            led = _parse_enum(LEDNum, data["led"])
        except (KeyError, TypeError, ValueError):
            return error(f"Unknown led: {data['led']}")
        state = data.get("state", False)
        if not isinstance(state, bool):
            return error("state must be true or false")

        railway.set_led(led, state)
        return jsonify({"status": "ok", "led": led.name, "state": state})

    @app.route("/servo", methods=["POST"])
    def set_servo():
        """Set a servo position."""
        if not railway.is_initialized:
            return not_initialized()

        data = request.get_json(silent=True) or {}
        if "servo" not in data:
            return error("No servo provided")
        try:
            servo = _parse_enum(ServoNum, data["servo"])
        except (KeyError, TypeError, ValueError):
            return error(f"Unknown servo: {data['servo']}")
        try:
            degrees = _parse_number(data.get("degrees", 90))
        except (TypeError, ValueError):
            return error("degrees must be a number")

        pulse = railway.set_servo_position(servo, degrees)
        return jsonify({
            "status": "ok",
            "servo": servo.name,
            "degrees": degrees,
            "pulse": pulse,
        })

    @app.route("/tone", methods=["POST"])
    def play_tone():
        """Play a tone. Responds once the tone has finished."""
        if not railway.is_initialized:
            return not_initialized()

        data = request.get_json(silent=True) or {}
        try:
            frequency = _parse_number(data["frequency"])
            duration = _parse_number(data["duration"])
        except KeyError as e:
            return error(f"Missing field: {e.args[0]}")
        except (TypeError, ValueError):
            return error("frequency and duration must be numbers")
        if duration < 0:
            return error("duration must be non-negative")

        railway.play_tone(frequency, duration)
        return jsonify({"status": "ok", "frequency": frequency, "duration": duration})

    @app.route("/debug", methods=["POST"])
    def set_debug():
        """Enable or disable debug output."""
        data = request.get_json(silent=True) or {}
        enabled = data.get("enabled", False)
        if not isinstance(enabled, bool):
            return error("enabled must be true or false")

        railway.set_debug(enabled)
        return jsonify({"status": "ok", "debug": is_debug_enabled()})

    return app
