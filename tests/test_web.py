import pytest

from funduino_railway import FunduinoRailway
from funduino_railway.hardware.pca9685 import PCA9685
from funduino_railway.web import create_app

from .conftest import FakeBus, channel_pulse


@pytest.fixture
def client(railway):
    app = create_app(railway)
    app.config["TESTING"] = True
    return app.test_client()


@pytest.fixture
def ready(client, railway):
    client.post("/init", json={})
    return client


def test_api(client):
    data = client.get("/api").get_json()
    assert "/led" in data["endpoints"]


def test_status_before_init(client):
    data = client.get("/status").get_json()
    assert data["initialized"] is False
    assert data["debug"] is False
    assert data["leds"] == ["Green1", "Yellow1", "Red1", "Green2", "Yellow2", "Red2"]
    assert data["servos"]["Servo2"] == {"pin_number": 7, "min_offset": 5, "max_offset": 25}


def test_init(client, railway):
    resp = client.post("/init", json={"frequency": 60})
    assert resp.status_code == 200
    assert resp.get_json()["frequency"] == 60
    assert railway.frequency == 60


def test_init_rejects_bad_frequency(client):
    assert client.post("/init", json={"frequency": "fast"}).status_code == 400
    assert client.post("/init", json={"frequency": 0}).status_code == 400


def test_channel_requests_need_init(client):
    assert client.post("/led", json={"led": "Red1", "state": True}).status_code == 409
    assert client.post("/servo", json={"servo": "Servo1", "degrees": 0}).status_code == 409
    assert client.post("/tone", json={"frequency": 440, "duration": 10}).status_code == 409


def test_led_by_name(ready, log):
    resp = ready.post("/led", json={"led": "Red1", "state": True})
    assert resp.get_json() == {"status": "ok", "led": "Red1", "state": True}
    assert channel_pulse(log, 2) == (0, 4095)


def test_led_by_number(ready, log):
    ready.post("/led", json={"led": 6, "state": False})
    assert channel_pulse(log, 5) == (0, 0)


def test_led_unknown(ready):
    assert ready.post("/led", json={"led": "Blue1"}).status_code == 400
    assert ready.post("/led", json={"led": 7}).status_code == 400
    assert ready.post("/led", json={}).status_code == 400


def test_servo(ready, log):
    resp = ready.post("/servo", json={"servo": "Servo2", "degrees": 180})
    assert resp.get_json()["pulse"] == 25
    assert channel_pulse(log, 7) == (0, 25)


def test_servo_unknown(ready):
    assert ready.post("/servo", json={"servo": "Servo3"}).status_code == 400
    assert ready.post("/servo", json={"servo": "Servo1", "degrees": "left"}).status_code == 400


def test_tone(ready, log):
    resp = ready.post("/tone", json={"frequency": 440, "duration": 200})
    assert resp.status_code == 200
    assert ("sleep", 0.2) in log
    assert channel_pulse(log, 8) == (0, 0)


def test_tone_missing_field(ready):
    resp = ready.post("/tone", json={"frequency": 440})
    assert resp.status_code == 400
    assert "duration" in resp.get_json()["message"]


def test_debug(client):
    assert client.post("/debug", json={"enabled": True}).get_json()["debug"] is True
    assert client.get("/status").get_json()["debug"] is True
    assert client.post("/debug", json={"enabled": False}).get_json()["debug"] is False


def test_bus_error(ready, railway):
    class BrokenBus:
        def write_byte_data(self, address, register, value):
            raise OSError(121, "Remote I/O error")

    railway.pwm.bus = BrokenBus()
    resp = ready.post("/led", json={"led": "Green1", "state": True})
    assert resp.status_code == 500
    assert resp.get_json()["status"] == "error"


@pytest.fixture
def strict_client(log):
    """Client whose delay rejects negative lengths like time.sleep does."""
    def sleep(seconds):
        if seconds < 0:
            raise ValueError("sleep length must be non-negative")
        log.append(("sleep", seconds))

    railway = FunduinoRailway(PCA9685(bus=FakeBus(log), sleep=sleep))
    railway.initialize()
    app = create_app(railway)
    app.config["TESTING"] = True
    return app.test_client()


def test_tone_negative_duration(strict_client, log):
    before = len(log)
    resp = strict_client.post("/tone", json={"frequency": 440, "duration": -5})

    assert resp.status_code == 400
    assert resp.get_json()["status"] == "error"
    assert log[before:] == []


def test_tone_zero_duration(strict_client, log):
    assert strict_client.post("/tone", json={"frequency": 440, "duration": 0}).status_code == 200
    assert channel_pulse(log, 8) == (0, 0)


@pytest.mark.parametrize("state", ["false", "true", 0, 1, None])
def test_led_state_must_be_boolean(ready, log, state):
    before = len(log)
    resp = ready.post("/led", json={"led": "Red1", "state": state})

    assert resp.status_code == 400
    assert log[before:] == []


@pytest.mark.parametrize("enabled", ["false", 1, None])
def test_debug_must_be_boolean(client, enabled):
    assert client.post("/debug", json={"enabled": enabled}).status_code == 400
    assert client.get("/status").get_json()["debug"] is False


def post_raw(client, url, body):
    return client.post(url, data=body, content_type="application/json")


@pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity"])
def test_init_rejects_non_finite(client, railway, value):
    resp = post_raw(client, "/init", '{"frequency": %s}' % value)

    assert resp.status_code == 400
    assert resp.is_json
    assert not railway.is_initialized


@pytest.mark.parametrize("value", ["NaN", "Infinity", "-Infinity"])
def test_servo_rejects_non_finite(ready, value):
    resp = post_raw(ready, "/servo", '{"servo": "Servo1", "degrees": %s}' % value)

    assert resp.status_code == 400
    assert resp.is_json


@pytest.mark.parametrize("body", [
    '{"frequency": NaN, "duration": 10}',
    '{"frequency": 440, "duration": Infinity}',
])
def test_tone_rejects_non_finite(ready, log, body):
    before = len(log)
    resp = post_raw(ready, "/tone", body)

    assert resp.status_code == 400
    assert resp.is_json
    assert log[before:] == []


@pytest.mark.parametrize("led", [True, False, 1.9, "1.5"])
def test_led_rejects_non_integer_numbers(ready, led):
    assert ready.post("/led", json={"led": led, "state": True}).status_code == 400


def test_led_accepts_integral_float(ready, log):
    assert ready.post("/led", json={"led": 2.0, "state": True}).status_code == 200
    assert channel_pulse(log, 1) == (0, 4095)


def test_servo_rejects_boolean_id(ready):
    assert ready.post("/servo", json={"servo": True, "degrees": 10}).status_code == 400
