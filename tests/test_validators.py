"""Tests for the input validators."""

import pytest

from energy_dashboard import is_secure_url, is_valid_entity_id, is_valid_url, sanitize_text


@pytest.mark.parametrize("value", [None, ""])
def test_sanitize_text_empty(value):
    assert sanitize_text(value) == ""


def test_sanitize_text_plain_text_unchanged():
    assert sanitize_text("Hello World") == "Hello World"


def test_sanitize_text_escapes_markup():
    result = sanitize_text('<script>alert("xss")</script>')
    assert "<script>" not in result
    assert result == "&lt;script&gt;alert(&quot;xss&quot;)&lt;/script&gt;"


def test_sanitize_text_escapes_ampersand_once():
    assert sanitize_text("Tom & Jerry") == "Tom &amp; Jerry"
    assert sanitize_text("<'>") == "&lt;&#039;&gt;"


def test_sanitize_text_converts_values():
    assert sanitize_text(123) == "123"
    assert sanitize_text(1.5) == "1.5"


@pytest.mark.parametrize(
    "value",
    ['<img src=x onerror="alert(1)">', "a < b > c", "it's \"quoted\"", "&lt; already"],
)
def test_sanitize_text_leaves_no_raw_characters(value):
    result = sanitize_text(value)
    for char in "<>\"'":
        assert char not in result
    assert result.replace("&amp;", "").replace("&lt;", "").replace("&gt;", "").replace(
        "&quot;", ""
    ).replace("&#039;", "").count("&") == 0


@pytest.mark.parametrize(
    "entity_id",
    [
        "sensor.power_consumption",
        "binary_sensor.motion_detected",
        "_custom.my_sensor",
        "sensor.temp_sensor_1",
        "sensor." + "a" * 248,
    ],
)
def test_valid_entity_ids(entity_id):
    assert is_valid_entity_id(entity_id)


@pytest.mark.parametrize(
    "entity_id",
    [
        None,
        "",
        123,
        {},
        "sensor_power",
        "Sensor.Power",
        "sensor.power-usage",
        "sensor.power@home",
        "1sensor.power",
        "sensor.",
        "sensor.a.b",
        "sensor." + "a" * 249,
    ],
)
def test_invalid_entity_ids(entity_id):
    assert not is_valid_entity_id(entity_id)


def test_entity_id_length_boundary():
    assert len("sensor." + "a" * 248) == 255
    assert is_valid_entity_id("sensor." + "a" * 248)
    assert not is_valid_entity_id("sensor." + "a" * 249)


@pytest.mark.parametrize(
    "url",
    [
        "",
        None,
        "http://homeassistant.local:8123",
        "https://myha.duckdns.org",
        "http://localhost:8123",
        "http://192.168.1.100:8123",
        "https://a.b",
    ],
)
def test_valid_urls(url):
    assert is_valid_url(url)


@pytest.mark.parametrize(
    "url",
    [
        "not-a-url",
        "ftp://example.com",
        "ftp://x",
        "file:///etc/passwd",
        "javascript:alert(1)",
        "http://",
        123,
    ],
)
def test_invalid_urls(url):
    assert not is_valid_url(url)


@pytest.mark.parametrize("url", ["", None, "https://myha.duckdns.org", "https://a.b"])
def test_secure_urls(url):
    assert is_secure_url(url)


@pytest.mark.parametrize(
    "url", ["http://homeassistant.local:8123", "http://a.b", "not-a-url", "ftp://x"]
)
def test_insecure_urls(url):
    assert not is_secure_url(url)
