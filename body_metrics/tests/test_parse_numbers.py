from body_metrics.core.utils import parse_int, parse_number


def test_parse_int_with_units():
    assert parse_int("180 cm") == 180
    assert parse_int(" 72.9kg") == 72
    assert parse_int("-3") == -3
    assert parse_int(64) == 64
    assert parse_int(64.7) == 64


def test_parse_number_accepts_comma_decimal():
    assert parse_number("72,5 kg") == 72.5
    assert parse_number(".5") == 0.5


def test_parse_rejects_non_numbers():
    assert parse_int("abc") is None
    assert parse_int("kg 70") is None
    assert parse_int("") is None
    assert parse_int(None) is None
    assert parse_int(True) is None
    assert parse_number(float("nan")) is None
    assert parse_number("9" * 400) is None
    assert parse_int("9" * 400) is None
    assert parse_int(10 ** 400) is None
