import pytest

from a11y import color_parsers
from a11y.color_parsers import ColorParserRegistry, detect_notation, parse_hex, to_rgb
from a11y.errors import MalformedColorError, UnsupportedColorNotationError


def test_parse_hex_full_and_shorthand():
    assert parse_hex("#000000") == (0, 0, 0)
    assert parse_hex("#1a2B3c") == (26, 43, 60)
    assert parse_hex("#abc") == (0xAA, 0xBB, 0xCC)
    assert parse_hex("#FFF") == parse_hex("#ffffff") == (255, 255, 255)


def test_parse_hex_rejects_malformed():
    for bad in ["fff", "#ff", "#fffff", "#fffffff", "#xyzxyz", " #fff", None]:
        with pytest.raises(MalformedColorError) as e:
            parse_hex(bad)  # type: ignore[arg-type]
        assert e.value.context["notation"] == "hex"


def test_detect_notation():
    assert detect_notation("#fff") == "hex"
    with pytest.raises(UnsupportedColorNotationError) as e:
        detect_notation("rebeccapurple")
    assert e.value.context["known"] == ["hex"]
    with pytest.raises(UnsupportedColorNotationError):
        detect_notation("")
    with pytest.raises(MalformedColorError):
        detect_notation(123)  # type: ignore[arg-type]


def test_registry_dispatches_by_notation():
    r = ColorParserRegistry()
    r.register("hex", parse_hex, lambda c: c.startswith("#"))
    r.register("named", lambda c: {"black": (0, 0, 0)}[c], lambda c: c.isalpha())
    assert r.notations() == ["hex", "named"]
    assert r.parse("black") == (0, 0, 0)
    assert r.parse("#fff") == (255, 255, 255)
    r.unregister("named")
    r.unregister("missing")  # noop
    with pytest.raises(UnsupportedColorNotationError):
        r.parse("black")


def test_module_level_registration():
    color_parsers.register_color_parser("white", lambda c: (255, 255, 255), lambda c: c == "white")
    try:
        assert "white" in color_parsers.registered_notations()
        assert to_rgb("white") == (255, 255, 255)
    finally:
        color_parsers.unregister_color_parser("white")
    assert color_parsers.registered_notations() == ["hex"]
