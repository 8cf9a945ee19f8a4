import pytest

from tagkit.errors import InvalidArgumentError
from tagkit.tags import Img, InputColor, P
from tagkit.validation import int_like, one_of, validate_attribute
from tagkit.values import Method, Wrap


def test_one_of_lists_allowed_values_in_declaration_order():
    with pytest.raises(InvalidArgumentError) as excinfo:
        one_of("invalid-value", Method, "method")
    assert str(excinfo.value) == (
        "Value 'invalid-value' is not in the list of valid values for 'method': "
        "'get', 'post', 'dialog'."
    )


def test_one_of_accepts_enum_members_and_none():
    assert one_of(Wrap.SOFT, Wrap, "wrap") == "soft"
    assert one_of("hard", Wrap, "wrap") == "hard"
    assert one_of(None, Wrap, "wrap") is None


def test_invalid_argument_error_is_value_error():
    with pytest.raises(ValueError):
        one_of("sideways", Wrap, "wrap")


@pytest.mark.parametrize(
    "name, value, message",
    [
        ("cols", 0, "0 is not a valid value for 'cols'. It must be value > 0."),
        ("rows", "abc", "abc is not a valid value for 'rows'. It must be value > 0."),
        ("tabindex", -2, "-2 is not a valid value for 'tabindex'. It must be value >= -1."),
        ("maxlength", -1, "-1 is not a valid value for 'maxlength'. It must be value >= 0."),
    ],
)
def test_numeric_constraints(name, value, message):
    with pytest.raises(InvalidArgumentError) as excinfo:
        validate_attribute(name, value)
    assert str(excinfo.value) == message


def test_int_like_accepts_integer_strings():
    assert int_like("-1", "tabindex", -1, "value >= -1") == "-1"
    assert int_like(None, "cols", 1, "value > 0") is None


def test_int_like_rejects_booleans():
    with pytest.raises(InvalidArgumentError):
        int_like(True, "cols", 1, "value > 0")


def test_unconstrained_attributes_pass_through():
    assert validate_attribute("data-anything", "whatever") == "whatever"
    assert validate_attribute("aria-label", 42) == 42
    assert validate_attribute("x-custom", ["a"]) == ["a"]


def test_content_editable_rejects_unknown_value():
    with pytest.raises(InvalidArgumentError) as excinfo:
        P.tag().content_editable("invalid-value")
    assert str(excinfo.value) == (
        "Value 'invalid-value' is not in the list of valid values for 'contenteditable': "
        "'true', 'false', 'plaintext-only'."
    )


@pytest.mark.parametrize(
    "build, attribute",
    [
        (lambda: Img.tag().crossorigin("invalid-value"), "crossorigin"),
        (lambda: Img.tag().decoding("invalid-value"), "decoding"),
        (lambda: Img.tag().fetchpriority("invalid-value"), "fetchpriority"),
        (lambda: Img.tag().loading("invalid-value"), "loading"),
        (lambda: Img.tag().referrerpolicy("invalid-value"), "referrerpolicy"),
        (lambda: InputColor.tag().colorspace("invalid-value"), "colorspace"),
        (lambda: P.tag().lang("invalid-value"), "lang"),
        (lambda: P.tag().translate("invalid-value"), "translate"),
    ],
)
def test_enumerated_setters_reject_unknown_values(build, attribute):
    with pytest.raises(InvalidArgumentError) as excinfo:
        build()
    assert str(excinfo.value).startswith(
        f"Value 'invalid-value' is not in the list of valid values for '{attribute}': '"
    )


def test_failed_setter_leaves_element_untouched():
    element = P.tag().id("intro").content("x")
    with pytest.raises(InvalidArgumentError):
        element.content_editable("invalid-value")
    with pytest.raises(InvalidArgumentError):
        element.tab_index(-5)
    assert element.render() == '<p id="intro">\nx\n</p>'
