import pytest
from bs4 import BeautifulSoup

from tagkit.errors import InvalidArgumentError, InvalidValueTypeError
from tagkit.tags import (
    Button,
    Form,
    InputCheckbox,
    InputDateTimeLocal,
    InputEmail,
    InputFile,
    InputHidden,
    InputNumber,
    InputRadio,
    InputText,
    TextArea,
)
from tagkit.values import ButtonType, Enctype, Method


def test_input_types():
    assert InputText.tag().render() == '<input type="text">'
    assert InputEmail.tag().multiple().render() == '<input multiple type="email">'
    assert InputDateTimeLocal.tag().render() == '<input type="datetime-local">'


def test_input_type_is_overridable():
    assert InputText.tag().add_attribute("type", "search").render() == '<input type="search">'


def test_form_attributes():
    form = Form.tag().action("/save").method(Method.POST).enctype(Enctype.MULTIPART_FORM_DATA).novalidate()
    assert form.render() == (
        '<form action="/save" enctype="multipart/form-data" method="post" novalidate>\n</form>'
    )


def test_form_method_rejects_unknown_value():
    with pytest.raises(InvalidArgumentError) as excinfo:
        Form.tag().method("invalid-value")
    assert str(excinfo.value) == (
        "Value 'invalid-value' is not in the list of valid values for 'method': 'get', 'post', 'dialog'."
    )


def test_button():
    button = Button.tag().type(ButtonType.SUBMIT).content("Save").value("save")
    assert button.render() == '<button type="submit" value="save">Save</button>'


def test_button_type_is_validated():
    with pytest.raises(InvalidArgumentError) as excinfo:
        Button.tag().type("invalid")
    assert str(excinfo.value) == (
        "Value 'invalid' is not in the list of valid values for 'type': 'button', 'reset', 'submit'."
    )


def test_button_value_must_be_string():
    with pytest.raises(InvalidValueTypeError):
        Button.tag().value(True).render()


def test_textarea():
    textarea = TextArea.tag().name("bio").rows(3).cols(40).wrap("soft").content("Hi")
    assert textarea.render() == '<textarea cols="40" name="bio" rows="3" wrap="soft">\nHi\n</textarea>'


@pytest.mark.parametrize("setter, value", [("cols", 0), ("rows", -1), ("maxlength", -1), ("wrap", "sideways")])
def test_textarea_constraints(setter, value):
    with pytest.raises(InvalidArgumentError):
        getattr(TextArea.tag(), setter)(value)


def test_text_value_type_check():
    assert InputText.tag().value("Ada").render() == '<input type="text" value="Ada">'
    with pytest.raises(InvalidValueTypeError) as excinfo:
        InputText.tag().value(["a"]).render()
    assert str(excinfo.value) == "The value must be a string or null value. The value is: list."


def test_numeric_value_type_check():
    assert InputNumber.tag().value(5).min(0).render() == '<input min="0" type="number" value="5">'
    assert InputNumber.tag().value("2.5").render() == '<input type="number" value="2.5">'
    with pytest.raises(InvalidValueTypeError) as excinfo:
        InputNumber.tag().value("abc").render()
    assert str(excinfo.value) == "The value must be a numeric or null value. The value is: str."


def test_null_value_renders_nothing():
    assert InputText.tag().value("x").value(None).render() == '<input type="text">'


def test_file_accept_list():
    rendered = InputFile.tag().accept(["image/png", "image/jpeg"]).render()
    assert rendered == '<input accept="image/png,image/jpeg" type="file">'


def test_label_before_text_input():
    rendered = InputText.tag().id("name").label("Name").render()
    assert rendered == '<label for="name">Name</label>\n<input id="name" type="text">'


def test_label_options():
    element = InputText.tag().id("name").label("<Name>").label_class("form-label").label_for("other")
    assert element.render() == '<label class="form-label" for="other">&lt;Name&gt;</label>\n<input id="name" type="text">'
    assert element.label_class("bold", append=True).render().startswith('<label class="form-label bold"')
    assert element.not_label().render() == '<input id="name" type="text">'


def test_label_without_id_has_no_for():
    assert InputText.tag().label("Name").render() == '<label>Name</label>\n<input type="text">'


def test_checkbox_label_follows_input():
    rendered = InputCheckbox.tag().id("agree").label("Agree").render()
    assert rendered == '<input id="agree" type="checkbox">\n<label for="agree">Agree</label>'


def test_checkbox_enclosed_by_label():
    rendered = InputCheckbox.tag().id("agree").label("Agree").enclosed_by_label().render()
    assert rendered == '<label>\n<input id="agree" type="checkbox">\nAgree\n</label>'


def test_checkbox_checked_states():
    base = InputCheckbox.tag().value("1")
    assert base.checked(True).render() == '<input checked type="checkbox" value="1">'
    assert base.checked("1").render() == '<input checked type="checkbox" value="1">'
    assert base.checked("2").render() == '<input type="checkbox" value="1">'
    assert base.checked(False).render() == '<input type="checkbox" value="1">'


def test_checkbox_checked_from_candidates():
    element = InputCheckbox.tag().name("fruit[]").value("b")
    assert element.checked(["a", "b"]).get_attributes()["checked"] is True
    assert "checked" not in element.checked(["c"]).get_attributes()


def test_boolean_value_becomes_one():
    assert InputRadio.tag().value(True).render() == '<input type="radio" value="1">'


def test_checkbox_unchecked_value():
    rendered = InputCheckbox.tag().name("agree").value(1).unchecked_value(0).render()
    assert rendered == (
        '<input name="agree" type="hidden" value="0">\n'
        '<input name="agree" type="checkbox" value="1">'
    )


def test_hidden_input():
    assert InputHidden.tag().name("token").value("abc").render() == '<input name="token" type="hidden" value="abc">'


def test_aria_describedby_follows_id():
    element = InputText.tag().id("email").add_aria_attribute("describedby", True)
    assert element.render() == '<input aria-describedby="email-help" id="email" type="text">'
    assert element.aria_describedby_suffix("hint").get_attributes()["aria-describedby"] == "email-hint"
    assert InputText.tag().add_aria_attribute("describedby", True).render() == '<input type="text">'
    assert InputText.tag().id("e").add_aria_attribute("describedby", "custom").get_attributes()[
        "aria-describedby"
    ] == "custom"


def test_full_form_structure():
    form = Form.tag().method("post").content(
        InputText.tag().id("user").name("user").label("User"),
        InputCheckbox.tag().id("remember").name("remember").value(1).label("Remember me"),
        Button.tag().type("submit").content("Sign in"),
    )
    soup = BeautifulSoup(form.render(), "html.parser")
    assert soup.form["method"] == "post"
    assert [tag["for"] for tag in soup.find_all("label")] == ["user", "remember"]
    assert soup.find("input", {"type": "checkbox"})["value"] == "1"
    assert soup.button.get_text() == "Sign in"
