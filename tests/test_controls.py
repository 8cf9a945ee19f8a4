import pytest
from bs4 import BeautifulSoup

from tagkit.defaults import DefaultsRegistry, set_defaults
from tagkit.errors import InvalidArgumentError, InvalidValueTypeError
from tagkit.tags import (
    ButtonGroup,
    CheckboxList,
    Div,
    InputCheckbox,
    InputHidden,
    InputRadio,
    InputReset,
    InputSubmit,
    Label,
    RadioList,
    Select,
    Tag,
)

CITIES = {"1": "Santiago", "2": "Moscow"}


def _fruits(cls=InputCheckbox):
    return (
        cls.tag().label("Apple").value(1),
        cls.tag().label("Banana").value(2),
    )


def test_select_options_and_prompt():
    rendered = Select.tag().id("city").name("city").items(CITIES).value("2").render()
    assert rendered == (
        '<select id="city" name="city">\n'
        "<option>Select an option</option>\n"
        '<option value="1">Santiago</option>\n'
        '<option selected value="2">Moscow</option>\n'
        "</select>"
    )


def test_select_custom_prompt_and_item_attributes():
    select = Select.tag().items(CITIES).prompt("Choose", "0").items_attributes({"2": {"disabled": True}})
    soup = BeautifulSoup(select.render(), "html.parser")
    options = soup.select("option")
    assert options[0]["value"] == "0"
    assert options[0].get_text() == "Choose"
    assert options[2].has_attr("disabled")


def test_select_groups():
    select = (
        Select.tag()
        .items({"cl": {"1": "Santiago"}, "ru": {"4": "Moscow", "5": "Novosibirsk"}})
        .groups({"cl": {"label": "Chile"}})
        .value(5)
    )
    soup = BeautifulSoup(select.render(), "html.parser")
    groups = soup.select("optgroup")
    assert [group["label"] for group in groups] == ["Chile", "ru"]
    assert [option["value"] for option in groups[1].select("option")] == ["4", "5"]
    assert soup.select("option[selected]")[0]["value"] == "5"


def test_select_multiple_values():
    select = Select.tag().multiple().items(CITIES).value(["1", "2"])
    soup = BeautifulSoup(select.render(), "html.parser")
    assert soup.select_one("select").has_attr("multiple")
    assert [option["value"] for option in soup.select("option[selected]")] == ["1", "2"]


def test_select_multiple_requires_a_list():
    with pytest.raises(InvalidArgumentError, match="must be a list when 'multiple' is enabled"):
        Select.tag().multiple().value("1").render()


def test_select_label():
    rendered = Select.tag().id("city").label("City").render()
    assert rendered == (
        '<label for="city">City</label>\n'
        '<select id="city">\n'
        "<option>Select an option</option>\n"
        "</select>"
    )


def test_checkbox_list():
    rendered = CheckboxList.tag().id("checkboxlist").name("CheckboxForm[text]").items(*_fruits()).render()
    assert rendered == (
        "<div>\n"
        '<input id="checkboxlist-w0" name="CheckboxForm[text][]" type="checkbox" value="1">\n'
        '<label for="checkboxlist-w0">Apple</label>\n'
        '<input id="checkboxlist-w1" name="CheckboxForm[text][]" type="checkbox" value="2">\n'
        '<label for="checkboxlist-w1">Banana</label>\n'
        "</div>"
    )


def test_choice_list_shares_attributes_with_items():
    choice = CheckboxList.tag().id("fruit").name("fruit").class_("value").autofocus().tab_index(1)
    soup = BeautifulSoup(choice.items(*_fruits()).render(), "html.parser")
    container = soup.div
    assert container.has_attr("autofocus")
    assert container["tabindex"] == "1"
    for item in container.find_all("input"):
        assert item["class"] == ["value"]
        assert not item.has_attr("autofocus")
        assert not item.has_attr("tabindex")


def test_choice_list_checked_and_unchecked_value():
    choice = CheckboxList.tag().name("fruit").items(*_fruits()).checked(2).unchecked_value("0")
    soup = BeautifulSoup(choice.render(), "html.parser")
    hidden, first, second = soup.div.find_all("input")
    assert hidden["type"] == "hidden"
    assert hidden["name"] == "fruit[]"
    assert hidden["value"] == "0"
    assert not first.has_attr("checked")
    assert second.has_attr("checked")

    checked_both = BeautifulSoup(choice.checked([1, 2]).render(), "html.parser")
    assert len(checked_both.select("input[checked]")) == 2


def test_radio_list_keeps_plain_name():
    rendered = RadioList.tag().name("fruit").items(*_fruits(InputRadio)).render()
    soup = BeautifulSoup(rendered, "html.parser")
    assert [item["name"] for item in soup.find_all("input")] == ["fruit", "fruit"]
    assert [item["type"] for item in soup.find_all("input")] == ["radio", "radio"]


def test_choice_list_label_and_container():
    choice = (
        RadioList.tag()
        .label("Fruit")
        .label_class("legend")
        .container_tag("fieldset")
        .container_class("options")
        .items(*_fruits(InputRadio))
    )
    rendered = choice.render()
    assert rendered.startswith('<label class="legend">Fruit</label>\n<fieldset class="options">\n')
    assert choice.container_tag(False).render().startswith('<label class="legend">Fruit</label>\n<input type="radio"')


def test_choice_list_enclosed_items_and_label_item_class():
    rendered = CheckboxList.tag().enclosed_by_label().items(*_fruits()).render()
    assert '<label>\n<input type="checkbox" value="1">\nApple\n</label>' in rendered

    rendered = CheckboxList.tag().id("f").label_item_class("check").items(*_fruits()).render()
    assert '<label class="check" for="f-w0">Apple</label>' in rendered


@pytest.mark.parametrize(
    "control, item",
    [
        (CheckboxList, InputRadio.tag()),
        (RadioList, InputCheckbox.tag()),
        (ButtonGroup, Div.tag()),
    ],
)
def test_controls_reject_foreign_items(control, item):
    with pytest.raises(InvalidValueTypeError, match="items must be"):
        if control is ButtonGroup:
            control.tag().buttons(item)
        else:
            control.tag().items(item)


def test_button_group():
    group = ButtonGroup.tag().class_("value").buttons(
        InputSubmit.tag().id("b1").value("Submit"),
        InputReset.tag().id("b2").value("Reset"),
    )
    assert group.render() == (
        '<div class="value">\n'
        '<input id="b1" type="submit" value="Submit">\n'
        '<input id="b2" type="reset" value="Reset">\n'
        "</div>"
    )
    assert group.container_tag(False).render() == (
        '<input id="b1" type="submit" value="Submit">\n<input id="b2" type="reset" value="Reset">'
    )


def test_button_group_individual_container():
    group = ButtonGroup.tag().individual_container().buttons(InputSubmit.tag().value("Send"))
    assert group.render() == '<div>\n<div>\n<input type="submit" value="Send">\n</div>\n</div>'


def test_controls_render_children_with_the_active_registry():
    set_defaults(InputCheckbox, {"class": "leak"})
    set_defaults(InputHidden, {"class": "leak"})
    registry = DefaultsRegistry()
    registry.set_defaults(Tag, {"class": "group"})
    registry.set_defaults(Label, {"class": "caption"})

    rendered = CheckboxList.tag().label("Fruit").unchecked_value("0").items(*_fruits()).render(registry)

    assert "leak" not in rendered
    soup = BeautifulSoup(rendered, "html.parser")
    assert soup.div["class"] == ["group"]
    assert [label["class"] for label in soup.find_all("label")] == [["caption"]] * 3

    select = BeautifulSoup(Select.tag().items(CITIES).render(registry), "html.parser")
    assert [option["class"] for option in select.find_all("option")] == [["group"]] * 3


def test_controls_are_immutable():
    select = Select.tag()
    assert select.items(CITIES) is not select
    assert select.groups({}) is not select
    assert select.items_attributes({}) is not select
    assert select.prompt("") is not select
    choice = CheckboxList.tag()
    assert choice.items() is not choice
    assert choice.container_tag("ul") is not choice
    group = ButtonGroup.tag()
    assert group.buttons() is not group
    assert group.individual_container(False) is not group
