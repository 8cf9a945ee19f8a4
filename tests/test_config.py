from pathlib import Path

import pytest

from tagkit.config import MappingThemeProvider, RenderContext, load_defaults, load_spec
from tagkit.errors import ConfigurationError
from tagkit.models import ElementSpec
from tagkit.tags import Button, Div, InputText

DEFAULTS_YAML = """\
defaults:
  Div:
    class: container
  InputText:
    class: form-control
themes:
  muted:
    "*":
      class: text-muted
    Button:
      class: btn-muted
"""


def _write(path: Path, text: str) -> Path:
    path.write_text(text, encoding="utf-8")
    return path


def test_load_defaults_populates_registry(tmp_path: Path):
    registry = load_defaults(_write(tmp_path / "defaults.yaml", DEFAULTS_YAML))
    assert registry.get_defaults(Div).as_dict() == {"class": "container"}
    assert registry.get_defaults(InputText).as_dict() == {"class": "form-control"}


def test_unknown_element_in_defaults(tmp_path: Path):
    path = _write(tmp_path / "defaults.yaml", "defaults:\n  Marquee:\n    class: x\n")
    with pytest.raises(ConfigurationError, match="Unknown element type 'Marquee'."):
        load_defaults(path)


def test_invalid_defaults_shape(tmp_path: Path):
    path = _write(tmp_path / "defaults.yaml", "colors: {}\n")
    with pytest.raises(ConfigurationError, match="Invalid defaults file"):
        load_defaults(path)


def test_theme_table_falls_back_to_wildcard():
    provider = MappingThemeProvider({"muted": {"*": {"class": "text-muted"}, "Button": {"class": "btn-muted"}}})
    assert provider.apply(Button.tag(), "muted") == {"class": "btn-muted"}
    assert provider.apply(Div.tag(), "muted") == {"class": "text-muted"}
    assert provider.apply(Div.tag(), "loud") == {}


def test_render_tree_with_defaults_and_themes(tmp_path: Path):
    ctx = RenderContext.from_file(_write(tmp_path / "defaults.yaml", DEFAULTS_YAML))
    spec = ElementSpec.model_validate(
        {
            "element": "Div",
            "attributes": {"id": "main"},
            "children": [
                {"element": "InputText", "label": "Name", "attributes": {"id": "name"}},
                {"element": "Button", "content": "Go", "themes": ["muted"]},
            ],
        }
    )
    assert ctx.render(spec) == (
        '<div class="container" id="main">\n'
        '<label for="name">Name</label>\n'
        '<input class="form-control" id="name" type="text">\n'
        '<button class="btn-muted">Go</button>\n'
        "</div>"
    )


def test_defaults_do_not_leak_into_global_registry(tmp_path: Path):
    ctx = RenderContext.from_file(_write(tmp_path / "defaults.yaml", DEFAULTS_YAML))
    ctx.render(ElementSpec(element="Div"))
    assert Div.tag().render() == "<div>\n</div>"


def test_build_generic_tag_and_tag_name_lookup():
    ctx = RenderContext()
    assert ctx.render(ElementSpec.model_validate({"element": "Tag", "tagName": "span", "content": "<x>"})) == (
        "<span>&lt;x&gt;</span>"
    )
    assert ctx.render(ElementSpec(element="div", html="<b>raw</b>")) == "<div>\n<b>raw</b>\n</div>"


def test_build_checkbox_spec():
    ctx = RenderContext()
    spec = ElementSpec(element="InputCheckbox", value="yes", checked="yes", label="Agree", attributes={"id": "a"})
    assert ctx.render(spec) == '<input checked id="a" type="checkbox" value="yes">\n<label for="a">Agree</label>'


def test_build_rejects_content_on_void_elements():
    with pytest.raises(ConfigurationError, match="Element 'Img' cannot have content."):
        RenderContext().build(ElementSpec(element="Img", content="x"))


def test_build_rejects_themes_without_table():
    with pytest.raises(ConfigurationError, match="no themes are configured"):
        RenderContext().build(ElementSpec(element="Div", themes=["muted"]))


def test_build_validates_constrained_attributes():
    with pytest.raises(ValueError):
        RenderContext().build(ElementSpec(element="Form", attributes={"method": "put"}))


def test_validate_collects_errors_with_locations():
    spec = ElementSpec.model_validate(
        {"element": "Form", "attributes": {"method": "put"}, "children": [{"element": "Nope"}]}
    )
    assert RenderContext().validate(spec) == [
        "Form: Value 'put' is not in the list of valid values for 'method': 'get', 'post', 'dialog'.",
        "Form[0]/Nope: Unknown element type 'Nope'.",
    ]


def test_load_spec_variants(tmp_path: Path):
    assert load_spec(_write(tmp_path / "empty.yaml", "")) == []
    single = load_spec(_write(tmp_path / "one.yaml", "element: Hr\n"))
    assert [spec.element for spec in single] == ["Hr"]
    many = load_spec(_write(tmp_path / "many.yaml", "- element: Hr\n- element: Span\n  content: x\n"))
    assert [spec.element for spec in many] == ["Hr", "Span"]


def test_load_spec_rejects_unknown_fields(tmp_path: Path):
    with pytest.raises(ConfigurationError, match="Invalid element spec"):
        load_spec(_write(tmp_path / "bad.yaml", "element: Div\ncolour: red\n"))


def test_build_keeps_children_as_elements():
    ctx = RenderContext()
    ctx.registry.set_defaults(InputText, {"class": "form-control"})
    spec = ElementSpec(element="Div", content="Intro", children=[ElementSpec(element="InputText")])

    element = ctx.build(spec)

    assert element.render() == '<div>\nIntro\n<input class="form-control" type="text">\n</div>'
    ctx.registry.set_defaults(InputText, {"class": "changed"})
    assert '<input class="changed" type="text">' in element.render()


def test_build_select_and_button_group():
    ctx = RenderContext()
    select = ElementSpec.model_validate(
        {"element": "Select", "attributes": {"name": "city"}, "items": {1: "Santiago", 2: "Moscow"}, "value": 2}
    )
    assert '<option selected value="2">Moscow</option>' in ctx.render(select)

    group = ElementSpec.model_validate(
        {
            "element": "ButtonGroup",
            "children": [
                {"element": "InputSubmit", "value": "Save"},
                {"element": "InputReset", "value": "Reset"},
            ],
        }
    )
    assert ctx.render(group) == (
        '<div>\n<input type="submit" value="Save">\n<input type="reset" value="Reset">\n</div>'
    )


def test_build_rejects_items_on_other_elements():
    with pytest.raises(ConfigurationError, match="does not take items"):
        RenderContext().build(ElementSpec(element="Div", items={"a": "b"}))
