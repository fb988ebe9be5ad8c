from pathlib import Path

import pytest
from pydantic import ValidationError

from simple_component.builder import build_component, build_components, load_components_file
from simple_component.exceptions import InvalidBemBlockError, InvalidDataError
from simple_component.models import BemxSpec, ComponentSpec, ComponentsFile

REPO_ROOT = Path(__file__).resolve().parents[1]


def test_build_component_applies_every_field():
    spec = ComponentSpec.model_validate(
        {
            "tag": "button",
            "id": "save",
            "classes": ["js-save"],
            "bem": {"block": "btn", "modifiers": ["primary"]},
            "bemx": {"block": "btn", "parent": "toolbar", "parentModifiers": ["compact"]},
            "attributes": {"type": "submit", "disabled": None},
            "data": {"action": "save"},
            "aria": {"label": "Save"},
            "contents": ["Save <now>"],
        }
    )
    comp = build_component(spec)
    assert comp.get_attributes() == {
        "id": "save",
        "type": "submit",
        "disabled": "",
        "class": "js-save btn btn--primary toolbar__btn toolbar__btn--compact",
        "data-action": "save",
        "aria-label": "Save",
    }
    assert comp.get_contents() == "Save &lt;now&gt;"


def test_build_component_defaults():
    comp = build_component(ComponentSpec())
    assert comp.render() == "<comp></comp>"


def test_bemx_spec_accepts_field_name():
    spec = BemxSpec(block="img", parent="card", parent_modifiers=["wide"])
    assert spec.parent_modifiers == ["wide"]


def test_build_component_propagates_library_errors():
    with pytest.raises(InvalidBemBlockError):
        build_component(ComponentSpec(bem={"block": " "}))
    with pytest.raises(InvalidDataError):
        build_component(ComponentSpec(data={"id": ""}))


def test_load_list_document(tmp_path: Path):
    path = tmp_path / "components.yaml"
    path.write_text("- tag: p\n  contents: [hello]\n- tag: br\n  closed: false\n", encoding="utf-8")
    loaded = load_components_file(path)
    assert isinstance(loaded, ComponentsFile)
    rendered = [comp.render() for comp in build_components(loaded.components)]
    assert rendered == ["<p>\nhello\n</p>", "<br>"]
    assert loaded.page.lang == "en"


def test_load_empty_document(tmp_path: Path):
    path = tmp_path / "empty.yaml"
    path.write_text("", encoding="utf-8")
    assert load_components_file(path).components == []


def test_load_rejects_bad_schema(tmp_path: Path):
    path = tmp_path / "bad.yaml"
    path.write_text("components:\n  - tag: [not, a, string]\n", encoding="utf-8")
    with pytest.raises(ValidationError):
        load_components_file(path)


def test_user_card_config_loads():
    loaded = load_components_file(REPO_ROOT / "config" / "user_card.yaml")
    assert loaded.page.title == "User card"
    components = build_components(loaded.components)
    assert components[0].get_class() == "label user-card__label user-card__label--name"
    assert components[1].render() == '<img src="/icon.jpeg" alt="user image" class="img user-card__img">'
