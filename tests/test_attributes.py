from svg_inline.icons.request import IconRequest
from svg_inline.render.attributes import build_attributes, css_style_from_mapping
from svg_inline.render.dimensions import Dimensions


def test_accessibility_attributes_always_present() -> None:
    attrs = build_attributes(IconRequest(), None, "")
    assert attrs == {"aria-hidden": "true", "role": "img"}


def test_fill_omitted_when_unset_and_default_empty() -> None:
    attrs = build_attributes(IconRequest(class_="x"), None, "")
    assert "fill" not in attrs


def test_fill_precedence() -> None:
    assert build_attributes(IconRequest(), None, "currentColor")["fill"] == "currentColor"
    assert build_attributes(IconRequest(fill="red"), None, "currentColor")["fill"] == "red"
    assert "fill" not in build_attributes(IconRequest(fill=""), None, "currentColor")


def test_class_passthrough_and_default() -> None:
    assert build_attributes(IconRequest(class_="icon-lg"), None, "")["class"] == "icon-lg"
    assert build_attributes(IconRequest(), None, "", default_class="icon")["class"] == "icon"
    assert "class" not in build_attributes(IconRequest(class_=""), None, "", default_class="icon")


def test_style_uses_declared_order() -> None:
    req = IconRequest(css={"width": "2em", "color": "red"})
    assert build_attributes(req, None, "")["style"] == "width:2em;color:red"
    assert "style" not in build_attributes(IconRequest(css={}), None, "")


def test_size_only_with_dimensions() -> None:
    attrs = build_attributes(IconRequest(width=20), Dimensions(20, 10), "red", default_class="i")
    assert list(attrs) == ["width", "height", "aria-hidden", "role", "class", "fill"]
    assert attrs["width"] == "20"
    assert attrs["height"] == "10"
    assert "width" not in build_attributes(IconRequest(), None, "red")


def test_css_style_from_mapping() -> None:
    assert css_style_from_mapping({"a": "1", "b": 2}) == "a:1;b:2"
    assert css_style_from_mapping({}) == ""
