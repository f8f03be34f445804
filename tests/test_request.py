import dataclasses

import pytest

from svg_inline.errors import InvalidIconOptionError, UnknownIconOptionError
from svg_inline.icons.request import IconRequest


def test_from_dict_maps_class_key() -> None:
    req = IconRequest.from_dict({"class": "icon", "width": 24, "css": {"color": "red"}})
    assert req.class_ == "icon"
    assert req.width == 24
    assert req.height is None
    assert dict(req.css) == {"color": "red"}


def test_from_dict_rejects_unknown_keys() -> None:
    with pytest.raises(UnknownIconOptionError):
        IconRequest.from_dict({"colour": "red"})


def test_length_literals_are_converted() -> None:
    assert IconRequest(width="2em").width == 32
    assert IconRequest(height="24px").height == 24


@pytest.mark.parametrize("value", [0, -4, "0px", "abc", True, [1]])
def test_invalid_lengths_rejected(value: object) -> None:
    with pytest.raises(InvalidIconOptionError):
        IconRequest(width=value)  # type: ignore[arg-type]


def test_css_must_be_mapping() -> None:
    with pytest.raises(InvalidIconOptionError):
        IconRequest(css=["color:red"])  # type: ignore[arg-type]


def test_with_options_returns_copy() -> None:
    base = IconRequest(class_="a")
    changed = base.with_options(class_="b", fill="red")
    assert base.class_ == "a"
    assert base.fill is None
    assert changed.class_ == "b"
    assert changed.fill == "red"
    assert base.with_size(10).has_size_override is True
    assert base.has_size_override is False


def test_request_is_frozen() -> None:
    req = IconRequest()
    with pytest.raises(dataclasses.FrozenInstanceError):
        req.width = 10  # type: ignore[misc]


def test_non_finite_lengths_rejected() -> None:
    with pytest.raises(InvalidIconOptionError):
        IconRequest(width=float("inf"))
    with pytest.raises(InvalidIconOptionError):
        IconRequest(height=float("nan"))
