import pytest

from backend.core.slugs import next_available_slug, slugify


@pytest.mark.parametrize(
    "value, expected",
    [
        ("Intro to Python 3!", "intro-to-python-3"),
        ("  Data   Science  ", "data-science"),
        ("Café Crème", "cafe-creme"),
        ("C++ & C#", "c-c"),
        ("!!!", "untitled"),
    ],
)
def test_slugify(value: str, expected: str) -> None:
    assert slugify(value) == expected


def test_next_available_slug_free() -> None:
    assert next_available_slug("python", {"python-basics"}) == "python"


def test_next_available_slug_fills_first_gap() -> None:
    assert next_available_slug("python", {"python", "python-2", "python-4"}) == "python-3"
