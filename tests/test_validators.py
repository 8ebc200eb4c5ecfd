import pytest

from articlegen.validators import is_text_empty


@pytest.mark.parametrize("text", ["", " ", "\t\n", "   \r\n  ", None])
def test_blank_values_are_empty(text) -> None:
    assert is_text_empty(text)


@pytest.mark.parametrize("text", ["a", " a ", "\nhttp://x/a.mp3\n", "0"])
def test_values_with_content_are_not_empty(text: str) -> None:
    assert not is_text_empty(text)
