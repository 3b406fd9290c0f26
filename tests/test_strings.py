import pytest

from algokit.strings import KEYPAD, is_palindrome, keypad_codes, replace_pi


@pytest.mark.parametrize("word", ["", "a", "aa", "abba", "racecar", "GOOG"])
def test_palindromes(word):
    assert is_palindrome(word) is True


@pytest.mark.parametrize("word", ["GOD", "ab", "abca", "Aa"])
def test_not_palindromes(word):
    assert is_palindrome(word) is False


def test_keypad_single_digit():
    assert list(keypad_codes("1")) == list(KEYPAD["1"])


def test_keypad_combinations_count_and_order():
    codes = list(keypad_codes("269"))
    assert len(codes) == len(KEYPAD["2"]) * len(KEYPAD["6"]) * len(KEYPAD["9"])
    assert len(set(codes)) == len(codes)
    assert codes == sorted(codes)
    assert all(len(code) == 3 for code in codes)


def test_keypad_zero_is_space():
    assert list(keypad_codes("0")) == [KEYPAD["0"]]


def test_keypad_empty_input():
    assert list(keypad_codes("")) == [""]


def test_keypad_rejects_non_digits():
    with pytest.raises(ValueError):
        keypad_codes("2a")


def test_replace_pi_examples():
    assert replace_pi("3.14") == "pi"
    assert replace_pi("x3.14y3.14") == "xpiypi"


@pytest.mark.parametrize("text", ["", "3", "3.1", "hello", "3.41"])
def test_replace_pi_leaves_other_text(text):
    assert replace_pi(text) == text


def test_replace_pi_removes_all_occurrences():
    text = "3.143.14 and 33.144"
    result = replace_pi(text)
    assert "3.14" not in result
    assert result.count("pi") == text.count("3.14")