import pytest

from piatnashki.gui import main, parse_seed


def test_empty_seed_means_new():
    assert parse_seed("") is None


@pytest.mark.parametrize("seed", [0, 42, 123456])
def test_plain_number_round_trips(seed):
    assert parse_seed(str(seed)) == seed


def test_negative_number_with_trailing_text():
    assert parse_seed("  -7abc") == -7


def test_explicit_plus_sign():
    assert parse_seed("+5") == 5


def test_text_without_digits_gives_zero():
    assert parse_seed("abc") == 0


def test_whitespace_only_gives_zero():
    assert parse_seed("   ") == 0


def test_unknown_option_is_rejected():
    with pytest.raises(SystemExit) as info:
        main(["--bogus"])
    assert info.value.code == 2