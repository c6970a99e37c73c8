import pytest

from brvalues.checksum import mod11_check_digit
from brvalues.documents import cpf
from brvalues.helpers import only_numbers


@pytest.mark.parametrize("value", ["11144477735", "111.444.777-35", "111444777-35"])
def test_valid_cpf(value):
    assert cpf.is_valid(value)


@pytest.mark.parametrize(
    "value",
    [
        "11144477736",      # wrong second digit
        "11144477745",      # wrong first digit
        "111-444-777-35",   # bad separators
        "1114447773",       # short
        "111444777350",     # long
        "",
        None,
        11144477735,        # not a string
    ],
)
def test_invalid_cpf(value):
    assert not cpf.is_valid(value)


@pytest.mark.parametrize("value", cpf.RESERVED_NUMBERS)
def test_reserved_numbers_rejected(value):
    assert cpf.is_reserved_number(value)
    assert not cpf.is_valid(value)


def test_format():
    assert cpf.format("11144477735") == "111.444.777-35"
    assert cpf.format(11144477735) == "111.444.777-35"


def test_format_partial_and_truncated():
    assert cpf.format("111444") == "111.444"
    assert cpf.format("1114447773599") == "111.444.777-35"


def test_format_pad():
    assert cpf.format(1234567890, pad=True) == "012.345.678-90"
    assert cpf.format(1234567890) == "123.456.789-0"


def test_is_valid_checksum_requires_full_length():
    assert cpf.is_valid_checksum("11144477735")
    assert not cpf.is_valid_checksum("111444777")


def test_formatted_cpf_with_correct_check_digits_is_valid(rng):
    for _ in range(200):
        base = "".join(rng.choice("0123456789") for _ in range(9))
        first = str(mod11_check_digit(base, 10))
        digits = base + first + str(mod11_check_digit(base + first, 11))
        if digits in cpf.RESERVED_NUMBERS:
            continue
        formatted = cpf.format(digits)
        assert cpf.is_valid(formatted)
        assert only_numbers(formatted) == digits


def test_generate_is_always_valid():
    for _ in range(1000):
        value = cpf.generate()
        assert len(value) == cpf.LENGTH
        assert cpf.is_valid(value)


def test_generate_uses_state_fiscal_region():
    assert cpf.generate("SP")[8] == "8"
    assert cpf.generate("RS")[8] == "0"
    assert cpf.generate("Rio de Janeiro")[8] == "7"


def test_generate_with_unknown_state_still_valid():
    assert cpf.is_valid_checksum(cpf.generate("XX"))


def test_generate_redraws_reserved_numbers(monkeypatch):
    draws = iter(["00000000", "11144477"])
    monkeypatch.setattr(cpf, "generate_random_number", lambda length: next(draws))
    # RS has fiscal region 0, so the first draw is "00000000000".
    value = cpf.generate("RS")
    assert value.startswith("111444770")
    assert cpf.is_valid(value)
