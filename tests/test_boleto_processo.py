import pytest

from brvalues.documents import boleto, processo
from brvalues.helpers import only_numbers


# ---- Boleto ----

def test_valid_boleto(valid_boleto):
    assert boleto.is_valid(valid_boleto)


def test_valid_formatted_boleto(valid_boleto):
    assert boleto.is_valid(boleto.format(valid_boleto))


def test_format(valid_boleto):
    assert boleto.format(valid_boleto) == "00190.50095 40144.816069 06809.350314 3 37370000000100"


def test_format_round_trip(valid_boleto):
    assert only_numbers(boleto.format(valid_boleto)) == valid_boleto


def test_to_barcode(valid_boleto):
    assert boleto.to_barcode(valid_boleto) == "00193373700000001000500940144816060680935031"


def test_broken_partial_digit_rejected(valid_boleto):
    broken = valid_boleto[:9] + "6" + valid_boleto[10:]
    assert not boleto.is_valid_partials(broken)
    assert not boleto.is_valid(broken)


def test_broken_general_digit_rejected(valid_boleto):
    broken = valid_boleto[:32] + "4" + valid_boleto[33:]
    assert boleto.is_valid_partials(broken)
    assert not boleto.is_valid(broken)


def test_changed_amount_rejected(valid_boleto):
    assert not boleto.is_valid(valid_boleto[:-1] + "1")


@pytest.mark.parametrize("value", ["", None, "123", "0" * 46, 1])
def test_invalid_boleto_input(value):
    assert not boleto.is_valid(value)


# ---- Processo (CNJ) ----

VALID_PROCESSO = "0000001-39.2024.8.26.0100"


def test_valid_processo():
    assert processo.is_valid(VALID_PROCESSO)
    assert processo.is_valid(only_numbers(VALID_PROCESSO))


def test_wrong_check_digits_rejected():
    assert not processo.is_valid("0000001-40.2024.8.26.0100")


@pytest.mark.parametrize("value", ["", None, "123", "0000001392024826010", 20])
def test_invalid_processo_input(value):
    assert not processo.is_valid(value)


def test_format():
    assert processo.format("12345678901234567890") == "1234567-89.0123.4.56.7890"
    assert processo.format("1234567890123456") == "1234567-89.0123.4.56"
    assert processo.format(only_numbers(VALID_PROCESSO)) == VALID_PROCESSO


def test_calculate_check_digits_ignores_current_digits():
    assert processo.calculate_check_digits("00000010020248260100") == "39"


def test_processo_with_computed_check_digits_is_valid(rng):
    for _ in range(200):
        digits = "".join(rng.choice("0123456789") for _ in range(processo.LENGTH))
        fixed = digits[:7] + processo.calculate_check_digits(digits) + digits[9:]
        assert processo.is_valid(processo.format(fixed))
