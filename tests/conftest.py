import random

import pytest


@pytest.fixture
def rng():
    # Seeded so property-style tests are reproducible.
    return random.Random(20240601)


@pytest.fixture
def valid_boleto():
    # Banco do Brasil digitable line, R$ 1,00.
    return "00190500954014481606906809350314337370000000100"
