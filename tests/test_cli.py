from typer.testing import CliRunner

from brvalues.__main__ import main  # noqa: F401
from brvalues.cli import app
from brvalues.documents import cnpj, cpf

runner = CliRunner()


def test_help():
    result = runner.invoke(app, ["--help"])
    assert result.exit_code == 0
    assert "Brazilian" in result.stdout


def test_version():
    result = runner.invoke(app, ["--version"])
    assert result.exit_code == 0
    assert "brvalues" in result.stdout


def test_validate_valid():
    result = runner.invoke(app, ["validate", "cpf", "111.444.777-35"])
    assert result.exit_code == 0
    assert "valid" in result.stdout


def test_validate_invalid_exits_1():
    result = runner.invoke(app, ["validate", "cnpj", "11222333000182"])
    assert result.exit_code == 1
    assert "invalid" in result.stdout


def test_validate_unknown_kind():
    result = runner.invoke(app, ["validate", "rg", "123"])
    assert result.exit_code != 0


def test_format_cnpj():
    result = runner.invoke(app, ["format", "cnpj", "11222333000181"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "11.222.333/0001-81"


def test_format_cpf_pad():
    result = runner.invoke(app, ["format", "cpf", "1234567890", "--pad"])
    assert result.stdout.strip() == "012.345.678-90"


def test_format_pad_from_config(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("format:\n  pad: true\n")
    result = runner.invoke(app, ["--config", str(path), "format", "cpf", "1234567890"])
    assert result.exit_code == 0
    assert result.stdout.strip().endswith("012.345.678-90")


def test_format_kind_without_display_format():
    result = runner.invoke(app, ["format", "email", "a@b.com"])
    assert result.exit_code != 0


def test_generate_cpf_count():
    result = runner.invoke(app, ["generate", "cpf", "--count", "5", "--state", "SP"])
    assert result.exit_code == 0
    values = result.stdout.split()
    assert len(values) == 5
    assert all(cpf.is_valid(v) and v[8] == "8" for v in values)


def test_generate_cnpj_formatted():
    result = runner.invoke(app, ["generate", "cnpj", "--formatted"])
    assert result.exit_code == 0
    assert cnpj.is_valid(result.stdout.strip())


def test_states():
    result = runner.invoke(app, ["states"])
    assert result.exit_code == 0
    assert "Acre" in result.stdout


def test_cities():
    result = runner.invoke(app, ["cities", "DF"])
    assert result.exit_code == 0
    assert "Brasília" in result.stdout


def test_cities_unknown_state():
    result = runner.invoke(app, ["cities", "XX"])
    assert result.exit_code == 1


def test_capitalize_with_config(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("capitalize:\n  upper_case_words: [sa]\n")
    result = runner.invoke(app, ["--config", str(path), "capitalize", "empresa sa"])
    assert result.exit_code == 0
    assert result.stdout.strip().endswith("Empresa SA")


def test_currency_commands():
    result = runner.invoke(app, ["currency-format", "1234.56"])
    assert result.stdout.strip() == "1.234,56"
    result = runner.invoke(app, ["currency-parse", "R$ 1.234,56"])
    assert result.stdout.strip() == "1234.56"


def test_invalid_config_exits_2(tmp_path):
    path = tmp_path / "bad.yaml"
    path.write_text("currency:\n  decimals: 3\n")
    result = runner.invoke(app, ["--config", str(path), "states"])
    assert result.exit_code == 2


def test_format_without_config():
    result = runner.invoke(app, ["format", "cpf", "11144477735"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "111.444.777-35"


def test_capitalize_defaults():
    result = runner.invoke(app, ["capitalize", "joão da silva ltda"])
    assert result.exit_code == 0
    assert result.stdout.strip() == "João da Silva LTDA"


def test_currency_format_precision_from_config(tmp_path):
    path = tmp_path / "cfg.yaml"
    path.write_text("currency:\n  precision: 3\n")
    result = runner.invoke(app, ["--config", str(path), "currency-format", "1234.56"])
    assert result.exit_code == 0
    assert result.stdout.strip().endswith("1.234,560")
    result = runner.invoke(app, ["--config", str(path), "currency-format", "1234.56", "--precision", "1"])
    assert result.stdout.strip().endswith("1.234,6")
