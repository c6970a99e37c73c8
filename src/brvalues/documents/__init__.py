from . import boleto, cep, cnpj, cpf, pis, processo

__all__ = ["boleto", "cep", "cnpj", "cpf", "pis", "processo"]
