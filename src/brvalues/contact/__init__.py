from . import email, phone

__all__ = ["email", "phone"]
