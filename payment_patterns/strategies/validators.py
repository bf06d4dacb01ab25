"""Pure predicates over payment detail fields."""
import re

_WHITESPACE = re.compile(r"\s")
_CARD_NUMBER = re.compile(r"\d{16}", re.ASCII)
_EXPIRY_DATE = re.compile(r"\d{2}/\d{2}", re.ASCII)
_CVV = re.compile(r"\d{3,4}", re.ASCII)
_EMAIL = re.compile(r"[a-zA-Z0-9._%+-]+@[a-zA-Z0-9.-]+\.[a-zA-Z]{2,}")
_ACCOUNT_NUMBER = re.compile(r"\d{8,12}", re.ASCII)
_ROUTING_NUMBER = re.compile(r"\d{9}", re.ASCII)

MIN_PASSWORD_LENGTH = 6
MIN_HOLDER_NAME_LENGTH = 2


def strip_whitespace(value: str) -> str:
    return _WHITESPACE.sub("", value)


def is_valid_card_number(card_number: str) -> bool:
    """16 digits once whitespace is removed."""
    return _CARD_NUMBER.fullmatch(strip_whitespace(card_number)) is not None


def is_valid_expiry_date(expiry_date: str) -> bool:
    """``MM/YY`` shape only; the date itself is not checked."""
    return _EXPIRY_DATE.fullmatch(expiry_date) is not None


def is_valid_cvv(cvv: str) -> bool:
    return _CVV.fullmatch(cvv) is not None


def is_valid_email(email: str) -> bool:
    return _EMAIL.fullmatch(email) is not None


def is_valid_password(password: str) -> bool:
    return len(password) >= MIN_PASSWORD_LENGTH


def is_valid_account_number(account_number: str) -> bool:
    return _ACCOUNT_NUMBER.fullmatch(account_number) is not None


def is_valid_routing_number(routing_number: str) -> bool:
    return _ROUTING_NUMBER.fullmatch(routing_number) is not None


def is_valid_account_holder_name(name: str) -> bool:
    return len(name.strip()) >= MIN_HOLDER_NAME_LENGTH
