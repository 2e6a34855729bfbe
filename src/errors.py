"""Ошибки кодека Хаффмана.

Все ошибки наследуются от HuffmanError, поэтому вызывающий код (например, CLI)
может перехватывать их одним except-блоком.
"""

# =================================================================================================================

class HuffmanError(Exception):
    """Базовая ошибка кодека."""


class EmptyInputError(HuffmanError, ValueError):
    """Дерево нельзя построить по пустому набору символов."""

    def __init__(self, message: str = "cannot build a code tree from empty input"):
        super().__init__(message)


class SymbolNotEncodableError(HuffmanError, LookupError):
    """Символ отсутствует в кодовом дереве (или в кодовой таблице)."""

    def __init__(self, symbol):
        self.symbol = symbol
        super().__init__(f"symbol {symbol!r} is not encodable with this code tree")


class MalformedBitstreamError(HuffmanError, ValueError):
    """Битовый поток не соответствует кодовому дереву."""
