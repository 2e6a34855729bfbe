from typing import Dict, Hashable, List, Tuple

def str_to_bits(text: str) -> List[int]:
    """Разбирает строку из символов '0' и '1' в список битов.

    Пробелы, табуляции и разделители '_' игнорируются.

    Args:
        text (str): Строка вида "0110 1".

    Returns:
        List[int]: Список битов (0/1).

    Raises:
        ValueError: Если в строке есть символ, отличный от '0', '1', пробела или '_'.

    Пример:
        Вход: "01_10"
        Выход: [0, 1, 1, 0]
    """
    bits = []
    for pos, c in enumerate(text):
        if c in " _\t":
            continue
        if c not in "01":
            raise ValueError(f"invalid bit character {c!r} at position {pos}")
        bits.append(int(c))
    return bits

def bits_to_str(bits: List[int]) -> str:
    return "".join(str(b) for b in bits)

def bits_to_bytes(bits: List[int]) -> Tuple[bytes, int]:
    """Упаковывает массив битов в байты (big-endian внутри байта).

    Args:
        bits (List[int]): Список битов 0/1.

    Returns:
        tuple:
        - bytes: Упакованные байты.
        - int: Количество незначимых нулевых бит в последнем байте.
    """
    out = bytearray((len(bits)+7)//8)       # буфер с целым числом байт в большую сторону
    for i, bit in enumerate(bits):
        if bit:
            byte_id = i // 8                # счетчик байтов
            bit_id = 7 - (i % 8)            # счетчик битов
            out[byte_id] |= (1 << bit_id)

    return bytes(out), (8 - len(bits) % 8) % 8

def format_table(table: Dict[Hashable, List[int]]) -> List[str]:
    """Форматирует кодовую таблицу построчно: символ и его код."""
    return [f"{sym!r:>6} : {bits_to_str(path) or '<empty>'}" for sym, path in table.items()]
