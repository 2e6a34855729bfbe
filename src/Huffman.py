
from bisect import bisect_left
from heapq import heappush, heappop, heapify
from typing import Callable, Dict, Hashable, Iterable, List, Mapping, Sequence, Tuple, Union
from collections import Counter

from CodeTree import *
from errors import *

"""Кодек Хаффмана на кодовом дереве.

Поддерживает:
    - подсчёт частот символов текста
    - построение упорядоченного списка листьев и слияние деревьев
    - построение кодового дерева (мин-куча с детерминированным порядком слияния)
    - декодирование битов обходом дерева
    - кодирование обходом дерева и по кодовой таблице

Биты представлены целыми 0 и 1: 0 - спуск влево, 1 - спуск вправо.

API:
    - функции times / make_ordered_leaf_list / combine / until / create_code_tree
    - функции decode / encode / convert / code_bits / quick_encode
    - Huffman(text): класс с методами pack/unpack поверх кодовой таблицы.
"""

Bit = int
CodeTable = Dict[Hashable, List[Bit]]

# -------------------------------------------------------------------------------------------------

def string_to_chars(text: str) -> List[str]:
    return list(text)

def times(text: Iterable[Hashable]) -> Dict[Hashable, int]:
    """Подсчитывает, сколько раз встречается каждый уникальный символ.

    Порядок ключей - порядок первого появления символа в тексте.

    Пример:
        Вход: ['a', 'b', 'a']
        Выход: {'a': 2, 'b': 1}
    """
    return dict(Counter(text))

def make_ordered_leaf_list(freqs: Union[Mapping[Hashable, int], Iterable[Tuple[Hashable, int]]]) -> List[Leaf]:
    """Строит листья по таблице частот, упорядоченные по возрастанию веса.

    Args:
        freqs: Словарь {символ: частота} или последовательность пар (символ, частота).

    Returns:
        List[Leaf]: Листья; при равных весах сохраняется порядок входа.
    """
    pairs = freqs.items() if isinstance(freqs, Mapping) else freqs
    return [Leaf(sym, w) for sym, w in sorted(pairs, key=lambda pair: pair[1])]

# -------------------------------------------------------------------------------------------------

def singleton(trees: Sequence[CodeTree]) -> bool:
    return len(trees) == 1

def combine(trees: Sequence[CodeTree]) -> List[CodeTree]:
    """Один шаг слияния.

    Берёт два первых (самых лёгких) дерева списка, объединяет их в Fork и
    вставляет его в оставшийся список так, чтобы сохранить возрастание весов.
    Новый узел встаёт перед деревьями с таким же весом.

    Args:
        trees: Деревья, упорядоченные по возрастанию веса.

    Returns:
        List[CodeTree]: Новый список; если деревьев меньше двух - копия входа.
    """
    if len(trees) < 2:
        return list(trees)

    left, right, *rest = trees
    fork = make_code_tree(left, right)

    pos = bisect_left([weight(t) for t in rest], weight(fork))
    return rest[:pos] + [fork] + rest[pos:]

def until(done: Callable[[List[CodeTree]], bool],
          step: Callable[[List[CodeTree]], List[CodeTree]],
          trees: Sequence[CodeTree]) -> List[CodeTree]:
    """Применяет step к списку деревьев, пока не выполнится done.

    Raises:
        EmptyInputError: Пустой список никогда не станет одним деревом.
    """
    trees = list(trees)
    if not trees:
        raise EmptyInputError()

    while not done(trees):
        trees = step(trees)
    return trees

def create_code_tree(text: Iterable[Hashable]) -> CodeTree:
    """Строит кодовое дерево Хаффмана по тексту.

    Дерево строится на минимальной куче, элемент кучи имеет вид
    (вес, порядок, дерево). Листья получают порядок 0, 1, 2, ... в порядке
    упорядоченного списка листьев, каждый новый Fork - порядок меньше всех
    существующих. Поэтому сливаются ровно те же деревья, что и при
    многократном вызове combine(), и результат совпадает с ним узел в узел.

    Raises:
        EmptyInputError: Если текст пуст.
    """
    leaves = make_ordered_leaf_list(times(text))
    if not leaves:
        raise EmptyInputError()

    heap = [(leaf.weight, order, leaf) for order, leaf in enumerate(leaves)]
    heapify(heap)
    fork_order = 0

    while len(heap) > 1:    # два самых лёгких узла, при равенстве - стоящие первыми
        _, _, left = heappop(heap)
        _, _, right = heappop(heap)

        fork_order -= 1
        fork = make_code_tree(left, right)
        heappush(heap, (fork.weight, fork_order, fork))

    _, _, root = heap[0]
    return root

# -------------------------------------------------------------------------------------------------

def decode(tree: CodeTree, bits: Iterable[Bit]) -> List[Hashable]:
    """Декодирует биты обходом дерева от корня.

    Args:
        tree (CodeTree): Кодовое дерево.
        bits: Последовательность 0/1.

    Returns:
        List: Раскодированные символы.

    Raises:
        MalformedBitstreamError: Значение не 0/1, поток оборвался внутри кода,
            либо переданы биты для дерева из одного листа.
    """
    bits = list(bits)

    # Дерево из одного листа: у символа пустой код
    if isinstance(tree, Leaf):
        if bits:
            raise MalformedBitstreamError(
                f"single-symbol tree has no codes with bits, got {len(bits)} bit(s)")
        return []

    out = []
    node = tree
    for pos, bit in enumerate(bits):
        if bit == 0:
            node = node.left
        elif bit == 1:
            node = node.right
        else:
            raise MalformedBitstreamError(f"invalid bit {bit!r} at position {pos}")

        if isinstance(node, Leaf):
            out.append(node.char)
            node = tree

    if node is not tree:
        raise MalformedBitstreamError("bit sequence ended in the middle of a code")
    return out

def encode(tree: CodeTree, text: Iterable[Hashable]) -> List[Bit]:
    """Кодирует текст обходом дерева: для каждого символа спускается в то
    поддерево, в котором этот символ есть.

    Raises:
        SymbolNotEncodableError: Символа нет в дереве.
    """
    bits = []
    for ch in text:
        if ch not in chars(tree):
            raise SymbolNotEncodableError(ch)

        node = tree
        while isinstance(node, Fork):
            if ch in chars(node.left):
                bits.append(0)
                node = node.left
            else:
                bits.append(1)
                node = node.right
    return bits

# -------------------------------------------------------------------------------------------------

def convert(tree: CodeTree) -> CodeTable:
    """Строит кодовую таблицу {символ: путь от корня до листа}.

    Пример:
        Вход: Fork(Leaf('b', 1), Leaf('a', 2), ('b', 'a'), 3)
        Выход: {'b': [0], 'a': [1]}
    """
    if isinstance(tree, Leaf):
        return {tree.char: []}
    return merge_code_tables(convert(tree.left), convert(tree.right))

def merge_code_tables(a: CodeTable, b: CodeTable) -> CodeTable:
    """Сливает таблицы левого и правого поддерева в таблицу их родителя.

    Пути таблицы a получают префикс 0, пути таблицы b - префикс 1.
    """
    table = {sym: [0] + path for sym, path in a.items()}
    table.update((sym, [1] + path) for sym, path in b.items())
    return table

def code_bits(table: CodeTable, ch: Hashable) -> List[Bit]:
    """Возвращает код символа по таблице.

    Raises:
        SymbolNotEncodableError: Символа нет в таблице.
    """
    try:
        return list(table[ch])
    except KeyError:
        raise SymbolNotEncodableError(ch) from None

def quick_encode(tree: CodeTree, text: Iterable[Hashable]) -> List[Bit]:
    """Кодирует текст через кодовую таблицу, построенную один раз.

    Результат совпадает с encode() бит в бит.
    """
    table = convert(tree)

    bits = []
    for ch in text:
        bits += code_bits(table, ch)
    return bits

# -------------------------------------------------------------------------------------------------

class Huffman:
    """Кодек над одним кодовым деревом.

    Атрибуты:
        tree (CodeTree): Кодовое дерево.
        table (CodeTable): Кодовая таблица, построенная по дереву.
        freqs (Dict): Частоты символов, если дерево построено по тексту.
    """

    def __init__(self, tree: CodeTree):
        self.tree = tree
        self.table: CodeTable = convert(tree)
        self.freqs: dict = dict()

    @classmethod
    def from_text(cls, text: Iterable[Hashable]) -> "Huffman":
        """Строит кодек по тексту (частоты символов считаются по нему же)."""
        text = list(text)
        codec = cls(create_code_tree(text))
        codec.freqs = times(text)
        return codec

    def pack(self, text: Iterable[Hashable]) -> List[Bit]:
        bits = []
        for ch in text:
            bits += code_bits(self.table, ch)
        return bits

    def unpack(self, bits: Iterable[Bit]) -> List[Hashable]:
        return decode(self.tree, bits)
