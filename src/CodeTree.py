# CodeTree.py
"""
Кодовое дерево Хаффмана.

Дерево состоит из узлов двух видов:
    - Leaf: лист, хранит один символ алфавита и его вес (частоту в тексте);
    - Fork: ветвление, владеет левым и правым поддеревом и хранит
      список всех символов под собой (сначала левые, затем правые)
      и суммарный вес.

Узлы неизменяемы: после построения дерево не модифицируется.
"""
# =================================================================================================================

from __future__ import annotations
from dataclasses import dataclass
from typing import Hashable, Tuple, Union

# =================================================================================================================

@dataclass(frozen=True)
class Leaf:
    char: Hashable
    weight: int

    def __post_init__(self):
        if self.weight < 0:
            raise ValueError(f"Leaf weight must be >= 0, got {self.weight}")


@dataclass(frozen=True)
class Fork:
    left: "CodeTree"
    right: "CodeTree"
    chars: Tuple[Hashable, ...]
    weight: int

    def __post_init__(self):
        left_chars, right_chars = chars(self.left), chars(self.right)

        # лист каждого символа в дереве единственный
        shared = set(left_chars) & set(right_chars)
        if shared:
            raise ValueError(f"Fork children share symbols: {sorted(map(repr, shared))}")
        if tuple(self.chars) != left_chars + right_chars:
            raise ValueError(f"Fork chars {tuple(self.chars)!r} do not match children {left_chars + right_chars!r}")
        if self.weight != weight(self.left) + weight(self.right):
            raise ValueError(f"Fork weight {self.weight} != {weight(self.left)} + {weight(self.right)}")


CodeTree = Union[Leaf, Fork]

# =================================================================================================================

def weight(tree: CodeTree) -> int:
    """Вес дерева: частота символа для листа, сумма весов для ветвления."""
    return tree.weight

def chars(tree: CodeTree) -> Tuple[Hashable, ...]:
    """Символы, достижимые из узла, в порядке слева направо."""
    if isinstance(tree, Leaf):
        return (tree.char,)
    return tree.chars

def make_code_tree(left: CodeTree, right: CodeTree) -> Fork:
    """Объединяет два дерева в новое ветвление.

    Args:
        left (CodeTree): Левое поддерево (бит 0).
        right (CodeTree): Правое поддерево (бит 1).

    Returns:
        Fork: Узел с весом weight(left) + weight(right) и символами chars(left) + chars(right).
    """
    return Fork(left, right, chars(left) + chars(right), weight(left) + weight(right))
