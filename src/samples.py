"""Эталонные данные: дерево частот букв французского языка и зашифрованное слово.

    french_code - кодовое дерево на 26 букв (суммарный вес 1486387)
    secret      - 63 бита, закодированные этим деревом
"""

from CodeTree import Leaf, make_code_tree as fork
from Huffman import decode, encode

# =================================================================================================================

french_code = fork(
    fork(
        fork(
            Leaf('s', 121895),
            fork(
                Leaf('d', 56269),
                fork(
                    fork(fork(Leaf('x', 5928), Leaf('j', 8351)), Leaf('f', 16351)),
                    fork(
                        fork(
                            fork(
                                fork(Leaf('z', 2093), fork(Leaf('k', 745), Leaf('w', 1747))),
                                Leaf('y', 4725)),
                            Leaf('h', 11298)),
                        Leaf('q', 20889))))),
        fork(
            fork(Leaf('o', 82762), Leaf('l', 83668)),
            fork(fork(Leaf('m', 45521), Leaf('p', 46335)), Leaf('u', 96785)))),
    fork(
        fork(
            fork(
                Leaf('r', 100500),
                fork(Leaf('c', 50003), fork(Leaf('v', 24975), fork(Leaf('g', 13288), Leaf('b', 13822))))),
            fork(Leaf('n', 108812), Leaf('t', 111103))),
        fork(Leaf('e', 225947), fork(Leaf('i', 115465), Leaf('a', 117110)))))

secret = [0,0,1,1,1,0,1,0,1,1,1,0,0,1,1,0,1,0,0,1,1,0,1,0,1,1,0,0,1,1,1,1,
          1,0,1,0,1,1,0,0,0,0,1,0,1,1,1,0,0,1,0,0,1,0,0,0,1,0,0,0,1,0,1]

# =================================================================================================================

def decoded_secret() -> list:
    return decode(french_code, secret)

def encode_secret() -> list:
    """Кодирует расшифрованный секрет обратно; результат должен совпасть с secret."""
    return encode(french_code, decoded_secret())
