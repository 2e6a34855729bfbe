
import argparse

from Huffman import *
from samples import french_code, secret, decoded_secret, encode_secret
from utils import *

# =================================================================================================================

def init() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Huffman code tree: encode / decode / code table"
    )
    sub = parser.add_subparsers(dest="cmd")

    # ------------------------------------------------------------
    # secret
    # ------------------------------------------------------------
    s = sub.add_parser("secret", help="Расшифровать эталонный секрет и закодировать его обратно")
    s.add_argument("--verbose", action="store_true")
    s.set_defaults(func=secret_mode)

    # ------------------------------------------------------------
    # encode
    # ------------------------------------------------------------
    e = sub.add_parser("encode", help="Построить дерево по тексту и закодировать его")
    e.add_argument("-t", "--text", required=True)
    e.add_argument("--table", action="store_true", help="Напечатать кодовую таблицу")
    e.add_argument("--stats", action="store_true")
    e.add_argument("--verbose", action="store_true")
    e.set_defaults(func=encode_mode)

    # ------------------------------------------------------------
    # decode
    # ------------------------------------------------------------
    d = sub.add_parser("decode", help="Раскодировать биты деревом, построенным по тексту")
    d.add_argument("-t", "--text", required=True, help="Текст, по которому строится дерево")
    d.add_argument("-b", "--bits", required=True, help="Биты, например 0110")
    d.add_argument("--verbose", action="store_true")
    d.set_defaults(func=decode_mode)

    # ------------------------------------------------------------
    # table
    # ------------------------------------------------------------
    t = sub.add_parser("table", help="Показать кодовую таблицу")
    t.add_argument("-t", "--text", default=None, help="По умолчанию - французское дерево")
    t.set_defaults(func=table_mode)

    return parser

# =================================================================================================================

def secret_mode(args):
    """Расшифровывает секрет и проверяет, что повторное кодирование даёт те же биты."""
    if args.verbose:
        print(f"[secret] bits ({len(secret)}): {bits_to_str(secret)}")

    word = "".join(decoded_secret())
    print("Decoded:", word)

    bits = encode_secret()
    print("Encoded:", bits_to_str(bits))
    print("Round-trip ok:", bits == secret)

def encode_mode(args):
    text = string_to_chars(args.text)
    codec = Huffman.from_text(text)
    if args.verbose:
        print(f"[encode] frequencies: {codec.freqs}")
        print(f"[encode] tree weight: {weight(codec.tree)}, symbols: {len(chars(codec.tree))}")

    bits = codec.pack(text)
    print(bits_to_str(bits))

    if args.table:
        print("\n=== Code table ===")
        for line in format_table(codec.table):
            print(line)

    if args.stats:
        packed, padding = bits_to_bytes(bits)
        print("\n=== Statistics ===")
        print(f"• input:   {len(text)} symbols, {len(args.text.encode('utf-8'))} bytes (utf-8)")
        print(f"• encoded: {len(bits)} bits -> {len(packed)} bytes (padding {padding} bits)")

def decode_mode(args):
    tree = create_code_tree(string_to_chars(args.text))
    bits = str_to_bits(args.bits)
    if args.verbose:
        print(f"[decode] {len(bits)} bits, tree weight {weight(tree)}")

    print("".join(decode(tree, bits)))

def table_mode(args):
    tree = french_code if args.text is None else create_code_tree(string_to_chars(args.text))
    for line in format_table(convert(tree)):
        print(line)
