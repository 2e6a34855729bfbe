"""
CLI for the Huffman code tree.
Usage example:
  py src/main.py secret --verbose
  py src/main.py encode -t "huffman est cool" --table --stats
  py src/main.py decode -t "abracadabra" -b 0111
  py src/main.py table
"""

# =================================================================================================================

import sys

import cli

from errors import HuffmanError

# =================================================================================================================

def main() -> int:

    parser = cli.init()
    args = parser.parse_args()

    if not args.cmd:
        parser.print_help()
        return 0

    try:
        args.func(args)
    except (HuffmanError, ValueError) as e:
        print(f"[ERROR] {e}", file=sys.stderr)
        return 1
    return 0

# =================================================================================================================

if __name__ == "__main__":
    sys.exit(main())
