# filename: huffman_cli.py
"""
Line-oriented driver for the Huffman codec.

Every line read is encoded, listed, decoded and reported with a few
diagnostics. An empty line or end of input ends the session.

Run with:
    string-compressor [--verbose] [--no-banner] < input.txt
"""
import argparse
import logging
import sys
import time

from huffman_errors import HuffmanError
from huffman_service import HuffmanService, format_leaves, pack_bits

logger = logging.getLogger(__name__)

BANNER = "=== HUFFMAN ENCODER ===\n"


def build_parser():
    parser = argparse.ArgumentParser(description="Huffman-encode and decode lines of text.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log codec internals at DEBUG level.")
    parser.add_argument("--banner", action=argparse.BooleanOptionalAction, default=True,
                        help="Print the header before reading input.")
    return parser


def report(service, text, out):
    """Encode and decode one line, printing the report to ``out``."""
    started = time.perf_counter()
    bits, tree = service.encode(text)
    elapsed = time.perf_counter() - started

    nodes = format_leaves(service.describe_leaves(tree))
    decoded = service.decode(bits, tree)

    print("Input\n-----", file=out)
    print(f"Nodes : {nodes}", file=out)
    print(f"Encode: {bits}", file=out)
    print(f"Decode: {decoded}", file=out)
    print("\n\nDiagnostics\n-----------", file=out)
    print(f"Length: {len(bits)}", file=out)
    print(f"Packed: {len(pack_bits(bits))} bytes", file=out)
    print(f"Speed: {elapsed * 1000:.4f}ms\n\n", file=out)


def main(argv=None, stdin=None, stdout=None):
    args = build_parser().parse_args(argv)
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout

    logging.basicConfig(format="%(levelname)s %(name)s: %(message)s")
    logging.getLogger().setLevel(logging.DEBUG if args.verbose else logging.WARNING)

    if args.banner:
        print(BANNER, file=stdout)

    service = HuffmanService()
    handled = 0
    for line in stdin:
        text = line.strip()
        if not text:
            break
        try:
            report(service, text, stdout)
        except HuffmanError as e:
            logger.debug("rejected input %r", text, exc_info=True)
            print(f"ERROR: Input was invalid ({e})", file=sys.stderr)
            continue
        handled += 1

    logger.debug("session finished after %d lines", handled)
    return 0


if __name__ == "__main__":
    sys.exit(main())
