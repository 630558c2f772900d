"""Command-line interface for mil1750a."""

from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import yaml

from mil1750a.config import load_config
from mil1750a.convert import decode, encode
from mil1750a.inspector import WordFields, WordInspector
from mil1750a.words import dtype_size, words_from_buffer


def _dtype(width: int) -> str:
    return f"m1750a_{width}"


def _parse_word(text: str) -> int:
    """Parse a hex word, with or without a ``0x`` prefix."""
    try:
        return int(text.replace("_", ""), 16)
    except ValueError:
        raise ValueError(f"Not a hex word: {text!r}") from None


def _hex(word: int, width: int) -> str:
    return f"0x{word:0{width // 4}X}"


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="mil1750a",
        description="Convert between native floats and MIL-STD-1750A floating-point words.",
    )
    sub = parser.add_subparsers(dest="command")

    width_kw = dict(type=int, choices=(16, 32, 48), default=32,
                    help="Word width in bits (default: 32)")

    # --- encode ---
    enc_p = sub.add_parser("encode", help="Encode floats as 1750A words")
    enc_p.add_argument("values", nargs="+", type=float, metavar="VALUE")
    enc_p.add_argument("-w", "--width", **width_kw)
    enc_p.add_argument("--json", dest="output_json", action="store_true")

    # --- decode ---
    dec_p = sub.add_parser("decode", help="Decode hex 1750A words to floats")
    dec_p.add_argument("words", nargs="+", metavar="WORD")
    dec_p.add_argument("-w", "--width", **width_kw)
    dec_p.add_argument("--json", dest="output_json", action="store_true")

    # --- inspect ---
    ins_p = sub.add_parser("inspect", help="Show the bit fields of a 1750A word")
    ins_p.add_argument("word", metavar="WORD")
    ins_p.add_argument("-w", "--width", **width_kw)
    ins_p.add_argument("-c", "--config", default=None,
                       help="Path to a YAML word layout config file")
    ins_p.add_argument("--json", dest="output_json", action="store_true")

    # --- dump ---
    dump_p = sub.add_parser("dump", help="Decode a binary file of packed 1750A words")
    dump_p.add_argument("file", help="File to decode")
    dump_p.add_argument("-w", "--width", **width_kw)
    dump_p.add_argument("--endian", choices=("big", "little", "middle"), default="big",
                        help="Byte order of the file (default: big)")
    dump_p.add_argument("--offset", type=int, default=0,
                        help="Byte offset of the first word")
    dump_p.add_argument("--count", type=int, default=None,
                        help="Maximum number of words to decode")
    dump_p.add_argument("--json", dest="output_json", action="store_true")

    return parser


def _fields_to_dict(result: WordFields) -> dict:
    """Convert a WordFields to a JSON-serialisable dict."""
    return {
        "dtype": result.dtype,
        "word": _hex(result.word, result.bits),
        "fields": result.fields,
        "value": result.value,
    }


def cmd_encode(args) -> int:
    """Execute the ``encode`` subcommand."""
    words = [encode(v, args.width) for v in args.values]
    if args.output_json:
        print(json.dumps([{"value": v, "word": _hex(w, args.width)}
                          for v, w in zip(args.values, words)], indent=2))
    else:
        for w in words:
            print(_hex(w, args.width))
    return 0


def cmd_decode(args) -> int:
    """Execute the ``decode`` subcommand."""
    words = [_parse_word(t) for t in args.words]
    values = [decode(w, args.width) for w in words]
    if args.output_json:
        print(json.dumps([{"word": _hex(w, args.width), "value": v}
                          for w, v in zip(words, values)], indent=2))
    else:
        for v in values:
            print(repr(v))
    return 0


def cmd_inspect(args) -> int:
    """Execute the ``inspect`` subcommand."""
    inspector = WordInspector(load_config(args.config))
    cfg = inspector.format_for(_dtype(args.width))
    result = inspector.inspect(_parse_word(args.word), cfg.dtype)

    if args.output_json:
        print(json.dumps(_fields_to_dict(result), indent=2))
        return 0

    print(f"Format: {cfg.name}")
    print(f"Word:   {_hex(result.word, result.bits)}")
    for fdef in cfg.fields:
        raw = (result.word & fdef.mask) >> fdef.lsb
        bits = f"{raw:0{fdef.width}b}"
        print(f"  {fdef.name:<12} [{fdef.msb:>2}:{fdef.lsb:<2}] {bits:>24}  "
              f"{result.fields[fdef.name]}")
    print(f"Value:  {result.value!r}")
    return 0


def cmd_dump(args) -> int:
    """Execute the ``dump`` subcommand."""
    dtype = _dtype(args.width)
    size = dtype_size(dtype)
    if args.offset < 0:
        raise ValueError(f"--offset must be non-negative, got {args.offset}")
    if args.count is not None and args.count < 0:
        raise ValueError(f"--count must be non-negative, got {args.count}")
    data = Path(args.file).read_bytes()[args.offset:]
    usable = len(data) - len(data) % size
    if args.count is not None:
        usable = min(usable, args.count * size)
    data = data[:usable]

    words = words_from_buffer(data, dtype, args.endian)
    values = [decode(w, args.width) for w in words]

    if args.output_json:
        print(json.dumps([{"offset": args.offset + i * size,
                           "word": _hex(w, args.width),
                           "value": v}
                          for i, (w, v) in enumerate(zip(words, values))], indent=2))
    else:
        for i, (w, v) in enumerate(zip(words, values)):
            print(f"{args.offset + i * size:08X}  {_hex(w, args.width)}  {v!r}")
    return 0


def main(argv: list[str] | None = None) -> int:
    """Entry point for the CLI."""
    parser = _build_parser()
    args = parser.parse_args(argv)

    if args.command is None:
        parser.print_help()
        return 0

    dispatch = {
        "encode": cmd_encode,
        "decode": cmd_decode,
        "inspect": cmd_inspect,
        "dump": cmd_dump,
    }
    handler = dispatch.get(args.command)
    if handler is None:
        parser.print_help()
        return 1
    try:
        return handler(args)
    except (ValueError, TypeError, KeyError, OSError, yaml.YAMLError) as exc:
        print(f"Error: {exc}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
