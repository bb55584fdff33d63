#!/usr/bin/env python3
"""idcode: encode and decode id codes from the command line.

Usage:
    idcode [options] <command> [args...]

Commands:
    encode <id...>      Print the code for each id
    decode <code...>    Print the id for each code
    check <code...>     Report valid/invalid per code (exit 1 if any invalid)
    info [<id>]         Resolved parameters and code lengths
    alphabet            Print the resolved alphabet (capture it when using --seed)

Ids and codes may be given as '-' to read them from stdin, one per line.

Environment:
    IDCODE_NUM_DIGITS     Tier 0 digit count (default: 6)
    IDCODE_BLOCK_DIGITS   Digits added per tier (default: 2)
    IDCODE_CHECK_DIGIT    Append a check symbol (default: yes)
    IDCODE_ALPHABET       Explicit 32-symbol alphabet
    IDCODE_SEED           Seed for a shuffled alphabet
"""

import argparse
import json
import logging
import os
import sys

from idcode.core.coder import CoderConfig, IdCoder
from idcode.core.errors import IdCodeError

log = logging.getLogger(__name__)

ENV_KEYS = {
    "num_digits": "IDCODE_NUM_DIGITS",
    "block_digits": "IDCODE_BLOCK_DIGITS",
    "check_digit": "IDCODE_CHECK_DIGIT",
    "alphabet": "IDCODE_ALPHABET",
    "seed": "IDCODE_SEED",
}


# ---- Configuration ----

def build_coder(args, environ=None) -> IdCoder:
    """Merge config file, environment and options (later wins)."""
    environ = os.environ if environ is None else environ
    settings = {}
    if args.config:
        with open(args.config, encoding="utf-8") as f:
            loaded = json.load(f)
        if not isinstance(loaded, dict):
            raise ValueError(f"Config file must hold a JSON object: {args.config}")
        settings.update(loaded)
    for key, var in ENV_KEYS.items():
        if environ.get(var):
            settings[key] = environ[var]
    for key in ENV_KEYS:
        value = getattr(args, key, None)
        if value is not None:
            settings[key] = value
    log.debug("Coder settings: %s", settings)
    return IdCoder(CoderConfig.from_mapping(settings))


def expand_stdin(items):
    """Replace '-' entries with the non-blank lines of stdin."""
    result = []
    for item in items:
        if item == "-":
            result.extend(line.strip() for line in sys.stdin if line.strip())
        else:
            result.append(item)
    return result


def parse_id(text: str) -> int:
    try:
        return int(text.replace("_", ""))
    except ValueError:
        raise IdCodeError(f"Not an integer id: {text!r}") from None


def emit(args, payload, lines):
    if args.json:
        print(json.dumps(payload, indent=2))
    else:
        for line in lines:
            print(line)


# ---- Commands ----

def cmd_encode(args, coder):
    ids = [parse_id(t) for t in expand_stdin(args.ids)]
    codes = [coder.encode(v) for v in ids]
    emit(args, [{"id": v, "code": c} for v, c in zip(ids, codes)], codes)
    return 0


def cmd_decode(args, coder):
    codes = expand_stdin(args.codes)
    ids = [coder.decode(c) for c in codes]
    emit(args, [{"code": c, "id": v} for c, v in zip(codes, ids)], [str(v) for v in ids])
    return 0


def cmd_check(args, coder):
    codes = expand_stdin(args.codes)
    results = [coder.is_valid(c) for c in codes]
    emit(
        args,
        [{"code": c, "valid": ok} for c, ok in zip(codes, results)],
        [f"{c}\t{'valid' if ok else 'invalid'}" for c, ok in zip(codes, results)],
    )
    return 0 if all(results) else 1


def cmd_info(args, coder):
    info = coder.parameters()
    info["code_length"] = coder.code_length
    info["num_valid_codes"] = coder.num_valid_codes
    if args.id is not None:
        value = parse_id(args.id)
        info["id"] = value
        info["code_length_for_id"] = coder.code_length_for(value)
    emit(args, info, [f"{k:<20} {v}" for k, v in info.items()])
    return 0


def cmd_alphabet(args, coder):
    emit(args, {"seed": coder.config.seed, "alphabet": coder.alphabet}, [coder.alphabet])
    return 0


# ---- Main ----

def make_parser():
    parser = argparse.ArgumentParser(
        prog="idcode",
        description="Human-friendly codes for integer ids",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument("--config", help="JSON file with coder parameters")
    parser.add_argument("--num-digits", dest="num_digits", type=int, help="Tier 0 digit count")
    parser.add_argument("--block-digits", dest="block_digits", type=int, help="Digits added per tier")
    parser.add_argument("--check-digit", dest="check_digit", action="store_true", default=None,
                        help="Append a check symbol")
    parser.add_argument("--no-check-digit", dest="check_digit", action="store_false",
                        help="Do not append a check symbol")
    parser.add_argument("--alphabet", help="Explicit 32-symbol alphabet")
    parser.add_argument("--seed", type=int, help="Derive the alphabet from this seed")
    parser.add_argument("--json", action="store_true", help="Machine-readable JSON output")
    parser.add_argument("--log-level", default="WARNING",
                        choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Logging level")

    sub = parser.add_subparsers(dest="command", required=True)

    p_encode = sub.add_parser("encode", help="Encode ids")
    p_encode.add_argument("ids", nargs="+", help="Integer ids ('-' for stdin)")

    p_decode = sub.add_parser("decode", help="Decode codes")
    p_decode.add_argument("codes", nargs="+", help="Codes ('-' for stdin)")

    p_check = sub.add_parser("check", help="Validate codes")
    p_check.add_argument("codes", nargs="+", help="Codes ('-' for stdin)")

    p_info = sub.add_parser("info", help="Show resolved parameters")
    p_info.add_argument("id", nargs="?", help="Also show the code length for this id")

    sub.add_parser("alphabet", help="Show the resolved alphabet")

    return parser


COMMANDS = {
    "encode": cmd_encode,
    "decode": cmd_decode,
    "check": cmd_check,
    "info": cmd_info,
    "alphabet": cmd_alphabet,
}


def main(argv=None):
    # ids are unbounded; lift the int <-> str digit limit for this process
    sys.set_int_max_str_digits(0)
    parser = make_parser()
    args = parser.parse_args(argv)
    logging.basicConfig(level=getattr(logging, args.log_level),
                        format="%(levelname)s %(name)s: %(message)s")

    try:
        coder = build_coder(args)
        return COMMANDS[args.command](args, coder)
    except (ValueError, OSError) as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
