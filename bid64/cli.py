"""bid64 CLI — inspect and compute with decimal64 bit patterns."""

from __future__ import annotations

import logging
import sys

from . import api
from .codec import is_large_form, unpack
from .wire import d64_to_display

USAGE: str = """\
bid64 [OPTIONS] COMMAND ARGS...

Inspect and compute with decimal64 (BID) values.

Commands:
  parse TEXT            Parse a decimal literal
  format BITS           Canonical text of a bit pattern
  display BITS          Plain positional text of a bit pattern
  encode SIGN COEF EXP  Pack a (sign, coefficient, exponent) triple
  decode BITS           Unpack a bit pattern
  add A B               Sum of two decimal literals
  sub A B               Difference of two decimal literals
  mul A B               Product of two decimal literals
  div A B               Quotient of two decimal literals
  from-double FLOAT     Convert a binary64 value
  to-double BITS        Convert to binary64

BITS is a 0x-prefixed hex or a decimal integer.

Options:
  --int              Print bit patterns as decimal integers (default: hex)
  --verbose          Log overflow, division by zero and skipped input
  --help             Show this help message
"""

ARITY: dict[str, int] = {
    "parse": 1,
    "format": 1,
    "display": 1,
    "encode": 3,
    "decode": 1,
    "add": 2,
    "sub": 2,
    "mul": 2,
    "div": 2,
    "from-double": 1,
    "to-double": 1,
}

BINARY_OPS = {
    "add": api.add,
    "sub": api.sub,
    "mul": api.mul,
    "div": api.div,
}


def parse_bits(arg: str) -> int:
    try:
        value = int(arg, 0)
    except ValueError:
        raise ValueError("invalid bit pattern '" + arg + "'") from None
    return api.check_bits(value)


def format_bits(bits: int, as_int: bool) -> str:
    if as_int:
        return str(bits)
    return f"{bits:#018x}"


def describe(bits: int, as_int: bool) -> str:
    """Bit pattern followed by its canonical text."""
    return format_bits(bits, as_int) + " " + api.to_string(bits).value


def run_command(command: str, operands: list[str], as_int: bool) -> str:
    if command == "parse":
        return describe(api.from_string(operands[0]).value, as_int)
    if command == "format":
        return api.to_string(parse_bits(operands[0])).value
    if command == "display":
        return d64_to_display(parse_bits(operands[0]))
    if command == "encode":
        sign, coef, exp = (int(x) for x in operands)
        return describe(api.encode(sign, coef, exp), as_int)
    if command == "decode":
        bits = parse_bits(operands[0])
        u = unpack(bits)
        if not u.is_finite():
            return u.kind + " sign=" + str(u.sign)
        form = "large" if is_large_form(bits) else "standard"
        return f"sign={u.sign} coef={u.coef} exp={u.exp} form={form}"
    if command in BINARY_OPS:
        a = api.from_string(operands[0]).value
        b = api.from_string(operands[1]).value
        return describe(BINARY_OPS[command](a, b).value, as_int)
    if command == "from-double":
        return describe(api.from_double(float(operands[0])).value, as_int)
    # to-double
    return repr(api.to_double(parse_bits(operands[0])).value)


def main(argv: list[str] | None = None) -> int:
    args = argv if argv is not None else sys.argv[1:]
    as_int = False
    verbose = False
    command: str = ""
    operands: list[str] = []
    i = 0
    while i < len(args):
        arg = args[i]
        if command == "" and (arg == "--help" or arg == "-h"):
            print(USAGE, end="")
            return 0
        elif command == "" and arg == "--int":
            as_int = True
        elif command == "" and arg == "--verbose":
            verbose = True
        elif command == "" and arg.startswith("-"):
            print("bid64: unknown flag '" + arg + "'", file=sys.stderr)
            return 2
        elif command == "":
            if arg not in ARITY:
                print("bid64: unknown command '" + arg + "'", file=sys.stderr)
                return 2
            command = arg
        else:
            operands.append(arg)
        i += 1
    if command == "":
        print("bid64: missing command", file=sys.stderr)
        return 2
    if len(operands) != ARITY[command]:
        print(
            "bid64: "
            + command
            + " expects "
            + str(ARITY[command])
            + " argument(s), got "
            + str(len(operands)),
            file=sys.stderr,
        )
        return 2
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
        )
    try:
        output = run_command(command, operands, as_int)
    except ValueError as e:
        print("bid64: error: " + str(e), file=sys.stderr)
        return 1
    print(output)
    return 0


if __name__ == "__main__":
    sys.exit(main())
