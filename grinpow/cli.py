# grinpow/cli.py
import argparse
import sys

from . import __version__
from .api import cycle_hash, scaled_diff, unscaled_diff, verify_code
from .config import apply_profile, get_settings
from .core.exceptions import GrinPowError
from .core.params import EdgeBits
from .utils.console import print_error, print_info, print_success, print_warn
from .utils.formatting import format_difficulty
from .utils.logger import setup_logging
from .utils.validation import parse_header, parse_solution

EXIT_OK = 0
EXIT_INVALID_PROOF = 1
EXIT_BAD_INPUT = 2


def _add_proof_args(parser):
    parser.add_argument('--edge-bits', type=int, required=True, choices=[int(b) for b in EdgeBits],
                        help='Graph size: 29 (cuckaroo) or 31 (cuckatoo)')
    parser.add_argument('--solution', required=True,
                        help='42 edge indices separated by commas or spaces')


def build_parser():
    parser = argparse.ArgumentParser(prog='grinpow', description="Cuckoo cycle proof verification and difficulty")
    parser.add_argument('--version', action='store_true', help='Show version')
    parser.add_argument('--log-level', default=None, help='Logging level (default from GRINPOW_LOG_LEVEL)')
    sub = parser.add_subparsers(dest='command')

    verify_p = sub.add_parser('verify', help='Verify a proof against a header')
    verify_p.add_argument('--header', required=True, help='Hex-encoded header')
    _add_proof_args(verify_p)

    diff_p = sub.add_parser('diff', help='Compute the difficulty of a proof')
    _add_proof_args(diff_p)
    diff_p.add_argument('--scale', type=int, default=None,
                        help='Scale constant (default 1, or GRINPOW_AR_SCALE)')
    diff_p.add_argument('--scaled', action='store_true',
                        help='Use the variant scale (cuckatoo31 always uses 7936)')

    hash_p = sub.add_parser('hash', help='Print the cycle hash of a proof')
    _add_proof_args(hash_p)
    return parser


def _run(args) -> int:
    if args.command == 'verify':
        code = verify_code(parse_header(args.header), parse_solution(args.solution), args.edge_bits)
        if code.ok:
            print_success(f"C{args.edge_bits} proof valid ({code.name})")
            return EXIT_OK
        print_warn(f"C{args.edge_bits} proof invalid ({code.name})")
        return EXIT_INVALID_PROOF

    if args.command == 'diff':
        solution = parse_solution(args.solution)
        scale = args.scale if args.scale is not None else get_settings().alt_scale
        if args.scaled:
            value = scaled_diff(args.edge_bits, solution, scale)
        else:
            value = unscaled_diff(args.edge_bits, solution, 1 if scale is None else scale)
        print_info(f"difficulty: {value!r} ({format_difficulty(value)})")
        return EXIT_OK

    if args.command == 'hash':
        print_info(cycle_hash(args.edge_bits, parse_solution(args.solution)).hex())
        return EXIT_OK

    return EXIT_BAD_INPUT


def main(argv=None):
    """Command line interface for grinpow"""
    apply_profile()
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.version:
        print(f"grinpow v{__version__}")
        return EXIT_OK
    if not args.command:
        parser.print_help()
        return EXIT_BAD_INPUT

    setup_logging(args.log_level)
    try:
        return _run(args)
    except (GrinPowError, ValueError, TypeError) as exc:
        print_error(f"Error: {exc}")
        return EXIT_BAD_INPUT


if __name__ == "__main__":
    sys.exit(main())
