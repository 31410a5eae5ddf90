"""Command-line entry point for the blackjack simulation."""

import argparse
import sys

from .constants import NUM_SHOES, OUT_DIR
from .rng import XorShift64Star, clock_seeded_rng
from .simulation import run_simulation


def _non_negative(text):
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"must not be negative: {text}")
    return value


def _build_parser():
    parser = argparse.ArgumentParser(
        prog="bjsim", description="Simulate basic-strategy blackjack shoes."
    )
    parser.add_argument("--out-dir", default=OUT_DIR, help="output directory")
    parser.add_argument(
        "--shoes", type=_non_negative, default=NUM_SHOES, help="number of shoes"
    )
    parser.add_argument("--seed", type=int, help="seed for the shuffle generator")
    return parser


def _report(played, total):
    print(f"Shoes jogados: {played}/{total}", flush=True)


def main(argv=None):
    """Run the simulation and report where the results were written."""
    args = _build_parser().parse_args(argv)
    rng = XorShift64Star(args.seed) if args.seed is not None else clock_seeded_rng()
    try:
        result = run_simulation(args.out_dir, args.shoes, rng, _report)
    except OSError as exc:
        print(f"bjsim: {exc}", file=sys.stderr)
        return 1
    print(f"Simulação completa. Resultados salvos em: {result.log_path}")
    print(f"Verificação de count salva em: {result.count_path}")
    return 0


if __name__ == "__main__":
    sys.exit(main())