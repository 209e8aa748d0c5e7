#!/usr/bin/env python3
# coding: utf-8

import argparse
import logging
import math
import sys

from .series import approximate_e, approximate_one, exp_partial_sums, geometric_partial_sums


def save_plot(path, terms, steps):
    import matplotlib
    matplotlib.use('Agg')
    import matplotlib.pyplot as plt
    from .plotting import plot_convergence

    fig, (ax_e, ax_one) = plt.subplots(1, 2, figsize=(12, 5))
    plot_convergence(exp_partial_sums(terms), limit=math.e, ax=ax_e, label='sum 1/k!')
    plot_convergence(geometric_partial_sums(steps), limit=1, ax=ax_one, label='sum 1/2^k')
    fig.savefig(path)
    plt.close(fig)
    logging.info('convergence plot saved to %s', path)


def main(argv=None):
    argparser = argparse.ArgumentParser(description='Series approximations with exact rationals.')
    argparser.add_argument('--terms', type=int, default=11, help='terms of the power series of e')
    argparser.add_argument('--steps', type=int, default=19, help='halving steps towards 1')
    argparser.add_argument('--plot', metavar='PATH', help='save convergence plot to PATH')
    argparser.add_argument('-v', '--verbose', action='store_true')
    args = argparser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        stream=sys.stderr,
        format='%(asctime)s %(levelname)s %(message)s',
    )

    print("Approximation of Euler's constant via power series.")
    approx_e = approximate_e(args.terms)
    print('\te ≈ {} ≈ {}'.format(approx_e, approx_e.value()))

    print("Exploration of Zeno's paradox approaching 1.")
    zeno = approximate_one(args.steps)
    print('\t1 ≈ {} ≈ {}'.format(zeno, zeno.value()))

    if args.plot:
        save_plot(args.plot, args.terms, args.steps)
    return 0


if __name__ == "__main__":
    sys.exit(main())
