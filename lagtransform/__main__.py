"""Run the Laguerre transform experiment from the command line.

Usage:
    python -m lagtransform [--beta B] [--sigma S] [-n N] [--output DIR]
"""
import argparse
import sys

from pathlib import Path

from .conf import config
from .io import format_tabulation, write_tabulation_csv, write_parameters_json
from .macros import run_experiment


def build_parser():
    parser = argparse.ArgumentParser(
        prog='lagtransform',
        description='Tabulate Laguerre functions and transform x^2 and the normal density.',
    )
    parser.add_argument('--beta', type=float, default=2., help='damping parameter')
    parser.add_argument('--sigma', type=float, default=4., help='scaling parameter')
    parser.add_argument('-n', type=int, default=5, help='order / number of coefficients')
    parser.add_argument('--max-t', type=float, default=10., help='end of the tabulated interval')
    parser.add_argument('--t-step', type=float, default=config.t_step, help='tabulation step')
    parser.add_argument('--points', type=int, default=config.points, help='quadrature sample count')
    parser.add_argument('-t', type=float, default=10., help='point for the inverse transform')
    parser.add_argument('-o', '--output', type=Path, default=None,
                        help='directory to write CSV and JSON files to')
    return parser


def export(experiment, args, output):
    """Write an experiment's tabulations and parameters under output."""
    output.mkdir(parents=True, exist_ok=True)
    write_tabulation_csv(output / 'laguerre.csv', experiment.tabulation, ('t', 'l'))
    write_tabulation_csv(output / 'optimal_t.csv', experiment.optimal.tabulation, ('n', 'l'))
    for name, result in experiment.transforms.items():
        write_tabulation_csv(output / f'{name}_function.csv', result.function, ('t', 'f'))
        write_tabulation_csv(output / f'{name}_transform.csv', result.coefficients, ('n', 'l'))
        write_tabulation_csv(output / f'{name}_inverse.csv', result.reconstruction, ('t', 'h'))
        write_parameters_json(output / f'{name}.json', name, args.n, args.max_t, args.t_step, args.points)


def main(argv=None):
    args = build_parser().parse_args(argv)
    experiment = run_experiment(beta=args.beta, sigma=args.sigma, n=args.n, max_t=args.max_t,
                                t_step=args.t_step, points=args.points, t=args.t)

    print('Laguerre function tabulation:\n')
    print(format_tabulation(experiment.tabulation, ('t', 'L(t)')))
    print(f'\nOptimal t: {experiment.optimal.t}\n')
    print(format_tabulation(experiment.optimal.tabulation, ('n', 'L(t)')))
    for name, result in experiment.transforms.items():
        print(f'\nTransform of {name}:\n')
        print(format_tabulation(result.coefficients, ('n', 'L_n')))
        print(f'\nInverse transform of {name} at t={args.t}: {result.inverse}')

    if args.output is not None:
        export(experiment, args, args.output)

    return 0


if __name__ == '__main__':
    sys.exit(main())
