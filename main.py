#!/usr/bin/env python3
"""
Color Mix Solver - Main Entry Point

A tool for finding the blend of available colors that best matches a target
color, using a genetic algorithm.
"""

import argparse
import json
import math
import sys


def run_solve(args):
    """Search for the blend closest to the target color."""
    from colormix_solver.colors.color import ColorSpace
    from colormix_solver.colors.codec import format_color
    from colormix_solver.evolution.algorithm import EvolutionConfig, optimize
    from colormix_solver.mixing.distance import MAX_DISTANCE

    space = ColorSpace.from_flag(args.cmyk)

    try:
        config = EvolutionConfig(
            population_size=args.population,
            generations=args.generations,
            seed=args.seed,
        )
        result = optimize(args.color, args.target, use_cmyk=args.cmyk,
                          config=config, verbose=args.verbose)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if args.json:
        print(json.dumps(result.to_dict(), indent=2))
        return 0

    print("=" * 60)
    print("  Color Mix Solver")
    print("=" * 60)
    print(f"Target: {format_color(args.target, space)}")
    print(f"Colors: {len(args.color)}")
    print(f"Space: {space.value.upper()}")
    print("=" * 60)
    share = result.distance / MAX_DISTANCE[space] * 100
    print(f"Result: {format_color(result.color, space)} "
          f"(distance {result.distance:.2f}, {share:.1f}% of max)")
    for color, percentage in zip(args.color, result.percentages):
        print(f"  {percentage:6.2f}%  {format_color(color, space)}")
    return 0


def run_mix(args):
    """Mix colors with explicit percentages."""
    from colormix_solver.colors.color import ColorSpace
    from colormix_solver.colors.codec import format_color
    from colormix_solver.mixing.mixer import mix

    space = ColorSpace.from_flag(args.cmyk)

    colors = []
    percentages = []
    for spec in args.color:
        parts = spec.split(':')
        if len(parts) != 2:
            print(f"Error: Invalid color spec '{spec}'. Format: #rrggbb:percentage")
            return 1
        try:
            percentage = float(parts[1])
        except ValueError:
            percentage = math.nan
        if not math.isfinite(percentage):
            print(f"Error: Invalid percentage in '{spec}'")
            return 1
        percentages.append(percentage)
        colors.append(parts[0].strip())

    try:
        mixed = mix(colors, percentages, space)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"Mixed: {mixed.to_hex()}")
    if space == ColorSpace.CMYK:
        print(f"CMYK: {format_color(mixed, space)}")
    return 0


def run_convert(args):
    """Show a hex color in RGB and CMYK form."""
    from colormix_solver.colors.codec import decode_hex, rgb_to_cmyk

    try:
        rgb = decode_hex(args.code)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    print(f"Hex: {rgb.to_hex()}")
    print(f"RGB: {rgb.r}, {rgb.g}, {rgb.b}")
    print(f"CMYK: {rgb_to_cmyk(rgb)}")
    return 0


def build_parser():
    parser = argparse.ArgumentParser(
        description="Color Mix Solver - Find the blend of colors closest to a target"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    # Solve command
    solve_parser = subparsers.add_parser("solve", help="Find the best blend for a target color")
    solve_parser.add_argument(
        "-c", "--color",
        action="append",
        default=[],
        help="Available color as #rrggbb (repeat for each color)"
    )
    solve_parser.add_argument(
        "-t", "--target",
        required=True,
        help="Target color as #rrggbb"
    )
    solve_parser.add_argument(
        "--cmyk",
        action="store_true",
        help="Mix and compare in CMYK instead of RGB"
    )
    solve_parser.add_argument(
        "-g", "--generations",
        type=int,
        default=100,
        help="Number of generations (default: 100)"
    )
    solve_parser.add_argument(
        "-p", "--population",
        type=int,
        default=100,
        help="Population size (default: 100)"
    )
    solve_parser.add_argument(
        "-s", "--seed",
        type=int,
        default=None,
        help="Random seed for a reproducible run"
    )
    solve_parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Print progress while evolving"
    )
    solve_parser.add_argument(
        "--json",
        action="store_true",
        help="Print the result as JSON"
    )

    # Mix command
    mix_parser = subparsers.add_parser("mix", help="Mix colors with given percentages")
    mix_parser.add_argument(
        "-c", "--color",
        action="append",
        required=True,
        help="Color and percentage: #rrggbb:percentage (e.g., #ff0000:50)"
    )
    mix_parser.add_argument(
        "--cmyk",
        action="store_true",
        help="Mix in CMYK instead of RGB"
    )

    # Convert command
    convert_parser = subparsers.add_parser("convert", help="Show a color in RGB and CMYK")
    convert_parser.add_argument("code", help="Color as #rrggbb")

    return parser


def main(argv=None):
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.command == "solve":
        return run_solve(args)
    elif args.command == "mix":
        return run_mix(args)
    elif args.command == "convert":
        return run_convert(args)

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
