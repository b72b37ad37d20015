"""Command line front end for inspecting and combining matrices."""

from __future__ import annotations

import argparse
from typing import List, Optional

import numpy as np
import pandas as pd

from .errors import MatrixError
from .interop import from_numpy
from .matrix import Matrix

DEFAULT_DELIMITER = ","


def load_matrix(path: str, delimiter: str = DEFAULT_DELIMITER) -> Matrix:
    return from_numpy(np.loadtxt(path, delimiter=delimiter, ndmin=2))


def render(matrix: Matrix) -> str:
    if matrix.num_rows == 0:
        return "(empty matrix)"
    return pd.DataFrame(matrix.get_data()).to_string()


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect and combine numeric matrices stored as delimited text.")
    parser.add_argument(
        "--delimiter",
        default=DEFAULT_DELIMITER,
        help=f"column separator used in input files (default: {DEFAULT_DELIMITER!r})",
    )
    commands = parser.add_subparsers(dest="command", required=True)

    show = commands.add_parser("show", help="print a matrix and its shape")
    show.add_argument("path")

    scale = commands.add_parser("scale", help="multiply every value by a factor")
    scale.add_argument("path")
    scale.add_argument("--factor", type=float, required=True)

    add = commands.add_parser("add", help="add two matrices of the same shape")
    add.add_argument("lhs")
    add.add_argument("rhs")

    zeros = commands.add_parser("zeros", help="print a zero-filled matrix")
    zeros.add_argument("--rows", type=int, required=True)
    zeros.add_argument("--cols", type=int, required=True)
    return parser


def run(args: argparse.Namespace) -> Matrix:
    if args.command == "show":
        return load_matrix(args.path, args.delimiter)
    if args.command == "scale":
        return load_matrix(args.path, args.delimiter).multiply(args.factor)
    if args.command == "add":
        lhs = load_matrix(args.lhs, args.delimiter)
        rhs = load_matrix(args.rhs, args.delimiter)
        return lhs.add_matrix(rhs)
    return Matrix.zeros(args.rows, args.cols)


def main(argv: Optional[List[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)
    try:
        result = run(args)
    except (MatrixError, OSError, ValueError) as exc:
        parser.error(str(exc))
    print(f"shape: {result.num_rows}x{result.num_cols}")
    print(render(result))
    return 0
