import argparse
import sys
from pathlib import Path

import polars as pl

from ordinals import dates, formatter, frame, suffix
from ordinals.config import ConfigError, load_settings


def print_ordinals(numbers: list[int], *, suffix_only: bool = False) -> None:
    """prints one ordinal (or suffix) per line"""
    for n in numbers:
        print(suffix.suffix(n) if suffix_only else formatter.to_ordinal_string(n))


def print_today(config: Path | None) -> None:
    """prints the current date with an ordinal day using the configured timezone and format"""
    settings = load_settings(config)
    print(dates.format_date(dates.today(settings.timezone), settings.date_format))


def ordinals_csv(file: Path, column: str, *, suffix_only: bool = False, output: Path | None = None) -> pl.DataFrame:
    """
    adds an ordinal column to a csv file, prints the result and optionally writes it

    args:
        file: path to the csv
        column: the integer column to convert
        suffix_only: add only the suffix
        output: optional path to write the new csv to

    returns:
        the DataFrame with the new column
    """
    df = frame.with_ordinals(pl.scan_csv(file), column, suffix_only=suffix_only).collect()
    print(df)
    if output is not None:
        df.write_csv(output)
        print(f'wrote {output}')
    return df


def main(argv: list[str] | None = None) -> None:
    parser = argparse.ArgumentParser(prog='ordinals', description='format numbers as ordinals (1st, 2nd, 3rd...)')
    parser.add_argument('numbers', nargs='*', type=int, help='integers to format')
    parser.add_argument('-s', '--suffix-only', action='store_true', help='print only the suffix')
    parser.add_argument('-t', '--today', action='store_true', help='print the current date with an ordinal day')
    parser.add_argument('-f', '--file', type=Path, help='csv file with an integer column to convert')
    parser.add_argument('-c', '--column', type=str, help='column of `--file` to convert')
    parser.add_argument('-o', '--output', type=Path, help='write the converted csv here')
    parser.add_argument('--config', type=Path, help='settings file (default: ORDINALS_CONFIG, then ordinals.toml)')
    args = parser.parse_args(argv)

    if args.file is not None and args.column is None:
        parser.error('--file requires --column')
    if not (args.numbers or args.today or args.file):
        parser.error('nothing to do, pass numbers, --today or --file')

    try:
        print_ordinals(args.numbers, suffix_only=args.suffix_only)
        if args.today:
            print_today(args.config)
        if args.file is not None:
            ordinals_csv(args.file, args.column, suffix_only=args.suffix_only, output=args.output)
    except (ConfigError, suffix.NotAnIntegerError, FileNotFoundError, pl.exceptions.ColumnNotFoundError, pl.exceptions.ComputeError) as e:
        sys.exit(str(e))


if __name__ == '__main__':
    main()
