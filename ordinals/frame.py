import polars as pl

from ordinals.constants import ND, RD, ST, TEEN_HIGH, TEEN_LOW, TH
from ordinals.suffix import NotAnIntegerError


def _last_two_digits(expr: pl.Expr) -> pl.Expr:
    """
    |x| mod 100 read off the decimal text, so Int8..Int64 minimums never go through an overflowing negation

    args:
        expr: an integer expression

    returns:
        a UInt8 expression in [0, 99]
    """
    return (
        expr
        .cast(pl.String)
        .str.strip_chars_start('-')
        .str.slice(-2)
        .cast(pl.UInt8)
    )


def suffix_expr(expr: pl.Expr | str) -> pl.Expr:
    """
    ordinal suffix per row of an integer column, nulls stay null

    args:
        expr: an integer expression or a column name

    returns:
        a String expression of 'st', 'nd', 'rd' or 'th'
    """
    if isinstance(expr, str):
        expr = pl.col(expr)
    n = _last_two_digits(expr)
    return (
        pl.when(expr.is_null()).then(pl.lit(None, dtype=pl.String))
        .when(n.is_between(TEEN_LOW, TEEN_HIGH)).then(pl.lit(TH))
        .when(n % 10 == 1).then(pl.lit(ST))
        .when(n % 10 == 2).then(pl.lit(ND))  # noqa: PLR2004 | last digit, not magic
        .when(n % 10 == 3).then(pl.lit(RD))  # noqa: PLR2004 | last digit, not magic
        .otherwise(pl.lit(TH))
    )


def ordinal_expr(expr: pl.Expr | str) -> pl.Expr:
    """
    ordinal string per row of an integer column (eg 21 to '21st'), nulls stay null

    args:
        expr: an integer expression or a column name

    returns:
        a String expression
    """
    if isinstance(expr, str):
        expr = pl.col(expr)
    return pl.concat_str([expr.cast(pl.String), suffix_expr(expr)])


def with_ordinals[F: (pl.DataFrame, pl.LazyFrame)](frame: F, column: str, *, alias: str | None = None, suffix_only: bool = False) -> F:
    """
    adds an ordinal (or suffix) column for `column` to a dataframe or lazyframe

    args:
        frame: the DataFrame or LazyFrame
        column: name of the integer column to convert
        alias: name of the new column, defaults to '<column> ordinal' or '<column> suffix'
        suffix_only: add only the suffix instead of the full ordinal

    raises:
        NotAnIntegerError: when `column` is not an integer column
        ColumnNotFoundError: when `column` is not in the frame

    returns:
        the same kind of frame with the new column appended
    """
    schema = frame.collect_schema()
    if column not in schema:
        msg = f'`{column}` not found in {schema.names()}'
        raise pl.exceptions.ColumnNotFoundError(msg)
    dtype = schema[column]
    if not dtype.is_integer():
        msg = f'`{column}` has dtype {dtype}, ordinals need an integer column'
        raise NotAnIntegerError(msg)

    if suffix_only:
        return frame.with_columns(suffix_expr(column).alias(alias or f'{column} suffix'))
    return frame.with_columns(ordinal_expr(column).alias(alias or f'{column} ordinal'))
