import polars as pl
import pytest

from ordinals import formatter, frame, suffix


def test_with_ordinals() -> None:
    """test with_ordinals agrees with the scalar functions, nulls stay null"""
    values = [0, 1, 2, 3, 4, 11, 12, 13, 21, 22, 23, 31, 32, 33, 51, 93, 101, 111, 112, 131, 1003, -1, -3, -11, -21, -31, -112, None]
    df = frame.with_ordinals(pl.DataFrame({'n': values}), 'n')

    assert isinstance(df, pl.DataFrame)
    assert df.columns == ['n', 'n ordinal']
    assert df['n ordinal'].to_list() == [None if v is None else formatter.to_ordinal_string(v) for v in values]

    df = frame.with_ordinals(pl.DataFrame({'n': values}), 'n', suffix_only=True, alias='sfx')
    assert df.columns == ['n', 'sfx']
    assert df['sfx'].to_list() == [None if v is None else suffix.suffix(v) for v in values]


def test_with_ordinals_range() -> None:
    """column path matches the scalar path over a range of values"""
    values = list(range(-1_000, 1_001))
    df = pl.DataFrame({'n': values}).with_columns(frame.suffix_expr('n').alias('s'), frame.ordinal_expr(pl.col('n')).alias('o'))
    assert df['s'].to_list() == [suffix.suffix(v) for v in values]
    assert df['o'].to_list() == [formatter.to_ordinal_string(v) for v in values]


def test_with_ordinals_extremes() -> None:
    """integer dtype minimums and maximums do not overflow"""
    for dtype, bits in ((pl.Int8, 8), (pl.Int16, 16), (pl.Int32, 32), (pl.Int64, 64)):
        values = [-(2 ** (bits - 1)), 2 ** (bits - 1) - 1, -121, 0]
        df = frame.with_ordinals(pl.DataFrame({'n': pl.Series(values, dtype=dtype)}), 'n')
        assert df['n ordinal'].to_list() == [formatter.to_ordinal_string(v) for v in values]

    values = [0, 2**64 - 1, 2**64 - 9]
    df = frame.with_ordinals(pl.DataFrame({'n': pl.Series(values, dtype=pl.UInt64)}), 'n')
    assert df['n ordinal'].to_list() == ['0th', '18446744073709551615th', '18446744073709551607th']


def test_with_ordinals_lazy() -> None:
    """lazyframes stay lazy"""
    lf = frame.with_ordinals(pl.LazyFrame({'place': [1, 2, 3]}), 'place')
    assert isinstance(lf, pl.LazyFrame)
    assert lf.collect()['place ordinal'].to_list() == ['1st', '2nd', '3rd']


def test_with_ordinals_errors() -> None:
    """test with_ordinals raises for missing and non integer columns"""
    df = pl.DataFrame({'n': [1, 2], 'name': ['a', 'b'], 'f': [1.0, 2.0]})
    with pytest.raises(suffix.NotAnIntegerError, match=r'ordinals need an integer column'):
        frame.with_ordinals(df, 'name')
    with pytest.raises(suffix.NotAnIntegerError):
        frame.with_ordinals(df, 'f')
    with pytest.raises(pl.exceptions.ColumnNotFoundError):
        frame.with_ordinals(df, 'missing')


def test_with_ordinals_past_the_teens() -> None:
    """31-33, 51-53, 71-73 and 91-93 take st/nd/rd on both the column and scalar paths"""
    values = [31, 32, 33, 51, 52, 53, 71, 72, 73, 91, 92, 93, 131, -31]
    df = frame.with_ordinals(pl.DataFrame({'n': values}), 'n')
    expected = ['31st', '32nd', '33rd', '51st', '52nd', '53rd', '71st', '72nd', '73rd', '91st', '92nd', '93rd', '131st', '-31st']
    assert df['n ordinal'].to_list() == expected
    assert [formatter.to_ordinal_string(v) for v in values] == expected
