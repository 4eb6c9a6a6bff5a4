"""Unit tests for the path data interpreter."""

import pytest

from svgmesh.core.parser import make_command, parse_path_data
from svgmesh.domain import (
    AbsoluteCurve,
    AbsoluteHorizontal,
    AbsoluteLine,
    AbsoluteMove,
    AbsoluteVertical,
    Close,
    CommandCode,
    Point,
    RelativeCurve,
    RelativeHorizontal,
    RelativeLine,
    RelativeMove,
    RelativeVertical,
)
from svgmesh.exceptions import (
    DoubleDecimalPointError,
    GrammarError,
    InvalidArgumentsError,
    MalformedNumberError,
    TrailingDataError,
    UnknownCommandError,
    UnterminatedPathError,
)


class TestMakeCommand:
    """Tests for make_command."""

    @pytest.mark.parametrize(
        ("code", "args", "expected"),
        [
            (CommandCode.ABSOLUTE_MOVE, [1, 2], AbsoluteMove(Point(1, 2))),
            (CommandCode.RELATIVE_MOVE, [1, 2], RelativeMove(Point(1, 2))),
            (CommandCode.ABSOLUTE_LINE, [1, 2], AbsoluteLine(Point(1, 2))),
            (CommandCode.RELATIVE_LINE, [1, 2], RelativeLine(Point(1, 2))),
            (CommandCode.ABSOLUTE_HORIZONTAL, [3], AbsoluteHorizontal(3)),
            (CommandCode.RELATIVE_HORIZONTAL, [3], RelativeHorizontal(3)),
            (CommandCode.ABSOLUTE_VERTICAL, [4], AbsoluteVertical(4)),
            (CommandCode.RELATIVE_VERTICAL, [4], RelativeVertical(4)),
            (
                CommandCode.ABSOLUTE_CURVE,
                [1, 2, 3, 4, 5, 6],
                AbsoluteCurve(Point(1, 2), Point(3, 4), Point(5, 6)),
            ),
            (
                CommandCode.RELATIVE_CURVE,
                [1, 2, 3, 4, 5, 6],
                RelativeCurve(Point(1, 2), Point(3, 4), Point(5, 6)),
            ),
            (CommandCode.ABSOLUTE_CLOSE, [], Close()),
            (CommandCode.RELATIVE_CLOSE, [], Close()),
        ],
    )
    def test_variants(self, code, args, expected):
        assert make_command(code, args) == expected

    @pytest.mark.parametrize(
        ("code", "args"),
        [
            (CommandCode.ABSOLUTE_LINE, [1.0]),
            (CommandCode.ABSOLUTE_HORIZONTAL, [1.0, 2.0]),
            (CommandCode.RELATIVE_CURVE, [1.0] * 5),
            (CommandCode.ABSOLUTE_CLOSE, [1.0]),
        ],
    )
    def test_arity_mismatch(self, code, args):
        with pytest.raises(InvalidArgumentsError) as exc_info:
            make_command(code, args)
        assert exc_info.value.expected == code.arity
        assert exc_info.value.got == len(args)


class TestParsePathData:
    """Tests for parse_path_data."""

    def test_absolute_square(self):
        commands = parse_path_data("M0 0 L10 0 L10 10 L0 10 Z")
        assert commands == [
            AbsoluteMove(Point(0, 0)),
            AbsoluteLine(Point(10, 0)),
            AbsoluteLine(Point(10, 10)),
            AbsoluteLine(Point(0, 10)),
            Close(),
        ]

    def test_commas_and_spaces(self):
        commands = parse_path_data("M 1,2 c 1,1 2,2 3,3 z")
        assert commands == [
            AbsoluteMove(Point(1, 2)),
            RelativeCurve(Point(1, 1), Point(2, 2), Point(3, 3)),
            Close(),
        ]

    def test_non_breaking_spaces(self):
        commands = parse_path_data("M\u00a01\u00a02\u00a0L3,4\u00a0Z")
        assert commands == [AbsoluteMove(Point(1, 2)), AbsoluteLine(Point(3, 4)), Close()]

    def test_compact_encoding(self):
        commands = parse_path_data("M1-2L3-4h5v-6Z")
        assert commands == [
            AbsoluteMove(Point(1, -2)),
            AbsoluteLine(Point(3, -4)),
            RelativeHorizontal(5),
            RelativeVertical(-6),
            Close(),
        ]

    def test_every_command(self):
        commands = parse_path_data("m1 1 l1 0 H4 V4 h-1 v-1 C0 0 1 1 2 2 c1 1 1 1 1 1 L0 0 z")
        assert [type(c) for c in commands] == [
            RelativeMove,
            RelativeLine,
            AbsoluteHorizontal,
            AbsoluteVertical,
            RelativeHorizontal,
            RelativeVertical,
            AbsoluteCurve,
            RelativeCurve,
            AbsoluteLine,
            Close,
        ]

    def test_leading_and_trailing_separators(self):
        assert parse_path_data("  M0 0 L1 0 L0 1 Z \n") == [
            AbsoluteMove(Point(0, 0)),
            AbsoluteLine(Point(1, 0)),
            AbsoluteLine(Point(0, 1)),
            Close(),
        ]

    @pytest.mark.parametrize("text", ["", "   ", "M0 0 L1 1", "M0 0 L1 1 "])
    def test_unterminated(self, text):
        with pytest.raises(UnterminatedPathError):
            parse_path_data(text)

    def test_unknown_command(self):
        with pytest.raises(UnknownCommandError) as exc_info:
            parse_path_data("M0 0 Q1 1 2 2 Z")
        assert exc_info.value.char == "Q"
        assert exc_info.value.position == 5

    def test_implicit_repeat_is_rejected(self):
        """Extra coordinates without a command letter are not supported."""
        with pytest.raises(UnknownCommandError):
            parse_path_data("M0 0 10 10 Z")

    def test_double_decimal_point_aborts(self):
        with pytest.raises(DoubleDecimalPointError):
            parse_path_data("M1.2.3 0 L1 1 Z")

    def test_missing_argument(self):
        with pytest.raises(MalformedNumberError):
            parse_path_data("M0 L1 1 Z")

    def test_argument_cut_by_end(self):
        with pytest.raises(MalformedNumberError):
            parse_path_data("M0 0 C1 1 2 2")

    def test_trailing_data(self):
        with pytest.raises(TrailingDataError) as exc_info:
            parse_path_data("M0 0 L1 0 L0 1 Z M5 5 L6 5 L5 6 Z")
        assert exc_info.value.trailing.startswith("M5")

    def test_grammar_errors_share_base(self):
        for error in (UnknownCommandError, UnterminatedPathError, TrailingDataError,
                      InvalidArgumentsError):
            assert issubclass(error, GrammarError)
