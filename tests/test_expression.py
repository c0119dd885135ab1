import threading

import pytest

from timealgebra import (
    Date,
    DateTime,
    Duration,
    ExpressionError,
    ExpressionEvaluator,
    ExpressionExecutionError,
    ExpressionSyntaxError,
    TemporalError,
    TemporalTypeError,
    TemporalValueError,
    Time,
    Timezone,
    dtexpr,
    hours,
)
from timealgebra import _expression
from timealgebra._expression import Placeholder, parse, shape_of


@pytest.fixture
def parse_calls(monkeypatch):
    calls = []

    def counting_parse(tokens):
        calls.append(tokens)
        return parse(tokens)

    monkeypatch.setattr(_expression, "parse", counting_parse)
    return calls


class TestArithmetic:

    def test_add_durations(self):
        a = Duration(hours=-1, minutes=2)
        b = Duration(minutes=4)
        assert dtexpr(a, " + ", b) == Duration(hours=-1, minutes=6)

    def test_compare_durations(self):
        a = Duration(minutes=4)
        b = Duration(hours=-1, minutes=2)
        assert dtexpr(a, " > ", b) is True
        assert dtexpr(a, " < ", b) is False

    @pytest.mark.parametrize(
        "op, expected",
        [("<", True), ("<=", True), ("==", False), ("!=", True),
         (">=", False), (">", False)],
    )
    def test_comparison_operators(self, op, expected):
        assert dtexpr(Date(2021, 1, 1), op, Date(2021, 1, 2)) is expected

    def test_negation(self):
        assert dtexpr("-", Duration(hours=1)) == Duration(hours=-1)
        assert dtexpr(" - ", Duration(hours=1), " - -", Duration(hours=2)) == (
            Duration(hours=1)
        )

    def test_parentheses(self):
        t = Time(12)
        assert dtexpr(
            t, " - (", Duration(hours=1), " + ", Duration(hours=2), ")"
        ) == Time(9)
        assert dtexpr("(", t, ")") == t

    def test_mixed_types(self):
        d = DateTime(2021, 1, 31, 23)
        assert dtexpr(d, " + ", Duration(hours=2)) == DateTime(2021, 2, 1, 1)
        assert dtexpr("(", d, " + ", Duration(hours=2), ") - ", d) == Duration(
            hours=2
        )
        assert dtexpr(
            Date(2021, 1, 2), " - ", Duration(days=1), " > ", Date(2020, 1, 1)
        )

    def test_comparison_has_lowest_precedence(self):
        a = Duration(hours=1)
        assert dtexpr(a, " + ", a, " == ", Duration(hours=2))
        assert dtexpr(Duration(hours=2), " == ", a, " + ", a)

    def test_additive_chain_is_right_associative(self):
        a = Duration(hours=10)
        b = Duration(hours=3)
        c = Duration(hours=2)
        # a - (b - c), not (a - b) - c
        assert dtexpr(a, " - ", b, " - ", c) == Duration(hours=9)

    def test_comparison_chain_is_right_associative(self):
        a = Duration(hours=1)
        # a == (a == a) compares a duration to a boolean
        with pytest.raises(ExpressionExecutionError) as excinfo:
            dtexpr(a, " == ", a, " == ", a)
        assert isinstance(excinfo.value.original_error, TemporalTypeError)

    def test_whitespace(self):
        a = Duration(hours=1)
        assert dtexpr("\t", a, "\n+\r\n ", a, "  ") == Duration(hours=2)
        assert dtexpr(a, "+", a) == Duration(hours=2)

    def test_adjacent_text_is_joined(self):
        a = Duration(hours=1)
        assert dtexpr(a, " <", "= ", a) is True
        assert dtexpr(a, "", " + ", "", a) == Duration(hours=2)


class TestSyntaxErrors:

    def test_text_only(self):
        with pytest.raises(ExpressionSyntaxError) as excinfo:
            dtexpr("hello")
        assert excinfo.value.pos == (0, 0)
        assert excinfo.value.message == "Unexpected token."

    def test_empty(self):
        with pytest.raises(ExpressionSyntaxError) as excinfo:
            dtexpr()
        assert excinfo.value.pos == (0, 0)

    def test_unclosed_parenthesis(self):
        with pytest.raises(ExpressionSyntaxError, match='Expected "\\)"') as excinfo:
            dtexpr(" (", Duration(hours=1), " + ", Duration(hours=1))
        assert excinfo.value.pos == (0, 1)

    def test_missing_operand(self):
        with pytest.raises(ExpressionSyntaxError) as excinfo:
            dtexpr(Duration(hours=1), " + ")
        assert excinfo.value.pos == (2, 0)

    def test_leftover_text(self):
        with pytest.raises(ExpressionSyntaxError) as excinfo:
            dtexpr(Duration(hours=1), " ) ")
        assert excinfo.value.pos == (1, 1)

    def test_adjacent_operands(self):
        with pytest.raises(ExpressionSyntaxError) as excinfo:
            dtexpr(Duration(hours=1), Duration(hours=1))
        assert excinfo.value.pos == (1, 0)

    def test_caret_rendering(self):
        with pytest.raises(ExpressionSyntaxError) as excinfo:
            dtexpr(Duration(hours=1), " + * ", Duration(hours=1))
        assert str(excinfo.value) == (
            "Unexpected token.\n"
            "{...} + * {...}\n"
            "        ^"
        )
        assert excinfo.value.column() == 8

    def test_errors_are_not_cached(self, parse_calls):
        evaluator = ExpressionEvaluator()
        for _ in range(2):
            with pytest.raises(ExpressionSyntaxError):
                evaluator.evaluate("nonsense")
        assert len(parse_calls) == 2
        assert evaluator.cache_size == 0


class TestExecutionErrors:

    def test_wraps_type_error(self):
        with pytest.raises(ExpressionExecutionError) as excinfo:
            dtexpr(Time(12), " == ", Date(2021, 1, 1))
        e = excinfo.value
        assert isinstance(e.original_error, TemporalTypeError)
        assert e.__cause__ is e.original_error
        assert e.pos == (1, 1)
        assert e.message == "Execution error in equal operator."
        assert str(e).startswith(
            "Execution error in equal operator.\n"
            "{...} == {...}\n"
            "      ^\n"
            "Original error: "
        )

    def test_wraps_value_error(self):
        with pytest.raises(ExpressionExecutionError) as excinfo:
            dtexpr(DateTime.max, " + ", Duration(days=1))
        assert isinstance(excinfo.value.original_error, TemporalValueError)
        assert excinfo.value.message == "Execution error in addition operator."

    def test_negation_error(self):
        with pytest.raises(ExpressionExecutionError) as excinfo:
            dtexpr("-", Date(2021, 1, 1))
        assert excinfo.value.pos == (0, 0)
        assert "negation" in excinfo.value.message

    def test_naive_and_aware(self):
        naive = DateTime(2021, 1, 1)
        aware = DateTime(2021, 1, 1, tzinfo=Timezone(hours(1)))
        with pytest.raises(ExpressionExecutionError) as excinfo:
            dtexpr(naive, " - ", aware)
        assert "naive" in str(excinfo.value.original_error)

    def test_position_of_inner_operator(self):
        a = Duration(hours=1)
        with pytest.raises(ExpressionExecutionError) as excinfo:
            dtexpr(a, " + (", a, " - ", Date(2021, 1, 1), ")")
        assert excinfo.value.pos == (3, 1)
        assert "subtraction" in excinfo.value.message

    def test_missing_operand_value(self):
        expression = parse([Placeholder(0), " + ", Placeholder(1)])
        with pytest.raises(ExpressionExecutionError) as excinfo:
            expression.evaluate([Duration()])
        assert excinfo.value.original_error is None
        assert excinfo.value.pos == (2, 0)

    def test_hierarchy(self):
        assert issubclass(ExpressionSyntaxError, ExpressionError)
        assert issubclass(ExpressionExecutionError, ExpressionError)
        assert issubclass(ExpressionError, TemporalError)


class TestCache:

    def test_same_shape_parsed_once(self, parse_calls):
        evaluator = ExpressionEvaluator()
        assert evaluator.evaluate(
            Duration(hours=1), " + ", Duration(hours=2)
        ) == Duration(hours=3)
        assert evaluator.evaluate(
            Duration(days=1), " + ", Duration(days=2)
        ) == Duration(days=3)
        assert evaluator.evaluate(Date(2021, 1, 1), " + ", Duration(days=2)) == (
            Date(2021, 1, 3)
        )
        assert len(parse_calls) == 1
        assert evaluator.cache_size == 1

    def test_different_text_is_different_shape(self, parse_calls):
        evaluator = ExpressionEvaluator()
        a = Duration(hours=1)
        evaluator.evaluate(a, " + ", a)
        evaluator.evaluate(a, "+", a)
        evaluator.evaluate(a, " + ", a, " + ", a)
        assert len(parse_calls) == 3
        assert evaluator.cache_size == 3

    def test_joined_text_shares_shape(self, parse_calls):
        evaluator = ExpressionEvaluator()
        a = Duration(hours=1)
        evaluator.evaluate(a, " <", "= ", a)
        evaluator.evaluate(a, " <= ", a)
        assert len(parse_calls) == 1

    def test_clear(self, parse_calls):
        evaluator = ExpressionEvaluator()
        a = Duration(hours=1)
        evaluator.evaluate(a, " + ", a)
        evaluator.clear_cache()
        assert evaluator.cache_size == 0
        evaluator.evaluate(a, " + ", a)
        assert len(parse_calls) == 2

    def test_default_evaluator(self, parse_calls):
        a = Duration(minutes=7)
        # a shape no other test uses
        tokens = (a, " +\t(-", a, ")\t+ ", a)
        assert dtexpr(*tokens) == Duration(minutes=7)
        assert dtexpr(*tokens) == Duration(minutes=7)
        assert len(parse_calls) <= 1

    def test_threads(self):
        evaluator = ExpressionEvaluator()
        results = []

        def work(i):
            results.append(
                evaluator.evaluate(Duration(seconds=i), " + ", Duration(seconds=1))
            )

        threads = [threading.Thread(target=work, args=(i,)) for i in range(20)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()
        assert sorted(results) == [Duration(seconds=i + 1) for i in range(20)]
        assert evaluator.cache_size == 1


def test_shape_of():
    a = Duration(hours=1)
    b = Date(2021, 1, 1)
    shape, values = shape_of(["", a, " + ", "", "(", b, ")", ""])
    assert shape == (Placeholder(0), " + (", Placeholder(1), ")")
    assert values == [a, b]


def test_parse_repr():
    assert repr(parse(["-", Placeholder(0), " + ", Placeholder(1)])) == (
        "Expression('-{...} + {...}')"
    )
