"""Tests for goldsearch.core.problem — parameters, bracketing, find_minimum."""

from __future__ import annotations

import logging
import math

import pytest

from goldsearch.core.errors import IterationLimitReached, NoMinimumBracketed
from goldsearch.core.functions import SIN, SQUARE
from goldsearch.core.problem import Problem


# ── Parameters ──


class TestDefaults:
    def test_values(self, problem):
        assert problem.left == -1.0
        assert problem.right == 1.0
        assert problem.precision == 5
        assert problem.epsilon == pytest.approx(1e-5)
        assert problem.iterations == 0
        assert problem.minimum is None


class TestBounds:
    def test_ordered(self, problem):
        problem.set_bounds(-2.0, 3.0)
        assert (problem.left, problem.right) == (-2.0, 3.0)

    def test_reversed_is_normalized(self, problem):
        problem.set_bounds(5, -5)
        assert problem.left == -5
        assert problem.right == 5

    def test_degenerate_accepted(self, problem):
        problem.set_bounds(2.0, 2.0)
        assert problem.left == problem.right == 2.0

    def test_constructor_normalizes(self):
        p = Problem(left=3.0, right=1.0)
        assert (p.left, p.right) == (1.0, 3.0)

    def test_read_only(self, problem):
        with pytest.raises(AttributeError):
            problem.epsilon = 0.1


class TestPrecision:
    @pytest.mark.parametrize("p", list(range(-3, 16)))
    def test_epsilon_follows_precision(self, problem, p):
        problem.set_precision(p)
        assert problem.precision == p
        assert problem.epsilon == pytest.approx(float(f"1e{-p}"))

    def test_recomputed_on_change(self, problem):
        problem.set_precision(2)
        problem.set_precision(8)
        assert problem.epsilon == pytest.approx(1e-8)


# ── Bracketing ──


class TestBracketing:
    def test_square_symmetric(self, problem):
        assert problem.has_bracketed_minimum(SQUARE) is True

    def test_square_one_sided(self, problem):
        problem.set_bounds(1.0, 2.0)
        assert problem.has_bracketed_minimum(SQUARE) is False

    def test_sin_brackets_on_4_5(self, problem):
        problem.set_bounds(4.0, 5.0)
        assert problem.has_bracketed_minimum(SIN) is True

    def test_sin_not_bracketed_on_3_4(self, problem):
        problem.set_bounds(3.0, 4.0)
        assert problem.has_bracketed_minimum(SIN) is False

    def test_maximum_not_bracketed(self, problem):
        problem.set_bounds(1.0, 2.0)
        assert problem.has_bracketed_minimum(SIN) is False


# ── Search ──


class TestFindMinimum:
    def test_square(self, problem):
        x = problem.find_minimum(SQUARE)
        assert x == pytest.approx(0.0, abs=1e-5)
        assert problem.minimum == x
        assert 0 < problem.iterations < 10000

    def test_sin(self, problem):
        problem.set_bounds(4.0, 5.0)
        problem.find_minimum(SIN)
        assert problem.minimum == pytest.approx(3 * math.pi / 2, abs=1e-5)

    def test_sin_3_4_rejected(self, problem):
        problem.set_bounds(3.0, 4.0)
        with pytest.raises(NoMinimumBracketed):
            problem.find_minimum(SIN)

    def test_tighter_precision(self, problem):
        problem.set_bounds(4.0, 5.0)
        problem.set_precision(7)
        problem.find_minimum(SIN)
        assert problem.minimum == pytest.approx(3 * math.pi / 2, abs=1e-6)

    def test_more_precision_more_iterations(self, problem):
        problem.find_minimum(SQUARE)
        coarse = problem.iterations
        problem.set_precision(9)
        problem.find_minimum(SQUARE)
        assert problem.iterations > coarse

    def test_negative_precision_coarse_search(self, problem):
        problem.set_precision(-1)
        problem.find_minimum(SQUARE)
        assert problem.iterations == 1

    def test_idempotent(self, problem):
        problem.set_bounds(4.0, 5.0)
        first = problem.find_minimum(SIN)
        first_iters = problem.iterations
        second = problem.find_minimum(SIN)
        assert second == pytest.approx(first, abs=problem.epsilon)
        assert problem.iterations == first_iters

    def test_minimum_inside_interval(self, problem):
        problem.set_bounds(-0.3, 2.0)
        x = problem.find_minimum(SQUARE)
        assert problem.left <= x <= problem.right


class TestFailuresDoNotCommit:
    def test_unbracketed_before_any_search(self, problem):
        problem.set_bounds(1.0, 2.0)
        with pytest.raises(NoMinimumBracketed) as exc:
            problem.find_minimum(SQUARE)
        assert exc.value.d_left > 0
        assert exc.value.d_right > 0
        assert problem.iterations == 0
        assert problem.minimum is None

    def test_unbracketed_keeps_previous_result(self, problem):
        problem.find_minimum(SQUARE)
        iters, x = problem.iterations, problem.minimum
        problem.set_bounds(1.0, 2.0)
        with pytest.raises(NoMinimumBracketed):
            problem.find_minimum(SQUARE)
        assert problem.iterations == iters
        assert problem.minimum == x

    def test_degenerate_interval(self, problem):
        problem.set_bounds(0.0, 0.0)
        with pytest.raises(NoMinimumBracketed):
            problem.find_minimum(SQUARE)

    def test_iteration_limit(self):
        p = Problem(iteration_limit=3)
        with pytest.raises(IterationLimitReached):
            p.find_minimum(SQUARE)
        assert p.iterations == 0
        assert p.minimum is None

    def test_iteration_limit_keeps_previous_result(self):
        p = Problem(precision=0, iteration_limit=5)
        p.find_minimum(SQUARE)
        iters, x = p.iterations, p.minimum
        p.set_precision(5)
        with pytest.raises(IterationLimitReached):
            p.find_minimum(SQUARE)
        assert (p.iterations, p.minimum) == (iters, x)


class TestExtremePrecision:
    def test_large_negative_precision(self, problem):
        problem.set_precision(-400)
        assert problem.precision == -400
        assert problem.epsilon == math.inf

    def test_large_positive_precision(self, problem):
        problem.set_precision(400)
        assert problem.epsilon == 0.0

    @pytest.mark.parametrize("p", [-400, 400])
    def test_search_fails_cleanly(self, problem, p):
        problem.set_precision(p)
        assert problem.has_bracketed_minimum(SQUARE) is False
        with pytest.raises(NoMinimumBracketed):
            problem.find_minimum(SQUARE)
        assert problem.iterations == 0
        assert problem.minimum is None

    def test_sin_fails_cleanly(self, problem):
        problem.set_bounds(4.0, 5.0)
        problem.set_precision(-400)
        with pytest.raises(NoMinimumBracketed):
            problem.find_minimum(SIN)


class TestLogging:
    def test_setters_log_at_info(self, problem, caplog):
        with caplog.at_level(logging.INFO, logger="goldsearch.core.problem"):
            problem.set_bounds(5, -5)
            problem.set_precision(3)
        messages = [r.getMessage() for r in caplog.records if r.levelno == logging.INFO]
        assert "Interval set to [-5; 5]" in messages
        assert "Precision set to 3 (epsilon=0.001)" in messages
