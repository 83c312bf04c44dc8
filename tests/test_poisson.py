import math

import pytest

from core import poisson
from core.errors import InvalidInput


def test_default_strengths_give_base_xg():
    xg = poisson.expected_goals(1.0, 1.0)
    assert xg.home == 1.45
    assert xg.away == 1.15

    out = poisson.predict(1.0, 1.0, 7)
    assert out.xg_home == 1.45
    assert out.xg_away == 1.15


def test_xg_floor_applies_to_zero_strength():
    xg = poisson.expected_goals(0, 0.1)
    assert xg.home == 0.2
    assert xg.away == 0.2


def test_custom_base_rates_override_defaults():
    xg = poisson.expected_goals(1.0, 1.0, base_home_xg=2.0, base_away_xg=0.5)
    assert (xg.home, xg.away) == (2.0, 0.5)


def test_top_scores_for_default_match():
    out = poisson.predict()
    assert out.top_scores == [
        ("1-1", 12.4),
        ("1-0", 10.8),
        ("2-1", 9.0),
        ("0-1", 8.5),
        ("2-0", 7.8),
    ]


def test_max_goals_zero_is_single_nil_nil_cell():
    cells = poisson.score_grid(1.45, 1.15, 0)
    assert len(cells) == 1
    assert cells[0].score == "0-0"
    assert cells[0].probability == pytest.approx(
        poisson.poisson_pmf(1.45, 0) * poisson.poisson_pmf(1.15, 0)
    )

    out = poisson.predict(1.0, 1.0, 0)
    assert out.top_scores == [("0-0", 7.4)]
    assert out.prob_home == 0.0
    assert out.prob_away == 0.0
    assert out.prob_draw == 7.4
    assert out.prob_over25 == 0.0


def test_grid_covers_every_pair_once():
    cells = poisson.score_grid(1.2, 0.9, 4)
    pairs = {(c.home_goals, c.away_goals) for c in cells}
    assert len(cells) == 25
    assert pairs == {(h, a) for h in range(5) for a in range(5)}


def test_one_x_two_mass_within_truncation_bound():
    for max_goals in (7, 8, 10):
        s = poisson.outcome_summary(poisson.score_grid(1.45, 1.15, max_goals))
        total = (s.home_win + s.draw + s.away_win) * 100
        assert 99.0 <= total <= 100.0


def test_over25_non_decreasing_in_max_goals_and_converges():
    values = [
        poisson.outcome_summary(poisson.score_grid(1.45, 1.15, n)).over25
        for n in range(0, 16)
    ]
    assert values[0] == 0.0
    assert all(b >= a for a, b in zip(values, values[1:]))
    assert values[-1] - values[-2] < 1e-9


def test_home_win_increases_with_home_strength():
    probs = []
    for strength in (0.7, 0.85, 1.0, 1.15, 1.3):
        xg = poisson.expected_goals(strength, 1.0)
        probs.append(poisson.outcome_summary(poisson.score_grid(xg.home, xg.away, 7)).home_win)
    assert all(b > a for a, b in zip(probs, probs[1:]))


def test_top_scorelines_are_sorted_unique_and_capped():
    out = poisson.predict(1.3, 0.7, 9)
    scores = [s for s, _ in out.top_scores]
    ps = [p for _, p in out.top_scores]
    assert len(out.top_scores) == 5
    assert len(set(scores)) == 5
    assert ps == sorted(ps, reverse=True)


def test_top_scorelines_ties_keep_grid_order():
    # λ = 1: pmf(0) == pmf(1), así que hay empates exactos
    top = poisson.top_scorelines(poisson.score_grid(1.0, 1.0, 3))
    assert [c.score for c in top] == ["0-0", "0-1", "1-0", "1-1", "0-2"]


def test_top_scorelines_shorter_than_n_on_small_grid():
    assert len(poisson.top_scorelines(poisson.score_grid(1.0, 1.0, 1))) == 4


def test_probabilities_are_not_renormalized():
    s = poisson.outcome_summary(poisson.score_grid(3.0, 3.0, 2))
    assert s.home_win + s.draw + s.away_win < 0.5


def test_to_fixed_rounds_half_up_on_exact_binary_value():
    assert poisson._to_fixed(0.25, 1) == 0.3
    assert poisson._to_fixed(0.35, 1) == 0.3  # 0.35 es 0.34999... en binario
    assert poisson._to_fixed(1.005, 2) == 1.0


def test_numeric_strings_are_coerced():
    out = poisson.predict("1.2", " 1 ", "5")
    assert out.xg_home == 1.74
    assert out.xg_away == 1.15


def test_integral_float_max_goals_accepted():
    assert poisson.predict(1.0, 1.0, 3.0) == poisson.predict(1.0, 1.0, 3)


@pytest.mark.parametrize("max_goals", [-1, 2.5, "x", "-3", "²", "--3", "3.0", None, True])
def test_invalid_max_goals_raises(max_goals):
    with pytest.raises(InvalidInput) as e:
        poisson.predict(1.0, 1.0, max_goals)
    assert e.value.field == "maxGoals"


@pytest.mark.parametrize("strength", ["abc", -0.5, math.nan, math.inf, None, [1], False])
def test_invalid_home_strength_raises(strength):
    with pytest.raises(InvalidInput) as e:
        poisson.predict(strength, 1.0)
    assert e.value.field == "strengthHome"


def test_invalid_input_is_a_value_error():
    with pytest.raises(ValueError):
        poisson.predict(1.0, "nope")


def test_predict_from_payload_shape_and_defaults():
    out = poisson.predict_from_payload({})
    assert out["xgHome"] == 1.45
    assert out["xgAway"] == 1.15
    assert set(out["prob"]) == {"home", "draw", "away", "over25"}
    assert out["topScores"][0] == {"score": "1-1", "p": 12.4}
    assert poisson.predict_from_payload(None) == out
    assert poisson.predict_from_payload({"strengthHome": None, "maxGoals": None}) == out


def test_predict_from_payload_uses_default_max_goals():
    out = poisson.predict_from_payload({}, default_max_goals=0)
    assert out["topScores"] == [{"score": "0-0", "p": 7.4}]


def test_predict_from_payload_enforces_limit():
    with pytest.raises(InvalidInput):
        poisson.predict_from_payload({"maxGoals": 31}, max_goals_limit=30)
    assert poisson.predict_from_payload({"maxGoals": 30}, max_goals_limit=30)["topScores"]


def test_predict_from_payload_rejects_non_object():
    with pytest.raises(InvalidInput) as e:
        poisson.predict_from_payload([1, 2])
    assert e.value.field == "body"


def test_large_grid_does_not_overflow():
    s = poisson.outcome_summary(poisson.score_grid(1.45, 1.15, 200))
    total = (s.home_win + s.draw + s.away_win) * 100
    assert 99.0 <= total <= 100.0 + 1e-9

    out = poisson.predict(1.0, 1.0, 200)
    assert 99.0 <= out.prob_home + out.prob_draw + out.prob_away <= 100.2
    assert out.top_scores[0] == ("1-1", 12.4)


def test_pmf_tail_goes_to_zero():
    assert poisson.poisson_pmf(1.45, 400) == 0.0
    assert poisson.poisson_pmf(0.0, 0) == 1.0
    assert poisson.poisson_pmf(0.0, 3) == 0.0
    assert poisson.poisson_pmf(2.0, 3) == pytest.approx(math.exp(-2) * 8 / 6)


def test_pmf_large_rate_stays_finite():
    # e^-λ solo daría 0; en escala log la masa alrededor de k = λ sobrevive
    assert poisson.poisson_pmf(800.0, 800) == pytest.approx(0.0141, abs=1e-3)
    assert poisson.poisson_pmf(1.45e11, 30) == 0.0


def test_huge_strength_gives_zero_probabilities():
    out = poisson.predict(1e11, 1.0, 30)
    assert out.xg_home == 145000000000.0
    assert out.prob_home == 0.0
    assert out.prob_draw == 0.0
    assert [s for s, _ in out.top_scores] == ["0-0", "0-1", "0-2", "0-3", "0-4"]


def test_integer_too_large_for_float_raises():
    with pytest.raises(InvalidInput) as e:
        poisson.predict(1.0, 10**400)
    assert e.value.field == "strengthAway"


def test_rate_overflow_raises():
    with pytest.raises(InvalidInput) as e:
        poisson.predict(1.7e308, 1.0)
    assert e.value.field == "strengthHome"
