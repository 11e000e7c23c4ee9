"""Unit tests for the body-metrics calculator."""
import itertools

import pytest

from schemas import UserProfile
from services.body_metrics import BodyMetricsCalculator, round_half_up

calc = BodyMetricsCalculator()

MALE_70KG = UserProfile(
    weight=70,
    height=175,
    age=30,
    gender="male",
    activity_level="moderate",
    fitness_goal="body_recomposition",
)


def _with(profile, **changes):
    return profile.model_copy(update=changes)


# ── worked examples ─────────────────────────────────────────────────
def test_reference_male_profile():
    m = calc.calculate_body_metrics(MALE_70KG)
    assert m.bmi == 22.9
    assert m.bmi_category == "Normal weight"
    assert m.bmr == 1649            # 10*70 + 6.25*175 - 5*30 + 5 = 1648.75
    assert m.tdee == 2556           # 1649 * 1.55 = 2555.95
    assert m.calorie_target == 2428  # 2556 * 0.95 = 2428.2
    assert m.protein_target == 154  # 70 * 2.2
    assert m.carb_target == 212     # 2428 * 0.35 / 4 = 212.45
    assert m.fat_target == 107      # (2428 - 616 - 848) / 9 = 107.1


def test_body_fat_switches_protein_to_lean_mass():
    m = calc.calculate_body_metrics(_with(MALE_70KG, body_fat_percentage=20))
    assert m.protein_target == 123  # 56 kg lean mass * 2.2
    assert m.calorie_target == 2428
    assert m.carb_target == 212
    assert m.fat_target == 121      # (2428 - 492 - 848) / 9 = 120.9


def test_female_cutting_sedentary():
    profile = UserProfile(
        weight=60, height=165, age=25, gender="female",
        activity_level="sedentary", fitness_goal="cutting",
    )
    m = calc.calculate_body_metrics(profile)
    assert m.bmi == 22.0
    assert m.bmr == 1345
    assert m.tdee == 1614
    assert m.calorie_target == 1291
    assert m.protein_target == 144
    assert m.carb_target == 81      # 25% of calories when not very active
    assert m.fat_target == 43


def test_other_gender_uses_midpoint_constant():
    assert calc.calculate_bmr(_with(MALE_70KG, gender="other")) == 1566  # 1643.75 - 78
    assert calc.calculate_bmr(_with(MALE_70KG, gender="nonbinary")) == 1566


# ── BMI ─────────────────────────────────────────────────────────────
@pytest.mark.parametrize("bmi, category", [
    (16.0, "Underweight"),
    (18.49, "Underweight"),
    (18.5, "Normal weight"),
    (24.99, "Normal weight"),
    (25.0, "Overweight"),
    (29.99, "Overweight"),
    (30.0, "Obese"),
    (41.3, "Obese"),
])
def test_bmi_category_boundaries(bmi, category):
    assert calc.get_bmi_category(bmi) == category


@pytest.mark.parametrize("weight, height", [(50, 160), (70, 175), (95.5, 182), (120, 190)])
def test_bmi_formula(weight, height):
    m = calc.calculate_body_metrics(_with(MALE_70KG, weight=weight, height=height))
    assert m.bmi == pytest.approx(weight / (height / 100) ** 2, abs=0.05)


# ── BMR / TDEE ──────────────────────────────────────────────────────
@pytest.mark.parametrize("gender", ["male", "female", "other"])
def test_bmr_monotonic(gender):
    base = _with(MALE_70KG, gender=gender)
    assert calc.calculate_bmr(_with(base, weight=80)) > calc.calculate_bmr(base)
    assert calc.calculate_bmr(_with(base, height=185)) > calc.calculate_bmr(base)
    assert calc.calculate_bmr(_with(base, age=45)) < calc.calculate_bmr(base)


@pytest.mark.parametrize("level, multiplier", [
    ("sedentary", 1.2),
    ("light", 1.375),
    ("moderate", 1.55),
    ("active", 1.725),
    ("very_active", 1.9),
    ("couch_potato", 1.55),
    (None, 1.55),
])
def test_tdee_multipliers(level, multiplier):
    assert calc.calculate_tdee(1649, level) == round_half_up(1649 * multiplier)


# ── goal-adjusted targets ───────────────────────────────────────────
@pytest.mark.parametrize("goal, expected", [
    ("cutting", 2000),
    ("bulking", 2875),
    ("body_recomposition", 2375),
    ("strength", 2625),
    ("maintenance", 2500),
    ("marathon", 2500),
])
def test_calorie_target_by_goal(goal, expected):
    assert calc.calculate_calorie_target(2500, goal) == expected


@pytest.mark.parametrize("goal, grams", [
    ("bulking", 176),
    ("cutting", 192),
    ("body_recomposition", 176),
    ("strength", 160),
    ("maintenance", 144),
    (None, 144),
])
def test_protein_per_kg_by_goal(goal, grams):
    assert calc.calculate_protein_target(80, goal) == grams


def test_carb_share_for_cutting_depends_on_activity():
    assert calc.calculate_carb_target(2000, "cutting", "very_active") == 175  # 35%
    assert calc.calculate_carb_target(2000, "cutting", "active") == 125       # 25%
    assert calc.calculate_carb_target(2000, "bulking", "light") == 225        # 45%
    assert calc.calculate_carb_target(2000, "strength", "light") == 175       # 35%


def test_fat_floor_applies_when_protein_and_carbs_use_the_budget():
    assert calc.calculate_fat_target(2000, 250, 250) == 44  # floor of 400 kcal


def test_fat_floor_lets_macros_exceed_calorie_target():
    profile = UserProfile(
        weight=100, height=150, age=60, gender="female",
        activity_level="sedentary", fitness_goal="cutting",
    )
    m = calc.calculate_body_metrics(profile)
    assert m.calorie_target == 1418
    assert m.protein_target == 240
    assert m.carb_target == 89
    assert m.fat_target == 32
    assert m.protein_target * 4 + m.carb_target * 4 + m.fat_target * 9 > m.calorie_target


# ── properties over a grid of profiles ──────────────────────────────
GRID = list(itertools.product(
    ["male", "female", "other"],
    ["sedentary", "light", "moderate", "active", "very_active", "unknown"],
    ["bulking", "cutting", "body_recomposition", "strength", "maintenance", "unknown"],
    [(45, 150, 18, None), (70, 175, 30, 15.0), (130, 195, 65, 35.0)],
))


@pytest.mark.parametrize("gender, activity, goal, body", GRID)
def test_targets_non_negative_and_fat_floor_holds(gender, activity, goal, body):
    weight, height, age, body_fat = body
    profile = UserProfile(
        weight=weight, height=height, age=age, gender=gender,
        activity_level=activity, fitness_goal=goal, body_fat_percentage=body_fat,
    )
    m = calc.calculate_body_metrics(profile)

    for value in (m.calorie_target, m.protein_target, m.carb_target, m.fat_target):
        assert isinstance(value, int)
        assert value >= 0
    assert m.fat_target * 9 >= m.calorie_target * 0.20 - 4.5
    assert m.tdee == round_half_up(m.bmr * {
        "sedentary": 1.2, "light": 1.375, "active": 1.725, "very_active": 1.9,
    }.get(activity, 1.55))


def test_same_profile_gives_identical_output():
    first = calc.calculate_body_metrics(_with(MALE_70KG, body_fat_percentage=18.5))
    second = calc.calculate_body_metrics(_with(MALE_70KG, body_fat_percentage=18.5))
    assert first == second
    assert first.model_dump_json() == second.model_dump_json()


def test_out_of_range_input_is_not_validated():
    m = calc.calculate_body_metrics(_with(MALE_70KG, weight=-10))
    assert m.bmi < 0
    assert m.bmi_category == "Underweight"


# ── rounding ────────────────────────────────────────────────────────
def test_round_half_up_differs_from_builtin_round():
    assert round_half_up(2.5) == 3
    assert round(2.5) == 2
    assert round_half_up(3.5) == 4
    assert round_half_up(1.25, 1) == 1.3


def test_goal_recommendations_fall_back_to_maintenance():
    assert calc.get_goal_recommendations("cutting")["title"] == "Fat Loss"
    assert calc.get_goal_recommendations("calisthenics")["title"] == "Maintenance"


def test_half_values_round_up_through_the_pipeline():
    m = calc.calculate_body_metrics(_with(MALE_70KG, height=174))
    assert m.bmr == 1643            # 700 + 1087.5 - 150 + 5 = 1642.5
    assert m.tdee == 2547           # 1643 * 1.55 = 2546.65
    assert m.calorie_target == 2420  # 2547 * 0.95 = 2419.65
    assert m.carb_target == 212     # 2420 * 0.35 / 4 = 211.75
    assert m.fat_target == 106      # (2420 - 616 - 848) / 9 = 106.2
