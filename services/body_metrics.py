"""Body-metrics calculator.

Turns a `UserProfile` into `BodyMetrics`: BMI and its category, BMR
(Mifflin-St Jeor), TDEE, a goal-adjusted calorie target and daily protein,
carb and fat targets in grams.

Everything here is plain arithmetic over constant tables. Numeric ranges are
not validated: a non-positive weight, height or age yields meaningless
numbers, and callers are expected to reject such profiles first. Unknown
activity levels and fitness goals fall back to `moderate` and `maintenance`.
"""

import math
from typing import Dict, Optional

from schemas.body_metrics_schema import UserProfile, BodyMetrics

ACTIVITY_MULTIPLIERS: Dict[str, float] = {
    "sedentary": 1.2,      # little to no exercise
    "light": 1.375,        # 1-3 days/week
    "moderate": 1.55,      # 3-5 days/week
    "active": 1.725,       # 6-7 days/week
    "very_active": 1.9,    # hard training or a physical job
}
DEFAULT_ACTIVITY_MULTIPLIER = ACTIVITY_MULTIPLIERS["moderate"]

CALORIE_MULTIPLIERS: Dict[str, float] = {
    "cutting": 0.80,
    "bulking": 1.15,
    "body_recomposition": 0.95,
    "strength": 1.05,
    "maintenance": 1.00,
}

PROTEIN_PER_KG: Dict[str, float] = {
    "bulking": 2.2,
    "cutting": 2.4,
    "body_recomposition": 2.2,
    "strength": 2.0,
}
DEFAULT_PROTEIN_PER_KG = 1.8

KCAL_PER_GRAM_PROTEIN = 4
KCAL_PER_GRAM_CARB = 4
KCAL_PER_GRAM_FAT = 9
MIN_FAT_SHARE = 0.20

GOAL_RECOMMENDATIONS: Dict[str, Dict[str, str]] = {
    "bulking": {
        "title": "Lean Bulking",
        "description": "Build muscle with minimal fat gain",
        "calorie_balance": "15% above maintenance",
        "protein_focus": "High protein for muscle synthesis",
        "training_tips": "Progressive overload with compound movements",
        "timeframe": "Aim for 0.5-1 lb weight gain per week",
    },
    "cutting": {
        "title": "Fat Loss",
        "description": "Lose fat while preserving muscle",
        "calorie_balance": "20% below maintenance",
        "protein_focus": "Very high protein to preserve muscle",
        "training_tips": "Maintain strength training intensity",
        "timeframe": "Aim for 1-2 lb fat loss per week",
    },
    "body_recomposition": {
        "title": "Body Recomposition",
        "description": "Simultaneous muscle gain and fat loss",
        "calorie_balance": "Slight deficit or maintenance",
        "protein_focus": "High protein for muscle synthesis",
        "training_tips": "Progressive strength training essential",
        "timeframe": "Slower progress, focus on body composition changes",
    },
    "strength": {
        "title": "Strength Building",
        "description": "Maximize strength and power",
        "calorie_balance": "Maintenance to slight surplus",
        "protein_focus": "Adequate protein for recovery",
        "training_tips": "Heavy compound lifts, longer rest periods",
        "timeframe": "Focus on performance metrics over scale weight",
    },
    "maintenance": {
        "title": "Maintenance",
        "description": "Maintain current physique and health",
        "calorie_balance": "Match energy expenditure",
        "protein_focus": "Moderate protein for general health",
        "training_tips": "Consistent training for health benefits",
        "timeframe": "Long-term sustainable approach",
    },
}


def round_half_up(value: float, ndigits: int = 0) -> float:
    """Round with halves going up, unlike the builtin banker's `round`.

    >>> round_half_up(2.5), round(2.5)
    (3.0, 2)
    """
    factor = 10 ** ndigits
    return math.floor(value * factor + 0.5) / factor


class BodyMetricsCalculator:
    """Stateless calculator; safe to share between requests."""

    def calculate_bmi(self, weight_kg: float, height_cm: float) -> float:
        """Return the unrounded BMI for a weight in kg and height in cm."""
        h_m = height_cm / 100.0
        return weight_kg / (h_m * h_m)

    def get_bmi_category(self, bmi: float) -> str:
        if bmi < 18.5:
            return "Underweight"
        if bmi < 25:
            return "Normal weight"
        if bmi < 30:
            return "Overweight"
        return "Obese"

    def calculate_bmr(self, profile: UserProfile) -> int:
        """Mifflin-St Jeor basal metabolic rate in kcal/day.

        Profiles that are neither male nor female use the midpoint of the two
        sex constants.
        """
        bmr = 10 * profile.weight + 6.25 * profile.height - 5 * profile.age
        if profile.gender == "male":
            bmr += 5
        elif profile.gender == "female":
            bmr -= 161
        else:
            bmr -= 78
        return int(round_half_up(bmr))

    def calculate_tdee(self, bmr: float, activity_level: Optional[str]) -> int:
        multiplier = ACTIVITY_MULTIPLIERS.get(activity_level, DEFAULT_ACTIVITY_MULTIPLIER)
        return int(round_half_up(bmr * multiplier))

    def calculate_calorie_target(self, tdee: float, fitness_goal: Optional[str]) -> int:
        """Scale TDEE by the goal's surplus or deficit."""
        multiplier = CALORIE_MULTIPLIERS.get(fitness_goal, 1.0)
        return int(round_half_up(tdee * multiplier))

    def calculate_protein_target(
        self,
        weight_kg: float,
        fitness_goal: Optional[str],
        body_fat_percentage: Optional[float] = None,
    ) -> int:
        """Daily protein in grams.

        With a body fat percentage the g/kg factor applies to lean body mass
        instead of total body weight.
        """
        per_kg = PROTEIN_PER_KG.get(fitness_goal, DEFAULT_PROTEIN_PER_KG)
        if body_fat_percentage is not None:
            mass = weight_kg * (1 - body_fat_percentage / 100)
        else:
            mass = weight_kg
        return int(round_half_up(mass * per_kg))

    def calculate_carb_target(
        self,
        calorie_target: float,
        fitness_goal: Optional[str],
        activity_level: Optional[str],
    ) -> int:
        if fitness_goal == "cutting":
            share = 0.35 if activity_level == "very_active" else 0.25
        elif fitness_goal == "bulking":
            share = 0.45
        else:
            share = 0.35
        return int(round_half_up(calorie_target * share / KCAL_PER_GRAM_CARB))

    def calculate_fat_target(self, calorie_target: float, protein_target: int, carb_target: int) -> int:
        """Fat fills the calories left after protein and carbs.

        The result never drops below 20% of the calorie target, so the macro
        calories can add up to more than the target when protein and carbs
        are already high.
        """
        remainder = (
            calorie_target
            - protein_target * KCAL_PER_GRAM_PROTEIN
            - carb_target * KCAL_PER_GRAM_CARB
        )
        floor = calorie_target * MIN_FAT_SHARE
        return int(round_half_up(max(remainder, floor) / KCAL_PER_GRAM_FAT))

    def calculate_body_metrics(self, profile: UserProfile) -> BodyMetrics:
        """Run the full profile -> BMI -> BMR -> TDEE -> targets pipeline."""
        bmi = self.calculate_bmi(profile.weight, profile.height)
        bmr = self.calculate_bmr(profile)
        tdee = self.calculate_tdee(bmr, profile.activity_level)
        calorie_target = self.calculate_calorie_target(tdee, profile.fitness_goal)
        protein_target = self.calculate_protein_target(
            profile.weight, profile.fitness_goal, profile.body_fat_percentage
        )
        carb_target = self.calculate_carb_target(
            calorie_target, profile.fitness_goal, profile.activity_level
        )
        fat_target = self.calculate_fat_target(calorie_target, protein_target, carb_target)

        return BodyMetrics(
            bmi=round_half_up(bmi, 1),
            bmi_category=self.get_bmi_category(bmi),
            bmr=bmr,
            tdee=tdee,
            calorie_target=calorie_target,
            protein_target=protein_target,
            carb_target=carb_target,
            fat_target=fat_target,
        )

    def get_goal_recommendations(self, fitness_goal: Optional[str]) -> Dict[str, str]:
        return dict(GOAL_RECOMMENDATIONS.get(fitness_goal, GOAL_RECOMMENDATIONS["maintenance"]))


# export singleton
body_metrics_calculator = BodyMetricsCalculator()
__all__ = ["BodyMetricsCalculator", "body_metrics_calculator", "round_half_up"]
