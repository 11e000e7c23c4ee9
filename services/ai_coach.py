"""AI coach: prompt building around the OpenAI chat completions API.

Each operation renders a prompt from the user's record, asks the model for a
JSON document and validates it into a schema object. Transport failures,
unparsable JSON and JSON of the wrong shape all surface as `AIServiceError`.
"""

import json
from typing import Any, Dict, Iterable, List, Optional

from openai import OpenAI, OpenAIError
from pydantic import ValidationError as SchemaValidationError

from core import config
from core.exceptions import AIServiceError, ConfigurationError
from core.logger import get_logger
from database import models
from schemas.ai_schema import WorkoutPlan, MealSuggestion, ProgressAnalysis

logger = get_logger("services.ai_coach")

WORKOUT_EQUIPMENT = {
    "gym": {"barbell", "dumbbells", "cable_machine", "leg_press_machine"},
    "home": {"bodyweight", "resistance_band", "pull_up_bar"},
    "calisthenics": {"bodyweight", "pull_up_bar", "parallel_bars"},
}

WORKOUT_TYPE_DESCRIPTIONS = {
    "gym": "gym-based training with weights and machines",
    "home": "home workout using minimal equipment",
    "calisthenics": "bodyweight-focused calisthenics progression",
}

LEVEL_DESCRIPTIONS = {
    "beginner": "Focus on form, basic movements, and building foundation",
    "intermediate": "Progressive overload with moderate complexity",
    "advanced": "Complex movements and advanced training techniques",
}

CALISTHENICS_NOTES = """
Special considerations for calisthenics:
- If beginner: Use assisted variations, easier progressions
- If intermediate: Standard movements with proper form
- If advanced: One-arm variations, weighted movements, skills
- Include progression tips for each exercise
"""

TRAINER_SYSTEM_PROMPT = (
    "You are a certified fitness trainer specializing in Indian fitness preferences "
    "and body types. Create effective, safe workout plans."
)
NUTRITIONIST_SYSTEM_PROMPT = (
    "You are a nutritionist specializing in Indian cuisine and traditional cooking "
    "methods. Provide accurate nutritional information."
)
COACH_SYSTEM_PROMPT = (
    "You are a fitness coach providing encouraging, data-driven insights for Indian "
    "fitness enthusiasts."
)


def filter_exercises(exercises: Iterable[models.Exercise], workout_type: str) -> List[models.Exercise]:
    """Keep the exercises whose equipment suits the workout type.

    Unknown workout types keep every exercise.
    """
    allowed = WORKOUT_EQUIPMENT.get(workout_type)
    if allowed is None:
        return list(exercises)
    return [e for e in exercises if (e.equipment or "") in allowed]


def _exercise_summary(exercise: models.Exercise) -> Dict[str, Any]:
    return {
        "id": exercise.id,
        "name": exercise.name,
        "category": exercise.category,
        "primaryMuscles": exercise.primary_muscles or [],
        "equipment": exercise.equipment,
        "difficulty": exercise.difficulty,
    }


class AICoach:
    """Generates workout plans, meal suggestions and progress analyses.

    Parameters
    ----------
    client: OpenAI, optional
        Pre-built client (tests pass a fake). When omitted one is created on
        first use from `OPENAI_API_KEY`.
    model: str
        Chat completion model name.
    """

    def __init__(self, client: Optional[OpenAI] = None, model: str = config.OPENAI_MODEL):
        self._client = client
        self.model = model

    @property
    def client(self) -> OpenAI:
        if self._client is None:
            if not config.OPENAI_API_KEY:
                raise ConfigurationError("OpenAI API key is not configured", config_key="OPENAI_API_KEY")
            self._client = OpenAI(api_key=config.OPENAI_API_KEY, timeout=config.OPENAI_TIMEOUT)
        return self._client

    def _complete_json(self, system_prompt: str, prompt: str, operation: str, failure: str) -> Any:
        """Run one JSON-mode completion and return the decoded document."""
        logger.info("Requesting %s from model %s", operation, self.model)
        try:
            response = self.client.chat.completions.create(
                model=self.model,
                messages=[
                    {"role": "system", "content": system_prompt},
                    {"role": "user", "content": prompt},
                ],
                response_format={"type": "json_object"},
            )
        except OpenAIError as exc:
            logger.exception("Completion request failed for %s", operation)
            raise AIServiceError(f"{failure}: {exc}", operation=operation) from exc

        if not response.choices:
            logger.warning("Empty %s response from model %s", operation, self.model)
            raise AIServiceError(f"{failure}: model returned no choices", operation=operation)
        content = response.choices[0].message.content
        try:
            return json.loads(content)
        except (TypeError, json.JSONDecodeError) as exc:
            logger.warning("Unparsable %s response: %r", operation, content)
            raise AIServiceError(f"{failure}: model returned invalid JSON", operation=operation) from exc

    def generate_workout_plan(
        self,
        user: models.User,
        exercises: Iterable[models.Exercise],
        goal: str,
        workout_type: str = "gym",
        level: str = "beginner",
    ) -> WorkoutPlan:
        """Ask the model for a workout built from the suitable catalogue exercises."""
        available = [_exercise_summary(e) for e in filter_exercises(exercises, workout_type)]
        type_description = WORKOUT_TYPE_DESCRIPTIONS.get(workout_type, "general fitness training")
        level_description = LEVEL_DESCRIPTIONS.get(level, "appropriate difficulty progression")
        if workout_type == "calisthenics":
            equipment_line = "Progressive calisthenics exercises with proper scaling"
        else:
            equipment_line = f"Equipment appropriate for {workout_type}"

        prompt = f"""
Create a personalized {type_description} workout plan for a user with the following details:
- Age: {user.age}
- Weight: {user.weight}kg
- Fitness Goal: {goal}
- Activity Level: {user.activity_level}
- Workout Type: {workout_type}
- Level: {level}

Available exercises: {json.dumps(available)}

Requirements for {workout_type} {level} workout:
- {level_description}
- {equipment_line}
- Focus on {goal} specific training
- Include 4-8 exercises appropriate for {level} level
- Specify sets, reps, and rest times
- Consider workout progression and scaling
- Estimate total duration and calories burned
- Provide exercise selection reasoning and form cues
{CALISTHENICS_NOTES if workout_type == "calisthenics" else ""}
Respond with JSON in this exact format:
{{
  "name": "workout name",
  "goal": "{goal}",
  "workoutType": "{workout_type}",
  "level": "{level}",
  "exercises": [
    {{
      "exerciseId": number,
      "name": "exercise name",
      "sets": number,
      "reps": "rep range (e.g., 6-8 or 30 seconds)",
      "restTime": "rest duration (e.g., 2 min)",
      "notes": "form cues and progression tips"
    }}
  ],
  "duration": number_in_minutes,
  "estimatedCalories": number,
  "difficulty": "beginner|intermediate|advanced"
}}"""

        failure = "Failed to generate workout plan"
        data = self._complete_json(TRAINER_SYSTEM_PROMPT, prompt, "workout_plan", failure)
        try:
            return WorkoutPlan.model_validate(data)
        except SchemaValidationError as exc:
            raise AIServiceError(f"{failure}: {exc.error_count()} invalid field(s)", operation="workout_plan") from exc

    def generate_meal_suggestions(
        self,
        user: models.User,
        meal_type: str,
        target_calories: int,
    ) -> List[MealSuggestion]:
        prompt = f"""
Suggest 3-5 traditional Indian dishes for {meal_type} with approximately {target_calories} total calories.

User details:
- Weight: {user.weight}kg
- Fitness Goal: {user.fitness_goal}
- Daily Calorie Target: {user.daily_calorie_target}

Requirements:
- Focus on authentic Indian cuisine
- Include nutritional information per serving
- Consider meal timing and digestion
- Provide variety in ingredients and preparation methods

Respond with a JSON object in this exact format:
{{
  "suggestions": [
    {{
      "name": "dish name in English",
      "category": "indian_main|indian_snack|beverages|fruits",
      "caloriesPerServing": number,
      "proteinPerServing": number,
      "carbsPerServing": number,
      "fatPerServing": number,
      "servingSize": "serving description",
      "description": "brief preparation or ingredient description"
    }}
  ]
}}"""

        failure = "Failed to generate meal suggestions"
        data = self._complete_json(NUTRITIONIST_SYSTEM_PROMPT, prompt, "meal_suggestions", failure)
        # Models sometimes answer with the bare array despite the object wrapper.
        items = data.get("suggestions") if isinstance(data, dict) else data
        if not isinstance(items, list):
            raise AIServiceError(f"{failure}: expected a list of suggestions", operation="meal_suggestions")
        try:
            return [MealSuggestion.model_validate(item) for item in items]
        except SchemaValidationError as exc:
            raise AIServiceError(f"{failure}: {exc.error_count()} invalid field(s)", operation="meal_suggestions") from exc

    def analyze_progress(self, user: models.User, progress_data: List[Dict[str, Any]]) -> ProgressAnalysis:
        """Summarize progress entries and workout sessions into coaching advice."""
        prompt = f"""
Analyze fitness progress data and provide personalized insights:

User: {user.username}
Current Weight: {user.weight}kg
Target Weight: {user.target_weight}kg
Fitness Goal: {user.fitness_goal}

Progress Data: {json.dumps(progress_data, default=str)}

Provide analysis in JSON format:
{{
  "insights": ["key insight 1", "key insight 2", "key insight 3"],
  "recommendations": ["actionable recommendation 1", "actionable recommendation 2"],
  "nextGoals": ["next milestone 1", "next milestone 2"]
}}"""

        failure = "Failed to analyze progress"
        data = self._complete_json(COACH_SYSTEM_PROMPT, prompt, "progress_analysis", failure)
        try:
            return ProgressAnalysis.model_validate(data)
        except SchemaValidationError as exc:
            raise AIServiceError(f"{failure}: {exc.error_count()} invalid field(s)", operation="progress_analysis") from exc


# export singleton
ai_coach = AICoach()
__all__ = ["AICoach", "ai_coach", "filter_exercises"]
