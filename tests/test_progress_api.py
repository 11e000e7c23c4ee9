"""Tests for progress tracking and the dashboard summary."""
from datetime import datetime, timedelta

from api.meals import list_food_items, log_meal
from api.progress import list_progress, record_progress, analyze, dashboard_stats
from api.workouts import create_workout, complete_workout
from schemas import (
    MealEntryCreateRequest,
    PlannedExercise,
    ProgressAnalyzeRequest,
    ProgressEntryCreateRequest,
    WorkoutCompleteRequest,
    WorkoutCreateRequest,
)
from services.ai_coach import AICoach
from conftest import FakeOpenAI, make_user


def test_progress_listed_newest_first(db, user):
    now = datetime.utcnow()
    record_progress(payload=ProgressEntryCreateRequest(user_id=user.id, weight=71.0, date=now - timedelta(days=14)), db=db)
    record_progress(payload=ProgressEntryCreateRequest(user_id=user.id, weight=69.5, date=now), db=db)
    record_progress(payload=ProgressEntryCreateRequest(user_id=user.id, weight=70.2, date=now - timedelta(days=7)), db=db)

    weights = [e.weight for e in list_progress(user_id=user.id, db=db)]
    assert weights == [69.5, 70.2, 71.0]


def test_dashboard_for_new_user_is_empty(db):
    stats = dashboard_stats(user_id=make_user(db).id, db=db)
    assert stats.today_calories == 0
    assert stats.week_workout_count == 0
    assert stats.current_weight == 0
    assert stats.water_intake == 6


def test_dashboard_stats(db, user):
    food_id = list_food_items(db=db)[0].id
    now = datetime.utcnow()
    for calories in (320, 410):
        log_meal(payload=MealEntryCreateRequest(
            user_id=user.id, food_item_id=food_id, meal_type="lunch", calories=calories, date=now,
        ), db=db)
    log_meal(payload=MealEntryCreateRequest(
        user_id=user.id, food_item_id=food_id, meal_type="dinner", calories=999, date=now - timedelta(days=1),
    ), db=db)

    workout = create_workout(payload=WorkoutCreateRequest(
        user_id=user.id, name="Core", goal="strength", workout_type="home",
        exercises=[PlannedExercise(name="Plank", sets=3, reps="45 seconds", rest_time="30 sec")],
    ), db=db)
    complete_workout(workout_id=workout.id, payload=WorkoutCompleteRequest(duration=15), db=db)

    record_progress(payload=ProgressEntryCreateRequest(user_id=user.id, weight=69.1), db=db)

    stats = dashboard_stats(user_id=user.id, db=db)
    assert stats.today_calories == 730
    assert stats.week_workout_count == 1
    assert stats.current_weight == 69.1


def test_analyze_sends_entries_and_sessions_to_coach(db, user):
    record_progress(payload=ProgressEntryCreateRequest(user_id=user.id, weight=69.8, notes="felt strong"), db=db)
    fake = FakeOpenAI(content={
        "insights": ["Weight trending down"],
        "recommendations": ["Keep protein high"],
        "nextGoals": ["Reach 68 kg"],
    })

    result = analyze(payload=ProgressAnalyzeRequest(user_id=user.id), db=db, coach=AICoach(client=fake))
    assert result.next_goals == ["Reach 68 kg"]

    prompt = fake.chat.completions.calls[0]["messages"][1]["content"]
    assert "felt strong" in prompt
    assert user.username in prompt
