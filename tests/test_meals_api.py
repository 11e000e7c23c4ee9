"""Tests for the food catalogue and meal logging endpoints."""
from datetime import datetime, timedelta

import pytest

from api.meals import list_food_items, list_meals_for_day, log_meal, delete_meal
from core.exceptions import NotFoundError
from schemas import MealEntryCreateRequest


def _food_id(db, name):
    return next(f.id for f in list_food_items(db=db) if f.name == name)


def test_food_catalogue_is_seeded(db):
    assert len(list_food_items(db=db)) == 18


def test_food_search_matches_name_case_insensitively(db):
    names = {f.name for f in list_food_items(search="CHAI", db=db)}
    assert names == {"Chai with Milk & Sugar", "Masala Chai"}


def test_food_search_matches_category(db):
    names = {f.name for f in list_food_items(search="fruit", db=db)}
    assert names == {"Apple", "Banana"}


def test_food_search_takes_precedence_over_category(db):
    names = {f.name for f in list_food_items(category="fruits", search="samosa", db=db)}
    assert names == {"Samosa"}


def test_food_category_filter(db):
    foods = list_food_items(category="beverages", db=db)
    assert len(foods) == 4
    assert all(f.category == "beverages" for f in foods)


def test_meals_for_day_grouped_by_meal_type(db, user):
    now = datetime.utcnow()
    paratha = _food_id(db, "Aloo Paratha")
    chai = _food_id(db, "Masala Chai")
    dal = _food_id(db, "Dal Tadka")

    log_meal(payload=MealEntryCreateRequest(
        user_id=user.id, food_item_id=paratha, meal_type="breakfast", quantity=2, calories=320,
        protein=8, carbs=48, fat=12, date=now,
    ), db=db)
    log_meal(payload=MealEntryCreateRequest(
        user_id=user.id, food_item_id=chai, meal_type="breakfast", calories=67, date=now,
    ), db=db)
    log_meal(payload=MealEntryCreateRequest(
        user_id=user.id, food_item_id=dal, meal_type="lunch", calories=184, date=now,
    ), db=db)
    log_meal(payload=MealEntryCreateRequest(
        user_id=user.id, food_item_id=dal, meal_type="dinner", calories=184, date=now - timedelta(days=2),
    ), db=db)

    grouped = list_meals_for_day(user_id=user.id, day=now.date(), db=db)
    assert set(grouped) == {"breakfast", "lunch"}
    assert [e.calories for e in grouped["breakfast"]] == [320, 67]
    assert grouped["lunch"][0].food_item_id == dal


def test_log_meal_defaults_date_to_now(db, user):
    entry = log_meal(payload=MealEntryCreateRequest(
        user_id=user.id, food_item_id=_food_id(db, "Banana"), meal_type="midday_snack", calories=89,
    ), db=db)
    assert abs(datetime.utcnow() - entry.date) < timedelta(minutes=1)


def test_log_meal_unknown_food_item(db, user):
    with pytest.raises(NotFoundError) as exc_info:
        log_meal(payload=MealEntryCreateRequest(
            user_id=user.id, food_item_id=999999, meal_type="lunch", calories=100,
        ), db=db)
    assert "FoodItem" in exc_info.value.message


def test_delete_meal(db, user):
    entry = log_meal(payload=MealEntryCreateRequest(
        user_id=user.id, food_item_id=_food_id(db, "Apple"), meal_type="evening_snacks", calories=78,
    ), db=db)
    assert delete_meal(entry_id=entry.id, db=db) == {"success": True}
    with pytest.raises(NotFoundError):
        delete_meal(entry_id=entry.id, db=db)
