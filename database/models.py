"""SQLAlchemy ORM models for the fitness companion service.

One table per entity: users, the exercise and food catalogues, workouts and
their completed sessions, logged meal entries and body-progress entries.
List-valued columns use the generic JSON type. Models carry no behavior.
"""

from sqlalchemy import Column, Integer, String, Float, DateTime, ForeignKey, Text, Boolean, JSON
from sqlalchemy.orm import declarative_base
from datetime import datetime

Base = declarative_base()


class User(Base):
    """Account plus body profile.

    `bmi`, `bmr`, `tdee` and the daily targets cache the last body-metrics
    computation; they are overwritten whenever metrics are recomputed.
    """

    __tablename__ = "users"
    id = Column(Integer, primary_key=True, index=True)
    username = Column(String, nullable=False, unique=True, index=True)
    password_hash = Column(String, nullable=False)
    age = Column(Integer, nullable=True)
    weight = Column(Float, nullable=True)  # kg
    height = Column(Float, nullable=True)  # cm
    gender = Column(String, default="male")
    activity_level = Column(String, default="moderate")
    fitness_goal = Column(String, default="body_recomposition")
    target_weight = Column(Float, nullable=True)
    body_fat_percentage = Column(Float, nullable=True)
    muscle_mass = Column(Float, nullable=True)
    bmi = Column(Float, nullable=True)
    bmr = Column(Float, nullable=True)
    tdee = Column(Float, nullable=True)
    daily_calorie_target = Column(Integer, default=2200)
    daily_protein_target = Column(Integer, default=150)
    daily_carb_target = Column(Integer, default=220)
    daily_fat_target = Column(Integer, default=73)
    created_at = Column(DateTime, default=datetime.utcnow)


class Exercise(Base):
    __tablename__ = "exercises"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)  # chest, back, legs, ...
    primary_muscles = Column(JSON, default=list)
    secondary_muscles = Column(JSON, default=list)
    equipment = Column(String, nullable=True)
    instructions = Column(Text, nullable=True)
    difficulty = Column(String, default="intermediate")
    created_at = Column(DateTime, default=datetime.utcnow)


class Workout(Base):
    """A planned workout, either hand-built or generated by the AI coach."""

    __tablename__ = "workouts"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    name = Column(String, nullable=False)
    goal = Column(String, nullable=False)
    workout_type = Column(String, nullable=False)  # gym, home, calisthenics
    exercises = Column(JSON, nullable=False)
    duration = Column(Integer, nullable=True)  # minutes
    calories = Column(Integer, nullable=True)
    difficulty = Column(String, default="intermediate")
    level = Column(String, default="beginner")
    completed = Column(Boolean, default=False)
    completed_at = Column(DateTime, nullable=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class WorkoutSession(Base):
    """A completed run of a workout."""

    __tablename__ = "workout_sessions"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    workout_id = Column(Integer, ForeignKey('workouts.id'), nullable=False)
    duration = Column(Integer, nullable=True)
    calories_burned = Column(Integer, nullable=True)
    completed_exercises = Column(JSON, nullable=True)
    notes = Column(Text, nullable=True)
    completed_at = Column(DateTime, default=datetime.utcnow)
    created_at = Column(DateTime, default=datetime.utcnow)


class FoodItem(Base):
    __tablename__ = "food_items"
    id = Column(Integer, primary_key=True, index=True)
    name = Column(String, nullable=False)
    category = Column(String, nullable=False, index=True)  # indian_main, indian_snack, fruits, beverages
    calories_per_serving = Column(Integer, nullable=False)
    protein_per_serving = Column(Float, default=0)
    carbs_per_serving = Column(Float, default=0)
    fat_per_serving = Column(Float, default=0)
    serving_size = Column(String, nullable=True)
    is_indian = Column(Boolean, default=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class MealEntry(Base):
    """A food item logged by a user, with the nutrients actually eaten."""

    __tablename__ = "meal_entries"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    food_item_id = Column(Integer, ForeignKey('food_items.id'), nullable=False)
    meal_type = Column(String, nullable=False)
    quantity = Column(Float, default=1)
    calories = Column(Integer, nullable=False)
    protein = Column(Float, default=0)
    carbs = Column(Float, default=0)
    fat = Column(Float, default=0)
    date = Column(DateTime, default=datetime.utcnow, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)


class ProgressEntry(Base):
    __tablename__ = "progress_entries"
    id = Column(Integer, primary_key=True, index=True)
    user_id = Column(Integer, ForeignKey('users.id'), nullable=False, index=True)
    weight = Column(Float, nullable=True)
    body_fat_percentage = Column(Float, nullable=True)
    muscle_mass = Column(Float, nullable=True)
    notes = Column(Text, nullable=True)
    date = Column(DateTime, default=datetime.utcnow, index=True)
    created_at = Column(DateTime, default=datetime.utcnow)
