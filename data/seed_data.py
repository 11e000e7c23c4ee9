"""Default catalogue rows loaded into an empty database by `init_db`."""


def _exercise(name, category, primary, secondary, equipment, instructions, difficulty):
    return {
        "name": name,
        "category": category,
        "primary_muscles": primary,
        "secondary_muscles": secondary,
        "equipment": equipment,
        "instructions": instructions,
        "difficulty": difficulty,
    }


def _food(name, category, calories, protein, carbs, fat, serving_size, is_indian=True):
    return {
        "name": name,
        "category": category,
        "calories_per_serving": calories,
        "protein_per_serving": protein,
        "carbs_per_serving": carbs,
        "fat_per_serving": fat,
        "serving_size": serving_size,
        "is_indian": is_indian,
    }


EXERCISES = [
    # Gym
    _exercise("Barbell Bench Press", "chest", ["chest"], ["shoulders", "triceps"], "barbell",
              "Lie on bench, grip bar wider than shoulders, lower to chest, press up", "intermediate"),
    _exercise("Overhead Press", "shoulders", ["shoulders"], ["triceps", "core"], "barbell",
              "Stand with feet hip-width, press bar overhead", "intermediate"),
    _exercise("Dumbbell Incline Press", "chest", ["upper_chest"], ["shoulders"], "dumbbells",
              "Set bench to 30-45 degrees, press dumbbells up and together", "intermediate"),
    _exercise("Close-Grip Bench Press", "triceps", ["triceps"], ["chest"], "barbell",
              "Grip bar with hands closer than shoulder width, focus on tricep engagement", "intermediate"),
    _exercise("Barbell Rows", "back", ["lats", "rhomboids"], ["biceps"], "barbell",
              "Hinge at hips, pull bar to lower chest", "intermediate"),
    _exercise("Lat Pulldowns", "back", ["lats"], ["biceps"], "cable_machine",
              "Pull bar down to chest, squeeze lats", "beginner"),
    _exercise("Leg Press", "legs", ["quadriceps", "glutes"], ["hamstrings"], "leg_press_machine",
              "Press weight with legs, control descent", "beginner"),
    _exercise("Squats", "legs", ["quadriceps", "glutes"], ["core"], "barbell",
              "Feet shoulder-width apart, squat down keeping chest up", "intermediate"),
    _exercise("Deadlifts", "legs", ["hamstrings", "glutes"], ["back", "core"], "barbell",
              "Hip hinge movement, keep bar close to body", "advanced"),

    # Home/Bodyweight Exercises
    _exercise("Push-ups", "chest", ["chest"], ["shoulders", "triceps"], "bodyweight",
              "Lower chest to floor, push up maintaining straight line", "beginner"),
    _exercise("Pull-ups", "back", ["lats"], ["biceps"], "pull_up_bar",
              "Hang from bar, pull chin over bar", "advanced"),
    _exercise("Bodyweight Squats", "legs", ["quadriceps", "glutes"], ["core"], "bodyweight",
              "Squat down as if sitting in chair, return to standing", "beginner"),
    _exercise("Lunges", "legs", ["quadriceps", "glutes"], ["hamstrings"], "bodyweight",
              "Step forward, lower hips until both knees at 90 degrees", "beginner"),
    _exercise("Pike Push-ups", "shoulders", ["shoulders"], ["triceps"], "bodyweight",
              "Hands and feet on ground in inverted V, lower head toward ground", "intermediate"),
    _exercise("Dips", "triceps", ["triceps"], ["chest"], "parallel_bars",
              "Lower body by bending arms, push back up", "intermediate"),
    _exercise("Mountain Climbers", "cardio", ["core"], ["shoulders", "legs"], "bodyweight",
              "Alternate bringing knees to chest in plank position", "beginner"),
    _exercise("Burpees", "cardio", ["full_body"], ["core"], "bodyweight",
              "Squat down, jump back to plank, push-up, jump forward, jump up", "intermediate"),

    # Calisthenics Progression
    _exercise("Incline Push-ups", "chest", ["chest"], ["shoulders", "triceps"], "bodyweight",
              "Push-ups with hands elevated on bench or step", "beginner"),
    _exercise("Knee Push-ups", "chest", ["chest"], ["shoulders", "triceps"], "bodyweight",
              "Push-ups performed on knees instead of toes", "beginner"),
    _exercise("Diamond Push-ups", "triceps", ["triceps"], ["chest"], "bodyweight",
              "Push-ups with hands in diamond shape", "advanced"),
    _exercise("Archer Push-ups", "chest", ["chest"], ["shoulders"], "bodyweight",
              "Push-up shifting weight to one side", "advanced"),
    _exercise("Assisted Pull-ups", "back", ["lats"], ["biceps"], "resistance_band",
              "Pull-ups with band assistance", "beginner"),
    _exercise("Negative Pull-ups", "back", ["lats"], ["biceps"], "pull_up_bar",
              "Jump to top position, lower slowly", "intermediate"),
    _exercise("Archer Pull-ups", "back", ["lats"], ["biceps"], "pull_up_bar",
              "Pull-up to one side, extending other arm", "advanced"),
    _exercise("Pistol Squats", "legs", ["quadriceps"], ["glutes", "core"], "bodyweight",
              "Single leg squat with other leg extended", "advanced"),
    _exercise("Assisted Pistol Squats", "legs", ["quadriceps"], ["glutes"], "bodyweight",
              "Single leg squat holding support", "intermediate"),
    _exercise("Jump Squats", "legs", ["quadriceps", "glutes"], ["calves"], "bodyweight",
              "Explosive squat with jump at top", "intermediate"),
    _exercise("Handstand Push-ups", "shoulders", ["shoulders"], ["triceps"], "bodyweight",
              "Push-ups in handstand position against wall", "advanced"),
    _exercise("Wall Handstand Hold", "shoulders", ["shoulders"], ["core"], "bodyweight",
              "Hold handstand position against wall", "intermediate"),
    _exercise("L-Sit", "core", ["core"], ["shoulders"], "parallel_bars",
              "Sit with legs extended parallel to ground", "advanced"),
    _exercise("Plank", "core", ["core"], ["shoulders"], "bodyweight",
              "Hold straight line from head to heels", "beginner"),
    _exercise("Side Plank", "core", ["core"], ["shoulders"], "bodyweight",
              "Hold side position on one arm", "intermediate"),
]

FOOD_ITEMS = [
    # Morning Snacks
    _food("Almonds", "indian_snack", 139, 5, 3, 12, "20 pieces", is_indian=False),
    _food("Green Tea", "beverages", 2, 0, 0, 0, "1 cup"),
    _food("Apple", "fruits", 78, 0, 21, 0, "1 medium (150g)", is_indian=False),

    # Breakfast
    _food("Aloo Paratha", "indian_main", 160, 4, 24, 6, "1 piece"),
    _food("Fresh Curd", "indian_main", 98, 8, 12, 3, "1 bowl (150g)"),
    _food("Mixed Pickle", "indian_snack", 25, 0, 2, 2, "1 tablespoon"),
    _food("Chai with Milk & Sugar", "beverages", 42, 2, 6, 2, "1 cup"),

    # Lunch Items
    _food("Basmati Rice", "indian_main", 205, 4, 45, 0, "1 cup cooked (150g)"),
    _food("Dal Tadka", "indian_main", 184, 12, 28, 4, "1 bowl (200g)"),
    _food("Mixed Veg Curry", "indian_main", 125, 4, 18, 5, "1 bowl (150g)"),
    _food("Mixed Salad", "indian_snack", 45, 2, 8, 1, "1 bowl with lemon dressing"),
    _food("Cucumber Raita", "indian_main", 66, 4, 8, 2, "Small bowl (100g)"),

    # Snacks
    _food("Banana", "fruits", 89, 1, 23, 0, "1 medium (120g)", is_indian=False),
    _food("Masala Chai", "beverages", 67, 3, 9, 3, "1 cup"),
    _food("Samosa", "indian_snack", 115, 3, 12, 6, "1 piece"),
    _food("Ginger Tea", "beverages", 65, 2, 8, 3, "1 cup"),

    # Dinner
    _food("Whole Wheat Chapati", "indian_main", 80, 3, 15, 1, "1 piece"),
    _food("Chicken Curry", "indian_main", 190, 25, 8, 7, "1 bowl (150g)"),
]
