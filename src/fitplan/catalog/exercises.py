"""Built-in exercise libraries.

Three groups live here:
- Main-section libraries keyed by workout type (gym, home, cardio, strength)
- Warm-up and cool-down micro-exercises with fixed minute costs
- Focus-session libraries keyed by fitness level and focus area
"""

from __future__ import annotations

import re
from typing import Optional

from fitplan.catalog.models import (
    ExerciseTemplate,
    FitnessLevel,
    FocusArea,
    MicroExercise,
    Reps,
    WorkoutType,
)


def _slug(name: str) -> str:
    return re.sub(r"[^a-z0-9]+", "-", name.lower()).strip("-")


def _ex(
    category: str,
    name: str,
    sets: int,
    reps: Optional[Reps],
    rest: int,
    equipment: str,
    instructions: str,
    difficulty: str,
    duration: Optional[int] = None,
) -> ExerciseTemplate:
    """Create an exercise template with an id derived from category and name."""
    return ExerciseTemplate(
        id=f"{category}-{_slug(name)}",
        name=name,
        category=category,
        sets=sets,
        reps=reps,
        duration=duration,
        rest_seconds=rest,
        equipment=equipment,
        instructions=instructions,
        difficulty=difficulty,
    )


def _micro(prefix: str, name: str, minutes: int, instructions: str, difficulty: str = "easy") -> MicroExercise:
    return MicroExercise(
        id=f"{prefix}-{_slug(name)}",
        name=name,
        minutes=minutes,
        instructions=instructions,
        difficulty=difficulty,
    )


# =============================================================================
# Main-section libraries
# =============================================================================

GYM_EXERCISES = (
    _ex("gym", "Barbell Bench Press", 4, 10, 90, "barbell", "Lower bar to chest, press up explosively", "moderate"),
    _ex("gym", "Barbell Squats", 4, 12, 90, "barbell", "Depth to parallel, drive through heels", "hard"),
    _ex("gym", "Deadlifts", 4, 8, 120, "barbell", "Keep back straight, hinge at hips", "hard"),
    _ex("gym", "Lat Pulldowns", 3, 12, 60, "machine", "Pull to upper chest, squeeze shoulder blades", "moderate"),
    _ex("gym", "Cable Rows", 3, 12, 60, "cable", "Pull to abdomen, keep torso stable", "moderate"),
    _ex("gym", "Leg Press", 3, 15, 60, "machine", "Full range of motion, controlled descent", "moderate"),
    _ex("gym", "Dumbbell Shoulder Press", 3, 10, 60, "dumbbell", "Press overhead, controlled descent", "moderate"),
    _ex("gym", "Tricep Dips", 3, 12, 45, "dip_bar", "Lower until upper arms parallel to ground", "moderate"),
    _ex("gym", "Barbell Curls", 3, 12, 45, "barbell", "Curl to shoulders, no swinging", "easy"),
    _ex("gym", "Leg Curls", 3, 12, 45, "machine", "Curl heels to glutes, squeeze at top", "easy"),
)

HOME_EXERCISES = (
    _ex("home", "Push-ups", 3, 15, 45, "none", "Body in straight line, chest to ground", "moderate"),
    _ex("home", "Bodyweight Squats", 3, 20, 45, "none", "Sit back, knees over toes", "easy"),
    _ex("home", "Lunges", 3, 12, 45, "none", "Step forward, both knees at 90 degrees", "moderate"),
    _ex("home", "Plank", 3, "60 seconds", 45, "none", "Hold straight line from head to heels", "moderate"),
    _ex("home", "Mountain Climbers", 3, 20, 30, "none", "Drive knees to chest alternately", "hard"),
    _ex("home", "Burpees", 3, 10, 60, "none", "Jump back, push-up, jump up", "hard"),
    _ex("home", "Glute Bridges", 3, 15, 30, "none", "Lift hips, squeeze glutes at top", "easy"),
    _ex("home", "Tricep Dips (Chair)", 3, 12, 45, "chair", "Use chair or bench, lower body", "moderate"),
    _ex("home", "Wall Sit", 3, "45 seconds", 45, "none", "Back against wall, thighs parallel to ground", "moderate"),
    _ex("home", "Superman Hold", 3, "30 seconds", 30, "none", "Lift arms and legs simultaneously", "moderate"),
)

CARDIO_EXERCISES = (
    _ex("cardio", "Running Intervals", 1, None, 0, "none", "2 min moderate, 1 min sprint, repeat", "hard", duration=10),
    _ex("cardio", "Jump Rope", 4, None, 60, "jump_rope", "Maintain steady rhythm, light on feet", "moderate", duration=3),
    _ex("cardio", "High Knees", 4, 30, 30, "none", "Drive knees to hip level, fast pace", "hard"),
    _ex("cardio", "Burpees", 4, 15, 45, "none", "Full range, jump explosively", "hard"),
    _ex("cardio", "Box Jumps", 4, 12, 60, "box", "Jump onto stable surface, land softly", "hard"),
    _ex("cardio", "Mountain Climbers", 4, 40, 30, "none", "Fast alternating knees to chest", "hard"),
    _ex("cardio", "Jumping Jacks", 4, 50, 30, "none", "Full arm extension overhead", "moderate"),
    _ex("cardio", "Shadow Boxing", 4, None, 45, "none", "Punches with footwork, stay light", "moderate", duration=3),
    _ex("cardio", "Stair Climbing", 1, None, 0, "stairs", "Continuous climb, steady pace", "moderate", duration=15),
    _ex("cardio", "Bicycle Crunches", 4, 30, 30, "none", "Alternate elbow to opposite knee", "moderate"),
)

STRENGTH_EXERCISES = (
    _ex("strength", "Push-ups", 4, 15, 60, "none", "Full range, body straight", "moderate"),
    _ex("strength", "Pull-ups", 4, 8, 90, "pullup_bar", "Chin over bar, controlled descent", "hard"),
    _ex("strength", "Dumbbell Rows", 4, 12, 60, "dumbbell", "Pull to hip, squeeze back", "moderate"),
    _ex("strength", "Goblet Squats", 4, 15, 60, "dumbbell", "Hold weight at chest, squat deep", "moderate"),
    _ex("strength", "Romanian Deadlifts", 4, 12, 60, "dumbbell", "Hinge at hips, feel hamstring stretch", "moderate"),
    _ex("strength", "Overhead Press", 4, 10, 60, "dumbbell", "Press weight overhead, lock out", "moderate"),
    _ex("strength", "Dumbbell Chest Press", 4, 12, 60, "dumbbell", "Press up and together, squeeze chest", "moderate"),
    _ex("strength", "Walking Lunges", 3, 20, 45, "dumbbell", "Step forward with weights, alternate legs", "moderate"),
    _ex("strength", "Plank to Push-up", 3, 10, 45, "none", "Alternate from plank to push-up position", "hard"),
    _ex("strength", "Farmer's Carry", 3, None, 60, "dumbbell", "Walk with heavy weights, upright posture", "moderate", duration=2),
)

WORKOUT_LIBRARIES: dict[WorkoutType, tuple[ExerciseTemplate, ...]] = {
    WorkoutType.GYM: GYM_EXERCISES,
    WorkoutType.HOME: HOME_EXERCISES,
    WorkoutType.CARDIO: CARDIO_EXERCISES,
    WorkoutType.STRENGTH: STRENGTH_EXERCISES,
}


# =============================================================================
# Warm-up / cool-down
# =============================================================================

WARMUP_EXERCISES = (
    _micro("warmup", "Jumping Jacks", 2, "Keep movements controlled, land softly"),
    _micro("warmup", "Arm Circles", 1, "Forward and backward, gradually increase range"),
    _micro("warmup", "Leg Swings", 2, "Front to back, then side to side"),
    _micro("warmup", "Hip Circles", 1, "Clockwise and counter-clockwise"),
    _micro("warmup", "High Knees", 2, "Bring knees to hip level, pump arms", "moderate"),
    _micro("warmup", "Butt Kicks", 2, "Kick heels to glutes, stay on balls of feet", "moderate"),
    _micro("warmup", "Torso Twists", 1, "Rotate from core, keep hips stable"),
    _micro("warmup", "Shoulder Rolls", 1, "Forward and backward, full range of motion"),
    _micro("warmup", "Walking Lunges", 2, "Step forward, knee at 90 degrees", "moderate"),
    _micro("warmup", "Cat-Cow Stretch", 1, "Alternate arching and rounding spine"),
)

COOLDOWN_EXERCISES = (
    _micro("cooldown", "Standing Quad Stretch", 1, "Hold each leg, keep knees together"),
    _micro("cooldown", "Hamstring Stretch", 1, "Reach for toes, keep back straight"),
    _micro("cooldown", "Chest Stretch", 1, "Clasp hands behind back, lift chest"),
    _micro("cooldown", "Shoulder Stretch", 1, "Pull arm across body, hold"),
    _micro("cooldown", "Tricep Stretch", 1, "Reach arm overhead, pull elbow"),
    _micro("cooldown", "Hip Flexor Stretch", 1, "Lunge position, push hips forward"),
    _micro("cooldown", "Spinal Twist", 1, "Seated or lying, rotate spine gently"),
    _micro("cooldown", "Child's Pose", 2, "Sit back on heels, arms extended forward"),
    _micro("cooldown", "Deep Breathing", 2, "Inhale 4 counts, hold 4, exhale 6"),
    _micro("cooldown", "Calf Stretch", 1, "Push against wall, heel down"),
)


# =============================================================================
# Focus-session libraries (fitness level x focus area)
# =============================================================================

def _session(level: FitnessLevel, focus: FocusArea, name: str, equipment: str, tips: str) -> ExerciseTemplate:
    """Session exercises carry a generic baseline so they can also serve as
    the main-section safe default."""
    reps: Reps = "30 seconds" if "plank" in name.lower() else 12
    return _ex(f"{level.value}-{focus.value}", name, 3, reps, 45, equipment, tips, _LEVEL_DIFFICULTY[level])


_LEVEL_DIFFICULTY = {
    FitnessLevel.BEGINNER: "easy",
    FitnessLevel.INTERMEDIATE: "moderate",
    FitnessLevel.ADVANCED: "hard",
}


_B, _I, _A = FitnessLevel.BEGINNER, FitnessLevel.INTERMEDIATE, FitnessLevel.ADVANCED
_FULL, _UPPER, _LOWER, _CORE = FocusArea.FULL_BODY, FocusArea.UPPER, FocusArea.LOWER, FocusArea.CORE

SESSION_EXERCISES: dict[tuple[FitnessLevel, FocusArea], tuple[ExerciseTemplate, ...]] = {
    (_B, _FULL): (
        _session(_B, _FULL, "Bodyweight Squats", "none", "Keep your back straight and knees behind toes. Focus on controlled movements."),
        _session(_B, _FULL, "Knee Push-ups", "none", "Keep your core engaged and lower yourself slowly. Maintain a straight line from knees to head."),
        _session(_B, _FULL, "Plank", "none", "Keep your body in a straight line from head to heels. Engage your core throughout."),
        _session(_B, _FULL, "Walking Lunges", "none", "Step forward and lower your hips until both knees are bent at 90 degrees."),
        _session(_B, _FULL, "Glute Bridges", "none", "Squeeze your glutes at the top and keep your core tight. Push through your heels."),
    ),
    (_B, _UPPER): (
        _session(_B, _UPPER, "Wall Push-ups", "none", "Stand arm's length from wall, lean in and push back. Keep body straight."),
        _session(_B, _UPPER, "Arm Circles", "none", "Extend arms to sides and make small circles. Gradually increase size."),
        _session(_B, _UPPER, "Shoulder Taps", "none", "In plank position, tap opposite shoulder while keeping hips stable."),
        _session(_B, _UPPER, "Tricep Dips (Chair)", "chair", "Keep elbows close to body and lower yourself slowly."),
    ),
    (_B, _LOWER): (
        _session(_B, _LOWER, "Bodyweight Squats", "none", "Keep chest up and weight in heels. Go as low as comfortable."),
        _session(_B, _LOWER, "Calf Raises", "none", "Rise up on toes, hold briefly, then lower slowly."),
        _session(_B, _LOWER, "Side Leg Raises", "none", "Keep leg straight and lift to the side without leaning."),
        _session(_B, _LOWER, "Step-ups", "chair", "Step fully onto chair/box and drive through heel."),
    ),
    (_B, _CORE): (
        _session(_B, _CORE, "Basic Crunches", "none", "Keep lower back pressed to floor. Lift shoulders off ground."),
        _session(_B, _CORE, "Plank", "none", "Hold body in straight line. Don't let hips sag."),
        _session(_B, _CORE, "Dead Bug", "none", "Keep lower back pressed to floor while moving limbs."),
        _session(_B, _CORE, "Bird Dog", "none", "Extend opposite arm and leg while maintaining balance."),
    ),
    (_I, _FULL): (
        _session(_I, _FULL, "Goblet Squats", "dumbbell", "Hold weight at chest level. Keep elbows inside knees."),
        _session(_I, _FULL, "Standard Push-ups", "none", "Lower chest to ground with elbows at 45 degrees. Keep core tight."),
        _session(_I, _FULL, "Dumbbell Rows", "dumbbell", "Pull weight to hip, keeping elbow close to body."),
        _session(_I, _FULL, "Overhead Press", "dumbbell", "Press weights overhead without arching back excessively."),
        _session(_I, _FULL, "Romanian Deadlifts", "dumbbell", "Hinge at hips, keep back straight, feel stretch in hamstrings."),
    ),
    (_I, _UPPER): (
        _session(_I, _UPPER, "Dumbbell Bench Press", "dumbbell", "Lower weights to chest level, press up explosively."),
        _session(_I, _UPPER, "Assisted Pull-ups", "pullup_bar", "Focus on pulling with back muscles, not just arms."),
        _session(_I, _UPPER, "Parallel Bar Dips", "dip_bar", "Lower until upper arms are parallel to ground."),
        _session(_I, _UPPER, "Dumbbell Shoulder Press", "dumbbell", "Press weights overhead in controlled motion."),
        _session(_I, _UPPER, "Dumbbell Bicep Curls", "dumbbell", "Keep elbows stationary, curl weights to shoulders."),
    ),
    (_I, _LOWER): (
        _session(_I, _LOWER, "Goblet Squats", "dumbbell", "Hold dumbbell at chest, squat deep with good form."),
        _session(_I, _LOWER, "Bulgarian Split Squats", "dumbbell", "Rear foot elevated, lower front knee to 90 degrees."),
        _session(_I, _LOWER, "Dumbbell Lunges", "dumbbell", "Hold weights at sides, step forward into lunge."),
        _session(_I, _LOWER, "Single Leg Deadlifts", "dumbbell", "Balance on one leg, hinge at hip with straight back."),
    ),
    (_I, _CORE): (
        _session(_I, _CORE, "Russian Twists", "dumbbell", "Rotate torso side to side while keeping feet elevated."),
        _session(_I, _CORE, "Mountain Climbers", "none", "Drive knees to chest rapidly while in plank position."),
        _session(_I, _CORE, "Leg Raises", "none", "Keep lower back pressed down, raise legs slowly."),
        _session(_I, _CORE, "Bicycle Crunches", "none", "Rotate torso to bring elbow to opposite knee."),
    ),
    (_A, _FULL): (
        _session(_A, _FULL, "Barbell Squats", "barbell", "Bar on upper back, squat below parallel with controlled form."),
        _session(_A, _FULL, "Barbell Deadlifts", "barbell", "Lift with legs first, keep bar close to body throughout."),
        _session(_A, _FULL, "Barbell Bench Press", "barbell", "Lower bar to chest, press up explosively, maintain arch."),
        _session(_A, _FULL, "Pull-ups", "pullup_bar", "Full range of motion, chin over bar, control the descent."),
        _session(_A, _FULL, "Barbell Overhead Press", "barbell", "Press from shoulders to overhead, engage core for stability."),
    ),
    (_A, _UPPER): (
        _session(_A, _UPPER, "Weighted Pull-ups", "pullup_bar", "Add weight via belt, maintain strict form throughout."),
        _session(_A, _UPPER, "Barbell Bench Press", "barbell", "Control the bar down, explosive press up."),
        _session(_A, _UPPER, "Weighted Dips", "dip_bar", "Add weight, lower to full depth, press up powerfully."),
        _session(_A, _UPPER, "Barbell Rows", "barbell", "Pull bar to lower chest, squeeze shoulder blades together."),
        _session(_A, _UPPER, "Overhead Press", "barbell", "Strict press from shoulders, no leg drive."),
    ),
    (_A, _LOWER): (
        _session(_A, _LOWER, "Barbell Back Squats", "barbell", "Bar high on traps, squat to depth, drive up through heels."),
        _session(_A, _LOWER, "Barbell Deadlifts", "barbell", "Hip hinge pattern, explosive pull, control the descent."),
        _session(_A, _LOWER, "Bulgarian Split Squats", "barbell", "Heavy load, rear foot elevated, focus on front leg."),
        _session(_A, _LOWER, "Leg Press", "leg_press", "Full range of motion, push through heels, control the weight."),
        _session(_A, _LOWER, "Weighted Calf Raises", "barbell", "Full extension at top, stretch at bottom."),
    ),
    (_A, _CORE): (
        _session(_A, _CORE, "Hanging Leg Raises", "pullup_bar", "Raise legs to parallel or higher, control the swing."),
        _session(_A, _CORE, "Ab Wheel Rollouts", "ab_wheel", "Roll out slowly, maintain tension in core throughout."),
        _session(_A, _CORE, "Weighted Russian Twists", "dumbbell", "Heavy weight, explosive rotation, maintain form."),
        _session(_A, _CORE, "Dragon Flags", "bench", "Advanced movement, keep body straight, lower with control."),
    ),
}
