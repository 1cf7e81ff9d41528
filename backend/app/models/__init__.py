# Import every model so Base.metadata is complete (Alembic, create_all)
from app.models.workout import Workout
from app.models.exercise import Exercise
from app.models.workout_exercise import WorkoutExercise
from app.models.exercise_set import ExerciseSet

__all__ = ["Workout", "Exercise", "WorkoutExercise", "ExerciseSet"]
