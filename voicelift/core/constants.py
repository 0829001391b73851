"""Static vocabulary, rule tables and limits for the voice engine."""

from __future__ import annotations

QUICK_START = "quick_start"
GUIDED = "guided"
MODES = (QUICK_START, GUIDED)

# Spoken homophones that speech-to-text returns instead of digits.
NUMBER_HOMOPHONES = [
    ("1", ["won", "one"]),
    ("2", ["to", "too", "two"]),
    ("3", ["three"]),
    ("4", ["for", "four"]),
    ("5", ["five"]),
    ("6", ["six"]),
    ("7", ["seven"]),
    ("8", ["ate", "eight"]),
    ("9", ["nine"]),
]

# Apostrophe plurals that speech-to-text emits for count words.
PLURAL_SMOOTHING = ["rep", "kilo", "pound", "set", "lb", "kg"]

COMPLETION_PHRASES = [
    "finished that",
    "that's it",
    "all done",
    "got it",
    "completed",
    "finished",
    "complete",
    "finish",
    "done",
]

SKIP_SET = "skip_set"
SKIP_EXERCISE = "skip_exercise"

# Longest phrases first so "skip this set" never reads as "skip".
NAVIGATION_RULES = [
    (SKIP_SET, ["skip this set", "skip set", "next set"]),
    (
        SKIP_EXERCISE,
        [
            "skip this exercise",
            "skip exercise",
            "next exercise",
            "go to next",
            "move to next",
            "next one",
            "skip it",
            "skip",
            "next",
        ],
    ),
]

# Transcription noise that must never become an exercise.
NON_EXERCISE_WORDS = {
    "dollar",
    "dollars",
    "bucks",
    "cents",
    "euro",
    "euros",
    "money",
    "cash",
    "price",
    "cost",
    "costs",
    "pay",
    "paid",
    "payment",
    "bank",
    "credit",
    "debt",
    "loan",
    "tax",
    "taxes",
    "stock",
    "stocks",
    "invest",
    "investment",
    "budget",
    "bitcoin",
    "crypto",
}

# Body-part and movement-pattern words that make a phrase look like an exercise.
EXERCISE_KEYWORDS = {
    "ab",
    "abs",
    "arm",
    "back",
    "barbell",
    "bench",
    "bicep",
    "biceps",
    "bridge",
    "cable",
    "calf",
    "carry",
    "chest",
    "chin",
    "clean",
    "core",
    "crunch",
    "curl",
    "deadlift",
    "delt",
    "dip",
    "dumbbell",
    "extension",
    "fly",
    "flye",
    "glute",
    "hamstring",
    "hip",
    "jerk",
    "kettlebell",
    "kickback",
    "lat",
    "leg",
    "lunge",
    "machine",
    "plank",
    "press",
    "pull",
    "pulldown",
    "pullover",
    "pullup",
    "push",
    "pushdown",
    "pushup",
    "quad",
    "raise",
    "rollout",
    "row",
    "shoulder",
    "shrug",
    "situp",
    "snatch",
    "squat",
    "step",
    "swing",
    "thrust",
    "trap",
    "tricep",
    "triceps",
    "twist",
}

UNIT_WORDS = {
    "kg",
    "kgs",
    "kilo",
    "kilos",
    "kilogram",
    "kilograms",
    "lb",
    "lbs",
    "pound",
    "pounds",
}

REP_WORDS = {"rep", "reps", "times", "revs", "wraps", "sets", "set"}

# Tokens dropped before an utterance is matched against exercise names.
QUERY_STOPWORDS = {
    "a",
    "an",
    "and",
    "at",
    "by",
    "did",
    "do",
    "for",
    "i",
    "just",
    "let's",
    "log",
    "now",
    "of",
    "okay",
    "ok",
    "please",
    "so",
    "the",
    "then",
    "um",
    "uh",
    "with",
    "x",
    "yeah",
}

# Thresholds
GUIDED_THRESHOLD = 0.6
QUICK_START_THRESHOLD = 0.5
RECENT_THRESHOLD = 0.4
RECENT_HIGH_CONFIDENCE = 0.85
LIBRARY_QUICK_THRESHOLD = 0.4
SUGGESTION_THRESHOLD = 0.2
MAX_SUGGESTIONS = 3
MAX_CANDIDATE_WORDS = 3

HIGH_CONFIDENCE_SCORE = 0.8
HIGH_REPS_LIMIT = 50
HIGH_WEIGHT_LIMIT = 350
BODYWEIGHT_WEIGHT_LIMIT = 10

# Confirmation reasons
MISSING_REPS = "missing_reps"
HIGH_REPS = "high_reps"
MISSING_WEIGHT = "missing_weight"
WEIGHT_ON_BODYWEIGHT = "weight_on_bodyweight"
WEIGHT_UNUSUALLY_HIGH = "weight_unusually_high"
WEIGHT_ZERO = "weight_zero"
NO_PREVIOUS_SET = "no_previous_set"
NEW_EXERCISE = "new_exercise"

# Reasons a high-confidence result never clears.
PROTECTED_REASONS = {WEIGHT_UNUSUALLY_HIGH, HIGH_REPS, WEIGHT_ON_BODYWEIGHT, NEW_EXERCISE}

MUSCLE_GROUPS = {
    "chest": "Chest",
    "back": "Back",
    "legs": "Legs",
    "shoulders": "Shoulders",
    "arms": "Arms",
    "core": "Core",
    "full-body": "Full Body",
}

EQUIPMENT_TYPES = [
    "Barbell",
    "Dumbbell",
    "Machine",
    "Cable",
    "Bodyweight",
    "Kettlebell",
    "Resistance Band",
    "Other",
]

# Ordered keyword rules used to place an auto-saved exercise into a group.
GROUP_RULES = [
    ("chest", ["chest", "bench", "fly", "flye", "pec"]),
    ("back", ["back", "row", "pull", "deadlift", "lat", "shrug"]),
    ("legs", ["leg", "squat", "lunge", "calf", "glute", "hip", "hamstring", "quad"]),
    ("shoulders", ["shoulder", "overhead", "lateral", "raise", "delt"]),
    ("arms", ["curl", "tricep", "bicep", "pushdown", "kickback", "skull"]),
    ("core", ["core", "ab", "abs", "plank", "crunch", "twist", "situp"]),
    ("chest", ["press", "push", "pushup", "dip"]),
]

EQUIPMENT_RULES = [
    ("Barbell", ["barbell"]),
    ("Dumbbell", ["dumbbell", "db"]),
    ("Kettlebell", ["kettlebell", "kb"]),
    ("Cable", ["cable"]),
    ("Machine", ["machine"]),
    ("Resistance Band", ["band"]),
    ("Bodyweight", ["pushup", "pullup", "chinup", "situp", "dip", "plank", "crunch", "bodyweight"]),
]
