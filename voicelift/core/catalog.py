"""Core exercise catalog, grouped by muscle group.

Rows are ``(name, aliases, equipment, bodyweight)``. The catalog is fixed at
build time; user exercises live in the custom store.
"""

from __future__ import annotations

from typing import List

from voicelift.core.models import ExerciseDefinition

CATALOG = [
    (
        "chest",
        [
            ("Bench Press", ["bench press", "barbell bench press", "flat bench"], "Barbell", False),
            ("Incline Bench Press", ["incline bench press", "incline barbell bench press"], "Barbell", False),
            ("Decline Bench Press", ["decline bench press", "decline barbell bench press"], "Barbell", False),
            ("Close-Grip Bench Press", ["close grip bench press", "close grip bench", "cg bench"], "Barbell", False),
            ("Wide-Grip Bench Press", ["wide grip bench press", "wide grip bench"], "Barbell", False),
            ("Dumbbell Press", ["dumbbell bench press", "db bench press", "dumbbell flat press"], "Dumbbell", False),
            ("Incline Dumbbell Press", ["incline dumbbell press", "incline db press"], "Dumbbell", False),
            ("Decline Dumbbell Press", ["decline dumbbell press", "decline db press"], "Dumbbell", False),
            ("Dumbbell Flyes", ["dumbbell flyes", "db flyes", "chest flyes"], "Dumbbell", False),
            ("Incline Dumbbell Flyes", ["incline dumbbell flyes", "incline flyes"], "Dumbbell", False),
            ("Cable Flyes", ["cable flyes", "cable chest flyes"], "Cable", False),
            ("Chest Dips", ["chest dips", "weighted chest dips"], "Bodyweight", True),
            ("Push-ups", ["push ups", "pushups", "push up"], "Bodyweight", True),
            ("Incline Push-ups", ["incline push ups", "incline pushups"], "Bodyweight", True),
            ("Decline Push-ups", ["decline push ups", "decline pushups"], "Bodyweight", True),
            ("Diamond Push-ups", ["diamond push ups", "diamond pushups"], "Bodyweight", True),
            ("Machine Chest Press", ["machine chest press", "chest press machine"], "Machine", False),
            ("Pec Deck", ["pec deck", "pec deck fly"], "Machine", False),
            ("Cable Crossover", ["cable crossover", "cable crossovers"], "Cable", False),
        ],
    ),
    (
        "back",
        [
            ("Deadlift", ["deadlift", "conventional deadlift"], "Barbell", False),
            ("Romanian Deadlift", ["romanian deadlift", "rdl", "romanian deadlifts"], "Barbell", False),
            ("Sumo Deadlift", ["sumo deadlift", "sumo dl"], "Barbell", False),
            ("Trap Bar Deadlift", ["trap bar deadlift", "hex bar deadlift"], "Barbell", False),
            ("Barbell Rows", ["barbell rows", "barbell row", "bent over row", "barbell bent over row"], "Barbell", False),
            ("Pendlay Row", ["pendlay row", "pendlay rows"], "Barbell", False),
            ("Dumbbell Rows", ["dumbbell rows", "db rows", "one arm row", "one arm dumbbell row"], "Dumbbell", False),
            ("Chest Supported Row", ["chest supported row", "chest supported rows"], "Dumbbell", False),
            ("T-Bar Rows", ["t-bar rows", "t bar row", "tbar row"], "Barbell", False),
            ("Cable Rows", ["cable rows", "seated cable row", "seated row"], "Cable", False),
            ("Lat Pulldown", ["lat pulldown", "lat pull down", "wide grip lat pulldown"], "Cable", False),
            ("Close-Grip Lat Pulldown", ["close grip lat pulldown", "close grip pulldown"], "Cable", False),
            ("Pull-ups", ["pull ups", "pullups", "pull up"], "Bodyweight", True),
            ("Chin-ups", ["chin ups", "chinups", "chin up"], "Bodyweight", True),
            ("Wide-Grip Pull-ups", ["wide grip pull ups", "wide pullups"], "Bodyweight", True),
            ("Weighted Pull-ups", ["weighted pull ups", "weighted pullups"], "Bodyweight", True),
            ("Face Pulls", ["face pulls", "face pull"], "Cable", False),
            ("Barbell Shrugs", ["barbell shrugs", "bb shrugs", "shrugs"], "Barbell", False),
            ("Dumbbell Shrugs", ["dumbbell shrugs", "db shrugs"], "Dumbbell", False),
            ("Hyperextensions", ["hyperextensions", "back extensions"], "Bodyweight", False),
            ("Good Mornings", ["good mornings", "good morning"], "Barbell", False),
            ("Machine Row", ["machine row", "rowing machine"], "Machine", False),
            ("Kettlebell Row", ["kettlebell row", "kb row"], "Kettlebell", False),
        ],
    ),
    (
        "legs",
        [
            ("Squat", ["squat", "back squat", "barbell squat", "squats"], "Barbell", False),
            ("Front Squat", ["front squat", "front squats"], "Barbell", False),
            ("Overhead Squat", ["overhead squat", "oh squat"], "Barbell", False),
            ("Goblet Squat", ["goblet squat", "goblet squats"], "Dumbbell", False),
            ("Bulgarian Split Squat", ["bulgarian split squat", "split squat", "bulgarian squat"], "Dumbbell", False),
            ("Leg Press", ["leg press", "leg press machine"], "Machine", False),
            ("Hack Squat", ["hack squat", "hack squats"], "Machine", False),
            ("Leg Extension", ["leg extension", "leg extensions", "quad extension"], "Machine", False),
            ("Leg Curl", ["leg curl", "leg curls", "hamstring curl", "hamstring curls"], "Machine", False),
            ("Dumbbell RDL", ["dumbbell rdl", "db rdl", "dumbbell romanian deadlift"], "Dumbbell", False),
            ("Lunges", ["lunges", "lunge"], "Dumbbell", False),
            ("Walking Lunges", ["walking lunges", "walking lunge"], "Dumbbell", False),
            ("Reverse Lunges", ["reverse lunges", "reverse lunge"], "Dumbbell", False),
            ("Calf Raises", ["calf raises", "calf raise", "standing calf raises"], "Dumbbell", False),
            ("Seated Calf Raises", ["seated calf raises", "seated calf raise"], "Machine", False),
            ("Hip Thrust", ["hip thrust", "hip thrusts"], "Barbell", False),
            ("Step-ups", ["step ups", "box step ups"], "Dumbbell", False),
            ("Wall Sit", ["wall sit", "wall sits"], "Bodyweight", True),
            ("Jump Squats", ["jump squats", "jump squat"], "Bodyweight", True),
            ("Pistol Squats", ["pistol squats", "pistol squat"], "Bodyweight", True),
            ("Glute Bridge", ["glute bridge", "glute bridges"], "Bodyweight", True),
            ("Stiff-Leg Deadlift", ["stiff leg deadlift", "stiff leg dl"], "Barbell", False),
            ("Kettlebell Goblet Squat", ["kettlebell goblet squat", "kb goblet squat"], "Kettlebell", False),
        ],
    ),
    (
        "shoulders",
        [
            ("Overhead Press", ["overhead press", "ohp", "barbell overhead press", "strict press"], "Barbell", False),
            ("Push Press", ["push press"], "Barbell", False),
            ("Dumbbell Shoulder Press", ["dumbbell shoulder press", "db shoulder press"], "Dumbbell", False),
            ("Seated Dumbbell Press", ["seated dumbbell press", "seated db press"], "Dumbbell", False),
            ("Arnold Press", ["arnold press", "arnold presses"], "Dumbbell", False),
            ("Shoulder Press", ["shoulder press", "machine shoulder press"], "Machine", False),
            ("Lateral Raises", ["lateral raises", "side raises", "lateral raise"], "Dumbbell", False),
            ("Cable Lateral Raises", ["cable lateral raises", "cable side raises"], "Cable", False),
            ("Front Raises", ["front raises", "front raise"], "Dumbbell", False),
            ("Rear Delt Flyes", ["rear delt flyes", "rear delt fly", "reverse flyes"], "Dumbbell", False),
            ("Upright Rows", ["upright rows", "upright row"], "Barbell", False),
            ("Pike Push-ups", ["pike push ups", "pike pushups"], "Bodyweight", True),
            ("Handstand Push-ups", ["handstand push ups", "handstand pushups"], "Bodyweight", True),
            ("Kettlebell Press", ["kettlebell press", "kb press"], "Kettlebell", False),
        ],
    ),
    (
        "arms",
        [
            ("Barbell Curl", ["barbell curl", "barbell curls", "bb curl"], "Barbell", False),
            ("Dumbbell Curl", ["dumbbell curl", "db curl", "db curls", "dumbbell bicep curl"], "Dumbbell", False),
            ("Bicep Curls", ["bicep curls", "bicep curl", "curls"], "Dumbbell", False),
            ("Hammer Curl", ["hammer curl", "hammer curls"], "Dumbbell", False),
            ("Preacher Curl", ["preacher curl", "preacher curls"], "Barbell", False),
            ("Cable Curl", ["cable curl", "cable curls", "cable bicep curl"], "Cable", False),
            ("Concentration Curl", ["concentration curl", "concentration curls"], "Dumbbell", False),
            ("Tricep Dips", ["tricep dips", "bench dips", "dips"], "Bodyweight", True),
            ("Tricep Pushdown", ["tricep pushdown", "pushdown", "rope pushdown"], "Cable", False),
            ("Tricep Extensions", ["tricep extensions", "tricep extension", "overhead tricep extension"], "Dumbbell", False),
            ("Skull Crushers", ["skull crushers", "lying tricep extensions"], "Barbell", False),
            ("Tricep Kickback", ["tricep kickback", "tricep kickbacks"], "Dumbbell", False),
            ("French Press", ["french press", "french presses"], "Dumbbell", False),
        ],
    ),
    (
        "core",
        [
            ("Planks", ["plank", "planks", "forearm plank"], "Bodyweight", True),
            ("Side Planks", ["side plank", "side planks"], "Bodyweight", True),
            ("Crunches", ["crunches", "crunch", "ab crunch"], "Bodyweight", True),
            ("Bicycle Crunches", ["bicycle crunches", "bicycle crunch"], "Bodyweight", True),
            ("Russian Twists", ["russian twists", "russian twist"], "Bodyweight", True),
            ("Leg Raises", ["leg raises", "lying leg raises"], "Bodyweight", True),
            ("Hanging Leg Raises", ["hanging leg raises", "hanging leg raise"], "Bodyweight", True),
            ("Cable Crunches", ["cable crunches", "cable crunch"], "Cable", False),
            ("Ab Wheel", ["ab wheel", "ab rollout", "ab rollouts"], "Bodyweight", True),
            ("Mountain Climbers", ["mountain climbers", "mountain climber"], "Bodyweight", True),
            ("Dead Bug", ["dead bug", "dead bugs"], "Bodyweight", True),
            ("Toes to Bar", ["toes to bar", "ttb"], "Bodyweight", True),
            ("Hollow Body Hold", ["hollow body hold", "hollow hold"], "Bodyweight", True),
            ("Pallof Press", ["pallof press", "pallof presses"], "Cable", False),
        ],
    ),
    (
        "full-body",
        [
            ("Burpees", ["burpees", "burpee"], "Bodyweight", True),
            ("Thrusters", ["thrusters", "thruster"], "Barbell", False),
            ("Kettlebell Swings", ["kettlebell swings", "kettlebell swing", "kb swings"], "Kettlebell", False),
            ("Turkish Get-ups", ["turkish get ups", "turkish getup"], "Kettlebell", False),
            ("Clean and Press", ["clean and press", "clean press"], "Barbell", False),
            ("Power Clean", ["power clean", "barbell clean"], "Barbell", False),
            ("Snatch", ["snatch", "barbell snatch"], "Barbell", False),
            ("Bear Crawl", ["bear crawl", "bear crawls"], "Bodyweight", True),
            ("Farmer's Carry", ["farmers carry", "farmer carry", "farmers walk"], "Dumbbell", False),
        ],
    ),
]


def core_exercises() -> List[ExerciseDefinition]:
    """Flatten the catalog into definitions in catalog order."""
    definitions: List[ExerciseDefinition] = []
    for group_id, rows in CATALOG:
        for name, aliases, equipment, bodyweight in rows:
            definitions.append(
                ExerciseDefinition(
                    canonical_name=name,
                    aliases=tuple(alias.lower() for alias in aliases),
                    group_id=group_id,
                    is_bodyweight=bodyweight,
                    origin="core",
                    equipment=equipment,
                )
            )
    return definitions
