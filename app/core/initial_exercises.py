"""
Начальный справочник: основные паттерны движений и стартовый набор упражнений.
Упражнения ссылаются на паттерн по имени, id проставляются при загрузке.
"""

INITIAL_MOVEMENT_PATTERNS = [
    {"name": "horizontal_push", "display_name": "Horizontal Push", "sort_order": 1,
     "description": "Pushing movements in horizontal plane (push-ups, dips)"},
    {"name": "vertical_push", "display_name": "Vertical Push", "sort_order": 2,
     "description": "Pushing movements in vertical plane (pike push-ups, handstands)"},
    {"name": "horizontal_pull", "display_name": "Horizontal Pull", "sort_order": 3,
     "description": "Pulling movements in horizontal plane (rows)"},
    {"name": "vertical_pull", "display_name": "Vertical Pull", "sort_order": 4,
     "description": "Pulling movements in vertical plane (pull-ups, chin-ups)"},
    {"name": "squat", "display_name": "Squat", "sort_order": 5,
     "description": "Knee-dominant lower body movements"},
    {"name": "hinge", "display_name": "Hinge", "sort_order": 6,
     "description": "Hip-dominant lower body movements"},
    {"name": "core_stability", "display_name": "Core Stability", "sort_order": 7,
     "description": "Anti-extension, anti-rotation and bracing work"},
]

INITIAL_EXERCISES = [
    # Горизонтальный жим
    {
        "name": "Wall Push-ups",
        "pattern": "horizontal_push",
        "difficulty": 1,
        "target_muscles": ["pectoralis major", "triceps", "anterior deltoid"],
        "equipment_required": [],
        "contraindications": [],
    },
    {
        "name": "Incline Push-ups (High)",
        "pattern": "horizontal_push",
        "difficulty": 2,
        "target_muscles": ["pectoralis major", "triceps", "anterior deltoid"],
        "equipment_required": ["elevated_surface"],
        "contraindications": [],
    },
    {
        "name": "Knee Push-ups",
        "pattern": "horizontal_push",
        "difficulty": 3,
        "target_muscles": ["pectoralis major", "triceps", "anterior deltoid"],
        "equipment_required": [],
        "contraindications": [],
    },
    {
        "name": "Standard Push-ups",
        "pattern": "horizontal_push",
        "difficulty": 5,
        "target_muscles": ["pectoralis major", "triceps", "anterior deltoid", "core"],
        "equipment_required": [],
        "contraindications": [],
    },
    {
        "name": "Parallel Bar Dips",
        "pattern": "horizontal_push",
        "difficulty": 6,
        "target_muscles": ["pectoralis major", "triceps", "anterior deltoid"],
        "equipment_required": ["dip_bars"],
        "contraindications": ["shoulder_pain"],
    },
    {
        "name": "Diamond Push-ups",
        "pattern": "horizontal_push",
        "difficulty": 7,
        "target_muscles": ["triceps", "pectoralis major", "anterior deltoid"],
        "equipment_required": [],
        "contraindications": ["wrist_issues"],
    },
    # Вертикальный жим
    {
        "name": "Pike Push-ups",
        "pattern": "vertical_push",
        "difficulty": 4,
        "target_muscles": ["anterior deltoid", "triceps", "upper chest"],
        "equipment_required": [],
        "contraindications": ["shoulder_issues", "wrist_issues"],
    },
    {
        "name": "Wall Handstand Hold",
        "pattern": "vertical_push",
        "difficulty": 5,
        "target_muscles": ["anterior deltoid", "trapezius", "core", "balance"],
        "equipment_required": [],
        "contraindications": ["shoulder_issues", "wrist_issues", "high_blood_pressure"],
    },
    {
        "name": "Elevated Pike Push-ups",
        "pattern": "vertical_push",
        "difficulty": 6,
        "target_muscles": ["anterior deltoid", "triceps", "upper chest", "core"],
        "equipment_required": ["elevated_surface"],
        "contraindications": ["shoulder_issues", "wrist_issues"],
    },
    {
        "name": "Wall Handstand Push-ups",
        "pattern": "vertical_push",
        "difficulty": 8,
        "target_muscles": ["anterior deltoid", "triceps", "upper chest", "core"],
        "equipment_required": [],
        "contraindications": ["shoulder_issues", "wrist_issues", "high_blood_pressure", "neck_issues"],
    },
    # Горизонтальная тяга
    {
        "name": "Incline Rows (Table)",
        "pattern": "horizontal_pull",
        "difficulty": 2,
        "target_muscles": ["latissimus dorsi", "rhomboids", "biceps", "posterior deltoid"],
        "equipment_required": ["elevated_surface"],
        "contraindications": [],
    },
    {
        "name": "Band Rows",
        "pattern": "horizontal_pull",
        "difficulty": 3,
        "target_muscles": ["latissimus dorsi", "rhomboids", "biceps"],
        "equipment_required": ["resistance_bands"],
        "contraindications": [],
    },
    {
        "name": "Australian Rows",
        "pattern": "horizontal_pull",
        "difficulty": 4,
        "target_muscles": ["latissimus dorsi", "rhomboids", "trapezius", "biceps"],
        "equipment_required": ["pull_up_bar"],
        "contraindications": [],
    },
    {
        "name": "Prone Y-T-W Raises",
        "pattern": "horizontal_pull",
        "difficulty": 4,
        "target_muscles": ["rhomboids", "trapezius", "posterior deltoid"],
        "equipment_required": [],
        "contraindications": [],
    },
    {
        "name": "Ring Rows",
        "pattern": "horizontal_pull",
        "difficulty": 5,
        "target_muscles": ["latissimus dorsi", "rhomboids", "biceps", "core"],
        "equipment_required": ["gymnastics_rings"],
        "contraindications": [],
    },
    {
        "name": "Archer Rows",
        "pattern": "horizontal_pull",
        "difficulty": 6,
        "target_muscles": ["latissimus dorsi", "rhomboids", "biceps"],
        "equipment_required": ["pull_up_bar"],
        "contraindications": [],
    },
    # Вертикальная тяга
    {
        "name": "Dead Hang",
        "pattern": "vertical_pull",
        "difficulty": 2,
        "target_muscles": ["latissimus dorsi", "forearms", "grip"],
        "equipment_required": ["pull_up_bar"],
        "contraindications": [],
    },
    {
        "name": "Band Pulldowns",
        "pattern": "vertical_pull",
        "difficulty": 3,
        "target_muscles": ["latissimus dorsi", "biceps"],
        "equipment_required": ["resistance_bands"],
        "contraindications": [],
    },
    {
        "name": "Negative Pull-ups",
        "pattern": "vertical_pull",
        "difficulty": 4,
        "target_muscles": ["latissimus dorsi", "biceps", "posterior deltoid"],
        "equipment_required": ["pull_up_bar"],
        "contraindications": [],
    },
    {
        "name": "Pull-ups",
        "pattern": "vertical_pull",
        "difficulty": 6,
        "target_muscles": ["latissimus dorsi", "biceps", "posterior deltoid", "core"],
        "equipment_required": ["pull_up_bar"],
        "contraindications": [],
    },
    # Присед
    {
        "name": "Box Squats",
        "pattern": "squat",
        "difficulty": 2,
        "target_muscles": ["quadriceps", "glutes", "hamstrings"],
        "equipment_required": ["elevated_surface"],
        "contraindications": [],
    },
    {
        "name": "Bodyweight Squats",
        "pattern": "squat",
        "difficulty": 3,
        "target_muscles": ["quadriceps", "glutes", "hamstrings"],
        "equipment_required": [],
        "contraindications": [],
    },
    {
        "name": "Reverse Lunges",
        "pattern": "squat",
        "difficulty": 4,
        "target_muscles": ["quadriceps", "glutes", "balance"],
        "equipment_required": [],
        "contraindications": ["knee_pain"],
    },
    {
        "name": "Bulgarian Split Squats",
        "pattern": "squat",
        "difficulty": 6,
        "target_muscles": ["quadriceps", "glutes", "hamstrings", "balance"],
        "equipment_required": [],
        "contraindications": ["knee_issues"],
    },
    {
        "name": "Pistol Squats",
        "pattern": "squat",
        "difficulty": 8,
        "target_muscles": ["quadriceps", "glutes", "core", "balance"],
        "equipment_required": [],
        "contraindications": ["knee_issues"],
    },
    # Наклон (hinge)
    {
        "name": "Glute Bridges",
        "pattern": "hinge",
        "difficulty": 1,
        "target_muscles": ["glutes", "hamstrings", "lower back"],
        "equipment_required": [],
        "contraindications": [],
    },
    {
        "name": "Single-Leg Glute Bridges",
        "pattern": "hinge",
        "difficulty": 3,
        "target_muscles": ["glutes", "hamstrings", "core stability"],
        "equipment_required": [],
        "contraindications": [],
    },
    {
        "name": "Bodyweight Good Mornings",
        "pattern": "hinge",
        "difficulty": 4,
        "target_muscles": ["hamstrings", "glutes", "erector spinae"],
        "equipment_required": [],
        "contraindications": ["lower_back_issues"],
    },
    {
        "name": "Single-Leg RDL (Bodyweight)",
        "pattern": "hinge",
        "difficulty": 5,
        "target_muscles": ["hamstrings", "glutes", "lower back", "balance"],
        "equipment_required": [],
        "contraindications": ["balance_issues"],
    },
    {
        "name": "Nordic Curls",
        "pattern": "hinge",
        "difficulty": 7,
        "target_muscles": ["hamstrings", "glutes", "core"],
        "equipment_required": ["anchor_point"],
        "contraindications": ["hamstring_injury", "knee_issues"],
    },
    # Стабилизация корпуса
    {
        "name": "Dead Bug",
        "pattern": "core_stability",
        "difficulty": 1,
        "target_muscles": ["transverse abdominis", "rectus abdominis"],
        "equipment_required": [],
        "contraindications": [],
    },
    {
        "name": "Plank Hold",
        "pattern": "core_stability",
        "difficulty": 2,
        "target_muscles": ["rectus abdominis", "transverse abdominis", "obliques"],
        "equipment_required": [],
        "contraindications": [],
    },
    {
        "name": "Side Plank",
        "pattern": "core_stability",
        "difficulty": 3,
        "target_muscles": ["obliques", "transverse abdominis"],
        "equipment_required": [],
        "contraindications": [],
    },
    {
        "name": "Hollow Body Hold",
        "pattern": "core_stability",
        "difficulty": 4,
        "target_muscles": ["rectus abdominis", "hip flexors"],
        "equipment_required": [],
        "contraindications": [],
    },
    {
        "name": "Hanging Knee Raises",
        "pattern": "core_stability",
        "difficulty": 5,
        "target_muscles": ["rectus abdominis", "hip flexors", "grip"],
        "equipment_required": ["pull_up_bar"],
        "contraindications": [],
    },
    {
        "name": "L-Sit (Parallettes)",
        "pattern": "core_stability",
        "difficulty": 7,
        "target_muscles": ["rectus abdominis", "hip flexors", "triceps"],
        "equipment_required": ["parallettes"],
        "contraindications": ["wrist_issues"],
    },
]
