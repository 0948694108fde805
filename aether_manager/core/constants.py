# aether_manager/core/constants.py

# --- Application Info ---
APP_NAME: str = "aether-manager"
APP_DISPLAY_NAME: str = "Aether Manager"
APP_VERSION: str = "0.1.0"
LOGGER_NAME: str = "AetherManager"

# --- File & Directory Names ---
SETTINGS_FILE_NAME: str = "settings.json"
MODS_DB_FILE_NAME: str = "mods.json"
PRESETS_DB_FILE_NAME: str = "presets.json"
STORAGE_DIR_NAME: str = "mods"
CHARACTERS_DIR_NAME: str = "characters"
OTHER_MODS_DIR_NAME: str = "othermods"
THUMBNAILS_DIR_NAME: str = "thumbnails"
LOG_DIR_NAME: str = "logs"
UNKNOWN_ORIGINAL_NAME: str = "unknown"

# --- JSON Documents ---
JSON_INDENT: int = 4

# --- Thumbnail Constants ---
THUMBNAIL_MAX_SIZE: tuple[int, int] = (1280, 720)
THUMBNAIL_QUALITY: int = 85
THUMBNAIL_EXTENSION: str = "webp"

# --- Character Roster ---
# (id, display name); ids are the tags stored in Mod.character
KNOWN_CHARACTERS: tuple[tuple[str, str], ...] = (
    ("alice", "Alice"),
    ("anby", "Anby"),
    ("anbys0", "Anby S0"),
    ("anton", "Anton"),
    ("astra", "Astra"),
    ("belle", "Belle"),
    ("ben", "Ben"),
    ("billy", "Billy"),
    ("burnice", "Burnice"),
    ("caesar", "Caesar"),
    ("corin", "Corin"),
    ("ellen", "Ellen"),
    ("evelyn", "Evelyn"),
    ("grace", "Grace"),
    ("harumasa", "Harumasa"),
    ("hugo", "Hugo"),
    ("jane", "Jane"),
    ("jufufu", "Jufufu"),
    ("koleda", "Koleda"),
    ("lighter", "Lighter"),
    ("lucy", "Lucy"),
    ("lycaon", "Lycaon"),
    ("miyabi", "Miyabi"),
    ("nekomata", "Nekomata"),
    ("nicole", "Nicole"),
    ("pan", "Pan"),
    ("piper", "Piper"),
    ("pulchra", "Pulchra"),
    ("qingyi", "Qingyi"),
    ("rina", "Rina"),
    ("seed", "Seed"),
    ("seth", "Seth"),
    ("soldier11", "Soldier 11"),
    ("soukaku", "Soukaku"),
    ("trigger", "Trigger"),
    ("vivian", "Vivian"),
    ("wise", "Wise"),
    ("yanagi", "Yanagi"),
    ("yixuan", "Yixuan"),
    ("yuzuha", "Yuzuha"),
    ("zhuyuan", "Zhu Yuan"),
)
