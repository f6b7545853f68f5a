"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

LATE_CUTOFF_HOUR = 9
RESCAN_WINDOW_SECONDS = 3
DEFAULT_TRAILING_DAYS = 5

# markedBy value when nobody is logged in.
SYSTEM_MARKER = "system"

DEFAULT_GRADE_COUNT = 10
DEFAULT_SUBJECTS = ("Math", "Science", "English", "History")
FALLBACK_GRADE_NAME = "Grade 10"

AI_KEY_MISSING_MESSAGE = "API Key not configured. Please add your Groq API Key."
AI_FAILURE_MESSAGE = "Failed to generate AI report."
AI_EMPTY_MESSAGE = "No analysis generated."

CSV_HEADER = "Student ID, Name, Grade, Total Days, Present, Absent, Late"
