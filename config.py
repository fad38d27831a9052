from dotenv import load_dotenv
import os

load_dotenv()

# Configuration class for the application
class Config:
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

    # Seed for tutor reply selection; unset means non-deterministic
    RANDOM_SEED = os.getenv("TUTOR_RANDOM_SEED")

    if RANDOM_SEED is not None:
        try:
            RANDOM_SEED = int(RANDOM_SEED)
        except ValueError:
            raise ValueError("TUTOR_RANDOM_SEED must be an integer")

    # Word matching
    SIMILARITY_THRESHOLD = 0.8

    # Session progression
    STEP_ADVANCE_THRESHOLD = 85

    # Feedback bands
    EXCELLENT_FEEDBACK_THRESHOLD = 90
    GOOD_FEEDBACK_THRESHOLD = 75
    FAIR_FEEDBACK_THRESHOLD = 50

    # Tutor reply bands
    EXCELLENT_RESPONSE_THRESHOLD = 85
    GOOD_RESPONSE_THRESHOLD = 60

    MAX_SUGGESTION_WORDS = 3
