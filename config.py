# config.py
import os
from dotenv import load_dotenv
load_dotenv()

HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "5000"))
DEBUG = os.getenv("FLASK_DEBUG", "false").lower() in ("1", "true", "yes")
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Configurable scoring criteria as seeded into the transcripts database.
# Surfaced to clients for display; the analyzer's overall score uses its own
# fixed weights (scoring.AGGREGATE_WEIGHTS).
DEFAULT_SCORING_CRITERIA = (
    ("sentiment_analysis", 0.20, "Overall emotional tone and positivity"),
    ("key_topics", 0.15, "Relevance and coverage of important topics"),
    ("speaking_pace", 0.15, "Appropriate speed and rhythm of speech"),
    ("clarity", 0.20, "Clarity and comprehensibility of speech"),
    ("engagement", 0.15, "Level of audience engagement and interaction"),
    ("question_relevance", 0.15, "Relevance of answers to questions asked"),
)
