# scoring.py

import logging
import math
import re
from functools import lru_cache

from afinn import Afinn

from entities import SpacyTagger, extract_topics
from lexicon import ABBREVIATIONS, INTERACTIVE_WORDS
from models import (
    AnalysisResult,
    DetailedAnalysis,
    InvalidInput,
    Segmentation,
    SentimentLabel,
)

logger = logging.getLogger(__name__)

AFINN = Afinn()


# -----------------------------
# Basic numeric helpers
# -----------------------------

def clamp(value, low=0, high=100):
    return max(low, min(high, value))


def round_half_up(value) -> int:
    # 62.5 -> 63, never banker's rounding
    return int(math.floor(value + 0.5))


def tokenize(text: str):
    # Simple word tokenizer: words only, lowercased
    tokens = re.findall(r"[a-zA-Z']+", text.lower())
    return [t.strip("'") for t in tokens if t.strip("'")]


# -----------------------------
# Segmentation
# Sentences end at runs of . ! ? (terminators stay on the sentence).
# A period after a known abbreviation ("Dr.") or inside a number ("3.5")
# does not end a sentence. Words are whitespace-delimited.
# -----------------------------

TERMINATOR_PATTERN = re.compile(r"[.!?]+")
LAST_WORD_PATTERN = re.compile(r"([A-Za-z]+)$")


def _is_soft_period(text: str, match) -> bool:
    if match.group() != ".":
        return False
    before = text[max(0, match.start() - 16):match.start()]
    after = text[match.end():match.end() + 1]
    if before[-1:].isdigit() and after.isdigit():
        return True
    last_word = LAST_WORD_PATTERN.search(before)
    return last_word is not None and last_word.group(1).lower() in ABBREVIATIONS


def split_sentences(text: str):
    sentences = []
    start = 0

    def add(span):
        span = span.strip()
        if re.search(r"\w", span):
            sentences.append(span)

    for match in TERMINATOR_PATTERN.finditer(text):
        if _is_soft_period(text, match):
            continue
        add(text[start:match.end()])
        start = match.end()
    add(text[start:])
    return sentences


def count_words(text: str) -> int:
    return len(text.split())


def segment(text: str) -> Segmentation:
    sentences = tuple(split_sentences(text))
    return Segmentation(
        text=text,
        sentences=sentences,
        word_count=count_words(text),
        sentence_word_counts=tuple(count_words(s) for s in sentences),
    )


def avg_words_per_sentence(seg: Segmentation) -> int:
    if seg.sentence_count == 0:
        return 0
    return round_half_up(seg.word_count / seg.sentence_count)


# -----------------------------
# Sentiment (lexicon)
# Each token takes its AFINN-165 polarity (-5..+5); unlisted words score 0.
#   sentiment = clamp((raw + 10) * 5, 0, 100)
# Labels:
#   >=70 Very Positive, >=55 Positive, >=45 Neutral, >=30 Negative,
#   else Very Negative
# -----------------------------

@lru_cache(maxsize=None)
def word_polarity(word: str) -> int:
    return int(AFINN.score(word.lower()))


def normalize_sentiment_score(raw_score: int) -> float:
    return clamp((raw_score + 10) * 5)


def sentiment_label(score: float) -> SentimentLabel:
    if score >= 70:
        return SentimentLabel.VERY_POSITIVE
    if score >= 55:
        return SentimentLabel.POSITIVE
    if score >= 45:
        return SentimentLabel.NEUTRAL
    if score >= 30:
        return SentimentLabel.NEGATIVE
    return SentimentLabel.VERY_NEGATIVE


def sentiment_analysis(text: str):
    raw_score = 0
    positive = []
    negative = []

    for token in tokenize(text):
        polarity = word_polarity(token)
        if polarity > 0:
            positive.append(token)
        elif polarity < 0:
            negative.append(token)
        raw_score += polarity

    score = normalize_sentiment_score(raw_score)
    return {
        "raw_score": raw_score,
        "score": score,
        "label": sentiment_label(score),
        "positive": positive,
        "negative": negative,
    }


# -----------------------------
# Speaking pace
# No audio timing is available, so minutes are estimated from the word
# count at 150 WPM (floored at one minute).
# Normalised for the overall score only: 150 WPM -> 100, falling by one
# point per WPM of deviation.
# -----------------------------

AVERAGE_WPM = 150
OPTIMAL_WPM = 150
MAX_WPM_DEVIATION = 100


def speaking_pace(word_count: int) -> int:
    estimated_minutes = word_count / AVERAGE_WPM
    return round_half_up(word_count / max(estimated_minutes, 1))


def normalize_speaking_pace(pace: float) -> float:
    deviation = abs(pace - OPTIMAL_WPM)
    return clamp(100 - (deviation / MAX_WPM_DEVIATION) * 100)


# -----------------------------
# Clarity
# Per sentence (max 3 points):
#   10-20 words -> 2, else 5-29 words -> 1
#   no passive voice -> 1
# clarity = points / (sentences * 3) * 100
# -----------------------------

PASSIVE_PATTERN = re.compile(r"\b(is|was|are|were|being|been)\s+\w+ed\b")


def sentence_clarity_points(sentence: str, word_count: int) -> int:
    points = 0
    if 10 <= word_count <= 20:
        points += 2
    elif 5 <= word_count < 30:
        points += 1

    if not PASSIVE_PATTERN.search(sentence):
        points += 1
    return points


def clarity_score(seg: Segmentation) -> float:
    if seg.sentence_count == 0:
        return 0

    points = sum(
        sentence_clarity_points(sentence, words)
        for sentence, words in zip(seg.sentences, seg.sentence_word_counts)
    )
    return clamp((points / (seg.sentence_count * 3)) * 100)


# -----------------------------
# Engagement
#   questions * 5       (max 30)
#   exclamations * 3    (max 20)
#   each interactive word: matches * 2 (max 10 per word)
# -----------------------------

QUESTION_POINTS, QUESTION_CAP = 5, 30
EXCLAMATION_POINTS, EXCLAMATION_CAP = 3, 20
INTERACTIVE_POINTS, INTERACTIVE_CAP = 2, 10

INTERACTIVE_PATTERNS = {
    word: re.compile(rf"\b{word}\b") for word in INTERACTIVE_WORDS
}


def engagement_score(seg: Segmentation) -> float:
    points = min(len(seg.questions) * QUESTION_POINTS, QUESTION_CAP)
    points += min(seg.text.count("!") * EXCLAMATION_POINTS, EXCLAMATION_CAP)

    lowered = seg.text.lower()
    for pattern in INTERACTIVE_PATTERNS.values():
        matches = len(pattern.findall(lowered))
        points += min(matches * INTERACTIVE_POINTS, INTERACTIVE_CAP)

    return clamp(points)


# -----------------------------
# Question relevance
# Placeholder heuristic, not a semantic QA model:
#   no questions -> 75
#   otherwise 70, +20 if statements per question is within 2..5
# -----------------------------

NO_QUESTION_RELEVANCE = 75
BASE_RELEVANCE = 70
RATIO_BONUS = 20


def question_relevance_score(seg: Segmentation) -> float:
    questions = len(seg.questions)
    if questions == 0:
        return NO_QUESTION_RELEVANCE

    score = BASE_RELEVANCE
    ratio = len(seg.statements) / questions
    if 2 <= ratio <= 5:
        score += RATIO_BONUS
    return clamp(score)


# -----------------------------
# Overall score
# Fixed weights; these are not the configurable scoring criteria.
# -----------------------------

AGGREGATE_WEIGHTS = {
    "sentiment": 0.20,
    "clarity": 0.25,
    "engagement": 0.20,
    "question_relevance": 0.20,
    "speaking_pace": 0.15,
}


def overall_score(sentiment, clarity, engagement, question_relevance, normalized_pace) -> int:
    w = AGGREGATE_WEIGHTS
    return round_half_up(
        sentiment * w["sentiment"]
        + clarity * w["clarity"]
        + engagement * w["engagement"]
        + question_relevance * w["question_relevance"]
        + normalized_pace * w["speaking_pace"]
    )


# -----------------------------
# Main orchestrator
# -----------------------------

class TranscriptAnalyzer:
    """
    Stateless transcript scorer.

    The only thing held is the tagger used for topics and entities, so one
    instance can be shared freely between threads.
    """

    __slots__ = ("_tagger",)

    def __init__(self, tagger=None):
        self._tagger = tagger or SpacyTagger()

    @property
    def tagger(self):
        return self._tagger

    def analyze(self, text) -> AnalysisResult:
        if not isinstance(text, str):
            raise InvalidInput(
                f"Transcript text must be a string, got {type(text).__name__}"
            )

        seg = segment(text)

        sentiment = sentiment_analysis(text)
        topics = extract_topics(seg.sentences, self._tagger)
        pace = speaking_pace(seg.word_count)
        clarity = clarity_score(seg)
        engagement = engagement_score(seg)
        relevance = question_relevance_score(seg)

        overall = overall_score(
            sentiment["score"],
            clarity,
            engagement,
            relevance,
            normalize_speaking_pace(pace),
        )

        logger.debug(
            "Analyzed transcript: %d words, %d sentences, overall %d",
            seg.word_count, seg.sentence_count, overall,
        )

        return AnalysisResult(
            sentiment_score=sentiment["score"],
            sentiment_label=sentiment["label"],
            key_topics=tuple(topics["key_topics"]),
            speaking_pace=pace,
            clarity_score=clarity,
            engagement_score=engagement,
            question_relevance_score=relevance,
            overall_score=overall,
            detailed_analysis=DetailedAnalysis(
                word_count=seg.word_count,
                avg_words_per_sentence=avg_words_per_sentence(seg),
                question_count=len(seg.questions),
                positive_words=tuple(sentiment["positive"]),
                negative_words=tuple(sentiment["negative"]),
                named_entities=tuple(topics["named_entities"]),
            ),
        )


DEFAULT_ANALYZER = TranscriptAnalyzer()


def analyze(text) -> AnalysisResult:
    return DEFAULT_ANALYZER.analyze(text)
