# models.py

from dataclasses import dataclass, field
from enum import Enum


class InvalidInput(TypeError):
    """Raised when the analyzer is handed something that is not transcript text."""


class SentimentLabel(str, Enum):
    VERY_POSITIVE = "Very Positive"
    POSITIVE = "Positive"
    NEUTRAL = "Neutral"
    NEGATIVE = "Negative"
    VERY_NEGATIVE = "Very Negative"


class EntityKind(str, Enum):
    PERSON = "person"
    PLACE = "place"
    ORGANIZATION = "organization"
    OTHER = "other"


@dataclass(frozen=True)
class Entity:
    text: str
    kind: EntityKind


@dataclass(frozen=True)
class Segmentation:
    """Sentences and word counts shared by every scorer."""

    text: str
    sentences: tuple = ()
    word_count: int = 0
    sentence_word_counts: tuple = ()

    @property
    def sentence_count(self) -> int:
        return len(self.sentences)

    @property
    def questions(self) -> tuple:
        return tuple(s for s in self.sentences if "?" in s)

    @property
    def statements(self) -> tuple:
        return tuple(s for s in self.sentences if "?" not in s)


@dataclass(frozen=True)
class DetailedAnalysis:
    word_count: int = 0
    avg_words_per_sentence: int = 0
    question_count: int = 0
    positive_words: tuple = ()
    negative_words: tuple = ()
    named_entities: tuple = ()

    def to_dict(self):
        return {
            "wordCount": self.word_count,
            "avgWordsPerSentence": self.avg_words_per_sentence,
            "questionCount": self.question_count,
            "positiveWords": list(self.positive_words),
            "negativeWords": list(self.negative_words),
            "namedEntities": list(self.named_entities),
        }

    @classmethod
    def from_dict(cls, data: dict):
        try:
            return cls(
                word_count=int(data["wordCount"]),
                avg_words_per_sentence=int(data["avgWordsPerSentence"]),
                question_count=int(data["questionCount"]),
                positive_words=tuple(data["positiveWords"]),
                negative_words=tuple(data["negativeWords"]),
                named_entities=tuple(data["namedEntities"]),
            )
        except (KeyError, TypeError) as e:
            raise InvalidInput(f"Malformed detailedAnalysis: {e}") from e


@dataclass(frozen=True)
class AnalysisResult:
    """
    Output of one transcript analysis.

    Serialises to the camelCase JSON document stored alongside a transcript
    record and returned by the API.
    """

    sentiment_score: float
    sentiment_label: SentimentLabel
    key_topics: tuple
    speaking_pace: int
    clarity_score: float
    engagement_score: float
    question_relevance_score: float
    overall_score: int
    detailed_analysis: DetailedAnalysis = field(default_factory=DetailedAnalysis)

    def to_dict(self):
        return {
            "sentimentScore": self.sentiment_score,
            "sentimentLabel": self.sentiment_label.value,
            "keyTopics": list(self.key_topics),
            "speakingPace": self.speaking_pace,
            "clarityScore": self.clarity_score,
            "engagementScore": self.engagement_score,
            "questionRelevanceScore": self.question_relevance_score,
            "overallScore": self.overall_score,
            "detailedAnalysis": self.detailed_analysis.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: dict):
        if not isinstance(data, dict):
            raise InvalidInput(f"Expected a JSON object, got {type(data).__name__}")
        try:
            return cls(
                sentiment_score=data["sentimentScore"],
                sentiment_label=SentimentLabel(data["sentimentLabel"]),
                key_topics=tuple(data["keyTopics"]),
                speaking_pace=data["speakingPace"],
                clarity_score=data["clarityScore"],
                engagement_score=data["engagementScore"],
                question_relevance_score=data["questionRelevanceScore"],
                overall_score=data["overallScore"],
                detailed_analysis=DetailedAnalysis.from_dict(data["detailedAnalysis"]),
            )
        except (KeyError, ValueError) as e:
            raise InvalidInput(f"Malformed analysis result: {e}") from e
