# entities.py

from functools import lru_cache

import spacy

from models import Entity, EntityKind

NLP = spacy.load("en_core_web_sm")

MAX_KEY_TOPICS = 10
MIN_TOPIC_LENGTH = 4

# Reported entity kinds, in the order they are listed.
REPORTED_KINDS = (EntityKind.PERSON, EntityKind.PLACE, EntityKind.ORGANIZATION)

ENTITY_LABELS = {
    "PERSON": EntityKind.PERSON,
    "GPE": EntityKind.PLACE,
    "LOC": EntityKind.PLACE,
    "ORG": EntityKind.ORGANIZATION,
}


def entity_kind(label: str) -> EntityKind:
    return ENTITY_LABELS.get(label, EntityKind.OTHER)


# -----------------------------
# spaCy tagger
# nouns():    tokens tagged NOUN, lower-cased, in order
# entities(): doc.ents mapped onto person / place / organization / other
# Any object with these two methods can stand in for SpacyTagger.
# -----------------------------

@lru_cache(maxsize=32)
def _parse(text: str):
    return NLP(text)


class SpacyTagger:

    def _doc(self, sentences):
        return _parse(" ".join(sentences))

    def nouns(self, sentences):
        return [t.text.lower() for t in self._doc(sentences) if t.pos_ == "NOUN"]

    def entities(self, sentences):
        return [
            Entity(ent.text.strip(), entity_kind(ent.label_))
            for ent in self._doc(sentences).ents
            if ent.text.strip()
        ]


# -----------------------------
# Topic / entity extraction
# Key topics: nouns of 4+ characters, then named entities, lower-cased,
# deduplicated in discovery order, first 10.
# Named entities: people, places, organizations; original casing, no cap.
# -----------------------------

def _dedupe(items):
    return list(dict.fromkeys(items))


def extract_topics(sentences, tagger=None):
    tagger = tagger or SpacyTagger()

    entities = tagger.entities(sentences)
    named = _dedupe(
        entity.text
        for kind in REPORTED_KINDS
        for entity in entities
        if entity.kind == kind
    )

    topics = [noun.lower() for noun in tagger.nouns(sentences) if len(noun) >= MIN_TOPIC_LENGTH]
    topics.extend(entity.lower() for entity in named)

    return {
        "key_topics": _dedupe(topics)[:MAX_KEY_TOPICS],
        "named_entities": named,
    }
