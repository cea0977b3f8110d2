# lexicon.py
#
# Static word tables used by the scorers. Immutable, loaded once at import.

# -----------------------------
# Engagement
# -----------------------------

INTERACTIVE_WORDS = (
    "you", "we", "us", "our", "together", "think", "feel", "believe",
)

# -----------------------------
# Segmentation
# Titles whose period does not end a sentence ("Dr. Smith"). Company
# suffixes are left out since they often close a sentence.
# -----------------------------

ABBREVIATIONS = frozenset({
    "mr", "mrs", "ms", "dr", "prof", "vs", "approx",
})
