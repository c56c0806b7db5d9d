"""
Deterministic text statistics for readability scoring.

Transparent heuristics, not NLP:
1. Syllable estimation from vowel clusters
2. Flesch-Kincaid grade level
3. Vocabulary tiering (everyday / academic / domain-specific)
4. Sentence length and subordinate clause density

Every function is total: empty or whitespace-only text yields zeroed metrics.
"""
from __future__ import annotations

import re

from learning_commons.evaluation.models import SentenceStats, VocabularyCounts

SENTENCE_BOUNDARY = re.compile(r"[.!?]+")
NON_LETTERS = re.compile(r"[^a-z]")
VOWEL_GROUP = re.compile(r"[aeiouy]+")

SUBORDINATE_MARKERS = re.compile(
    r"\b(although|because|since|while|when|if|unless|after|before|until|whereas|that|which|who|whom)\b",
    re.IGNORECASE,
)

# Tier 2: academic words used across domains
TIER_2_WORDS = frozenset({
    "analyze", "approach", "area", "assess", "assume", "authority", "available",
    "benefit", "concept", "consistent", "constitute", "context", "contract",
    "create", "data", "define", "derive", "distribute", "economy", "environment",
    "establish", "estimate", "evident", "export", "factor", "feature", "final",
    "function", "identify", "impact", "indicate", "individual", "interpret",
    "involve", "issue", "labor", "legal", "legislate", "major", "method",
    "occur", "percent", "period", "policy", "principle", "proceed", "process",
    "require", "research", "respond", "role", "section", "sector", "significant",
    "similar", "source", "specific", "structure", "theory", "vary", "obtain",
    "furthermore", "however", "therefore", "consequently", "moreover", "whereas",
})

# Tier 3: domain-specific math terms (checked before tier 2)
TIER_3_MATH_WORDS = frozenset({
    "quotient", "dividend", "divisor", "numerator", "denominator", "fraction",
    "integer", "polynomial", "coefficient", "variable", "equation", "inequality",
    "perimeter", "circumference", "diameter", "radius", "hypotenuse", "theorem",
    "congruent", "perpendicular", "parallel", "intersect", "vertex", "vertices",
    "axis", "coordinate", "quadrant", "exponent", "base", "factor", "multiple",
    "prime", "composite", "algorithm", "array", "addend", "minuend", "subtrahend",
})

LENGTH_SATURATION = 25  # words per sentence scored as maximally complex
SUBORDINATE_SATURATION = 2  # subordinate markers per sentence scored as maximal


def split_sentences(text: str) -> list[str]:
    return [s for s in SENTENCE_BOUNDARY.split(text) if s.strip()]


def split_words(text: str) -> list[str]:
    return text.split()


def clean_word(word: str) -> str:
    return NON_LETTERS.sub("", word.lower())


def count_syllables(word: str) -> int:
    """Approximate syllable count; never less than 1."""
    clean = clean_word(word)
    if len(clean) <= 3:
        return 1

    count = len(VOWEL_GROUP.findall(clean)) or 1

    # Silent e
    if clean.endswith("e") and not clean.endswith("le"):
        count = max(1, count - 1)

    return count


def flesch_kincaid_grade(text: str) -> float:
    """
    Flesch-Kincaid grade level.

    grade = 0.39 * words/sentences + 11.8 * syllables/words - 15.59
    Returns 0.0 when the text has no sentences or no words.
    """
    sentences = split_sentences(text)
    words = split_words(text)
    if not sentences or not words:
        return 0.0

    total_syllables = sum(count_syllables(w) for w in words)
    avg_words_per_sentence = len(words) / len(sentences)
    avg_syllables_per_word = total_syllables / len(words)

    return 0.39 * avg_words_per_sentence + 11.8 * avg_syllables_per_word - 15.59


def analyze_vocabulary(text: str) -> VocabularyCounts:
    """Count tier 1 (everyday), tier 2 (academic) and tier 3 (math) words."""
    tier1 = tier2 = tier3 = 0
    for word in (clean_word(w) for w in split_words(text)):
        if not word:
            continue
        if word in TIER_3_MATH_WORDS:
            tier3 += 1
        elif word in TIER_2_WORDS:
            tier2 += 1
        else:
            tier1 += 1
    return VocabularyCounts(tier1=tier1, tier2=tier2, tier3=tier3)


def analyze_sentence_complexity(text: str) -> SentenceStats:
    """
    Average sentence length and subordinate clause density.

    complexity = mean(min(avg_length / 25, 1), min(subordinate_ratio / 2, 1))
    """
    sentences = split_sentences(text)
    if not sentences:
        return SentenceStats()

    total_words = 0
    subordinate_clauses = 0
    for sentence in sentences:
        total_words += len(split_words(sentence))
        subordinate_clauses += len(SUBORDINATE_MARKERS.findall(sentence))

    avg_length = total_words / len(sentences)
    subordinate_ratio = subordinate_clauses / len(sentences)

    length_score = min(avg_length / LENGTH_SATURATION, 1.0)
    subordinate_score = min(subordinate_ratio / SUBORDINATE_SATURATION, 1.0)

    return SentenceStats(
        avg_length=avg_length,
        subordinate_ratio=subordinate_ratio,
        complexity_score=(length_score + subordinate_score) / 2,
    )
