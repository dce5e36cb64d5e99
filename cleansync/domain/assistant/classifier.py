"""
Weighted intent classifier for chat messages.

Each intent pattern is scored against the lower-cased message:

- keyword found as a substring: one keyword match plus the keyword weight
- every message term that contains a keyword: the partial-term weight
- context word found as a substring: one context match plus the context weight
- context word present as a whole term (or term sequence): the related-term weight

    score = (keyword_matches + context_matches + weighted * weighted_share)
            / ((len(keywords) + len(context)) * normalizer)
            * priority

Intents scoring above the confidence floor are ranked; the best is the
primary intent and the runner-up the secondary one.
Patterns flagged `requires_keyword` are only ranked when one of their
keywords matched; context words alone never select them.
"""

import re
from dataclasses import dataclass, field
from datetime import date, timedelta
from typing import Optional, Sequence

from ... import config
from .intents import INTENT_PATTERNS, NEGATIVE_WORDS, POSITIVE_WORDS, URGENT_WORDS, IntentPattern

TERM_PATTERN = re.compile(r"[a-z0-9]+(?:'[a-z]+)?")
ISO_DATE_PATTERN = re.compile(r"\b(\d{4}-\d{2}-\d{2})\b")


@dataclass(frozen=True)
class ScoringWeights:
    keyword: float = config.CLASSIFIER_KEYWORD_WEIGHT
    partial_term: float = config.CLASSIFIER_PARTIAL_TERM_WEIGHT
    context: float = config.CLASSIFIER_CONTEXT_WEIGHT
    related_term: float = config.CLASSIFIER_RELATED_TERM_WEIGHT
    weighted_share: float = 0.5
    normalizer: float = 1.5
    confidence_floor: float = config.CLASSIFIER_CONFIDENCE_FLOOR


@dataclass
class Classification:
    primary: Optional[str]
    secondary: Optional[str]
    confidence: float
    scores: dict[str, float]
    sentiment: str = "neutral"
    urgent: bool = False
    requested_date: Optional[date] = None
    candidates: list[str] = field(default_factory=list)


def tokenize(text: str) -> list[str]:
    return TERM_PATTERN.findall(text.lower())


def contains_phrase(terms: Sequence[str], phrase: str) -> bool:
    """True when the phrase's terms appear consecutively in `terms`"""
    phrase_terms = tokenize(phrase)
    if not phrase_terms:
        return False
    width = len(phrase_terms)
    return any(list(terms[i : i + width]) == phrase_terms for i in range(len(terms) - width + 1))


@dataclass(frozen=True)
class IntentMatch:
    keyword_matches: int
    context_matches: int
    weighted: float


def match_intent(message: str, pattern: IntentPattern, weights: ScoringWeights = ScoringWeights()) -> IntentMatch:
    """Count keyword and context hits of one pattern and sum their weights"""
    text = message.lower()
    terms = tokenize(text)

    keyword_matches = 0
    context_matches = 0
    weighted = 0.0

    for keyword in pattern.keywords:
        keyword = keyword.lower()
        if keyword in text:
            keyword_matches += 1
            weighted += weights.keyword
        weighted += weights.partial_term * sum(1 for term in terms if keyword in term)

    for word in pattern.context:
        word = word.lower()
        if word in text:
            context_matches += 1
            weighted += weights.context
        if contains_phrase(terms, word):
            weighted += weights.related_term

    return IntentMatch(keyword_matches, context_matches, weighted)


def score_match(match: IntentMatch, pattern: IntentPattern, weights: ScoringWeights = ScoringWeights()) -> float:
    table_size = len(pattern.keywords) + len(pattern.context)
    if table_size == 0:
        return 0.0

    base = (match.keyword_matches + match.context_matches + match.weighted * weights.weighted_share) / (
        table_size * weights.normalizer
    )
    return base * pattern.priority


def score_intent(message: str, pattern: IntentPattern, weights: ScoringWeights = ScoringWeights()) -> float:
    return score_match(match_intent(message, pattern, weights), pattern, weights)


def analyze_sentiment(message: str) -> tuple[str, bool]:
    """Return (positive|negative|neutral, urgent)"""
    text = message.lower()
    positive = sum(1 for word in POSITIVE_WORDS if word in text)
    negative = sum(1 for word in NEGATIVE_WORDS if word in text)
    urgent = any(word in text for word in URGENT_WORDS)

    if positive > negative:
        return "positive", urgent
    if negative > positive:
        return "negative", urgent
    return "neutral", urgent


def extract_date(message: str, today: Optional[date] = None) -> Optional[date]:
    """Pull the first date mentioned: ISO, "today", "tomorrow" or "next week" """
    today = today or date.today()

    match = ISO_DATE_PATTERN.search(message)
    if match:
        try:
            return date.fromisoformat(match.group(1))
        except ValueError:
            pass

    terms = tokenize(message)
    if "tomorrow" in terms:
        return today + timedelta(days=1)
    if contains_phrase(terms, "next week"):
        return today + timedelta(days=7)
    if "today" in terms:
        return today
    return None


def classify(
    message: str,
    patterns: Sequence[IntentPattern] = INTENT_PATTERNS,
    weights: ScoringWeights = ScoringWeights(),
    today: Optional[date] = None,
) -> Classification:
    matches = {pattern.name: match_intent(message, pattern, weights) for pattern in patterns}
    scores = {pattern.name: score_match(matches[pattern.name], pattern, weights) for pattern in patterns}
    keyword_gated = {pattern.name for pattern in patterns if pattern.requires_keyword}

    # sorted() is stable, so table order breaks ties
    ranked = sorted(scores.items(), key=lambda item: item[1], reverse=True)
    candidates = [
        name
        for name, score in ranked
        if score > weights.confidence_floor
        and (name not in keyword_gated or matches[name].keyword_matches > 0)
    ]

    sentiment, urgent = analyze_sentiment(message)

    return Classification(
        primary=candidates[0] if candidates else None,
        secondary=candidates[1] if len(candidates) > 1 else None,
        confidence=scores[candidates[0]] if candidates else 0.0,
        scores=scores,
        sentiment=sentiment,
        urgent=urgent,
        requested_date=extract_date(message, today),
        candidates=candidates,
    )
