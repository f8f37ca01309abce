# tutor.py
"""
Keyword tutor: maps a learner's free-text question to a canned explanation,
related topics and suggested experiments.

Three independent rule chains run over the same lowercased question text:
answer text, related topics, suggested experiments. Each chain is an ordered
list of rules and the first matching rule wins. The chains are not
1:1: the related-topics chain reacts to "slit", the answer chain does not.
"""

from __future__ import annotations

import logging
from typing import Callable, Generic, List, NamedTuple, Optional, Sequence, TypeVar

import knowledge
from schemas.tutor import AnswerBundle, SuggestedExperiment

logger = logging.getLogger("physics-tutorial.tutor")

T = TypeVar("T")


class TopicRule(NamedTuple, Generic[T]):
    name: str
    matches: Callable[[str], bool]  # receives the normalized question
    produce: Callable[[str], T]  # receives the original question


def normalize(question: str) -> str:
    # Substring matching only: no punctuation stripping, no tokenizing
    return question.lower()


def _has(q: str, *words: str) -> bool:
    return any(w in q for w in words)


def _first_match(rules: Sequence[TopicRule[T]], q: str, default: TopicRule[T]) -> TopicRule[T]:
    # q is already normalized
    return next((r for r in rules if r.matches(q)), default)


# --- Answer text -------------------------------------------------------------------


def _is_duality(q: str) -> bool:
    # (wave AND particle) OR duality: a bare "duality" matches too
    return (_has(q, "wave") and _has(q, "particle")) or _has(q, "duality")


def _is_orbital(q: str) -> bool:
    # orbital OR (electron AND atom)
    return _has(q, "orbital") or (_has(q, "electron") and _has(q, "atom"))


ANSWER_RULES: List[TopicRule[str]] = [
    TopicRule(
        "interference",
        lambda q: _has(q, "interference", "интерференц"),
        lambda _: knowledge.INTERFERENCE_ANSWER,
    ),
    TopicRule("duality", _is_duality, lambda _: knowledge.DUALITY_ANSWER),
    TopicRule("tunneling", lambda q: _has(q, "tunnel", "barrier"), lambda _: knowledge.TUNNELING_ANSWER),
    TopicRule("orbital", _is_orbital, lambda _: knowledge.ORBITAL_ANSWER),
]

DEFAULT_ANSWER_RULE: TopicRule[str] = TopicRule(
    "default",
    lambda _: True,
    lambda question: knowledge.DEFAULT_ANSWER_TEMPLATE.format(question=question),
)

# --- Related topics ----------------------------------------------------------------

RELATED_TOPIC_RULES: List[TopicRule[List[str]]] = [
    TopicRule(
        "interference",
        lambda q: _has(q, "interference", "slit"),
        lambda _: list(knowledge.INTERFERENCE_TOPICS),
    ),
    TopicRule("tunneling", lambda q: _has(q, "tunnel"), lambda _: list(knowledge.TUNNELING_TOPICS)),
    TopicRule("orbital", lambda q: _has(q, "orbital", "atom"), lambda _: list(knowledge.ORBITAL_TOPICS)),
]

DEFAULT_TOPIC_RULE: TopicRule[List[str]] = TopicRule(
    "default", lambda _: True, lambda _: list(knowledge.GENERIC_TOPICS)
)

# --- Suggested experiments ---------------------------------------------------------


def _double_slit_experiments(_: str) -> List[SuggestedExperiment]:
    return [SuggestedExperiment(**e) for e in knowledge.DOUBLE_SLIT_EXPERIMENTS]


EXPERIMENT_RULES: List[TopicRule[List[SuggestedExperiment]]] = [
    TopicRule("double-slit", lambda q: _has(q, "interference", "slit", "wave"), _double_slit_experiments),
]

NO_EXPERIMENTS_RULE: TopicRule[List[SuggestedExperiment]] = TopicRule(
    "none", lambda _: True, lambda _: []
)

# --- Public API --------------------------------------------------------------------


def select_answer(question: str) -> str:
    return _first_match(ANSWER_RULES, normalize(question), DEFAULT_ANSWER_RULE).produce(question)


def select_related_topics(question: str) -> List[str]:
    return _first_match(RELATED_TOPIC_RULES, normalize(question), DEFAULT_TOPIC_RULE).produce(question)


def select_experiments(question: str) -> List[SuggestedExperiment]:
    return _first_match(EXPERIMENT_RULES, normalize(question), NO_EXPERIMENTS_RULE).produce(question)


def answer(question: str, context: Optional[str] = None) -> AnswerBundle:
    """Build the full answer bundle. Never raises; unmatched questions get the default reply."""
    q = normalize(question)
    rule = _first_match(ANSWER_RULES, q, DEFAULT_ANSWER_RULE)
    logger.debug("question matched rule=%s has_context=%s", rule.name, context is not None)
    return AnswerBundle(
        answer=rule.produce(question),
        related_topics=_first_match(RELATED_TOPIC_RULES, q, DEFAULT_TOPIC_RULE).produce(question),
        suggested_experiments=_first_match(EXPERIMENT_RULES, q, NO_EXPERIMENTS_RULE).produce(question),
    )
