"""
Lexical relevance scoring.

Scores a query against a candidate text with token containment,
plus boosts for matching region and type tags. Scores are in [0.0, 1.0].
"""

import string
from typing import List, Optional

STOP_WORDS = frozenset({
    # articles and determiners
    "the", "a", "an", "this", "that", "these", "those", "some", "any",
    # auxiliary and modal verbs
    "is", "are", "was", "were", "be", "been", "being", "am",
    "do", "does", "did", "have", "has", "had",
    "can", "could", "will", "would", "shall", "should", "may", "might", "must",
    # prepositions
    "of", "in", "on", "at", "to", "for", "with", "from", "by", "about",
    "into", "over", "under", "between", "through", "during", "like",
    # conjunctions
    "and", "or", "but", "nor", "so", "yet", "if", "than", "then",
    # question words and pronouns
    "what", "which", "who", "whom", "whose", "where", "when", "why", "how",
    "you", "your", "its", "their", "they", "them", "there", "tell", "me",
})

MIN_TOKEN_LENGTH = 3
REGION_BOOST = 0.3
TYPE_BOOST = 0.2


def tokenize(text: str) -> List[str]:
    tokens = []
    for raw in text.lower().split():
        token = raw.strip(string.punctuation)
        if len(token) < MIN_TOKEN_LENGTH or token in STOP_WORDS:
            continue
        tokens.append(token)
    return tokens


class LexicalScorer:
    def score(
        self,
        query: str,
        text: str,
        *,
        region: Optional[str] = None,
        type: Optional[str] = None,
    ) -> float:

        query_lower = query.lower()
        text_lower = text.lower()

        # A query with no significant tokens scores 0 even when it is a literal substring.
        query_tokens = tokenize(query_lower)
        if not query_tokens:
            return 0.0

        if query_lower.strip() in text_lower:
            return 1.0

        text_tokens = tokenize(text_lower)

        significant_matches = sum(
            1 for q in query_tokens
            if any(q in t or t in q for t in text_tokens)
        )
        base_score = significant_matches / len(query_tokens)

        region_boost = 0.0
        if region and any(r in query_lower for r in region.lower().split()):
            region_boost = REGION_BOOST

        type_boost = 0.0
        if type and type.lower() in query_lower:
            type_boost = TYPE_BOOST

        return min(1.0, base_score + region_boost + type_boost)
