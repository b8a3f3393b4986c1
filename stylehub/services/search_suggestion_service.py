"""
Search Suggestion Service
Type-ahead suggestions for the storefront search box

Suggestions mix catalog data (product names, categories) with a fixed
list of clothing keywords, keep only those containing the query, and
rank prefix matches first, then shorter strings.
"""
from typing import Iterable, List, Optional

from stylehub.repositories.product_repository import ProductRepository


MIN_QUERY_LENGTH = 2
DEFAULT_LIMIT = 10

CLOTHING_KEYWORDS = [
    "shirt", "t-shirt", "tshirt", "blouse", "top", "dress", "skirt", "pants", "jeans", "trousers",
    "hoodie", "hoody", "sweatshirt", "jacket", "coat", "blazer", "suit", "sweater", "jumper",
    "cardigan", "vest", "tank", "crop", "long sleeve", "short sleeve", "sleeveless",
    "casual", "formal", "business", "party", "evening", "day", "night", "summer", "winter",
    "spring", "fall", "autumn", "seasonal", "trendy", "fashion", "style", "outfit",
]

# query fragment -> related terms
KEYWORD_VARIATIONS = [
    ("hood", ["hoodie", "hoody", "hooded"]),
    ("shirt", ["t-shirt", "tshirt", "blouse", "top"]),
    ("dress", ["evening dress", "party dress", "casual dress"]),
    ("pant", ["pants", "trousers", "jeans"]),
    ("jacket", ["blazer", "coat", "outerwear"]),
]


def generate_keywords(query: str) -> List[str]:
    """
    Keywords related to the query

    A keyword qualifies when it contains the query or the query contains
    it; variation groups add synonyms for common garment fragments.
    Duplicates are possible and removed by the caller.
    """
    query_lower = query.lower()
    keywords = [
        keyword for keyword in CLOTHING_KEYWORDS
        if query_lower in keyword or keyword in query_lower
    ]

    for fragment, related in KEYWORD_VARIATIONS:
        if fragment in query_lower:
            keywords.extend(related)

    return keywords


def rank_suggestions(query: str, candidates: Iterable[str], limit: int = DEFAULT_LIMIT) -> List[str]:
    """
    Deduplicate, filter and order suggestion candidates

    Candidates not containing the query (case-insensitive) are dropped.
    Prefix matches come first, then shorter strings; ties keep the
    order in which candidates were first seen.
    """
    query_lower = query.lower()
    unique = list(dict.fromkeys(c for c in candidates if c))
    matching = [c for c in unique if query_lower in c.lower()]
    ranked = sorted(matching, key=lambda c: (not c.lower().startswith(query_lower), len(c)))
    return ranked[:limit]


class SearchSuggestionService:
    """Builds ranked suggestions from the catalog and keyword list"""

    def __init__(self, product_repository: Optional[ProductRepository] = None):
        self.products = product_repository or ProductRepository()

    def suggest(self, query: Optional[str], limit: int = DEFAULT_LIMIT) -> List[str]:
        query = (query or "").strip()
        if len(query) < MIN_QUERY_LENGTH:
            return []

        rows = self.products.find_suggestion_candidates(query, limit=limit)

        # Names first, then categories, then keywords: insertion order breaks ties
        candidates = [row['name'] for row in rows if row.get('name')]
        candidates += [row['category'] for row in rows if row.get('category')]
        candidates += generate_keywords(query)

        return rank_suggestions(query, candidates, limit=limit)
