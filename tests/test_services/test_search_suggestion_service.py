"""
Unit tests for search suggestions
"""
from unittest.mock import MagicMock

from stylehub.repositories.product_repository import ProductRepository
from stylehub.services.search_suggestion_service import (
    SearchSuggestionService,
    generate_keywords,
    rank_suggestions,
)


class TestGenerateKeywords:

    def test_keywords_containing_query(self):
        keywords = generate_keywords('swea')

        assert 'sweatshirt' in keywords
        assert 'sweater' in keywords

    def test_query_containing_keyword(self):
        # "summer dress" contains both keywords
        keywords = generate_keywords('summer dress')

        assert 'summer' in keywords
        assert 'dress' in keywords

    def test_variation_groups(self):
        assert {'hoodie', 'hoody', 'hooded'} <= set(generate_keywords('hood'))
        assert {'pants', 'trousers', 'jeans'} <= set(generate_keywords('pant'))
        assert {'blazer', 'coat', 'outerwear'} <= set(generate_keywords('Jacket'))

    def test_unrelated_query(self):
        assert generate_keywords('xyz') == []


class TestRankSuggestions:

    def test_prefix_first_then_shorter(self):
        ranked = rank_suggestions('shirt', ['Formal Shirt', 'tshirt', 'shirt', 'sweatshirt'])
        assert ranked == ['shirt', 'tshirt', 'sweatshirt', 'Formal Shirt']

    def test_ties_keep_insertion_order(self):
        ranked = rank_suggestions('ho', ['Hoody', 'hoody', 'Hobby'])
        assert ranked == ['Hoody', 'hoody', 'Hobby']

    def test_drops_non_matching_and_duplicates(self):
        ranked = rank_suggestions('dress', ['Men', 'dress', 'dress', '', 'Summer Dress'])
        assert ranked == ['dress', 'Summer Dress']

    def test_truncates_to_limit(self):
        candidates = [f'dress {i}' for i in range(20)]
        assert len(rank_suggestions('dress', candidates, limit=10)) == 10


class TestSearchSuggestionService:

    def test_short_query_returns_nothing(self):
        repo = MagicMock(spec=ProductRepository)
        service = SearchSuggestionService(product_repository=repo)

        assert service.suggest('h') == []
        assert service.suggest(None) == []
        assert service.suggest('  s  ') == []
        repo.find_suggestion_candidates.assert_not_called()

    def test_combines_names_categories_and_keywords(self):
        """Catalog names and keywords are ranked together"""
        # Arrange
        repo = MagicMock(spec=ProductRepository)
        repo.find_suggestion_candidates.return_value = [
            {'name': 'Classic White T-Shirt', 'category': 'Men'},
            {'name': 'Formal Shirt', 'category': 'Men'},
        ]
        service = SearchSuggestionService(product_repository=repo)

        # Act
        suggestions = service.suggest('shirt')

        # Assert
        repo.find_suggestion_candidates.assert_called_once_with('shirt', limit=10)
        assert suggestions == [
            'shirt', 'tshirt', 't-shirt', 'sweatshirt', 'Formal Shirt', 'Classic White T-Shirt',
        ]

    def test_category_match(self):
        repo = MagicMock(spec=ProductRepository)
        repo.find_suggestion_candidates.return_value = [
            {'name': 'Kids Cartoon T-Shirt', 'category': 'Kids'},
        ]
        service = SearchSuggestionService(product_repository=repo)

        assert service.suggest('kid') == ['Kids', 'Kids Cartoon T-Shirt']
