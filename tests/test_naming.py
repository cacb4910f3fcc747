"""Tests for name normalization and product naming rules."""

import pytest

from catalog_admin.exceptions import DuplicateNameError, EmptyNameError
from catalog_admin.services.naming import (
    compose_name,
    decompose_name,
    exists,
    normalize,
    rebrand_name,
    validate_unique,
)


class TestNormalize:
    """Test normalize()."""

    def test_title_cases_each_word(self):
        assert normalize("nike air") == "Nike Air"

    def test_trims_and_lowercases_rest(self):
        assert normalize("  ADIDAS  ") == "Adidas"

    def test_collapses_inner_whitespace(self):
        assert normalize("new   balance") == "New Balance"

    def test_blank_input(self):
        assert normalize("   ") == ""
        assert normalize(None) == ""


class TestExists:
    """Test exists()."""

    def test_case_insensitive_match(self):
        assert exists("NIKE", ["nike", "Puma"])

    def test_no_match(self):
        assert not exists("Reebok", ["Nike", "Puma"])

    def test_ignores_surrounding_whitespace(self):
        assert exists(" puma ", ["Puma"])


class TestValidateUnique:
    """Test validate_unique()."""

    def test_duplicate_rejected(self):
        with pytest.raises(DuplicateNameError) as exc_info:
            validate_unique("Nike", ["nike", "Puma"])
        assert exc_info.value.existing == "nike"

    def test_unique_accepted(self):
        assert validate_unique("Nike", ["Puma"]) == "Nike"

    def test_returns_trimmed_name(self):
        assert validate_unique("  Reebok ", ["Puma"]) == "Reebok"

    def test_blank_rejected(self):
        with pytest.raises(EmptyNameError):
            validate_unique("   ", ["Puma"])

    def test_excluding_allows_self(self):
        """Renaming an entry onto its own name (any case) is not a collision."""
        assert validate_unique("NIKE", ["Nike", "Puma"], excluding="nike") == "NIKE"

    def test_excluding_only_skips_that_entry(self):
        with pytest.raises(DuplicateNameError):
            validate_unique("Puma", ["Nike", "Puma"], excluding="Nike")

    def test_error_is_a_value_error(self):
        with pytest.raises(ValueError, match="Brand 'Nike' already exists"):
            validate_unique("Nike", ["Nike"], kind="Brand")


class TestProductNaming:
    """Test compose_name(), decompose_name() and rebrand_name()."""

    def test_compose(self):
        assert compose_name("Nike", "Air Max") == "Nike Air Max"

    def test_compose_with_empty_base(self):
        assert compose_name("Nike", "") == "Nike"

    def test_decompose(self):
        assert decompose_name("Nike Air Max", "Nike") == "Air Max"

    def test_decompose_brand_only(self):
        assert decompose_name("Nike", "Nike") == ""

    def test_decompose_removes_first_match_only(self):
        """The label keeps any later occurrence of the brand."""
        assert decompose_name("Puma Puma Logo Tee", "Puma") == "Puma Logo Tee"

    def test_decompose_without_brand(self):
        assert decompose_name(" Air Max ", "") == "Air Max"

    @pytest.mark.parametrize(
        "brand, base",
        [
            ("Nike", "Air Max"),
            ("Adidas", "Ultraboost 22"),
            ("Puma", "Suede Classic XXI"),
            ("New Balance", "990v6"),
        ],
    )
    def test_round_trip(self, brand, base):
        composed = compose_name(brand, base)
        assert compose_name(brand, decompose_name(composed, brand)) == composed

    def test_rebrand(self):
        assert rebrand_name("Nike Air Max", "Nike", "Nyke") == "Nyke Air Max"
