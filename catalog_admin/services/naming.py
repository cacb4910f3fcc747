"""
Name normalization and product naming rules.

Brand and type names are title-cased and compared case-insensitively.
Product display names are stored with the brand name as a prefix, so a brand
change has to strip the old prefix and compose the remainder with the new one.
"""

from typing import Iterable, Optional

from catalog_admin.exceptions import DuplicateNameError, EmptyNameError


def normalize(raw: str) -> str:
    """
    Capitalize a brand or type name consistently.

    Lowercases the whole string, then upper-cases the first letter of each
    whitespace-separated word. Surrounding whitespace is trimmed and inner
    runs of whitespace collapse to a single space.

    Example:
        >>> normalize("  nike AIR  ")
        'Nike Air'
    """
    words = (raw or "").lower().split()
    return " ".join(word[:1].upper() + word[1:] for word in words)


def _key(name: Optional[str]) -> str:
    return (name or "").strip().lower()


def exists(name: str, existing_names: Iterable[str]) -> bool:
    """Case-insensitive containment check."""
    target = _key(name)
    return any(_key(existing) == target for existing in existing_names)


def validate_unique(
    name: str,
    existing_names: Iterable[str],
    excluding: Optional[str] = None,
    kind: str = "Name",
) -> str:
    """
    Validate that a name is non-blank and not already taken.

    Args:
        name: Candidate name
        existing_names: Names currently in use
        excluding: One existing name to ignore (the entry being renamed)
        kind: Label used in error messages ("Brand", "Type")

    Returns:
        The trimmed name

    Raises:
        EmptyNameError: If the name is blank after trimming
        DuplicateNameError: If a case-insensitive match exists
    """
    trimmed = (name or "").strip()
    if not trimmed:
        raise EmptyNameError(kind)

    target = trimmed.lower()
    skip = _key(excluding) if excluding is not None else None
    for existing in existing_names:
        existing_key = _key(existing)
        if skip is not None and existing_key == skip:
            continue
        if existing_key == target:
            raise DuplicateNameError(trimmed, existing=existing, kind=kind)

    return trimmed


def compose_name(brand_name: str, base_label: str) -> str:
    """Build the stored product name: brand followed by the base label."""
    return f"{brand_name or ''} {base_label or ''}".strip()


def decompose_name(full_name: str, brand_name: str) -> str:
    """
    Recover the base label from a stored product name.

    Only the first occurrence of the brand name is removed. If the base label
    itself contains the brand name and the prefix was already missing, the
    wrong occurrence may be stripped.
    """
    if not brand_name:
        return (full_name or "").strip()
    return (full_name or "").replace(brand_name, "", 1).strip()


def rebrand_name(full_name: str, old_brand: str, new_brand: str) -> str:
    """Swap the brand prefix of a stored product name."""
    return compose_name(new_brand, decompose_name(full_name, old_brand))
