# Overview: Resolves a spoken product token to product records by substring containment.

from __future__ import annotations

from typing import Iterable, Optional

from ..models import Product


def product_matches(product: Product, fragment: str) -> bool:
    """
    Containment match in either direction, case-insensitive:
    - the canonical name contains the fragment
    - the Bengali name contains the fragment
    - the fragment contains the first word of the canonical name
    """
    needle = fragment.lower()
    name = product.name.lower()
    first_word = name.split(" ")[0]
    return (
        needle in name
        or needle in product.name_bn.lower()
        or first_word in needle
    )


def matching_products(fragment: str, products: Iterable[Product]) -> list[Product]:
    return [p for p in products if product_matches(p, fragment)]


def find_product(fragment: str, products: Iterable[Product]) -> Optional[Product]:
    """First match in list order wins; there is no ranking."""
    for product in products:
        if product_matches(product, fragment):
            return product
    return None


def localized_product_name(fragment: str, products: Iterable[Product]) -> str:
    """
    Bengali display name of the first matching product, or the token itself.

    Uses the same three-way product_matches() as the stock update, so a
    token typed in Bengali also resolves (a name-only lookup would echo it
    back unchanged even when it adjusted a product).
    """
    product = find_product(fragment, products)
    return product.name_bn if product else fragment
