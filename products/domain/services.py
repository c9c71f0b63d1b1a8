"""
Product domain services.

Domain services contain business logic that doesn't naturally
fit within a single entity.
"""
from typing import Dict, Iterable, List

from products.domain.product import Product


class TopStockSelector:
    """Domain service for the highest-stock product per office."""

    @staticmethod
    def outranks(candidate: Product, current: Product) -> bool:
        """
        Tell whether a candidate beats the current top product of its office.

        Higher stock wins; on equal stock the lowest id wins.

        Args:
            candidate: Product being considered
            current: Current top product of the same office

        Returns:
            True if the candidate should replace the current top product
        """
        if candidate.stock != current.stock:
            return candidate.stock > current.stock
        return candidate.id < current.id

    @classmethod
    def select(cls, products: Iterable[Product]) -> List[Product]:
        """
        Pick exactly one product per office: the one with the most stock.

        The input order does not matter. Offices without products simply
        do not appear in the result.

        Args:
            products: Persisted products, possibly spanning several offices

        Returns:
            One product per office, ordered by office id
        """
        top_by_office: Dict[int, Product] = {}
        for product in products:
            current = top_by_office.get(product.office_id)
            if current is None or cls.outranks(product, current):
                top_by_office[product.office_id] = product

        return [top_by_office[office_id] for office_id in sorted(top_by_office)]
