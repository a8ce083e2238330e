"""Repository for the Order aggregate."""

from ordering.domain import ordering
from ordering.order.order import Order


@ordering.repository(part_of=Order)
class OrderRepository:
    """Order lookups beyond get-by-id.

    Paged queries return one page of orders, newest first, together with the
    total number of matches.
    """

    def find_by_number(self, order_number: str) -> Order | None:
        items = self._dao.query.filter(order_number=order_number).all().items
        return items[0] if items else None

    def exists(self, order_id: str) -> bool:
        return self._dao.query.filter(id=str(order_id)).all().total > 0

    def find_by_user(self, user_id: str, limit: int, offset: int) -> tuple[list[Order], int]:
        return self._page(limit, offset, user_id=str(user_id))

    def find_by_status(self, status: str, limit: int, offset: int) -> tuple[list[Order], int]:
        return self._page(limit, offset, status=status)

    def find_by_payment_status(self, payment_status: str, limit: int, offset: int) -> tuple[list[Order], int]:
        return self._page(limit, offset, payment_status=payment_status)

    def _page(self, limit: int, offset: int, **filters) -> tuple[list[Order], int]:
        result = self._dao.query.filter(**filters).order_by("-created_at").offset(offset).limit(limit).all()
        return result.items, result.total
