"""Fake cart service: keeps carts in memory for development and testing."""

from ordering.cart.port import CartData, CartLine, CartService, CartServiceError


class FakeCartService(CartService):
    """Cart service that stores carts in a dict and can be told to fail."""

    def __init__(self) -> None:
        self.carts: dict[str, list[CartLine]] = {}
        self.calls: list[dict] = []
        self.fail_get = False
        self.fail_clear = False
        self.failure_reason = "Cart service unavailable"

    def configure(
        self,
        fail_get: bool = False,
        fail_clear: bool = False,
        failure_reason: str = "Cart service unavailable",
    ) -> None:
        """Configure the fake adapter behavior for testing."""
        self.fail_get = fail_get
        self.fail_clear = fail_clear
        self.failure_reason = failure_reason

    def add_line(self, user_id: str, line: CartLine) -> None:
        self.carts.setdefault(str(user_id), []).append(line)

    def calls_to(self, method: str) -> list[dict]:
        return [call for call in self.calls if call["method"] == method]

    def get_cart_by_user_id(self, user_id: str) -> CartData:
        self.calls.append({"method": "get_cart_by_user_id", "user_id": user_id})
        if self.fail_get:
            raise CartServiceError(self.failure_reason)

        return CartData(user_id=str(user_id), items=tuple(self.carts.get(str(user_id), [])))

    def clear_cart_by_user_id(self, user_id: str) -> None:
        self.calls.append({"method": "clear_cart_by_user_id", "user_id": user_id})
        if self.fail_clear:
            raise CartServiceError(self.failure_reason)

        self.carts.pop(str(user_id), None)

    def reset(self) -> None:
        """Clear carts and recorded calls (useful between tests)."""
        self.carts.clear()
        self.calls.clear()
        self.configure()
