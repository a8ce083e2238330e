"""Ordering bounded context: checkout and the order lifecycle.

Orders are standard CQRS aggregates (not event sourced). Checkout converts a
user's cart into a pending order, and lifecycle commands move it through the
order state machine.
"""

import structlog
from protean.domain import Domain

ordering = Domain(name="ordering")

logger = structlog.get_logger(__name__)
