"""Builds the payment snapshot of an order."""

from orderhub.application.dtos.payment_dto import (
    OrderSnapshot,
    OrderSnapshotIngredient,
    OrderSnapshotItem,
    OrderSnapshotOrder,
    OrderSnapshotPricing,
)
from orderhub.domain.entities import Order


SNAPSHOT_VERSION = 1


class OrderSnapshotBuilder:
    """
    Maps an Order to the snapshot sent to the payment gateway.

    Only order identity, pricing and line items are copied. Customer id and
    any other personal attribute are left out.
    """

    def __init__(self, currency: str = "BRL"):
        self.currency = currency

    def build(self, order: Order) -> OrderSnapshot:
        return OrderSnapshot(
            order=OrderSnapshotOrder(
                order_id=order.id,
                code=order.code,
                created_at=order.created_at,
            ),
            pricing=OrderSnapshotPricing(total_price=order.total_price, currency=self.currency),
            items=[
                OrderSnapshotItem(
                    product_id=item.product_id,
                    product_name=item.product_name,
                    quantity=item.quantity,
                    final_price=item.final_price,
                    observation=item.observation,
                    custom_ingredients=[
                        OrderSnapshotIngredient(
                            name=ingredient.name,
                            price=ingredient.price,
                            quantity=ingredient.quantity,
                        )
                        for ingredient in item.custom_ingredients
                    ],
                )
                for item in order.items
            ],
            version=SNAPSHOT_VERSION,
        )
