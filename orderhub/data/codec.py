"""
Order <-> document codec.

Maps the Order aggregate onto a single nested document: scalar fields as
typed leaves, items as a list of maps, ingredients one level deeper.
Optional fields are omitted instead of written as null so that sparse
secondary indexes (customer index) only see documents carrying the key.
"""
import logging
from typing import Any

from orderhub.domain.entities import Order, OrderedProduct, OrderedProductIngredient
from orderhub.domain.enums import OrderStatus, PaymentStatus, ProductCategory
from orderhub.domain.exceptions import ItemSizeExceededError

from . import attributes as attr
from .attributes import AttributeValue, Document


logger = logging.getLogger(__name__)

DEFAULT_MAX_ITEM_SIZE_KB = 400
STRUCTURE_OVERHEAD = 1.2


class OrderDocumentCodec:
    """Bidirectional mapper between Order and its stored document."""

    def __init__(self, max_item_size_kb: int = DEFAULT_MAX_ITEM_SIZE_KB):
        self.max_item_size_kb = max_item_size_kb

    # ------------------------------------------------------------------
    # Encode
    # ------------------------------------------------------------------

    def to_document(self, order: Order) -> Document:
        """Convert aggregate to document.

        Args:
            order: Order aggregate

        Returns:
            Typed key/value document ready for the store
        """
        doc: Document = {
            attr.ORDER_ID: attr.string_value(str(order.id)),
            attr.CREATED_AT: attr.string_value(order.created_at.isoformat()),
            attr.ORDER_STATUS: attr.number_value(int(order.status)),
            attr.PAYMENT_STATUS: attr.number_value(int(order.payment_status)),
            attr.TOTAL_PRICE: attr.number_value(order.total_price),
        }
        if order.code:
            doc[attr.CODE] = attr.string_value(order.code)
        if order.customer_id is not None:
            doc[attr.CUSTOMER_ID] = attr.string_value(str(order.customer_id))
        if order.source:
            doc[attr.ORDER_SOURCE] = attr.string_value(order.source)
        if order.items:
            doc[attr.ITEMS] = attr.list_value([self._item_to_value(item) for item in order.items])
        return doc

    def _item_to_value(self, item: OrderedProduct) -> AttributeValue:
        fields = {
            attr.ITEM_ID: attr.string_value(str(item.id)),
            attr.ITEM_PRODUCT_ID: attr.string_value(str(item.product_id)),
            attr.ITEM_QUANTITY: attr.number_value(item.quantity),
            attr.ITEM_FINAL_PRICE: attr.number_value(item.final_price),
            attr.ITEM_BASE_PRICE: attr.number_value(item.base_price),
            attr.ITEM_CATEGORY: attr.number_value(int(item.category)),
        }
        if item.product_name:
            fields[attr.ITEM_PRODUCT_NAME] = attr.string_value(item.product_name)
        if item.observation:
            fields[attr.ITEM_OBSERVATION] = attr.string_value(item.observation)
        if item.custom_ingredients:
            fields[attr.ITEM_CUSTOM_INGREDIENTS] = attr.list_value(
                [self._ingredient_to_value(i) for i in item.custom_ingredients]
            )
        return attr.map_value(fields)

    @staticmethod
    def _ingredient_to_value(ingredient: OrderedProductIngredient) -> AttributeValue:
        fields = {
            attr.INGREDIENT_ID: attr.string_value(str(ingredient.id)),
            attr.INGREDIENT_PRICE: attr.number_value(ingredient.price),
            attr.INGREDIENT_QUANTITY: attr.number_value(ingredient.quantity),
        }
        if ingredient.name:
            fields[attr.INGREDIENT_NAME] = attr.string_value(ingredient.name)
        if ingredient.base_ingredient_id is not None:
            fields[attr.INGREDIENT_BASE_ID] = attr.string_value(str(ingredient.base_ingredient_id))
        return attr.map_value(fields)

    # ------------------------------------------------------------------
    # Decode
    # ------------------------------------------------------------------

    def from_document(self, doc: Document) -> Order:
        """Rebuild aggregate from document. Missing optional keys get defaults."""
        order_id = attr.get_uuid(doc, attr.ORDER_ID)
        order = Order(
            id=order_id,
            code=attr.get_string(doc, attr.CODE, ""),
            created_at=attr.get_datetime(doc, attr.CREATED_AT),
            customer_id=attr.get_uuid(doc, attr.CUSTOMER_ID),
            status=OrderStatus(attr.get_int(doc, attr.ORDER_STATUS, int(OrderStatus.STARTED))),
            payment_status=PaymentStatus(
                attr.get_int(doc, attr.PAYMENT_STATUS, int(PaymentStatus.NOT_STARTED))
            ),
            total_price=attr.get_decimal(doc, attr.TOTAL_PRICE),
            source=attr.get_string(doc, attr.ORDER_SOURCE),
        )
        order.items = [
            self._item_from_value(attr.get_map(value), order_id)
            for value in attr.get_list(doc, attr.ITEMS)
        ]
        return order

    def _item_from_value(self, fields: Document, order_id: Any) -> OrderedProduct:
        item_id = attr.get_uuid(fields, attr.ITEM_ID)
        return OrderedProduct(
            id=item_id,
            order_id=order_id,
            product_id=attr.get_uuid(fields, attr.ITEM_PRODUCT_ID),
            product_name=attr.get_string(fields, attr.ITEM_PRODUCT_NAME, ""),
            category=ProductCategory(
                attr.get_int(fields, attr.ITEM_CATEGORY, int(ProductCategory.MEAL))
            ),
            base_price=attr.get_decimal(fields, attr.ITEM_BASE_PRICE),
            quantity=attr.get_int(fields, attr.ITEM_QUANTITY, 1),
            final_price=attr.get_decimal(fields, attr.ITEM_FINAL_PRICE),
            observation=attr.get_string(fields, attr.ITEM_OBSERVATION),
            custom_ingredients=[
                self._ingredient_from_value(attr.get_map(value), item_id)
                for value in attr.get_list(fields, attr.ITEM_CUSTOM_INGREDIENTS)
            ],
        )

    @staticmethod
    def _ingredient_from_value(fields: Document, ordered_product_id: Any) -> OrderedProductIngredient:
        return OrderedProductIngredient(
            id=attr.get_uuid(fields, attr.INGREDIENT_ID),
            name=attr.get_string(fields, attr.INGREDIENT_NAME, ""),
            price=attr.get_decimal(fields, attr.INGREDIENT_PRICE),
            quantity=attr.get_int(fields, attr.INGREDIENT_QUANTITY),
            ordered_product_id=ordered_product_id,
            base_ingredient_id=attr.get_uuid(fields, attr.INGREDIENT_BASE_ID),
        )

    # ------------------------------------------------------------------
    # Size guard
    # ------------------------------------------------------------------

    def estimate_size(self, order: Order) -> int:
        """Approximate stored size in bytes.

        Sums the character length of every scalar leaf and adds a flat 20%
        for structure. Not an exact byte count.
        """
        size = sum(len(str(leaf)) for leaf in attr.iter_scalars(self.to_document(order)))
        return int(size * STRUCTURE_OVERHEAD)

    def validate_size(self, order: Order) -> None:
        """Reject orders whose estimated size exceeds the configured ceiling.

        Raises:
            ItemSizeExceededError: Estimate above max_item_size_kb
        """
        estimated = self.estimate_size(order)
        if estimated > self.max_item_size_kb * 1024:
            logger.error(
                f"[{order.id}] Order document too large: {estimated} bytes (limit {self.max_item_size_kb} KB)"
            )
            raise ItemSizeExceededError(estimated / 1024, self.max_item_size_kb)

