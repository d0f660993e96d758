"""Application service for Order operations."""

import logging
from typing import List, Optional
from uuid import UUID, uuid4

from orderhub.application.dtos.order_dto import (
    AddProductRequest,
    OrderDTO,
    PagedOrdersDTO,
    UpdateProductRequest,
)
from orderhub.domain.entities import (
    Order,
    OrderedProduct,
    OrderedProductIngredient,
    Product,
)
from orderhub.domain.enums import OrderStatus
from orderhub.domain.exceptions import (
    BusinessRuleError,
    OrderedProductNotFoundError,
    OrderNotFoundError,
    OrderValidationError,
    ProductNotFoundError,
)
from orderhub.domain.repositories import OrderRepository, ProductRepository


logger = logging.getLogger(__name__)

DEFAULT_PAGE_SIZE = 10
MAX_PAGE_SIZE = 100
DEFAULT_INGREDIENT_QUANTITY = 1


def normalize_paging(page: int, page_size: int) -> tuple:
    """page < 1 -> 1; page_size < 1 -> 10; page_size > 100 -> 100."""
    if page < 1:
        page = 1
    if page_size < 1:
        page_size = DEFAULT_PAGE_SIZE
    elif page_size > MAX_PAGE_SIZE:
        page_size = MAX_PAGE_SIZE
    return page, page_size


class OrderApplicationService:
    """
    Application service for order operations other than confirmation.

    Responsibilities:
    - Load and persist the Order aggregate through the repository
    - Snapshot catalog data into ordered products
    - Transform domain entities into DTOs
    """

    def __init__(self, order_repository: OrderRepository, product_repository: ProductRepository) -> None:
        """Initialize order application service.

        Args:
            order_repository: Order persistence port
            product_repository: Catalog lookup port
        """
        self._orders = order_repository
        self._products = product_repository

    async def start_order(self, customer_id: Optional[UUID] = None, source: Optional[str] = None) -> OrderDTO:
        """Open a new empty order with a freshly generated code."""
        code = await self._orders.generate_order_code()
        order = Order.start(code=code, customer_id=customer_id, source=source)
        await self._orders.add(order)
        logger.info(f"[{order.id}] Order started with code {code}")
        return OrderDTO.from_entity(order)

    async def add_product(self, request: AddProductRequest) -> OrderDTO:
        """Add a catalog product to an order.

        Raises:
            OrderValidationError: Quantity not positive
            OrderNotFoundError: Order missing
            ProductNotFoundError: Product missing
            BusinessRuleError: Product unavailable, or order no longer editable
        """
        if request.quantity <= 0:
            raise OrderValidationError("Quantity must be greater than zero")

        order = await self._load_editable(request.order_id)

        product = await self._products.get_by_id(request.product_id)
        if product is None:
            raise ProductNotFoundError(request.product_id)
        if not product.is_active:
            raise BusinessRuleError(f"Product {product.id} is not available")
        if not product.is_valid():
            raise BusinessRuleError(f"Product {product.id} has no valid name or price")

        item = OrderedProduct(
            id=uuid4(),
            product_id=product.id,
            product_name=product.name,
            category=product.category,
            base_price=product.price,
            quantity=request.quantity,
        )
        item.set_observation(request.observation)
        for ingredient in self._build_ingredients(product, request):
            item.add_ingredient(ingredient)
        item.calculate_final_price()

        order.add_product(item)
        await self._orders.update(order)

        logger.info(
            f"[{order.id}] Added product {product.id} x{item.quantity} "
            f"(final={item.final_price}, total={order.total_price})"
        )
        return OrderDTO.from_entity(order)

    @staticmethod
    def _build_ingredients(product: Product, request: AddProductRequest) -> List[OrderedProductIngredient]:
        if not request.custom_ingredients:
            return [
                OrderedProductIngredient(
                    id=uuid4(),
                    name=base.name,
                    price=base.price,
                    quantity=DEFAULT_INGREDIENT_QUANTITY,
                    base_ingredient_id=base.id,
                )
                for base in product.base_ingredients
            ]

        ingredients = []
        for custom in request.custom_ingredients:
            base = product.find_base_ingredient(custom.product_base_ingredient_id)
            if base is None:
                continue
            ingredients.append(
                OrderedProductIngredient(
                    id=uuid4(),
                    name=base.name,
                    price=base.price,
                    quantity=custom.quantity,
                    base_ingredient_id=base.id,
                )
            )
        return ingredients

    async def update_product(self, request: UpdateProductRequest) -> OrderDTO:
        """Change quantity, observation or ingredient quantities of a line item."""
        if request.quantity is not None and request.quantity <= 0:
            raise OrderValidationError("Quantity must be greater than zero")

        order = await self._load_editable(request.order_id)
        item = order.find_product(request.ordered_product_id)
        if item is None:
            raise OrderedProductNotFoundError(request.ordered_product_id)

        if request.quantity is not None:
            item.set_quantity(request.quantity)
        if request.observation is not None:
            item.set_observation(request.observation)
        for change in request.custom_ingredients:
            for ingredient in item.custom_ingredients:
                if ingredient.base_ingredient_id == change.product_base_ingredient_id:
                    item.set_ingredient_quantity(ingredient.id, change.quantity)

        order.calculate_total()
        await self._orders.update(order)
        logger.info(f"[{order.id}] Updated item {item.id} (final={item.final_price}, total={order.total_price})")
        return OrderDTO.from_entity(order)

    async def remove_product(self, order_id: UUID, ordered_product_id: UUID) -> OrderDTO:
        order = await self._load_editable(order_id)
        if order.find_product(ordered_product_id) is None:
            raise OrderedProductNotFoundError(ordered_product_id)

        order.remove_product(ordered_product_id)
        await self._orders.update(order)
        logger.info(f"[{order.id}] Removed item {ordered_product_id} (total={order.total_price})")
        return OrderDTO.from_entity(order)

    async def get_order(self, order_id: UUID) -> OrderDTO:
        order = await self._orders.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        return OrderDTO.from_entity(order)

    async def list_orders(
        self, page: int = 1, page_size: int = DEFAULT_PAGE_SIZE, status: Optional[OrderStatus] = None
    ) -> PagedOrdersDTO:
        """List one page of orders, optionally filtered by status."""
        page, page_size = normalize_paging(page, page_size)
        result = await self._orders.get_paged(page, page_size, status)
        return PagedOrdersDTO.from_page(result)

    async def get_customer_orders(self, customer_id: UUID) -> List[OrderDTO]:
        return [OrderDTO.from_entity(o) for o in await self._orders.get_by_customer_id(customer_id)]

    async def get_orders_by_status(
        self, status: OrderStatus, exclude_preparation: bool = False
    ) -> List[OrderDTO]:
        if exclude_preparation:
            orders = await self._orders.get_by_status_without_preparation(status)
        else:
            orders = await self._orders.get_by_status(status)
        return [OrderDTO.from_entity(o) for o in orders]

    async def _load_editable(self, order_id: UUID) -> Order:
        order = await self._orders.get_by_id(order_id)
        if order is None:
            raise OrderNotFoundError(order_id)
        if order.status != OrderStatus.STARTED:
            raise BusinessRuleError(
                f"Order {order_id} can no longer be edited (status {order.status.name})"
            )
        return order
