"""Catalog product categories."""

from enum import IntEnum


class ProductCategory(IntEnum):
    MEAL = 1
    DRINK = 2
    SIDE_DISH = 3
    DESSERT = 4
