"""Element types used across the test-suite."""

import functools
from collections import namedtuple
from dataclasses import dataclass
from typing import NamedTuple, Optional, TypedDict

from pydantic import BaseModel
from sqlalchemy import ForeignKey
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship


@dataclass
class Category:
    id: int
    name: str


@dataclass
class Product:
    id: int
    name: str
    category: Optional[Category] = None
    price: float = 0.0
    _secret: str = ""

    @property
    def label(self) -> str:
        return f"{self.id}-{self.name}"

    @functools.cached_property
    def name_length(self) -> int:
        return len(self.name)


@dataclass
class DiscountedProduct(Product):
    discount: int = 0


class Supplier(BaseModel):
    id: int
    name: str
    country: Optional[str] = None


class Shipment(BaseModel):
    id: int
    supplier: Supplier
    weight: float


class OrderLine(TypedDict):
    sku: str
    quantity: int


class Base(DeclarativeBase):
    pass


class CategoryRow(Base):
    __tablename__ = "categories"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str]


class ProductRow(Base):
    __tablename__ = "products"

    id: Mapped[int] = mapped_column(primary_key=True)
    name: Mapped[str]
    category_id: Mapped[Optional[int]] = mapped_column(ForeignKey("categories.id"))
    category: Mapped[Optional[CategoryRow]] = relationship()


Point = namedtuple("Point", "x y")


class Coordinate(NamedTuple):
    lat: float
    lon: float


class SlottedPart:
    __slots__ = ("code", "weight", "_cache")

    def __init__(self, code, weight):
        self.code = code
        self.weight = weight
        self._cache = None


class Assembly:
    __slots__ = "part"

    def __init__(self, part):
        self.part = part


class PlainRecord:
    def __init__(self, name):
        self.name = name
