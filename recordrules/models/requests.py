"""Request records and the database context they are validated against.

The models carry no constraints of their own; their rules live in
``recordrules.validators.catalog``.
"""

from pydantic import BaseModel, Field


class LoginRequest(BaseModel):
    """Credentials submitted to log in."""

    username: str
    password: str


class AddressRequest(BaseModel):
    """Postal address embedded in a registration."""

    street: str
    city: str
    country: str


class RegisterUserRequest(BaseModel):
    """New user registration."""

    username: str
    password: str
    confirm_password: str
    name: str
    address: AddressRequest


class CreateCategoryRequest(BaseModel):
    """Request to create a product category."""

    id: str
    name: str


class ProductVariant(BaseModel):
    name: str
    price: int


class Product(BaseModel):
    """A product with its purchasable variants."""

    id: str
    name: str
    variants: list[ProductVariant] = Field(default_factory=list)


class DatabaseContext(BaseModel):
    """Current user store occupancy, consulted by the registration capacity check."""

    total: int
    max_data: int

    model_config = {"frozen": True}
