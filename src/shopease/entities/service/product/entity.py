"""Entity: Product."""

from pydantic import Field

from src.shopease.entities.core._base import Entity


class Product(Entity):
    """Catalog product.

    ``price`` is kept as a decimal string so currency values never pick up
    floating point rounding on their way to the client.
    """

    name: str = Field(description="Display name")
    price: str = Field(description="Unit price as a decimal string")
    image: str = Field(description="Image URL")
    description: str = Field(description="Long description")
