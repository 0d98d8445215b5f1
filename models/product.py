# Catalog records as delivered by the external catalog service (GET /products).
# The engine treats them as a read-only snapshot for the whole selection session,
# so every DTO here is frozen. Field aliases follow the catalog's camelCase wire names.
from pydantic import BaseModel, ConfigDict, Field, field_validator

from enums.addon_selection_mode import AddonSelectionMode
from enums.price_rule import PriceRule


class SizeDTO(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    price: float = Field(ge=0)
    order: int = 0


class AddonDTO(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    price: float = Field(default=0.0, ge=0)


class AddonGroupDTO(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    type: AddonSelectionMode = AddonSelectionMode.MULTI
    addons: list[AddonDTO] = Field(default_factory=list)

    @field_validator('type', mode='before')
    @classmethod
    def validate_type(cls, v):
        """Accept enum members and catalog strings ("single", "multi", "multiple")."""
        if v is None:
            return AddonSelectionMode.MULTI
        return AddonSelectionMode.from_string(v)


class PizzaSizeConfigDTO(BaseModel):
    """Per size-name override inside a pizza config."""
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    max_flavors: int | None = Field(default=None, alias="maxFlavors")


class PizzaConfigDTO(BaseModel):
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    flavor_category_id: str | None = Field(default=None, alias="flavorCategoryId")
    price_rule: PriceRule | None = Field(default=None, alias="priceRule")
    max_flavors: int | None = Field(default=None, alias="maxFlavors")
    sizes: dict[str, PizzaSizeConfigDTO] = Field(default_factory=dict)

    @field_validator('price_rule', mode='before')
    @classmethod
    def validate_price_rule(cls, v):
        # Unknown rules collapse to HIGHER, see PriceRule.from_string
        if v is None:
            return None
        return PriceRule.from_string(v)

    @field_validator('sizes', mode='before')
    @classmethod
    def validate_sizes(cls, v):
        return v or {}


class ProductDTO(BaseModel):
    """
    Catalog product. Flavors offered on pizza products are ProductDTOs as well,
    drawn from the category referenced by pizza_config.flavor_category_id.
    """
    model_config = ConfigDict(frozen=True, populate_by_name=True)

    id: str
    name: str
    price: float = Field(default=0.0, ge=0)
    category_id: str | None = Field(default=None, alias="categoryId")
    is_available: bool = Field(default=True, alias="isAvailable")
    sizes: list[SizeDTO] = Field(default_factory=list)
    addon_groups: list[AddonGroupDTO] = Field(default_factory=list, alias="addonGroups")
    pizza_config: PizzaConfigDTO | None = Field(default=None, alias="pizzaConfig")

    @field_validator('sizes', 'addon_groups', mode='before')
    @classmethod
    def validate_lists(cls, v):
        return v or []

    @property
    def has_sizes(self) -> bool:
        return len(self.sizes) > 0

    @property
    def is_pizza(self) -> bool:
        return self.pizza_config is not None
