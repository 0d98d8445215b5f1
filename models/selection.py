from pydantic import BaseModel, ConfigDict


class SelectionStateDTO(BaseModel):
    """
    Everything the user picked for one product in the add-to-cart dialog.

    Immutable: every tap produces a new state via model_copy(update=...).
    flavor_ids keeps selection order, which drives the composed display name.
    """
    model_config = ConfigDict(frozen=True)

    product_id: str
    size_id: str | None = None
    addon_ids: tuple[str, ...] = ()
    flavor_ids: tuple[str, ...] = ()
    quantity: int = 1
    observation: str = ""
