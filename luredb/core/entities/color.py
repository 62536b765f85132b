"""
Color domain entity.

A cached color is a flattened, frozen copy of a document color
annotated with the manufacturer that produced it.
"""

from pydantic import BaseModel, ConfigDict


class Color(BaseModel):
    """
    A named lure finish produced by one manufacturer.

    `id` follows the `{manufacturer}-{code}` convention (e.g. `ccbc-00`,
    `ccbc-00b`). `company_id` is the manufacturer's own catalog code and
    is not unique across manufacturers. Unknown years are None, never 0.
    """

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    year_introduced: int | None = None
    year_last_used: int | None = None
    company_id: str | None = None
    pre1925_id: tuple[str, ...] | None = None
    manufacturer_id: str
    manufacturer_name: str
