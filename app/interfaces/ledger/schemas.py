"""
Pydantic schemas for ledger API request/response validation.

These schemas enforce input validation and define the API contract.
Request fields are strictly typed: a number is never accepted where a
string is expected and vice versa. No business logic belongs here.
"""

from pydantic import BaseModel, ConfigDict, Field

USER_ID_DESCRIPTION = "Identifier of the user; doubles as the credential"


class LedgerRequest(BaseModel):
    """Base class for all ledger request bodies.

    Unknown fields are ignored. NaN and infinities are rejected
    because they cannot be written back as JSON.
    """

    model_config = ConfigDict(strict=True, allow_inf_nan=False)


class UserRequest(LedgerRequest):
    """Request body carrying only a user_id.

    Used by add_user, get_orders and get_userdetail.
    """

    user_id: str = Field(..., min_length=1, description=USER_ID_DESCRIPTION)


class AddOrderRequest(UserRequest):
    """Request schema for the add_order endpoint.

    Attributes:
        source: Currency being sold.
        target: Currency being bought.
        value: Amount of source currency. Any number is accepted.
        price: Exchange price. Any number is accepted.
    """

    source: str = Field(..., description="Currency code being sold")
    target: str = Field(..., description="Currency code being bought")
    value: float = Field(..., description="Amount of the source currency")
    price: float = Field(..., description="Requested exchange price")


class OrderItem(BaseModel):
    """A single order in the get_orders response."""

    user_id: str
    source: str
    target: str
    value: float
    price: float


class OrdersResponse(BaseModel):
    """Response schema for the get_orders endpoint."""

    orders: list[OrderItem]


class UserDetailResponse(BaseModel):
    """Response schema for the get_userdetail endpoint.

    ``balance`` is a list of ``[currency, amount]`` pairs, not an object.
    """

    user_id: str
    balance: list[tuple[str, float]]


class ErrorResponse(BaseModel):
    """Body of unexpected server errors (HTTP 500)."""

    error: str
