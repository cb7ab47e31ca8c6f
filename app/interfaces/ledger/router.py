"""
FastAPI router for the ledger bounded context.

All routes delegate to use cases. No business logic here.
Bodies are parsed by the shared ``request_body`` dependency.
Error mapping is handled by centralized error handlers.
"""

from fastapi import APIRouter, Depends
from fastapi.responses import Response

from app.application.ledger.dtos import (
    GetOrdersQuery,
    GetUserDetailQuery,
    PlaceOrderCommand,
    RegisterUserCommand,
)
from app.application.ledger.get_orders import GetOrdersUseCase
from app.application.ledger.get_user_detail import GetUserDetailUseCase
from app.application.ledger.place_order import PlaceOrderUseCase
from app.application.ledger.register_user import RegisterUserUseCase
from app.interfaces.ledger.dependencies import (
    get_orders_use_case,
    get_place_order_use_case,
    get_register_user_use_case,
    get_user_detail_use_case,
)
from app.interfaces.ledger.parsing import request_body
from app.interfaces.ledger.schemas import (
    AddOrderRequest,
    OrderItem,
    OrdersResponse,
    UserDetailResponse,
    UserRequest,
)

router = APIRouter(tags=["ledger"])

BAD_REQUEST = {400: {"description": "Body is not JSON or a field is missing or mistyped"}}
UNAUTHORIZED = {403: {"description": "user_id is not registered"}}


@router.post(
    "/add_user",
    response_class=Response,
    responses=BAD_REQUEST,
    summary="Register a user",
    description="Register user_id with an empty balance, replacing any previous entry.",
)
def add_user(
    body: UserRequest = Depends(request_body(UserRequest)),
    use_case: RegisterUserUseCase = Depends(get_register_user_use_case),
) -> Response:
    """Register a user."""
    use_case.execute(RegisterUserCommand(user_id=body.user_id))
    return Response(status_code=200)


@router.post(
    "/add_order",
    response_class=Response,
    responses={**BAD_REQUEST, **UNAUTHORIZED},
    summary="Submit an exchange order",
    description="Record an order to exchange value units of source for target at price.",
)
def add_order(
    body: AddOrderRequest = Depends(request_body(AddOrderRequest)),
    use_case: PlaceOrderUseCase = Depends(get_place_order_use_case),
) -> Response:
    """Record an order for a registered user."""
    command = PlaceOrderCommand(
        user_id=body.user_id,
        source=body.source,
        target=body.target,
        value=body.value,
        price=body.price,
    )
    use_case.execute(command)
    return Response(status_code=200)


@router.post(
    "/get_orders",
    response_model=OrdersResponse,
    responses={**BAD_REQUEST, **UNAUTHORIZED},
    summary="List a user's orders",
    description="Return every order the user placed, oldest first.",
)
def get_orders(
    body: UserRequest = Depends(request_body(UserRequest)),
    use_case: GetOrdersUseCase = Depends(get_orders_use_case),
) -> OrdersResponse:
    """List the orders of a registered user."""
    results = use_case.execute(GetOrdersQuery(user_id=body.user_id))
    return OrdersResponse(
        orders=[
            OrderItem(
                user_id=r.user_id,
                source=r.source,
                target=r.target,
                value=r.value,
                price=r.price,
            )
            for r in results
        ]
    )


@router.post(
    "/get_userdetail",
    response_model=UserDetailResponse,
    responses={**BAD_REQUEST, **UNAUTHORIZED},
    summary="Get a user's balance detail",
    description="Return the user's balances as [currency, amount] pairs.",
)
def get_userdetail(
    body: UserRequest = Depends(request_body(UserRequest)),
    use_case: GetUserDetailUseCase = Depends(get_user_detail_use_case),
) -> UserDetailResponse:
    """Return the balance detail of a registered user."""
    result = use_case.execute(GetUserDetailQuery(user_id=body.user_id))
    return UserDetailResponse(user_id=result.user_id, balance=result.balance)
