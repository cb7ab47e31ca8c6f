"""
Dependency injection for the ledger bounded context.

Provides FastAPI dependency functions that wire the stores created
by ``create_app`` into use cases via constructor injection.
"""

from fastapi import Depends, Request

from app.application.ledger.get_orders import GetOrdersUseCase
from app.application.ledger.get_user_detail import GetUserDetailUseCase
from app.application.ledger.place_order import PlaceOrderUseCase
from app.application.ledger.register_user import RegisterUserUseCase
from app.domain.ledger.ports import OrderRepository, UserRepository


def get_user_store(request: Request) -> UserRepository:
    """Return the user store owned by the running application."""
    return request.app.state.user_store


def get_order_store(request: Request) -> OrderRepository:
    """Return the order store owned by the running application."""
    return request.app.state.order_store


def get_register_user_use_case(
    user_repo: UserRepository = Depends(get_user_store),
) -> RegisterUserUseCase:
    return RegisterUserUseCase(user_repo=user_repo)


def get_place_order_use_case(
    user_repo: UserRepository = Depends(get_user_store),
    order_repo: OrderRepository = Depends(get_order_store),
) -> PlaceOrderUseCase:
    return PlaceOrderUseCase(user_repo=user_repo, order_repo=order_repo)


def get_orders_use_case(
    user_repo: UserRepository = Depends(get_user_store),
    order_repo: OrderRepository = Depends(get_order_store),
) -> GetOrdersUseCase:
    return GetOrdersUseCase(user_repo=user_repo, order_repo=order_repo)


def get_user_detail_use_case(
    user_repo: UserRepository = Depends(get_user_store),
) -> GetUserDetailUseCase:
    return GetUserDetailUseCase(user_repo=user_repo)
