"""Meal endpoints scoped to the caller's identity cookie."""

from __future__ import annotations

from typing import TYPE_CHECKING
from uuid import UUID  # noqa: TC003

from fastapi import APIRouter, Depends, Request, Response, status

from daily_diet.api.guard import (
    read_identity_token,
    require_identity,
    set_identity_cookie,
)
from daily_diet.api.models import (
    CreateMealBody,
    MealListResponse,
    MealPayload,
    MealResponse,
    MetricsPayload,
    MetricsResponse,
    UpdateMealBody,
)
from daily_diet.services.identity import CallerIdentity, resolve_caller

if TYPE_CHECKING:
    from daily_diet.containers import AppContainer

router = APIRouter(prefix="/meals", tags=["meals"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


def require_owned_meal(
    meal_id: str,
    request: Request,
    caller: CallerIdentity = Depends(require_identity),
) -> UUID:
    """Resolve the path id to one of the caller's meals, or fail with 404."""
    return _container(request).meal_service.require_owned_meal(caller.token, meal_id)


@router.get("")
def list_meals(
    request: Request, caller: CallerIdentity = Depends(require_identity)
) -> MealListResponse:
    """Return the caller's meals, most recent first."""
    meals = _container(request).meal_service.list_meals(caller.token)
    return MealListResponse(meals=[MealPayload.from_record(meal) for meal in meals])


@router.get("/metrics")
def get_metrics(
    request: Request, caller: CallerIdentity = Depends(require_identity)
) -> MetricsResponse:
    """Return diet metrics for the caller."""
    metrics = _container(request).metrics_service.get_metrics(caller.token)
    return MetricsResponse(metrics=MetricsPayload.from_metrics(metrics))


@router.get("/{meal_id}")
def get_meal(
    meal_id: str,
    request: Request,
    caller: CallerIdentity = Depends(require_identity),
) -> MealResponse:
    """Return one of the caller's meals, or null."""
    meal = _container(request).meal_service.get_meal(caller.token, meal_id)
    return MealResponse(
        meal=MealPayload.from_record(meal) if meal is not None else None
    )


@router.post("", status_code=status.HTTP_201_CREATED, response_class=Response)
def create_meal(body: CreateMealBody, request: Request, response: Response) -> None:
    """Record a meal, issuing an identity token on first use."""
    container = _container(request)
    caller = resolve_caller(read_identity_token(request))
    container.meal_service.create_meal(caller.token, body.to_draft())
    if caller.minted:
        set_identity_cookie(response, container.settings, caller.token)


@router.put(
    "/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def update_meal(
    body: UpdateMealBody,
    request: Request,
    owned_id: UUID = Depends(require_owned_meal),
    caller: CallerIdentity = Depends(require_identity),
) -> None:
    """Replace the provided fields of one of the caller's meals."""
    # Ownership resolves before the body is validated, so foreign ids give 404.
    _container(request).meal_service.update_owned_meal(
        caller.token, owned_id, body.to_changes()
    )


@router.delete(
    "/{meal_id}", status_code=status.HTTP_204_NO_CONTENT, response_class=Response
)
def delete_meal(
    meal_id: str,
    request: Request,
    caller: CallerIdentity = Depends(require_identity),
) -> None:
    """Delete one of the caller's meals."""
    _container(request).meal_service.delete_meal(caller.token, meal_id)
