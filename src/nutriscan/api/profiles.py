"""Profile API endpoints."""

from __future__ import annotations

from typing import TYPE_CHECKING

from fastapi import APIRouter, HTTPException, Request

from nutriscan.api.models import CustomAllergenRequest, ProfileModel, ProfileUpdate

if TYPE_CHECKING:
    from nutriscan.containers import AppContainer

router = APIRouter(prefix="/profiles", tags=["profiles"])


def _container(request: Request) -> AppContainer:
    return request.app.state.container


@router.get("/{profile_id}", response_model=ProfileModel)
async def get_profile(profile_id: str, request: Request) -> ProfileModel:
    """Return the stored profile, or the default one."""
    profile = _container(request).profile_service.get_profile(profile_id)
    return ProfileModel.from_domain(profile)


@router.patch("/{profile_id}", response_model=ProfileModel)
async def update_profile(
    profile_id: str, update: ProfileUpdate, request: Request
) -> ProfileModel:
    """Apply a partial profile update."""
    changes = update.model_dump(exclude_unset=True, exclude_none=True)
    profile = _container(request).profile_service.update_profile(
        profile_id, **changes
    )
    return ProfileModel.from_domain(profile)


@router.delete("/{profile_id}", response_model=ProfileModel)
async def reset_profile(profile_id: str, request: Request) -> ProfileModel:
    """Reset a profile to its defaults."""
    profile = _container(request).profile_service.reset_profile(profile_id)
    return ProfileModel.from_domain(profile)


@router.post("/{profile_id}/allergens", response_model=ProfileModel)
async def add_allergen(
    profile_id: str, payload: CustomAllergenRequest, request: Request
) -> ProfileModel:
    """Add a free-text allergen to the profile."""
    try:
        profile = _container(request).profile_service.add_custom_allergen(
            profile_id, payload.label
        )
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return ProfileModel.from_domain(profile)
