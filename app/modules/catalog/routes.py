from fastapi import APIRouter, Depends
from app.core.dependencies import get_catalog, get_profile_service
from app.core.errors import NotFound
from app.modules.catalog.schemas import (
    Accommodation, CountrySummary, EmbassyContact, Institution, Language, VisaInfo
)
from app.modules.catalog.service import ReferenceCatalog
from app.modules.profiles.service import ProfileService
from typing import List, Optional

router = APIRouter(prefix="/catalog", tags=["catalog"])


@router.get("/countries", response_model=List[CountrySummary])
async def list_countries(catalog: ReferenceCatalog = Depends(get_catalog)):
    return catalog.list_countries()


@router.get("/visas/{country}", response_model=VisaInfo)
async def get_visa_info(country: str, catalog: ReferenceCatalog = Depends(get_catalog)):
    """Visa requirements, application steps and embassy contact for a destination"""
    return catalog.get_visa_info(country)


@router.get("/embassies/me", response_model=EmbassyContact)
async def get_my_embassy(
    profiles: ProfileService = Depends(get_profile_service),
    catalog: ReferenceCatalog = Depends(get_catalog)
):
    """Embassy of the country set as location on the caller's profile"""
    actor_id = profiles.backend.require_actor()
    profile = profiles.get_profile(actor_id)
    if profile is None or not profile.location:
        raise NotFound("No location set on your profile")
    return catalog.get_embassy(profile.location)


@router.get("/embassies/{country}", response_model=EmbassyContact)
async def get_embassy(country: str, catalog: ReferenceCatalog = Depends(get_catalog)):
    return catalog.get_embassy(country)


@router.get("/accommodations", response_model=List[Accommodation])
async def find_accommodations(
    city: str,
    property_type: Optional[str] = None,
    max_price: Optional[int] = None,
    catalog: ReferenceCatalog = Depends(get_catalog)
):
    return catalog.find_accommodations(city, property_type=property_type, max_price=max_price)


@router.get("/institutions", response_model=List[Institution])
async def search_institutions(
    q: Optional[str] = None,
    institution_type: Optional[str] = None,
    catalog: ReferenceCatalog = Depends(get_catalog)
):
    return catalog.search_institutions(query=q, institution_type=institution_type)


@router.get("/languages", response_model=List[str])
async def list_languages(catalog: ReferenceCatalog = Depends(get_catalog)):
    return catalog.list_languages()


@router.get("/languages/{language}", response_model=Language)
async def get_language(language: str, catalog: ReferenceCatalog = Depends(get_catalog)):
    """Flashcards and quiz questions for a language"""
    return catalog.get_language(language)
