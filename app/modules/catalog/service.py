"""
Read-only reference catalog: visa requirements, embassy contacts, sample
accommodation and institution listings, language flashcards.

The data lives in a JSON document so another source can be swapped in without
touching the routes.
"""

import json
import logging
from pathlib import Path
from typing import List, Optional

from app.config import settings
from app.core.errors import NotFound
from app.modules.catalog.schemas import (
    Accommodation, CatalogData, CountrySummary, EmbassyContact, Institution, Language, VisaInfo
)

logger = logging.getLogger(__name__)

DEFAULT_CATALOG_PATH = Path(__file__).resolve().parents[2] / "data" / "reference_catalog.json"


def _key(value: str) -> str:
    return value.strip().lower()


class ReferenceCatalog:
    _default: "ReferenceCatalog" = None

    def __init__(self, data: CatalogData):
        self.data = data

    @classmethod
    def from_file(cls, path: Path) -> "ReferenceCatalog":
        with open(path, encoding="utf-8") as f:
            raw = json.load(f)
        data = CatalogData(**raw)
        logger.info(f"Loaded reference catalog from {path}: {len(data.visas)} countries, "
                    f"{len(data.institutions)} institutions, {len(data.languages)} languages")
        return cls(data)

    @classmethod
    def get_default(cls) -> "ReferenceCatalog":
        if cls._default is None:
            cls._default = cls.from_file(Path(settings.catalog_path) if settings.catalog_path else DEFAULT_CATALOG_PATH)
        return cls._default

    @classmethod
    def reset_default(cls):
        cls._default = None

    def list_countries(self) -> List[CountrySummary]:
        return [
            CountrySummary(key=key, country=info.country, processing_time=info.processing_time)
            for key, info in sorted(self.data.visas.items())
        ]

    def get_visa_info(self, country: str) -> VisaInfo:
        info = self.data.visas.get(_key(country))
        if info is None:
            raise NotFound(f"No visa information for {country}")
        return info

    def get_embassy(self, country: str) -> EmbassyContact:
        return self.get_visa_info(country).embassy_contact

    def find_accommodations(self, city: str, property_type: Optional[str] = None,
                            max_price: Optional[int] = None) -> List[Accommodation]:
        """Listings in a city, optionally narrowed by type and monthly price ceiling"""
        listings = self.data.accommodations.get(_key(city), [])
        if property_type:
            listings = [a for a in listings if a.type == _key(property_type)]
        if max_price is not None:
            listings = [a for a in listings if a.price <= max_price]
        return listings

    def search_institutions(self, query: Optional[str] = None,
                            institution_type: Optional[str] = None) -> List[Institution]:
        """Case-insensitive match on name, location and description"""
        results = self.data.institutions
        if institution_type:
            results = [i for i in results if i.type == _key(institution_type)]
        if query and query.strip():
            needle = _key(query)
            results = [
                i for i in results
                if needle in i.name.lower() or needle in i.location.lower() or needle in i.description.lower()
            ]
        return results

    def list_languages(self) -> List[str]:
        return sorted(self.data.languages)

    def get_language(self, language: str) -> Language:
        data = self.data.languages.get(_key(language))
        if data is None:
            raise NotFound(f"No learning material for {language}")
        return data
