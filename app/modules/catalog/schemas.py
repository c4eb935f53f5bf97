from pydantic import BaseModel
from typing import Any, Dict, List, Optional


class VisaRequirement(BaseModel):
    name: str
    description: str
    required: bool


class EmbassyContact(BaseModel):
    address: str
    phone: str
    email: str
    website: str
    emergency_contact: str
    working_hours: str


class VisaInfo(BaseModel):
    country: str
    processing_time: str
    fee: str
    requirements: List[VisaRequirement]
    steps: List[str]
    embassy_contact: EmbassyContact


class Accommodation(BaseModel):
    id: str
    type: str  # apartment | house | dormitory | shared
    title: str
    location: str
    price: int
    currency: str
    bedrooms: int
    bathrooms: int
    amenities: List[str] = []
    available: str
    description: str


class Institution(BaseModel):
    id: str
    name: str
    type: str  # university | company | research
    location: str
    website: str
    description: str
    details: Dict[str, Any] = {}


class Flashcard(BaseModel):
    front: str
    back: str


class QuizQuestion(BaseModel):
    question: str
    options: List[str]
    correct: str


class Language(BaseModel):
    name: str
    code: str
    flashcards: List[Flashcard]
    quiz: List[QuizQuestion] = []


class CatalogData(BaseModel):
    visas: Dict[str, VisaInfo] = {}
    accommodations: Dict[str, List[Accommodation]] = {}
    institutions: List[Institution] = []
    languages: Dict[str, Language] = {}


class CountrySummary(BaseModel):
    key: str
    country: str
    processing_time: Optional[str] = None
