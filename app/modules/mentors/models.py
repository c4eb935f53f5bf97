# Supabase table: mentors
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

mentors:
- id: uuid (primary key)
- user_id: uuid (foreign key to profiles.id, not null)
- expertise: text[] (not null, non-empty)
- languages: text[] (not null, non-empty)
- availability: text (not null) - values: flexible, weekdays, weekends, evenings
- experience: text (not null)
- bio: text (not null)
- status: text (not null, default: 'pending') - reviewed by administrators
- created_at: timestamp (default: now())
"""

EXPERTISE_OPTIONS = [
    "Academic Guidance",
    "Career Development",
    "Cultural Integration",
    "Language Learning",
    "Local Navigation",
    "Housing Assistance",
    "Visa & Immigration",
    "Healthcare System",
]

LANGUAGE_OPTIONS = [
    "English",
    "Japanese",
    "Mandarin",
    "Korean",
    "Spanish",
    "French",
    "German",
]

AVAILABILITY_OPTIONS = ["flexible", "weekdays", "weekends", "evenings"]
