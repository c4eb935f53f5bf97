# Supabase tables: events, event_attendees
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

events:
- id: uuid (primary key)
- title: text (not null, non-empty)
- description: text (nullable)
- location: text (nullable)
- start_time: timestamp (not null)
- end_time: timestamp (nullable, not before start_time)
- group_id: uuid (foreign key to groups.id, nullable)
- created_by: uuid (foreign key to profiles.id, not null)
- created_at: timestamp (default: now())

event_attendees:
- id: uuid (primary key)
- event_id: uuid (foreign key to events.id, not null)
- user_id: uuid (foreign key to profiles.id, not null)
- created_at: timestamp (default: now())
- recommended: unique constraint on (event_id, user_id)

An event is listed only while start_time >= now.
"""
