# Supabase table: stories
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

stories:
- id: uuid (primary key)
- user_id: uuid (foreign key to profiles.id, not null) - author
- media_url: text (not null) - public URL in the `stories` bucket
- created_at: timestamp (default: now())
- expires_at: timestamp (not null) - set to created_at + story_ttl_hours on insert

A story is visible only while now < expires_at.
"""
