# Supabase table: profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, references auth.users.id) - 1:1 with the auth identity
- username: text (unique, not null)
- full_name: text (nullable)
- avatar_url: text (nullable) - public URL in the `avatars` bucket
- bio: text (nullable)
- location: text (nullable)
- created_at: timestamp (default: now())

Rows are created lazily by ProfileService.ensure_profile the first time an
authenticated actor needs one.
"""
