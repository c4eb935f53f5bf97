# Supabase tables: groups, group_members
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

groups:
- id: uuid (primary key)
- name: text (not null, non-empty)
- description: text (nullable)
- location: text (nullable)
- cover_image_url: text (nullable) - public URL in the `groups` bucket
- created_by: uuid (foreign key to profiles.id, not null)
- created_at: timestamp (default: now())

group_members:
- id: uuid (primary key)
- group_id: uuid (foreign key to groups.id, not null)
- user_id: uuid (foreign key to profiles.id, not null)
- created_at: timestamp (default: now())
- recommended: unique constraint on (group_id, user_id)

member_count and is_member are derived from group_members at read time.
"""
