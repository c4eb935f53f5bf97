# Supabase tables: posts, likes, comments
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

posts:
- id: uuid (primary key)
- user_id: uuid (foreign key to profiles.id, not null) - author
- content: text (not null, non-empty)
- image_url: text (nullable) - public URL in the `posts` bucket
- created_at: timestamp (default: now())

likes:
- id: uuid (primary key)
- post_id: uuid (foreign key to posts.id, not null)
- user_id: uuid (foreign key to profiles.id, not null)
- created_at: timestamp (default: now())
- recommended: unique constraint on (post_id, user_id)

comments:
- id: uuid (primary key)
- post_id: uuid (foreign key to posts.id, not null)
- user_id: uuid (foreign key to profiles.id, not null)
- content: text (not null, non-empty)
- created_at: timestamp (default: now())

like_count, comment_count and user_has_liked are derived at read time and
never stored.
"""
