# Supabase table: users
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

users:
- id: uuid (primary key, default: gen_random_uuid())
- name: text (not null)
- email: text (unique, not null)
- avatar: text (nullable) - gravatar URL derived from email
- password: text (not null) - bcrypt hash, never plaintext
- date: timestamptz (default: now())

Note: the password column is only ever read by the login flow.
Every response model leaves it out.
"""
