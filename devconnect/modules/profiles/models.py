# Supabase table: profiles
# This file documents the expected database schema
# Actual operations are handled via Supabase SDK in service.py

"""
Expected Supabase table structure:

profiles:
- id: uuid (primary key, default: gen_random_uuid())
- user_id: uuid (unique, not null, references users.id on delete cascade)
- company: text (nullable)
- website: text (nullable)
- location: text (nullable)
- status: text (not null)
- skills: jsonb (array of strings)
- bio: text (nullable)
- githubusername: text (nullable)
- social: jsonb (object keyed by network: youtube, twitter, facebook, linkedin, instagram)
- experience: jsonb (array, default '[]') - newest entry first
- education: jsonb (array, default '[]') - newest entry first
- date: timestamptz (default: now())

experience entry: {id, title, company, location, from, to, current, description}
education entry:  {id, school, degree, fieldOfStudy, from, to, current, description}

Entry ids are uuids assigned by the service when the entry is added.
The unique constraint on user_id is what the profile upsert conflicts on.
"""
