"""
Feature modules for the GATE Prep backend.

- auth: accounts, session tokens, password recovery
- courses: the course catalog and syllabus uploads
- bookmarks: each user's saved courses

Modules communicate through interfaces, not concrete implementations.
"""
