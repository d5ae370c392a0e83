"""
Pydantic schema definitions for proposals, activities and games.

Models accept extra fields so that whatever the remote API adds is
passed through to callers untouched.
"""
