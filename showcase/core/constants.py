"""Application constants.

This module contains magic strings and numbers used throughout the application.
Centralizing these values makes them easier to maintain and modify.
"""

# Visitor Cookie
# Anonymous browsers are tracked with a long-lived opaque id (5 years)
VISITOR_COOKIE_NAME = "visitorId"
VISITOR_COOKIE_MAX_AGE = 60 * 60 * 24 * 365 * 5
# Longest visitor id accepted from a cookie; matches votes.visitor_id
VISITOR_ID_MAX_LENGTH = 64

# JWT Token Configuration
# Token expiration time in minutes (7 days, matches the login flow)
ACCESS_TOKEN_EXPIRE_MINUTES = 60 * 24 * 7

# Roles
ADMIN_ROLE = "ADMIN"

# Vote error codes surfaced to API clients
PROJECT_NOT_FOUND = "PROJECT_NOT_FOUND"
PROJECT_NOT_APPROVED = "PROJECT_NOT_APPROVED"
CANNOT_VOTE_OWN_PROJECT = "CANNOT_VOTE_OWN_PROJECT"
USER_NOT_FOUND = "USER_NOT_FOUND"
VOTING_CLOSED = "VOTING_CLOSED"
VOTE_FAILED = "VOTE_FAILED"
