"""Users app package.

Defines the email-based ``CustomUser`` (the project's AUTH_USER_MODEL),
session authentication endpoints and the password reset flow.
"""
