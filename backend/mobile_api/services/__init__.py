"""
Mobile API Backend — Services Layer
====================================

What:  Business logic between routes (HTTP) and persistence.

Service Inventory:
    - PasswordHasher:      bcrypt hashing and verification
    - TokenIssuer:         PyJWT session token issue/verify
    - AccountService:      registration, login, password reset
    - ProfileService:      profile save and latest-profile lookup
    - FeedbackService:     feedback validation and storage
    - NotificationService: notification inbox

AccountService receives its collaborators at construction (see
dependencies.py); the remaining services are stateless singletons that take
the request's session on each call.
"""
