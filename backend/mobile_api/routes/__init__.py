"""
Mobile API Backend — API Routes Package
========================================

What:  HTTP route handlers that accept requests and return responses.

Route Inventory:
    - auth.py:           POST /SignUpScreen, /LoginUpScreen, /ForgotScreen
    - profile.py:        POST /api/EditProfileScreen, GET /api/ProfileScreen
    - feedback.py:       POST /Feedback
    - notifications.py:  GET|POST /Notifications, POST /Notifications/mark-read
    - contact.py:        GET  /contact-info
    - health.py:         GET  /health

Routes stay thin: extract the body, call a service, return its response
model. Business rules live in services.
"""
