"""
Data Transfer Objects (DTOs) Layer

This package contains DTOs that decouple the API layer from the domain and
storage models. DTOs prevent leaking storage structure to external APIs and
allow independent evolution.

Structure:
- request/: DTOs for incoming API requests
- response/: DTOs for outgoing API responses
"""
