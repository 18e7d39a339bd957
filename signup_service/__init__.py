"""Signup service: validates account creation requests and provisions accounts."""
