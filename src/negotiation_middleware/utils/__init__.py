"""Utility helpers for negotiation middleware."""
