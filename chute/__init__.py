"""Chute: identity, availability and invitation backend."""
