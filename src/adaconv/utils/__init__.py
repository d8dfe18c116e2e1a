"""Encoding, hashing and file helpers."""
