"""Behavioural patterns: how objects communicate and share responsibility."""
