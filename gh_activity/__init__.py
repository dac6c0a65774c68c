"""Fetch and describe a GitHub user's recent public activity."""
