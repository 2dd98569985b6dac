"""
UI generation relay.

Provides:
- A thin Gemini REST client with primary/fallback model tiers
- A FastAPI service exposing POST /generate that returns a raw HTML document
"""
