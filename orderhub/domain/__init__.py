"""
Domain layer.

CRITICAL: Nothing under this package may import from:
- sqlalchemy
- pydantic
- aiohttp
"""
