"""
Version schema - response of GET /api/version.
"""

from pydantic import BaseModel


class VersionValue(BaseModel):
    """Example response: {"version": "Typing 0.1.0-1 linux/x86_64"}"""
    version: str
