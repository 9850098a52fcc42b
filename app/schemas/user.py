"""
User schemas - profile of the Google account holding the access token.
"""

from pydantic import BaseModel


class User(BaseModel):
    """
    Schema for GET /api/v1/signin/userinfo.

    Example response:
    {
        "id": "108234...",
        "name": "Jane Doe",
        "email": "jane@gmail.com",
        "picture": "https://lh3.googleusercontent.com/a/..."
    }
    """
    id: str = ""
    name: str = ""
    email: str = ""
    picture: str = ""
