"""
Google Userinfo Module - profile of the signed-in Google account.
"""

from app.environments.google.userinfo.client import GoogleUserinfoClient

__all__ = ["GoogleUserinfoClient"]
