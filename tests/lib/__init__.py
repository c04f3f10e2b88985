from .api import ApiUser, JournalApiClient, JournalApiError, make_api_user

__all__ = [
    "ApiUser",
    "JournalApiClient",
    "JournalApiError",
    "make_api_user",
]
