"""
Shared HTTP client utilities for the integration suite.

Provides a small wrapper around httpx with high level helpers for the
resources that the integration tests exercise. By default it talks to a
running server; tests pass in a FastAPI ``TestClient`` instead.
"""
from __future__ import annotations

import io
import os
import uuid
from dataclasses import dataclass
from typing import Any, Dict, Iterable, Optional

import httpx


DEFAULT_BASE_URL = "http://localhost:8000/api/v1"


def _normalize_base_url(value: str | None) -> str:
    """Ensure the API base URL never contains a trailing slash."""
    if not value:
        return DEFAULT_BASE_URL
    return value.rstrip("/")


class JournalApiError(RuntimeError):
    """Raised when an API call does not return an expected status code."""

    def __init__(self, method: str, path: str, status: int, body: str):
        super().__init__(f"{method} {path} returned {status}: {body}")
        self.method = method
        self.path = path
        self.status = status
        self.body = body


@dataclass
class ApiUser:
    """Represents a user created via the API."""

    email: str
    password: str
    access_token: str
    user_id: str

    def auth_header(self) -> Dict[str, str]:
        return {"Authorization": f"Bearer {self.access_token}"}


class JournalApiClient:
    """
    Thin wrapper around httpx.Client that provides ergonomic helpers.

    Tests should stick to these helpers instead of hand crafting requests.
    """

    def __init__(
        self,
        base_url: str | None = None,
        *,
        client: httpx.Client | None = None,
        timeout: float = 30.0,
    ) -> None:
        if client is not None:
            self._client = client
        else:
            self._client = httpx.Client(
                base_url=_normalize_base_url(base_url or os.getenv("JOURNAL_API_BASE_URL")),
                timeout=timeout,
            )

    # ------------------------------------------------------------------ #
    # Generic request helpers
    # ------------------------------------------------------------------ #
    def close(self) -> None:
        self._client.close()

    def request(
        self,
        method: str,
        path: str,
        *,
        token: Optional[str] = None,
        expected: Iterable[int] | None = None,
        **kwargs: Any,
    ) -> httpx.Response:
        headers = kwargs.pop("headers", {})
        if token:
            headers["Authorization"] = f"Bearer {token}"

        # Relative to the API prefix carried by the client's base URL.
        url = path.lstrip("/")
        response = self._client.request(method, url, headers=headers, **kwargs)
        if expected and response.status_code not in expected:
            raise JournalApiError(method, path, response.status_code, response.text)
        return response

    # ------------------------------------------------------------------ #
    # Authentication helpers
    # ------------------------------------------------------------------ #
    def register_user(
        self,
        email: str,
        password: str,
        *,
        username: str = "Test User",
        phone: str | None = None,
    ) -> Dict[str, Any]:
        payload: Dict[str, Any] = {
            "username": username,
            "email": email,
            "password": password,
        }
        if phone:
            payload["phone"] = phone
        response = self.request(
            "POST",
            "/auth/register",
            json=payload,
            expected=(201,),
        )
        return response.json()

    def login(self, email: str, password: str) -> Dict[str, Any]:
        response = self.request(
            "POST",
            "/auth/login",
            json={"email": email, "password": password},
            expected=(200,),
        )
        return response.json()

    def logout(self, token: str) -> Dict[str, Any]:
        return self.request("POST", "/auth/logout", token=token, expected=(200,)).json()

    def current_user(self, token: str) -> Dict[str, Any]:
        return self.request("GET", "/users/me", token=token, expected=(200,)).json()

    def delete_account(self, token: str) -> Dict[str, Any]:
        return self.request(
            "DELETE", "/users/me", token=token, expected=(200,)
        ).json()

    # ------------------------------------------------------------------ #
    # Journal helpers
    # ------------------------------------------------------------------ #
    def create_journal(
        self,
        token: str,
        *,
        title: str,
        content: str = "Created from tests",
    ) -> Dict[str, Any]:
        response = self.request(
            "POST",
            "/journals",
            token=token,
            json={"title": title, "content": content},
            expected=(201,),
        )
        return response.json()

    def list_journals(self, token: str, **params: Any) -> list[Dict[str, Any]]:
        response = self.request("GET", "/journals", token=token, params=params, expected=(200,))
        return response.json()

    def get_journal(self, token: str, journal_id: str) -> Dict[str, Any]:
        response = self.request(
            "GET", f"/journals/{journal_id}", token=token, expected=(200,)
        )
        return response.json()

    def update_journal(
        self,
        token: str,
        journal_id: str,
        payload: Dict[str, Any],
    ) -> Dict[str, Any]:
        response = self.request(
            "PUT",
            f"/journals/{journal_id}",
            token=token,
            json=payload,
            expected=(200,),
        )
        return response.json()

    def delete_journal(self, token: str, journal_id: str) -> None:
        self.request(
            "DELETE",
            f"/journals/{journal_id}",
            token=token,
            expected=(200,),
        )

    # ------------------------------------------------------------------ #
    # Import helpers
    # ------------------------------------------------------------------ #
    def upload_import(
        self,
        token: str,
        *,
        file_bytes: bytes,
        filename: str = "export.zip",
        content_type: str = "application/zip",
        expected: Iterable[int] | None = None,
    ) -> httpx.Response:
        files = {"file": (filename, io.BytesIO(file_bytes), content_type)}
        return self.request(
            "POST",
            "/journals/import",
            token=token,
            files=files,
            expected=expected,
        )


def make_api_user(api: JournalApiClient) -> ApiUser:
    """
    Register and log in a brand new user for a test case.
    """
    unique_suffix = uuid.uuid4().hex[:10]
    email = f"pytest-{unique_suffix}@example.com"
    password = f"Test-{unique_suffix}-Aa1!"

    api.register_user(email, password)
    token_payload = api.login(email, password)
    access_token = token_payload["token"]
    profile = api.current_user(access_token)

    return ApiUser(
        email=email,
        password=password,
        access_token=access_token,
        user_id=profile["user"]["id"],
    )
