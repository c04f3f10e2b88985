"""
Utility helpers shared across the integration test suite.
"""
from __future__ import annotations

import io
import json
import zipfile
from dataclasses import dataclass
from typing import Any, Iterable, Sequence

from tests.lib import JournalApiClient


UNKNOWN_UUID = "00000000-0000-0000-0000-000000000000"


@dataclass(frozen=True)
class EndpointCase:
    """
    Declarative representation of an endpoint invocation used by helpers.
    """

    method: str
    path: str
    json: dict[str, Any] | None = None
    files: dict[str, Any] | None = None
    description: str | None = None

    def label(self) -> str:
        return self.description or f"{self.method} {self.path}"


def _exercise_cases(
    api_client: JournalApiClient,
    cases: Iterable[EndpointCase],
    *,
    token: str | None = None,
):
    for case in cases:
        request_kwargs: dict[str, Any] = {}
        if case.json is not None:
            request_kwargs["json"] = case.json
        if case.files is not None:
            request_kwargs["files"] = case.files

        response = api_client.request(
            case.method,
            case.path,
            token=token,
            **request_kwargs,
        )
        yield case, response


def _format_failure(case: EndpointCase, received: int, expected: Sequence[int]) -> str:
    return f"{case.label()} returned {received}, expected one of {tuple(expected)}"


def assert_status_codes(
    api_client: JournalApiClient,
    cases: Iterable[EndpointCase],
    *,
    token: str | None = None,
    expected_status: Sequence[int] = (200,),
):
    """
    Execute a batch of endpoint cases asserting their HTTP status codes.
    """
    responses = []
    for case, response in _exercise_cases(api_client, cases, token=token):
        assert (
            response.status_code in expected_status
        ), _format_failure(case, response.status_code, expected_status)
        responses.append(response)
    return responses


def assert_requires_authentication(
    api_client: JournalApiClient,
    cases: Iterable[EndpointCase],
    *,
    token: str | None = None,
) -> None:
    """
    Assert that each endpoint rejects the caller with HTTP 401.
    """
    assert_status_codes(api_client, cases, token=token, expected_status=(401,))


def assert_not_found(
    api_client: JournalApiClient,
    token: str,
    cases: Iterable[EndpointCase],
) -> None:
    """
    Assert that each endpoint returns HTTP 404 for missing identifiers.
    """
    assert_status_codes(api_client, cases, token=token, expected_status=(404,))


# ------------------------------------------------------------------ #
# Import Helpers
# ------------------------------------------------------------------ #


def export_entry(text: str, created: str, modified: str | None = None, **extra: Any) -> dict[str, Any]:
    """Build one export entry in the format the import endpoint accepts."""
    entry = {
        "text": text,
        "creationDate": created,
        "modifiedDate": modified or created,
    }
    entry.update(extra)
    return entry


def export_json_bytes(entries: list[Any]) -> bytes:
    return json.dumps({"entries": entries}).encode("utf-8")


def export_zip_bytes(
    entries: list[Any] | None = None,
    *,
    member_name: str = "Journal.json",
    extra_members: dict[str, bytes] | None = None,
) -> bytes:
    """Build an export ZIP in memory."""
    buffer = io.BytesIO()
    with zipfile.ZipFile(buffer, "w", zipfile.ZIP_DEFLATED) as archive:
        for name, content in (extra_members or {}).items():
            archive.writestr(name, content)
        if entries is not None:
            archive.writestr(member_name, export_json_bytes(entries))
    return buffer.getvalue()


def damaged_export_zip_bytes(entry_count: int = 200) -> bytes:
    """Build an export ZIP whose JSON member has a damaged compressed stream."""
    entries = [
        export_entry(f"Entry {i}\nbody {i * 7919}", "2024-01-01T00:00:00Z")
        for i in range(entry_count)
    ]
    payload = bytearray(export_zip_bytes(entries))
    with zipfile.ZipFile(io.BytesIO(bytes(payload))) as archive:
        info = archive.getinfo("Journal.json")
    data_start = info.header_offset + 30 + len(info.filename.encode()) + len(info.extra)
    for offset in range(data_start + 20, data_start + 60):
        payload[offset] ^= 0xFF
    return bytes(payload)
