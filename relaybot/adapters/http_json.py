"""Minimal JSON-over-HTTP helper for Google REST APIs (no external SDK dependency)."""

from __future__ import annotations

import json
from typing import Any, Optional
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen


class HttpJsonError(RuntimeError):
    """Raised when a provider HTTP call fails."""


def _error_detail(raw: str) -> str:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError:
        return raw.strip()[:300]
    if isinstance(payload, dict) and isinstance(payload.get("error"), dict):
        err = payload["error"]
        return str(err.get("message") or err.get("status") or "unknown error")
    return raw.strip()[:300]


def request_json(
    *,
    url: str,
    method: str = "GET",
    params: Optional[dict[str, str]] = None,
    body: Optional[dict[str, Any]] = None,
    timeout_seconds: int = 30,
    label: str = "provider",
) -> dict[str, Any]:
    # Query strings carry API keys: never put the full URL into an error message.
    full_url = url
    if params:
        full_url = f"{url}?{urlencode(params)}"

    data = None
    headers = {"accept": "application/json"}
    if body is not None:
        data = json.dumps(body, ensure_ascii=True).encode("utf-8")
        headers["content-type"] = "application/json"

    req = Request(url=full_url, data=data, method=method, headers=headers)

    try:
        with urlopen(req, timeout=timeout_seconds) as resp:
            raw = resp.read().decode("utf-8", errors="replace")
    except HTTPError as exc:
        detail = ""
        try:
            detail = _error_detail(exc.read().decode("utf-8", errors="replace"))
        except Exception:
            detail = ""
        if detail:
            raise HttpJsonError(f"{label} HTTP {exc.code}: {detail}") from exc
        raise HttpJsonError(f"{label} HTTP {exc.code}") from exc
    except URLError as exc:
        reason = exc.reason if getattr(exc, "reason", None) else str(exc)
        raise HttpJsonError(f"{label} connection error: {reason}") from exc
    except Exception as exc:
        raise HttpJsonError(f"{label} request failed: {type(exc).__name__}") from exc

    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as exc:
        raise HttpJsonError(f"{label} returned non-JSON response") from exc

    if not isinstance(payload, dict):
        raise HttpJsonError(f"{label} response must be an object")

    if "error" in payload and isinstance(payload.get("error"), dict):
        err = payload["error"]
        message = str(err.get("message") or "unknown error")
        status = str(err.get("status") or err.get("code") or "error")
        raise HttpJsonError(f"{label} error ({status}): {message}")

    return payload
