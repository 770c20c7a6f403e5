from __future__ import annotations

import logging
from typing import Any

import httpx

from saphir.application.exceptions import GatewayError


class SupabaseClient:
    """Minimal PostgREST client for a Supabase project (RPC, select, update)."""

    def __init__(self, base_url: str, api_key: str, timeout: float = 10.0, client: httpx.Client | None = None) -> None:
        if not base_url or not api_key:
            raise ValueError("SUPABASE_URL and SUPABASE_KEY are required for the Supabase client")
        self._rest_url = f"{base_url.rstrip('/')}/rest/v1"
        self._headers = {
            "apikey": api_key,
            "Authorization": f"Bearer {api_key}",
            "Content-Type": "application/json",
        }
        self._client = client or httpx.Client(timeout=timeout)
        self._logger = logging.getLogger(__name__)

    def rpc(self, function: str, params: dict[str, Any]) -> Any:
        return self._request("POST", f"/rpc/{function}", json=params)

    def select(self, table: str, columns: str = "*", order: str | None = None, filters: dict[str, str] | None = None) -> list[dict[str, Any]]:
        params: dict[str, str] = {"select": columns}
        if order:
            params["order"] = order
        params.update(filters or {})
        data = self._request("GET", f"/{table}", params=params)
        if not isinstance(data, list):
            raise GatewayError(f"Unexpected response when selecting from {table}")
        return data

    def update(self, table: str, values: dict[str, Any], filters: dict[str, str]) -> None:
        self._request("PATCH", f"/{table}", params=filters, json=values, headers={"Prefer": "return=minimal"})

    def _request(
        self,
        method: str,
        path: str,
        params: dict[str, str] | None = None,
        json: Any = None,
        headers: dict[str, str] | None = None,
    ) -> Any:
        url = f"{self._rest_url}{path}"
        try:
            resp = self._client.request(method, url, params=params, json=json, headers={**self._headers, **(headers or {})})
        except httpx.HTTPError as e:
            self._logger.error("Supabase request failed", extra={"path": path, "reason": str(e)})
            raise GatewayError(f"Supabase unreachable: {e}") from e

        if resp.status_code >= 400:
            try:
                error_json = resp.json()
                if not isinstance(error_json, dict):
                    error_json = {"message": resp.text}
                error_code = error_json.get("code")
                error_message = error_json.get("message")
            except ValueError:
                error_code = None
                error_message = resp.text
            self._logger.error(
                "Supabase request rejected",
                extra={
                    "path": path,
                    "status": resp.status_code,
                    "error_code": error_code,
                    "reason": error_message,
                },
            )
            raise GatewayError(f"Supabase {method} {path} failed with {resp.status_code}: {error_message}")

        if not resp.content:
            return None
        try:
            return resp.json()
        except ValueError as e:
            raise GatewayError(f"Invalid JSON from Supabase {path}") from e
