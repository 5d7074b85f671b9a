# storefront/services/identity_client.py
from typing import Any, Dict

import requests
from requests import RequestException

from storefront.utils.errors import IdentityError
from storefront.utils.settings import SUPABASE_URL, SUPABASE_ANON_KEY, IDENTITY_TIMEOUT_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class IdentityClient:
    """
    Thin client for the hosted auth API (supabase GoTrue).

    Every call returns the provider payload normalised to
    ``{"user": {...} | None, "session": {...} | None}`` where it makes sense.
    """

    def __init__(
        self,
        base_url: str | None = None,
        api_key: str | None = None,
        timeout: float = IDENTITY_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ):
        self.base_url = (base_url or SUPABASE_URL).rstrip("/") + "/auth/v1"
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({"apikey": api_key if api_key is not None else SUPABASE_ANON_KEY})

    def _request(self, method: str, path: str, token: str | None = None, **kwargs) -> requests.Response:
        url = f"{self.base_url}{path}"
        headers = {"Authorization": f"Bearer {token}"} if token else {}
        logger.info(f"IdentityClient {method} {url}")
        try:
            return self.session.request(method, url, headers=headers, timeout=self.timeout, **kwargs)
        except RequestException as e:
            raise IdentityError(f"Identity provider unreachable: {e}") from e

    @staticmethod
    def _raise_for_error(resp: requests.Response):
        if resp.status_code < 400:
            return
        try:
            body = resp.json()
        except ValueError:
            body = {}
        message = (
            body.get("error_description")
            or body.get("msg")
            or body.get("message")
            or f"Identity provider returned {resp.status_code}"
        )
        raise IdentityError(message, status_code=resp.status_code)

    @staticmethod
    def _split(body: Dict[str, Any]) -> Dict[str, Any]:
        # with email confirmation on, signup answers with the bare user
        if "access_token" in body:
            session = {k: v for k, v in body.items() if k != "user"}
            return {"user": body.get("user"), "session": session}
        if "id" in body:
            return {"user": body, "session": None}
        return {"user": body.get("user"), "session": body.get("session")}

    def sign_up(self, email: str, password: str, full_name: str) -> Dict[str, Any]:
        resp = self._request(
            "POST",
            "/signup",
            json={"email": email, "password": password, "data": {"full_name": full_name}},
        )
        self._raise_for_error(resp)
        return self._split(resp.json())

    def sign_in(self, email: str, password: str) -> Dict[str, Any]:
        resp = self._request(
            "POST",
            "/token",
            params={"grant_type": "password"},
            json={"email": email, "password": password},
        )
        self._raise_for_error(resp)
        return self._split(resp.json())

    def sign_out(self, access_token: str) -> None:
        resp = self._request("POST", "/logout", token=access_token)
        self._raise_for_error(resp)

    def get_user(self, access_token: str) -> Dict[str, Any] | None:
        resp = self._request("GET", "/user", token=access_token)
        if resp.status_code in (401, 403):
            return None
        self._raise_for_error(resp)
        return resp.json()
