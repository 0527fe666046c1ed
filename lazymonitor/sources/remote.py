"""Remote source: objects fetched from an agent over JSON-RPC.

The query is the agent host. The agent answers ``Sys.TitanObjects`` with a
``Payload`` holding a JSON array of objects, either inline or as the base64
text of that array.
"""

from __future__ import annotations

import base64
import binascii
import json
import logging

import requests

from ..items import FetchError, MonitoredItem

logger = logging.getLogger(__name__)

AGENT_PORT = 2233
RPC_METHOD = "Sys.TitanObjects"
DEFAULT_TIMEOUT_SECONDS = 10.0


def _display(value: object) -> str:
    if isinstance(value, str):
        return value
    return json.dumps(value, sort_keys=True)


class ObjectItem:
    """One decoded agent object; its ``key`` field is the primary key."""

    def __init__(self, fields: dict[str, object]) -> None:
        self.fields = dict(fields)

    def primary_key(self) -> str:
        return "key"

    def keys(self) -> list[str]:
        names = list(self.fields)
        if "key" not in self.fields:
            names.insert(0, "key")
        return names

    def value(self, key: str) -> str:
        if key not in self.fields:
            return ""
        return _display(self.fields[key])

    def detail(self) -> str:
        return json.dumps(self.fields, indent=1, sort_keys=True) + "\n"


def decode_payload(payload: object) -> list[ObjectItem]:
    """Decode an RPC ``Payload`` into items, raising ``FetchError`` when malformed."""
    if isinstance(payload, str):
        try:
            payload = json.loads(base64.b64decode(payload, validate=True))
        except (binascii.Error, ValueError) as exc:
            raise FetchError(f"Format error: payload is not base64 JSON: {exc}") from exc
    if not isinstance(payload, list) or not all(isinstance(obj, dict) for obj in payload):
        raise FetchError("Format error: not an array of maps")
    return [ObjectItem(obj) for obj in payload]


class RemoteObjectSource:
    """Query an agent at ``http://HOST:2233/`` for its object list."""

    def __init__(
        self,
        port: int = AGENT_PORT,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        session: requests.Session | None = None,
    ) -> None:
        self.port = port
        self.timeout = timeout
        self.session = session if session is not None else requests.Session()

    def endpoint(self, host: str) -> str:
        return f"http://{host}:{self.port}/"

    def fetch_all(self, query: str) -> list[MonitoredItem]:
        if not query:
            raise FetchError("Empty query")

        request = {"method": RPC_METHOD, "params": [{}], "id": 1}
        url = self.endpoint(query)
        logger.debug("POST %s %s", url, RPC_METHOD)
        try:
            response = self.session.post(url, json=request, timeout=self.timeout)
            response.raise_for_status()
        except requests.RequestException as exc:
            raise FetchError(f"can't connect to agent: {exc}") from exc

        try:
            reply = response.json()
        except ValueError as exc:
            raise FetchError(f"Failed to query agent: invalid JSON reply: {exc}") from exc
        if not isinstance(reply, dict):
            raise FetchError("Failed to query agent: reply is not an object")
        if reply.get("error"):
            raise FetchError(f"Failed to query agent: {reply['error']}")
        result = reply.get("result")
        if not isinstance(result, dict) or "Payload" not in result:
            raise FetchError("Failed to query agent: reply has no Payload")
        return list(decode_payload(result["Payload"]))
