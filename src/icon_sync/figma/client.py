from __future__ import annotations

from typing import Any, Iterable, Optional
from urllib.parse import parse_qs, unquote, urlparse

import requests
from pydantic import BaseModel, Field, ValidationError
from tenacity import retry, retry_if_exception_type, stop_after_attempt, wait_exponential

FIGMA_API_BASE = "https://api.figma.com/v1"


class FigmaApiError(RuntimeError):
    def __init__(self, message: str, status_code: Optional[int] = None, body: str = ""):
        super().__init__(message)
        self.status_code = status_code
        self.body = body


# =========================
# Response schema
# =========================

class NodeDocument(BaseModel):
    document: Optional[dict[str, Any]] = None


class NodesResponse(BaseModel):
    nodes: dict[str, Optional[NodeDocument]] = Field(default_factory=dict)


class ImagesResponse(BaseModel):
    err: Optional[str] = None
    images: dict[str, Optional[str]] = Field(default_factory=dict)


# =========================
# URL parsing
# =========================

def parse_figma_node_url(url: str) -> tuple[str, str]:
    """
    https://www.figma.com/file/<key>/Name?node-id=12-34 -> ("<key>", "12:34")
    (/design/<key>/... links work too)
    """
    p = urlparse(url.strip())
    parts = [x for x in p.path.split("/") if x]
    if len(parts) < 2 or parts[0] not in ("file", "design"):
        raise ValueError(f"Invalid Figma URL, file key not found: {url}")
    file_key = parts[1]

    node_ids = parse_qs(p.query).get("node-id")
    if not node_ids or not node_ids[0]:
        raise ValueError(f"Invalid Figma URL, 'node-id' parameter not found: {url}")
    node_id = unquote(node_ids[0]).replace("-", ":")
    return file_key, node_id


# =========================
# Client
# =========================

class FigmaClient:
    def __init__(self, token: str, timeout_sec: int = 30, session: Optional[requests.Session] = None):
        if not token:
            raise ValueError("Figma token is empty")
        self.token = token
        self.timeout = timeout_sec
        self.session = session or requests.Session()

    @retry(
        retry=retry_if_exception_type((requests.ConnectionError, requests.Timeout)),
        stop=stop_after_attempt(3),
        wait=wait_exponential(multiplier=1, min=1, max=10),
        reraise=True,
    )
    def _get(self, url: str, params: Optional[dict[str, str]] = None, *, auth: bool = True) -> requests.Response:
        headers = {"X-Figma-Token": self.token} if auth else None
        r = self.session.get(url, params=params, headers=headers, timeout=self.timeout)
        if not r.ok:
            raise FigmaApiError(f"Figma API error {r.status_code} for {url}", r.status_code, r.text)
        return r

    def get_root_node(self, file_key: str, node_id: str) -> tuple[str, dict[str, Any]]:
        """Return (resolved_node_id, document). "1-2" style ids fall back to "1:2"."""
        url = f"{FIGMA_API_BASE}/files/{file_key}/nodes"
        resp = self._parse(NodesResponse, self._get(url, params={"ids": node_id}))

        doc = _document(resp, node_id)
        if doc is None and ":" not in node_id:
            colon_id = node_id.replace("-", ":")
            print(f"[FIGMA] node '{node_id}' not found, retrying as '{colon_id}'")
            resp = self._parse(NodesResponse, self._get(url, params={"ids": colon_id}))
            doc = _document(resp, colon_id)
            if doc is not None:
                node_id = colon_id

        if doc is None:
            raise FigmaApiError(f"Node '{node_id}' not found; available ids: {sorted(resp.nodes)}")
        return node_id, doc

    def get_image_urls(self, file_key: str, ids: Iterable[str], use_absolute_bounds: bool = True) -> dict[str, Optional[str]]:
        params = {"ids": ",".join(ids), "format": "svg"}
        if use_absolute_bounds:
            params["use_absolute_bounds"] = "true"
        resp = self._parse(ImagesResponse, self._get(f"{FIGMA_API_BASE}/images/{file_key}", params=params))
        if resp.err:
            raise FigmaApiError(f"Figma images API error: {resp.err}")
        return resp.images

    def download_svg(self, url: str) -> str:
        # rendered-asset URLs are pre-signed and must not receive the API token
        r = self._get(url, auth=False)
        return r.content.decode("utf-8", errors="replace")

    @staticmethod
    def _parse(model: type[BaseModel], r: requests.Response) -> Any:
        try:
            return model.model_validate_json(r.content)
        except (ValidationError, ValueError) as e:
            raise FigmaApiError(f"Unexpected Figma response: {e}") from e


def _document(resp: NodesResponse, node_id: str) -> Optional[dict[str, Any]]:
    wrapper = resp.nodes.get(node_id)
    return wrapper.document if wrapper is not None else None
