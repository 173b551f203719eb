from __future__ import annotations
import logging
import requests
from typing import Optional, Dict, Any, List

from core.config import NOTION_API_BASE, NOTION_VERSION, NOTION_TIMEOUT
from core.errors import MissingCredentialError, RemoteApiError


def _compact(**fields: Any) -> Dict[str, Any]:
    # Notion treats an absent key differently from null, so None never goes out.
    return {k: v for k, v in fields.items() if v is not None}


def _paging(start_cursor: Optional[str], page_size: Optional[int]) -> Dict[str, Any]:
    return _compact(start_cursor=start_cursor, page_size=page_size)


class NotionAPI:
    """Thin client for the Notion REST API.

    One method per endpoint, one HTTP request per call. Responses are
    returned as parsed JSON without any reshaping.
    """

    def __init__(
        self,
        token: str,
        base: str = NOTION_API_BASE,
        version: str = NOTION_VERSION,
        timeout: Optional[float] = NOTION_TIMEOUT,
    ) -> None:
        if not token or token.strip() == "":
            raise MissingCredentialError()
        self.token = token.strip()
        self.base = base.rstrip("/")
        self.version = version
        self.timeout = timeout
        self.headers = {
            "Authorization": f"Bearer {self.token}",
            "Notion-Version": self.version,
            "Content-Type": "application/json",
        }

    def _req(
        self,
        method: str,
        path: str,
        params: Optional[Dict[str, Any]] = None,
        body: Optional[Dict[str, Any]] = None,
    ) -> Any:
        url = f"{self.base}{path}"
        logging.debug(f"Notion {method} {path}")
        r = requests.request(
            method,
            url,
            headers=self.headers,
            params=params or None,
            json=body,
            timeout=self.timeout,
        )
        if not 200 <= r.status_code < 300:
            logging.warning(f"Notion {method} {path} -> {r.status_code}")
            raise RemoteApiError(r.status_code, r.text)
        return r.json()

    # ---------- Search ----------

    def search(
        self,
        query: Optional[str] = None,
        filter_object: Optional[str] = None,
        sort_direction: Optional[str] = None,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        body = _compact(query=query, start_cursor=start_cursor, page_size=page_size)
        if filter_object:
            body["filter"] = {"property": "object", "value": filter_object}
        if sort_direction:
            body["sort"] = {"timestamp": "last_edited_time", "direction": sort_direction}
        return self._req("POST", "/search", body=body)

    # ---------- Pages ----------

    def create_page(
        self,
        parent: Dict[str, Any],
        properties: Dict[str, Any],
        children: Optional[List[Any]] = None,
        icon: Optional[Dict[str, Any]] = None,
        cover: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body = _compact(parent=parent, properties=properties, children=children, icon=icon, cover=cover)
        return self._req("POST", "/pages", body=body)

    def get_page(self, page_id: str) -> Dict[str, Any]:
        return self._req("GET", f"/pages/{page_id}")

    def update_page(
        self,
        page_id: str,
        properties: Optional[Dict[str, Any]] = None,
        icon: Optional[Dict[str, Any]] = None,
        cover: Optional[Dict[str, Any]] = None,
        archived: Optional[bool] = None,
        in_trash: Optional[bool] = None,
    ) -> Dict[str, Any]:
        body = _compact(properties=properties, icon=icon, cover=cover, archived=archived, in_trash=in_trash)
        return self._req("PATCH", f"/pages/{page_id}", body=body)

    def move_page(self, page_id: str, parent: Dict[str, Any]) -> Dict[str, Any]:
        return self._req("POST", f"/pages/{page_id}/move", body={"parent": parent})

    def get_page_property(
        self,
        page_id: str,
        property_id: str,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        return self._req(
            "GET",
            f"/pages/{page_id}/properties/{property_id}",
            params=_paging(start_cursor, page_size),
        )

    # ---------- Blocks ----------

    def get_block(self, block_id: str) -> Dict[str, Any]:
        return self._req("GET", f"/blocks/{block_id}")

    def get_block_children(
        self,
        block_id: str,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        return self._req("GET", f"/blocks/{block_id}/children", params=_paging(start_cursor, page_size))

    def append_blocks(self, block_id: str, children: List[Any]) -> Dict[str, Any]:
        return self._req("PATCH", f"/blocks/{block_id}/children", body={"children": children})

    def update_block(self, block_id: str, data: Dict[str, Any]) -> Dict[str, Any]:
        return self._req("PATCH", f"/blocks/{block_id}", body=data)

    def delete_block(self, block_id: str) -> Dict[str, Any]:
        return self._req("DELETE", f"/blocks/{block_id}")

    # ---------- Data sources ----------

    def create_data_source(
        self,
        database_id: str,
        title: Optional[List[Any]] = None,
        properties: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body: Dict[str, Any] = {"parent": {"type": "database", "database_id": database_id}}
        body.update(_compact(title=title, properties=properties))
        return self._req("POST", "/data_sources", body=body)

    def get_data_source(self, data_source_id: str) -> Dict[str, Any]:
        return self._req("GET", f"/data_sources/{data_source_id}")

    def update_data_source(
        self,
        data_source_id: str,
        title: Optional[List[Any]] = None,
        properties: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        body = _compact(title=title, properties=properties)
        return self._req("PATCH", f"/data_sources/{data_source_id}", body=body)

    def query_data_source(
        self,
        data_source_id: str,
        filter: Optional[Dict[str, Any]] = None,
        sorts: Optional[List[Any]] = None,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        body = _compact(filter=filter, sorts=sorts, start_cursor=start_cursor, page_size=page_size)
        return self._req("POST", f"/data_sources/{data_source_id}/query", body=body)

    def list_data_source_templates(
        self,
        data_source_id: str,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        return self._req(
            "GET",
            f"/data_sources/{data_source_id}/templates",
            params=_paging(start_cursor, page_size),
        )

    # ---------- Databases (legacy) ----------

    def get_database(self, database_id: str) -> Dict[str, Any]:
        return self._req("GET", f"/databases/{database_id}")

    def query_database(
        self,
        database_id: str,
        filter: Optional[Dict[str, Any]] = None,
        sorts: Optional[List[Any]] = None,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        body = _compact(filter=filter, sorts=sorts, start_cursor=start_cursor, page_size=page_size)
        return self._req("POST", f"/databases/{database_id}/query", body=body)

    def create_database(
        self,
        parent: Dict[str, Any],
        title: List[Any],
        properties: Dict[str, Any],
    ) -> Dict[str, Any]:
        body = {"parent": parent, "title": title, "properties": properties}
        return self._req("POST", "/databases", body=body)

    # ---------- Comments ----------

    def create_comment(
        self,
        rich_text: List[Any],
        parent: Optional[Dict[str, Any]] = None,
        discussion_id: Optional[str] = None,
    ) -> Dict[str, Any]:
        body = _compact(parent=parent, discussion_id=discussion_id, rich_text=rich_text)
        return self._req("POST", "/comments", body=body)

    def get_comments(
        self,
        block_id: str,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        params = {"block_id": block_id}
        params.update(_paging(start_cursor, page_size))
        return self._req("GET", "/comments", params=params)

    def get_comment(self, comment_id: str) -> Dict[str, Any]:
        return self._req("GET", f"/comments/{comment_id}")

    # ---------- Users ----------

    def list_users(
        self,
        start_cursor: Optional[str] = None,
        page_size: Optional[int] = None,
    ) -> Dict[str, Any]:
        return self._req("GET", "/users", params=_paging(start_cursor, page_size))

    def get_user(self, user_id: str) -> Dict[str, Any]:
        return self._req("GET", f"/users/{user_id}")

    def get_bot_user(self) -> Dict[str, Any]:
        return self._req("GET", "/users/me")
