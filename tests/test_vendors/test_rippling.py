"""Tests for the Rippling SDK -- cursor pagination and typed models."""

from __future__ import annotations

import httpx
import pytest

from apiwrap.exceptions import InvalidRequestError, ServerError
from apiwrap.rippling import Client, ListWorkersResponse, WorkerStatus

BASE = "https://rest.ripplingapis.com"


def _workers_page(ids: list[str], cursor: str | None) -> dict:
    return {
        "results": [{"id": i, "status": "ACTIVE", "work_email": f"{i}@acme.test"} for i in ids],
        "next_link": f"{BASE}/workers?cursor={cursor}" if cursor else None,
    }


class TestCursorPage:
    def test_token_is_the_cursor_of_next_link(self) -> None:
        page = ListWorkersResponse.model_validate(_workers_page(["w1"], "abc"))

        assert page.has_more_pages()
        assert page.next_page_token() == "abc"

    def test_last_page(self) -> None:
        page = ListWorkersResponse.model_validate(_workers_page(["w1"], None))

        assert not page.has_more_pages()
        assert page.next_page_token() is None

    def test_next_page_sets_cursor(self) -> None:
        page = ListWorkersResponse.model_validate(_workers_page(["w1"], "abc"))
        request = httpx.Request("GET", f"{BASE}/workers?order_by=id")

        request = page.next_page(request)
        assert request.url.params["cursor"] == "abc"
        assert request.url.params["order_by"] == "id"

    def test_next_link_without_cursor_is_invalid(self) -> None:
        page = ListWorkersResponse(next_link=f"{BASE}/workers?page=2")
        with pytest.raises(InvalidRequestError):
            page.next_page(httpx.Request("GET", f"{BASE}/workers"))


class TestWorkers:
    async def test_list_stream_walks_every_page(self, make_transport, json_response) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("cursor") == "c2":
                return json_response(_workers_page(["w3"], None))
            return json_response(_workers_page(["w1", "w2"], "c2"))

        transport = make_transport(handler)
        async with Client.new("tok", transport=transport) as client:
            workers = [w async for w in client.workers().list_stream(filter="status eq 'ACTIVE'")]

        assert [w.id for w in workers] == ["w1", "w2", "w3"]
        assert workers[0].status is WorkerStatus.ACTIVE
        assert len(transport.requests) == 2
        second = transport.requests[1]
        assert second.url.params["cursor"] == "c2"
        assert second.url.params["filter"] == "status eq 'ACTIVE'"
        assert second.headers["Authorization"] == "Bearer tok"

    async def test_get_by_id(self, make_transport, json_response) -> None:
        transport = make_transport(lambda request: json_response({"id": "w1", "title": "Eng"}))
        async with Client.new("tok", transport=transport) as client:
            worker = await client.workers().get("w1")

        assert worker.title == "Eng"
        assert str(transport.requests[0].url) == f"{BASE}/workers/w1"

    async def test_error_on_second_page_after_first_items(self, make_transport, json_response) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("cursor"):
                return httpx.Response(403, text="forbidden")
            return json_response(_workers_page(["w1"], "c2"))

        async with Client.new("tok", transport=make_transport(handler)) as client:
            seen = []
            with pytest.raises(ServerError) as exc_info:
                async for worker in client.workers().list_stream():
                    seen.append(worker.id)

        assert seen == ["w1"]
        assert exc_info.value.status == 403


class TestDepartments:
    async def test_to_list_with_limit(self, make_transport, json_response) -> None:
        page = {
            "results": [{"id": "d1", "name": "Eng"}, {"id": "d2", "name": "Ops", "parent": "d1"}],
            "next_link": f"{BASE}/departments?cursor=c2",
        }
        transport = make_transport(lambda request: json_response(page))
        async with Client.new("tok", transport=transport) as client:
            departments = await client.departments().list_stream().to_list(limit=2)

        assert [d.name for d in departments] == ["Eng", "Ops"]
        assert departments[1].parent == "d1"
        assert len(transport.requests) == 1


class TestUsers:
    async def test_phone_numbers_are_normalised(self, make_transport, json_response) -> None:
        body = {
            "results": [
                {
                    "id": "u1",
                    "phone_numbers": [{"type": "MOBILE", "value": "(510) 864-1234"}],
                }
            ]
        }
        transport = make_transport(lambda request: json_response(body))
        async with Client.new("tok", transport=transport) as client:
            page = await client.users().list()

        phone = page.items()[0].phone_numbers[0]
        assert phone.type_ == "MOBILE"
        assert str(phone.value) == "+1 510-864-1234"
