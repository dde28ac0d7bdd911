"""Tests for the Remote SDK -- page-number pagination and inline documents."""

from __future__ import annotations

import json

import httpx
import pytest

from apiwrap.exceptions import UnexpectedResponseError
from apiwrap.remote import (
    Client,
    CreateTimeoffParams,
    EmploymentBasicParams,
    EmploymentType,
    ListEmploymentsResponse,
    TimeoffDocumentParams,
    TimeoffType,
)
from apiwrap.types import Base64Data


def _employments_page(page: int, total_pages: int, ids: list[str]) -> dict:
    return {
        "data": {
            "employments": [{"id": i, "full_name": f"Person {i}"} for i in ids],
            "current_page": page,
            "total_count": 3,
            "total_pages": total_pages,
        }
    }


def _employment(**overrides: object) -> dict:
    employment = {
        "id": "e1",
        "company_id": "c1",
        "full_name": "Ada Lovelace",
        "type": "employee",
        "status": "active",
    }
    employment.update(overrides)
    return {"data": {"employment": employment}}


class TestEmploymentsPage:
    def test_more_pages_until_last(self) -> None:
        assert ListEmploymentsResponse.model_validate(_employments_page(1, 2, ["a"])).has_more_pages()
        assert not ListEmploymentsResponse.model_validate(
            _employments_page(2, 2, ["a"])
        ).has_more_pages()

    def test_token_is_current_page(self) -> None:
        page = ListEmploymentsResponse.model_validate(_employments_page(3, 5, ["a"]))
        assert page.next_page_token() == "3"

    def test_next_request_asks_for_following_page(self) -> None:
        page = ListEmploymentsResponse.model_validate(_employments_page(1, 2, ["a"]))
        request = page.next_page(httpx.Request("GET", "https://gateway.remote.com/v1/employments"))
        assert request.url.params["page"] == "2"

    def test_missing_data_has_no_items(self) -> None:
        page = ListEmploymentsResponse()
        assert page.items() == []
        assert not page.has_more_pages()


class TestEmployments:
    async def test_stream_follows_page_numbers(self, make_transport, json_response) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("page") == "2":
                return json_response(_employments_page(2, 2, ["c"]))
            return json_response(_employments_page(1, 2, ["a", "b"]))

        transport = make_transport(handler)
        async with Client.new("tok", transport=transport) as client:
            employments = await client.employments().get_index_stream(page_size=2).to_list()

        assert [e.id for e in employments] == ["a", "b", "c"]
        assert transport.requests[1].url.params["page_size"] == "2"

    async def test_stuck_page_number_stops(self, make_transport, json_response) -> None:
        transport = make_transport(lambda request: json_response(_employments_page(1, 3, ["a"])))
        async with Client.new("tok", transport=transport) as client:
            employments = await client.employments().get_index_stream().to_list()

        assert [e.id for e in employments] == ["a", "a"]
        assert len(transport.requests) == 2

    async def test_stream_follow_up_errors_are_unexpected_responses(
        self, make_transport, json_response
    ) -> None:
        def handler(request: httpx.Request) -> httpx.Response:
            if request.url.params.get("page") == "2":
                return httpx.Response(404)
            return json_response(_employments_page(1, 2, ["a"]))

        transport = make_transport(handler)
        async with Client.new("tok", transport=transport) as client:
            with pytest.raises(UnexpectedResponseError) as exc_info:
                await client.employments().get_index_stream().to_list()

        assert exc_info.value.status == 404
        assert len(transport.requests) == 2

    async def test_errors_are_unexpected_responses(self, make_transport) -> None:
        transport = make_transport(lambda request: httpx.Response(404, text="{}"))
        async with Client.new("tok", transport=transport) as client:
            with pytest.raises(UnexpectedResponseError) as exc_info:
                await client.employments().get_show("missing")

        assert exc_info.value.status == 404

    async def test_post_create_sends_wire_names(self, make_transport, json_response) -> None:
        transport = make_transport(lambda request: json_response(_employment(), 201))
        body = EmploymentBasicParams(
            company_id="c1",
            country_code="PRT",
            full_name="Ada Lovelace",
            job_title="Engineer",
            personal_email="ada@example.com",
            type_=EmploymentType.EMPLOYEE,
        )

        async with Client.new("tok", transport=transport) as client:
            created = await client.employments().post_create(body)

        sent = json.loads(transport.requests[0].content)
        assert sent["type"] == "employee"
        assert "provisional_start_date" not in sent
        assert created.data.employment.type_ is EmploymentType.EMPLOYEE


class TestTimeoff:
    async def test_document_content_is_sent_as_base64(self, make_transport, json_response) -> None:
        timeoff = {
            "id": "t1",
            "employment_id": "e1",
            "start_date": "2024-01-01",
            "end_date": "2024-01-02",
            "status": "approved",
            "timeoff_type": "sick_leave",
            "timezone": "Europe/Lisbon",
        }
        transport = make_transport(lambda request: json_response({"data": {"timeoff": timeoff}}))
        body = CreateTimeoffParams(
            employment_id="e1",
            start_date="2024-01-01",
            end_date="2024-01-02",
            timeoff_type=TimeoffType.SICK_LEAVE,
            timezone="Europe/Lisbon",
            document=TimeoffDocumentParams(content=Base64Data(b"hello"), name="note.txt"),
        )

        async with Client.new("tok", transport=transport) as client:
            response = await client.timeoff().post_create(body)

        sent = json.loads(transport.requests[0].content)
        assert sent["document"] == {"content": "aGVsbG8", "name": "note.txt"}
        assert response.data.timeoff.timeoff_type is TimeoffType.SICK_LEAVE


class TestCountries:
    async def test_supported_countries(self, make_transport, json_response) -> None:
        body = {"data": [{"code": "PRT", "name": "Portugal", "country_subdivisions": []}]}
        transport = make_transport(lambda request: json_response(body))
        async with Client.new("tok", transport=transport) as client:
            countries = await client.countries().get_supported_country()

        assert countries.data[0].name == "Portugal"
        assert transport.requests[0].url.path == "/v1/countries"
