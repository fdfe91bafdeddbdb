"""Tests for the loan-origination submission client."""

from __future__ import annotations

import json

import httpx
import pytest

from lending.core.config import LOSConfig
from lending.intake.client import SubmissionClient

SUBMIT_URL = "http://los.test/apply"


def _config(**overrides) -> LOSConfig:
    defaults = {"base_url": "http://los.test", "submit_path": "/apply", "timeout_seconds": 5}
    defaults.update(overrides)
    return LOSConfig(**defaults)


class TestSubmissionClient:
    @pytest.mark.asyncio
    async def test_success_returns_body(self, httpx_mock):
        httpx_mock.add_response(
            url=SUBMIT_URL,
            method="POST",
            status_code=201,
            json={"data": {"id": 42}, "message": "Application received"},
        )
        client = SubmissionClient(_config())
        try:
            outcome = await client.submit({"customer": {"firstName": "Maria"}})
            assert outcome.success is True
            assert outcome.status_code == 201
            assert outcome.data == {"data": {"id": 42}, "message": "Application received"}
            assert outcome.error is None
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_posts_json(self, httpx_mock):
        httpx_mock.add_response(url=SUBMIT_URL, method="POST", json={})
        client = SubmissionClient(_config())
        try:
            await client.submit({"loan": {"displayId": "Loan Application - 1"}})
            request = httpx_mock.get_request()
            assert request.headers["content-type"] == "application/json"
            assert request.headers["accept"] == "application/json"
            assert json.loads(request.content) == {"loan": {"displayId": "Loan Application - 1"}}
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_non_json_success_body(self, httpx_mock):
        httpx_mock.add_response(url=SUBMIT_URL, method="POST", text="OK")
        client = SubmissionClient(_config())
        try:
            outcome = await client.submit({})
            assert outcome.success is True
            assert outcome.data == "OK"
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_server_message_preferred(self, httpx_mock):
        httpx_mock.add_response(
            url=SUBMIT_URL,
            method="POST",
            status_code=500,
            json={"message": "Loan system unavailable", "errors": []},
        )
        client = SubmissionClient(_config())
        try:
            outcome = await client.submit({})
            assert outcome.success is False
            assert outcome.status_code == 500
            assert outcome.error == "Loan system unavailable"
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_detail_message(self, httpx_mock):
        httpx_mock.add_response(
            url=SUBMIT_URL, method="POST", status_code=422, json={"detail": "SSN already on file"}
        )
        client = SubmissionClient(_config())
        try:
            outcome = await client.submit({})
            assert outcome.error == "SSN already on file"
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_generic_message_without_body(self, httpx_mock):
        httpx_mock.add_response(url=SUBMIT_URL, method="POST", status_code=503, text="")
        client = SubmissionClient(_config())
        try:
            outcome = await client.submit({})
            assert outcome.success is False
            assert outcome.error == "Request failed with status 503"
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_timeout(self, httpx_mock):
        httpx_mock.add_exception(httpx.ReadTimeout("Read timed out"), url=SUBMIT_URL)
        client = SubmissionClient(_config())
        try:
            outcome = await client.submit({})
            assert outcome.success is False
            assert outcome.status_code is None
            assert "timed out" in outcome.error
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_connection_error(self, httpx_mock):
        httpx_mock.add_exception(httpx.ConnectError("Connection refused"), url=SUBMIT_URL)
        client = SubmissionClient(_config())
        try:
            outcome = await client.submit({})
            assert outcome.success is False
            assert outcome.error == "Connection refused"
        finally:
            await client.close()

    @pytest.mark.asyncio
    async def test_no_retry(self, httpx_mock):
        httpx_mock.add_response(url=SUBMIT_URL, method="POST", status_code=502)
        client = SubmissionClient(_config())
        try:
            await client.submit({})
            assert len(httpx_mock.get_requests()) == 1
        finally:
            await client.close()
