"""Tests for transport error mapping, using a stub service."""

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient

from crowdsrc.app import create_app
from crowdsrc.platform.users import CreateUserError, UserName
from crowdsrc.platform.users.api import ApiError, ApiErrorKind
from crowdsrc.platform.users.core.exceptions import UserNameError


@pytest.fixture
def stub_service():
    service = AsyncMock()
    service.create_user = AsyncMock()
    return service


@pytest_asyncio.fixture
async def stub_client(stub_service, settings):
    app = create_app(service=stub_service, settings=settings)
    transport = ASGITransport(app=app, raise_app_exceptions=False)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


class TestApiError:
    
    def test_from_parse_error(self):
        with pytest.raises(UserNameError) as exc_info:
            UserName.new(" ")
        
        error = ApiError.from_parse_error(exc_info.value)
        
        assert error.kind is ApiErrorKind.UNPROCESSABLE_ENTITY
        assert error.status_code == 422
        assert error.message == "username can't be empty"
    
    @pytest.mark.parametrize(
        "error, status_code",
        [
            (CreateUserError.duplicate_username("Kristoffer"), 422),
            (CreateUserError.duplicate_email("kristoffer@example.com"), 422),
            (CreateUserError.unknown("failed to save user", OSError("disk full")), 500),
        ],
    )
    def test_from_create_user_error(self, error, status_code):
        assert ApiError.from_create_user_error(error).status_code == status_code
    
    def test_unknown_is_redacted(self):
        error = CreateUserError.unknown(
            "failed to save user with username 'Kristoffer' and email 'kristoffer@example.com'",
            OSError("disk full"),
        )
        
        api_error = ApiError.from_create_user_error(error)
        
        assert api_error.message == "Internal server error"
    
    def test_unhandled_kind_fails_loudly(self):
        error = CreateUserError.duplicate_username("Kristoffer")
        error.kind = "something_new"
        
        with pytest.raises(ValueError):
            ApiError.from_create_user_error(error)


class TestCreateUserWithStubService:
    
    @pytest.mark.asyncio
    async def test_invalid_input_never_reaches_service(self, stub_client, stub_service):
        response = await stub_client.post(
            "/api/users", json={"username": "a b", "email_address": "x@y.com"}
        )
        
        assert response.status_code == 422
        stub_service.create_user.assert_not_awaited()
    
    @pytest.mark.asyncio
    async def test_service_receives_parsed_request(self, stub_client, stub_service, sample_user):
        stub_service.create_user.return_value = sample_user
        
        response = await stub_client.post(
            "/api/users", json={"username": "  Kristoffer ", "email_address": "kristoffer@example.com"}
        )
        
        assert response.status_code == 201
        assert response.json()["data"]["id"] == str(sample_user.id)
        request = stub_service.create_user.await_args.args[0]
        assert request.username.value == "Kristoffer"
        assert request.email.value == "kristoffer@example.com"
    
    @pytest.mark.asyncio
    async def test_unknown_error_is_generic_500(self, stub_client, stub_service, caplog):
        stub_service.create_user.side_effect = CreateUserError.unknown(
            "failed to save user with username 'Kristoffer' and email 'kristoffer@example.com'",
            ConnectionRefusedError("connection refused"),
        )
        
        response = await stub_client.post(
            "/api/users", json={"username": "Kristoffer", "email_address": "kristoffer@example.com"}
        )
        
        assert response.status_code == 500
        assert response.json() == {"status_code": 500, "data": {"message": "Internal server error"}}
        assert "connection refused" not in response.text
        assert "connection refused" in caplog.text
    
    @pytest.mark.asyncio
    async def test_unexpected_exception_is_generic_500(self, stub_client, stub_service):
        stub_service.create_user.side_effect = RuntimeError("secret internals")
        
        response = await stub_client.post(
            "/api/users", json={"username": "Kristoffer", "email_address": "kristoffer@example.com"}
        )
        
        assert response.status_code == 500
        assert response.json() == {"status_code": 500, "data": {"message": "Internal server error"}}
    
    @pytest.mark.asyncio
    async def test_unexpected_exception_keeps_request_id(self, stub_client, stub_service):
        stub_service.create_user.side_effect = RuntimeError("secret internals")
        
        response = await stub_client.post(
            "/api/users",
            json={"username": "Kristoffer", "email_address": "kristoffer@example.com"},
            headers={"X-Request-ID": "req-500"},
        )
        
        assert response.status_code == 500
        assert response.headers["X-Request-ID"] == "req-500"
        assert "secret internals" not in response.text
    
    @pytest.mark.asyncio
    async def test_duplicate_kind_maps_to_422(self, stub_client, stub_service):
        stub_service.create_user.side_effect = CreateUserError.duplicate_username("Kristoffer")
        
        response = await stub_client.post(
            "/api/users", json={"username": "Kristoffer", "email_address": "kristoffer@example.com"}
        )
        
        assert response.status_code == 422
        assert response.json()["data"]["message"] == "user with username Kristoffer already exists"
