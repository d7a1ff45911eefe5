"""Tests for user exception variants."""

from crowdsrc.core.exceptions import CrowdSrcError
from crowdsrc.platform.users import CreateUserError, CreateUserErrorKind


class TestCreateUserError:
    def test_duplicate_username(self):
        error = CreateUserError.duplicate_username("Kristoffer")
        
        assert error.kind is CreateUserErrorKind.DUPLICATE_USERNAME
        assert error.message == "user with username Kristoffer already exists"
        assert error.username == "Kristoffer"
    
    def test_duplicate_email_is_quoted(self):
        error = CreateUserError.duplicate_email("kristoffer@example.com")
        
        assert error.kind is CreateUserErrorKind.DUPLICATE_EMAIL
        assert error.message == "user with email 'kristoffer@example.com' already exists"
        assert error.email == "kristoffer@example.com"
    
    def test_unknown_keeps_cause(self):
        cause = ConnectionResetError("connection reset by peer")
        
        error = CreateUserError.unknown("failed to save user", cause)
        
        assert error.kind is CreateUserErrorKind.UNKNOWN
        assert error.message == "failed to save user"
        assert error.cause is cause
        assert error.details["original_error_type"] == "ConnectionResetError"
    
    def test_is_crowdsrc_error(self):
        error = CreateUserError.duplicate_username("Kristoffer")
        
        assert isinstance(error, CrowdSrcError)
        assert error.error_code == "CREATE_USER_DUPLICATE_USERNAME"
