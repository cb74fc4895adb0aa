"""
Unit tests for auth use cases (Register, Login, GetCurrentUser).
"""
from unittest.mock import AsyncMock

import pytest
from estoquehub.core.exceptions import (
    ConflictError,
    InvalidCredentialsError,
    TokenError,
    ValidationError,
)
from estoquehub.core.security import create_jwt_token, decode_jwt_token, hash_password
from estoquehub.application.use_cases.auth.login_user import LoginUserUseCase
from estoquehub.application.use_cases.auth.register_user import RegisterUserUseCase
from estoquehub.application.use_cases.auth.get_current_user import GetCurrentUserUseCase
from estoquehub.application.dto.auth_dto import UserLoginRequest, UserRegistrationRequest, AuthResponse
from estoquehub.domain.models.user import User


@pytest.fixture
def mock_user_repo():
    """Mock UserRepository with async methods."""
    repo = AsyncMock()
    return repo


class TestRegisterUserUseCase:
    """Tests for RegisterUserUseCase"""

    @pytest.mark.asyncio
    async def test_register_success(self, mock_user_repo, settings):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.save.side_effect = lambda user: User(
            id=7,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
        )

        use_case = RegisterUserUseCase(mock_user_repo, settings)
        result = await use_case.execute(
            UserRegistrationRequest(name="Ana Silva", email="ana@x.com", password="secret1")
        )
        assert isinstance(result, AuthResponse)
        assert result.user.name == "Ana Silva"
        assert result.user.email == "ana@x.com"
        claims = decode_jwt_token(result.token, settings)
        assert claims["sub"] == "7"
        assert claims["email"] == "ana@x.com"
        mock_user_repo.save.assert_called_once()

    @pytest.mark.asyncio
    async def test_password_is_stored_hashed(self, mock_user_repo, settings):
        mock_user_repo.find_by_email.return_value = None
        mock_user_repo.save.side_effect = lambda user: User(
            id=1, name=user.name, email=user.email, password_hash=user.password_hash
        )

        use_case = RegisterUserUseCase(mock_user_repo, settings)
        await use_case.execute(
            UserRegistrationRequest(name="Ana Silva", email="ana@x.com", password="secret1")
        )
        saved_user = mock_user_repo.save.call_args.args[0]
        assert saved_user.password_hash != "secret1"
        assert saved_user.password_hash.startswith("$2")

    @pytest.mark.asyncio
    async def test_register_duplicate_email_raises(self, mock_user_repo, settings):
        mock_user_repo.find_by_email.return_value = User(
            id=1, name="Existing", email="ana@x.com", password_hash="hash"
        )

        use_case = RegisterUserUseCase(mock_user_repo, settings)
        with pytest.raises(ConflictError, match="already exists"):
            await use_case.execute(
                UserRegistrationRequest(name="Ana Silva", email="ana@x.com", password="secret1")
            )
        mock_user_repo.save.assert_not_called()

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "payload",
        [
            {"email": "ana@x.com", "password": "secret1"},
            {"name": "Ana Silva", "password": "secret1"},
            {"name": "Ana Silva", "email": "ana@x.com"},
            {"name": "", "email": "ana@x.com", "password": "secret1"},
        ],
    )
    async def test_register_missing_field_raises(self, mock_user_repo, settings, payload):
        use_case = RegisterUserUseCase(mock_user_repo, settings)
        with pytest.raises(ValidationError, match="required"):
            await use_case.execute(UserRegistrationRequest(**payload))
        mock_user_repo.find_by_email.assert_not_called()

    @pytest.mark.asyncio
    async def test_register_short_name_raises(self, mock_user_repo, settings):
        use_case = RegisterUserUseCase(mock_user_repo, settings)
        with pytest.raises(ValidationError, match="at least 3"):
            await use_case.execute(
                UserRegistrationRequest(name="Al", email="al@x.com", password="secret1")
            )

    @pytest.mark.asyncio
    async def test_register_overlong_password_raises(self, mock_user_repo, settings):
        use_case = RegisterUserUseCase(mock_user_repo, settings)
        with pytest.raises(ValidationError, match="72 bytes"):
            await use_case.execute(
                UserRegistrationRequest(name="Ana Silva", email="ana@x.com", password="x" * 73)
            )


class TestLoginUserUseCase:
    """Tests for LoginUserUseCase"""

    @pytest.mark.asyncio
    async def test_login_success(self, mock_user_repo, settings):
        mock_user_repo.find_by_email.return_value = User(
            id=3,
            name="Test User",
            email="test@example.com",
            password_hash=hash_password("validpass"),
        )

        use_case = LoginUserUseCase(mock_user_repo, settings)
        result = await use_case.execute(
            UserLoginRequest(email="test@example.com", password="validpass")
        )
        assert result.user.name == "Test User"
        assert decode_jwt_token(result.token, settings)["sub"] == "3"

    @pytest.mark.asyncio
    async def test_login_user_not_found(self, mock_user_repo, settings):
        mock_user_repo.find_by_email.return_value = None
        use_case = LoginUserUseCase(mock_user_repo, settings)
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await use_case.execute(UserLoginRequest(email="nobody@example.com", password="x"))
        assert exc_info.value.user_message == "Invalid credentials."

    @pytest.mark.asyncio
    async def test_login_wrong_password_same_message(self, mock_user_repo, settings):
        mock_user_repo.find_by_email.return_value = User(
            id=1,
            name="Test",
            email="test@example.com",
            password_hash=hash_password("correctpass"),
        )
        use_case = LoginUserUseCase(mock_user_repo, settings)
        with pytest.raises(InvalidCredentialsError) as exc_info:
            await use_case.execute(UserLoginRequest(email="test@example.com", password="wrong"))
        assert exc_info.value.user_message == "Invalid credentials."

    @pytest.mark.asyncio
    async def test_login_missing_password_raises(self, mock_user_repo, settings):
        use_case = LoginUserUseCase(mock_user_repo, settings)
        with pytest.raises(ValidationError):
            await use_case.execute(UserLoginRequest(email="test@example.com"))


class TestGetCurrentUserUseCase:
    """Tests for GetCurrentUserUseCase"""

    @pytest.mark.asyncio
    async def test_get_current_user_success(self, settings):
        token = create_jwt_token({"sub": "123", "email": "user@example.com"}, settings)
        result = await GetCurrentUserUseCase(settings).execute(token)
        assert result.id == 123
        assert result.email == "user@example.com"

    @pytest.mark.asyncio
    async def test_invalid_token_raises(self, settings):
        with pytest.raises(TokenError, match="Invalid"):
            await GetCurrentUserUseCase(settings).execute("invalid.jwt.token")

    @pytest.mark.asyncio
    async def test_token_without_claims_raises(self, settings):
        token = create_jwt_token({"foo": "bar"}, settings)
        with pytest.raises(TokenError, match="missing user claims"):
            await GetCurrentUserUseCase(settings).execute(token)

    @pytest.mark.asyncio
    async def test_token_from_other_secret_raises(self, settings):
        from unittest.mock import MagicMock

        other = MagicMock()
        other.jwt_secret_key = "another-secret"
        other.jwt_algorithm = "HS256"
        other.access_token_expire_minutes = 480
        token = create_jwt_token({"sub": "1", "email": "a@b.c"}, other)
        with pytest.raises(TokenError):
            await GetCurrentUserUseCase(settings).execute(token)
