import pytest

from canteen.core.exceptions import (
    AccountDeactivated, EmailAlreadyRegistered, InvalidCredentials, ValidationFailed
)
from canteen.models.user import UserRole


async def test_sign_up_creates_customer_and_signs_in(accounts, repo, session_state):
    user = await accounts.sign_up("Asha", "asha@mec.ac.in", "secret1")

    assert user.role == UserRole.USER
    assert user.active is True
    assert user.password != "secret1"
    assert (await repo.get_user_by_email("asha@mec.ac.in")).id == user.id
    assert session_state.current_user.id == user.id


async def test_duplicate_email_is_rejected(accounts, repo):
    await accounts.sign_up("Asha", "asha@mec.ac.in", "secret1")

    with pytest.raises(EmailAlreadyRegistered, match="Email already registered"):
        await accounts.sign_up("Another Asha", "asha@mec.ac.in", "secret2")
    assert len(await repo.list_users()) == 1


async def test_predefined_email_cannot_be_registered(accounts, repo):
    with pytest.raises(EmailAlreadyRegistered):
        await accounts.sign_up("Imposter", "canteen@admin", "x")
    assert await repo.list_users() == []


async def test_missing_fields_are_rejected(accounts):
    with pytest.raises(ValidationFailed, match="Please fill all fields"):
        await accounts.sign_up("  ", "asha@mec.ac.in", "secret1")
    with pytest.raises(ValidationFailed, match="Please fill all fields"):
        await accounts.sign_in("asha@mec.ac.in", "")


@pytest.mark.parametrize("email,password,role", [
    ("canteen@admin", "shop123", UserRole.SHOP),
    ("admin@mec", "admin123", UserRole.ADMIN),
])
async def test_predefined_accounts_sign_in_without_stored_users(accounts, repo, email, password, role):
    user = await accounts.sign_in(email, password)

    assert user.role == role
    assert await repo.list_users() == []


async def test_sign_in_checks_password(accounts):
    await accounts.sign_up("Asha", "asha@mec.ac.in", "secret1")
    accounts.sign_out()

    assert (await accounts.sign_in("asha@mec.ac.in", "secret1")).name == "Asha"
    with pytest.raises(InvalidCredentials, match="Invalid email or password"):
        await accounts.sign_in("asha@mec.ac.in", "wrong")
    with pytest.raises(InvalidCredentials):
        await accounts.sign_in("canteen@admin", "wrong")
    with pytest.raises(InvalidCredentials):
        await accounts.sign_in("nobody@mec.ac.in", "secret1")


async def test_deactivated_user_cannot_sign_in(accounts, session_state):
    user = await accounts.sign_up("Asha", "asha@mec.ac.in", "secret1")
    accounts.sign_out()

    toggled = await accounts.toggle_active(user.id)

    assert toggled.active is False
    with pytest.raises(AccountDeactivated, match="Your account has been deactivated"):
        await accounts.sign_in("asha@mec.ac.in", "secret1")
    assert session_state.current_user is None

    assert (await accounts.toggle_active(user.id)).active is True
    assert (await accounts.sign_in("asha@mec.ac.in", "secret1")).id == user.id


async def test_predefined_accounts_cannot_be_toggled(accounts):
    assert await accounts.toggle_active("shop-1") is None


async def test_mixed_case_domain_signs_in_with_the_same_string(accounts, repo):
    user = await accounts.sign_up("Asha", "Asha@Mec.AC.IN", "secret1")
    accounts.sign_out()

    assert user.email == "Asha@mec.ac.in"
    assert (await accounts.sign_in("Asha@Mec.AC.IN", "secret1")).id == user.id
    with pytest.raises(EmailAlreadyRegistered):
        await accounts.sign_up("Asha", "Asha@MEC.ac.in", "secret2")
    assert len(await repo.list_users()) == 1


async def test_invalid_email_is_rejected_on_sign_up(accounts, repo):
    with pytest.raises(ValidationFailed, match="Please enter a valid email address"):
        await accounts.sign_up("Asha", "not-an-email", "secret1")
    assert await repo.list_users() == []


async def test_current_user_signs_out_deactivated_customer(accounts, session_state):
    user = await accounts.sign_up("Asha", "asha@mec.ac.in", "secret1")
    assert (await accounts.current_user()).id == user.id

    await accounts.toggle_active(user.id)

    with pytest.raises(AccountDeactivated):
        await accounts.current_user()
    assert session_state.current_user is None
    assert await accounts.current_user() is None


async def test_current_user_for_predefined_account(accounts):
    await accounts.sign_in("canteen@admin", "shop123")

    assert (await accounts.current_user()).role == UserRole.SHOP
