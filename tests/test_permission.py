import pytest

from gdrivecli.permission import PermissionType, Role


@pytest.mark.parametrize("text", ["owner", "organizer", "fileOrganizer", "writer", "commenter", "reader"])
def test_role_round_trip(text):
    assert str(Role.parse(text)) == text


def test_role_file_organizer():
    assert Role.parse("fileOrganizer") is Role.FILE_ORGANIZER


def test_role_invalid():
    with pytest.raises(ValueError, match="'boss' is not a valid role"):
        Role.parse("boss")


def test_role_is_case_sensitive():
    with pytest.raises(ValueError):
        Role.parse("Owner")


@pytest.mark.parametrize("text", ["user", "group", "domain", "anyone"])
def test_type_round_trip(text):
    assert str(PermissionType.parse(text)) == text


def test_type_invalid():
    with pytest.raises(ValueError, match="valid types are: user, group, domain, anyone"):
        PermissionType.parse("everyone")


@pytest.mark.parametrize(
    "kind, email, domain, discovery",
    [
        (PermissionType.USER, True, False, False),
        (PermissionType.GROUP, True, False, False),
        (PermissionType.DOMAIN, False, True, True),
        (PermissionType.ANYONE, False, False, True),
    ],
)
def test_type_requirements(kind, email, domain, discovery):
    assert kind.requires_email() is email
    assert kind.requires_domain() is domain
    assert kind.supports_file_discovery() is discovery