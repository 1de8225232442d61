import pytest

from usercrud.entity import User


def _sample():
    return User(
        id=7,
        username="jdoe",
        first_name="John",
        last_name="Doe",
        email="jdoe@example.com",
        phone="none",
    )


def test_to_dict_uses_client_keys():
    data = _sample().to_dict()
    assert list(data) == ["id", "username", "firstName", "lastName", "email", "phone"]
    assert data["firstName"] == "John"
    assert data["email"] == "jdoe@example.com"


def test_round_trip():
    user = _sample()
    assert User.from_dict(user.to_dict()) == user


def test_keys_match_case_insensitively():
    user = User.from_dict({"FIRSTNAME": "Ann", "Username": "ann"})
    assert user.first_name == "Ann"
    assert user.username == "ann"


def test_missing_and_unknown_keys():
    assert User.from_dict({}) == User()
    assert User.from_dict({"nickname": "x"}) == User()


def test_null_document_and_null_fields_keep_zero_values():
    assert User.from_dict(None) == User()
    assert User.from_dict({"email": None, "phone": "p"}) == User(phone="p")


@pytest.mark.parametrize(
    "data",
    [
        {"id": "1"},
        {"id": 1.5},
        {"id": True},
        {"username": 3},
        {"id": 2**64},
        [1, 2],
        "text",
    ],
)
def test_wrong_types_raise(data):
    with pytest.raises(ValueError):
        User.from_dict(data)