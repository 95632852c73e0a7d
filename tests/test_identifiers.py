from enum import Enum

import pytest

from lazyinject import InjectIdentifiable, ServiceIdentifier, registration_name


class Component(ServiceIdentifier):
    FIRST_TYPE = 1


class Plain(Enum):
    RED = "red"


class Tag:
    @property
    def inject_id(self) -> str:
        return "custom-tag"


def test_service_identifier_projects_to_member_name():
    assert Component.FIRST_TYPE.inject_id == "FIRST_TYPE"
    assert isinstance(Component.FIRST_TYPE, InjectIdentifiable)


def test_any_object_with_inject_id_is_identifiable():
    assert isinstance(Tag(), InjectIdentifiable)
    assert registration_name(Tag()) == "custom-tag"


def test_plain_enum_projects_to_member_name():
    assert registration_name(Plain.RED) == "RED"


def test_raw_string_is_used_verbatim():
    assert registration_name("primary") == "primary"


def test_name_takes_precedence_over_identifier():
    assert registration_name("primary", Component.FIRST_TYPE) == "primary"


def test_identifier_used_when_no_name():
    assert registration_name(None, Component.FIRST_TYPE) == "FIRST_TYPE"


def test_no_name_means_unnamed_registration():
    assert registration_name() is None


def test_unsupported_name_type_raises():
    with pytest.raises(TypeError):
        registration_name(42)  # type: ignore[arg-type]
