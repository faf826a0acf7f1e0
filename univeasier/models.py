"""Records exchanged through the API, with their validation rules."""

import base64
import json
import re
from collections.abc import Mapping
from dataclasses import dataclass, field

from .enums import (
    Gender,
    PersonType,
    Status,
    validate_gender,
    validate_person_type,
    validate_status,
)
from .errors import (
    InvalidEmailError,
    InvalidLastNameError,
    InvalidNameError,
    NullValueNotAllowedError,
    OverflowError_,
    TypeConversionError,
)
from .nullable import NullInt32, NullInt64, NullString, NullTime

_LETTERS = re.compile(r"[a-zA-Z][a-zA-Z\t\n\f\r ]*")
_EMAIL = re.compile(r"[a-z0-9._\-]+@[a-z.\-]+\.[a-z]{2,4}")

_MAX_TAG_LENGTH = 100
_MAX_AGE = 200


def _is_letters(text):
    return bool(text) and _LETTERS.fullmatch(text) is not None


def _is_email(text):
    return bool(text) and _EMAIL.fullmatch(text) is not None


def _mapping(cls, data):
    if not isinstance(data, Mapping):
        raise TypeConversionError(cls.__name__, type(data).__name__)
    return data


def _nullable(kind, data, key):
    return kind.from_json(json.dumps(data.get(key)))


def _plain(value):
    return json.loads(value.to_json())


def _typed(data, key, expected, type_name, default):
    value = data.get(key)
    if value is None:
        return default
    if not isinstance(value, expected) or (
        expected is not bool and isinstance(value, bool)
    ):
        raise TypeConversionError(type_name, type(value).__name__)
    return value


def _int(data, key):
    return _typed(data, key, int, "int", 0)


def _str(data, key):
    return _typed(data, key, str, "string", "")


def _bool(data, key):
    return _typed(data, key, bool, "bool", False)


def _enum(enum_cls, data, key):
    value = _typed(data, key, int, "int8", 0)
    if not -128 <= value <= 127:
        raise OverflowError_("int8")
    try:
        return enum_cls(value)
    except ValueError:
        return value


def _bytes_from(data, key):
    value = data.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeConversionError("[]byte", type(value).__name__)
    return base64.b64decode(value, validate=True)


def _bytes_to(value):
    return None if value is None else base64.b64encode(value).decode("ascii")


@dataclass
class Interest:
    """A tag a person is interested in or skilled at."""

    id: NullInt64 = field(default_factory=NullInt64)
    tag: NullString = field(default_factory=NullString)
    is_skill: bool = False
    created_date: NullTime = field(default_factory=NullTime)
    last_modified_date: NullTime = field(default_factory=NullTime)
    created_by: NullInt64 = field(default_factory=NullInt64)

    def validate(self):
        """Raise when the tag is empty or too long, or the creator is missing."""
        tag = self.tag.value or ""
        if not 0 < len(tag.encode("utf-8")) <= _MAX_TAG_LENGTH:
            raise InvalidNameError(tag)
        if self.created_by.is_null():
            raise NullValueNotAllowedError("CreatedBy")

    def to_dict(self):
        return {
            "id": _plain(self.id),
            "tag": _plain(self.tag),
            "is_skill": self.is_skill,
            "created_date": _plain(self.created_date),
            "last_modified_date": _plain(self.last_modified_date),
            "created_by": _plain(self.created_by),
        }

    @classmethod
    def from_dict(cls, data):
        data = _mapping(cls, data)
        return cls(
            id=_nullable(NullInt64, data, "id"),
            tag=_nullable(NullString, data, "tag"),
            is_skill=_bool(data, "is_skill"),
            created_date=_nullable(NullTime, data, "created_date"),
            last_modified_date=_nullable(NullTime, data, "last_modified_date"),
            created_by=_nullable(NullInt64, data, "created_by"),
        )


@dataclass
class Person:
    """A registered person: visitor, student, graduate or professor."""

    id: NullInt64 = field(default_factory=NullInt64)
    code: NullString = field(default_factory=NullString)
    gender: Gender = Gender.MALE
    first_name: NullString = field(default_factory=NullString)
    last_name: NullString = field(default_factory=NullString)
    phone: NullString = field(default_factory=NullString)
    email: NullString = field(default_factory=NullString)
    avatar: bytes | None = None
    type: PersonType = PersonType.VISITOR
    home_city: NullString = field(default_factory=NullString)
    current_city: NullString = field(default_factory=NullString)
    ethnic: NullInt32 = field(default_factory=NullInt32)
    nationality: NullString = field(default_factory=NullString)
    birth_date: NullTime = field(default_factory=NullTime)
    admission_year: NullInt32 = field(default_factory=NullInt32)
    period: NullInt32 = field(default_factory=NullInt32)
    is_verified: Status = Status.UNVERIFIED
    doc_verifier: bytes | None = None
    created_date: NullTime = field(default_factory=NullTime)
    last_modified_date: NullTime = field(default_factory=NullTime)

    def validate(self):
        """Raise on a bad name, last name, e-mail, gender, kind or status."""
        first_name = self.first_name.value or ""
        if not _is_letters(first_name):
            raise InvalidNameError(first_name)
        last_name = self.last_name.value or ""
        if not _is_letters(last_name):
            raise InvalidLastNameError(last_name)
        email = self.email.value or ""
        if not _is_email(email):
            raise InvalidEmailError(email)
        validate_gender(self.gender)
        validate_person_type(self.type)
        validate_status(self.is_verified)

    def to_dict(self):
        return {
            "id": _plain(self.id),
            "code": _plain(self.code),
            "gender": int(self.gender),
            "first_name": _plain(self.first_name),
            "last_name": _plain(self.last_name),
            "phone": _plain(self.phone),
            "email": _plain(self.email),
            "avatar": _bytes_to(self.avatar),
            "type": int(self.type),
            "home_city": _plain(self.home_city),
            "current_city": _plain(self.current_city),
            "ethnic": _plain(self.ethnic),
            "nationality": _plain(self.nationality),
            "birth_date": _plain(self.birth_date),
            "admission_year": _plain(self.admission_year),
            "period": _plain(self.period),
            "is_verified": int(self.is_verified),
            "doc_verifier": _bytes_to(self.doc_verifier),
            "created_date": _plain(self.created_date),
            "last_modified_date": _plain(self.last_modified_date),
        }

    @classmethod
    def from_dict(cls, data):
        data = _mapping(cls, data)
        return cls(
            id=_nullable(NullInt64, data, "id"),
            code=_nullable(NullString, data, "code"),
            gender=_enum(Gender, data, "gender"),
            first_name=_nullable(NullString, data, "first_name"),
            last_name=_nullable(NullString, data, "last_name"),
            phone=_nullable(NullString, data, "phone"),
            email=_nullable(NullString, data, "email"),
            avatar=_bytes_from(data, "avatar"),
            type=_enum(PersonType, data, "type"),
            home_city=_nullable(NullString, data, "home_city"),
            current_city=_nullable(NullString, data, "current_city"),
            ethnic=_nullable(NullInt32, data, "ethnic"),
            nationality=_nullable(NullString, data, "nationality"),
            birth_date=_nullable(NullTime, data, "birth_date"),
            admission_year=_nullable(NullInt32, data, "admission_year"),
            period=_nullable(NullInt32, data, "period"),
            is_verified=_enum(Status, data, "is_verified"),
            doc_verifier=_bytes_from(data, "doc_verifier"),
            created_date=_nullable(NullTime, data, "created_date"),
            last_modified_date=_nullable(NullTime, data, "last_modified_date"),
        )


@dataclass
class TableTest:
    """A simple record kept in the test table."""

    id: int = 0
    name: str = ""
    age: int = 0
    email: str = ""

    def validate(self):
        """Raise ValueError on a bad name, age or e-mail."""
        if not _is_letters(self.name):
            raise ValueError("Invalid test name")
        if not 0 <= self.age <= _MAX_AGE:
            raise ValueError("Invalid test age")
        if not _is_email(self.email):
            raise ValueError("Invalid test email")

    def to_dict(self):
        return {"id": self.id, "name": self.name, "age": self.age, "email": self.email}

    @classmethod
    def from_dict(cls, data):
        data = _mapping(cls, data)
        return cls(
            id=_int(data, "id"),
            name=_str(data, "name"),
            age=_int(data, "age"),
            email=_str(data, "email"),
        )


@dataclass
class TypeUniversity:
    """A category of university, such as public or private."""

    id: NullInt64 = field(default_factory=NullInt64)
    name: NullString = field(default_factory=NullString)
    description: NullString = field(default_factory=NullString)
    is_verified: Status = Status.UNVERIFIED
    doc_verifier: bytes | None = None
    created_date: NullTime = field(default_factory=NullTime)
    last_modified_date: NullTime = field(default_factory=NullTime)
    created_by: NullInt64 = field(default_factory=NullInt64)

    def validate(self):
        """Raise on an unknown status or a missing creator."""
        validate_status(self.is_verified)
        if self.created_by.is_null():
            raise NullValueNotAllowedError("CreatedBy")

    def to_dict(self):
        return {
            "id": _plain(self.id),
            "name": _plain(self.name),
            "description": _plain(self.description),
            "is_verified": int(self.is_verified),
            "doc_verifier": _bytes_to(self.doc_verifier),
            "created_date": _plain(self.created_date),
            "last_modified_date": _plain(self.last_modified_date),
            "created_by": _plain(self.created_by),
        }

    @classmethod
    def from_dict(cls, data):
        data = _mapping(cls, data)
        return cls(
            id=_nullable(NullInt64, data, "id"),
            name=_nullable(NullString, data, "name"),
            description=_nullable(NullString, data, "description"),
            is_verified=_enum(Status, data, "is_verified"),
            doc_verifier=_bytes_from(data, "doc_verifier"),
            created_date=_nullable(NullTime, data, "created_date"),
            last_modified_date=_nullable(NullTime, data, "last_modified_date"),
            created_by=_nullable(NullInt64, data, "created_by"),
        )