from datetime import datetime, timezone

import pytest

from univeasier.enums import Gender, PersonType, Status
from univeasier.errors import (
    InvalidEmailError,
    InvalidGenderIndexError,
    InvalidLastNameError,
    InvalidNameError,
    InvalidPersonIndexError,
    InvalidStatusIndexError,
    NullValueNotAllowedError,
    OverflowError_,
    TypeConversionError,
)
from univeasier.models import Interest, Person, TableTest, TypeUniversity
from univeasier.nullable import NullInt32, NullInt64, NullString, NullTime

STAMP = datetime(2019, 11, 1, 15, 4, 5, tzinfo=timezone.utc)


# --- Interest ---------------------------------------------------------------


@pytest.mark.parametrize(
    "tag, created_by",
    [
        (NullString("intership"), NullInt64(1)),
        (NullString("a" * 99), NullInt64(1)),
        (NullString("a" * 100), NullInt64(1)),
    ],
)
def test_interest_valid(tag, created_by):
    model = Interest(tag=tag, created_by=created_by)
    assert model.validate() is None
    assert Interest.from_dict(model.to_dict()) == model


@pytest.mark.parametrize(
    "tag, created_by, error",
    [
        (NullString("intership"), NullInt64(), NullValueNotAllowedError),
        (NullString(), NullInt64(1), InvalidNameError),
        (NullString(""), NullInt64(1), InvalidNameError),
        (NullString("a" * 101), NullInt64(1), InvalidNameError),
    ],
)
def test_interest_invalid(tag, created_by, error):
    with pytest.raises(error):
        Interest(tag=tag, created_by=created_by).validate()


def test_interest_null_creator_message():
    with pytest.raises(NullValueNotAllowedError) as info:
        Interest(tag=NullString("x")).validate()
    assert str(info.value) == 'The "CreatedBy" attribute can not be NULL'


def test_interest_dict_round_trip_with_dates():
    model = Interest(
        id=NullInt64(7),
        tag=NullString("robotics"),
        is_skill=True,
        created_date=NullTime(STAMP),
        last_modified_date=NullTime(),
        created_by=NullInt64(3),
    )
    data = model.to_dict()
    assert data == {
        "id": 7,
        "tag": "robotics",
        "is_skill": True,
        "created_date": "2019-11-01T15:04:05Z",
        "last_modified_date": None,
        "created_by": 3,
    }
    assert Interest.from_dict(data) == model


def test_interest_from_dict_overflow():
    with pytest.raises(OverflowError_):
        Interest.from_dict({"created_by": 2**63})


def test_interest_from_dict_wrong_type():
    with pytest.raises(TypeConversionError):
        Interest.from_dict({"tag": 10})


def test_interest_from_dict_rejects_non_mapping():
    with pytest.raises(TypeConversionError):
        Interest.from_dict([1, 2])


# --- Person -----------------------------------------------------------------


def _person(first, last, email, gender, kind, status):
    return Person(
        first_name=NullString(first),
        last_name=NullString(last),
        email=NullString(email),
        gender=gender,
        type=kind,
        is_verified=status,
    )


@pytest.mark.parametrize(
    "first, last, email, gender, kind, status",
    [
        ("juan gabriel", "quispe soto", "juan@example.com",
         Gender.MALE, PersonType.STUDENT, Status.UNVERIFIED),
        ("juana", "ramirez", "juana.r@example.com",
         Gender.FEMALE, PersonType.VISITOR, Status.PENDING),
    ],
)
def test_person_valid(first, last, email, gender, kind, status):
    model = _person(first, last, email, gender, kind, status)
    assert model.validate() is None
    assert Person.from_dict(model.to_dict()) == model


@pytest.mark.parametrize(
    "first, last, email, gender, kind, status, error",
    [
        ("gabriel10", "quispe soto", "gabriel@example.com",
         Gender.MALE, PersonType.GRADUATED, Status.PENDING, InvalidNameError),
        ("pepe", "ramirez 123", "pepe@example.com",
         Gender.MALE, PersonType.GRADUATED, Status.PENDING, InvalidLastNameError),
        ("pepe", "diaz", "a@pe-.12edu",
         Gender.MALE, PersonType.GRADUATED, Status.PENDING, InvalidEmailError),
        ("luis", "quispe", "luis@example.com",
         Gender.UNKNOWN, PersonType.VISITOR, Status.PENDING, InvalidGenderIndexError),
        ("juan dany paul", "quispe lana", "dany@example.com",
         Gender.FEMALE, PersonType.UNKNOWN, Status.VERIFIED, InvalidPersonIndexError),
        ("gabriel soto", "castro", "soto@example.com",
         Gender.FEMALE, PersonType.UNKNOWN, Status.UNKNOWN, InvalidPersonIndexError),
    ],
)
def test_person_invalid(first, last, email, gender, kind, status, error):
    with pytest.raises(error):
        _person(first, last, email, gender, kind, status).validate()


def test_person_unknown_status():
    model = _person("ana", "rojas", "ana@example.com",
                    Gender.FEMALE, PersonType.STUDENT, Status.UNKNOWN)
    with pytest.raises(InvalidStatusIndexError):
        model.validate()


def test_person_null_first_name_is_invalid():
    model = Person(last_name=NullString("rojas"), email=NullString("ana@example.com"))
    with pytest.raises(InvalidNameError):
        model.validate()


def test_person_round_trip_with_bytes_and_numbers():
    model = Person(
        id=NullInt64(5),
        code=NullString("A-1"),
        first_name=NullString("ana"),
        last_name=NullString("rojas"),
        email=NullString("ana@example.com"),
        avatar=b"\x00\x01\xff",
        ethnic=NullInt32(2),
        birth_date=NullTime(STAMP),
        admission_year=NullInt32(2015),
        period=NullInt32(1),
        is_verified=Status.VERIFIED,
    )
    data = model.to_dict()
    assert data["avatar"] == "AAH/"
    assert data["is_verified"] == 2
    assert data["birth_date"] == "2019-11-01T15:04:05Z"
    assert Person.from_dict(data) == model


def test_person_from_dict_keeps_unknown_enum_value():
    model = Person.from_dict({"gender": 5})
    assert model.gender == 5
    with pytest.raises(InvalidNameError):
        model.validate()


def test_person_from_dict_enum_overflow():
    with pytest.raises(OverflowError_):
        Person.from_dict({"type": 300})


def test_person_from_dict_wrong_type():
    with pytest.raises(TypeConversionError):
        Person.from_dict({"first_name": 5})


# --- TableTest --------------------------------------------------------------


@pytest.mark.parametrize(
    "name, age, email",
    [
        ("juan gabriel jose", 27, "juan@example.com"),
        ("pepe", 28, "pepe@example.com"),
    ],
)
def test_table_test_valid(name, age, email):
    model = TableTest(name=name, age=age, email=email)
    assert model.validate() is None
    assert TableTest.from_dict(model.to_dict()) == model


@pytest.mark.parametrize(
    "name, age, email, message",
    [
        ("", 12, "empty@example.com", "Invalid test name"),
        ("luis10", 16, "luis@example.com", "Invalid test name"),
        ("juan", -1, "juan@example.com", "Invalid test age"),
        ("gabriel", 18, "gabriel@example.com1", "Invalid test email"),
    ],
)
def test_table_test_invalid(name, age, email, message):
    with pytest.raises(ValueError) as info:
        TableTest(name=name, age=age, email=email).validate()
    assert str(info.value) == message


def test_table_test_age_upper_bound():
    with pytest.raises(ValueError, match="Invalid test age"):
        TableTest(name="ana", age=201, email="ana@example.com").validate()


def test_table_test_from_dict():
    model = TableTest.from_dict(
        {"id": 4, "name": "ana", "age": 20, "email": "ana@example.com"}
    )
    assert model == TableTest(id=4, name="ana", age=20, email="ana@example.com")


def test_table_test_from_dict_wrong_type():
    with pytest.raises(TypeConversionError):
        TableTest.from_dict({"age": "20"})


# --- TypeUniversity ---------------------------------------------------------


@pytest.mark.parametrize(
    "name, description, status, created_by",
    [
        ("public", "public universities", Status.UNVERIFIED, NullInt64(1)),
        ("private", "private universities", Status.PENDING, NullInt64(2)),
    ],
)
def test_type_university_valid(name, description, status, created_by):
    model = TypeUniversity(
        name=NullString(name),
        description=NullString(description),
        is_verified=status,
        created_by=created_by,
    )
    assert model.validate() is None
    assert TypeUniversity.from_dict(model.to_dict()) == model


@pytest.mark.parametrize(
    "name, description, status, created_by, error",
    [
        ("state", "it is an invalid example", Status.UNKNOWN, NullInt64(1),
         InvalidStatusIndexError),
        ("private", "private universities", Status.VERIFIED, NullInt64(),
         NullValueNotAllowedError),
    ],
)
def test_type_university_invalid(name, description, status, created_by, error):
    model = TypeUniversity(
        name=NullString(name),
        description=NullString(description),
        is_verified=status,
        created_by=created_by,
    )
    with pytest.raises(error):
        model.validate()


def test_type_university_to_dict():
    model = TypeUniversity(
        id=NullInt64(1),
        name=NullString("public"),
        doc_verifier=b"doc",
        created_by=NullInt64(9),
    )
    assert model.to_dict() == {
        "id": 1,
        "name": "public",
        "description": None,
        "is_verified": 0,
        "doc_verifier": "ZG9j",
        "created_date": None,
        "last_modified_date": None,
        "created_by": 9,
    }


def test_type_university_from_dict_bad_bytes():
    with pytest.raises(TypeConversionError):
        TypeUniversity.from_dict({"doc_verifier": 12})