"""Records of the university domain as they are written to JSON."""

import base64
from dataclasses import dataclass, field, fields, is_dataclass
from datetime import datetime, timezone

from .utils import format_time


def _zero_time():
    return datetime(1, 1, 1, tzinfo=timezone.utc)


def _time():
    return field(default_factory=_zero_time)


def _key(name, default=None):
    """A field whose JSON key differs from its attribute name."""
    if callable(default):
        return field(default_factory=default, metadata={"json": name})
    return field(default=default, metadata={"json": name})


@dataclass
class Album:
    """A named collection of photos."""

    id: int = 0
    name: str = ""
    description: str = ""
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    created_by: int = 0


@dataclass
class Award:
    """A distinction obtained at an event."""

    id: int = 0
    year: str = ""
    period: int = 0
    description: str = ""
    event: str = ""
    place: int = 0
    is_verified: int = 0
    doc_verifier: bytes | None = None
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    career_id: int = 0
    album_id: int = 0
    created_by: int = 0


@dataclass
class Career:
    """A degree programme taught by a faculty."""

    id: int = 0
    acronym: str = ""
    name: str = ""
    description: str = ""
    logo: bytes | None = None
    is_verified: int = 0
    doc_verifier: bytes | None = None
    reference: str = ""
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    faculty_id: int = 0
    album_id: int = 0
    created_by: int = 0


@dataclass
class CareerPerson:
    """The link between a person and a career."""

    career_id: int = 0
    person_id: int = 0
    is_verified: int = 0
    doc_verifier: bytes | None = None
    created_date: datetime = _time()
    last_modified_date: datetime = _time()


@dataclass
class Comment:
    """A reply written under a story."""

    id: int = 0
    content: str = ""
    likes: str = ""
    dislikes: int = 0
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    story_id: int = 0
    created_by: int = 0


@dataclass
class Contribution:
    """Points a person earned for a contribution."""

    id: int = 0
    score: int = 0
    description: str = ""
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    person_id: int = 0


@dataclass
class CoursesConnection:
    """A prerequisite relation between two courses of a career."""

    id: int = 0
    year: int = 0
    period: int = 0
    threshold_credits: int = _key("threshold _credits", 0)
    child_course: int = 0
    parent_course: int = 0
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    career_id: int = 0
    created_by: int = 0


@dataclass
class Course:
    """A course of a career's curriculum."""

    id: int = 0
    code: str = ""
    name: str = ""
    description: str = ""
    credits: int = 0
    batch: int = 0
    year: int = 0
    period: int = 0
    semester: int = 0
    total_hours: int = 0
    is_verified: int = 0
    doc_verifier: bytes | None = None
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    type_course_id: int = 0
    career_id: int = _key("carrera_id", 0)
    professor_id: int = 0
    created_by: int = 0


@dataclass
class Enrollment:
    """A person's enrollment in a course, with its grade."""

    id: int = 0
    status: int = 0
    grade: float = 0.0
    is_verified: int = 0
    doc_verifier: bytes | None = None
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    person_id: int = 0
    course_id: int = 0


@dataclass
class Faculty:
    """A faculty of a university."""

    id: int = 0
    acronym: str = ""
    name: str = ""
    description: str = ""
    logo: bytes | None = None
    is_verified: int = 0
    doc_verifier: bytes | None = None
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    university_id: int = 0
    created_by: int = 0


@dataclass
class Photo:
    """A picture kept in an album."""

    id: int = 0
    pic: bytes | None = None
    description: str = ""
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    album_id: int = 0
    created_by: int = 0


@dataclass
class Schedule:
    """A lesson slot of a course."""

    id: int = 0
    start: datetime = _time()
    end: datetime = _time()
    day: int = 0
    room: str = ""
    type_lesson: int = 0
    is_verified: int = 0
    doc_verifier: bytes | None = None
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    course_id: int = 0
    created_by: int = 0


@dataclass
class Story:
    """A post published about a career."""

    id: int = 0
    title: str = ""
    body: str = ""
    recommended: int = _key("recomended", 0)
    unrecommended: int = _key("unrecomended", 0)
    views: int = 0
    is_verified: int = 0
    doc_verifier: bytes | None = None
    allow_comments: bool = False
    layer: int = 0
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    created_by: int = 0
    career_id: int = 0


@dataclass
class TagContainer:
    """A tag attached to a career, with agreement counts."""

    id: int = 0
    tag: str = ""
    agree: int = 0
    disagree: int = 0
    reference: str = ""
    type: int = 0
    layer: int = 0
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    is_verified: int = 0
    doc_verifier: bytes | None = None
    career_id: int = 0
    created_by: int = 0


@dataclass
class TypeCourse:
    """A category of course within a career."""

    id: int = 0
    acronym: str = ""
    name: str = ""
    description: str = ""
    is_verified: int = 0
    doc_verifier: bytes | None = None
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    required_credits: int = 0
    career_id: int = 0
    created_by: int = 0


@dataclass
class University:
    """A university with its ranks and location."""

    id: int = 0
    local_rank: int = 0
    global_rank: int = 0
    acronym: str = ""
    name: str = ""
    region: str = ""
    description: str = ""
    latitude: float = 0.0
    longitude: float = 0.0
    logo: bytes | None = None
    is_verified: int = 0
    doc_verifier: bytes | None = None
    reference: str = ""
    type_university_id: int = 0
    album_id: int = 0
    created_date: datetime = _time()
    last_modified_date: datetime = _time()
    created_by: int = 0


def _encode(value):
    if isinstance(value, (bytes, bytearray)):
        return base64.b64encode(bytes(value)).decode("ascii")
    if isinstance(value, datetime):
        return format_time(value)
    return value


def to_json_dict(entity):
    """Dictionary of an entity keyed by its JSON names, ready for json.dumps.

    Bytes become base64 text and datetimes RFC 3339 text.
    """
    if not is_dataclass(entity) or isinstance(entity, type):
        raise TypeError(f"not an entity: {type(entity).__name__}")
    return {
        item.metadata.get("json", item.name): _encode(getattr(entity, item.name))
        for item in fields(entity)
    }