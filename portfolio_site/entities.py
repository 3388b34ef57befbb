"""Portfolio entities: skills, companies, and the assets built on them."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional, Union

from portfolio_site.base import AttachmentType, Base, Element, ObjRef, to_utc

_U8_MAX = 255


@dataclass(kw_only=True)
class _Record:
    def __post_init__(self) -> None:
        pass


@dataclass(kw_only=True)
class _Dated(_Record):
    start_date: datetime
    end_date: Optional[datetime] = None

    def __post_init__(self) -> None:
        self.start_date = to_utc(self.start_date)
        if self.end_date is not None:
            self.end_date = to_utc(self.end_date)
        super().__post_init__()


@dataclass(kw_only=True)
class _Described(_Record):
    short_description: str = ""
    long_description: list[Element] = field(default_factory=list)


@dataclass(kw_only=True)
class _Featured(_Record):
    is_featured: bool = False


@dataclass(kw_only=True)
class _Attached(_Record):
    attachment: Optional[ObjRef] = None
    attachment_type: Optional[AttachmentType] = None


@dataclass(kw_only=True)
class _Achieving(_Record):
    achievements: list[str] = field(default_factory=list)


@dataclass(kw_only=True)
class _Graded(_Record):
    grade: str = ""
    is_passing: bool = False


@dataclass(frozen=True)
class SoftSkill:
    skill: str


@dataclass(frozen=True)
class Technology:
    technology_name: str
    version: str


@dataclass(frozen=True)
class Tool:
    tool_name: str
    version: Optional[str] = None


SkillCategory = Union[SoftSkill, Technology, Tool]


@dataclass(kw_only=True)
class Skill(_Record):
    """A skill with an optional proficiency from 0 to 255."""

    base: Base
    name: str
    category: SkillCategory
    proficiency: Optional[int] = None
    description: Optional[str] = None

    def __post_init__(self) -> None:
        if self.proficiency is not None:
            if isinstance(self.proficiency, bool) or not isinstance(self.proficiency, int):
                raise TypeError("proficiency must be an integer")
            if not 0 <= self.proficiency <= _U8_MAX:
                raise ValueError(f"proficiency must be between 0 and {_U8_MAX}")
        super().__post_init__()


class CompanyType(enum.Enum):
    EDUCATIONAL_INSTITUTION = "educational_institution"
    CORPORATION = "corporation"
    STARTUP = "startup"
    GOVERNMENT = "government"
    NON_PROFIT = "non_profit"
    CLIENT = "client"


@dataclass(kw_only=True)
class Company(_Attached):
    base: Base
    name: str
    company_type: CompanyType
    location: Optional[str] = None
    industry: Optional[str] = None


@dataclass(kw_only=True)
class Asset(_Record):
    """A titled portfolio item, linked to skills and other assets."""

    base: Base
    title: str
    skills: list[Skill] = field(default_factory=list)
    related_assets: list[Asset] = field(default_factory=list)

    @property
    def id(self) -> str:
        return self.base.id

    @property
    def is_active(self) -> bool:
        return self.base.is_active


@dataclass(kw_only=True)
class Blog(_Featured, _Described, _Attached, Asset):
    slug: str
    tags: list[str] = field(default_factory=list)
    content: list[Element] = field(default_factory=list)
    is_draft: bool = True


@dataclass(kw_only=True)
class Module(_Graded, _Described, _Dated, Asset):
    code: Optional[str] = None


@dataclass(kw_only=True)
class Education(_Graded, _Attached, _Achieving, _Described, _Dated, Asset):
    institution: Company
    degree: str
    field_of_study: str
    modules: list[Module] = field(default_factory=list)


@dataclass(kw_only=True)
class Job(_Attached, _Achieving, _Described, _Dated, Asset):
    company: Company
    responsibilities: list[str] = field(default_factory=list)


@dataclass(frozen=True)
class Planning:
    pass


@dataclass(frozen=True)
class Designing:
    pass


@dataclass(frozen=True)
class Developing:
    pass


@dataclass(frozen=True)
class Released:
    version: str


@dataclass(frozen=True)
class Updating:
    current_version: str
    target_version: str


ProjectStatus = Union[Planning, Designing, Developing, Released, Updating]


@dataclass(kw_only=True)
class Project(_Featured, _Dated, _Described, _Attached, Asset):
    status: ProjectStatus
    challenges: list[str] = field(default_factory=list)
    outcomes: list[str] = field(default_factory=list)
    category: Optional[str] = None
    github_url: Optional[str] = None
    deployment_url: Optional[str] = None


@dataclass
class Individual:
    name: str
    picture: ObjRef
    contact_information: dict[str, str] = field(default_factory=dict)


@dataclass
class CompanyRepresentative:
    name: str
    picture: ObjRef
    company: Company
    role: str
    contact_information: dict[str, str] = field(default_factory=dict)


TestimonialAuthor = Union[Individual, CompanyRepresentative]


@dataclass(kw_only=True)
class Testimonial(Asset):
    author: TestimonialAuthor
    date: datetime
    content: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        self.date = to_utc(self.date)
        super().__post_init__()