from datetime import datetime, timedelta, timezone

import pytest

from portfolio_site.base import AttachmentKind, AttachmentType, Base, HtmlElement, ObjRef
from portfolio_site.entities import (
    Asset,
    Blog,
    Company,
    CompanyRepresentative,
    CompanyType,
    Designing,
    Developing,
    Education,
    Individual,
    Job,
    Module,
    Planning,
    Project,
    Released,
    Skill,
    SoftSkill,
    Technology,
    Testimonial,
    Tool,
    Updating,
)

UTC_START = datetime(2020, 9, 1, tzinfo=timezone.utc)


def make_base(ident="id-1", active=True):
    return Base(id=ident, insert_date_time=UTC_START, created_by="admin", is_active=active)


def make_company():
    return Company(base=make_base("c"), name="Acme", company_type=CompanyType.CORPORATION)


def test_skill_proficiency_bounds_accept_edges():
    low = Skill(base=make_base(), name="Rust", category=Technology("rust", "1.80"), proficiency=0)
    high = Skill(base=make_base(), name="Rust", category=Technology("rust", "1.80"), proficiency=255)
    assert (low.proficiency, high.proficiency) == (0, 255)


@pytest.mark.parametrize("value", [-1, 256])
def test_skill_proficiency_out_of_range(value):
    with pytest.raises(ValueError):
        Skill(base=make_base(), name="x", category=SoftSkill("talk"), proficiency=value)


def test_skill_proficiency_must_be_int():
    with pytest.raises(TypeError):
        Skill(base=make_base(), name="x", category=SoftSkill("talk"), proficiency=True)


def test_skill_categories_compare_by_value():
    assert Tool("git") == Tool("git", None)
    assert Tool("git", "2.4") != Tool("git")
    assert Technology("py", "3") == Technology("py", "3")


def test_company_defaults():
    company = make_company()
    assert company.location is None
    assert company.industry is None
    assert company.attachment is None


def test_asset_delegates_to_base():
    asset = Asset(base=make_base("asset-7", active=False), title="t")
    assert asset.id == "asset-7"
    assert asset.is_active is False


def test_asset_related_assets_nest():
    inner = Asset(base=make_base("inner"), title="inner")
    outer = Asset(base=make_base("outer"), title="outer", related_assets=[inner])
    assert outer.related_assets[0].id == "inner"


def test_blog_fields_and_defaults():
    content = [HtmlElement("<p>x</p>")]
    blog = Blog(base=make_base(), title="Post", slug="post", content=content,
                attachment=ObjRef("urn:a"), attachment_type=AttachmentType(AttachmentKind.IMAGE))
    assert blog.content == content
    assert blog.is_featured is False
    assert blog.attachment_type.kind is AttachmentKind.IMAGE
    assert blog.tags == []


def test_default_lists_are_not_shared():
    first = Blog(base=make_base(), title="a", slug="a")
    second = Blog(base=make_base(), title="b", slug="b")
    first.tags.append("x")
    assert second.tags == []


def test_education_normalises_dates():
    start = datetime(2019, 1, 1, 9, tzinfo=timezone(timedelta(hours=1)))
    end = datetime(2022, 6, 30, 9, tzinfo=timezone(timedelta(hours=-4)))
    module = Module(base=make_base("m"), title="Algorithms", start_date=start, code="CS101")
    education = Education(base=make_base(), title="BSc", start_date=start, end_date=end,
                          institution=make_company(), degree="BSc",
                          field_of_study="CS", modules=[module], grade="First",
                          is_passing=True)
    assert education.start_date == start
    assert education.start_date.utcoffset() == timedelta(0)
    assert education.end_date == end
    assert education.end_date.utcoffset() == timedelta(0)
    assert education.modules[0].code == "CS101"
    assert education.is_passing is True


def test_dated_rejects_naive_start():
    with pytest.raises(ValueError):
        Job(base=make_base(), title="Dev", start_date=datetime(2020, 1, 1),
            company=make_company())


def test_job_end_date_defaults_to_none():
    job = Job(base=make_base(), title="Dev", start_date=UTC_START, company=make_company(),
              responsibilities=["ship"])
    assert job.end_date is None
    assert job.responsibilities == ["ship"]


def test_project_status_variants():
    assert Planning() == Planning()
    assert Designing() != Developing()
    assert Released("1.0") == Released("1.0")
    update = Updating("1.0", "2.0")
    assert (update.current_version, update.target_version) == ("1.0", "2.0")


def test_project_holds_status():
    project = Project(base=make_base(), title="Site", start_date=UTC_START,
                      status=Released("0.1.0"), github_url="https://example.com/repo")
    assert project.status == Released("0.1.0")
    assert project.deployment_url is None
    assert project.is_featured is False


def test_testimonial_authors():
    picture = ObjRef("urn:pic")
    individual = Individual("Ann", picture, {"email": "ann@example.com"})
    rep = CompanyRepresentative("Bob", picture, make_company(), "CTO")
    assert individual.contact_information["email"] == "ann@example.com"
    assert rep.company.name == "Acme"
    assert rep.contact_information == {}


def test_testimonial_date_normalised_and_naive_rejected():
    date = datetime(2023, 3, 3, 10, tzinfo=timezone(timedelta(hours=5)))
    author = Individual("Ann", ObjRef("urn:pic"))
    testimonial = Testimonial(base=make_base(), title="t", author=author, date=date,
                              content=["great"])
    assert testimonial.date == date
    assert testimonial.date.utcoffset() == timedelta(0)
    with pytest.raises(ValueError):
        Testimonial(base=make_base(), title="t", author=author, date=datetime(2023, 3, 3))