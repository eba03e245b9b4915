import pytest

from portfolio.content import PORTFOLIO, Project, tag_color_scheme


@pytest.mark.parametrize(
    "tag, scheme",
    [
        ("React", "blue"),
        ("next.js", "blue"),
        ("TypeScript", "blue"),
        ("Node.js", "green"),
        ("PostgreSQL", "green"),
        ("MongoDB", "purple"),
        ("D3.js", "purple"),
        ("Django", "yellow"),
        ("Firebase", "red"),
        ("Rust", "gray"),
    ],
)
def test_tag_color_scheme(tag, scheme):
    assert tag_color_scheme(tag) == scheme


def test_projects_satisfy_schema():
    ids = [project.id for project in PORTFOLIO.projects]

    assert len(ids) == len(set(ids)) == 3
    for project in PORTFOLIO.projects:
        assert project.title and project.description and project.tags
        assert project.background.startswith("linear-gradient(")


def test_project_validates_from_plain_data():
    project = Project.model_validate(
        {
            "id": "4",
            "title": "Widget",
            "description": "Does things.",
            "tags": ["Python"],
            "gradient": ["#000000", "#ffffff"],
        }
    )

    assert project.background == "linear-gradient(to right, #000000, #ffffff)"
    assert project.live_link == "#"


def test_education_summary_includes_grade():
    entry = PORTFOLIO.education[0]

    assert entry.summary == "2023 - Present | GPA: 8.28/10.0"


def test_skill_groups():
    names = [group.name for group in PORTFOLIO.skill_groups]

    assert names == ["Languages", "Frontend", "Backend", "Tools"]
    assert "Python" in PORTFOLIO.skill_groups[0].skills
