"""Literal site content.

Everything rendered on the page comes from ``PORTFOLIO``. The models double as
the schema any future data source has to satisfy.
"""

from __future__ import annotations

from typing import List, Optional, Tuple

from pydantic import BaseModel, Field


class Profile(BaseModel):
    name: str
    initials: str
    headline: str
    title: str
    tagline: str
    location: str
    photo: Optional[str] = None
    bio: List[str] = Field(default_factory=list)
    footer_tagline: str = ""
    copyright_year: int = 2023


class EducationEntry(BaseModel):
    school: str
    degree: str
    period: str
    grade: Optional[str] = None

    @property
    def summary(self) -> str:
        if self.grade:
            return f"{self.period} | GPA: {self.grade}"
        return self.period


class ExperienceEntry(BaseModel):
    role: str
    organisation: str
    period: str


class SkillGroup(BaseModel):
    name: str
    icon: str
    color_scheme: str
    skills: List[str]


class Project(BaseModel):
    id: str
    title: str
    description: str
    tags: List[str]
    live_link: str = "#"
    source_link: str = "#"
    icon: str = "code"
    gradient: Tuple[str, str] = ("#60a5fa", "#a855f7")

    @property
    def background(self) -> str:
        start, end = self.gradient
        return f"linear-gradient(to right, {start}, {end})"


class ContactChannel(BaseModel):
    label: str
    value: str
    href: str
    icon: str
    external: bool = True


class SocialLink(BaseModel):
    label: str
    href: str
    icon: str


class PortfolioContent(BaseModel):
    profile: Profile
    coursework: List[str]
    education: List[EducationEntry]
    experience: List[ExperienceEntry]
    skill_groups: List[SkillGroup]
    projects: List[Project]
    availability: str
    contact_channels: List[ContactChannel]
    social_links: List[SocialLink]
    resume_url: str = "#"
    all_projects_url: str = "#"


_TAG_COLORS = {
    "react": "blue",
    "next.js": "blue",
    "typescript": "blue",
    "node.js": "green",
    "postgresql": "green",
    "mongodb": "purple",
    "d3.js": "purple",
    "django": "yellow",
    "firebase": "red",
}


def tag_color_scheme(tag: str) -> str:
    return _TAG_COLORS.get(tag.strip().lower(), "gray")


PORTFOLIO = PortfolioContent(
    profile=Profile(
        name="Phulchand Kumar",
        initials="PK",
        headline="Computer Science Student & Web Developer",
        title="Computer Science Student",
        tagline=(
            "Passionate about creating beautiful, functional web applications "
            "with clean, efficient code."
        ),
        location="Chandigarh University, IND",
        bio=[
            "I'm a third-year Computer Science student at Chandigarh University "
            "with a passion for web development and design. I love turning "
            "complex problems into simple, beautiful, and intuitive solutions.",
            "When I'm not coding, you can find me hiking, reading sci-fi novels, "
            "or experimenting with new recipes in the kitchen.",
        ],
        footer_tagline="Web Developer & Computer Science Student",
    ),
    coursework=[
        "Web Development",
        "Data Structures",
        "Algorithms",
        "Database Systems",
        "Human-Computer Interaction",
    ],
    education=[
        EducationEntry(
            school="Chandigarh University",
            degree="B.E in Computer Science",
            period="2023 - Present",
            grade="8.28/10.0",
        ),
    ],
    experience=[
        ExperienceEntry(
            role="Web Development Intern",
            organisation="freelance.com",
            period="Summer 2025",
        ),
        ExperienceEntry(
            role="Teaching Assistant",
            organisation="Chandigarh University CS Department",
            period="2022 - Present",
        ),
    ],
    skill_groups=[
        SkillGroup(
            name="Languages",
            icon="code",
            color_scheme="blue",
            skills=["JavaScript", "Python", "Java", "C++", "HTML/CSS", "SQL"],
        ),
        SkillGroup(
            name="Frontend",
            icon="paintbrush",
            color_scheme="purple",
            skills=["React", "Next.js", "Tailwind CSS", "Bootstrap", "SASS"],
        ),
        SkillGroup(
            name="Backend",
            icon="server",
            color_scheme="green",
            skills=["Node.js", "Express", "Django", "MongoDB", "PostgreSQL"],
        ),
        SkillGroup(
            name="Tools",
            icon="wrench",
            color_scheme="yellow",
            skills=["Git", "VS Code", "Figma", "Postman", "Docker"],
        ),
    ],
    projects=[
        Project(
            id="1",
            title="StudyBuddy - Learning Platform",
            description=(
                "A full-stack web application for students to create and share "
                "study materials, featuring real-time collaboration."
            ),
            tags=["React", "Node.js", "MongoDB"],
            icon="laptop",
            gradient=("#60a5fa", "#a855f7"),
        ),
        Project(
            id="2",
            title="EcoMarket - Sustainable Shopping",
            description=(
                "An e-commerce platform for sustainable products with carbon "
                "footprint tracking and eco-friendly recommendations."
            ),
            tags=["Next.js", "Django", "PostgreSQL"],
            icon="shopping-cart",
            gradient=("#4ade80", "#3b82f6"),
        ),
        Project(
            id="3",
            title="StockVisualizer",
            description=(
                "Interactive stock market visualization tool with real-time data "
                "from financial APIs and customizable dashboards."
            ),
            tags=["TypeScript", "Firebase", "D3.js"],
            icon="chart-line",
            gradient=("#c084fc", "#ec4899"),
        ),
    ],
    availability=(
        "I'm currently looking for internship opportunities for Summer 2025. "
        "Feel free to reach out!"
    ),
    contact_channels=[
        ContactChannel(
            label="Email",
            value="phulchand1023@gmail.com",
            href="mailto:phulchand1023@gmail.com",
            icon="mail",
            external=False,
        ),
        ContactChannel(
            label="LinkedIn",
            value="linkedin.com/in/phulchand1023",
            href="https://linkedin.com/in/phulchand1023",
            icon="linkedin",
        ),
        ContactChannel(
            label="GitHub",
            value="github.com/phulchand1023",
            href="https://github.com/phulchand1023",
            icon="github",
        ),
    ],
    social_links=[
        SocialLink(label="GitHub", href="https://github.com/phulchand1023", icon="github"),
        SocialLink(
            label="LinkedIn", href="https://linkedin.com/in/phulchand1023", icon="linkedin"
        ),
        SocialLink(label="Twitter", href="#", icon="twitter"),
        SocialLink(label="Instagram", href="#", icon="instagram"),
    ],
)
