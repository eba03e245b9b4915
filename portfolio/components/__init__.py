from .about import about
from .contact import contact
from .hero import hero
from .projects import projects
from .resume import resume
from .skills import skills

__all__ = ["about", "contact", "hero", "projects", "resume", "skills"]
