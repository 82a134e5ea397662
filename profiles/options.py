"""
What a profile can be built from: the selectable technologies per
category, interests, goals, and developer types.
"""

from types import MappingProxyType

from models import DeveloperType, TechCategory

TECH_CATEGORIES = MappingProxyType({
    TechCategory.FRONTEND: (
        "JavaScript", "TypeScript", "React", "Vue.js", "Angular", "Svelte",
        "HTML/CSS", "Tailwind CSS", "Bootstrap", "Sass/SCSS",
    ),
    TechCategory.BACKEND: (
        "Node.js", "Python", "Express.js", "Django", "Flask", "Java", "Spring Boot",
        "C#", ".NET", "PHP", "Laravel", "Ruby", "Rails", "Go", "Rust",
    ),
    TechCategory.DATABASE: (
        "MongoDB", "PostgreSQL", "MySQL", "Redis", "SQLite", "Firebase",
        "Supabase", "DynamoDB",
    ),
    TechCategory.MOBILE: (
        "React Native", "Flutter", "Swift", "Kotlin", "Expo", "Ionic", "Xamarin",
    ),
    TechCategory.DEVOPS: (
        "Docker", "Kubernetes", "AWS", "Azure", "Google Cloud", "Vercel",
        "Netlify", "GitHub Actions", "Jenkins",
    ),
    TechCategory.AI_ML: (
        "TensorFlow", "PyTorch", "Scikit-learn", "OpenAI API", "Hugging Face",
        "Pandas", "NumPy",
    ),
    TechCategory.OTHER: (
        "GraphQL", "REST APIs", "WebSockets", "Electron", "Unity", "Blockchain", "Web3",
    ),
})

INTEREST_OPTIONS: tuple[str, ...] = (
    "Web Development", "Mobile Apps", "Game Development", "AI/ML",
    "Data Science", "DevOps", "Cybersecurity", "Blockchain",
    "IoT", "AR/VR", "Desktop Apps", "E-commerce",
    "Social Media", "Productivity Tools", "Education",
    "Healthcare", "Finance", "Environment",
)

GOAL_OPTIONS: tuple[str, ...] = (
    "Build Portfolio", "Learn New Skills", "Get First Job",
    "Change Career", "Freelance Projects", "Startup Ideas",
    "Open Source", "Hackathons", "Side Income",
    "Personal Projects", "Team Collaboration", "Leadership",
)

DEVELOPER_TYPES = MappingProxyType({
    DeveloperType.SELF_TAUGHT: "Learning on your own, building skills independently",
    DeveloperType.BOOTCAMP: "Enrolled in a coding bootcamp or course",
    DeveloperType.PROFESSIONAL: "Working in the tech industry",
    DeveloperType.STUDENT: "Studying CS or related field",
})

SOCIAL_PROVIDERS: tuple[str, ...] = ("github", "gmail", "linkedin", "discord")


def category_for(tech: str) -> TechCategory:
    """Category a technology is listed under. Unlisted ones are OTHER."""
    for category, techs in TECH_CATEGORIES.items():
        if tech in techs:
            return category
    return TechCategory.OTHER


def options_summary() -> dict:
    return {
        "technologies": {c.value: list(t) for c, t in TECH_CATEGORIES.items()},
        "interests": list(INTEREST_OPTIONS),
        "goals": list(GOAL_OPTIONS),
        "developerTypes": {d.value: desc for d, desc in DEVELOPER_TYPES.items()},
        "socialProviders": list(SOCIAL_PROVIDERS),
    }
