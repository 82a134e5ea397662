"""
Baseline technology popularity, 0-100. Roughly how often each technology
shows up in starter projects. Not a measurement, just a starting point
that external project data is blended into.
"""

from types import MappingProxyType

BASELINE_POPULARITY = MappingProxyType({
    # Frontend
    "JavaScript": 95,
    "TypeScript": 78,
    "React": 85,
    "HTML/CSS": 92,
    "Tailwind CSS": 68,
    "Vue.js": 45,
    "Angular": 35,
    "Svelte": 25,
    "Bootstrap": 42,
    "Sass/SCSS": 38,

    # Backend
    "Node.js": 82,
    "Python": 75,
    "Express.js": 65,
    "Django": 35,
    "Flask": 28,
    "Java": 45,
    "Spring Boot": 32,
    "C#": 38,
    ".NET": 35,
    "PHP": 48,
    "Laravel": 25,
    "Ruby": 18,
    "Rails": 15,
    "Go": 22,
    "Rust": 12,

    # Database
    "MongoDB": 58,
    "PostgreSQL": 52,
    "MySQL": 48,
    "Redis": 35,
    "SQLite": 42,
    "Firebase": 55,
    "Supabase": 38,
    "DynamoDB": 18,

    # Mobile
    "React Native": 45,
    "Flutter": 38,
    "Swift": 25,
    "Kotlin": 22,
    "Expo": 35,
    "Ionic": 15,
    "Xamarin": 8,

    # DevOps & cloud
    "Docker": 55,
    "Kubernetes": 25,
    "AWS": 48,
    "Azure": 28,
    "Google Cloud": 32,
    "Vercel": 62,
    "Netlify": 58,
    "GitHub Actions": 45,
    "Jenkins": 22,

    # AI & ML
    "TensorFlow": 28,
    "PyTorch": 25,
    "Scikit-learn": 32,
    "OpenAI API": 42,
    "Hugging Face": 18,
    "Pandas": 38,
    "NumPy": 35,

    # Other
    "GraphQL": 35,
    "REST APIs": 88,
    "WebSockets": 25,
    "Electron": 18,
    "Unity": 15,
    "Blockchain": 12,
    "Web3": 8,
})
