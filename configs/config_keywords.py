# Curated technical topics accepted when the AI classifier is unreachable.
# Entries are lowercase, lookups are exact after trimming and lowercasing.

CS_IT_PACK = frozenset({
    "java", "python", "c", "c++", "c#", "javascript", "typescript", "r", "ruby", "go", "kotlin", "swift", "php", "scala",
    "html", "css", "react", "angular", "vue", "node.js", "express", "next.js", "nuxt.js", "bootstrap", "tailwind css", "svelte",
    "spring", "spring boot", "hibernate", "sql", "mysql", "postgresql", "mongodb", "dbms",
    "data structures", "algorithms", "operating systems", "networking", "tcp/ip", "http", "dns",
    "microservices", "rest api", "backend development", "frontend development", "fullstack development",
    "mern stack", "mevn", "mean", "django", "flask", "laravel", "dotnet", "java backend dev", "java fullstack",
    "spring microservices", "graphql", "apollo", "java backend", "python data science", "docker & kubernetes",
    "react hooks",
})

CLOUD_DEVOPS_PACK = frozenset({
    "cloud", "aws", "azure", "gcp", "docker", "kubernetes", "ci/cd", "jenkins", "git", "github", "gitlab", "cybersecurity",
    "encryption", "authentication", "authorization", "devops", "terraform", "ansible", "vault", "helm", "prometheus", "grafana",
})

AI_DS_PACK = frozenset({
    "machine learning", "deep learning", "neural networks", "reinforcement learning", "supervised learning", "unsupervised learning",
    "data science", "big data", "hadoop", "spark", "pandas", "numpy", "scikit-learn", "tensorflow", "keras", "pytorch", "nlp",
    "computer vision", "opencv", "image processing", "text mining", "chatgpt", "transformers", "bert", "gpt", "llms",
    "stable diffusion", "cv", "ai", "artificial intelligence", "predictive modeling",
})

GENERAL_PACK = frozenset({
    "engineering mathematics", "linear algebra", "calculus", "probability", "statistics", "reasoning", "logical puzzles",
    "communication skills", "hr questions", "physics", "mechanics", "basic electronics", "basic electrical",
})

ELECTRICAL_PACK = frozenset({
    "circuits", "analog electronics", "digital electronics", "microcontrollers", "embedded systems",
    "power systems", "control systems", "signal processing", "electronics devices", "instrumentation",
})

MECHANICAL_PACK = frozenset({
    "thermodynamics", "fluid mechanics", "mechanics of materials", "manufacturing processes",
    "cad", "cam", "robotics", "automation", "dynamics", "kinematics", "heat transfer",
})

CIVIL_PACK = frozenset({
    "structural analysis", "concrete technology", "soil mechanics", "transportation engineering",
    "water resources", "hydraulics", "surveying", "environmental engineering", "construction materials",
    "construction management",
})

CHEMICAL_PACK = frozenset({
    "process engineering", "chemical reaction engineering", "thermodynamics chemical",
    "fluid mechanics chemical", "unit operations", "polymer", "material science", "chemical safety",
})

ECE_PACK = frozenset({
    "digital communication", "analog communication", "image processing",
    "microprocessors", "vlsi", "wireless communication", "embedded electronics", "optical communication",
})

AEROSPACE_PACK = frozenset({
    "aerodynamics", "flight mechanics", "propulsion systems", "aircraft structures", "avionics",
    "space systems", "control stability",
})

VALID_KEYWORDS = frozenset().union(
    CS_IT_PACK,
    CLOUD_DEVOPS_PACK,
    AI_DS_PACK,
    GENERAL_PACK,
    ELECTRICAL_PACK,
    MECHANICAL_PACK,
    CIVIL_PACK,
    CHEMICAL_PACK,
    ECE_PACK,
    AEROSPACE_PACK,
)
