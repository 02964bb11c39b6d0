"""
Pattern tables used by the CV parser

Kept as plain data so the catalogs can be extended and tested without
touching the scanning loops in parser.py and badge_classifier.py.
"""
import re
from typing import Dict, List, Tuple

# Section headings, matched against the whole trimmed line
SECTION_PATTERNS: Dict[str, re.Pattern] = {
    "skills": re.compile(
        r"^(?:skills|technical skills|competencies|technologies|core competencies)[\s:]*$",
        re.IGNORECASE,
    ),
    "experience": re.compile(
        r"^(?:employment history|work history|employment|professional experience"
        r"|work experience|experience)[\s:]*$",
        re.IGNORECASE,
    ),
    "education": re.compile(
        r"^(?:education|academic|qualifications|degrees|certifications)[\s:]*$",
        re.IGNORECASE,
    ),
}

_SEP = r"\s*[-–—]\s*"
_END_MARKERS = r"present|current|now"

# Order matters: the patterns overlap and the first match wins
DATE_PATTERNS: List[re.Pattern] = [
    # "June 2022 - Present", "January 2020 - December 2021"
    re.compile(rf"(\w+\s+\d{{4}}){_SEP}(\w+\s+\d{{4}}|{_END_MARKERS})", re.IGNORECASE),
    # "01/2022 - 12/2023"
    re.compile(rf"(\d{{2}}/\d{{4}}){_SEP}(\d{{2}}/\d{{4}}|{_END_MARKERS})", re.IGNORECASE),
    # "2020 - 2023"
    re.compile(rf"(\d{{4}}){_SEP}(\d{{4}}|{_END_MARKERS})", re.IGNORECASE),
    # "J U N E 2 0 2 2 — P R E S E N T" (letter-spaced text extraction artifact)
    re.compile(
        r"([A-Z]\s*[A-Z]\s*[A-Z]+(?:\s*[A-Z])*\s+\d\s*\d\s*\d\s*\d)"
        + _SEP
        + r"([A-Z]\s*[A-Z]\s*[A-Z]+(?:\s*[A-Z])*\s+\d\s*\d\s*\d\s*\d"
        r"|P\s*R\s*E\s*S\s*E\s*N\s*T|C\s*U\s*R\s*R\s*E\s*N\s*T|N\s*O\s*W)",
        re.IGNORECASE,
    ),
]

CURRENT_MARKER_PATTERN = re.compile(_END_MARKERS, re.IGNORECASE)

# Fallback scan when the document has no usable skills section
COMMON_SKILLS: List[str] = [
    "JavaScript", "TypeScript", "React", "Node.js", "Python", "Java", "SQL",
    "AWS", "Docker", "Git", "HTML", "CSS", "Angular", "Vue", "MongoDB",
    "PostgreSQL", "Redis", "Kubernetes", "GraphQL", "REST",
]

# Work history attribution
COMPANY_PATTERNS: List[re.Pattern] = [
    # "... at Tech Corp", "... @ Tech Corp"
    re.compile(r"(?:\bat|@)\s+([A-Z][\w&.]*(?:[ \t]+(?:&|[A-Z][\w&.]*))*)"),
    # "Tech Corp | Senior Engineer", "Tech Corp - 2020 - Present"
    re.compile(r"^([A-Z][A-Za-z\s&.]*?)\s*[-–—|]"),
]

ROLE_SUFFIXES = r"(?:Engineer|Developer|Manager|Director|Lead|Architect|Designer|Analyst)"

ROLE_PATTERNS: List[re.Pattern] = [
    re.compile(rf"^([A-Z][A-Za-z\s]*{ROLE_SUFFIXES})\b", re.IGNORECASE),
    re.compile(
        r"(?:\bas|\bposition:?)\s+([A-Za-z][A-Za-z ]*?)(?=\s+at\s|\s*[,|@(\-–—\d]|$)",
        re.IGNORECASE,
    ),
]

ROLE_KEYWORDS: List[str] = [
    "engineer", "developer", "manager", "lead", "architect", "designer",
    "analyst", "consultant",
]

# Education attribution
DEGREE_PATTERN = re.compile(
    r"\b(?:Bachelor|Master|PhD|Ph\.D|B\.S|M\.S|B\.A|M\.A|MBA|BSc|MSc)\b",
    re.IGNORECASE,
)
DEGREE_TEXT_PATTERN = re.compile(
    r"\b(?:Bachelor(?:'s)?|Master(?:'s)?|PhD|Ph\.D|B\.S\.?|M\.S\.?|B\.A\.?|M\.A\.?|MBA|BSc|MSc)[^,]*",
    re.IGNORECASE,
)
INSTITUTION_PATTERN = re.compile(
    r"([A-Z][A-Za-z\s]*(?:University|College|Institute|School))\b",
    re.IGNORECASE,
)
INSTITUTION_KEYWORDS = re.compile(r"university|college|institute", re.IGNORECASE)
FIELD_PATTERNS: List[re.Pattern] = [
    re.compile(r"\bin\s+([A-Za-z][A-Za-z\s]*?)(?:\s*[-–—,|]|\s*\d|$)", re.IGNORECASE),
    re.compile(r"\bof\s+([A-Za-z][A-Za-z\s]*?)(?:\s*[-–—,|]|\s*\d|$)", re.IGNORECASE),
]

# Badge catalogs
TECHNICAL_SKILLS: List[str] = [
    # Programming Languages
    "JavaScript", "TypeScript", "Python", "Java", "Go", "Rust", "C#", "C++",
    "PHP", "Ruby", "Swift", "Kotlin", "Scala", "Elixir", "Dart", "R",
    # Frontend Frameworks
    "React", "Angular", "Vue", "Vue.js", "Next.js", "Nuxt", "Svelte", "Remix",
    # Backend Frameworks
    "Node.js", "NestJS", "Express", "Django", "Flask", "FastAPI", "Spring", "Spring Boot",
    "Laravel", "Rails", "Ruby on Rails", ".NET", "ASP.NET",
    # Cloud Platforms
    "AWS", "GCP", "Google Cloud", "Azure", "Heroku", "Vercel", "Netlify",
    # DevOps & Infrastructure
    "Docker", "Kubernetes", "K8s", "Terraform", "Ansible", "Jenkins",
    "GitHub Actions", "GitLab CI", "CI/CD", "CircleCI",
    # Databases
    "PostgreSQL", "MySQL", "MongoDB", "Redis", "Elasticsearch", "DynamoDB",
    "Cassandra", "SQLite", "Oracle", "SQL Server", "Firebase",
    # Protocols & Architecture
    "GraphQL", "REST", "gRPC", "Kafka", "RabbitMQ", "WebSocket",
    "Microservices", "Serverless", "Lambda",
    # Methodologies
    "Agile", "Scrum", "Kanban", "TDD", "BDD",
    # Tools
    "Git", "Jira", "Confluence", "Figma", "Webpack", "Vite",
]

MANAGEMENT_SKILL_PATTERNS: List[Tuple[re.Pattern, str]] = [
    (re.compile(r"\b(lead|leading|led)\s+(a\s+)?team", re.IGNORECASE), "Team Leadership"),
    (re.compile(r"\b(manage|managing|managed)\s+(a\s+)?team", re.IGNORECASE), "Team Management"),
    (re.compile(r"\bteam\s+of\s+\d+", re.IGNORECASE), "Team Leadership"),
    (re.compile(r"\bdirect\s+reports?\b", re.IGNORECASE), "People Management"),
    (re.compile(r"\b(coach|coaching|coached)\s+(team|members?|engineers?|developers?)", re.IGNORECASE), "Coaching"),
    (re.compile(r"\b(mentor|mentoring|mentored)", re.IGNORECASE), "Mentoring"),
    (re.compile(r"\b(train|training|trained)\s+(team|members?|staff)", re.IGNORECASE), "Training"),
    (re.compile(r"\bproject\s+manag(er|ement|ing)", re.IGNORECASE), "Project Management"),
    (re.compile(r"\bprogram\s+manag(er|ement|ing)", re.IGNORECASE), "Program Management"),
    (re.compile(r"\bstakeholder\s+manag(ement|ing)", re.IGNORECASE), "Stakeholder Management"),
    (re.compile(r"\b(spearhead|spearheaded|spearheading)", re.IGNORECASE), "Leadership"),
    (re.compile(r"\b(lead|led)\s+(initiative|project|effort)", re.IGNORECASE), "Leadership"),
    (re.compile(r"\bcross[- ]functional\s+(team|collaboration)", re.IGNORECASE), "Cross-functional Leadership"),
    (re.compile(r"\bpeople\s+manag(er|ement|ing)", re.IGNORECASE), "People Management"),
    (re.compile(r"\bperformance\s+review", re.IGNORECASE), "Performance Management"),
    (re.compile(r"\bhiring|recruited|interviewing\s+candidates", re.IGNORECASE), "Hiring"),
]

BUSINESS_SKILL_PATTERNS: List[Tuple[re.Pattern, str]] = [
    # Revenue & Growth
    (re.compile(r"\b(increas|grew|grow|boost|drove|drive)\w*\s+(revenue|sales|gmv)", re.IGNORECASE), "Revenue Growth"),
    (re.compile(r"\bhighest\s+gmv\b", re.IGNORECASE), "GMV Optimization"),
    (re.compile(r"\b\d+%\s+(growth|increase|improvement)", re.IGNORECASE), "Performance Improvement"),
    (re.compile(r"\b(revenue|sales)\s+(growth|increase)", re.IGNORECASE), "Revenue Growth"),
    (re.compile(r"\bgenerat(ed|ing)\s+(revenue|\$|\d+)", re.IGNORECASE), "Revenue Generation"),
    # Cost & Efficiency
    (re.compile(r"\b(reduc|cut|lower)\w*\s+(cost|expense|spending)", re.IGNORECASE), "Cost Reduction"),
    (re.compile(r"\b(improv|optimiz|enhanc)\w*\s+(efficiency|performance|productivity)", re.IGNORECASE), "Process Optimization"),
    (re.compile(r"\bstreamlin(ed|ing)", re.IGNORECASE), "Process Optimization"),
    (re.compile(r"\bautomat(ed?|ing|ion)\b", re.IGNORECASE), "Automation"),
    # Client & Customer
    (re.compile(r"\bclient\s+(relationship|management|engagement)", re.IGNORECASE), "Client Management"),
    (re.compile(r"\bcustomer\s+(success|satisfaction|experience)", re.IGNORECASE), "Customer Success"),
    (re.compile(r"\baccount\s+manag(er|ement|ing)", re.IGNORECASE), "Account Management"),
    (re.compile(r"\bbusiness\s+development", re.IGNORECASE), "Business Development"),
    # Strategy & Planning
    (re.compile(r"\bstrategic\s+(plan|initiative|direction)", re.IGNORECASE), "Strategic Planning"),
    (re.compile(r"\broadmap\s+(develop|creat|defin)", re.IGNORECASE), "Roadmap Planning"),
    (re.compile(r"\bbudget\s+(manag|plan|allocat)", re.IGNORECASE), "Budget Management"),
    # Delivery & Results
    (re.compile(r"\bdeliver(ed|ing)\s+(on[- ]time|ahead|under\s+budget)", re.IGNORECASE), "Delivery Excellence"),
    (re.compile(r"\blaunch(ed|ing)\s+(product|feature|service)", re.IGNORECASE), "Product Launch"),
    (re.compile(r"\bscal(ed|ing)\s+(system|team|operation)", re.IGNORECASE), "Scaling"),
]
