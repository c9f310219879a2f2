"""Static vocabulary used by keyword extraction.

Pure data: category term alternations (matched against a whole canonical
key), multi-word phrase patterns (searched in job text) and stop words.
Category order is significant, the first category that matches wins.
"""

from __future__ import annotations

CATEGORY_ORDER = ("technical", "skills", "certifications", "action_verbs", "industry")

CATEGORY_TERMS: dict[str, tuple[str, ...]] = {
    "technical": (
        r"python|javascript|typescript|java|c\+\+|c#|ruby|golang|rust|scala|kotlin|swift|php|perl|matlab",
        r"react|angular|vue|svelte|next\.js|node\.js|express\.js|django|flask|fastapi|spring boot|\.net|rails|laravel",
        r"aws|azure|gcp|google cloud|kubernetes|docker|terraform|ansible|jenkins|ci/cd|devops|helm|openshift",
        r"sql|nosql|postgresql|mysql|sqlite|mongodb|redis|elasticsearch|dynamodb|cassandra|snowflake|bigquery",
        r"kafka|rabbitmq|spark|hadoop|airflow|dbt|etl|data pipelines?|data engineering|data warehouse",
        r"machine learning|deep learning|nlp|natural language processing|computer vision|tensorflow|pytorch|scikit learn|pandas|numpy|llms?",
        r"apis?|rest apis?|restful|graphql|grpc|microservices|serverless|cloud|cloud native|cloud computing|cloud infrastructure|saas|paas|iaas",
        r"git|github|gitlab|bitbucket|jira|confluence|linux|unix|bash|powershell",
        r"html|css|sass|tailwind|bootstrap|webpack|babel|vite|npm|yarn",
        r"tableau|power bi|looker|excel|google sheets|data visualization",
        r"figma|sketch|photoshop|illustrator|adobe",
        r"full stack|front end|back end|frontend|backend|software development|software engineering|web development|mobile development",
        r"continuous integration|continuous delivery|continuous deployment|test automation|automated testing",
    ),
    "skills": (
        r"agile|scrum|kanban|waterfall|lean|agile methodology",
        r"data analysis|data science|analytics|reporting|metrics|kpis?|business intelligence|business analysis",
        r"project management|product management|program management|account management|stakeholder management",
        r"communication|communication skills|presentation|collaboration|cross functional|teamwork",
        r"leadership|team leadership|mentoring|coaching|team lead",
        r"problem solving|critical thinking|analytical|strategic planning|strategic",
        r"attention to detail|detail oriented|time management|prioritization|multitasking",
        r"user experience|user interface|ux|ui|user research|design thinking|design systems|a/b testing",
        r"quality assurance|business development|client relations|customer success|customer support|customer service",
        r"data driven|results oriented|customer focused|self starter|fast paced",
    ),
    "certifications": (
        r"pmp|prince2|cpa|cfa|cissp|cism|ccna|ccnp|comptia|itil|six sigma|scrum master|csm|psm",
        r"aws certified|azure certified|gcp certified|google certified|oracle certified",
        r"google analytics|hubspot|salesforce|sap",
        r"certified [a-z0-9+#./ ]+|certification|certifications|licensed|accredited",
    ),
    "action_verbs": (
        r"developed|designed|implemented|created|built|established|launched|executed",
        r"managed|led|directed|supervised|coordinated|oversaw|administered|owned",
        r"improved|increased|reduced|optimized|enhanced|streamlined|accelerated|automated|scaled",
        r"analyzed|evaluated|assessed|reviewed|researched|investigated",
        r"collaborated|partnered|negotiated|presented|communicated|influenced",
        r"mentored|trained|architected|engineered|delivered|spearheaded",
    ),
    "industry": (
        r"fintech|healthtech|edtech|ecommerce|b2b|b2c|enterprise|marketplace",
        r"startup|scale up|fortune 500|global|international|remote",
        r"compliance|regulatory|gdpr|hipaa|sox|pci|security|cybersecurity",
        r"healthcare|banking|insurance|retail|logistics|telecommunications|government",
    ),
}

# Multi-word domain phrases, searched case-insensitively over the job text.
PHRASE_PATTERNS: tuple[str, ...] = (
    r"\b(?:machine learning|deep learning|data science|data analysis|data engineering|data visualization)\b",
    r"\b(?:project management|product management|program management|account management|stakeholder management)\b",
    r"\b(?:cross[- ]functional|full[- ]stack|front[- ]end|back[- ]end)\b",
    r"\b(?:attention to detail|problem[- ]solving|critical thinking|time management|strategic planning)\b",
    r"\b(?:continuous integration|continuous delivery|continuous deployment|ci cd)\b",
    r"\b(?:user experience|user interface|user research|design thinking|design systems)\b",
    r"\b(?:business intelligence|business development|business analysis)\b",
    r"\b(?:quality assurance|test automation|automated testing)\b",
    r"\b(?:customer success|customer support|customer service|client relations)\b",
    r"\b(?:software development|software engineering|web development|mobile development)\b",
    r"\b(?:cloud computing|cloud infrastructure|cloud native|google cloud|rest apis?)\b",
    r"\b(?:natural language processing|computer vision|data pipelines?|data warehouse)\b",
    r"\b(?:agile methodology|scrum master|six sigma|power bi|spring boot)\b",
    r"\b(?:communication skills|team leadership|detail[- ]oriented|data[- ]driven|results[- ]oriented)\b",
    r"\b(?:aws certified|azure certified|gcp certified|google certified|oracle certified)\b",
)

STOP_WORDS: frozenset[str] = frozenset(
    """
    a an the and or but is are was were be been being have has had do does did will would could
    should may might must shall can to of in for on with at by from as into through during before
    after above below between under over this that these those it its they them their we our you
    your he she his her what which who whom whose when where why how all each every both few more
    most other some such no nor not only own same so than too very just also now here there then
    if because about against any up down out off further once again etc via per across within
    job role position candidate candidates applicant company work working experience looking
    seeking responsibilities requirements qualifications preferred required ability able strong
    including include includes plus years year new well using use join team teams opportunity
    less rest express spring
    e.g i.e
    """.split()
)
