"""Static word tables and indicator patterns used by the extraction heuristics.

Everything here is immutable module-level data: membership sets for keyword
filtering and technical-term detection, plus the compiled term patterns the
mode generators classify sentences with.
"""

from __future__ import annotations

import re

STOPWORDS: frozenset[str] = frozenset({
    "about", "above", "after", "again", "against", "also", "although", "always",
    "among", "another", "anyone", "anything", "around", "because", "been",
    "before", "being", "below", "between", "both", "cannot", "could", "does",
    "doing", "down", "during", "each", "either", "else", "enough", "even",
    "ever", "every", "from", "further", "have", "having", "here",
    "hers", "herself", "himself", "however", "into", "itself", "just", "know",
    "less", "like", "made", "make", "many", "might", "more", "most", "much",
    "must", "myself", "need", "neither", "never", "next", "none", "often",
    "once", "only", "other", "others", "ought", "ours", "ourselves", "over",
    "perhaps", "quite", "rather", "really", "same", "seem", "seems",
    "shall", "should", "since", "some", "something", "still", "such", "than",
    "that", "their", "theirs", "them", "themselves", "then", "there",
    "therefore", "these", "they", "thing", "things", "this", "those",
    "though", "through", "thus", "together", "under", "until", "upon",
    "very", "want", "well", "were", "what", "whatever", "when",
    "where", "whether", "which", "while", "whom", "whose", "will", "with",
    "within", "without", "would", "your", "yours", "yourself", "yourselves",
    "able", "across", "already", "almost", "anyway", "away", "back", "came",
    "come", "done", "going", "gone", "lets", "look",
    "lots", "maybe", "mine", "okay", "onto", "said", "says", "take",
    "taken", "tell", "took", "used", "uses", "using", "went", "yeah",
})

TECHNICAL_TERMS: frozenset[str] = frozenset({
    "algorithm", "algorithms", "apis", "architecture", "async",
    "authentication", "authorization", "backend", "bandwidth", "binary",
    "buffer", "cache", "caching", "class", "classes", "client", "cloud",
    "cluster", "code", "compiler", "component", "components", "config",
    "configuration", "container", "containers", "database", "databases",
    "debug", "debugging", "dependency", "dependencies", "deploy",
    "deployment", "docker", "encryption", "endpoint", "endpoints",
    "framework", "frontend", "function", "functions", "gateway",
    "http", "https", "index", "infrastructure", "integration", "interface",
    "json", "kafka", "kubernetes", "latency", "library", "linux", "memory",
    "method", "methods", "microservice", "microservices", "middleware",
    "migration", "model", "module", "modules", "network", "node", "oauth",
    "object", "optimization", "parser", "performance", "pipeline",
    "platform", "plugin", "postgresql", "process", "protocol", "python",
    "query", "queue", "redis", "refactor", "refactoring", "regex",
    "repository", "request", "response", "runtime", "scalability", "schema",
    "script", "server", "servers", "service", "services", "socket",
    "software", "stack", "storage", "syntax", "system", "systems", "test",
    "testing", "thread", "threads", "throughput", "token", "typescript",
    "variable", "version", "virtual", "webhook", "workflow",
})

IMPLEMENTATION_PATTERN = re.compile(
    r"\b(?:implement\w*|function\w*|method\w*|class(?:es)?|algorithm\w*|"
    r"architecture|system\w*|component\w*|module\w*|interface\w*|"
    r"deploy\w*|config\w*|integrat\w*|database\w*|api)\b",
    re.IGNORECASE,
)

RECOMMENDATION_PATTERN = re.compile(
    r"\b(?:recommend\w*|should|suggest\w*|propos\w*|advis\w*|must|"
    r"consider\w*|ought to|encourage\w*)\b",
    re.IGNORECASE,
)

POSITIVE_PATTERN = re.compile(
    r"\b(?:benefit\w*|advantage\w*|pros|strength\w*|improv\w*|better|best|"
    r"efficien\w*|effective\w*|success\w*|gain\w*|positive\w*|"
    r"opportunit\w*|excellent|great|faster|easier|reliab\w*|valuable)\b",
    re.IGNORECASE,
)

NEGATIVE_PATTERN = re.compile(
    r"\b(?:drawback\w*|disadvantage\w*|cons|weakness\w*|risk\w*|issue\w*|"
    r"problem\w*|limitation\w*|however|concern\w*|challeng\w*|costly|"
    r"worse|worst|fail\w*|negative\w*|difficult\w*|slower|downside\w*|"
    r"expensive)\b",
    re.IGNORECASE,
)

COMPARISON_PATTERN = re.compile(
    r"\b(?:compar\w*|versus|vs\.?|than|whereas|unlike|similar\w*|"
    r"differ\w*|contrast\w*|on the other hand|alternatively)\b",
    re.IGNORECASE,
)


def is_stopword(word: str) -> bool:
    """Return True when *word* (lowercase) is excluded from keyword counts."""
    return word in STOPWORDS


def is_technical_term(word: str) -> bool:
    """Return True when *word* (lowercase) names a technical concept."""
    return word in TECHNICAL_TERMS
