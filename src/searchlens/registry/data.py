"""Bundled source directories.

A snapshot of the VC firm, verified research source and company contact tables the search
front-end uses to label provenance. Treat as read-only; refreshing them is not this package's job.
"""

from __future__ import annotations

VC_FIRMS: tuple[dict, ...] = (
    {
        "name": "Andreessen Horowitz",
        "aliases": ("a16z",),
        "focus": ("Software", "Fintech", "Crypto", "Healthcare", "Consumer"),
        "url": "https://a16z.com/research/",
        "handles": {"x": "@a16z", "linkedin": "company/andreessen-horowitz"},
    },
    {
        "name": "Sequoia Capital",
        "aliases": ("sequoia",),
        "focus": ("Technology", "Healthcare", "Consumer", "Financial Services"),
        "url": "https://www.sequoiacap.com/our-perspective/",
        "handles": {"x": "@sequoia", "linkedin": "company/sequoia-capital"},
    },
    {
        "name": "Accel",
        "focus": ("Software", "Infrastructure", "Security", "Consumer"),
        "url": "https://www.accel.com/insights",
        "handles": {"x": "@Accel", "linkedin": "company/accel-partners"},
    },
    {
        "name": "Benchmark",
        "focus": ("Consumer", "Enterprise", "Infrastructure"),
        "url": "https://www.benchmark.com/companies",
        "handles": {"x": "@benchmark", "linkedin": "company/benchmark"},
    },
    {
        "name": "Greylock",
        "focus": ("Enterprise", "Consumer", "Crypto", "AI"),
        "url": "https://greylock.com/greymatter/",
        "handles": {"x": "@GreylockVC", "linkedin": "company/greylock-partners"},
    },
    {
        "name": "Lightspeed Venture Partners",
        "aliases": ("lightspeed",),
        "focus": ("Enterprise", "Consumer", "Fintech"),
        "url": "https://lsvp.com/insights/",
        "handles": {"x": "@lightspeedvp", "linkedin": "company/lightspeed-venture-partners"},
    },
    {
        "name": "Tiger Global",
        "focus": ("Internet", "Software", "Fintech"),
        "url": "https://www.tigerglobal.com/",
        "handles": {"linkedin": "company/tiger-global-management"},
    },
    {
        "name": "Coatue Management",
        "aliases": ("coatue",),
        "focus": ("Technology", "Consumer", "Healthcare"),
        "url": "https://www.coatue.com/",
        "handles": {"linkedin": "company/coatue-management"},
    },
)

VERIFIED_SOURCES: dict[str, tuple[dict, ...]] = {
    "Strategy Consulting": (
        {"name": "McKinsey & Company", "aliases": ("mckinsey",), "url": "https://www.mckinsey.com/featured-insights"},
        {"name": "BCG", "aliases": ("boston consulting group",), "url": "https://www.bcg.com/publications"},
        {"name": "Bain & Company", "aliases": ("bain",), "url": "https://www.bain.com/insights/"},
    ),
    "Investment Banks": (
        {"name": "Goldman Sachs", "url": "https://www.goldmansachs.com/insights/"},
        {"name": "Morgan Stanley", "url": "https://www.morganstanley.com/ideas"},
    ),
    "Market Research & Data": (
        {"name": "CB Insights", "url": "https://www.cbinsights.com/research/"},
        {"name": "PitchBook", "url": "https://pitchbook.com/news/reports"},
        {"name": "Dealroom", "url": "https://dealroom.co/reports"},
    ),
    "Professional Services": (
        {"name": "Deloitte", "url": "https://www2.deloitte.com/insights"},
        {"name": "PwC", "url": "https://www.pwc.com/gx/en/research-insights.html"},
    ),
    "Tech Research": (
        {"name": "Gartner", "url": "https://www.gartner.com/en/research"},
        {"name": "Forrester", "url": "https://www.forrester.com/research/"},
    ),
    "Startup Research": (
        {"name": "NFX", "url": "https://www.nfx.com/essays"},
    ),
}

COMPANY_CONTACTS: dict[str, tuple[dict, ...]] = {
    "Apple": (
        {"name": "Tim Cook", "title": "CEO", "handles": {"x": "@tim_cook", "linkedin": "/in/timcook"}},
    ),
    "Microsoft": (
        {"name": "Satya Nadella", "title": "CEO", "handles": {"x": "@satyanadella", "linkedin": "/in/satyanadella"}},
        {"name": "Amy Hood", "title": "CFO", "handles": {"linkedin": "/in/amy-hood-9b5153"}},
    ),
    "Google": (
        {"name": "Sundar Pichai", "title": "CEO", "handles": {"x": "@sundarpichai", "linkedin": "/in/sundarpichai"}},
        {"name": "Ruth Porat", "title": "CFO", "handles": {"linkedin": "/in/ruth-porat-8b5a09"}},
    ),
    "Stripe": (
        {"name": "Patrick Collison", "title": "CEO & Co-founder", "handles": {"x": "@patrickc", "linkedin": "/in/patrickcollison"}},
        {"name": "John Collison", "title": "President & Co-founder", "handles": {"x": "@collision", "linkedin": "/in/johncollison"}},
    ),
}
