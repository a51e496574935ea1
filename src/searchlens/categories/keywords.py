"""Topic keyword sets used by the category classifier.

Order matters: when two categories match the same number of triggers, the one registered
first wins.
"""

from __future__ import annotations

from dataclasses import dataclass

from searchlens.utils.ids import category_id

KEY_INSIGHTS = "Key Insights"
ALL_RESULTS = "All Results"


@dataclass(frozen=True)
class KeywordSet:
    """A category label and the phrases that vote for it."""

    name: str
    triggers: tuple[str, ...]
    description: str = ""

    @property
    def id(self) -> str:  # noqa: A003
        return category_id(self.name)


DEFAULT_KEYWORD_SETS: tuple[KeywordSet, ...] = (
    KeywordSet(
        name="Business",
        description="Business performance, strategy and commercial activity",
        triggers=(
            "business",
            "business model",
            "enterprise",
            "revenue",
            "sales",
            "profit",
            "growth",
            "customer",
            "customers",
            "client",
            "strategy",
            "strategic",
            "startup",
            "venture",
            "product",
            "partnership",
            "acquisition",
            "merger",
            "expansion",
            "competitive advantage",
            "operations",
            "b2b",
            "saas",
        ),
    ),
    KeywordSet(
        name="Market Analysis",
        description="Market trends, analysis, and forecasts",
        triggers=(
            "market",
            "markets",
            "marketplace",
            "market share",
            "market size",
            "market trend",
            "market research",
            "total addressable market",
            "demand",
            "supply",
            "competition",
            "competitor",
            "competitors",
            "consumer",
            "consumers",
            "pricing",
            "segment",
            "forecast",
            "outlook",
        ),
    ),
    KeywordSet(
        name="Financial Data",
        description="Financial metrics, reports, and performance data",
        triggers=(
            "financial",
            "finance",
            "revenue",
            "earnings",
            "margin",
            "margins",
            "profit margin",
            "ebitda",
            "eps",
            "p/e",
            "roi",
            "balance sheet",
            "cash flow",
            "income statement",
            "quarterly",
            "fiscal",
            "annual report",
            "dividend",
            "valuation",
            "market cap",
            "stock price",
            "shareholder",
            "shareholders",
            "debt",
            "liquidity",
            "funding round",
        ),
    ),
    KeywordSet(
        name="Company Information",
        description="Company profiles, leadership, and operations",
        triggers=(
            "company",
            "companies",
            "corporation",
            "firm",
            "organization",
            "ceo",
            "cfo",
            "founder",
            "founded",
            "headquarters",
            "employees",
            "workforce",
            "leadership",
            "board of directors",
            "executive",
            "subsidiary",
            "parent company",
        ),
    ),
    KeywordSet(
        name="Industry Trends",
        description="Industry-specific trends and developments",
        triggers=(
            "industry",
            "industries",
            "sector",
            "vertical",
            "trend",
            "trends",
            "innovation",
            "disruption",
            "emerging",
            "adoption",
            "transformation",
            "technology",
            "automation",
            "ai",
        ),
    ),
    KeywordSet(
        name="Investment Strategies",
        description="Investment approaches, strategies, and recommendations",
        triggers=(
            "investment",
            "investments",
            "investor",
            "investors",
            "portfolio",
            "allocation",
            "diversification",
            "venture capital",
            "private equity",
            "hedge fund",
            "etf",
            "bond",
            "bonds",
            "asset class",
            "risk",
            "returns",
        ),
    ),
    KeywordSet(
        name="Economic Indicators",
        description="Macroeconomic data and indicators",
        triggers=(
            "economy",
            "economic",
            "gdp",
            "inflation",
            "unemployment",
            "employment",
            "interest rate",
            "interest rates",
            "federal reserve",
            "central bank",
            "monetary policy",
            "fiscal policy",
            "recession",
            "consumer price index",
            "cpi",
        ),
    ),
    KeywordSet(
        name="Regulatory Information",
        description="Regulatory updates, compliance, and legal information",
        triggers=(
            "regulation",
            "regulations",
            "regulatory",
            "compliance",
            "legal",
            "law",
            "legislation",
            "sec",
            "fda",
            "ftc",
            "antitrust",
            "lawsuit",
            "enforcement",
            "penalty",
            "license",
        ),
    ),
    KeywordSet(
        name="Expert Opinions",
        description="Analysis and opinions from industry experts and analysts",
        triggers=(
            "expert",
            "experts",
            "analyst",
            "analysts",
            "opinion",
            "according to",
            "commentary",
            "perspective",
            "predicts",
            "recommendation",
            "rating",
            "upgrade",
            "downgrade",
            "consensus",
        ),
    ),
)
