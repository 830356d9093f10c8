"""
Built-in sample articles served when every live provider fails.

Timestamps are generated at request time so the fallback feed still reads
as current.
"""
from __future__ import annotations

from datetime import timedelta
from typing import Dict, List, Optional, Tuple

from pulse.config import DEFAULT_CATEGORY
from pulse.core.images import resolve_image
from pulse.models import NewsItem, normalize_category
from pulse.utils import now_utc

# (id, title, description, url, source); items are 0, 30, 60 and 90 minutes old
SampleRow = Tuple[str, str, str, str, str]
AGE_STEP_MINUTES = 30

SAMPLE_ARTICLES: Dict[str, List[SampleRow]] = {
    "general": [
        ("general-1", "Global Leaders Gather for Climate Summit in New York",
         "World leaders from over 150 countries are meeting in New York City for the annual climate summit, "
         "discussing new initiatives to combat climate change and reduce carbon emissions globally.",
         "https://news.com/climate-summit-2025", "World News"),
        ("general-2", "New Infrastructure Bill Promises Major Investment in Public Transportation",
         "The recently passed infrastructure legislation includes $200 billion for modernizing public "
         "transportation systems across major cities, aiming to reduce traffic congestion and emissions.",
         "https://news.com/infrastructure-bill", "National News"),
        ("general-3", "Historic Peace Agreement Signed Between Neighboring Nations",
         "After decades of tension, two neighboring countries have signed a comprehensive peace agreement, "
         "marking a new era of cooperation and economic partnership in the region.",
         "https://news.com/peace-agreement", "International Times"),
        ("general-4", "Record Voter Turnout Expected in Upcoming Elections",
         "Political analysts predict unprecedented voter participation in the upcoming elections, driven by "
         "increased civic engagement and expanded early voting access.",
         "https://news.com/elections-2025", "Political Weekly"),
    ],
    "breaking": [
        ("breaking-1", "BREAKING: Major Scientific Discovery Announced at CERN",
         "Scientists at CERN have announced a groundbreaking discovery that could revolutionize our "
         "understanding of particle physics and the fundamental forces of nature.",
         "https://news.com/cern-discovery", "Science Daily"),
        ("breaking-2", "Stock Markets Hit All-Time High Amid Economic Recovery",
         "Global stock markets reached record levels today as investors showed confidence in the ongoing "
         "economic recovery, with major indices posting significant gains.",
         "https://news.com/markets-high", "Financial News"),
        ("breaking-3", "Emergency Response Teams Deploy After Natural Disaster",
         "International emergency response teams are being mobilized to provide aid following a major natural "
         "disaster, with rescue operations underway to assist affected communities.",
         "https://news.com/emergency-response", "Emergency News Network"),
        ("breaking-4", "Major Tech Company Announces Surprise Merger",
         "In an unexpected move, two leading technology companies have announced plans to merge, creating one "
         "of the largest tech conglomerates in history.",
         "https://news.com/tech-merger", "Tech Business"),
    ],
    "technology": [
        ("tech-1", "Revolutionary Quantum Computer Achieves Computing Milestone",
         "A new quantum computing system has successfully performed calculations that would take traditional "
         "supercomputers thousands of years, marking a major breakthrough in computational power.",
         "https://techcrunch.com/quantum-milestone", "TechCrunch"),
        ("tech-2", "AI Language Models Show Unprecedented Understanding Capabilities",
         "Latest artificial intelligence models demonstrate remarkable advances in natural language "
         "understanding and generation, raising new possibilities and ethical considerations.",
         "https://techcrunch.com/ai-advances", "AI Weekly"),
        ("tech-3", "5G Network Expansion Reaches Rural Communities",
         "Telecommunications companies announce major infrastructure investments to bring high-speed 5G "
         "connectivity to underserved rural areas, bridging the digital divide.",
         "https://techcrunch.com/5g-expansion", "Network News"),
        ("tech-4", "Breakthrough in Battery Technology Promises Longer Device Life",
         "Researchers unveil new battery technology that could triple device battery life while reducing "
         "charging times, potentially revolutionizing portable electronics.",
         "https://techcrunch.com/battery-tech", "Innovation Today"),
    ],
    "business": [
        ("business-1", "Electric Vehicle Sales Surge to Record Highs in Q4",
         "The automotive industry reports unprecedented demand for electric vehicles, with major manufacturers "
         "struggling to keep up with orders. Industry analysts predict EVs will dominate the market within "
         "five years.",
         "https://reuters.com/ev-sales-surge", "Reuters Business"),
        ("business-2", "Global Supply Chain Shows Signs of Recovery",
         "International shipping and logistics companies report significant improvements in supply chain "
         "efficiency, with reduced delays and increased capacity across major trade routes.",
         "https://bloomberg.com/supply-chain", "Bloomberg"),
        ("business-3", "Cryptocurrency Market Experiences Major Regulatory Changes",
         "New financial regulations are reshaping the cryptocurrency landscape as governments worldwide "
         "implement comprehensive frameworks for digital assets.",
         "https://wsj.com/crypto-regulations", "Wall Street Journal"),
        ("business-4", "Startups Attract Record Venture Capital Investment",
         "Venture capital funding reaches new heights as investors pour billions into innovative startups "
         "across technology, healthcare, and sustainability sectors.",
         "https://forbes.com/vc-funding", "Forbes"),
    ],
    "science": [
        ("science-1", "NASA Confirms Water Ice Discovery on Mars Surface",
         "Scientists at NASA have confirmed the presence of substantial water ice deposits just below the "
         "Martian surface, raising new possibilities for future human missions and potential colonization "
         "efforts.",
         "https://nasa.gov/mars-water", "NASA News"),
        ("science-2", "New Cancer Treatment Shows Promising Results in Clinical Trials",
         "Revolutionary immunotherapy approach demonstrates remarkable success rates in treating previously "
         "difficult cancers, offering new hope to patients worldwide.",
         "https://nature.com/cancer-treatment", "Nature Medicine"),
        ("science-3", "Ancient Fossil Discovery Rewrites Human Evolution Timeline",
         "Paleontologists uncover remarkably preserved fossils that challenge current understanding of human "
         "evolution, pushing back the timeline of key developmental stages.",
         "https://science.org/fossil-discovery", "Science Magazine"),
        ("science-4", "Renewable Energy Efficiency Reaches New Peak",
         "Solar panel technology achieves unprecedented conversion efficiency of 47%, setting new records and "
         "making renewable energy more cost-effective than ever.",
         "https://nature.com/solar-efficiency", "Nature Energy"),
    ],
    "health": [
        ("health-1", "New Alzheimer's Drug Shows Significant Memory Improvement",
         "Clinical trials for a breakthrough Alzheimer's medication demonstrate substantial cognitive "
         "improvements in patients, offering hope for millions affected by the disease.",
         "https://healthline.com/alzheimers-drug", "Health Journal"),
        ("health-2", "Study Reveals Benefits of Mediterranean Diet on Longevity",
         "Comprehensive long-term research confirms that Mediterranean diet adherence significantly reduces "
         "risk of cardiovascular disease and extends healthy lifespan.",
         "https://healthline.com/mediterranean-diet", "Nutrition Today"),
        ("health-3", "Mental Health Apps Show Effectiveness in Treating Anxiety",
         "Digital mental health interventions prove as effective as traditional therapy for mild to moderate "
         "anxiety disorders, increasing treatment accessibility.",
         "https://healthline.com/mental-health-apps", "Psychology Today"),
        ("health-4", "Breakthrough in Diabetes Prevention Through Lifestyle Changes",
         "New research identifies specific lifestyle modifications that can reduce type 2 diabetes risk by up "
         "to 70%, emphasizing the power of preventive medicine.",
         "https://healthline.com/diabetes-prevention", "Medical News"),
    ],
    "sports": [
        ("sports-1", "Olympic Champion Sets New World Record in Swimming",
         "At the World Championships, the defending Olympic champion shattered the 100m freestyle world "
         "record, swimming faster than ever recorded in history.",
         "https://espn.com/swimming-record", "ESPN"),
        ("sports-2", "Underdog Team Pulls Off Stunning Championship Upset",
         "In one of the biggest surprises of the season, the eighth-seeded underdogs defeated the top-ranked "
         "champions to claim their first-ever championship title.",
         "https://espn.com/championship-upset", "Sports Illustrated"),
        ("sports-3", "Tennis Star Announces Retirement After Legendary Career",
         "After 20 years of dominance and 25 Grand Slam titles, the tennis legend announces retirement, ending "
         "one of the most decorated careers in sports history.",
         "https://espn.com/tennis-retirement", "Tennis Today"),
        ("sports-4", "Marathon Runner Breaks Two-Hour Barrier in Historic Race",
         "In an unprecedented athletic achievement, a marathon runner completes the 26.2-mile distance in under "
         "two hours, pushing the limits of human endurance.",
         "https://espn.com/marathon-record", "Runner's World"),
    ],
    "entertainment": [
        ("entertainment-1", "Blockbuster Film Breaks Opening Weekend Box Office Records",
         "The highly anticipated superhero sequel has shattered box office records, earning over $500 million "
         "globally in its opening weekend.",
         "https://variety.com/box-office-record", "Hollywood Reporter"),
        ("entertainment-2", "Grammy Awards: Complete List of Winners and Performances",
         "Music's biggest night celebrates excellence with stunning performances and surprise wins across all "
         "major categories at the annual Grammy Awards ceremony.",
         "https://billboard.com/grammys-2025", "Billboard"),
        ("entertainment-3", "Streaming Platform Announces Major Original Series Lineup",
         "Leading streaming service reveals ambitious slate of original productions featuring A-list talent "
         "and groundbreaking storytelling for the upcoming season.",
         "https://variety.com/streaming-lineup", "Entertainment Weekly"),
    ],
}


def sample_items(
    category: Optional[str],
    catalog: Optional[Dict[str, List[SampleRow]]] = None,
) -> List[NewsItem]:
    """
    Build fresh NewsItems from the sample set of ``category``.

    Unknown categories use the general samples. Every item carries the
    requested category so the fallback matches the feed the client asked for.
    """
    catalog = SAMPLE_ARTICLES if catalog is None else catalog
    category = normalize_category(category)
    rows = catalog.get(category) or catalog.get(DEFAULT_CATEGORY) or []

    now = now_utc()
    return [
        NewsItem(
            id=item_id,
            title=title,
            description=description,
            url=url,
            image_url=resolve_image(None, title, category),
            published_at=now - timedelta(minutes=AGE_STEP_MINUTES * position),
            source=source,
            category=category,
        )
        for position, (item_id, title, description, url, source) in enumerate(rows)
    ]
