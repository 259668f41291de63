from typing import Any, Dict, Iterable, List

RELEVANCE_KEYWORDS = ("glacier", "ice", "ice sheet")


def is_relevant(article: Dict[str, Any], keywords: Iterable[str] = RELEVANCE_KEYWORDS) -> bool:
    """True when the title or the description mentions one of the keywords, ignoring case."""
    title = (article.get("title") or "").lower()
    description = (article.get("description") or "").lower()
    return any(keyword in title or keyword in description for keyword in keywords)


def filter_relevant(articles: List[Dict[str, Any]], keywords: Iterable[str] = RELEVANCE_KEYWORDS) -> List[Dict[str, Any]]:
    keywords = tuple(keyword.lower() for keyword in keywords)
    return [article for article in articles if isinstance(article, dict) and is_relevant(article, keywords)]
