"""
News Module
===========

Glacier news feed:
- Provider search client (NewsAPI / GNews)
- Relevance filtering and field mapping
- Recurring refresh task
- Read-only API service
"""
