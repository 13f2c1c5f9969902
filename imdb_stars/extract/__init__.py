"""
HTML extraction for IMDb pages.

- query.py: thin selector helpers over BeautifulSoup
- extract_search_page.py: profile links + next link from a search listing page
- extract_name_page.py: one Star record from a name (profile) page
"""
