"""HashCrawler - structural hash type identification"""

__version__ = "1.0.0"
