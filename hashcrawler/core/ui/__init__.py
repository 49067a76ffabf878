"""User interface components for HashCrawler"""
