"""Core components for HashCrawler"""
