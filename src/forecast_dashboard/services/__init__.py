"""
Shared service utilities.

- http.py - requests session (timeout, User-Agent, no retries) and fetch_json
"""
