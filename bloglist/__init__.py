"""Bloglist Backend: blogs, users and JWT bearer authentication on FastAPI."""
