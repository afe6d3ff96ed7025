"""
puppy_bowl package: Puppy Bowl API client, card markup, Streamlit views, and roster export.
"""
__all__ = [
    "models",
    "config",
    "api",
    "markup",
    "views",
    "io",
]
