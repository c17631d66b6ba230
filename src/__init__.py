"""
Resume Keyword Checker - Source Package.

This package contains modules for:
- Keyword extraction from resume and job description text
- Keyword matching and scoring
- Text extraction from uploaded PDF and text documents
- Storage of past check results
"""

__version__ = "1.0.0"
