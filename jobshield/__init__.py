"""
JobShield: legitimacy scoring for job postings.

Scores posting text 0–100 with two interchangeable heuristic scorers
(sentiment-flavored and sequence-flavored), each behind an analysis
service that always answers, and evaluates the scorers offline against
a labeled corpus (accuracy, precision, recall, F1, AUC).
"""

__version__ = "0.1.0"
