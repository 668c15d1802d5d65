"""
Command-line tools: model evaluation and single-posting analysis.
"""
