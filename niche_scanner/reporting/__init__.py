"""
Reporting layer: terminal formatters and JSON export for analyses.

Modules
-------
formatters : Letter grades, CPM/ceiling/time labels, and the overview,
             recommendation, and scoreboard blocks.
export     : analysis_to_dict() + export_to_json().
"""
