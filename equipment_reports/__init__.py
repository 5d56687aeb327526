"""
Design (equipment_reports)
- Purpose: Record hardware/software fault reports for electronic equipment, query them,
           persist them as JSON and export them as text files.
- Layout: models -> validator -> repository (+ storage, export) -> ui; main.py wires it up.
"""

__version__ = "1.0.0"
