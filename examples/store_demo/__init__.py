"""
Store Demo — the sample checkout scenarios.

Structure:
- catalog.py — The sample products
- cli.py     — Scenario runner + argument parsing
- main.py    — Entry point

Run: python -m examples.store_demo.main
"""
