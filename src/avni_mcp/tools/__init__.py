"""Avni administration tools.

Each module in this package contains "tools" — async functions that a tool
host can call to set up an organisation on the Avni platform. Every tool
returns a short human-readable string, including on failure.

Tools are organized by domain:
- organisation.py:  Create an organisation
- users.py:         User groups, admin users and field users
- locations.py:     Location types, locations and catchments
- app_designer.py:  Subject types, programs and encounter types
- registry.py:      Names, descriptions and parameter metadata for all tools
"""
