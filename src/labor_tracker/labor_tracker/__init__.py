"""Site Labor Tracker package.

This package is organized by feature modules (auth, categories, entries,
reports, costing) with a thin Flask controller layer on top of service and
repository layers. Persistence and login are delegated to Supabase.
"""
